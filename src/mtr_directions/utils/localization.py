"""Language selection helpers for bilingual station and line names."""

from typing import Literal, Protocol

Language = Literal["en", "zh"]

DEFAULT_LANGUAGE: Language = "zh"

SUPPORTED_LANGUAGES: tuple[Language, ...] = ("en", "zh")

MtrDirection = Literal["up", "down"]


class Localizable(Protocol):
    name_en: str
    name_zh: str


def get_localized_name(obj: Localizable, language: Language) -> str:
    """Get the name of a station or line in the requested language.

    Chinese falls back to the English name when no Chinese name is set.
    """
    if language == "zh" and obj.name_zh:
        return obj.name_zh
    return obj.name_en


def validate_mtr_direction(direction: str | None) -> MtrDirection | None:
    """Return the direction if it is exactly "up" or "down", else None."""
    if direction == "up" or direction == "down":
        return direction
    return None

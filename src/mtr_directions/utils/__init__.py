"""Utility modules for mtr-directions."""

from .localization import (
    DEFAULT_LANGUAGE,
    SUPPORTED_LANGUAGES,
    Language,
    get_localized_name,
    validate_mtr_direction,
)

__all__ = [
    "DEFAULT_LANGUAGE",
    "SUPPORTED_LANGUAGES",
    "Language",
    "get_localized_name",
    "validate_mtr_direction",
]

"""Direction labels built from terminus station names."""

from collections.abc import Sequence

from ..core.models import DirectionEntry, Station
from ..utils.localization import Language

LABEL_ARROW = " → "
TERMINI_SEPARATOR = "/"


def _terminus_name(station: Station, language: Language) -> str:
    """Name in exactly the requested language, empty when it is not set."""
    return station.name_zh if language == "zh" else station.name_en


def format_termini(
    termini: Sequence[str], stations: Sequence[Station], language: Language
) -> str:
    """Join the names of terminus stations with "/" in terminus code order.

    Codes without a matching station, or without a name in the requested
    language, are skipped.
    """
    by_code = {station.code: station for station in stations}
    names = [
        _terminus_name(by_code[code], language) for code in termini if code in by_code
    ]
    return TERMINI_SEPARATOR.join(name for name in names if name)


def get_direction_label(entry: DirectionEntry, language: Language = "en") -> str:
    """Returns a "First Station → Last Station" label.

    Falls back to the raw direction code (DT/UT) when either end has no
    resolvable station name. A Chinese label never mixes in English names.
    """
    start_label = format_termini(entry.start_termini, entry.stations, language)
    end_label = format_termini(entry.end_termini, entry.stations, language)
    if not start_label or not end_label:
        return entry.direction
    return f"{start_label}{LABEL_ARROW}{end_label}"

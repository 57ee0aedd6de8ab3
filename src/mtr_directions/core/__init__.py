"""Core models and exceptions."""

from .exceptions import (
    DirectionNotFoundError,
    LineNotFoundError,
    MtrDataError,
    PatchTableError,
    StationNotFoundError,
)
from .models import CsvRow, DirectionEntry, MtrLineInfo, Station

__all__ = [
    "CsvRow",
    "DirectionEntry",
    "MtrLineInfo",
    "Station",
    "MtrDataError",
    "PatchTableError",
    "LineNotFoundError",
    "DirectionNotFoundError",
    "StationNotFoundError",
]

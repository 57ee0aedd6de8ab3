"""Runtime lookups and labels over the generated direction data."""

from .directory import DirectionDirectory, StationRegistry
from .labels import format_termini, get_direction_label
from .queries import (
    get_directory,
    get_mtr_direction_entry,
    get_mtr_line_directions,
    get_mtr_station_info,
    load_directions,
    validate_mtr_route_params,
)

__all__ = [
    "DirectionDirectory",
    "StationRegistry",
    "format_termini",
    "get_direction_label",
    "get_directory",
    "get_mtr_direction_entry",
    "get_mtr_line_directions",
    "get_mtr_station_info",
    "load_directions",
    "validate_mtr_route_params",
]

"""MTR Directions Package

Generates canonical per-direction station sequences for MTR lines from the
lines-and-stations CSV, and provides read-only lookups and bilingual labels
over the generated data.
"""

__version__ = "0.1.0"
__author__ = "anhlt"
__email__ = "tuananh.kirimaru@gmail.com"

from .core.models import DirectionEntry, MtrLineInfo, Station
from .lookup import (
    get_direction_label,
    get_mtr_direction_entry,
    get_mtr_line_directions,
    get_mtr_station_info,
    validate_mtr_route_params,
)

__all__ = [
    "DirectionEntry",
    "MtrLineInfo",
    "Station",
    "get_direction_label",
    "get_mtr_direction_entry",
    "get_mtr_line_directions",
    "get_mtr_station_info",
    "validate_mtr_route_params",
]

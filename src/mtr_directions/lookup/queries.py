"""Module-level lookups over the generated MTR direction data.

The generated module is loaded and validated once, on first use, and the
resulting directory is shared by all callers. Nothing mutates it afterwards.
"""

import importlib
import logging
import threading

from ..config import GENERATED_MODULE
from ..core.models import DirectionEntry, Station
from .directory import DirectionDirectory

logger = logging.getLogger(__name__)


def load_directions(module_name: str = GENERATED_MODULE) -> tuple[DirectionEntry, ...]:
    """Load and validate the entries of a generated direction module.

    Raises:
        pydantic.ValidationError: If an entry breaks the entry invariants
    """
    module = importlib.import_module(module_name)
    entries = tuple(
        DirectionEntry.model_validate(raw) for raw in module.MTR_LINE_DIRECTIONS
    )
    logger.debug(f"Loaded {len(entries)} direction entries from {module_name}")
    return entries


# Thread-safe singleton implementation
_directory: DirectionDirectory | None = None
_directory_lock = threading.Lock()


def get_directory() -> DirectionDirectory:
    """Get the shared directory built from the generated module."""
    global _directory
    if _directory is None:
        with _directory_lock:
            if _directory is None:  # Double-check locking pattern
                _directory = DirectionDirectory(load_directions())
    return _directory


def get_mtr_line_directions(line_code: str) -> list[DirectionEntry]:
    """Get all direction entries for a given line."""
    return get_directory().line_directions(line_code)


def get_mtr_direction_entry(
    line_code: str, url_direction: str
) -> DirectionEntry | None:
    """Get a specific direction entry by line and URL direction ("up" | "down")."""
    return get_directory().direction_entry(line_code, url_direction)


def get_mtr_station_info(line_code: str, station_code: str) -> Station | None:
    """Look up a station within any direction of a given line."""
    return get_directory().station_info(line_code, station_code)


def validate_mtr_route_params(
    line_code: str, station_code: str, direction: str
) -> bool:
    """Check that a line, station and direction form a valid board route."""
    return get_directory().validate_route_params(line_code, station_code, direction)

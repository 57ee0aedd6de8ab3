"""Read-only indexes over generated direction entries."""

from collections.abc import Iterable

from ..core.exceptions import (
    DirectionNotFoundError,
    LineNotFoundError,
    StationNotFoundError,
)
from ..core.models import DirectionEntry, Station
from ..utils.localization import validate_mtr_direction


class StationRegistry:
    """Stations keyed by (line code, station code).

    Identity and names do not depend on direction, so each key keeps the
    record from the first entry (in generation order) that serves it.
    """

    def __init__(self, entries: Iterable[DirectionEntry]):
        self._stations: dict[tuple[str, str], Station] = {}
        for entry in entries:
            for station in entry.stations:
                self._stations.setdefault((entry.line_code, station.code), station)

    def get(self, line_code: str, station_code: str) -> Station | None:
        return self._stations.get((line_code, station_code))

    def line_stations(self, line_code: str) -> list[Station]:
        """All distinct stations of a line, in first-seen order."""
        return [s for (line, _), s in self._stations.items() if line == line_code]

    def __contains__(self, key: object) -> bool:
        return key in self._stations

    def __len__(self) -> int:
        return len(self._stations)


class DirectionDirectory:
    """Lookups over an immutable set of direction entries."""

    def __init__(self, entries: Iterable[DirectionEntry]):
        """Initialize the directory.

        Args:
            entries: Direction entries in generation order
        """
        self.entries: tuple[DirectionEntry, ...] = tuple(entries)
        self._build_index()

    def _build_index(self) -> None:
        """Index entries by line and stations by (line, code)."""
        self.line_index: dict[str, list[DirectionEntry]] = {}
        for entry in self.entries:
            self.line_index.setdefault(entry.line_code, []).append(entry)
        self.registry = StationRegistry(self.entries)

    def line_codes(self) -> list[str]:
        """Line codes in generation order."""
        return list(self.line_index)

    def has_line(self, line_code: str) -> bool:
        return line_code in self.line_index

    def line_directions(self, line_code: str) -> list[DirectionEntry]:
        """All direction entries of a line, empty for unknown lines."""
        return list(self.line_index.get(line_code, []))

    def direction_entry(
        self, line_code: str, url_direction: str
    ) -> DirectionEntry | None:
        """First entry of a line with the given URL direction ("up"/"down")."""
        for entry in self.line_index.get(line_code, []):
            if entry.url_direction == url_direction:
                return entry
        return None

    def station_info(self, line_code: str, station_code: str) -> Station | None:
        """Look up a station within any direction of a line."""
        return self.registry.get(line_code, station_code)

    def require_direction_entry(
        self, line_code: str, url_direction: str
    ) -> DirectionEntry:
        """Like direction_entry but raises when nothing matches.

        Raises:
            LineNotFoundError: If the line has no entries
            DirectionNotFoundError: If the line has no entry for the direction
        """
        if not self.has_line(line_code):
            raise LineNotFoundError(f"Unknown line: {line_code}")
        entry = self.direction_entry(line_code, url_direction)
        if entry is None:
            raise DirectionNotFoundError(
                f"Line {line_code} has no '{url_direction}' direction"
            )
        return entry

    def require_station(self, line_code: str, station_code: str) -> Station:
        """Like station_info but raises when nothing matches.

        Raises:
            LineNotFoundError: If the line has no entries
            StationNotFoundError: If the line does not serve the station
        """
        if not self.has_line(line_code):
            raise LineNotFoundError(f"Unknown line: {line_code}")
        station = self.station_info(line_code, station_code)
        if station is None:
            raise StationNotFoundError(
                f"Station {station_code} is not on line {line_code}"
            )
        return station

    def validate_route_params(
        self, line_code: str, station_code: str, direction: str
    ) -> bool:
        """Check a (line, station, direction) triple from a board URL.

        True only when the line exists, the direction is exactly "up" or
        "down", that direction exists on the line and serves the station.
        """
        if not self.has_line(line_code):
            return False
        url_direction = validate_mtr_direction(direction)
        if url_direction is None:
            return False
        entry = self.direction_entry(line_code, url_direction)
        if entry is None:
            return False
        return entry.get_station(station_code) is not None

"""Build canonical direction entries from parsed CSV rows."""

import logging
from collections import Counter
from dataclasses import dataclass, field
from fractions import Fraction

from ..core.exceptions import PatchTableError
from ..core.models import URL_DIRECTIONS, CsvRow, DirectionEntry, Station
from .patches import (
    CANONICAL_DIRECTIONS,
    DEFAULT_PATCHES,
    PatchTable,
    find_unused_patches,
)

logger = logging.getLogger(__name__)

GroupKey = tuple[str, str]


@dataclass
class _Member:
    """A station in a group, positioned by an exact rational key."""

    code: str
    id: str
    name_zh: str
    name_en: str
    position: Fraction


@dataclass
class BuildReport:
    """What happened to the input rows and patch entries during a build."""

    main_rows: int = 0
    branch_rows: int = 0
    dropped_directions: Counter[str] = field(default_factory=Counter)
    consumed_overrides: set[str] = field(default_factory=set)
    injected_stations: set[str] = field(default_factory=set)
    skipped_stations: set[str] = field(default_factory=set)

    @property
    def dropped_rows(self) -> int:
        return sum(self.dropped_directions.values())

    def to_dict(self) -> dict[str, object]:
        """Convert to dict for logging and display."""
        return {
            "main_rows": self.main_rows,
            "branch_rows": self.branch_rows,
            "dropped_rows": self.dropped_rows,
            "dropped_directions": dict(sorted(self.dropped_directions.items())),
            "consumed_overrides": sorted(self.consumed_overrides),
            "injected_stations": sorted(self.injected_stations),
            "skipped_stations": sorted(self.skipped_stations),
        }


class DirectionBuilder:
    """Groups rows by line and canonical direction and finalizes each group.

    Main rows (``DT``/``UT``) are applied before branch rows so their data
    always wins. Branch rows only add stations missing from the main rows,
    positioned by the override table when it has an entry. Rows whose
    direction is neither canonical nor a registered branch are dropped.
    """

    def __init__(self, patches: PatchTable = DEFAULT_PATCHES):
        """Initialize the builder.

        Args:
            patches: Branch map, sequence overrides and additional stations
        """
        self.patches = patches
        self.report = BuildReport()

    def classify(self, row: CsvRow) -> tuple[str, bool] | None:
        """Get (canonical direction, is_branch) for a row, or None to drop it."""
        canonical = self.patches.canonical_for_branch(row.raw_direction)
        if canonical is not None:
            return canonical, True
        if row.raw_direction in CANONICAL_DIRECTIONS:
            return row.raw_direction, False
        return None

    def build(self, rows: list[CsvRow]) -> list[DirectionEntry]:
        """Build sorted direction entries.

        Args:
            rows: Parsed CSV rows in source order

        Returns:
            Entries sorted by line code, UT before DT within a line
        """
        self.report = BuildReport()
        groups: dict[GroupKey, dict[str, _Member]] = {}

        main_rows: list[tuple[str, CsvRow]] = []
        branch_rows: list[tuple[str, CsvRow]] = []
        for row in rows:
            classified = self.classify(row)
            if classified is None:
                self.report.dropped_directions[row.raw_direction] += 1
                continue
            direction, is_branch = classified
            if is_branch:
                branch_rows.append((direction, row))
            else:
                main_rows.append((direction, row))

        self.report.main_rows = len(main_rows)
        self.report.branch_rows = len(branch_rows)

        for direction, row in main_rows:
            group = groups.setdefault((row.line_code, direction), {})
            group[row.station_code] = self._member(row, Fraction(row.sequence))

        for direction, row in branch_rows:
            group = groups.setdefault((row.line_code, direction), {})
            if row.station_code in group:
                continue

            override = self.patches.override_for(
                row.line_code, direction, row.station_code
            )
            if override is not None:
                self.report.consumed_overrides.add(override.match_key)
                position = override.position
            else:
                position = Fraction(row.sequence)
            group[row.station_code] = self._member(row, position)

        for extra in self.patches.additional_stations:
            group = groups.get((extra.line_code, extra.direction))
            if group is None:
                self.report.skipped_stations.add(extra.match_key)
                continue
            group[extra.code] = _Member(
                code=extra.code,
                id=extra.id,
                name_zh=extra.name_zh,
                name_en=extra.name_en,
                position=extra.position,
            )
            self.report.injected_stations.add(extra.match_key)

        if self.report.dropped_directions:
            # Unregistered branch codes need an explicit branch map entry
            logger.debug(
                f"Dropped rows with unregistered directions: "
                f"{dict(sorted(self.report.dropped_directions.items()))}"
            )

        entries = [
            self._finalize(line_code, direction, list(members.values()))
            for (line_code, direction), members in groups.items()
        ]
        entries.sort(key=lambda e: (e.line_code, 0 if e.direction == "UT" else 1))

        logger.info(f"Built {len(entries)} direction entries")
        return entries

    @staticmethod
    def _member(row: CsvRow, position: Fraction) -> _Member:
        return _Member(
            code=row.station_code,
            id=row.station_id,
            name_zh=row.name_zh,
            name_en=row.name_en,
            position=position,
        )

    @staticmethod
    def _finalize(
        line_code: str, direction: str, members: list[_Member]
    ) -> DirectionEntry:
        """Compute termini and renumber positions to 1..N."""
        min_position = min(m.position for m in members)
        max_position = max(m.position for m in members)

        start_termini = sorted(m.code for m in members if m.position == min_position)
        end_termini = sorted(m.code for m in members if m.position == max_position)

        ordered = sorted(members, key=lambda m: (m.position, m.code))
        stations = [
            Station(
                code=m.code,
                id=m.id,
                name_zh=m.name_zh,
                name_en=m.name_en,
                sequence=index,
            )
            for index, m in enumerate(ordered, start=1)
        ]

        return DirectionEntry(
            line_code=line_code,
            direction=direction,
            url_direction=URL_DIRECTIONS[direction],
            stations=stations,
            start_termini=start_termini,
            end_termini=end_termini,
        )


def build_directions(
    rows: list[CsvRow], patches: PatchTable = DEFAULT_PATCHES
) -> list[DirectionEntry]:
    """Build direction entries from rows with the given patch table."""
    return DirectionBuilder(patches).build(rows)


def check_patch_usage(report: BuildReport, patches: PatchTable) -> None:
    """Fail when a patch entry had no effect on the build.

    Raises:
        PatchTableError: Listing every override or additional station that
            did not apply
    """
    unused = find_unused_patches(
        patches, report.consumed_overrides, report.injected_stations
    )
    if unused:
        raise PatchTableError("Unused patch entries: " + "; ".join(unused))

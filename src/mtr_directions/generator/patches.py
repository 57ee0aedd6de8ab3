"""Hand-curated corrections applied on top of the raw CSV.

Three tables are kept here:

- branch directions: raw direction codes of branch services (e.g. the
  Lok Ma Chau branch of the East Rail Line, written ``LMC-DT``) and the
  canonical direction they fold into;
- sequence overrides: positions forced onto branch-only stations so that
  they coincide with the main line's terminus and become alternative
  termini instead of extra stops;
- additional stations: stations missing from the CSV, inserted at a
  rational position between two existing stops.

Positions are ``Fraction`` values so that repeated insertions between two
integers never lose precision.
"""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from fractions import Fraction

from ..core.exceptions import PatchTableError

CANONICAL_DIRECTIONS = ("DT", "UT")


def make_match_key(line_code: str, direction: str, station_code: str) -> str:
    """Build the ``{line}-{direction}-{station}`` key used by patch tables."""
    return f"{line_code}-{direction}-{station_code}"


def insert_between(lower: int | Fraction, upper: int | Fraction) -> Fraction:
    """Position strictly between two existing positions."""
    lower = Fraction(lower)
    upper = Fraction(upper)
    if not lower < upper:
        raise PatchTableError(f"Cannot insert between {lower} and {upper}")
    return (lower + upper) / 2


@dataclass(frozen=True)
class SequenceOverride:
    """Forced position for a branch-only station."""

    line_code: str
    direction: str
    station_code: str
    position: Fraction

    @property
    def match_key(self) -> str:
        return make_match_key(self.line_code, self.direction, self.station_code)


@dataclass(frozen=True)
class AdditionalStation:
    """A station absent from the CSV, injected into one direction."""

    line_code: str
    direction: str
    code: str
    id: str
    name_zh: str
    name_en: str
    position: Fraction

    @property
    def match_key(self) -> str:
        return make_match_key(self.line_code, self.direction, self.code)


@dataclass(frozen=True)
class PatchTable:
    """The full set of curated corrections used by the direction builder."""

    branch_directions: Mapping[str, str] = field(default_factory=dict)
    sequence_overrides: tuple[SequenceOverride, ...] = ()
    additional_stations: tuple[AdditionalStation, ...] = ()

    def canonical_for_branch(self, raw_direction: str) -> str | None:
        """Canonical direction a branch direction folds into, if registered."""
        return self.branch_directions.get(raw_direction)

    def override_for(
        self, line_code: str, direction: str, station_code: str
    ) -> SequenceOverride | None:
        """Get the sequence override for a station, if any."""
        key = make_match_key(line_code, direction, station_code)
        for override in self.sequence_overrides:
            if override.match_key == key:
                return override
        return None

    def validate(self) -> "PatchTable":
        """Check the tables are well formed.

        Raises:
            PatchTableError: On unknown directions, duplicate keys or
                non-positive positions
        """
        problems: list[str] = []

        for raw_direction, canonical in self.branch_directions.items():
            if canonical not in CANONICAL_DIRECTIONS:
                problems.append(
                    f"branch {raw_direction!r} maps to unknown direction {canonical!r}"
                )
            if raw_direction in CANONICAL_DIRECTIONS:
                problems.append(f"branch key {raw_direction!r} is a main direction")

        entries: list[SequenceOverride | AdditionalStation] = [
            *self.sequence_overrides,
            *self.additional_stations,
        ]
        for table_name, patches in (
            ("sequence override", self.sequence_overrides),
            ("additional station", self.additional_stations),
        ):
            seen: set[str] = set()
            for patch in patches:
                if patch.match_key in seen:
                    problems.append(f"duplicate {table_name} {patch.match_key}")
                seen.add(patch.match_key)

        for patch in entries:
            if patch.direction not in CANONICAL_DIRECTIONS:
                problems.append(f"{patch.match_key}: unknown direction")
            if patch.position <= 0:
                problems.append(f"{patch.match_key}: position must be positive")

        if problems:
            raise PatchTableError("Invalid patch table: " + "; ".join(problems))
        return self


def find_unused_patches(
    patches: PatchTable,
    consumed_overrides: Iterable[str],
    injected_stations: Iterable[str],
) -> list[str]:
    """List patch entries that did not apply to any data.

    Args:
        patches: Patch table used for the build
        consumed_overrides: Override keys that positioned a branch station
        injected_stations: Additional-station keys that were inserted

    Returns:
        Sorted descriptions of dead entries
    """
    consumed = set(consumed_overrides)
    injected = set(injected_stations)
    unused = [
        f"sequence override {o.match_key} matched no branch row"
        for o in patches.sequence_overrides
        if o.match_key not in consumed
    ]
    unused.extend(
        f"additional station {s.match_key} has no direction to join"
        for s in patches.additional_stations
        if s.match_key not in injected
    )
    return sorted(unused)


_RACECOURSE = {
    "code": "RAC",
    "id": "70",
    "name_zh": "馬場",
    "name_en": "Racecourse",
}

DEFAULT_PATCHES = PatchTable(
    branch_directions={
        # Lo Wu / Lok Ma Chau branch of the East Rail Line
        "LMC-DT": "DT",
        "LMC-UT": "UT",
        # Po Lam / LOHAS Park branch of the Tseung Kwan O Line
        "TKS-DT": "DT",
        "TKS-UT": "UT",
    },
    sequence_overrides=(
        # Lok Ma Chau shares the Lo Wu terminus position (1 on DT, 14 on UT)
        SequenceOverride("EAL", "DT", "LMC", Fraction(1)),
        SequenceOverride("EAL", "UT", "LMC", Fraction(14)),
        # LOHAS Park shares the Po Lam terminus position (1 on DT, 7 on UT)
        SequenceOverride("TKL", "DT", "LHP", Fraction(1)),
        SequenceOverride("TKL", "UT", "LHP", Fraction(7)),
    ),
    additional_stations=(
        # Racecourse runs on race days only, between University and Fo Tan
        AdditionalStation("EAL", "DT", position=insert_between(6, 7), **_RACECOURSE),
        AdditionalStation("EAL", "UT", position=insert_between(8, 9), **_RACECOURSE),
    ),
).validate()

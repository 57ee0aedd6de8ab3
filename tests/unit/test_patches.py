"""Unit tests for patch tables."""

from fractions import Fraction

import pytest

from mtr_directions.core.exceptions import PatchTableError
from mtr_directions.generator.patches import (
    DEFAULT_PATCHES,
    AdditionalStation,
    PatchTable,
    SequenceOverride,
    find_unused_patches,
    insert_between,
    make_match_key,
)


def _extra(line_code="L1", direction="DT", code="NEW", position=Fraction(3, 2)):
    return AdditionalStation(
        line_code, direction, code, "99", "新站", "New Station", position
    )


class TestInsertBetween:
    """Test rational position insertion."""

    def test_midpoint(self):
        """Test the position lies halfway between the bounds."""
        assert insert_between(6, 7) == Fraction(13, 2)
        assert insert_between(Fraction(1, 2), 1) == Fraction(3, 4)

    def test_repeated_insertions_stay_ordered(self):
        """Test nesting many insertions keeps positions distinct and ordered."""
        upper = Fraction(2)
        positions = []
        for _ in range(100):
            upper = insert_between(1, upper)
            positions.append(upper)

        assert all(1 < p < 2 for p in positions)
        assert positions == sorted(positions, reverse=True)
        assert len(set(positions)) == 100

    def test_invalid_bounds(self):
        """Test lower must be below upper."""
        with pytest.raises(PatchTableError):
            insert_between(2, 2)
        with pytest.raises(PatchTableError):
            insert_between(3, 1)


class TestPatchTable:
    """Test patch table lookups and validation."""

    def test_match_keys(self):
        """Test the line-direction-station key format."""
        override = SequenceOverride("EAL", "DT", "LMC", Fraction(1))

        assert override.match_key == "EAL-DT-LMC"
        assert _extra().match_key == "L1-DT-NEW"
        assert make_match_key("TKL", "UT", "LHP") == "TKL-UT-LHP"

    def test_canonical_for_branch(self):
        """Test only registered branch directions are folded."""
        assert DEFAULT_PATCHES.canonical_for_branch("LMC-DT") == "DT"
        assert DEFAULT_PATCHES.canonical_for_branch("TKS-UT") == "UT"
        assert DEFAULT_PATCHES.canonical_for_branch("XYZ-DT") is None
        assert DEFAULT_PATCHES.canonical_for_branch("DT") is None

    def test_override_for(self):
        """Test override lookup by line, direction and station."""
        override = DEFAULT_PATCHES.override_for("EAL", "UT", "LMC")

        assert override is not None
        assert override.position == Fraction(14)
        assert DEFAULT_PATCHES.override_for("EAL", "UT", "LOW") is None

    def test_default_patches_contents(self):
        """Test the curated tables cover both branches and Racecourse."""
        assert set(DEFAULT_PATCHES.branch_directions) == {
            "LMC-DT",
            "LMC-UT",
            "TKS-DT",
            "TKS-UT",
        }
        assert {o.match_key for o in DEFAULT_PATCHES.sequence_overrides} == {
            "EAL-DT-LMC",
            "EAL-UT-LMC",
            "TKL-DT-LHP",
            "TKL-UT-LHP",
        }
        positions = {
            s.match_key: s.position for s in DEFAULT_PATCHES.additional_stations
        }
        assert positions == {
            "EAL-DT-RAC": Fraction(13, 2),
            "EAL-UT-RAC": Fraction(17, 2),
        }

    def test_validate_returns_table(self):
        """Test a valid table validates to itself."""
        table = PatchTable(branch_directions={"BR-UT": "UT"})

        assert table.validate() is table

    def test_validate_unknown_canonical_direction(self):
        """Test branch directions must fold into DT or UT."""
        with pytest.raises(PatchTableError, match="unknown direction"):
            PatchTable(branch_directions={"BR-DT": "DOWN"}).validate()

    def test_validate_main_direction_as_branch(self):
        """Test main directions cannot be registered as branches."""
        with pytest.raises(PatchTableError, match="main direction"):
            PatchTable(branch_directions={"DT": "DT"}).validate()

    def test_validate_duplicate_override(self):
        """Test override keys are unique."""
        override = SequenceOverride("L1", "DT", "AAA", Fraction(1))

        with pytest.raises(PatchTableError, match="duplicate"):
            PatchTable(sequence_overrides=(override, override)).validate()

    def test_validate_positions(self):
        """Test positions must be positive."""
        with pytest.raises(PatchTableError, match="positive"):
            PatchTable(additional_stations=(_extra(position=Fraction(0)),)).validate()

    def test_validate_patch_direction(self):
        """Test patch entries target canonical directions."""
        with pytest.raises(PatchTableError, match="unknown direction"):
            PatchTable(additional_stations=(_extra(direction="LMC-DT"),)).validate()


class TestFindUnusedPatches:
    """Test detection of dead patch entries."""

    def test_all_used(self):
        """Test nothing is reported when every entry applied."""
        table = PatchTable(
            sequence_overrides=(SequenceOverride("L1", "DT", "AAA", Fraction(1)),),
            additional_stations=(_extra(),),
        )

        assert find_unused_patches(table, {"L1-DT-AAA"}, {"L1-DT-NEW"}) == []

    def test_unused_entries_reported(self):
        """Test unused overrides and stations are listed."""
        table = PatchTable(
            sequence_overrides=(SequenceOverride("L1", "DT", "AAA", Fraction(1)),),
            additional_stations=(_extra(),),
        )

        assert find_unused_patches(table, [], []) == [
            "additional station L1-DT-NEW has no direction to join",
            "sequence override L1-DT-AAA matched no branch row",
        ]

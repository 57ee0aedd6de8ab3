"""Test configuration and fixtures."""

from decimal import Decimal
from fractions import Fraction

import pytest

from mtr_directions.core.models import CsvRow, DirectionEntry, Station
from mtr_directions.generator.patches import PatchTable, SequenceOverride

SAMPLE_HEADER = (
    "Line Code,Direction,Station Code,Station ID,Chinese Name,English Name,Sequence"
)


@pytest.fixture
def sample_csv_content():
    """A small lines-and-stations CSV with one branch service."""
    return "\n".join(
        [
            SAMPLE_HEADER,
            '"L1","DT","AAA","1","甲站","Alpha","1.00"',
            '"L1","DT","BBB","2","乙站","Bravo","2.00"',
            '"L1","DT","CCC","3","丙站","Charlie","3.00"',
            '"L1","UT","CCC","3","丙站","Charlie","1.00"',
            '"L1","UT","BBB","2","乙站","Bravo","2.00"',
            '"L1","UT","AAA","1","甲站","Alpha","3.00"',
            '"L1","BR-DT","XXX","9","戊站","Xray","1.00"',
            '"L1","BR-DT","BBB","2","乙站","Bravo","2.00"',
            "",
        ]
    )


@pytest.fixture
def make_row():
    """Factory for CsvRow objects with names derived from the code."""

    def _make_row(line_code, direction, code, sequence, name_en=None, name_zh=None):
        return CsvRow(
            line_code=line_code,
            raw_direction=direction,
            station_code=code,
            station_id=code.lower(),
            name_zh=name_zh if name_zh is not None else f"站{code}",
            name_en=name_en if name_en is not None else f"Station {code}",
            sequence=Decimal(str(sequence)),
        )

    return _make_row


@pytest.fixture
def branch_patches():
    """Patch table folding BR-DT into DT with XXX pinned to the first stop."""
    return PatchTable(
        branch_directions={"BR-DT": "DT"},
        sequence_overrides=(SequenceOverride("L1", "DT", "XXX", Fraction(1)),),
    ).validate()


@pytest.fixture
def make_station():
    """Factory for Station objects."""

    def _make_station(code, sequence, name_en=None, name_zh=None):
        return Station(
            code=code,
            id=code.lower(),
            name_zh=name_zh if name_zh is not None else f"站{code}",
            name_en=name_en if name_en is not None else f"Station {code}",
            sequence=sequence,
        )

    return _make_station


@pytest.fixture
def sample_entries(make_station):
    """Two lines of direction entries in generation order."""
    return [
        DirectionEntry(
            line_code="EAL",
            direction="UT",
            url_direction="up",
            stations=[
                make_station("ADM", 1, "Admiralty", "金鐘"),
                make_station("SHS", 2, "Sheung Shui", "上水"),
                make_station("LMC", 3, "Lok Ma Chau", "落馬洲"),
                make_station("LOW", 4, "Lo Wu", "羅湖"),
            ],
            start_termini=["ADM"],
            end_termini=["LMC", "LOW"],
        ),
        DirectionEntry(
            line_code="EAL",
            direction="DT",
            url_direction="down",
            stations=[
                make_station("LMC", 1, "Lok Ma Chau", "落馬洲"),
                make_station("LOW", 2, "Lo Wu", "羅湖"),
                make_station("SHS", 3, "Sheung Shui", "上水"),
                make_station("ADM", 4, "Admiralty", "金鐘"),
            ],
            start_termini=["LMC", "LOW"],
            end_termini=["ADM"],
        ),
        DirectionEntry(
            line_code="DRL",
            direction="DT",
            url_direction="down",
            stations=[
                make_station("SUN", 1, "Sunny Bay", "欣澳"),
                make_station("DIS", 2, "Disneyland Resort", "迪士尼"),
            ],
            start_termini=["SUN"],
            end_termini=["DIS"],
        ),
    ]

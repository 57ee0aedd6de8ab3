"""Unit tests for the lines-and-stations CSV parser."""

import logging
from decimal import Decimal

from mtr_directions.generator.builder import build_directions
from mtr_directions.generator.csv_parser import (
    parse_csv,
    parse_csv_line,
    parse_sequence,
    read_csv,
)
from mtr_directions.generator.patches import PatchTable

HEADER = "Line Code,Direction,Station Code,Station ID,Chinese Name,English Name,Sequence"


class TestParseCsvLine:
    """Test splitting single CSV lines."""

    def test_quoted_fields(self):
        """Test quotes are removed from quoted fields."""
        fields = parse_csv_line('"TWL","DT","CEN","1","中環","Central","16.00"')

        assert fields == ["TWL", "DT", "CEN", "1", "中環", "Central", "16.00"]

    def test_quoted_field_keeps_commas(self):
        """Test commas inside quotes do not split the field."""
        fields = parse_csv_line('"A","Hong Kong, Central","B"')

        assert fields == ["A", "Hong Kong, Central", "B"]

    def test_unquoted_fields_are_trimmed(self):
        """Test whitespace around unquoted fields is removed."""
        assert parse_csv_line(" A , B ,C") == ["A", "B", "C"]

    def test_trailing_comma_adds_no_field(self):
        """Test a trailing separator does not create an empty field."""
        assert parse_csv_line("A,B,") == ["A", "B"]

    def test_mixed_fields(self):
        """Test quoted and unquoted fields on one line."""
        assert parse_csv_line('EAL,"LMC-DT",LMC') == ["EAL", "LMC-DT", "LMC"]


class TestParseSequence:
    """Test sequence column parsing."""

    def test_numeric_values(self):
        """Test integers and decimals parse exactly."""
        assert parse_sequence("1.00") == Decimal("1")
        assert parse_sequence(" 7 ") == Decimal("7")
        assert parse_sequence("6.5") == Decimal("6.5")

    def test_invalid_values(self):
        """Test non-numeric and non-finite values are rejected."""
        assert parse_sequence("N/A") is None
        assert parse_sequence("") is None
        assert parse_sequence("12abc") is None
        assert parse_sequence("NaN") is None
        assert parse_sequence("Infinity") is None

    def test_out_of_range_values(self):
        """Test exponents beyond double range are rejected."""
        assert parse_sequence("1e999999999") is None
        assert parse_sequence("1e-999999999") is None
        assert parse_sequence("1e309") is None
        assert parse_sequence("1e308") == Decimal("1e308")
        assert parse_sequence("0E-999999999") == Decimal("0")


class TestParseCsv:
    """Test parsing full CSV content."""

    def test_parse_sample(self, sample_csv_content):
        """Test rows are parsed in source order, header skipped."""
        rows = parse_csv(sample_csv_content)

        assert len(rows) == 8
        assert rows[0].line_code == "L1"
        assert rows[0].raw_direction == "DT"
        assert rows[0].station_code == "AAA"
        assert rows[0].name_zh == "甲站"
        assert rows[0].sequence == Decimal("1")
        assert rows[-1].raw_direction == "BR-DT"

    def test_bom_is_stripped(self, sample_csv_content):
        """Test a leading byte order mark does not affect the result."""
        assert parse_csv("\ufeff" + sample_csv_content) == parse_csv(
            sample_csv_content
        )

    def test_line_endings_are_normalized(self, sample_csv_content):
        """Test CRLF and CR endings parse like LF."""
        expected = parse_csv(sample_csv_content)

        assert parse_csv(sample_csv_content.replace("\n", "\r\n")) == expected
        assert parse_csv(sample_csv_content.replace("\n", "\r")) == expected

    def test_blank_lines_are_skipped(self):
        """Test empty lines in the middle of the file are ignored."""
        content = "\n".join([HEADER, "", '"L1","DT","AAA","1","甲","A","1"', "   "])

        rows = parse_csv(content)

        assert [row.station_code for row in rows] == ["AAA"]

    def test_bad_sequence_drops_only_that_row(self, caplog):
        """Test a non-numeric sequence drops exactly one row."""
        content = "\n".join(
            [
                HEADER,
                '"L1","DT","AAA","1","甲","A","1"',
                '"L1","DT","BBB","2","乙","B","N/A"',
                '"L1","DT","CCC","3","丙","C","3"',
            ]
        )

        with caplog.at_level(logging.INFO):
            rows = parse_csv(content)

        assert [row.station_code for row in rows] == ["AAA", "CCC"]
        assert "Dropped 1 malformed rows" in caplog.text

    def test_huge_exponent_row_is_dropped_before_building(self):
        """Test an out-of-range sequence never reaches the builder."""
        content = "\n".join(
            [
                HEADER,
                '"L1","DT","AAA","1","甲","A","1"',
                '"L1","DT","BBB","2","乙","B","1e999999999"',
            ]
        )

        rows = parse_csv(content)
        entries = build_directions(rows, PatchTable())

        assert [row.station_code for row in rows] == ["AAA"]
        assert entries[0].station_codes() == ["AAA"]

    def test_short_rows_are_dropped(self):
        """Test rows with fewer than seven fields are dropped."""
        content = "\n".join(
            [
                HEADER,
                '"L1","DT","AAA","1","甲","A"',
                '"L1","DT","BBB","2","乙","B","2"',
            ]
        )

        rows = parse_csv(content)

        assert [row.station_code for row in rows] == ["BBB"]

    def test_extra_fields_are_ignored(self):
        """Test columns after the seventh are ignored."""
        rows = parse_csv(HEADER + '\n"L1","DT","AAA","1","甲","A","1","extra"')

        assert len(rows) == 1
        assert rows[0].sequence == Decimal("1")

    def test_header_only(self):
        """Test a file with only a header has no rows."""
        assert parse_csv(HEADER + "\n") == []
        assert parse_csv("") == []


class TestReadCsv:
    """Test reading CSV files from disk."""

    def test_read_csv(self, tmp_path, sample_csv_content):
        """Test reading a UTF-8 file."""
        csv_file = tmp_path / "stations.csv"
        csv_file.write_text(sample_csv_content, encoding="utf-8")

        rows = read_csv(csv_file)

        assert len(rows) == 8
        assert rows[1].name_zh == "乙站"

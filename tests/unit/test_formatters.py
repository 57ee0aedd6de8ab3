"""Unit tests for CLI formatters."""

import json
from io import StringIO
from unittest.mock import patch

from rich.console import Console

from mtr_directions.cli.formatters import (
    format_build_report,
    format_directions_json,
    format_directions_table,
    format_lines_table,
    format_station_json,
    format_station_table,
)
from mtr_directions.data import MTR_LINES
from mtr_directions.generator.builder import BuildReport


class TestFormatters:
    """Test CLI formatters."""

    def _console(self):
        return Console(file=StringIO(), width=200)

    def test_format_lines_table(self):
        """Test line catalogue table."""
        console = self._console()

        with patch("mtr_directions.cli.formatters.console", console):
            format_lines_table([MTR_LINES["TWL"]], {"TWL": 2})

        output = console.file.getvalue()
        assert "Tsuen Wan Line" in output
        assert "荃灣綫" in output
        assert "#ED1D24" in output

    def test_format_directions_table(self, sample_entries):
        """Test one table per direction with the label in the title."""
        console = self._console()

        with patch("mtr_directions.cli.formatters.console", console):
            format_directions_table(sample_entries[:1])

        output = console.file.getvalue()
        assert "EAL up: Admiralty → Lok Ma Chau/Lo Wu" in output
        assert "Sheung Shui" in output
        assert "start" in output
        assert "end" in output

    def test_format_directions_table_empty(self):
        """Test empty direction list."""
        console = self._console()

        with patch("mtr_directions.cli.formatters.console", console):
            format_directions_table([])

        assert "No directions found." in console.file.getvalue()

    def test_format_station_table(self, make_station):
        """Test station table."""
        console = self._console()

        with patch("mtr_directions.cli.formatters.console", console):
            format_station_table("TWL", make_station("CEN", 1, "Central", "中環"))

        output = console.file.getvalue()
        assert "Station CEN (TWL)" in output
        assert "中環" in output

    def test_format_build_report(self):
        """Test build report table."""
        report = BuildReport(main_rows=10, branch_rows=2)
        report.dropped_directions["XYZ-DT"] += 3
        console = self._console()

        with patch("mtr_directions.cli.formatters.console", console):
            format_build_report(report)

        output = console.file.getvalue()
        assert "Build Report" in output
        assert "XYZ-DT=3" in output
        assert "dropped_rows" in output

    def test_format_directions_json(self, sample_entries):
        """Test JSON output carries labels."""
        data = json.loads(format_directions_json(sample_entries, "zh"))

        assert len(data) == 3
        assert data[0]["label"] == "金鐘 → 落馬洲/羅湖"
        assert data[0]["stations"][0]["code"] == "ADM"

    def test_format_station_json(self, make_station):
        """Test station JSON keeps Chinese characters."""
        output = format_station_json("TWL", make_station("CEN", 1, "Central", "中環"))

        assert "中環" in output
        assert json.loads(output)["line_code"] == "TWL"

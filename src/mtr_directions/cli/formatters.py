"""Output formatters for CLI display."""

import json

from rich.console import Console
from rich.table import Table

from ..core.models import DirectionEntry, MtrLineInfo, Station
from ..generator.builder import BuildReport
from ..lookup.labels import get_direction_label
from ..utils.localization import Language

console = Console()


def format_lines_table(
    lines: list[MtrLineInfo], direction_counts: dict[str, int] | None = None
) -> None:
    """Display the line catalogue as a rich table."""
    direction_counts = direction_counts or {}

    table = Table(title="MTR Lines", show_header=True, header_style="bold magenta")
    table.add_column("Code", style="cyan", no_wrap=True)
    table.add_column("English", style="green")
    table.add_column("Chinese", style="green")
    table.add_column("Color", style="blue", no_wrap=True)
    table.add_column("Directions", style="yellow", justify="right")

    for line in lines:
        table.add_row(
            line.code,
            line.name_en,
            line.name_zh,
            f"[{line.color}]{line.color}[/]",
            str(direction_counts.get(line.code, 0)),
        )

    console.print(table)


def format_directions_table(
    entries: list[DirectionEntry], language: Language = "en"
) -> None:
    """Display direction entries of a line, one table per direction."""
    if not entries:
        console.print("No directions found.")
        return

    for entry in entries:
        table = Table(
            title=f"{entry.line_code} {entry.url_direction}: "
            f"{get_direction_label(entry, language)}",
            show_header=True,
            header_style="bold magenta",
        )
        table.add_column("#", style="dim", justify="right")
        table.add_column("Code", style="cyan", no_wrap=True)
        table.add_column("Name", style="green")
        table.add_column("Terminus", style="yellow")

        for station in entry.stations:
            terminus = ""
            if station.code in entry.start_termini:
                terminus = "start"
            elif station.code in entry.end_termini:
                terminus = "end"
            table.add_row(
                str(station.sequence),
                station.code,
                station.display_name(language),
                terminus,
            )

        console.print(table)


def format_station_table(line_code: str, station: Station) -> None:
    """Display a single station record."""
    table = Table(
        title=f"Station {station.code} ({line_code})",
        show_header=True,
        header_style="bold magenta",
    )
    table.add_column("Property", style="cyan", no_wrap=True)
    table.add_column("Value", style="green")

    table.add_row("Code", station.code)
    table.add_row("ID", station.id)
    table.add_row("English", station.name_en)
    table.add_row("Chinese", station.name_zh)

    console.print(table)


def format_build_report(report: BuildReport) -> None:
    """Display row and patch statistics of a generation run."""
    table = Table(title="Build Report", show_header=True, header_style="bold blue")
    table.add_column("Item", style="cyan", no_wrap=True)
    table.add_column("Value", style="green")

    for key, value in report.to_dict().items():
        if isinstance(value, dict):
            text = ", ".join(f"{k}={v}" for k, v in value.items()) or "-"
        elif isinstance(value, list):
            text = ", ".join(value) or "-"
        else:
            text = str(value)
        table.add_row(key, text)

    console.print(table)


def format_directions_json(
    entries: list[DirectionEntry], language: Language = "en"
) -> str:
    """Format direction entries as JSON, with their labels."""
    data = [
        {**entry.model_dump(), "label": get_direction_label(entry, language)}
        for entry in entries
    ]
    return json.dumps(data, ensure_ascii=False, indent=2)


def format_station_json(line_code: str, station: Station) -> str:
    """Format a station record as JSON."""
    return json.dumps(
        {"line_code": line_code, **station.model_dump()},
        ensure_ascii=False,
        indent=2,
    )

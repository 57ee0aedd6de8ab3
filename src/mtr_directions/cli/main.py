"""CLI main entry point for MTR direction data."""

import logging
import sys
from pathlib import Path

import click
from rich.console import Console
from rich.logging import RichHandler

from .. import __version__
from ..config import (
    DEFAULT_CSV_PATH,
    DEFAULT_OUTPUT_PATH,
    GENERATED_MODULE,
    GENERATOR_COMMAND,
    GeneratorSettings,
)
from ..core import MtrDataError, PatchTableError
from ..data import MTR_LINES
from ..generator import generate as run_generation
from ..lookup import get_directory, validate_mtr_route_params
from .formatters import (
    format_build_report,
    format_directions_json,
    format_directions_table,
    format_lines_table,
    format_station_json,
    format_station_table,
)

console = Console()
error_console = Console(stderr=True)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(message)s",
        handlers=[RichHandler(console=error_console, show_path=False)],
        force=True,
    )


@click.group()
@click.version_option(version=__version__)
def cli() -> None:
    """MTR Directions - Generate and query MTR line direction data."""
    pass


@cli.command()
@click.option(
    "--csv",
    "csv_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=DEFAULT_CSV_PATH,
    help="Lines-and-stations CSV to read",
)
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, path_type=Path),
    default=DEFAULT_OUTPUT_PATH,
    help="Generated module to write",
)
@click.option(
    "--strict/--no-strict",
    default=True,
    help="Fail when a patch table entry matches nothing",
)
@click.option(
    "--check",
    is_flag=True,
    help="Only check whether the generated module is up to date",
)
@click.option("--verbose", "-v", is_flag=True, help="Show debug logging")
def generate(
    csv_path: Path, output: Path, strict: bool, check: bool, verbose: bool
) -> None:
    """Regenerate the direction module from the lines-and-stations CSV.

    Examples:
        mtr-directions generate
        mtr-directions generate --check
        mtr-directions generate --csv new.csv --output /tmp/directions.py
    """
    _configure_logging(verbose)
    settings = GeneratorSettings(csv_path=csv_path, output_path=output, strict=strict)

    try:
        result = run_generation(settings, write=not check)
    except PatchTableError as e:
        error_console.print(f"[red]Patch table error:[/red] {e}")
        sys.exit(1)
    except OSError as e:
        error_console.print(f"[red]File error:[/red] {e}")
        sys.exit(1)
    except Exception as e:
        error_console.print(f"[red]Unexpected error:[/red] {e}")
        if verbose:
            error_console.print_exception()
        sys.exit(1)

    if check:
        if result.changed:
            error_console.print(
                f"[yellow]{result.output_path} is out of date.[/yellow] "
                f"Run '{GENERATOR_COMMAND}'"
            )
            sys.exit(1)
        console.print(f"[green]✓ {result.output_path} is up to date[/green]")
        return

    if verbose:
        format_build_report(result.report)

    console.print(f"[green]✓ Parsed {result.row_count} rows[/green]")
    console.print(f"[green]✓ Built {len(result.entries)} direction entries[/green]")
    if result.written:
        console.print(f"[green]✓ Written to:[/green] {result.output_path}")
    else:
        console.print(f"[green]✓ Already up to date:[/green] {result.output_path}")


@cli.command("lines")
def list_lines() -> None:
    """List MTR lines and how many directions each has."""
    directory = get_directory()
    counts = {code: len(directory.line_directions(code)) for code in MTR_LINES}
    format_lines_table(sorted(MTR_LINES.values(), key=lambda line: line.code), counts)


@cli.command()
@click.argument("line_code")
@click.option(
    "--language",
    "-l",
    type=click.Choice(["en", "zh"]),
    default="en",
    help="Language of station names",
)
@click.option(
    "--format",
    "-f",
    "output_format",
    type=click.Choice(["table", "json"]),
    default="table",
    help="Output format",
)
def directions(line_code: str, language: str, output_format: str) -> None:
    """Show the directions of a line with their stations.

    Examples:
        mtr-directions directions TWL
        mtr-directions directions EAL --language zh
        mtr-directions directions TKL --format json
    """
    entries = get_directory().line_directions(line_code.upper())
    if not entries:
        error_console.print(f"[red]Unknown line:[/red] {line_code}")
        sys.exit(1)

    if output_format == "json":
        click.echo(format_directions_json(entries, language))
    else:
        format_directions_table(entries, language)


@cli.command()
@click.argument("line_code")
@click.argument("station_code")
@click.option(
    "--format",
    "-f",
    "output_format",
    type=click.Choice(["table", "json"]),
    default="table",
    help="Output format",
)
def station(line_code: str, station_code: str, output_format: str) -> None:
    """Show a station of a line.

    Examples:
        mtr-directions station TWL CEN
        mtr-directions station EAL RAC --format json
    """
    line_code = line_code.upper()
    try:
        info = get_directory().require_station(line_code, station_code.upper())
    except MtrDataError as e:
        error_console.print(f"[red]Error:[/red] {e}")
        sys.exit(1)

    if output_format == "json":
        click.echo(format_station_json(line_code, info))
    else:
        format_station_table(line_code, info)


@cli.command()
@click.argument("line_code")
@click.argument("station_code")
@click.argument("direction")
def validate(line_code: str, station_code: str, direction: str) -> None:
    """Check that a board route (line, station, up/down) exists.

    Examples:
        mtr-directions validate TWL CEN up
    """
    if validate_mtr_route_params(line_code, station_code, direction):
        console.print(f"[green]VALID[/green] {line_code}/{station_code}/{direction}")
        return
    console.print(f"[red]INVALID[/red] {line_code}/{station_code}/{direction}")
    sys.exit(1)


@cli.group()
def config() -> None:
    """Configuration management."""
    pass


@config.command("show")
def show_config() -> None:
    """Show current configuration."""
    settings = GeneratorSettings()
    console.print("[bold]Current Configuration:[/bold]")
    for key, value in settings.to_dict().items():
        console.print(f"• {key}: {value}")
    console.print(f"• generated_module: {GENERATED_MODULE}")


if __name__ == "__main__":
    cli()

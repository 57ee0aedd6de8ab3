"""Render direction entries as a static Python module."""

import json

from ..config import GENERATOR_COMMAND
from ..core.models import DirectionEntry, Station

DEFAULT_SOURCE = "mtr_lines_and_stations.csv"


def _literal(value: str) -> str:
    """Double-quoted string literal, keeping non-ASCII characters readable."""
    return json.dumps(value, ensure_ascii=False)


def _literal_list(values: tuple[str, ...]) -> str:
    return "[" + ", ".join(_literal(v) for v in values) + "]"


def render_header(source: str = DEFAULT_SOURCE) -> str:
    """Fixed header marking the module as generated."""
    return (
        f"# Generated by `{GENERATOR_COMMAND}` from {source} "
        "- do not edit manually"
    )


def render_station(station: Station) -> str:
    """Render one station as a single-line dict literal."""
    return (
        "            {"
        f'"code": {_literal(station.code)}, '
        f'"id": {_literal(station.id)}, '
        f'"name_zh": {_literal(station.name_zh)}, '
        f'"name_en": {_literal(station.name_en)}, '
        f'"sequence": {station.sequence}'
        "},"
    )


def render_direction_entry(entry: DirectionEntry) -> str:
    """Render one direction entry as a dict literal."""
    lines = [
        "    {",
        f'        "line_code": {_literal(entry.line_code)},',
        f'        "direction": {_literal(entry.direction)},',
        f'        "url_direction": {_literal(entry.url_direction)},',
        '        "stations": [',
        *(render_station(station) for station in entry.stations),
        "        ],",
        f'        "start_termini": {_literal_list(entry.start_termini)},',
        f'        "end_termini": {_literal_list(entry.end_termini)},',
        "    },",
    ]
    return "\n".join(lines)


def render_module(entries: list[DirectionEntry], source: str = DEFAULT_SOURCE) -> str:
    """Render the complete generated module.

    Args:
        entries: Direction entries in their final order
        source: Name of the CSV the entries were built from

    Returns:
        Module source text ending with a newline
    """
    lines = [
        render_header(source),
        "",
        "MTR_LINE_DIRECTIONS = [",
        *(render_direction_entry(entry) for entry in entries),
        "]",
        "",
    ]
    return "\n".join(lines)

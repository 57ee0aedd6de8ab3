"""Offline generation of the direction module from the lines-and-stations CSV."""

from .builder import BuildReport, DirectionBuilder, build_directions, check_patch_usage
from .csv_parser import parse_csv, parse_csv_line, read_csv
from .patches import (
    DEFAULT_PATCHES,
    AdditionalStation,
    PatchTable,
    SequenceOverride,
    insert_between,
)
from .pipeline import GenerationResult, generate
from .renderer import render_module

__all__ = [
    "AdditionalStation",
    "BuildReport",
    "DEFAULT_PATCHES",
    "DirectionBuilder",
    "GenerationResult",
    "PatchTable",
    "SequenceOverride",
    "build_directions",
    "check_patch_usage",
    "generate",
    "insert_between",
    "parse_csv",
    "parse_csv_line",
    "read_csv",
    "render_module",
]

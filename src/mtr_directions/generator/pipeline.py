"""One-shot generation run: read the CSV, build entries, write the module."""

import logging
from dataclasses import dataclass, field
from pathlib import Path

from ..config import GeneratorSettings
from ..core.exceptions import PatchTableError
from ..core.models import DirectionEntry
from .builder import BuildReport, DirectionBuilder, check_patch_usage
from .csv_parser import read_csv
from .patches import DEFAULT_PATCHES, PatchTable
from .renderer import render_module

logger = logging.getLogger(__name__)


@dataclass
class GenerationResult:
    """Outcome of a generation run."""

    output_path: Path
    content: str
    row_count: int = 0
    entries: list[DirectionEntry] = field(default_factory=list)
    report: BuildReport = field(default_factory=BuildReport)
    # True when the output file differed from the rendered content
    changed: bool = False
    written: bool = False


def _read_existing(path: Path) -> str | None:
    if not path.exists():
        return None
    with open(path, encoding="utf-8", newline="") as f:
        return f.read()


def generate(
    settings: GeneratorSettings | None = None,
    patches: PatchTable = DEFAULT_PATCHES,
    write: bool = True,
) -> GenerationResult:
    """Regenerate the direction module from the CSV.

    Args:
        settings: Input/output paths and strictness
        patches: Patch table applied by the builder
        write: Write the module when it changed; False only compares

    Returns:
        GenerationResult describing the run

    Raises:
        PatchTableError: If strict and a patch entry had no effect
        OSError: If the CSV cannot be read or the module cannot be written
    """
    settings = settings or GeneratorSettings()

    rows = read_csv(settings.csv_path)
    builder = DirectionBuilder(patches)
    entries = builder.build(rows)

    try:
        check_patch_usage(builder.report, patches)
    except PatchTableError as e:
        if settings.strict:
            raise
        logger.warning(f"{e}")

    content = render_module(entries, source=settings.csv_path.name)
    changed = _read_existing(settings.output_path) != content

    result = GenerationResult(
        output_path=settings.output_path,
        content=content,
        row_count=len(rows),
        entries=entries,
        report=builder.report,
        changed=changed,
    )

    if write and changed:
        settings.output_path.parent.mkdir(parents=True, exist_ok=True)
        with open(settings.output_path, "w", encoding="utf-8", newline="\n") as f:
            f.write(content)
        result.written = True
        logger.info(f"Written to {settings.output_path}")
    elif not changed:
        logger.info(f"{settings.output_path} is up to date")

    return result

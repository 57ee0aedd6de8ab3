"""Default locations and settings for data generation."""

from dataclasses import dataclass, field
from pathlib import Path

from .utils.localization import DEFAULT_LANGUAGE, Language

PACKAGE_DIR = Path(__file__).resolve().parent
DATA_DIR = PACKAGE_DIR / "data"

DEFAULT_CSV_PATH = DATA_DIR / "mtr_lines_and_stations.csv"
DEFAULT_OUTPUT_PATH = DATA_DIR / "mtr_directions_generated.py"

# Import path of the generated module loaded by the lookup layer
GENERATED_MODULE = "mtr_directions.data.mtr_directions_generated"

GENERATOR_COMMAND = "mtr-directions generate"


@dataclass(frozen=True)
class GeneratorSettings:
    """Settings for one generation run."""

    csv_path: Path = field(default=DEFAULT_CSV_PATH)
    output_path: Path = field(default=DEFAULT_OUTPUT_PATH)
    # Fail on patch table entries that matched nothing
    strict: bool = True
    language: Language = DEFAULT_LANGUAGE

    def to_dict(self) -> dict[str, str]:
        """Convert to dict for display."""
        return {
            "csv_path": str(self.csv_path),
            "output_path": str(self.output_path),
            "strict": str(self.strict).lower(),
            "language": self.language,
        }

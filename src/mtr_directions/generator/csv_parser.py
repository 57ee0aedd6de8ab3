"""Parser for the MTR lines-and-stations CSV file."""

import logging
from decimal import Decimal, InvalidOperation
from pathlib import Path

from ..core.models import CsvRow

logger = logging.getLogger(__name__)

CSV_COLUMNS = [
    "Line Code",
    "Direction",
    "Station Code",
    "Station ID",
    "Chinese Name",
    "English Name",
    "Sequence",
]

EXPECTED_FIELDS = len(CSV_COLUMNS)

# Decimal exponent range of a double
MAX_SEQUENCE_EXPONENT = 308


def parse_csv_line(line: str) -> list[str]:
    """Split one CSV line into fields.

    Quoted fields keep embedded commas and lose their surrounding quotes.
    Unquoted fields are trimmed. A trailing separator does not add an
    empty field.

    Args:
        line: A single line of CSV text without the line terminator

    Returns:
        List of field values
    """
    fields: list[str] = []
    i = 0
    length = len(line)

    while i < length:
        if line[i] == '"':
            end = line.find('"', i + 1)
            if end == -1:
                end = length
            fields.append(line[i + 1 : end])
            i = end + 1
        else:
            end = line.find(",", i)
            if end == -1:
                end = length
            fields.append(line[i:end].strip())
            i = end

        if i < length and line[i] == ",":
            i += 1

    return fields


def parse_sequence(text: str) -> Decimal | None:
    """Parse the sequence column, returning None unless it is a finite number.

    Values outside double range are rejected as well.
    """
    try:
        value = Decimal(text.strip())
    except InvalidOperation:
        return None
    if not value.is_finite():
        return None
    if value and abs(value.adjusted()) > MAX_SEQUENCE_EXPONENT:
        return None
    return value


def parse_csv(content: str) -> list[CsvRow]:
    """Parse raw CSV text into rows.

    Strips a leading BOM, normalizes line endings and skips the header.
    Rows with fewer than seven fields or a non-numeric sequence are dropped.
    Source order is preserved.

    Args:
        content: Full CSV file content

    Returns:
        List of CsvRow objects
    """
    normalized = (
        content.removeprefix("\ufeff").replace("\r\n", "\n").replace("\r", "\n")
    )
    data_lines = normalized.strip().split("\n")[1:]

    rows: list[CsvRow] = []
    dropped = 0

    for line_number, line in enumerate(data_lines, start=2):
        trimmed = line.strip()
        if not trimmed:
            continue

        fields = parse_csv_line(trimmed)
        if len(fields) < EXPECTED_FIELDS:
            logger.debug(f"Line {line_number}: dropped, only {len(fields)} fields")
            dropped += 1
            continue

        sequence = parse_sequence(fields[6])
        if sequence is None:
            logger.debug(f"Line {line_number}: dropped, bad sequence {fields[6]!r}")
            dropped += 1
            continue

        rows.append(
            CsvRow(
                line_code=fields[0],
                raw_direction=fields[1],
                station_code=fields[2],
                station_id=fields[3],
                name_zh=fields[4],
                name_en=fields[5],
                sequence=sequence,
            )
        )

    if dropped:
        logger.info(f"Dropped {dropped} malformed rows")

    return rows


def read_csv(file_path: Path) -> list[CsvRow]:
    """Load rows from a CSV file.

    Args:
        file_path: Path to the lines-and-stations CSV

    Returns:
        List of CsvRow objects
    """
    with open(file_path, encoding="utf-8") as csvfile:
        content = csvfile.read()

    rows = parse_csv(content)
    logger.info(f"Parsed {len(rows)} rows from {file_path}")
    return rows

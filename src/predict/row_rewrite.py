"""Input table parsing and output CSV writing.

Every data row of the input maps to exactly one ``0,<stake>`` output row.
A numeric first line is a row-count header and produces no output row.
"""

from __future__ import annotations

from pathlib import Path
import re
from typing import Iterable

from core.constants import DEFAULT_WINNER
from core.errors import PredictorRewriteError
from core.types import InputTable, OutputRecord

_LINE_BREAK_PATTERN = re.compile(r"\r\n|\r|\n")


def read_input_table(input_path: Path) -> InputTable:
    """Read non-blank lines and split off a numeric header.

    Args:
        input_path: Thread CSV path.

    Returns:
        Parsed input table.

    Raises:
        PredictorRewriteError: If the file cannot be read.
    """
    try:
        text = input_path.read_text(encoding="utf-8-sig", errors="replace")
    except OSError as error:
        raise PredictorRewriteError(f"Failed to read {input_path}: {error}") from error
    lines = [line for line in split_text_lines(text) if line.strip()]
    if lines and is_numeric_header(lines[0]):
        return InputTable(path=input_path, rows=tuple(lines[1:]), header=lines[0])
    return InputTable(path=input_path, rows=tuple(lines))


def split_text_lines(text: str) -> list[str]:
    """Split on CR, LF and CRLF only, keeping other control characters in-line."""
    return _LINE_BREAK_PATTERN.split(text)


def is_numeric_header(line: str) -> bool:
    """Return whether a line parses as a floating-point number.

    Digit-group underscores are not accepted.
    """
    text = line.strip()
    if "_" in text:
        return False
    try:
        float(text)
    except ValueError:
        return False
    return True


def build_output_records(table: InputTable, stake: int) -> list[OutputRecord]:
    """Map each input data row onto a default-winner record."""
    return [OutputRecord(winner=DEFAULT_WINNER, stake=stake) for _ in table.rows]


def write_output(output_path: Path, records: Iterable[OutputRecord]) -> int:
    """Write records, truncating any existing output file.

    Args:
        output_path: Destination CSV path.
        records: Records in input row order.

    Returns:
        Number of lines written.

    Raises:
        PredictorRewriteError: If the file cannot be written.
    """
    row_count = 0
    try:
        with output_path.open("w", encoding="utf-8", newline="\n") as handle:
            for record in records:
                handle.write(f"{record.to_line()}\n")
                row_count += 1
    except OSError as error:
        raise PredictorRewriteError(f"Failed to write {output_path}: {error}") from error
    return row_count

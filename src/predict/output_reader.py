"""Parsing and checking of written prediction files."""

from __future__ import annotations

from pathlib import Path

from core.errors import PredictorOutputError
from core.types import OutputRecord


def read_output_records(output_path: Path) -> list[OutputRecord]:
    """Parse an output CSV into typed records.

    Args:
        output_path: Output file to read.

    Returns:
        Records in file order.

    Raises:
        PredictorOutputError: If the file is unreadable or a line is malformed.
    """
    try:
        text = output_path.read_text(encoding="utf-8")
    except OSError as error:
        raise PredictorOutputError(f"Failed to read {output_path}: {error}") from error
    records: list[OutputRecord] = []
    for line_number, line in enumerate(text.splitlines(), 1):
        if not line.strip():
            continue
        records.append(_parse_output_line(output_path, line, line_number))
    return records


def find_stake_mismatches(output_path: Path, expected_stake: int) -> list[int]:
    """Return 1-based record numbers whose stake is not ``expected_stake``."""
    records = read_output_records(output_path)
    return [
        index
        for index, record in enumerate(records, 1)
        if record.stake != expected_stake
    ]


def _parse_output_line(output_path: Path, line: str, line_number: int) -> OutputRecord:
    parts = line.split(",")
    if len(parts) != 2:
        raise PredictorOutputError(
            f"Bad output line at {output_path}:{line_number}: '{line}'. "
            "Expected '<winner>,<stake>'."
        )
    try:
        return OutputRecord(winner=int(parts[0].strip()), stake=int(parts[1].strip()))
    except ValueError as error:
        raise PredictorOutputError(
            f"Bad output line at {output_path}:{line_number}: '{line}'. "
            "Winner and stake must be integers."
        ) from error

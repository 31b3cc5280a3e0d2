"""Shared typed models.

This module defines immutable data models passed between discovery,
stake resolution, rewrite, and the CLI boundary.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Literal

from core.constants import EXIT_CODE_FAILURE, EXIT_CODE_SUCCESS

StakeSource = Literal["config", "default"]
ConversionStatus = Literal["written", "no_input", "failed"]


@dataclass(frozen=True)
class PredictorProfile:
    """Discovery priority and reporting identity for one predictor.

    Attributes:
        name: Profile key, e.g. ``predictor2``.
        tag: Prefix used on console output lines.
        preferred_inputs: Exact input file names, tried in order.
    """

    name: str
    tag: str
    preferred_inputs: tuple[str, ...]


@dataclass(frozen=True)
class StakeResolution:
    """Resolved stake amount and where it came from."""

    stake: int
    source: StakeSource


@dataclass(frozen=True)
class InputTable:
    """Non-blank lines of an input CSV.

    Attributes:
        path: Source file path.
        rows: Data rows in file order.
        header: Numeric first line when present.
    """

    path: Path
    rows: tuple[str, ...]
    header: str | None = None


@dataclass(frozen=True)
class OutputRecord:
    """One ``winner,stake`` output row."""

    winner: int
    stake: int

    def to_line(self) -> str:
        """Render the record as a CSV line without terminator."""
        return f"{self.winner},{self.stake}"


@dataclass(frozen=True)
class ConversionResult:
    """Outcome of one conversion run.

    Attributes:
        status: ``written``, ``no_input`` or ``failed``.
        input_path: Discovered input file, if any.
        output_path: Written output file, if any.
        stake: Stake used for the output rows.
        row_count: Number of output rows written.
        error_message: Failure message for ``failed`` results.
    """

    status: ConversionStatus
    input_path: Path | None = None
    output_path: Path | None = None
    stake: int | None = None
    row_count: int = 0
    error_message: str | None = None

    @property
    def exit_code(self) -> int:
        """Map result status onto a process exit code."""
        if self.status == "failed":
            return EXIT_CODE_FAILURE
        return EXIT_CODE_SUCCESS

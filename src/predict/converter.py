"""End-to-end conversion of one thread CSV into an output CSV.

This module wires discovery, stake resolution, and rewrite together.
It returns a typed result instead of raising so the CLI boundary owns
the mapping onto exit codes.
"""

from __future__ import annotations

from pathlib import Path

from core.config import PredictorConfig
from core.logging_config import get_logger
from core.types import ConversionResult
from predict.discovery import discover_input, output_path_for
from predict.row_rewrite import build_output_records, read_input_table, write_output
from predict.stake_config import resolve_stake

_LOGGER = get_logger(__name__)


def run_conversion(work_dir: Path, config: PredictorConfig | None = None) -> ConversionResult:
    """Convert the discovered thread CSV in ``work_dir``.

    Args:
        work_dir: Directory holding thread CSVs and ``Config.ini``.
        config: Runtime config; built-in defaults when omitted.

    Returns:
        ``written`` after a successful write, ``no_input`` when no
        thread CSV exists, or ``failed`` with the error message.
    """
    active_config = config or PredictorConfig.default()
    try:
        return _convert(work_dir, active_config)
    except Exception as error:
        _LOGGER.debug("conversion_failed", work_dir=str(work_dir), error=str(error))
        return ConversionResult(status="failed", error_message=str(error))


def _convert(work_dir: Path, config: PredictorConfig) -> ConversionResult:
    input_path = discover_input(work_dir, config.profile)
    if input_path is None:
        return ConversionResult(status="no_input")
    output_path = output_path_for(input_path)
    stake = resolve_stake(work_dir).stake
    table = read_input_table(input_path)
    row_count = write_output(output_path, build_output_records(table, stake))
    _LOGGER.info(
        "output_written",
        input_path=str(input_path),
        output_path=str(output_path),
        rows=row_count,
        stake=stake,
    )
    print(f"{config.profile.tag}: wrote {output_path} with stake=${stake}")
    return ConversionResult(
        status="written",
        input_path=input_path,
        output_path=output_path,
        stake=stake,
        row_count=row_count,
    )

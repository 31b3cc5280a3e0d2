"""Predictor CLI entry point.

The command takes no arguments. It converts the thread CSV found in the
current working directory and maps the result onto a process exit code.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Sequence

from core.config import PREDICTOR_PROFILES, PredictorConfig
from core.constants import DEFAULT_PROFILE, EXIT_CODE_FAILURE
from core.errors import PredictorConfigError
from core.logging_config import configure_logging
from predict.converter import run_conversion


def build_parser() -> argparse.ArgumentParser:
    """Build the top-level CLI parser.

    Returns:
        Configured argument parser.
    """
    return argparse.ArgumentParser(
        prog="stake-predictor",
        description=(
            "Write output_<n>.csv with one '0,<stake>' row per row of the "
            "thread_<n>.csv found in the current directory"
        ),
    )


def main(argv: Sequence[str] | None = None) -> int:
    """Run the predictor CLI.

    Args:
        argv: Optional argument vector.

    Returns:
        Process exit code.
    """
    build_parser().parse_args(argv)
    try:
        config = PredictorConfig.from_env()
    except PredictorConfigError as error:
        _report_failure(PREDICTOR_PROFILES[DEFAULT_PROFILE].tag, str(error))
        return EXIT_CODE_FAILURE
    configure_logging(config.log_level)
    result = run_conversion(Path.cwd(), config)
    if result.status == "failed":
        _report_failure(config.profile.tag, result.error_message or "unknown error")
    return result.exit_code


def _report_failure(tag: str, message: str) -> None:
    """Print one tagged diagnostic line to stderr."""
    print(f"{tag} error: {message}", file=sys.stderr)

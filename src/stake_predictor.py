"""Public SDK surface for the stake predictor.

This module provides a stable import path for library users.
It re-exports the conversion entry point and typed models.
"""

from __future__ import annotations

from core.config import PredictorConfig, resolve_profile
from core.types import ConversionResult, InputTable, OutputRecord, PredictorProfile, StakeResolution
from predict.converter import run_conversion
from predict.discovery import discover_input, output_path_for
from predict.output_reader import find_stake_mismatches, read_output_records
from predict.row_rewrite import read_input_table
from predict.stake_config import resolve_stake

__all__ = [
    "ConversionResult",
    "InputTable",
    "OutputRecord",
    "PredictorConfig",
    "PredictorProfile",
    "StakeResolution",
    "discover_input",
    "find_stake_mismatches",
    "output_path_for",
    "read_input_table",
    "read_output_records",
    "resolve_profile",
    "resolve_stake",
    "run_conversion",
]

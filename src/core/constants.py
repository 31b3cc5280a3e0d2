"""Core constants used across predictor modules.

This module centralizes file names, config keys, and exit codes.
Keeping values here avoids magic literals in business logic.
"""

from __future__ import annotations

INPUT_PREFIX = "thread_"
OUTPUT_PREFIX = "output_"
CSV_SUFFIX = ".csv"
INPUT_GLOB_PATTERN = f"{INPUT_PREFIX}*{CSV_SUFFIX}"
THREAD_ONE_FILE_NAME = "thread_1.csv"
THREAD_TWO_FILE_NAME = "thread_2.csv"
CONFIG_FILE_NAME = "Config.ini"
STAKE_CONFIG_KEY = "DefaultStakeAmount"
DEFAULT_STAKE_AMOUNT = 10
MAX_STAKE_AMOUNT = 2**31 - 1
DEFAULT_WINNER = 0
EXIT_CODE_SUCCESS = 0
EXIT_CODE_FAILURE = 2
PREDICTOR_ONE_PROFILE = "predictor1"
PREDICTOR_TWO_PROFILE = "predictor2"
DEFAULT_PROFILE = PREDICTOR_TWO_PROFILE
DEFAULT_LOG_LEVEL = "warning"
SUPPORTED_LOG_LEVELS = ("debug", "info", "warning", "error")
PROFILE_ENV_VAR = "STAKE_PREDICTOR_PROFILE"
LOG_LEVEL_ENV_VAR = "STAKE_PREDICTOR_LOG_LEVEL"

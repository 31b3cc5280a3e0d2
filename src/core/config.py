"""Runtime configuration model for the predictor.

This module owns all environment variable parsing and validation.
Other modules consume a typed config object instead of raw env reads.
"""

from __future__ import annotations

from dataclasses import dataclass
import os

from core.constants import (
    DEFAULT_LOG_LEVEL,
    DEFAULT_PROFILE,
    LOG_LEVEL_ENV_VAR,
    PREDICTOR_ONE_PROFILE,
    PREDICTOR_TWO_PROFILE,
    PROFILE_ENV_VAR,
    SUPPORTED_LOG_LEVELS,
    THREAD_ONE_FILE_NAME,
    THREAD_TWO_FILE_NAME,
)
from core.errors import PredictorConfigError
from core.types import PredictorProfile

PREDICTOR_PROFILES: dict[str, PredictorProfile] = {
    PREDICTOR_ONE_PROFILE: PredictorProfile(
        name=PREDICTOR_ONE_PROFILE,
        tag="Predictor1",
        preferred_inputs=(THREAD_ONE_FILE_NAME, THREAD_TWO_FILE_NAME),
    ),
    PREDICTOR_TWO_PROFILE: PredictorProfile(
        name=PREDICTOR_TWO_PROFILE,
        tag="Predictor2",
        preferred_inputs=(THREAD_TWO_FILE_NAME, THREAD_ONE_FILE_NAME),
    ),
}


@dataclass(frozen=True)
class PredictorConfig:
    """Validated runtime configuration.

    Attributes:
        profile: Discovery order and console tag.
        log_level: Minimum structured log level written to stderr.
    """

    profile: PredictorProfile
    log_level: str

    @classmethod
    def from_env(cls) -> "PredictorConfig":
        """Build config from process environment variables.

        Returns:
            A validated config object.

        Raises:
            PredictorConfigError: If environment values are invalid.
        """
        profile_value = os.getenv(PROFILE_ENV_VAR, DEFAULT_PROFILE)
        log_level_value = os.getenv(LOG_LEVEL_ENV_VAR, DEFAULT_LOG_LEVEL)
        return cls(
            profile=resolve_profile(profile_value),
            log_level=_parse_log_level(log_level_value),
        )

    @classmethod
    def default(cls) -> "PredictorConfig":
        """Return config with built-in defaults, ignoring the environment."""
        return cls(profile=PREDICTOR_PROFILES[DEFAULT_PROFILE], log_level=DEFAULT_LOG_LEVEL)


def resolve_profile(raw_value: str) -> PredictorProfile:
    """Look up a predictor profile by name.

    Args:
        raw_value: Profile name, case-insensitive.

    Returns:
        Matching profile.

    Raises:
        PredictorConfigError: If the name is unknown.
    """
    profile = PREDICTOR_PROFILES.get(raw_value.strip().lower())
    if profile is None:
        raise PredictorConfigError(
            f"Invalid {PROFILE_ENV_VAR} value: expected one of "
            f"{sorted(PREDICTOR_PROFILES)}, got '{raw_value}'."
        )
    return profile


def _parse_log_level(raw_value: str) -> str:
    """Validate the log level environment value.

    Raises:
        PredictorConfigError: If level is unsupported.
    """
    level = raw_value.strip().lower()
    if level not in SUPPORTED_LOG_LEVELS:
        raise PredictorConfigError(
            f"Invalid {LOG_LEVEL_ENV_VAR} value: expected one of "
            f"{SUPPORTED_LOG_LEVELS}, got '{raw_value}'."
        )
    return level

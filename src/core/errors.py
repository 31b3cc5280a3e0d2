"""Predictor exception hierarchy.

This module defines traceable domain errors with clear boundaries.
Each stage raises a specific error type for debuggability.
"""

from __future__ import annotations


class PredictorError(Exception):
    """Base exception for all predictor failures."""


class PredictorConfigError(PredictorError):
    """Raised for invalid runtime configuration."""


class PredictorDiscoveryError(PredictorError):
    """Raised when the working directory cannot be searched."""


class PredictorRewriteError(PredictorError):
    """Raised for input read and output write failures."""


class PredictorOutputError(PredictorError):
    """Raised when an output file holds malformed records."""

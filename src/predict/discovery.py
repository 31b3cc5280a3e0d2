"""Input file discovery in a working directory.

Exact file names from the active profile are tried first. When none
exist, the first ``thread_*.csv`` entry the filesystem enumerates is
used. That fallback order is filesystem-defined and is not sorted.
"""

from __future__ import annotations

from pathlib import Path

from core.constants import CSV_SUFFIX, INPUT_GLOB_PATTERN, INPUT_PREFIX, OUTPUT_PREFIX
from core.errors import PredictorDiscoveryError
from core.logging_config import get_logger
from core.types import PredictorProfile

_LOGGER = get_logger(__name__)


def discover_input(work_dir: Path, profile: PredictorProfile) -> Path | None:
    """Locate the thread CSV to convert.

    Args:
        work_dir: Directory to search.
        profile: Profile supplying the exact-name priority list.

    Returns:
        Path of the selected input, or ``None`` when nothing matches.

    Raises:
        PredictorDiscoveryError: If the directory cannot be listed.
    """
    for file_name in profile.preferred_inputs:
        candidate = work_dir / file_name
        if candidate.is_file():
            _LOGGER.info("input_discovered", path=str(candidate), match="exact")
            return candidate
    fallback = _first_glob_match(work_dir)
    if fallback is None:
        _LOGGER.info("no_input_found", work_dir=str(work_dir))
        return None
    _LOGGER.info("input_discovered", path=str(fallback), match="glob")
    return fallback


def output_path_for(input_path: Path) -> Path:
    """Derive the output path by swapping the ``thread_`` prefix.

    ``thread_3.csv`` becomes ``output_3.csv`` in the same directory.
    """
    output_stem = input_path.stem.replace(INPUT_PREFIX, OUTPUT_PREFIX)
    return input_path.with_name(f"{output_stem}{CSV_SUFFIX}")


def _first_glob_match(work_dir: Path) -> Path | None:
    try:
        for candidate in work_dir.glob(INPUT_GLOB_PATTERN):
            if candidate.is_file():
                return candidate
    except OSError as error:
        raise PredictorDiscoveryError(
            f"Failed to list {work_dir}: {error.strerror or error}"
        ) from error
    return None

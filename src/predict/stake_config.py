"""Stake amount lookup from ``Config.ini``.

Resolution never raises. Missing files, unreadable files, a missing key,
or an invalid value all fall back to the default stake.
"""

from __future__ import annotations

from pathlib import Path
import re

from core.constants import (
    CONFIG_FILE_NAME,
    DEFAULT_STAKE_AMOUNT,
    MAX_STAKE_AMOUNT,
    STAKE_CONFIG_KEY,
)
from core.logging_config import get_logger
from core.types import StakeResolution
from predict.row_rewrite import split_text_lines

_LOGGER = get_logger(__name__)
_STAKE_LINE_PREFIX = f"{STAKE_CONFIG_KEY}="
_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")


def resolve_stake(work_dir: Path) -> StakeResolution:
    """Resolve the stake amount for a working directory.

    Args:
        work_dir: Directory expected to hold ``Config.ini``.

    Returns:
        Configured stake, or the default stake with ``source="default"``.
    """
    config_path = work_dir / CONFIG_FILE_NAME
    try:
        text = config_path.read_text(encoding="utf-8-sig", errors="replace")
    except OSError as error:
        return _fallback(config_path, f"unreadable config: {error}")
    raw_values = _find_stake_values(split_text_lines(text))
    if not raw_values:
        return _fallback(config_path, f"{STAKE_CONFIG_KEY} not set")
    stake = next(
        (value for value in map(parse_stake_value, raw_values) if value is not None),
        None,
    )
    if stake is None:
        return _fallback(config_path, f"no valid {STAKE_CONFIG_KEY} value in {raw_values}")
    _LOGGER.info("stake_resolved", path=str(config_path), stake=stake)
    return StakeResolution(stake=stake, source="config")


def parse_stake_value(raw_value: str) -> int | None:
    """Parse a stake value as a positive 32-bit integer.

    Returns:
        Parsed stake, or ``None`` when the value is not usable.
    """
    text = raw_value.strip()
    if not _INTEGER_PATTERN.fullmatch(text):
        return None
    stake = int(text)
    if stake <= 0 or stake > MAX_STAKE_AMOUNT:
        return None
    return stake


def _find_stake_values(lines: list[str]) -> list[str]:
    # Key lines in file order; the first one with a usable value wins.
    return [
        line[len(_STAKE_LINE_PREFIX):]
        for line in lines
        if line.startswith(_STAKE_LINE_PREFIX)
    ]


def _fallback(config_path: Path, reason: str) -> StakeResolution:
    _LOGGER.debug(
        "stake_fallback",
        path=str(config_path),
        reason=reason,
        stake=DEFAULT_STAKE_AMOUNT,
    )
    return StakeResolution(stake=DEFAULT_STAKE_AMOUNT, source="default")

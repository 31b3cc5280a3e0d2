"""Unit tests for the public SDK surface."""

from __future__ import annotations

from pathlib import Path

import stake_predictor
from tests.fixture_paths import write_lines


def test_sdk_exports_resolve() -> None:
    """Every exported name should be importable from the SDK module."""
    missing = [name for name in stake_predictor.__all__ if not hasattr(stake_predictor, name)]

    assert missing == []


def test_sdk_run_conversion_round_trip(tmp_path: Path) -> None:
    """SDK users should be able to convert and verify a directory."""
    write_lines(tmp_path / "Config.ini", ["DefaultStakeAmount=12"])
    write_lines(tmp_path / "thread_4.csv", ["first", "second"])

    result = stake_predictor.run_conversion(tmp_path)

    assert result.output_path is not None
    assert stake_predictor.find_stake_mismatches(result.output_path, 12) == []


def test_sdk_reads_bom_prefixed_config(tmp_path: Path) -> None:
    """A UTF-8 byte order mark should not hide the first config line."""
    (tmp_path / "Config.ini").write_text("\ufeffDefaultStakeAmount=33\n", encoding="utf-8")

    assert stake_predictor.resolve_stake(tmp_path).stake == 33

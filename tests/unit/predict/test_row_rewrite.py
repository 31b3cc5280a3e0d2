"""Unit tests for input parsing and output writing."""

from __future__ import annotations

from pathlib import Path

import pytest

from core.errors import PredictorRewriteError
from predict.row_rewrite import (
    build_output_records,
    is_numeric_header,
    read_input_table,
    write_output,
)
from tests.fixture_paths import write_lines


def test_read_input_table_skips_numeric_header(tmp_path: Path) -> None:
    """A numeric first line should not count as a data row."""
    input_path = write_lines(tmp_path / "thread_1.csv", ["5", "a", "", "   ", "b"])

    table = read_input_table(input_path)

    assert table.header == "5" and table.rows == ("a", "b")


def test_read_input_table_keeps_text_first_line(tmp_path: Path) -> None:
    """A non-numeric first line should count as a data row."""
    input_path = write_lines(tmp_path / "thread_1.csv", ["abc", "def"])

    table = read_input_table(input_path)

    assert table.header is None and table.rows == ("abc", "def")


def test_read_input_table_handles_empty_file(tmp_path: Path) -> None:
    """An empty input should produce no rows."""
    input_path = tmp_path / "thread_1.csv"
    input_path.write_text("\n\n", encoding="utf-8")

    assert read_input_table(input_path).rows == ()


def test_read_input_table_raises_for_missing_file(tmp_path: Path) -> None:
    """Unreadable inputs should raise a rewrite error."""
    with pytest.raises(PredictorRewriteError):
        read_input_table(tmp_path / "thread_1.csv")


@pytest.mark.parametrize("line", ["5", " 2.5 ", "-1", "1e3"])
def test_is_numeric_header_accepts_numbers(line: str) -> None:
    """Integer and float lines should count as headers."""
    assert is_numeric_header(line)


def test_is_numeric_header_rejects_csv_row() -> None:
    """CSV rows should not count as headers."""
    assert not is_numeric_header("1,2")


def test_is_numeric_header_rejects_digit_underscores() -> None:
    """Underscore digit grouping should not count as a number."""
    assert not is_numeric_header("1_000")


def test_is_numeric_header_accepts_special_floats() -> None:
    """NaN and infinity spellings should count as numeric headers."""
    assert is_numeric_header(" nan ") and is_numeric_header("Infinity")


def test_read_input_table_keeps_control_characters_in_rows(tmp_path: Path) -> None:
    """Only CR, LF and CRLF should separate rows."""
    input_path = tmp_path / "thread_1.csv"
    input_path.write_bytes(b"a\x0cb\r\nc\x1cd\re\x85f\n")

    table = read_input_table(input_path)

    assert table.rows == ("a\x0cb", "c\x1cd", "e\ufffdf")


def test_read_input_table_tolerates_non_utf8_bytes(tmp_path: Path) -> None:
    """Latin-1 player names should still be counted as rows."""
    input_path = tmp_path / "thread_1.csv"
    input_path.write_bytes("3\n101,M\xfcller,Nadal\n102,A,B\n".encode("latin-1"))

    table = read_input_table(input_path)

    assert table.header == "3" and len(table.rows) == 2


def test_write_output_truncates_existing_file(tmp_path: Path) -> None:
    """Output should replace, not append to, an existing file."""
    output_path = write_lines(tmp_path / "output_1.csv", ["old"] * 5)
    input_path = write_lines(tmp_path / "thread_1.csv", ["2", "x", "y"])
    records = build_output_records(read_input_table(input_path), stake=7)

    row_count = write_output(output_path, records)

    assert row_count == 2
    assert output_path.read_text(encoding="utf-8") == "0,7\n0,7\n"


def test_write_output_raises_for_missing_directory(tmp_path: Path) -> None:
    """Write failures should raise a rewrite error."""
    with pytest.raises(PredictorRewriteError):
        write_output(tmp_path / "missing" / "output_1.csv", [])

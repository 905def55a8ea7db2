from __future__ import annotations

from pathlib import Path

from jot_engine.files import TextFileStore, load_lines, save_lines


def test_save_then_load_round_trips_lines(tmp_path: Path) -> None:
    target = tmp_path / "out.txt"

    assert save_lines(str(target), ["a", "b", "c"])
    assert target.read_text() == "a\nb\nc"
    assert load_lines(str(target)) == ["a", "b", "c"]


def test_load_missing_file_yields_single_empty_line(tmp_path: Path) -> None:
    assert TextFileStore().load(str(tmp_path / "missing.txt")) == [""]


def test_load_ignores_trailing_newline_and_carriage_returns(tmp_path: Path) -> None:
    target = tmp_path / "dos.txt"
    target.write_bytes(b"one\r\ntwo\r\n")

    assert load_lines(str(target)) == ["one", "two"]


def test_load_keeps_interior_empty_lines(tmp_path: Path) -> None:
    target = tmp_path / "gaps.txt"
    target.write_text("x\n\n\ny")

    assert load_lines(str(target)) == ["x", "", "", "y"]


def test_empty_file_loads_as_one_empty_line(tmp_path: Path) -> None:
    target = tmp_path / "empty.txt"
    target.write_text("")

    assert load_lines(str(target)) == [""]


def test_save_into_missing_directory_reports_failure(tmp_path: Path) -> None:
    target = tmp_path / "nope" / "out.txt"

    assert TextFileStore().save(str(target), ["a"]) is False
    assert not target.exists()

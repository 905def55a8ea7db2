from __future__ import annotations

import pytest

from jot_engine.config import EditorConfig, parse_command_line


def test_defaults() -> None:
    config = EditorConfig()

    assert config.header_rows == 2
    assert config.guide_column == 90
    assert config.undo_limit == 200
    assert not config.unix_mode


def test_invalid_values_rejected() -> None:
    with pytest.raises(ValueError):
        EditorConfig(guide_column=-1)
    with pytest.raises(ValueError):
        EditorConfig(undo_limit=0)


def test_parse_short_flags() -> None:
    options = parse_command_line(
        ["-u", "-h", "-t", "-g", "72", "notes.txt"], base=EditorConfig()
    )

    assert options.path == "notes.txt"
    assert options.config.unix_mode
    assert not options.config.show_info
    assert not options.config.show_title
    assert options.config.header_rows == 0
    assert options.config.show_guide_column
    assert options.config.guide_column == 72


def test_parse_guide_with_equals_sign() -> None:
    options = parse_command_line(["-g=40"], base=EditorConfig())

    assert options.config.guide_column == 40
    assert options.path is None


def test_bare_guide_flag_keeps_configured_column() -> None:
    base = EditorConfig(show_guide_column=False, guide_column=60)

    options = parse_command_line(["-g"], base=base)

    assert options.config.show_guide_column
    assert options.config.guide_column == 60


def test_negative_switches_turn_features_off() -> None:
    options = parse_command_line(
        ["--no-guide", "--no-line-numbers"], base=EditorConfig()
    )

    assert not options.config.show_guide_column
    assert not options.config.show_line_numbers


def test_line_number_flag_enables_numbers() -> None:
    base = EditorConfig(show_line_numbers=False)

    assert parse_command_line(["-n"], base=base).config.show_line_numbers


def test_from_env_reads_prefixed_variables(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("JOT_ENGINE_UNIX_MODE", "1")
    monkeypatch.setenv("JOT_ENGINE_GUIDE_COLUMN", "80")
    monkeypatch.setenv("JOT_ENGINE_TITLE", "off")
    monkeypatch.setenv("JOT_ENGINE_UNDO_LIMIT", "50")

    config = EditorConfig.from_env()

    assert config.unix_mode
    assert config.guide_column == 80
    assert not config.show_title
    assert config.undo_limit == 50
    assert config.show_info


def test_parse_without_base_uses_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("JOT_ENGINE_INFO", "no")

    options = parse_command_line([])

    assert not options.config.show_info

"""Editor configuration supplied at session start."""

from __future__ import annotations

import argparse
from dataclasses import dataclass
from typing import Optional, Sequence

from jot_engine.runtime.telemetry import env_flag, env_value

DEFAULT_GUIDE_COLUMN = 90
DEFAULT_UNDO_LIMIT = 200


@dataclass(frozen=True, slots=True)
class EditorConfig:
    """Immutable display and behaviour switches for one editing session."""

    unix_mode: bool = False
    show_line_numbers: bool = True
    show_guide_column: bool = True
    guide_column: int = DEFAULT_GUIDE_COLUMN
    show_title: bool = True
    show_info: bool = True
    undo_limit: int = DEFAULT_UNDO_LIMIT

    def __post_init__(self) -> None:
        if self.guide_column < 0:
            raise ValueError("guide_column cannot be negative")
        if self.undo_limit <= 0:
            raise ValueError("undo_limit must be positive")

    @property
    def header_rows(self) -> int:
        return int(self.show_title) + int(self.show_info)

    @classmethod
    def from_env(cls) -> "EditorConfig":
        """Build a config from ``JOT_ENGINE_*`` environment variables."""

        defaults = cls()
        guide_raw = env_value("GUIDE_COLUMN")
        undo_raw = env_value("UNDO_LIMIT")
        return cls(
            unix_mode=env_flag("UNIX_MODE", defaults.unix_mode),
            show_line_numbers=env_flag("LINE_NUMBERS", defaults.show_line_numbers),
            show_guide_column=env_flag("GUIDE", defaults.show_guide_column),
            guide_column=int(guide_raw) if guide_raw else defaults.guide_column,
            show_title=env_flag("TITLE", defaults.show_title),
            show_info=env_flag("INFO", defaults.show_info),
            undo_limit=int(undo_raw) if undo_raw else defaults.undo_limit,
        )


@dataclass(frozen=True, slots=True)
class LaunchOptions:
    config: EditorConfig
    path: Optional[str] = None


def build_parser() -> argparse.ArgumentParser:
    # -h hides the info line, so argparse's own -h is disabled.
    parser = argparse.ArgumentParser(
        prog="jot", description="Minimal terminal text editor.", add_help=False
    )
    parser.add_argument("--help", action="help", help="Show this message and exit")
    parser.add_argument("path", nargs="?", help="File to open")
    parser.add_argument(
        "-u", dest="unix_mode", action="store_true", help="Unix mode (Ctrl+K copies)"
    )
    parser.add_argument(
        "-n", dest="line_numbers", action="store_true", help="Show line numbers"
    )
    parser.add_argument(
        "--no-line-numbers", dest="no_line_numbers", action="store_true"
    )
    parser.add_argument(
        "-h", dest="hide_info", action="store_true", help="Hide the shortcut line"
    )
    parser.add_argument(
        "-t", dest="hide_title", action="store_true", help="Hide the title line"
    )
    parser.add_argument(
        "-g",
        dest="guide_column",
        nargs="?",
        type=int,
        const=-1,
        default=None,
        metavar="COL",
        help="Show the guide column (optionally at COL)",
    )
    parser.add_argument("--no-guide", dest="no_guide", action="store_true")
    return parser


def parse_command_line(
    argv: Optional[Sequence[str]] = None, *, base: Optional[EditorConfig] = None
) -> LaunchOptions:
    """Parse the editor's short flags (``-u -n -h -t -g[=]N``) plus a path."""

    args = build_parser().parse_args(argv)
    config = base or EditorConfig.from_env()

    guide_column = config.guide_column
    show_guide = config.show_guide_column
    if args.guide_column is not None:
        show_guide = True
        if args.guide_column >= 0:
            guide_column = args.guide_column
    if args.no_guide:
        show_guide = False

    show_numbers = config.show_line_numbers or args.line_numbers
    if args.no_line_numbers:
        show_numbers = False

    return LaunchOptions(
        config=EditorConfig(
            unix_mode=config.unix_mode or args.unix_mode,
            show_line_numbers=show_numbers,
            show_guide_column=show_guide,
            guide_column=guide_column,
            show_title=config.show_title and not args.hide_title,
            show_info=config.show_info and not args.hide_info,
            undo_limit=config.undo_limit,
        ),
        path=args.path,
    )


__all__ = [
    "DEFAULT_GUIDE_COLUMN",
    "DEFAULT_UNDO_LIMIT",
    "EditorConfig",
    "LaunchOptions",
    "build_parser",
    "parse_command_line",
]

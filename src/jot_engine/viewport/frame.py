"""Render payload handed to the painting collaborator."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from jot_engine.buffer import Cursor
from jot_engine.config import EditorConfig
from jot_engine.search import Match

from .layout import (
    GuideCell,
    MatchHighlight,
    ScreenPoint,
    ViewportState,
    VisibleLine,
    compute_viewport,
    guide_cells,
    match_highlights,
    visible_lines,
)

TITLE_PREFIX = "Jot - "
UNTITLED = "untitled"


def header_lines(config: EditorConfig, name: Optional[str]) -> List[str]:
    lines: List[str] = []
    if config.show_title:
        lines.append(f"{TITLE_PREFIX}{name or UNTITLED}")
    if config.show_info:
        copy_key = "Ctrl+K" if config.unix_mode else "Ctrl+C"
        info = (
            f"{copy_key} Copy Line  Ctrl+V Paste  Ctrl+D Duplicate  Ctrl+Z Undo"
            "  Ctrl+F Find  Ctrl+R Replace  Ctrl+S Save  Esc Quit"
        )
        if config.show_line_numbers:
            info += "  (Line numbers on)"
        if config.show_guide_column:
            info += f"  (Guide at col {config.guide_column})"
        lines.append(info)
    return lines


@dataclass(frozen=True, slots=True)
class Frame:
    """Everything needed to paint one screen, in screen coordinates."""

    viewport: ViewportState
    header: List[str]
    lines: List[VisibleLine]
    text_cursor: ScreenPoint
    cursor: ScreenPoint
    prompt: List[str] = field(default_factory=list)
    highlights: List[MatchHighlight] = field(default_factory=list)
    guides: List[GuideCell] = field(default_factory=list)
    status: str = ""


def compose_frame(
    lines: Sequence[str],
    cursor: Cursor,
    *,
    config: EditorConfig,
    columns: int,
    rows: int,
    name: Optional[str] = None,
    first_visible_row: int = 0,
    matches: Sequence[Match] = (),
    selected_index: int = -1,
    prompt: Sequence[str] = (),
    prompt_cursor: Optional[ScreenPoint] = None,
    status: str = "",
) -> Frame:
    viewport = compute_viewport(
        total_lines=len(lines),
        cursor_row=cursor[0],
        columns=columns,
        rows=rows,
        config=config,
        reserved_rows=len(prompt),
        first_visible_row=first_visible_row,
    )
    text_cursor = viewport.cursor_position(cursor)
    return Frame(
        viewport=viewport,
        header=[line[:columns] for line in header_lines(config, name)],
        lines=visible_lines(lines, viewport),
        text_cursor=text_cursor,
        cursor=prompt_cursor if prompt_cursor is not None else text_cursor,
        prompt=[line[:columns] for line in prompt],
        highlights=match_highlights(matches, viewport, selected_index),
        guides=guide_cells(viewport, len(lines), config),
        status=status,
    )

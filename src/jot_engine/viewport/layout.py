"""Viewport geometry: scroll window, gutter, and screen coordinates.

Nothing here draws. The functions translate buffer size, cursor, terminal
dimensions and display options into numbers a renderer can paint from.
Screen coordinates are ``(x, y)`` with ``(0, 0)`` at the top-left cell.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence, Tuple

from jot_engine.buffer import Cursor
from jot_engine.config import EditorConfig
from jot_engine.search import Match

ScreenPoint = Tuple[int, int]  # (x, y)

GUTTER_SEPARATOR = ". "


def digit_count(value: int) -> int:
    return len(str(max(1, value)))


def gutter_width(show_line_numbers: bool, total_lines: int) -> int:
    """Widest line number plus the ``". "`` separator, or 0 when hidden."""

    if not show_line_numbers:
        return 0
    return digit_count(total_lines) + len(GUTTER_SEPARATOR)


def available_rows(terminal_rows: int, header_rows: int, reserved_rows: int = 0) -> int:
    """Text rows left after the header, prompt rows and the bottom row."""

    return max(1, terminal_rows - header_rows - reserved_rows - 1)


def scroll_first_row(cursor_row: int, rows: int, first_visible_row: int = 0) -> int:
    """Keep ``first_visible_row`` unless the cursor fell outside the window.

    When it did, the window moves so the cursor sits on the last visible row.
    """

    if first_visible_row <= cursor_row < first_visible_row + rows:
        return first_visible_row
    return max(0, cursor_row - rows + 1)


@dataclass(frozen=True, slots=True)
class ViewportState:
    first_visible_row: int
    gutter_width: int
    total_rows: int
    header_rows: int = 0
    reserved_rows: int = 0
    columns: int = 80

    @property
    def top(self) -> int:
        """Screen row of the first text line."""

        return self.header_rows + self.reserved_rows

    @property
    def text_width(self) -> int:
        return max(0, self.columns - self.gutter_width)

    @property
    def end_row(self) -> int:
        """One past the last buffer row the window can show."""

        return self.first_visible_row + self.total_rows

    def is_row_visible(self, row: int) -> bool:
        return self.first_visible_row <= row < self.end_row

    def clip(self, line: str) -> str:
        return line[: self.text_width]

    def screen_y(self, row: int) -> int:
        return row - self.first_visible_row + self.top

    def cursor_position(self, cursor: Cursor) -> ScreenPoint:
        row, col = cursor
        return (self.gutter_width + col, self.screen_y(row))


def compute_viewport(
    *,
    total_lines: int,
    cursor_row: int,
    columns: int,
    rows: int,
    config: EditorConfig,
    reserved_rows: int = 0,
    first_visible_row: int = 0,
) -> ViewportState:
    header = config.header_rows
    window = available_rows(rows, header, reserved_rows)
    return ViewportState(
        first_visible_row=scroll_first_row(cursor_row, window, first_visible_row),
        gutter_width=gutter_width(config.show_line_numbers, total_lines),
        total_rows=window,
        header_rows=header,
        reserved_rows=reserved_rows,
        columns=max(0, columns),
    )


@dataclass(frozen=True, slots=True)
class VisibleLine:
    row: int
    y: int
    label: str
    text: str


@dataclass(frozen=True, slots=True)
class MatchHighlight:
    index: int
    x: int
    y: int
    width: int
    selected: bool


@dataclass(frozen=True, slots=True)
class GuideCell:
    x: int
    y: int


def number_label(row: int, total_lines: int) -> str:
    """Right-aligned 1-based line number followed by the separator."""

    return f"{row + 1:>{digit_count(total_lines)}}{GUTTER_SEPARATOR}"


def visible_lines(lines: Sequence[str], viewport: ViewportState) -> List[VisibleLine]:
    show_numbers = viewport.gutter_width > 0
    total = len(lines)
    result: List[VisibleLine] = []
    for row in range(viewport.first_visible_row, min(viewport.end_row, total)):
        result.append(
            VisibleLine(
                row=row,
                y=viewport.screen_y(row),
                label=number_label(row, total) if show_numbers else "",
                text=viewport.clip(lines[row]),
            )
        )
    return result


def match_highlights(
    matches: Sequence[Match], viewport: ViewportState, selected_index: int = -1
) -> List[MatchHighlight]:
    highlights: List[MatchHighlight] = []
    for index, match in enumerate(matches):
        if not viewport.is_row_visible(match.row):
            continue
        x = viewport.gutter_width + match.start
        if x < 0 or x >= viewport.columns:
            continue
        highlights.append(
            MatchHighlight(
                index=index,
                x=x,
                y=viewport.screen_y(match.row),
                width=max(0, min(match.length, viewport.columns - x)),
                selected=index == selected_index,
            )
        )
    return highlights


def guide_cells(
    viewport: ViewportState, line_count: int, config: EditorConfig
) -> List[GuideCell]:
    if not config.show_guide_column:
        return []
    x = viewport.gutter_width + config.guide_column
    if x < 0 or x >= viewport.columns:
        return []
    last = min(viewport.end_row, line_count)
    return [
        GuideCell(x=x, y=viewport.screen_y(row))
        for row in range(viewport.first_visible_row, last)
    ]


__all__ = [
    "GUTTER_SEPARATOR",
    "GuideCell",
    "MatchHighlight",
    "ScreenPoint",
    "ViewportState",
    "VisibleLine",
    "available_rows",
    "compute_viewport",
    "digit_count",
    "guide_cells",
    "gutter_width",
    "match_highlights",
    "number_label",
    "scroll_first_row",
    "visible_lines",
]

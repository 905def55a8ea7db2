"""Viewport layout and render frames."""

from .frame import Frame, compose_frame, header_lines
from .layout import (
    GuideCell,
    MatchHighlight,
    ViewportState,
    VisibleLine,
    available_rows,
    compute_viewport,
    digit_count,
    guide_cells,
    gutter_width,
    match_highlights,
    number_label,
    scroll_first_row,
    visible_lines,
)

__all__ = [
    "Frame",
    "GuideCell",
    "MatchHighlight",
    "ViewportState",
    "VisibleLine",
    "available_rows",
    "compose_frame",
    "compute_viewport",
    "digit_count",
    "guide_cells",
    "gutter_width",
    "header_lines",
    "match_highlights",
    "number_label",
    "scroll_first_row",
    "visible_lines",
]

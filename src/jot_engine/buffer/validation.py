"""Cursor validation and clamping helpers shared across buffer services."""

from __future__ import annotations

from typing import Sequence

from .document import BufferDocument
from .state import Cursor
from .sync import BufferValidationError


def ensure_cursor(document: BufferDocument, cursor: Cursor) -> Cursor:
    row, col = cursor
    if row < 0 or row >= document.line_count:
        raise BufferValidationError("Row out of range", cursor=cursor)
    if col < 0 or col > document.line_length(row):
        raise BufferValidationError("Column out of range", cursor=cursor)
    return cursor


def clamp_cursor(lines: Sequence[str], cursor: Cursor) -> Cursor:
    """Pull ``cursor`` back inside ``lines`` (which must not be empty)."""

    row, col = cursor
    row = max(0, min(row, len(lines) - 1))
    col = max(0, min(col, len(lines[row])))
    return (row, col)

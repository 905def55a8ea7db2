"""Buffer façade combining document, cursor state, clipboard, and undo."""

from __future__ import annotations

from contextlib import AbstractContextManager
from dataclasses import dataclass
from typing import ContextManager, Iterable, Optional

from jot_engine.events import Direction
from jot_engine.runtime import telemetry

from .clipboard import Clipboard
from .document import BufferDocument
from .state import BufferState, Cursor
from .sync import BufferMirror
from .undo import UndoStore
from .validation import clamp_cursor, ensure_cursor


@dataclass(slots=True)
class BufferDelta:
    version: int
    cursor: Cursor
    line_count: int
    label: str


class Buffer:
    """Line sequence plus cursor; every content change is undoable.

    Operations are total over valid cursor states: edits at the buffer's
    edges are no-ops or clamp rather than raise.
    """

    def __init__(
        self,
        *,
        name: str = "untitled",
        document: Optional[BufferDocument] = None,
        state: Optional[BufferState] = None,
        clipboard: Optional[Clipboard] = None,
        undo: Optional[UndoStore] = None,
    ) -> None:
        self.name = name
        self.document = document or BufferDocument()
        self.state = state or BufferState()
        self.clipboard = clipboard or Clipboard()
        self.undo_store = undo if undo is not None else UndoStore()
        ensure_cursor(self.document, self.state.cursor)

    @classmethod
    def from_lines(
        cls,
        lines: Iterable[str],
        *,
        name: str = "untitled",
        cursor: Cursor = (0, 0),
        undo: Optional[UndoStore] = None,
        clipboard: Optional[Clipboard] = None,
    ) -> "Buffer":
        return cls(
            name=name,
            document=BufferDocument.from_lines(lines),
            state=BufferState(cursor=cursor),
            undo=undo,
            clipboard=clipboard,
        )

    @classmethod
    def from_text(cls, text: str, *, name: str = "untitled") -> "Buffer":
        return cls(name=name, document=BufferDocument.from_text(text))

    @property
    def lines(self) -> tuple[str, ...]:
        return tuple(self.document.snapshot())

    @property
    def cursor(self) -> Cursor:
        return self.state.cursor

    @property
    def line_count(self) -> int:
        return self.document.line_count

    @property
    def current_line(self) -> str:
        return self.document.get_line(self.state.row)

    def set_cursor(self, row: int, col: int) -> Cursor:
        """Place the cursor explicitly; raises ``BufferValidationError`` if invalid."""

        ensure_cursor(self.document, (row, col))
        self.state.set_cursor(row, col)
        return self.state.cursor

    def mirror(self, *, attributes: Optional[dict[str, str]] = None) -> BufferMirror:
        return BufferMirror(
            lines=self.lines,
            cursor=self.state.cursor,
            version=self.document.version,
            name=self.name,
            attributes=dict(attributes or {}),
        )

    # -- editing -------------------------------------------------------------

    def insert_char(self, ch: str) -> BufferDelta:
        """Insert a single printable character and advance the cursor."""

        if len(ch) != 1:
            raise ValueError("insert_char expects exactly one character")
        return self._insert_inline(ch, label="insert_char")

    def split_line_at_cursor(self) -> BufferDelta:
        row, col = self.state.cursor
        with Transaction(self, "split_line") as tx:
            line = self.document.get_line(row)
            self.document = self.document.update_lines(
                row, row + 1, [line[:col], line[col:]]
            )
            tx.move_to(row + 1, 0)
        return tx.delta

    def delete_backward(self) -> Optional[BufferDelta]:
        """Backspace: delete left of the cursor or merge into the previous line.

        Returns ``None`` at the very start of the buffer, where nothing changes
        and no snapshot is taken.
        """

        row, col = self.state.cursor
        if col > 0:
            with Transaction(self, "delete_char") as tx:
                line = self.document.get_line(row)
                self.document = self.document.set_line(row, line[: col - 1] + line[col:])
                tx.move_to(row, col - 1)
            return tx.delta
        if row == 0:
            return None
        with Transaction(self, "join_lines") as tx:
            previous = self.document.get_line(row - 1)
            current = self.document.get_line(row)
            self.document = self.document.update_lines(
                row - 1, row + 1, [previous + current]
            )
            tx.move_to(row - 1, len(previous))
        return tx.delta

    def paste_at_cursor(self) -> BufferDelta:
        """Insert the clipboard inline; never creates new lines."""

        return self._insert_inline(self.clipboard.paste(), label="paste")

    def duplicate_current_line(self) -> BufferDelta:
        row = self.state.row
        with Transaction(self, "duplicate_line") as tx:
            line = self.document.get_line(row)
            self.document = self.document.update_lines(row + 1, row + 1, [line])
            tx.move_to(row + 1, len(line))
        return tx.delta

    def replace_span(self, row: int, start: int, length: int, text: str) -> BufferDelta:
        """Replace ``length`` characters at ``(row, start)``; cursor ends after ``text``."""

        with Transaction(self, "replace") as tx:
            line = self.document.get_line(row)
            left = line[:start]
            self.document = self.document.set_line(
                row, left + text + line[start + length :]
            )
            tx.move_to(row, len(left) + len(text))
        return tx.delta

    def _insert_inline(self, text: str, *, label: str) -> BufferDelta:
        row, col = self.state.cursor
        with Transaction(self, label) as tx:
            line = self.document.get_line(row)
            self.document = self.document.set_line(row, line[:col] + text + line[col:])
            tx.move_to(row, col + len(text))
        return tx.delta

    # -- navigation and clipboard -------------------------------------------

    def move_cursor(self, direction: Direction) -> Cursor:
        row, col = self.state.cursor
        last_row = self.document.line_count - 1
        if direction is Direction.UP:
            row = max(0, row - 1)
            col = min(col, self.document.line_length(row))
        elif direction is Direction.DOWN:
            row = min(last_row, row + 1)
            col = min(col, self.document.line_length(row))
        elif direction is Direction.LEFT:
            if col > 0:
                col -= 1
            elif row > 0:
                row -= 1
                col = self.document.line_length(row)
        elif direction is Direction.RIGHT:
            if col < self.document.line_length(row):
                col += 1
            elif row < last_row:
                row, col = row + 1, 0
        self.state.set_cursor(row, col)
        return self.state.cursor

    def copy_current_line(self) -> str:
        text = self.current_line
        self.clipboard.copy(text)
        return text

    # -- history -------------------------------------------------------------

    def undo(self) -> bool:
        """Restore the most recent snapshot; ``False`` when history is empty."""

        snapshot = self.undo_store.pop()
        if snapshot is None:
            return False
        lines, cursor = UndoStore.restore(snapshot)
        self.document = self.document.replace(lines=lines, dirty=True)
        self.state.set_cursor(*clamp_cursor(lines, cursor))
        telemetry.record_event(
            "buffer.undo",
            data={"buffer": self.name, "label": snapshot.label, "left": len(self.undo_store)},
        )
        return True


class Transaction(AbstractContextManager["Transaction"]):
    """Snapshot-then-mutate scope for one buffer edit.

    The snapshot is pushed on entry, so it always precedes the mutation it
    protects.
    """

    def __init__(self, buffer: Buffer, label: str) -> None:
        self.buffer = buffer
        self.label = label
        self._span_cm: Optional[ContextManager[object]] = None
        self.delta: Optional[BufferDelta] = None

    def __enter__(self) -> "Transaction":
        self.buffer.undo_store.push(
            self.buffer.document.snapshot(), self.buffer.state.cursor, label=self.label
        )
        self._span_cm = telemetry.span(
            name=f"buffer::{self.label}",
            component=True,
            metadata={"buffer": self.buffer.name},
        )
        self._span_cm.__enter__()
        return self

    def move_to(self, row: int, col: int) -> None:
        state = self.buffer.state
        state.set_cursor(row, col)
        self.delta = BufferDelta(
            version=self.buffer.document.version,
            cursor=state.cursor,
            line_count=self.buffer.document.line_count,
            label=self.label,
        )

    def __exit__(self, exc_type, exc, tb) -> bool:
        if self._span_cm is not None:
            self._span_cm.__exit__(exc_type, exc, tb)
        return False

"""Bounded snapshot history backing undo."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Deque, Optional, Sequence, Tuple

from .state import Cursor
from .validation import clamp_cursor

UNDO_LIMIT = 200


@dataclass(frozen=True, slots=True)
class Snapshot:
    """Whole-buffer capture taken before a mutation."""

    lines: Tuple[str, ...]
    cursor: Cursor
    label: str = ""


class UndoStore:
    """Capacity-bounded stack of snapshots; the oldest entry is evicted first."""

    def __init__(self, capacity: int = UNDO_LIMIT) -> None:
        if capacity <= 0:
            raise ValueError("capacity must be positive")
        self._entries: Deque[Snapshot] = deque(maxlen=capacity)

    @property
    def capacity(self) -> int:
        return self._entries.maxlen or 0

    def __len__(self) -> int:
        return len(self._entries)

    def push(self, lines: Sequence[str], cursor: Cursor, *, label: str = "") -> Snapshot:
        snapshot = Snapshot(lines=tuple(lines), cursor=(cursor[0], cursor[1]), label=label)
        self._entries.append(snapshot)
        return snapshot

    def can_undo(self) -> bool:
        return bool(self._entries)

    def pop(self) -> Optional[Snapshot]:
        if not self._entries:
            return None
        return self._entries.pop()

    def peek(self) -> Optional[Snapshot]:
        if not self._entries:
            return None
        return self._entries[-1]

    @staticmethod
    def restore(snapshot: Snapshot) -> Tuple[Tuple[str, ...], Cursor]:
        """Return the snapshot's lines and its cursor re-clamped against them."""

        lines = snapshot.lines or ("",)
        return lines, clamp_cursor(lines, snapshot.cursor)

"""Line storage for jot_engine buffers."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List, Sequence


@dataclass(slots=True)
class BufferDocument:
    """List-of-lines text storage that always holds at least one line.

    Every edit returns a new document with a bumped version, so a tuple
    obtained from ``snapshot`` never changes underneath its holder.
    """

    _lines: List[str] = field(default_factory=lambda: [""])
    version: int = 0
    dirty: bool = False

    def __post_init__(self) -> None:
        if not self._lines:
            self._lines = [""]

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> "BufferDocument":
        return cls(_lines=list(lines) or [""], version=0, dirty=False)

    @classmethod
    def from_text(cls, text: str) -> "BufferDocument":
        """Split newline-delimited text; a final terminator adds no extra line."""

        if not text:
            return cls()
        lines = text.split("\n")
        if len(lines) > 1 and lines[-1] == "":
            lines.pop()
        return cls.from_lines(line.removesuffix("\r") for line in lines)

    def to_text(self) -> str:
        return "\n".join(self._lines)

    def snapshot(self) -> Sequence[str]:
        """Return the current lines without exposing internal mutability."""

        return tuple(self._lines)

    def replace(
        self, *, lines: Iterable[str], dirty: bool | None = None
    ) -> "BufferDocument":
        """Return a new document holding ``lines`` with a bumped version."""

        updated = BufferDocument(_lines=list(lines) or [""], version=self.version + 1)
        updated.dirty = bool(dirty if dirty is not None else self.dirty)
        return updated

    def update_lines(
        self, start: int, end: int, new_lines: Iterable[str]
    ) -> "BufferDocument":
        """Return a document with ``[start:end]`` replaced by ``new_lines``."""

        lines = list(self._lines)
        lines[start:end] = list(new_lines)
        return BufferDocument(_lines=lines or [""], version=self.version + 1, dirty=True)

    def set_line(self, index: int, text: str) -> "BufferDocument":
        return self.update_lines(index, index + 1, [text])

    @property
    def line_count(self) -> int:
        return len(self._lines)

    def get_line(self, index: int) -> str:
        return self._lines[index]

    def line_length(self, index: int) -> int:
        return len(self._lines[index])

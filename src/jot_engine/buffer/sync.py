"""Adapter boundary types for the collaborators around the buffer."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Protocol, Sequence

from .state import Cursor


@dataclass(slots=True)
class BufferMirror:
    """Host-friendly snapshot describing the current buffer state."""

    lines: tuple[str, ...]
    cursor: Cursor
    version: int
    name: str = "untitled"
    attributes: dict[str, str] = field(default_factory=dict)

    @property
    def text(self) -> str:
        return "\n".join(self.lines)


class FileStore(Protocol):
    """Protocol for the file collaborator used to load and save buffers."""

    def load(self, path: str) -> list[str]:
        """Return the file's lines, or a single empty line if it cannot be read."""
        ...

    def save(self, path: str, lines: Sequence[str]) -> bool:
        """Write ``lines`` joined by newlines; report success without raising."""
        ...


class BufferValidationError(RuntimeError):
    """Raised when a caller places the cursor outside the buffer."""

    def __init__(self, message: str, *, cursor: Optional[Cursor] = None) -> None:
        super().__init__(message)
        self.cursor = cursor

"""Closed set of classified input events consumed by the editing core."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class Direction(str, Enum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


class EventKind(str, Enum):
    PRINTABLE = "printable"
    NAVIGATE = "navigate"
    NEWLINE = "newline"
    DELETE_BACKWARD = "delete_backward"
    COPY = "copy"
    PASTE = "paste"
    DUPLICATE = "duplicate"
    UNDO = "undo"
    SEARCH_START = "search_start"
    REPLACE_START = "replace_start"
    SAVE = "save"
    CANCEL = "cancel"
    QUIT = "quit"


@dataclass(frozen=True, slots=True)
class InputEvent:
    """One classified keystroke.

    ``char`` is set only for ``PRINTABLE`` events and ``direction`` only for
    ``NAVIGATE`` events.
    """

    kind: EventKind
    char: Optional[str] = None
    direction: Optional[Direction] = None

    def __post_init__(self) -> None:
        if self.kind is EventKind.PRINTABLE:
            if self.char is None or not is_printable(self.char):
                raise ValueError("printable events need one printable character")
        elif self.char is not None:
            raise ValueError(f"{self.kind.value} events carry no character")
        if (self.kind is EventKind.NAVIGATE) != (self.direction is not None):
            raise ValueError("direction is required for navigate events only")

    @classmethod
    def printable(cls, char: str) -> "InputEvent":
        return cls(EventKind.PRINTABLE, char=char)

    @classmethod
    def navigate(cls, direction: Direction | str) -> "InputEvent":
        return cls(EventKind.NAVIGATE, direction=Direction(direction))

    @classmethod
    def of(cls, kind: EventKind | str) -> "InputEvent":
        return cls(EventKind(kind))


def is_printable(char: str) -> bool:
    """True for a single character in the printable ASCII range."""

    return len(char) == 1 and 32 <= ord(char) <= 126


__all__ = ["Direction", "EventKind", "InputEvent", "is_printable"]

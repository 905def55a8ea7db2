"""Buffer/cursor model, clipboard, and bounded undo history."""

from .buffer import Buffer, BufferDelta, Transaction
from .clipboard import Clipboard
from .document import BufferDocument
from .state import BufferState, Cursor
from .sync import BufferMirror, BufferValidationError, FileStore
from .undo import UNDO_LIMIT, Snapshot, UndoStore
from .validation import clamp_cursor, ensure_cursor

__all__ = [
    "Buffer",
    "BufferDelta",
    "BufferDocument",
    "BufferMirror",
    "BufferState",
    "BufferValidationError",
    "Clipboard",
    "Cursor",
    "FileStore",
    "Snapshot",
    "Transaction",
    "UNDO_LIMIT",
    "UndoStore",
    "clamp_cursor",
    "ensure_cursor",
]

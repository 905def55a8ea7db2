"""Plain-text file collaborator: newline-delimited lines, no other format."""

from __future__ import annotations

from typing import List, Sequence

from jot_engine.buffer.document import BufferDocument
from jot_engine.runtime import telemetry

ENCODING = "utf-8"


class TextFileStore:
    """Loads and saves buffers; failures are logged and reported, never raised."""

    def __init__(self, *, encoding: str = ENCODING) -> None:
        self.encoding = encoding
        self.logger = telemetry.get_logger("jot_engine.files")

    def load(self, path: str) -> List[str]:
        try:
            with open(path, encoding=self.encoding, errors="replace") as handle:
                text = handle.read()
        except OSError as exc:
            telemetry.record_event(
                "file.load_failed",
                level="warning",
                data={"path": path, "error": exc.__class__.__name__},
            )
            return [""]
        lines = list(BufferDocument.from_text(text).snapshot())
        telemetry.record_event("file.load", data={"path": path, "lines": len(lines)})
        return lines

    def save(self, path: str, lines: Sequence[str]) -> bool:
        try:
            with open(path, "w", encoding=self.encoding, newline="\n") as handle:
                handle.write("\n".join(lines))
        except (OSError, UnicodeEncodeError) as exc:
            telemetry.record_event(
                "file.save_failed",
                level="warning",
                data={"path": path, "error": exc.__class__.__name__},
            )
            return False
        return True


def load_lines(path: str) -> List[str]:
    return TextFileStore().load(path)


def save_lines(path: str, lines: Sequence[str]) -> bool:
    return TextFileStore().save(path, lines)


__all__ = ["ENCODING", "TextFileStore", "load_lines", "save_lines"]

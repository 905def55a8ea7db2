"""Single-slot clipboard holding the most recently copied line."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class Clipboard:
    text: str = ""

    def copy(self, text: str) -> None:
        self.text = text

    def paste(self) -> str:
        return self.text

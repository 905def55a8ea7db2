"""Base classes and shared utilities for editor modes."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Dict, Optional

from jot_engine.buffer import Buffer, FileStore
from jot_engine.config import EditorConfig
from jot_engine.events import InputEvent

DEFAULT_SAVE_NAME = "untitled.txt"


@dataclass(slots=True)
class ModeResult:
    """Result returned from ``Mode.handle_event``."""

    consumed: bool
    switch_to: Optional[str] = None
    status: str = "ok"
    message: Optional[str] = None


@dataclass(slots=True)
class ModeContext:
    """Shared services every mode can access."""

    buffer: Buffer
    config: EditorConfig
    bus: "ModeBus"
    files: FileStore
    path: Optional[str] = None
    extras: Dict[str, object] = field(default_factory=dict)

    @property
    def save_path(self) -> str:
        return self.path or DEFAULT_SAVE_NAME


class ModeBus:
    """Minimal event bus letting modes and hosts exchange structured signals."""

    def __init__(self) -> None:
        self._subscribers: Dict[str, list[Callable[[object], None]]] = {}

    def subscribe(self, event: str, callback: Callable[[object], None]) -> None:
        self._subscribers.setdefault(event, []).append(callback)

    def emit(self, event: str, payload: object | None = None) -> None:
        for callback in self._subscribers.get(event, []):
            callback(payload)


class Mode:
    """Base class all concrete editor modes inherit from."""

    name: str = "mode"

    def __init__(self, context: ModeContext) -> None:
        self.context = context

    def on_enter(
        self, previous: Optional[str]
    ) -> None:  # pragma: no cover - default no-op
        del previous

    def on_exit(
        self, next_mode: Optional[str]
    ) -> None:  # pragma: no cover - default no-op
        del next_mode

    def handle_event(
        self, event: InputEvent
    ) -> ModeResult:  # pragma: no cover - abstract override
        raise NotImplementedError

"""Editing session: owns buffer, history, clipboard and modes for one file."""

from __future__ import annotations

from typing import Iterable, Mapping, Optional

from jot_engine.actions.search import SESSION_KEY
from jot_engine.buffer import Buffer, FileStore, UndoStore
from jot_engine.config import EditorConfig
from jot_engine.events import InputEvent
from jot_engine.files import TextFileStore
from jot_engine.keymaps import (
    UNIX_MODE_FLAG,
    KeyClassifier,
    KeyInput,
    KeymapRegistry,
    load_default_keymaps,
)
from jot_engine.modes import ModeBus, ModeContext, ModeManager, ModeResult
from jot_engine.modes.edit_mode import EditMode
from jot_engine.modes.search_mode import FindMode, ReplaceMode
from jot_engine.runtime import telemetry
from jot_engine.search import SearchSession
from jot_engine.viewport import Frame, compose_frame


class EditorSession:
    """Single-threaded editing session.

    One event is applied at a time; ``frame`` recomputes the layout after
    each one. The scroll position is the only layout state carried between
    frames.
    """

    def __init__(
        self,
        *,
        config: Optional[EditorConfig] = None,
        lines: Optional[Iterable[str]] = None,
        path: Optional[str] = None,
        files: Optional[FileStore] = None,
        registry: Optional[KeymapRegistry] = None,
    ) -> None:
        self.config = config or EditorConfig()
        self.path = path
        self.files: FileStore = files or TextFileStore()
        buffer = Buffer.from_lines(
            lines if lines is not None else [""],
            name=path or "untitled",
            undo=UndoStore(self.config.undo_limit),
        )
        self.bus = ModeBus()
        self.context = ModeContext(
            buffer=buffer,
            config=self.config,
            bus=self.bus,
            files=self.files,
            path=path,
        )
        self.manager = ModeManager(self.context)
        self.manager.register_mode(EditMode)
        self.manager.register_mode(FindMode)
        self.manager.register_mode(ReplaceMode)

        if registry is None:
            registry = KeymapRegistry(logger_name="jot_engine.keymaps")
            load_default_keymaps(registry)
        self.classifier = KeyClassifier(registry, logger_name="jot_engine.keymaps")

        self.running = True
        self.status = ""
        self._first_visible_row = 0
        self.bus.subscribe("session.quit", self._on_quit)

    @classmethod
    def open(
        cls,
        path: str,
        *,
        config: Optional[EditorConfig] = None,
        files: Optional[FileStore] = None,
    ) -> "EditorSession":
        """Load ``path`` (an unreadable file yields one empty line)."""

        store: FileStore = files or TextFileStore()
        return cls(config=config, lines=store.load(path), path=path, files=store)

    @property
    def buffer(self) -> Buffer:
        return self.context.buffer

    @property
    def mode(self) -> str:
        active = self.manager.active_mode
        return active.name if active else "?"

    @property
    def search(self) -> Optional[SearchSession]:
        session = self.context.extras.get(SESSION_KEY)
        return session if isinstance(session, SearchSession) else None

    @property
    def key_flags(self) -> Mapping[str, bool]:
        return {UNIX_MODE_FLAG: self.config.unix_mode}

    def handle_key(self, key: KeyInput) -> Optional[ModeResult]:
        """Classify a host key and apply it; unclassified keys return ``None``."""

        event = self.classifier.classify(key, context=self.key_flags)
        if event is None:
            return None
        return self.handle_event(event)

    def handle_event(self, event: InputEvent) -> ModeResult:
        if not self.running:
            return ModeResult(consumed=False, status="stopped")
        result = self.manager.handle_event(event)
        self.status = result.status
        return result

    def frame(self, columns: int, rows: int) -> Frame:
        buffer = self.buffer
        search = self.search
        extra: dict = {}
        if search is not None:
            extra = {
                "matches": search.matches,
                "selected_index": search.selected_index,
                "prompt": search.prompt_lines(),
                "prompt_cursor": search.prompt_cursor(self.config.header_rows),
            }
        frame = compose_frame(
            buffer.lines,
            buffer.cursor,
            config=self.config,
            columns=columns,
            rows=rows,
            name=self.path,
            first_visible_row=self._first_visible_row,
            status=self.status,
            **extra,
        )
        self._first_visible_row = frame.viewport.first_visible_row
        return frame

    def _on_quit(self, payload: object | None) -> None:
        del payload
        self.running = False
        telemetry.record_event("session.quit", data={"path": self.path or ""})


__all__ = ["EditorSession"]

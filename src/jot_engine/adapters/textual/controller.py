"""UI-agnostic controller wiring an EditorSession into host callbacks."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Iterable, Optional

from jot_engine.keymaps import KeyInput
from jot_engine.modes import ModeResult
from jot_engine.session import EditorSession
from jot_engine.viewport import Frame

DEFAULT_SIZE = (80, 24)


def _noop(*_args, **_kwargs) -> None:  # pragma: no cover - default hook
    return None


@dataclass(slots=True)
class TextualUIHooks:
    """Callbacks invoked by the adapter to update host widgets."""

    update_frame: Callable[[Frame], None]
    update_status: Callable[[str], None] = _noop
    handle_event: Callable[[str, object | None], None] = _noop
    request_exit: Callable[[], None] = _noop
    log: Callable[[str], None] = _noop


class TextualJotAdapter:
    """Bridges host key events and bus events to a Textual-friendly surface."""

    def __init__(
        self,
        session: EditorSession,
        hooks: TextualUIHooks,
        *,
        size: tuple[int, int] = DEFAULT_SIZE,
    ) -> None:
        self.session = session
        self.hooks = hooks
        self.size = size
        self._subscribe_events()
        self.refresh()

    def resize(self, columns: int, rows: int) -> None:
        self.size = (columns, rows)
        self.refresh()

    def handle_textual_key(
        self,
        key: str,
        *,
        text: Optional[str] = None,
        modifiers: Iterable[str] = (),
    ) -> Optional[ModeResult]:
        """Translate a host key into a KeyInput and dispatch it."""

        key_input = KeyInput(key=key, text=text, modifiers=tuple(modifiers))
        self._log_state("key ->", token=key_input.token, text=text)
        result = self.session.handle_key(key_input)
        if result is None:
            self._log_state("ignored <-", token=key_input.token)
            return None
        self.hooks.update_status(result.message or result.status)
        self.refresh()
        self._log_state(
            "result <-",
            consumed=result.consumed,
            status=result.status,
            switch_to=result.switch_to,
        )
        if not self.session.running:
            self.hooks.request_exit()
        return result

    def refresh(self) -> Frame:
        frame = self.session.frame(*self.size)
        self.hooks.update_frame(frame)
        return frame

    def _subscribe_events(self) -> None:
        bus = self.session.bus
        for event in (
            "clipboard.copy",
            "file.save",
            "search.start",
            "search.end",
            "search.replace",
            "session.quit",
        ):
            bus.subscribe(
                event, lambda payload, name=event: self._handle_event(name, payload)
            )

    def _handle_event(self, name: str, payload: object | None) -> None:
        self._log_state("event ->", event=name, payload=payload)
        self.hooks.handle_event(name, payload)

    def _log_state(self, prefix: str, **fields: object) -> None:
        snapshot = self._state_metadata()
        snapshot.update({k: v for k, v in fields.items() if v is not None})
        parts = [prefix]
        for key, value in snapshot.items():
            parts.append(f"{key}={value!r}")
        self.hooks.log(" ".join(parts))

    def _state_metadata(self) -> Dict[str, object]:
        mirror = self.session.buffer.mirror()
        return {
            "mode": self.session.mode,
            "cursor": mirror.cursor,
            "lines": len(mirror.lines),
            "buffer_version": mirror.version,
        }


__all__ = ["TextualJotAdapter", "TextualUIHooks"]

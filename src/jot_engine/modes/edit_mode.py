"""Edit mode: the default mode, applying events to the buffer."""

from __future__ import annotations

from jot_engine.actions.editing import EDIT_HANDLERS
from jot_engine.events import InputEvent

from .base_mode import Mode, ModeResult


class EditMode(Mode):
    name = "edit"

    def handle_event(self, event: InputEvent) -> ModeResult:
        handler = EDIT_HANDLERS.get(event.kind)
        if handler is None:
            return ModeResult(consumed=False, status="miss", message=event.kind.value)
        return handler(self.context, event)

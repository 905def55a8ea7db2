"""Find and replace modes wrapping a SearchSession."""

from __future__ import annotations

from jot_engine.actions.search import SEARCH_HANDLERS, SESSION_KEY
from jot_engine.events import InputEvent
from jot_engine.runtime import telemetry
from jot_engine.search import SearchSession

from .base_mode import Mode, ModeResult


class FindMode(Mode):
    name = "find"
    replace = False

    def on_enter(self, previous: str | None) -> None:
        del previous
        session = SearchSession(self.context.buffer, replace=self.replace)
        self.context.extras[SESSION_KEY] = session
        self.context.bus.emit("search.start", session.kind)

    def on_exit(self, next_mode: str | None) -> None:
        del next_mode
        session = self.context.extras.pop(SESSION_KEY, None)
        if isinstance(session, SearchSession):
            if session.active:
                session.cancel()
            telemetry.record_event(
                "search.end", data={"kind": session.kind, "query": session.query}
            )
            self.context.bus.emit("search.end", session.kind)

    def handle_event(self, event: InputEvent) -> ModeResult:
        handler = SEARCH_HANDLERS.get(event.kind)
        if handler is None:
            return ModeResult(consumed=False, status="ignored", message=event.kind.value)
        return handler(self.context, event)


class ReplaceMode(FindMode):
    name = "replace"
    replace = True

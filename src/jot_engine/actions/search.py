"""Actions driving the active search/replace session."""

from __future__ import annotations

from typing import Dict

from jot_engine.events import Direction, EventKind, InputEvent
from jot_engine.modes.base_mode import ModeContext, ModeResult
from jot_engine.search import SearchSession

from .editing import EventHandler, quit_editor, save

SESSION_KEY = "search_session"


def active_session(context: ModeContext) -> SearchSession:
    session = context.extras.get(SESSION_KEY)
    if not isinstance(session, SearchSession):
        raise RuntimeError("ModeContext.extras missing an active search session")
    return session


def type_char(context: ModeContext, event: InputEvent) -> ModeResult:
    assert event.char is not None
    status = active_session(context).type_char(event.char)
    return ModeResult(consumed=True, status=status)


def backspace(context: ModeContext, event: InputEvent) -> ModeResult:
    del event
    return ModeResult(consumed=True, status=active_session(context).backspace())


def navigate(context: ModeContext, event: InputEvent) -> ModeResult:
    session = active_session(context)
    if event.direction is Direction.UP:
        match = session.previous_match()
    elif event.direction is Direction.DOWN:
        match = session.next_match()
    else:
        return ModeResult(consumed=True, status="ignored")
    if match is None:
        return ModeResult(consumed=True, status="no_match")
    return ModeResult(consumed=True, status="select_match")


def submit(context: ModeContext, event: InputEvent) -> ModeResult:
    del event
    session = active_session(context)
    status = session.submit()
    if status == "replaced":
        context.bus.emit("search.replace", {"query": session.query})
    if not session.active:
        return ModeResult(consumed=True, switch_to="edit", status=status)
    return ModeResult(consumed=True, status=status)


def cancel(context: ModeContext, event: InputEvent) -> ModeResult:
    del event
    status = active_session(context).cancel()
    return ModeResult(consumed=True, switch_to="edit", status=status)


SEARCH_HANDLERS: Dict[EventKind, EventHandler] = {
    EventKind.PRINTABLE: type_char,
    EventKind.DELETE_BACKWARD: backspace,
    EventKind.NAVIGATE: navigate,
    EventKind.NEWLINE: submit,
    EventKind.CANCEL: cancel,
    EventKind.SAVE: save,
    EventKind.QUIT: quit_editor,
}


__all__ = ["SEARCH_HANDLERS", "SESSION_KEY", "active_session"]

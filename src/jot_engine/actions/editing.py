"""Editing verbs bound to event kinds in edit mode."""

from __future__ import annotations

from typing import Callable, Dict

from jot_engine.events import EventKind, InputEvent
from jot_engine.modes.base_mode import ModeContext, ModeResult
from jot_engine.runtime import telemetry

EventHandler = Callable[[ModeContext, InputEvent], ModeResult]


def insert_char(context: ModeContext, event: InputEvent) -> ModeResult:
    assert event.char is not None
    context.buffer.insert_char(event.char)
    return ModeResult(consumed=True, status="insert")


def split_line(context: ModeContext, event: InputEvent) -> ModeResult:
    del event
    context.buffer.split_line_at_cursor()
    return ModeResult(consumed=True, status="split_line")


def delete_backward(context: ModeContext, event: InputEvent) -> ModeResult:
    del event
    if context.buffer.delete_backward() is None:
        return ModeResult(consumed=True, status="noop")
    return ModeResult(consumed=True, status="delete")


def move_cursor(context: ModeContext, event: InputEvent) -> ModeResult:
    assert event.direction is not None
    context.buffer.move_cursor(event.direction)
    return ModeResult(consumed=True, status="move")


def copy_line(context: ModeContext, event: InputEvent) -> ModeResult:
    del event
    text = context.buffer.copy_current_line()
    context.bus.emit("clipboard.copy", text)
    return ModeResult(consumed=True, status="copy")


def paste(context: ModeContext, event: InputEvent) -> ModeResult:
    del event
    context.buffer.paste_at_cursor()
    return ModeResult(consumed=True, status="paste")


def duplicate_line(context: ModeContext, event: InputEvent) -> ModeResult:
    del event
    context.buffer.duplicate_current_line()
    return ModeResult(consumed=True, status="duplicate")


def undo(context: ModeContext, event: InputEvent) -> ModeResult:
    del event
    if context.buffer.undo():
        return ModeResult(consumed=True, status="undo")
    return ModeResult(consumed=True, status="nothing_to_undo")


def save(context: ModeContext, event: InputEvent) -> ModeResult:
    del event
    path = context.save_path
    saved = context.files.save(path, context.buffer.lines)
    if saved:
        context.buffer.document.dirty = False
    telemetry.record_event(
        "file.save",
        level="info" if saved else "warning",
        data={"path": path, "saved": saved},
    )
    context.bus.emit("file.save", {"path": path, "saved": saved})
    return ModeResult(
        consumed=True, status="saved" if saved else "save_failed", message=path
    )


def quit_editor(context: ModeContext, event: InputEvent) -> ModeResult:
    context.bus.emit("session.quit", {"event": event.kind.value})
    return ModeResult(consumed=True, status="quit")


def start_search(context: ModeContext, event: InputEvent) -> ModeResult:
    del context, event
    return ModeResult(consumed=True, switch_to="find", status="search_start")


def start_replace(context: ModeContext, event: InputEvent) -> ModeResult:
    del context, event
    return ModeResult(consumed=True, switch_to="replace", status="replace_start")


EDIT_HANDLERS: Dict[EventKind, EventHandler] = {
    EventKind.PRINTABLE: insert_char,
    EventKind.NAVIGATE: move_cursor,
    EventKind.NEWLINE: split_line,
    EventKind.DELETE_BACKWARD: delete_backward,
    EventKind.COPY: copy_line,
    EventKind.PASTE: paste,
    EventKind.DUPLICATE: duplicate_line,
    EventKind.UNDO: undo,
    EventKind.SEARCH_START: start_search,
    EventKind.REPLACE_START: start_replace,
    EventKind.SAVE: save,
    # Escape leaves the editor when no prompt is open.
    EventKind.CANCEL: quit_editor,
    EventKind.QUIT: quit_editor,
}


__all__ = ["EDIT_HANDLERS", "EventHandler"]

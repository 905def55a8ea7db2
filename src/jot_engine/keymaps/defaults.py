"""Built-in key bindings for the editor."""

from __future__ import annotations

from typing import Iterable

from jot_engine.events import Direction, EventKind, InputEvent

from .models import Binding
from .registry import KeymapRegistry

UNIX_MODE_FLAG = "unix_mode"


def _command(binding_id: str, token: str, kind: EventKind, description: str, **kw) -> Binding:
    return Binding.on(binding_id, token, InputEvent.of(kind), description=description, **kw)


def _arrow(direction: Direction) -> Binding:
    return Binding.on(
        f"navigate.{direction.value}",
        direction.value,
        InputEvent.navigate(direction),
        description=f"Move cursor {direction.value}",
    )


DEFAULT_BINDINGS: tuple[Binding, ...] = (
    _arrow(Direction.UP),
    _arrow(Direction.DOWN),
    _arrow(Direction.LEFT),
    _arrow(Direction.RIGHT),
    _command("edit.newline", "enter", EventKind.NEWLINE, "Split line at cursor"),
    _command("edit.backspace", "backspace", EventKind.DELETE_BACKWARD, "Delete backward"),
    _command("edit.backspace_ctrl_h", "ctrl+h", EventKind.DELETE_BACKWARD, "Delete backward"),
    _command(
        "clipboard.copy",
        "ctrl+c",
        EventKind.COPY,
        "Copy current line",
        when=(f"!{UNIX_MODE_FLAG}",),
    ),
    _command(
        "clipboard.copy_unix",
        "ctrl+k",
        EventKind.COPY,
        "Copy current line (unix mode)",
        when=(UNIX_MODE_FLAG,),
    ),
    _command("clipboard.paste", "ctrl+v", EventKind.PASTE, "Paste at cursor"),
    _command("edit.duplicate", "ctrl+d", EventKind.DUPLICATE, "Duplicate current line"),
    _command("history.undo", "ctrl+z", EventKind.UNDO, "Undo last change"),
    _command("search.find", "ctrl+f", EventKind.SEARCH_START, "Find"),
    _command("search.replace", "ctrl+r", EventKind.REPLACE_START, "Find and replace"),
    _command("file.save", "ctrl+s", EventKind.SAVE, "Save file"),
    _command("session.cancel", "escape", EventKind.CANCEL, "Cancel / leave"),
    _command("session.quit", "ctrl+q", EventKind.QUIT, "Quit"),
)


def load_default_keymaps(
    registry: KeymapRegistry,
    *,
    replace: bool = False,
    extra_bindings: Iterable[Binding] | None = None,
) -> None:
    """Register the built-in bindings, then any extras (which may override)."""

    for binding in DEFAULT_BINDINGS:
        registry.register_binding(binding, replace=replace)

    for binding in extra_bindings or ():
        registry.register_binding(binding, replace=True)


__all__ = ["DEFAULT_BINDINGS", "UNIX_MODE_FLAG", "load_default_keymaps"]

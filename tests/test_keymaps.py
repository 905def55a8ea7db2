from __future__ import annotations

import pytest

from jot_engine.events import Direction, EventKind, InputEvent
from jot_engine.keymaps import (
    DEFAULT_BINDINGS,
    UNIX_MODE_FLAG,
    Binding,
    KeyClassifier,
    KeyInput,
    KeymapConflictError,
    KeymapRegistry,
    KeyStroke,
    load_default_keymaps,
)


def default_classifier() -> KeyClassifier:
    registry = KeymapRegistry()
    load_default_keymaps(registry)
    return KeyClassifier(registry)


def test_keystroke_parse_normalizes_modifiers() -> None:
    stroke = KeyStroke.parse("Shift+Ctrl+Up")

    assert stroke.key == "up"
    assert stroke.modifiers == ("ctrl", "shift")
    assert stroke.token == "ctrl+shift+up"
    assert KeyStroke.parse("+").key == "+"
    assert KeyStroke.parse("ctrl++").token == "ctrl++"


def test_registry_rejects_overlapping_binding() -> None:
    registry = KeymapRegistry()
    registry.register_binding(Binding.on("first", "ctrl+x", InputEvent.of("save")))

    with pytest.raises(KeymapConflictError) as excinfo:
        registry.register_binding(Binding.on("second", "ctrl+x", InputEvent.of("quit")))

    assert [b.id for b in excinfo.value.conflicts] == ["first"]


def test_registry_allows_mutually_exclusive_conditions() -> None:
    registry = KeymapRegistry()
    registry.register_binding(
        Binding.on("a", "ctrl+x", InputEvent.of("save"), when=["flag"])
    )
    registry.register_binding(
        Binding.on("b", "ctrl+x", InputEvent.of("quit"), when=["!flag"])
    )

    assert registry.stats().binding_count == 2
    assert registry.stats().tokens == ("ctrl+x",)


def test_replace_drops_conflicting_bindings() -> None:
    registry = KeymapRegistry()
    registry.register_binding(Binding.on("first", "ctrl+x", InputEvent.of("save")))
    revision = registry.revision()

    registry.register_binding(
        Binding.on("second", "ctrl+x", InputEvent.of("quit")), replace=True
    )

    assert [b.id for b in registry.iter_bindings("ctrl+x")] == ["second"]
    assert registry.revision() == revision + 1
    assert registry.unregister_binding("first") is None


def test_default_keymaps_register_without_conflicts() -> None:
    registry = KeymapRegistry()
    load_default_keymaps(registry)

    assert registry.get_binding("clipboard.copy").token == "ctrl+c"
    assert registry.get_binding("clipboard.copy_unix").token == "ctrl+k"


def test_copy_key_depends_on_unix_mode() -> None:
    classifier = default_classifier()
    ctrl_c = KeyInput("c", ("ctrl",))
    ctrl_k = KeyInput("k", ("ctrl",))

    assert classifier.classify(ctrl_c).kind is EventKind.COPY  # type: ignore[union-attr]
    assert classifier.classify(ctrl_k) is None

    unix = {UNIX_MODE_FLAG: True}
    assert classifier.classify(ctrl_c, context=unix) is None
    assert classifier.classify(ctrl_k, context=unix).kind is EventKind.COPY  # type: ignore[union-attr]


def test_named_keys_classify_to_commands() -> None:
    classifier = default_classifier()

    assert classifier.classify(KeyInput("up")) == InputEvent.navigate(Direction.UP)
    assert classifier.classify(KeyInput("enter")) == InputEvent.of(EventKind.NEWLINE)
    assert classifier.classify(KeyInput("backspace")) == InputEvent.of(
        EventKind.DELETE_BACKWARD
    )
    assert classifier.classify(KeyInput("escape")) == InputEvent.of(EventKind.CANCEL)
    assert classifier.classify(KeyInput("s", ("ctrl",))) == InputEvent.of(EventKind.SAVE)


def test_printable_text_classifies_as_character() -> None:
    classifier = default_classifier()

    assert classifier.classify(KeyInput("a", text="a")) == InputEvent.printable("a")
    assert classifier.classify(KeyInput("A", ("shift",), text="A")) == InputEvent.printable("A")
    assert classifier.classify(KeyInput("space", text=" ")) == InputEvent.printable(" ")


def test_non_ascii_and_unbound_keys_are_ignored() -> None:
    classifier = default_classifier()

    assert classifier.classify(KeyInput("é", text="é")) is None
    assert classifier.classify(KeyInput("tab", text="\t")) is None
    assert classifier.classify(KeyInput("f5")) is None
    assert classifier.classify(KeyInput("x", ("alt",), text="x")) is None


def test_extra_bindings_override_defaults() -> None:
    registry = KeymapRegistry()
    load_default_keymaps(
        registry,
        extra_bindings=[Binding.on("custom.quit", "ctrl+q", InputEvent.of("save"))],
    )
    classifier = KeyClassifier(registry)

    assert classifier.classify(KeyInput("q", ("ctrl",))) == InputEvent.of(EventKind.SAVE)


def test_input_event_validation() -> None:
    with pytest.raises(ValueError):
        InputEvent(EventKind.PRINTABLE)
    with pytest.raises(ValueError):
        InputEvent(EventKind.SAVE, char="x")
    with pytest.raises(ValueError):
        InputEvent(EventKind.NAVIGATE)


def test_default_keymaps_register_every_builtin() -> None:
    registry = KeymapRegistry()

    load_default_keymaps(registry)

    assert registry.stats().binding_count == len(DEFAULT_BINDINGS)
    assert {b.id for b in registry.iter_bindings()} == {b.id for b in DEFAULT_BINDINGS}

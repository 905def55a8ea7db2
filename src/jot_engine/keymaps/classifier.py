"""Classify host key input into editor events."""

from __future__ import annotations

from typing import Mapping, Optional

from jot_engine.events import InputEvent, is_printable
from jot_engine.runtime.telemetry import span

from .models import Binding, KeyInput
from .registry import KeymapRegistry

# Modifiers that turn a character key into a command rather than text.
COMMAND_MODIFIERS = frozenset({"ctrl", "alt", "meta", "super"})


class KeyClassifier:
    """Maps ``KeyInput`` to ``InputEvent`` via registry bindings.

    Bindings win over text; unbound keys that carry one printable character
    (without a command modifier) become ``printable`` events. Anything else
    classifies as ``None`` and is ignored by the session.
    """

    def __init__(
        self, registry: KeymapRegistry, *, logger_name: str | None = None
    ) -> None:
        self._registry = registry
        self._logger_name = logger_name

    @property
    def registry(self) -> KeymapRegistry:
        return self._registry

    def classify(
        self, key: KeyInput, *, context: Optional[Mapping[str, bool]] = None
    ) -> Optional[InputEvent]:
        flags = context or {}
        with span(
            "keymaps::classify",
            logger_name=self._logger_name,
            component="keymaps",
            metadata={"token": key.token},
        ) as handle:
            binding = self._select_binding(key.token, flags)
            if binding is not None:
                handle.add_metadata("binding_id", binding.id)
                return binding.event

            text = key.text
            if text is None and len(key.key) == 1:
                text = key.key
            if (
                text is not None
                and is_printable(text)
                and not COMMAND_MODIFIERS.intersection(key.stroke.modifiers)
            ):
                handle.add_metadata("status", "printable")
                return InputEvent.printable(text)

            handle.add_metadata("status", "ignored")
            return None

    def _select_binding(
        self, token: str, context: Mapping[str, bool]
    ) -> Optional[Binding]:
        candidates = [
            binding
            for binding in self._registry.iter_bindings(token)
            if binding.allows(context)
        ]
        if not candidates:
            return None
        candidates.sort(key=lambda b: (-b.priority, b.id))
        return candidates[0]


__all__ = ["COMMAND_MODIFIERS", "KeyClassifier"]

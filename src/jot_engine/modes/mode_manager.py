"""Mode manager routing events to the edit, find, and replace modes."""

from __future__ import annotations

from typing import Dict, Optional, Type

from jot_engine.events import InputEvent
from jot_engine.runtime import telemetry

from .base_mode import Mode, ModeContext, ModeResult


class ModeManager:
    """Holds the registered modes and forwards each event to the active one.

    A ``switch_to`` in a mode's result is applied after the event, so the
    next event already reaches the new mode.
    """

    def __init__(self, context: ModeContext) -> None:
        self.context = context
        self._modes: Dict[str, Mode] = {}
        self._active: Optional[str] = None
        self._previous: Optional[str] = None
        self.logger = telemetry.get_logger("jot_engine.modes")
        self.context.extras.setdefault("mode_manager", self)

    @property
    def active_mode(self) -> Optional[Mode]:
        return self._modes.get(self._active) if self._active else None

    @property
    def previous_mode(self) -> Optional[str]:
        return self._previous

    def register_mode(self, mode_cls: Type[Mode]) -> Mode:
        """Instantiate ``mode_cls``; the first registered mode becomes active."""

        mode = mode_cls(self.context)
        if mode.name in self._modes:
            raise ValueError(f"Mode '{mode.name}' already registered")
        self._modes[mode.name] = mode
        if self._active is None:
            self._active = mode.name
            mode.on_enter(None)
        return mode

    def switch_mode(self, name: str) -> None:
        target = self._modes.get(name)
        if target is None:
            raise KeyError(f"Unknown mode '{name}'")
        current = self.active_mode
        if current is target:
            return
        if current is not None:
            current.on_exit(name)
        self._previous = self._active
        self._active = name
        target.on_enter(self._previous)
        telemetry.record_event(
            "mode.switch", data={"from": self._previous or "", "to": name}
        )

    def handle_event(self, event: InputEvent) -> ModeResult:
        mode = self.active_mode
        if mode is None:
            raise RuntimeError("No active mode registered")
        with telemetry.span(
            name=f"mode::{mode.name}",
            component=True,
            metadata={"event": event.kind.value, "mode": mode.name},
        ) as handle:
            result = mode.handle_event(event)
            handle.add_metadata("status", result.status)
        if result.switch_to:
            self.switch_mode(result.switch_to)
        return result

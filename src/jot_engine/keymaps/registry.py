"""Keymap registry storing key-to-event bindings."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, Iterator, Optional

from jot_engine.runtime.telemetry import span

from .models import Binding


@dataclass(slots=True)
class RegistryStats:
    """Lightweight snapshot describing registry state."""

    binding_count: int
    tokens: tuple[str, ...]


class KeymapConflictError(RuntimeError):
    """Raised when a new binding conflicts with existing entries."""

    def __init__(self, binding: Binding, conflicts: Iterable[Binding]):
        conflicts_tuple = tuple(conflicts)
        message = (
            f"Binding '{binding.id}' conflicts with {[b.id for b in conflicts_tuple]}"
        )
        super().__init__(message)
        self.binding = binding
        self.conflicts = conflicts_tuple


class KeymapRegistry:
    """Owns bindings, indexed by key token."""

    def __init__(self, *, logger_name: str | None = None) -> None:
        self._bindings: Dict[str, Binding] = {}
        self._token_index: Dict[str, set[str]] = {}
        self._logger_name = logger_name
        self._revision = 0

    def revision(self) -> int:
        return self._revision

    def get_binding(self, binding_id: str) -> Binding:
        try:
            return self._bindings[binding_id]
        except KeyError as exc:
            raise KeyError(f"Binding '{binding_id}' is not registered") from exc

    def register_binding(self, binding: Binding, *, replace: bool = False) -> Binding:
        with span(
            "keymaps::register_binding",
            logger_name=self._logger_name,
            component="keymaps",
            metadata={"binding_id": binding.id, "token": binding.token},
        ) as handle:
            conflicts = self.detect_conflicts(binding)
            if conflicts and not replace:
                handle.add_metadata(
                    "conflicts", ",".join(conflict.id for conflict in conflicts)
                )
                raise KeymapConflictError(binding, conflicts)

            if replace:
                for conflict in conflicts:
                    self._drop(conflict)
                existing = self._bindings.get(binding.id)
                if existing:
                    self._drop(existing)
            elif binding.id in self._bindings:
                raise ValueError(f"Binding id '{binding.id}' already registered")

            self._bindings[binding.id] = binding
            self._token_index.setdefault(binding.token, set()).add(binding.id)
            self._revision += 1
            return binding

    def unregister_binding(self, binding_id: str) -> Optional[Binding]:
        binding = self._bindings.get(binding_id)
        if binding is None:
            return None
        self._drop(binding)
        self._revision += 1
        return binding

    def iter_bindings(self, token: Optional[str] = None) -> Iterator[Binding]:
        if token is None:
            yield from self._bindings.values()
            return
        for binding_id in sorted(self._token_index.get(token, ())):
            yield self._bindings[binding_id]

    def stats(self) -> RegistryStats:
        return RegistryStats(
            binding_count=len(self._bindings),
            tokens=tuple(sorted(self._token_index)),
        )

    def detect_conflicts(self, binding: Binding) -> list[Binding]:
        return [
            existing
            for existing in self.iter_bindings(binding.token)
            if existing.id != binding.id and _contexts_overlap(binding, existing)
        ]

    def _drop(self, binding: Binding) -> None:
        self._bindings.pop(binding.id, None)
        bucket = self._token_index.get(binding.token)
        if bucket is None:
            return
        bucket.discard(binding.id)
        if not bucket:
            self._token_index.pop(binding.token, None)


def _contexts_overlap(left: Binding, right: Binding) -> bool:
    """Two bindings overlap unless some shared flag must differ."""

    left_map = left.when_map
    right_map = right.when_map
    for flag, expected in left_map.items():
        if flag in right_map and right_map[flag] != expected:
            return False
    return True


__all__ = ["KeymapConflictError", "KeymapRegistry", "RegistryStats"]

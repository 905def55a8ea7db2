"""Dataclasses describing key strokes and their event bindings."""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterable, Mapping, Optional

from jot_engine.events import InputEvent


def _normalize_modifiers(modifiers: Iterable[str]) -> tuple[str, ...]:
    values = tuple(m.strip().lower() for m in modifiers if m.strip())
    return tuple(sorted(dict.fromkeys(values)))


def _normalize_key(key: str) -> str:
    # Single characters keep their case; named keys ("Up", "ENTER") do not.
    key = key.strip() if len(key) > 1 else key
    return key if len(key) == 1 else key.lower()


@dataclass(frozen=True, slots=True)
class KeyStroke:
    """Single normalized key press, e.g. ``ctrl+c`` or ``up``."""

    key: str
    modifiers: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if not self.key:
            raise ValueError("key cannot be empty")
        object.__setattr__(self, "key", _normalize_key(self.key))
        object.__setattr__(self, "modifiers", _normalize_modifiers(self.modifiers))

    @property
    def token(self) -> str:
        if self.modifiers:
            modifier = "+".join(self.modifiers)
            return f"{modifier}+{self.key}"
        return self.key

    @classmethod
    def parse(cls, token: str) -> "KeyStroke":
        """Parse ``"ctrl+shift+x"`` style tokens; a lone ``"+"`` is a key."""

        if len(token) == 1:
            return cls(token)
        *modifiers, key = token.split("+")
        if not key:
            key = "+"
            modifiers = modifiers[:-1]
        return cls(key, tuple(modifiers))


@dataclass(frozen=True, slots=True)
class KeyInput:
    """Key event as reported by a host, before classification."""

    key: str
    modifiers: tuple[str, ...] = ()
    text: Optional[str] = None

    @property
    def stroke(self) -> KeyStroke:
        return KeyStroke(self.key, self.modifiers)

    @property
    def token(self) -> str:
        return self.stroke.token


@dataclass(frozen=True, slots=True)
class WhenClause:
    """Simple boolean condition used to gate bindings."""

    flag: str
    expected: bool = True

    def __post_init__(self) -> None:
        if not self.flag:
            raise ValueError("flag cannot be empty")

    @classmethod
    def parse(cls, expression: str) -> "WhenClause":
        expr = expression.strip()
        if not expr:
            raise ValueError("expression cannot be empty")
        expected = True
        if expr.startswith("!"):
            expected = False
            expr = expr[1:]
        return cls(expr, expected)

    def evaluate(self, context: Mapping[str, bool]) -> bool:
        return bool(context.get(self.flag, False)) is self.expected


@dataclass(frozen=True, slots=True)
class Binding:
    """Associates one key stroke with the event it classifies as."""

    id: str
    stroke: KeyStroke
    event: InputEvent
    description: str = ""
    when: tuple[WhenClause, ...] = ()
    priority: int = 0

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("binding id cannot be empty")
        normalized_when = tuple(
            clause if isinstance(clause, WhenClause) else WhenClause.parse(str(clause))
            for clause in self.when
        )
        object.__setattr__(self, "when", normalized_when)

    @classmethod
    def on(
        cls,
        binding_id: str,
        token: str,
        event: InputEvent,
        *,
        description: str = "",
        when: Iterable[str | WhenClause] = (),
        priority: int = 0,
    ) -> "Binding":
        return cls(
            id=binding_id,
            stroke=KeyStroke.parse(token),
            event=event,
            description=description,
            when=tuple(when),  # type: ignore[arg-type]
            priority=priority,
        )

    @property
    def token(self) -> str:
        return self.stroke.token

    @property
    def when_map(self) -> Mapping[str, bool]:
        return MappingProxyType({clause.flag: clause.expected for clause in self.when})

    def allows(self, context: Mapping[str, bool]) -> bool:
        return all(clause.evaluate(context) for clause in self.when)


__all__ = ["Binding", "KeyInput", "KeyStroke", "WhenClause"]

"""Declarative key bindings and keystroke classification."""

from .classifier import COMMAND_MODIFIERS, KeyClassifier
from .defaults import DEFAULT_BINDINGS, UNIX_MODE_FLAG, load_default_keymaps
from .models import Binding, KeyInput, KeyStroke, WhenClause
from .registry import KeymapConflictError, KeymapRegistry, RegistryStats

__all__ = [
    "Binding",
    "COMMAND_MODIFIERS",
    "DEFAULT_BINDINGS",
    "KeyClassifier",
    "KeyInput",
    "KeyStroke",
    "KeymapConflictError",
    "KeymapRegistry",
    "RegistryStats",
    "UNIX_MODE_FLAG",
    "WhenClause",
    "load_default_keymaps",
]

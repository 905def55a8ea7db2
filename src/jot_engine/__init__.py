"""Editing core of a minimal terminal text editor."""

__all__ = [
    "actions",
    "adapters",
    "buffer",
    "config",
    "events",
    "files",
    "keymaps",
    "modes",
    "runtime",
    "search",
    "session",
    "viewport",
]

__version__ = "0.1.0"

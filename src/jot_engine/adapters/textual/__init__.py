"""Textual host for the editor."""

from .controller import TextualJotAdapter, TextualUIHooks

__all__ = ["TextualJotAdapter", "TextualUIHooks"]

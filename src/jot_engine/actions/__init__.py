"""Verbs executed by modes for each classified event."""

from .editing import EDIT_HANDLERS, EventHandler
from .search import SEARCH_HANDLERS, SESSION_KEY, active_session

__all__ = [
    "EDIT_HANDLERS",
    "EventHandler",
    "SEARCH_HANDLERS",
    "SESSION_KEY",
    "active_session",
]

"""Match engine and interactive search/replace sessions."""

from .matches import Match, find_all
from .session import FIND_LABEL, REPLACE_LABEL, SearchPhase, SearchSession

__all__ = [
    "FIND_LABEL",
    "Match",
    "REPLACE_LABEL",
    "SearchPhase",
    "SearchSession",
    "find_all",
]

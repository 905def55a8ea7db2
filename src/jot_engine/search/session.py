"""Interactive find / find-and-replace state machine."""

from __future__ import annotations

from enum import Enum
from typing import List, Optional, Tuple

from jot_engine.buffer import Buffer
from jot_engine.runtime import telemetry

from .matches import Match, find_all

FIND_LABEL = "Find: "
REPLACE_LABEL = "Replace: "


class SearchPhase(str, Enum):
    QUERY = "query"
    REPLACEMENT = "replacement"
    CLOSED = "closed"


class SearchSession:
    """Coordinates query input, match navigation, and replacement commits.

    A find session only has the ``query`` phase. A replace session moves to
    the ``replacement`` phase once a non-empty query is submitted and stays
    there, replacing one match per submit, until cancelled.
    """

    def __init__(self, buffer: Buffer, *, replace: bool = False) -> None:
        self.buffer = buffer
        self.replace = replace
        self.query = ""
        self.replacement = ""
        self.phase = SearchPhase.QUERY
        self._selected = -1
        self._matches: List[Match] = []
        self._source: Tuple[str, int] | None = None

    @property
    def kind(self) -> str:
        return "replace" if self.replace else "find"

    @property
    def active(self) -> bool:
        return self.phase is not SearchPhase.CLOSED

    @property
    def reserved_rows(self) -> int:
        return 2 if self.replace else 1

    @property
    def matches(self) -> tuple[Match, ...]:
        self._refresh()
        return tuple(self._matches)

    @property
    def selected_index(self) -> int:
        self._refresh()
        return self._selected

    @property
    def selected_match(self) -> Optional[Match]:
        index = self.selected_index
        if index < 0:
            return None
        return self._matches[index]

    def _refresh(self) -> None:
        # Matches follow both the query and the buffer version.
        source = (self.query, self.buffer.document.version)
        if source != self._source:
            self._matches = find_all(self.buffer.lines, self.query)
            self._source = source
        if not self._matches:
            self._selected = -1
        elif self._selected < 0:
            self._selected = 0
        elif self._selected >= len(self._matches):
            self._selected = len(self._matches) - 1

    # -- text input ----------------------------------------------------------

    def type_char(self, ch: str) -> str:
        if self.phase is SearchPhase.REPLACEMENT:
            self.replacement += ch
            return "editing"
        self.query += ch
        self._selected = -1
        return "editing"

    def backspace(self) -> str:
        if self.phase is SearchPhase.REPLACEMENT:
            self.replacement = self.replacement[:-1]
        else:
            self.query = self.query[:-1]
        return "editing"

    # -- navigation ----------------------------------------------------------

    def next_match(self) -> Optional[Match]:
        self._refresh()
        if not self._matches:
            return None
        self._selected = (self._selected + 1) % len(self._matches)
        return self._jump_to_selected()

    def previous_match(self) -> Optional[Match]:
        self._refresh()
        if not self._matches:
            return None
        if self._selected <= 0:
            self._selected = len(self._matches) - 1
        else:
            self._selected -= 1
        return self._jump_to_selected()

    def _jump_to_selected(self) -> Match:
        match = self._matches[self._selected]
        self.buffer.set_cursor(match.row, match.start)
        return match

    # -- commit / cancel -----------------------------------------------------

    def submit(self) -> str:
        if self.phase is SearchPhase.CLOSED:
            return "closed"
        if not self.replace:
            if self.selected_match is not None:
                self._jump_to_selected()
            self.phase = SearchPhase.CLOSED
            return "find_done"
        if self.phase is SearchPhase.QUERY:
            if not self.query:
                self.phase = SearchPhase.CLOSED
                return "closed"
            self.phase = SearchPhase.REPLACEMENT
            self._selected = -1
            return "replacement_phase"
        return self._replace_selected()

    def _replace_selected(self) -> str:
        match = self.selected_match
        if match is None:
            return "no_match"
        self.buffer.replace_span(match.row, match.start, match.length, self.replacement)
        telemetry.record_event(
            "search.replace",
            data={"row": match.row, "start": match.start, "query": self.query},
        )
        self._selected = -1
        return "replaced"

    def cancel(self) -> str:
        self.phase = SearchPhase.CLOSED
        return "cancelled"

    # -- prompt --------------------------------------------------------------

    def prompt_lines(self) -> List[str]:
        lines = [f"{FIND_LABEL}{self.query}"]
        if self.replace:
            lines.append(f"{REPLACE_LABEL}{self.replacement}")
        return lines

    def prompt_cursor(self, header_rows: int) -> Tuple[int, int]:
        """Screen position where typed input continues."""

        if self.phase is SearchPhase.REPLACEMENT:
            return (len(REPLACE_LABEL) + len(self.replacement), header_rows + 1)
        return (len(FIND_LABEL) + len(self.query), header_rows)


__all__ = ["SearchPhase", "SearchSession", "FIND_LABEL", "REPLACE_LABEL"]

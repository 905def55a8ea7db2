"""Non-overlapping substring search over buffer lines."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence


@dataclass(frozen=True, slots=True)
class Match:
    row: int
    start: int
    length: int

    @property
    def end(self) -> int:
        return self.start + self.length


def find_all(lines: Sequence[str], query: str) -> List[Match]:
    """Return every occurrence of ``query`` ordered by (row, start).

    Scanning resumes after the end of each hit, so matches on one line never
    overlap. An empty query matches nothing.
    """

    if not query:
        return []
    size = len(query)
    found: List[Match] = []
    for row, line in enumerate(lines):
        offset = line.find(query)
        while offset != -1:
            found.append(Match(row=row, start=offset, length=size))
            offset = line.find(query, offset + size)
    return found


__all__ = ["Match", "find_all"]

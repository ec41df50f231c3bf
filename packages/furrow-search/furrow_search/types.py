"""Shared enums, errors, and callback types for furrow-search."""
from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from furrow_grid import Cell


class Algorithm(Enum):
    """Search strategy. Values match the names a UI selector would send."""

    DIJKSTRA = "dijkstra"
    ASTAR = "astar"

    @property
    def label(self) -> str:
        return _LABELS[self]

    @classmethod
    def parse(cls, value: Algorithm | str) -> Algorithm:
        """Accept an Algorithm or its (case-insensitive) string value."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            names = ", ".join(repr(a.value) for a in cls)
            raise ValueError(f"Unknown algorithm {value!r}, expected one of {names}") from None


_LABELS = {
    Algorithm.DIJKSTRA: "Dijkstra's Algorithm",
    Algorithm.ASTAR: "A* Search",
}


class SearchStatus(Enum):
    """Lifecycle of a SearchSession."""

    PENDING = "pending"
    RUNNING = "running"
    FOUND = "found"
    NO_PATH = "no_path"
    CANCELLED = "cancelled"
    ERROR = "error"

    @property
    def finished(self) -> bool:
        return self not in (SearchStatus.PENDING, SearchStatus.RUNNING)


class FailReason(Enum):
    NO_PATH = "no_path"
    CANCELLED = "cancelled"


class MissingEndpointsError(ValueError):
    """Raised when a search is requested on a grid without both Start and End."""

    def __init__(self, has_start: bool, has_end: bool) -> None:
        self.has_start = has_start
        self.has_end = has_end
        missing = [name for name, ok in (("start", has_start), ("end", has_end)) if not ok]
        super().__init__(f"Cannot search: grid has no {' or '.join(missing)} cell")


class SearchInvariantError(AssertionError):
    """Raised when search bookkeeping contradicts itself (a heuristic or relaxation bug)."""


VisitCallback = Callable[["Cell"], None]
PathCallback = Callable[[list["Cell"]], None]

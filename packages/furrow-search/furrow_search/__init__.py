"""furrow-search - Stepwise Dijkstra and A* over furrow grids."""
from __future__ import annotations

from furrow_search.config import SearchConfig
from furrow_search.events import Done, Event, Failed, Revealed, Visited
from furrow_search.heuristics import heuristic_for, manhattan, zero
from furrow_search.pathfinder import Pathfinder
from furrow_search.search import SearchState, explore, reconstruct_path
from furrow_search.session import SearchSession
from furrow_search.systems import make_search_system
from furrow_search.types import (
    Algorithm,
    FailReason,
    MissingEndpointsError,
    SearchInvariantError,
    SearchStatus,
)

__all__ = [
    "Algorithm",
    "Done",
    "Event",
    "Failed",
    "FailReason",
    "MissingEndpointsError",
    "Pathfinder",
    "Revealed",
    "SearchConfig",
    "SearchInvariantError",
    "SearchSession",
    "SearchState",
    "SearchStatus",
    "Visited",
    "explore",
    "heuristic_for",
    "make_search_system",
    "manhattan",
    "reconstruct_path",
    "zero",
]

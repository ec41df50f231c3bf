"""SearchSession - a cancellable, steppable handle on one search run."""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from furrow_search.events import Done, Event, Failed, Revealed, Visited
from furrow_search.heuristics import heuristic_for
from furrow_search.search import SearchState, explore
from furrow_search.types import (
    Algorithm,
    FailReason,
    MissingEndpointsError,
    PathCallback,
    SearchStatus,
    VisitCallback,
)

if TYPE_CHECKING:
    from furrow_grid import Cell, Coord, Grid

logger = logging.getLogger(__name__)


class SearchSession:
    """Drives ``explore`` one event at a time and dispatches callbacks.

    ``on_visit`` fires once per expanded non-terminal cell, ``on_reveal``
    once per cell marked PATH, and ``on_path_found`` exactly once on
    success. Nothing fires for a cancelled run or when no path exists.
    """

    def __init__(
        self,
        grid: Grid,
        algorithm: Algorithm | str = Algorithm.ASTAR,
        on_visit: VisitCallback | None = None,
        on_path_found: PathCallback | None = None,
        on_reveal: VisitCallback | None = None,
    ) -> None:
        start, end = grid.start, grid.end
        if start is None or end is None:
            raise MissingEndpointsError(start is not None, end is not None)

        self._grid = grid
        self._algorithm = Algorithm.parse(algorithm)
        self._on_visit = on_visit
        self._on_path_found = on_path_found
        self._on_reveal = on_reveal
        self._state = SearchState()
        self._events = explore(grid, start, end, heuristic_for(self._algorithm), self._state)
        self._status = SearchStatus.PENDING
        self._path: list[Cell] | None = None
        self._visited_count = 0
        self._start_coord = start.coord
        self._end_coord = end.coord

    # --- Properties ---

    @property
    def grid(self) -> Grid:
        return self._grid

    @property
    def algorithm(self) -> Algorithm:
        return self._algorithm

    @property
    def status(self) -> SearchStatus:
        return self._status

    @property
    def finished(self) -> bool:
        return self._status.finished

    @property
    def running(self) -> bool:
        return not self._status.finished

    @property
    def cancel_requested(self) -> bool:
        return self._state.cancelled

    @property
    def path(self) -> list[Cell] | None:
        """The Start -> End path once found, else None."""
        return self._path

    @property
    def visited_count(self) -> int:
        return self._visited_count

    @property
    def frontier(self) -> frozenset[Coord]:
        """Coordinates currently in the open set."""
        return frozenset(self._state.open_set)

    @property
    def explored(self) -> frozenset[Coord]:
        """Coordinates already expanded (the closed set)."""
        return frozenset(self._state.closed)

    # --- Control ---

    def stop(self) -> None:
        """Request cancellation. Takes effect on the next step; idempotent."""
        if self.finished or self._state.cancelled:
            return
        self._state.stop()
        logger.debug("%s cancel requested after %d visits", self._algorithm.label, self._visited_count)

    def step(self) -> Event | None:
        """Advance one event and dispatch it. Returns None once finished."""
        if self.finished:
            return None
        if self._status is SearchStatus.PENDING:
            self._status = SearchStatus.RUNNING
            logger.info(
                "starting %s from %s to %s",
                self._algorithm.label, self._start_coord, self._end_coord,
            )

        try:
            event = next(self._events)
        except Exception:
            self._finish(SearchStatus.ERROR)
            raise
        self._dispatch(event)
        return event

    def run_to_end(self) -> list[Cell] | None:
        """Step until finished without pacing. Returns the path or None."""
        while not self.finished:
            self.step()
        return self._path

    # --- Internals ---

    def _dispatch(self, event: Event) -> None:
        if isinstance(event, Visited):
            self._visited_count += 1
            if self._on_visit is not None:
                self._on_visit(event.cell)
        elif isinstance(event, Revealed):
            if self._on_reveal is not None:
                self._on_reveal(event.cell)
        elif isinstance(event, Done):
            self._path = event.path
            self._finish(SearchStatus.FOUND)
            if self._on_path_found is not None:
                self._on_path_found(event.path)
        elif isinstance(event, Failed):
            if event.reason is FailReason.CANCELLED:
                self._finish(SearchStatus.CANCELLED)
            else:
                self._finish(SearchStatus.NO_PATH)

    def _finish(self, status: SearchStatus) -> None:
        self._status = status
        self._events.close()
        logger.info(
            "%s finished: %s (visited=%d)",
            self._algorithm.label, status.value, self._visited_count,
        )

"""Pathfinder - one active search per grid, paced by a furrow Engine."""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from furrow import Engine

from furrow_search.config import SearchConfig
from furrow_search.session import SearchSession
from furrow_search.systems import make_search_system
from furrow_search.types import Algorithm, MissingEndpointsError, PathCallback, VisitCallback

if TYPE_CHECKING:
    from furrow_grid import Cell, Grid

logger = logging.getLogger(__name__)


class Pathfinder:
    """Owns the search sessions run against one Grid.

    Starting a new search while another is active cancels the old one and
    waits for it to wind down before the grid is touched, so two sessions
    never write to the same cells.
    """

    def __init__(
        self,
        grid: Grid,
        on_visit: VisitCallback | None = None,
        on_path_found: PathCallback | None = None,
        on_reveal: VisitCallback | None = None,
        config: SearchConfig | None = None,
    ) -> None:
        self._grid = grid
        self._on_visit = on_visit
        self._on_path_found = on_path_found
        self._on_reveal = on_reveal
        self._config = config if config is not None else SearchConfig()
        self._session: SearchSession | None = None

    @property
    def grid(self) -> Grid:
        return self._grid

    @property
    def config(self) -> SearchConfig:
        return self._config

    @property
    def session(self) -> SearchSession | None:
        """The most recent session, finished or not."""
        return self._session

    @property
    def is_running(self) -> bool:
        return self._session is not None and self._session.running

    def start(self, algorithm: Algorithm | str = Algorithm.ASTAR) -> SearchSession:
        """Clear the previous visualization and return a fresh session.

        Raises MissingEndpointsError, with nothing changed, if the grid lacks
        a Start or End; ValueError for an unknown algorithm.
        """
        algorithm = Algorithm.parse(algorithm)
        if self._grid.start is None or self._grid.end is None:
            raise MissingEndpointsError(self._grid.start is not None, self._grid.end is not None)

        self._cancel_active()
        self._grid.reset_path()
        self._session = SearchSession(
            self._grid,
            algorithm,
            on_visit=self._on_visit,
            on_path_found=self._on_path_found,
            on_reveal=self._on_reveal,
        )
        return self._session

    def run(self, algorithm: Algorithm | str = Algorithm.ASTAR) -> list[Cell] | None:
        """Run a search to completion, pausing ``config.delay_ms`` per step.

        Returns the Start -> End path, or None when there is no path or the
        run was stopped.
        """
        session = self.start(algorithm)
        engine = Engine(delay_ms=self._config.delay_ms)
        engine.add_system(make_search_system(session))
        steps = engine.run()
        logger.debug("%s run took %d steps", session.algorithm.label, steps)
        return session.path

    def stop(self) -> None:
        """Request cancellation of the active session, if any. Idempotent."""
        if self._session is not None:
            self._session.stop()

    def _cancel_active(self) -> None:
        session = self._session
        if session is None or session.finished:
            return
        session.stop()
        # Let the old run observe the flag before the grid is reset.
        session.run_to_end()

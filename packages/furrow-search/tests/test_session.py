"""
Test suite for SearchSession.

Tests cover:
- Precondition failure on missing endpoints
- Status transitions and step() after completion or a search error
- Callback counts for success, no path and cancellation
- stop() idempotence and effect before the first step
- frontier / explored views
"""
from __future__ import annotations

from unittest.mock import patch

import pytest

from furrow_grid import CellType, Grid, parse_layout
from furrow_search import (
    Algorithm,
    Done,
    Failed,
    FailReason,
    MissingEndpointsError,
    SearchInvariantError,
    SearchSession,
    SearchStatus,
    Visited,
)


class Recorder:
    def __init__(self) -> None:
        self.visited = []
        self.revealed = []
        self.paths = []

    def session(self, grid: Grid, algorithm=Algorithm.ASTAR) -> SearchSession:
        return SearchSession(
            grid,
            algorithm,
            on_visit=self.visited.append,
            on_path_found=self.paths.append,
            on_reveal=self.revealed.append,
        )


class TestPreconditions:
    def test_missing_both(self) -> None:
        with pytest.raises(MissingEndpointsError) as exc:
            SearchSession(Grid(5, 5))
        assert exc.value.has_start is False
        assert exc.value.has_end is False

    def test_missing_end_only(self) -> None:
        grid = Grid(5, 5)
        grid.set_cell_type(0, 0, CellType.START)
        with pytest.raises(MissingEndpointsError, match="end"):
            SearchSession(grid)

    def test_missing_endpoints_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            SearchSession(Grid(5, 5))

    def test_no_state_touched(self) -> None:
        grid = Grid(5, 5)
        grid.set_cell_type(1, 1, CellType.VISITED)
        with pytest.raises(MissingEndpointsError):
            SearchSession(grid)
        assert grid.get_cell(1, 1).type is CellType.VISITED

    def test_unknown_algorithm(self, open_grid) -> None:
        with pytest.raises(ValueError, match="Unknown algorithm"):
            SearchSession(open_grid, "greedy")


class TestLifecycle:
    def test_status_transitions(self, open_grid) -> None:
        session = SearchSession(open_grid)
        assert session.status is SearchStatus.PENDING
        assert session.running
        session.step()
        assert session.status is SearchStatus.RUNNING
        session.run_to_end()
        assert session.status is SearchStatus.FOUND
        assert session.finished
        assert not session.running

    def test_step_after_finish_returns_none(self, open_grid) -> None:
        session = SearchSession(open_grid)
        session.run_to_end()
        assert session.step() is None

    def test_run_to_end_returns_path(self, open_grid) -> None:
        session = SearchSession(open_grid, "dijkstra")
        path = session.run_to_end()
        assert path is session.path
        assert len(path) == 9
        assert session.algorithm is Algorithm.DIJKSTRA

    def test_search_error_finishes_session(self, open_grid) -> None:
        with patch("furrow_search.session.heuristic_for", return_value=lambda a, b: -1):
            session = SearchSession(open_grid)
        with pytest.raises(SearchInvariantError, match="negative"):
            session.step()
        assert session.status is SearchStatus.ERROR
        assert session.finished
        assert session.step() is None
        assert session.run_to_end() is None

    def test_step_returns_events(self) -> None:
        session = SearchSession(parse_layout("S.E"))
        first = session.step()
        assert isinstance(first, Visited)
        assert first.cell.coord == (0, 1)
        events = [session.step() for _ in range(2)]
        assert isinstance(events[-1], Done)


class TestCallbacks:
    @pytest.mark.parametrize("algorithm", list(Algorithm))
    def test_success(self, algorithm, open_grid) -> None:
        rec = Recorder()
        session = rec.session(open_grid, algorithm)
        session.run_to_end()

        assert len(rec.paths) == 1
        assert rec.paths[0] is session.path
        assert len(rec.visited) == session.visited_count
        assert len(set(map(id, rec.visited))) == len(rec.visited)
        assert rec.revealed == session.path[1:-1]
        assert all(c.type is CellType.PATH for c in rec.revealed)

    def test_path_found_after_all_cells_marked(self, open_grid) -> None:
        seen = []

        def on_path_found(path):
            seen.append([c.type for c in path[1:-1]])

        SearchSession(open_grid, on_path_found=on_path_found).run_to_end()
        assert seen == [[CellType.PATH] * 7]

    def test_no_path(self) -> None:
        grid = parse_layout("S.#.E")
        rec = Recorder()
        session = rec.session(grid)
        assert session.run_to_end() is None
        assert session.status is SearchStatus.NO_PATH
        assert rec.paths == []
        assert rec.revealed == []
        assert [c.coord for c in rec.visited] == [(0, 1)]

    def test_cancel_mid_run(self, open_grid) -> None:
        rec = Recorder()
        session = rec.session(open_grid)
        for _ in range(3):
            session.step()
        session.stop()
        event = session.step()

        assert event == Failed(FailReason.CANCELLED)
        assert session.status is SearchStatus.CANCELLED
        assert session.path is None
        assert rec.paths == []
        assert len(rec.visited) == 3

        open_grid.reset_path()
        assert open_grid.of_type(CellType.VISITED) == []

    def test_cancel_during_reveal_suppresses_path_found(self) -> None:
        grid = parse_layout("S....E")
        rec = Recorder()
        session = rec.session(grid)
        while not rec.revealed:
            session.step()
        session.stop()
        session.run_to_end()
        assert session.status is SearchStatus.CANCELLED
        assert rec.paths == []
        assert len(rec.revealed) == 1


class TestStop:
    def test_stop_before_first_step(self, open_grid) -> None:
        rec = Recorder()
        session = rec.session(open_grid)
        session.stop()
        assert session.cancel_requested
        assert session.run_to_end() is None
        assert session.status is SearchStatus.CANCELLED
        assert rec.visited == []
        assert all(c.g == 0 for c in open_grid.cells())

    def test_stop_is_idempotent(self, open_grid) -> None:
        session = SearchSession(open_grid)
        session.step()
        session.stop()
        session.stop()
        session.run_to_end()
        assert session.status is SearchStatus.CANCELLED

    def test_stop_after_finish_is_noop(self, open_grid) -> None:
        session = SearchSession(open_grid)
        session.run_to_end()
        session.stop()
        assert session.status is SearchStatus.FOUND
        assert not session.cancel_requested


class TestViews:
    def test_frontier_and_explored(self) -> None:
        grid = parse_layout("""
            S..
            ...
            ..E
        """)
        session = SearchSession(grid, Algorithm.DIJKSTRA)
        assert session.frontier == frozenset()
        # Expands Start, then yields on (1, 0) before relaxing its neighbors.
        session.step()
        assert session.explored == {(0, 0), (1, 0)}
        assert session.frontier == {(0, 1)}
        session.step()
        assert session.explored == {(0, 0), (1, 0), (0, 1)}
        assert session.frontier == {(2, 0), (1, 1)}

    def test_views_are_snapshots(self, open_grid) -> None:
        session = SearchSession(open_grid)
        session.step()
        explored = session.explored
        session.step()
        assert len(session.explored) == len(explored) + 1

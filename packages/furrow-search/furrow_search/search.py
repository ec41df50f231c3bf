"""Stepwise best-first search over a Grid.

``explore`` is a generator: it yields one event per expansion step, so a
caller can render between steps, pace them, or stop early. Dijkstra and A*
share it and differ only in the heuristic (``zero`` vs ``manhattan``).

Open-set ordering is by ``f = g + h``. Equal keys are expanded in the order
they were (re)inserted into the open set. A decrease-key pushes a fresh heap
entry; the outdated one is skipped when it surfaces.
"""
from __future__ import annotations

import heapq
import itertools
import math
from dataclasses import dataclass, field
from typing import Generator

from furrow_grid import Cell, CellType, Coord, Grid

from furrow_search.events import Done, Event, Failed, Revealed, Visited
from furrow_search.heuristics import Heuristic
from furrow_search.types import FailReason, SearchInvariantError


@dataclass
class SearchState:
    """Per-run bookkeeping, owned by exactly one search."""

    open_heap: list[tuple[float, int, Coord]] = field(default_factory=list)
    open_set: set[Coord] = field(default_factory=set)
    closed: set[Coord] = field(default_factory=set)
    cancelled: bool = False
    expanded: int = 0

    def stop(self) -> None:
        self.cancelled = True


def explore(
    grid: Grid,
    start: Cell,
    end: Cell,
    heuristic: Heuristic,
    state: SearchState | None = None,
) -> Generator[Event, None, None]:
    """Search from ``start`` to ``end``, yielding Visited/Revealed events and
    finishing with exactly one Done or Failed.

    Obstacles are never enqueued. ``state.cancelled`` is checked before every
    expansion and between revealed path cells.
    """
    state = state if state is not None else SearchState()
    if state.cancelled:
        yield Failed(FailReason.CANCELLED)
        return

    goal = end.coord
    for cell in grid.cells():
        cell.g = math.inf
        cell.h = 0
        cell.f = math.inf
        cell.parent = None

    start.g = 0
    start.h = _estimate(heuristic, start.coord, goal)
    start.f = start.h

    counter = itertools.count()
    heapq.heappush(state.open_heap, (start.f, next(counter), start.coord))
    state.open_set.add(start.coord)
    last_key = -math.inf

    while state.open_heap and not state.cancelled:
        key, _, coord = heapq.heappop(state.open_heap)
        current = grid.get_cell(*coord)
        if coord in state.closed or key != current.f:
            continue
        if key < last_key:
            raise SearchInvariantError(
                f"Open-set key fell from {last_key} to {key} at {coord}; "
                f"heuristic is not consistent"
            )
        last_key = key
        state.open_set.discard(coord)

        if current is end:
            yield from _reveal(grid, start, end, state)
            return

        state.closed.add(coord)
        state.expanded += 1
        if current is not start:
            current.type = CellType.VISITED
            yield Visited(current)

        for neighbor in grid.neighbors(current):
            if neighbor.coord in state.closed:
                continue
            tentative = current.g + 1
            if tentative < neighbor.g:
                neighbor.g = tentative
                neighbor.h = _estimate(heuristic, neighbor.coord, goal)
                neighbor.f = neighbor.g + neighbor.h
                neighbor.parent = coord
                heapq.heappush(state.open_heap, (neighbor.f, next(counter), neighbor.coord))
                state.open_set.add(neighbor.coord)

    if state.cancelled:
        yield Failed(FailReason.CANCELLED)
    else:
        yield Failed(FailReason.NO_PATH)


def _estimate(heuristic: Heuristic, a: Coord, b: Coord) -> float:
    h = heuristic(a, b)
    if h < 0:
        raise SearchInvariantError(f"Heuristic returned negative estimate {h} for {a} -> {b}")
    return h


def reconstruct_path(grid: Grid, end: Cell) -> list[Cell]:
    """Follow parent links back from ``end``; return cells Start -> End."""
    path = [end]
    current = end
    limit = grid.rows * grid.cols
    while current.parent is not None:
        current = grid.get_cell(*current.parent)
        if current is None or len(path) >= limit:
            raise SearchInvariantError(f"Broken parent chain ending at {end.coord}")
        path.append(current)
    path.reverse()
    return path


def _reveal(
    grid: Grid,
    start: Cell,
    end: Cell,
    state: SearchState,
) -> Generator[Event, None, None]:
    path = reconstruct_path(grid, end)
    if path[0] is not start:
        raise SearchInvariantError(f"Path from {end.coord} does not lead back to start")
    if len(path) - 1 != end.g:
        raise SearchInvariantError(
            f"Path has {len(path) - 1} edges but end cost is {end.g}"
        )

    for cell in path[1:-1]:
        if state.cancelled:
            yield Failed(FailReason.CANCELLED)
            return
        cell.type = CellType.PATH
        yield Revealed(cell)

    if state.cancelled:
        yield Failed(FailReason.CANCELLED)
        return
    yield Done(path)

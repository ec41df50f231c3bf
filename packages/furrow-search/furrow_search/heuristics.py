"""Distance estimates for 4-directional unit-cost grids."""
from __future__ import annotations

from typing import Callable

from furrow_grid import Coord

from furrow_search.types import Algorithm

Heuristic = Callable[[Coord, Coord], float]


def manhattan(a: Coord, b: Coord) -> float:
    """|drow| + |dcol|. Admissible and consistent for 4-way unit steps."""
    return abs(a[0] - b[0]) + abs(a[1] - b[1])


def zero(a: Coord, b: Coord) -> float:
    """No estimate; turns A* into Dijkstra."""
    return 0


def heuristic_for(algorithm: Algorithm | str) -> Heuristic:
    algorithm = Algorithm.parse(algorithm)
    if algorithm is Algorithm.ASTAR:
        return manhattan
    return zero

"""Cell definitions and grid configuration for furrow-grid."""
from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum

Coord = tuple[int, int]


class CellType(Enum):
    """What a grid cell currently holds."""

    EMPTY = "empty"
    OBSTACLE = "obstacle"
    START = "start"
    END = "end"
    PATH = "path"
    VISITED = "visited"
    # Decoration only, never produced by a search.
    TILLED_DIRT = "tilled_dirt"
    PLANT = "plant"


# Markings left behind by a search run; reset_path() clears these.
TRANSIENT_TYPES = frozenset({CellType.PATH, CellType.VISITED, CellType.TILLED_DIRT})


@dataclass(eq=False)
class Cell:
    """A single grid square plus its per-run search bookkeeping.

    Attributes:
        row: Row index, fixed for the cell's lifetime.
        col: Column index, fixed for the cell's lifetime.
        type: Current marking.
        g: Best known cost from Start (``math.inf`` while unreached).
        h: Heuristic estimate to End.
        f: ``g + h``, the A* ordering key.
        parent: Coordinate of the predecessor on the best known path.
    """

    row: int
    col: int
    type: CellType = CellType.EMPTY
    g: float = 0
    h: float = 0
    f: float = 0
    parent: Coord | None = field(default=None, repr=False)

    @property
    def coord(self) -> Coord:
        return (self.row, self.col)

    @property
    def passable(self) -> bool:
        return self.type is not CellType.OBSTACLE

    @property
    def reached(self) -> bool:
        return not math.isinf(self.g)

    def reset_costs(self) -> None:
        self.f = 0
        self.g = 0
        self.h = 0
        self.parent = None


@dataclass(frozen=True)
class GridConfig:
    """Immutable size limits for a Grid.

    Attributes:
        min_size: Smallest allowed row or column count.
        max_size: Largest allowed row or column count.
        default_rows: Row count used when none is given.
        default_cols: Column count used when none is given.
    """

    min_size: int = 5
    max_size: int = 50
    default_rows: int = 10
    default_cols: int = 10

    def __post_init__(self) -> None:
        if self.min_size < 1:
            raise ValueError(f"min_size must be >= 1, got {self.min_size}")
        if self.max_size < self.min_size:
            raise ValueError(
                f"max_size ({self.max_size}) must be >= min_size ({self.min_size})"
            )
        for name in ("default_rows", "default_cols"):
            value = getattr(self, name)
            if not self.min_size <= value <= self.max_size:
                raise ValueError(
                    f"{name} must be within [{self.min_size}, {self.max_size}], got {value}"
                )

    def allows(self, rows: int, cols: int) -> bool:
        return (
            self.min_size <= rows <= self.max_size
            and self.min_size <= cols <= self.max_size
        )

    def clamp(self, rows: int, cols: int) -> tuple[int, int]:
        """Pull a requested size into bounds, for sanitizing user input."""
        rows = max(self.min_size, min(self.max_size, rows))
        cols = max(self.min_size, min(self.max_size, cols))
        return rows, cols

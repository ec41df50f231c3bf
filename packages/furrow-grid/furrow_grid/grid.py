"""Grid - a mutable rows x cols board of typed cells with one Start and one End."""
from __future__ import annotations

import logging
import random
from typing import Iterator

from furrow_grid.types import TRANSIENT_TYPES, Cell, CellType, Coord, GridConfig

logger = logging.getLogger(__name__)

# Up, down, left, right.
DIRECTIONS: tuple[Coord, ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))


class Grid:
    """Row-major board of Cells.

    Start and End are references into the cell store, updated whenever a
    cell is set to START or END. ``resize`` and ``clear`` reallocate every
    cell, so Cell objects obtained earlier must not be reused afterwards.
    """

    def __init__(
        self,
        rows: int | None = None,
        cols: int | None = None,
        config: GridConfig | None = None,
    ) -> None:
        self._config = config if config is not None else GridConfig()
        rows = self._config.default_rows if rows is None else rows
        cols = self._config.default_cols if cols is None else cols
        self._check_size(rows, cols)
        self._rows = rows
        self._cols = cols
        self._cells: list[list[Cell]] = []
        self._start: Cell | None = None
        self._end: Cell | None = None
        self._allocate()

    # --- Properties ---

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def cols(self) -> int:
        return self._cols

    @property
    def config(self) -> GridConfig:
        return self._config

    @property
    def start(self) -> Cell | None:
        return self._start

    @property
    def end(self) -> Cell | None:
        return self._end

    # --- Allocation ---

    def _check_size(self, rows: int, cols: int) -> None:
        if not self._config.allows(rows, cols):
            raise ValueError(
                f"{rows}x{cols} grid outside allowed size range "
                f"[{self._config.min_size}, {self._config.max_size}]"
            )

    def _allocate(self) -> None:
        self._cells = [
            [Cell(row=r, col=c) for c in range(self._cols)]
            for r in range(self._rows)
        ]
        self._start = None
        self._end = None

    def resize(self, rows: int, cols: int) -> None:
        """Reallocate at a new size. Start and End become unset."""
        self._check_size(rows, cols)
        self._rows = rows
        self._cols = cols
        self._allocate()
        logger.debug("grid resized to %dx%d", rows, cols)

    def clear(self) -> None:
        """Reallocate at the current size. Start and End become unset."""
        self._allocate()

    # --- Lookup ---

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self._rows and 0 <= col < self._cols

    def get_cell(self, row: int, col: int) -> Cell | None:
        """Return the cell at (row, col), or None when off the grid."""
        if self.in_bounds(row, col):
            return self._cells[row][col]
        return None

    def cells(self) -> Iterator[Cell]:
        for row in self._cells:
            yield from row

    def of_type(self, cell_type: CellType) -> list[Cell]:
        return [cell for cell in self.cells() if cell.type is cell_type]

    def neighbors(self, cell: Cell) -> list[Cell]:
        """Passable 4-neighbors of a cell, in up/down/left/right order."""
        result: list[Cell] = []
        for dr, dc in DIRECTIONS:
            neighbor = self.get_cell(cell.row + dr, cell.col + dc)
            if neighbor is not None and neighbor.passable:
                result.append(neighbor)
        return result

    # --- Mutation ---

    def set_cell_type(self, row: int, col: int, cell_type: CellType) -> bool:
        """Set a cell's type, keeping at most one START and one END.

        Moving START or END clears any previous search markings. Returns
        False when (row, col) is off the grid.
        """
        cell = self.get_cell(row, col)
        if cell is None:
            return False

        if cell_type is CellType.START:
            if self._start is not None and self._start is not cell:
                self._start.type = CellType.EMPTY
            if self._end is cell:
                self._end = None
            self.reset_path()
            cell.type = CellType.START
            self._start = cell
        elif cell_type is CellType.END:
            if self._end is not None and self._end is not cell:
                self._end.type = CellType.EMPTY
            if self._start is cell:
                self._start = None
            self.reset_path()
            cell.type = CellType.END
            self._end = cell
        else:
            if self._start is cell:
                self._start = None
            if self._end is cell:
                self._end = None
            cell.type = cell_type
        return True

    def toggle_obstacle(self, row: int, col: int) -> bool:
        """Flip EMPTY <-> OBSTACLE. Any other type is left alone."""
        cell = self.get_cell(row, col)
        if cell is None:
            return False
        if cell.type is CellType.EMPTY:
            cell.type = CellType.OBSTACLE
        elif cell.type is CellType.OBSTACLE:
            cell.type = CellType.EMPTY
        return True

    def fill_rect(self, corner1: Coord, corner2: Coord, cell_type: CellType) -> None:
        """Set every in-bounds cell of an inclusive rectangle to one type."""
        r1, c1 = min(corner1[0], corner2[0]), min(corner1[1], corner2[1])
        r2, c2 = max(corner1[0], corner2[0]), max(corner1[1], corner2[1])
        for r in range(r1, r2 + 1):
            for c in range(c1, c2 + 1):
                self.set_cell_type(r, c, cell_type)

    def reset_path(self) -> None:
        """Clear PATH/VISITED markings and zero every cell's search fields."""
        for cell in self.cells():
            if cell.type in TRANSIENT_TYPES:
                cell.type = CellType.EMPTY
            cell.reset_costs()

    def randomize_endpoints(
        self,
        rng: random.Random | None = None,
        min_distance: int = 5,
    ) -> tuple[Cell, Cell]:
        """Place START and END on random passable cells at least
        ``min_distance`` apart (Manhattan), capped to what the grid allows.

        Raises ValueError, leaving the current endpoints in place, if no
        such pair exists.
        """
        rng = rng if rng is not None else random.Random()
        candidates = [cell for cell in self.cells() if cell.passable]
        if len(candidates) < 2:
            raise ValueError("Need at least two passable cells to place endpoints")
        min_distance = min(min_distance, self._rows + self._cols - 2)

        rng.shuffle(candidates)
        for start in candidates:
            ends = [
                cell for cell in candidates
                if abs(cell.row - start.row) + abs(cell.col - start.col) >= max(min_distance, 1)
            ]
            if ends:
                end = rng.choice(ends)
                break
        else:
            raise ValueError(
                f"No pair of passable cells is at least {min_distance} apart"
            )

        for cell in (self._start, self._end):
            if cell is not None:
                cell.type = CellType.EMPTY
        self._start = None
        self._end = None
        self.set_cell_type(start.row, start.col, CellType.START)
        self.set_cell_type(end.row, end.col, CellType.END)
        return start, end

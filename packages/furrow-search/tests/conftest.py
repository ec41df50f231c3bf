"""Shared fixtures for furrow-search tests."""
from __future__ import annotations

import pytest

from furrow_grid import CellType, Grid


@pytest.fixture
def open_grid() -> Grid:
    """5x5, no obstacles, Start (0,0), End (4,4)."""
    grid = Grid(5, 5)
    grid.set_cell_type(0, 0, CellType.START)
    grid.set_cell_type(4, 4, CellType.END)
    return grid

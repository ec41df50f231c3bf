"""furrow-grid - Typed cell grids with a single Start and End."""
from __future__ import annotations

from furrow_grid.types import Cell, CellType, Coord, GridConfig
from furrow_grid.grid import Grid
from furrow_grid.layout import parse_layout, render_layout

__all__ = [
    "Cell",
    "CellType",
    "Coord",
    "Grid",
    "GridConfig",
    "parse_layout",
    "render_layout",
]

"""Grid rendering."""
from __future__ import annotations

import pygame

from furrow_grid import Grid

from ui.constants import CELL_COLORS, COLOR_GRID_LINE


def draw_grid(surface: pygame.Surface, grid: Grid, tile: int) -> None:
    """Draw every cell colored by type, then grid lines."""
    for cell in grid.cells():
        color = CELL_COLORS.get(cell.type, (40, 40, 40))
        rect = pygame.Rect(cell.col * tile, cell.row * tile, tile, tile)
        pygame.draw.rect(surface, color, rect)

    width, height = grid.cols * tile, grid.rows * tile
    for c in range(grid.cols + 1):
        pygame.draw.line(surface, COLOR_GRID_LINE, (c * tile, 0), (c * tile, height))
    for r in range(grid.rows + 1):
        pygame.draw.line(surface, COLOR_GRID_LINE, (0, r * tile), (width, r * tile))


def draw_hover(surface: pygame.Surface, grid: Grid, tile: int, pos: tuple[int, int]) -> None:
    row, col = pos[1] // tile, pos[0] // tile
    if grid.in_bounds(row, col):
        rect = pygame.Rect(col * tile, row * tile, tile, tile)
        pygame.draw.rect(surface, (255, 255, 0), rect, 2)

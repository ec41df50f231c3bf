"""Layout, color, and rendering constants."""
from __future__ import annotations

from furrow_grid import CellType

# Layout
GRID_PX = 600
SIDEBAR_W = 220
STATUS_H = 32
FPS = 60

# Cell colors
CELL_COLORS: dict[CellType, tuple[int, int, int]] = {
    CellType.EMPTY: (255, 255, 255),
    CellType.OBSTACLE: (51, 51, 51),
    CellType.START: (76, 175, 80),
    CellType.END: (244, 67, 54),
    CellType.PATH: (8, 204, 247),
    CellType.VISITED: (192, 255, 99),
    CellType.TILLED_DIRT: (139, 69, 19),
    CellType.PLANT: (60, 140, 60),
}

# UI colors
COLOR_BG = (20, 20, 30)
COLOR_SIDEBAR_BG = (25, 25, 35)
COLOR_GRID_LINE = (200, 200, 200)
COLOR_TEXT = (200, 200, 200)
COLOR_DIM = (120, 120, 120)
COLOR_HIGHLIGHT = (60, 60, 80)
COLOR_STATUS_BG = (30, 30, 40)
COLOR_OK = (100, 255, 100)
COLOR_WARN = (255, 180, 80)
COLOR_ERROR = (255, 80, 80)

TOOLS = ("obstacle", "start", "end")


def compute_layout(rows: int, cols: int) -> dict[str, int]:
    """Pick a tile size that fits the grid into GRID_PX."""
    tile = max(8, GRID_PX // max(rows, cols))
    grid_w = tile * cols
    grid_h = tile * rows
    return {
        "tile_size": tile,
        "grid_w": grid_w,
        "grid_h": grid_h,
        "screen_w": grid_w + SIDEBAR_W,
        "screen_h": max(grid_h, 360) + STATUS_H,
    }

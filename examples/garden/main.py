"""Garden Pathfinder: paint obstacles, pick an algorithm, watch the search."""
from __future__ import annotations

import argparse
import logging
import random
import sys

import pygame

from furrow import Engine
from furrow_grid import CellType, Grid, GridConfig
from furrow_search import (
    Algorithm,
    MissingEndpointsError,
    Pathfinder,
    SearchConfig,
    SearchInvariantError,
    SearchStatus,
    make_search_system,
)

from ui.constants import (
    COLOR_BG, COLOR_ERROR, COLOR_OK, COLOR_TEXT, COLOR_WARN, FPS, TOOLS, compute_layout,
)
from ui.renderer import draw_grid, draw_hover
from ui.sidebar import draw_sidebar
from ui.status import StatusMessage, draw_status

logger = logging.getLogger("garden")


def parse_args() -> argparse.Namespace:
    config = GridConfig()
    p = argparse.ArgumentParser(description="Garden Pathfinder, a furrow visual demo")
    p.add_argument("--rows", type=int, default=config.default_rows,
                   help=f"Grid rows ({config.min_size}-{config.max_size}, default: {config.default_rows})")
    p.add_argument("--cols", type=int, default=config.default_cols,
                   help=f"Grid columns ({config.min_size}-{config.max_size}, default: {config.default_cols})")
    p.add_argument("--algorithm", choices=[a.value for a in Algorithm], default="astar",
                   help="Search algorithm (default: astar)")
    p.add_argument("--delay", type=float, default=20.0,
                   help="Milliseconds between search steps (default: 20)")
    p.add_argument("--seed", type=int, default=None, help="Random seed for endpoints")
    p.add_argument("--log-level", default="WARNING",
                   choices=["DEBUG", "INFO", "WARNING", "ERROR"], help="Logging level")
    args = p.parse_args()
    args.rows, args.cols = config.clamp(args.rows, args.cols)
    args.delay = max(0.0, args.delay)
    return args


class GardenState:
    """Holds the grid, the pathfinder, and the engine pacing the active run."""

    def __init__(self, rows: int, cols: int, algorithm: Algorithm,
                 delay_ms: float, seed: int | None) -> None:
        self.rng = random.Random(seed)
        self.grid = Grid(rows, cols)
        self.grid.randomize_endpoints(self.rng)
        self.algorithm = algorithm
        self.tool = TOOLS[0]
        self.message = StatusMessage()
        self.config = SearchConfig(delay_ms=delay_ms)
        self.engine: Engine | None = None
        self.pathfinder = Pathfinder(
            self.grid,
            on_path_found=self._on_path_found,
            config=self.config,
        )
        self.layout = compute_layout(rows, cols)

    def _on_path_found(self, path: list) -> None:
        session = self.pathfinder.session
        self._say(
            f"{self.algorithm.label} complete! Path length: {len(path)}, "
            f"nodes visited: {session.visited_count}",
            COLOR_OK,
        )

    def _say(self, text: str, color: tuple[int, int, int] = COLOR_TEXT) -> None:
        logger.info("status: %s", text)
        self.message = StatusMessage(text, color)

    @property
    def running(self) -> bool:
        return self.pathfinder.is_running

    def find_path(self) -> None:
        try:
            session = self.pathfinder.start(self.algorithm)
        except MissingEndpointsError:
            self._say("Please set both start and end points.", COLOR_ERROR)
            return
        self.engine = Engine(delay_ms=self.config.delay_ms)
        self.engine.add_system(make_search_system(session))
        self._say(f"Running {self.algorithm.label}...")

    def advance(self) -> None:
        """Step the active run once and report how it ended."""
        if self.engine is None:
            return
        session = self.pathfinder.session
        try:
            finished = self.engine.step()
        except SearchInvariantError:
            logger.exception("%s search failed", self.algorithm.label)
            self.engine = None
            self._say("Search failed, see log.", COLOR_ERROR)
            return
        if finished:
            self.engine = None
            if session.status is SearchStatus.NO_PATH:
                self._say(
                    f"No path found using {self.algorithm.label}! Try removing some obstacles.",
                    COLOR_ERROR,
                )
            elif session.status is SearchStatus.CANCELLED:
                self._say("Search stopped.", COLOR_WARN)

    def stop(self) -> None:
        self.pathfinder.stop()

    def paint(self, row: int, col: int) -> None:
        if self.running:
            return
        self.grid.reset_path()
        if self.tool == "obstacle":
            self.grid.toggle_obstacle(row, col)
        elif self.tool == "start":
            self.grid.set_cell_type(row, col, CellType.START)
        elif self.tool == "end":
            self.grid.set_cell_type(row, col, CellType.END)

    def reset(self) -> None:
        self.stop()
        self._drain()
        self.grid.clear()
        self.grid.randomize_endpoints(self.rng)
        self._say("Grid reset")

    def resize(self, delta: int) -> None:
        rows, cols = self.grid.config.clamp(self.grid.rows + delta, self.grid.cols + delta)
        self.stop()
        self._drain()
        self.grid.resize(rows, cols)
        self.grid.randomize_endpoints(self.rng)
        self.layout = compute_layout(rows, cols)
        self._say(f"Grid resized to {rows}x{cols}")

    def _drain(self) -> None:
        # A stopped run must observe the flag before the cells are reallocated.
        while self.engine is not None:
            self.advance()


def main() -> None:
    args = parse_args()
    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")

    state = GardenState(
        rows=args.rows,
        cols=args.cols,
        algorithm=Algorithm.parse(args.algorithm),
        delay_ms=args.delay,
        seed=args.seed,
    )

    pygame.init()
    screen = pygame.display.set_mode((state.layout["screen_w"], state.layout["screen_h"]))
    pygame.display.set_caption("Garden Pathfinder")
    clock = pygame.time.Clock()

    # Step accumulator for the paced search
    step_interval = state.config.delay_ms / 1000.0
    accumulator = 0.0

    running = True
    while running:
        dt = clock.tick(FPS) / 1000.0
        tile = state.layout["tile_size"]

        # --- Events ---
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False

            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif event.key in (pygame.K_1, pygame.K_2, pygame.K_3):
                    state.tool = TOOLS[event.key - pygame.K_1]
                elif event.key == pygame.K_d and not state.running:
                    state.algorithm = Algorithm.DIJKSTRA
                elif event.key == pygame.K_a and not state.running:
                    state.algorithm = Algorithm.ASTAR
                elif event.key == pygame.K_SPACE:
                    state.find_path()
                    accumulator = 0.0
                elif event.key == pygame.K_s:
                    state.stop()
                elif event.key == pygame.K_r:
                    state.reset()
                elif event.key in (pygame.K_PLUS, pygame.K_EQUALS, pygame.K_MINUS):
                    state.resize(-1 if event.key == pygame.K_MINUS else 1)
                    screen = pygame.display.set_mode(
                        (state.layout["screen_w"], state.layout["screen_h"])
                    )

            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                row, col = event.pos[1] // tile, event.pos[0] // tile
                if state.grid.in_bounds(row, col):
                    state.paint(row, col)

        # --- Step the search at its own pace ---
        if state.engine is not None:
            accumulator += dt
            if step_interval <= 0:
                state.advance()
            while state.engine is not None and accumulator >= step_interval > 0:
                state.advance()
                accumulator -= step_interval

        # --- Render ---
        screen.fill(COLOR_BG)
        draw_grid(screen, state.grid, tile)
        if not state.running:
            draw_hover(screen, state.grid, tile, pygame.mouse.get_pos())
        draw_sidebar(
            screen,
            state.layout["grid_w"],
            state.tool,
            state.algorithm,
            state.pathfinder.session,
            (state.grid.rows, state.grid.cols),
        )
        draw_status(screen, state.message, state.grid, tile, pygame.mouse.get_pos())

        pygame.display.flip()

    pygame.quit()
    sys.exit()


if __name__ == "__main__":
    main()

# life.py
"""
Conway's Game of Life on a fixed, non-wrapping grid.

The generation step is a Numba-jitted kernel that reads from the previous
grid and writes into a copy, so neighbor counts never see same-tick updates.
LifeSimulation adds mouse painting and the time-based throttle that keeps
generations at a fixed rate regardless of the frame rate.
"""
import logging
import numpy as np
from typing import Dict, Any, Optional, Tuple
from numba import jit
from constants import CELL_RESOLUTION, GENERATIONS_PER_SECOND

# --- Data Contracts ---
#
# next_generation(grid: np.ndarray) -> np.ndarray:
#   - Inputs: int8 array of shape (COLS, ROWS) holding 0 (dead) or 1 (alive),
#     indexed [col, row].
#   - Outputs: A new array of the same shape and dtype.
#   - Invariants: The input grid is not modified.
#
# class LifeSimulation:
#   - __init__(self, params: Dict[str, Any], width: int, height: int):
#     - Inputs:
#       - params: The "life" section of config.json.
#         - "resolution": int, cell size in pixels.
#         - "generations_per_second": float
#     - Side Effects: Allocates an all-dead grid of width // resolution by
#       height // resolution cells.
#
#   - tick(self, now_ms: float) -> bool:
#     - Side Effects: Replaces self.grid with the next generation if at least
#       one interval has elapsed since the last one.

# Offsets of the 3x3 block stamped by a click, anchor included.
STAMP_OFFSETS = [(dx, dy) for dx in (-1, 0, 1) for dy in (-1, 0, 1)]


@jit(nopython=True)
def _count_neighbors_numba(grid, col, row):
    cols, rows = grid.shape
    count = 0
    for dx in [-1, 0, 1]:
        for dy in [-1, 0, 1]:
            if dx == 0 and dy == 0:
                continue
            nx, ny = col + dx, row + dy
            if 0 <= nx < cols and 0 <= ny < rows:
                count += grid[nx, ny]
    return count


@jit(nopython=True)
def _next_generation_numba(grid):
    """
    Numba-jitted generation step. Counts are taken from `grid`, results are
    written to a copy.
    """
    cols, rows = grid.shape
    next_grid = grid.copy()
    for col in range(cols):
        for row in range(rows):
            neighbors = _count_neighbors_numba(grid, col, row)
            cell = grid[col, row]
            if cell == 1 and (neighbors < 2 or neighbors > 3):
                next_grid[col, row] = 0
            elif cell == 0 and neighbors == 3:
                next_grid[col, row] = 1
    return next_grid


def build_grid(cols: int, rows: int) -> np.ndarray:
    """An all-dead grid of shape (cols, rows)."""
    return np.zeros((cols, rows), dtype=np.int8)


def count_neighbors(grid: np.ndarray, col: int, row: int) -> int:
    """Number of live cells among the 8 neighbors of (col, row)."""
    return int(_count_neighbors_numba(np.asarray(grid, dtype=np.int8), col, row))


def next_generation(grid: np.ndarray) -> np.ndarray:
    """Applies Conway's rules once and returns the new grid."""
    return _next_generation_numba(np.asarray(grid, dtype=np.int8))


class LifeSimulation:
    """
    Holds the Game of Life grid and advances it at a fixed generation rate.
    """
    def __init__(self, params: Dict[str, Any], width: int, height: int):
        """
        Initializes the grid.

        Args:
            params (Dict[str, Any]): Life parameters from config.
            width (int): The width of the canvas in pixels.
            height (int): The height of the canvas in pixels.
        """
        self.resolution = int(params.get('resolution', CELL_RESOLUTION))
        generations_per_second = float(params.get('generations_per_second', GENERATIONS_PER_SECOND))

        if self.resolution <= 0 or generations_per_second <= 0:
            msg = "Configuration error in 'life': resolution and generations_per_second must be positive."
            logging.critical(msg)
            raise ValueError(msg)

        self.cols = width // self.resolution
        self.rows = height // self.resolution
        if self.cols == 0 or self.rows == 0:
            msg = (
                f"Configuration error in 'life': a {width}x{height} canvas holds no "
                f"cells at resolution {self.resolution}px."
            )
            logging.critical(msg)
            raise ValueError(msg)

        self.interval = 1000.0 / generations_per_second
        self.last_time = 0.0
        self.generation = 0
        self.painting = False
        self.grid = build_grid(self.cols, self.rows)

        logging.info(
            f"LifeSimulation initialized: {self.cols}x{self.rows} cells of "
            f"{self.resolution}px, one generation every {self.interval:.0f}ms."
        )

    @property
    def population(self) -> int:
        return int(self.grid.sum())

    def tick(self, now_ms: float) -> bool:
        """
        Advances one generation if a full interval has elapsed.

        The remainder of the elapsed time is carried over so the rate does
        not drift with the frame rate.

        Returns:
            bool: True if a new generation was produced.
        """
        delta = now_ms - self.last_time
        if delta < self.interval:
            return False
        self.last_time = now_ms - (delta % self.interval)
        self.step()
        return True

    def step(self) -> None:
        self.grid = next_generation(self.grid)
        self.generation += 1

    def clear(self) -> None:
        self.grid = build_grid(self.cols, self.rows)
        logging.info("Grid cleared by user.")

    # --- Painting ---

    def cell_at(self, x: float, y: float) -> Tuple[int, int]:
        return int(np.floor(x / self.resolution)), int(np.floor(y / self.resolution))

    def in_bounds(self, col: int, row: int) -> bool:
        return 0 <= col < self.cols and 0 <= row < self.rows

    def set_alive(self, col: int, row: int) -> bool:
        """Marks a cell alive. Coordinates outside the grid are ignored."""
        if not self.in_bounds(col, row):
            return False
        self.grid[col, row] = 1
        return True

    def pointer_down(self, x: float, y: float) -> Optional[Tuple[int, int]]:
        """
        Starts painting and stamps a 3x3 block centered on the clicked cell.

        Returns:
            Optional[Tuple[int, int]]: The clicked cell, or None if the click
            fell outside the grid.
        """
        self.painting = True
        col, row = self.cell_at(x, y)
        if not self.in_bounds(col, row):
            return None
        for dx, dy in STAMP_OFFSETS:
            self.set_alive(col + dx, row + dy)
        logging.debug(f"Stamped seed block at cell ({col}, {row}).")
        return col, row

    def pointer_move(self, x: float, y: float) -> None:
        if self.painting:
            self.set_alive(*self.cell_at(x, y))

    def pointer_up(self) -> None:
        self.painting = False

"""
Conway's Game of Life - Toroidal Universe

Rules:
1. Any live cell with fewer than two live neighbors dies (underpopulation)
2. Any live cell with two or three live neighbors lives on
3. Any live cell with more than three live neighbors dies (overpopulation)
4. Any dead cell with exactly three live neighbors becomes alive (reproduction)

The grid wraps around on both axes, so there are no edge cells.
"""

import logging
from enum import Enum
from typing import Callable, Iterable

import numpy as np

from life_universe.patterns import default_seed

logger = logging.getLogger(__name__)

DEFAULT_WIDTH = 64
DEFAULT_HEIGHT = 64

# Signed neighbor offsets, (0, 0) excluded
OFFSETS = [(dy, dx) for dy in range(-1, 2) for dx in range(-1, 2) if not (dy == 0 and dx == 0)]


class Cell(Enum):
    """State of a single grid position."""

    DEAD = 0
    ALIVE = 1

    @property
    def glyph(self) -> str:
        return '◼' if self is Cell.ALIVE else '◻'


def _check_dimension(name: str, value: int) -> int:
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
        raise ValueError(f"{name} must be an integer, got {value!r}")
    if value < 1:
        raise ValueError(f"{name} must be >= 1, got {value}")
    return int(value)


class Universe:
    """
    A wrapping grid of cells stored row-major in a flat uint8 buffer.

    Args:
        width: Number of columns
        height: Number of rows
        seed: Callable mapping a linear cell index to alive/dead,
              or None for an empty grid
    """

    def __init__(self, width: int = DEFAULT_WIDTH, height: int = DEFAULT_HEIGHT,
                 seed: Callable[[int], bool] | None = default_seed):
        self._width = _check_dimension("width", width)
        self._height = _check_dimension("height", height)
        self._cells = np.full(self._width * self._height, Cell.DEAD.value, dtype=np.uint8)

        if seed is not None:
            for i in range(self._cells.size):
                if seed(i):
                    self._cells[i] = Cell.ALIVE.value

    def __repr__(self) -> str:
        return f"Universe(width={self._width}, height={self._height}, live={self.live_count})"

    def __str__(self) -> str:
        return self.render()

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def live_count(self) -> int:
        return int(np.count_nonzero(self._cells == Cell.ALIVE.value))

    def set_width(self, width: int) -> None:
        """Set the number of columns. Every cell is reset to dead."""
        self._width = _check_dimension("width", width)
        self._reset()

    def set_height(self, height: int) -> None:
        """Set the number of rows. Every cell is reset to dead."""
        self._height = _check_dimension("height", height)
        self._reset()

    def _reset(self) -> None:
        self._cells = np.full(self._width * self._height, Cell.DEAD.value, dtype=np.uint8)
        logger.debug("Universe resized to %dx%d, all cells cleared", self._width, self._height)

    def get_index(self, row: int, column: int) -> int:
        """Map a (row, column) coordinate to its offset in the flat buffer."""
        for value in (row, column):
            if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
                raise IndexError(f"cell coordinates must be integers, got ({row!r}, {column!r})")
        if not (0 <= row < self._height and 0 <= column < self._width):
            raise IndexError(
                f"cell ({row}, {column}) out of range for {self._height}x{self._width} universe"
            )
        return row * self._width + column

    def cell(self, row: int, column: int) -> Cell:
        return Cell(int(self._cells[self.get_index(row, column)]))

    def live_neighbour_count(self, row: int, column: int) -> int:
        """
        Count live neighbors of the cell at (row, column).
        Uses toroidal wrapping (edges connect to opposite sides).
        An offset that wraps back onto the cell itself is skipped.
        """
        self.get_index(row, column)

        count = 0
        for dy, dx in OFFSETS:
            if dy % self._height == 0 and dx % self._width == 0:
                continue  # lands on the cell itself
            neighbour = self.cell((row + dy) % self._height, (column + dx) % self._width)
            count += 1 if neighbour is Cell.ALIVE else 0
        return count

    def tick(self, vectorized: bool = True) -> None:
        """
        Advance the universe by one generation.

        Args:
            vectorized: Use NumPy array shifts (fast) or count neighbors
                        cell by cell (slow but clear)
        """
        if vectorized:
            next_cells = self._next_generation_numpy()
        else:
            next_cells = self._next_generation_cellwise()

        # Swap in the whole generation at once
        self._cells = next_cells

    def _next_generation_cellwise(self) -> np.ndarray:
        next_cells = self._cells.copy()

        for row in range(self._height):
            for column in range(self._width):
                idx = self.get_index(row, column)
                alive = self._cells[idx] == Cell.ALIVE.value
                neighbours = self.live_neighbour_count(row, column)

                if alive and (neighbours < 2 or neighbours > 3):
                    next_cells[idx] = Cell.DEAD.value
                elif not alive and neighbours == 3:
                    next_cells[idx] = Cell.ALIVE.value

        return next_cells

    def _next_generation_numpy(self) -> np.ndarray:
        grid = (self._cells == Cell.ALIVE.value).astype(np.uint8).reshape(self._height, self._width)
        neighbors = np.zeros_like(grid)

        for dy, dx in OFFSETS:
            if dy % self._height == 0 and dx % self._width == 0:
                continue
            neighbors += np.roll(np.roll(grid, -dy, axis=0), -dx, axis=1)

        birth = (grid == 0) & (neighbors == 3)
        survive = (grid == 1) & ((neighbors == 2) | (neighbors == 3))

        next_grid = np.where(birth | survive, Cell.ALIVE.value, Cell.DEAD.value)
        return next_grid.astype(np.uint8).ravel()

    def set_cells(self, cells: Iterable[tuple[int, int]]) -> None:
        """Mark every (row, column) pair alive. Nothing is written if any pair is out of range."""
        indices = np.array([self.get_index(row, column) for row, column in cells], dtype=np.intp)
        self._cells[indices] = Cell.ALIVE.value

    def get_cells(self) -> np.ndarray:
        """Read-only view of the flat cell buffer."""
        view = self._cells.view()
        view.flags.writeable = False
        return view

    def cells_view(self) -> memoryview:
        """Read-only buffer over the raw cell bytes, for zero-copy consumers."""
        return memoryview(self._cells).toreadonly()

    def render(self) -> str:
        """Text grid: one line per row, one glyph per cell."""
        alive, dead = Cell.ALIVE.glyph, Cell.DEAD.glyph
        lines = []
        for row in self._cells.reshape(self._height, self._width):
            lines.append(''.join(alive if value == Cell.ALIVE.value else dead for value in row) + '\n')
        return ''.join(lines)

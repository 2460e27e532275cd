import matplotlib

matplotlib.use("Agg")

import numpy as np
import pytest

from life_universe import Cell, Universe


@pytest.fixture
def alive_set():
    """Returns a function giving the coordinates of every live cell."""

    def collect(universe: Universe) -> set[tuple[int, int]]:
        grid = universe.get_cells().reshape(universe.height, universe.width)
        return {(int(r), int(c)) for r, c in zip(*np.nonzero(grid == Cell.ALIVE.value))}

    return collect


@pytest.fixture
def empty_universe():
    """Factory for an all-dead universe of the given size."""

    def make(width: int, height: int) -> Universe:
        return Universe(width, height, seed=None)

    return make

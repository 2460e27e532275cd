"""Conway's Game of Life on a toroidal grid."""

from life_universe.patterns import PATTERNS, default_seed, stamp
from life_universe.universe import DEFAULT_HEIGHT, DEFAULT_WIDTH, Cell, Universe

__all__ = [
    "Cell",
    "Universe",
    "DEFAULT_WIDTH",
    "DEFAULT_HEIGHT",
    "PATTERNS",
    "default_seed",
    "stamp",
]

__version__ = "0.1.0"

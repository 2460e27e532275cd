"""
Seed rule and pattern library.

Patterns are lists of (row, column) offsets relative to their top-left corner.
"""

PATTERNS: dict[str, list[tuple[int, int]]] = {
    "block": [(0, 0), (0, 1), (1, 0), (1, 1)],
    "blinker": [(0, 0), (0, 1), (0, 2)],
    # Glider pattern
    #   #
    #     #
    # # # #
    "glider": [(0, 1), (1, 2), (2, 0), (2, 1), (2, 2)],
    "glider_gun": [
        (0, 24),
        (1, 22), (1, 24),
        (2, 12), (2, 13), (2, 20), (2, 21), (2, 34), (2, 35),
        (3, 11), (3, 15), (3, 20), (3, 21), (3, 34), (3, 35),
        (4, 0), (4, 1), (4, 10), (4, 16), (4, 20), (4, 21),
        (5, 0), (5, 1), (5, 10), (5, 14), (5, 16), (5, 17), (5, 22), (5, 24),
        (6, 10), (6, 16), (6, 24),
        (7, 11), (7, 15),
        (8, 12), (8, 13),
    ],
}


def default_seed(index: int) -> bool:
    """Cells whose linear index is a multiple of 2 or 7 start alive."""
    return index % 2 == 0 or index % 7 == 0


def pattern_size(name: str) -> tuple[int, int]:
    """Bounding box of a pattern as (rows, columns)."""
    offsets = PATTERNS[name]
    return max(r for r, _ in offsets) + 1, max(c for _, c in offsets) + 1


def stamp(universe, name: str, row: int = 0, column: int = 0) -> None:
    """
    Set a named pattern alive with its top-left corner at (row, column).
    Offsets wrap around the universe edges.
    """
    rows, cols = pattern_size(name)
    if rows > universe.height or cols > universe.width:
        raise ValueError(
            f"pattern {name!r} needs {rows}x{cols}, universe is {universe.height}x{universe.width}"
        )

    universe.set_cells(
        ((row + dr) % universe.height, (column + dc) % universe.width)
        for dr, dc in PATTERNS[name]
    )

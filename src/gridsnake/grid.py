# grid.py
"""Positions, directions and occupancy checks on the bounded board."""
from typing import Iterable, List, Tuple

import numpy as np  # type: ignore

from .config import UP, DOWN, LEFT, RIGHT

Position = Tuple[int, int]
Direction = Tuple[int, int]

DIRECTIONS = {
    "up": UP,
    "down": DOWN,
    "left": LEFT,
    "right": RIGHT,
}


def is_opposite(a: Direction, b: Direction) -> bool:
    return a[0] == -b[0] and a[1] == -b[1]


def in_bounds(pos: Position, cols: int, rows: int) -> bool:
    x, y = pos
    return 0 <= x < cols and 0 <= y < rows


def moved(pos: Position, direction: Direction) -> Position:
    return (pos[0] + direction[0], pos[1] + direction[1])


def occupancy(cells: Iterable[Position], cols: int, rows: int) -> np.ndarray:
    """Boolean (rows, cols) mask with True on every given in-bounds cell."""
    grid = np.zeros((rows, cols), dtype=bool)
    for x, y in cells:
        if 0 <= x < cols and 0 <= y < rows:
            grid[y, x] = True
    return grid


def empty_cells(cells: Iterable[Position], cols: int, rows: int) -> List[Position]:
    """All free cells in row-major order."""
    ys, xs = np.nonzero(~occupancy(cells, cols, rows))
    return list(zip(xs.tolist(), ys.tolist()))

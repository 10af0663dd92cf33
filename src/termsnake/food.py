# food.py
from __future__ import annotations
import random
from typing import Iterable, List, Optional

import numpy as np  # type: ignore

from .geometry import Coord


def free_cells(width: int, height: int, snake: Iterable[Coord]) -> List[Coord]:
    """Every board cell not covered by a snake segment, in row-major order."""
    occupied = np.zeros((height, width), dtype=bool)
    for part in snake:
        if 0 <= part.x < width and 0 <= part.y < height:
            occupied[part.y, part.x] = True
    ys, xs = np.nonzero(~occupied)
    return [Coord(int(x), int(y)) for y, x in zip(ys, xs)]


def place_food(
    width: int,
    height: int,
    snake: Iterable[Coord],
    rng: random.Random,
) -> Optional[Coord]:
    """
    Pick a food cell uniformly among the free cells.
    Returns None when the snake covers the whole board.
    """
    free = free_cells(width, height, snake)
    if not free:
        return None
    return free[rng.randrange(len(free))]

# board.py
"""
Pure state -> tile-grid mapping.

A Board is derived from the game on demand (for a full render) and thrown away;
the game itself never stores one. The grid includes the wall border, so cell
(x, y) of the playing field lives at grid[y + 1, x + 1].
"""
from __future__ import annotations
from dataclasses import dataclass
from enum import IntEnum
from typing import Iterable, Optional

import numpy as np  # type: ignore

from .config import WALL_STR, SNAKE_STR, FOOD_STR, AIR_STR
from .geometry import Coord


class Tile(IntEnum):
    EMPTY = 0
    SNAKE = 1
    FOOD = 2
    WALL = 3

    @property
    def glyph(self) -> str:
        return _GLYPHS[self]


_GLYPHS = {
    Tile.EMPTY: AIR_STR,
    Tile.SNAKE: SNAKE_STR,
    Tile.FOOD: FOOD_STR,
    Tile.WALL: WALL_STR,
}


class BoardInvariantError(RuntimeError):
    """A coordinate outside the playing field reached the renderer."""


@dataclass(frozen=True)
class CellUpdate:
    """One incremental render delta: the cell at `coord` is now `tile`."""
    coord: Coord
    tile: Tile


class Board:
    def __init__(self, width: int, height: int):
        self.width = width
        self.height = height
        self.grid = np.full((height + 2, width + 2), Tile.EMPTY, dtype=np.uint8)
        self.grid[0, :] = Tile.WALL
        self.grid[-1, :] = Tile.WALL
        self.grid[:, 0] = Tile.WALL
        self.grid[:, -1] = Tile.WALL

    @classmethod
    def from_state(
        cls,
        width: int,
        height: int,
        snake: Iterable[Coord],
        food: Optional[Coord],
    ) -> "Board":
        board = cls(width, height)
        for part in snake:
            board.set(part, Tile.SNAKE)
        if food is not None:
            board.set(food, Tile.FOOD)
        return board

    def in_bounds(self, coord: Coord) -> bool:
        return 0 <= coord.x < self.width and 0 <= coord.y < self.height

    def set(self, coord: Coord, tile: Tile) -> None:
        if not self.in_bounds(coord):
            raise BoardInvariantError(
                f"cell {coord} is outside the {self.width}x{self.height} board"
            )
        self.grid[coord.y + 1, coord.x + 1] = tile

    def get(self, coord: Coord) -> Tile:
        if not self.in_bounds(coord):
            raise BoardInvariantError(
                f"cell {coord} is outside the {self.width}x{self.height} board"
            )
        return Tile(int(self.grid[coord.y + 1, coord.x + 1]))

    def apply(self, updates: Iterable[CellUpdate]) -> None:
        for update in updates:
            self.set(update.coord, update.tile)

    def count(self, tile: Tile) -> int:
        return int(np.count_nonzero(self.grid == tile))

    def rows(self):
        """Yield each grid row (walls included) as a string of glyphs."""
        for row in self.grid:
            yield "".join(_GLYPHS[Tile(int(code))] for code in row)

    def to_text(self) -> str:
        return "".join(line + "\n" for line in self.rows())

    def __str__(self) -> str:
        return self.to_text()

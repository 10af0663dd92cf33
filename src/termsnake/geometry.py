# geometry.py
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Optional


@dataclass(frozen=True)
class Coord:
    # Plain ints: a head may step one cell past the board before the bounds check
    x: int
    y: int

    def __add__(self, other: "Coord") -> "Coord":
        return Coord(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Coord") -> "Coord":
        return Coord(self.x - other.x, self.y - other.y)

    def move_by(self, direction: "Direction") -> "Coord":
        return self + direction.offset

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"


class Direction(Enum):
    """The four cardinal moves, valued by their (dx, dy) step. y grows downward."""
    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def offset(self) -> Coord:
        dx, dy = self.value
        return Coord(dx, dy)

    @property
    def opposite(self) -> "Direction":
        dx, dy = self.value
        return Direction((-dx, -dy))

    @classmethod
    def from_offset(cls, offset: Coord) -> Optional["Direction"]:
        try:
            return cls((offset.x, offset.y))
        except ValueError:
            return None

# controls.py
from __future__ import annotations
from typing import Optional

from .geometry import Direction

KEY_BINDINGS = {
    "w": Direction.UP,
    "a": Direction.LEFT,
    "s": Direction.DOWN,
    "d": Direction.RIGHT,
    "up": Direction.UP,
    "left": Direction.LEFT,
    "down": Direction.DOWN,
    "right": Direction.RIGHT,
}


def direction_for_key(symbol: Optional[str]) -> Optional[Direction]:
    """Map a raw key symbol to a Direction; anything unrecognized maps to None."""
    if not symbol:
        return None
    return KEY_BINDINGS.get(symbol.lower())


# Sent by front-ends whose window was closed
QUIT_KEY = "quit"


def is_quit_key(symbol: Optional[str]) -> bool:
    return symbol == QUIT_KEY

"""Terminal Snake: a tick-driven grid game shared between a ticker and an input thread."""

from .board import Board, CellUpdate, Tile
from .config import Config, ConfigError, BoardTooSmallError
from .controls import direction_for_key
from .game import Game, GameState
from .geometry import Coord, Direction
from .loops import play, run
from .shared import SharedGame

__all__ = [
    "Board", "CellUpdate", "Tile",
    "Config", "ConfigError", "BoardTooSmallError",
    "direction_for_key",
    "Game", "GameState",
    "Coord", "Direction",
    "play", "run",
    "SharedGame",
]

# config.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Optional

# ----- Grid -----
GRID_W, GRID_H = 10, 10
MIN_DIMENSION = 2

# ----- Timing -----
TICK_MS = 200

# ----- Glyphs (terminal) -----
WALL_STR  = "█"
SNAKE_STR = "●"
FOOD_STR  = "*"
AIR_STR   = " "

# ----- Colors & cell size (pygame window) -----
CELL_SIZE = 20
BG    = (20, 20, 24)
GREEN = (80, 200, 80)
RED   = (200, 70, 70)
WALL  = (90, 90, 100)
TEXT  = (220, 220, 230)

FRONTENDS = ("curses", "pygame")


class ConfigError(ValueError):
    """Raised when the game is configured with values it cannot run with."""


class BoardTooSmallError(ConfigError):
    pass


# ----- Tunables -----
@dataclass
class Config:
    height: int = GRID_H
    width: int = GRID_W
    tick_ms: int = TICK_MS
    seed: Optional[int] = None
    frontend: str = "curses"
    incremental: bool = False

    def validate(self) -> "Config":
        if self.height < MIN_DIMENSION or self.width < MIN_DIMENSION:
            raise BoardTooSmallError(
                f"Board too small ({self.width}x{self.height}). "
                f"Must have minimum dimension of {MIN_DIMENSION}."
            )
        if self.tick_ms <= 0:
            raise ConfigError(f"tick_ms must be positive, got {self.tick_ms}")
        if self.frontend not in FRONTENDS:
            raise ConfigError(f"Unknown frontend: {self.frontend}")
        return self

    @property
    def tick_wait(self) -> float:
        """Tick interval in seconds."""
        return self.tick_ms / 1000.0

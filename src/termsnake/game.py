# game.py
from __future__ import annotations
from enum import Enum
from typing import Iterable, List, Optional
import logging
import random

from .board import Board, CellUpdate, Tile
from .config import BoardTooSmallError, ConfigError, MIN_DIMENSION
from .food import free_cells, place_food
from .geometry import Coord, Direction

logger = logging.getLogger(__name__)

ORIGIN = Coord(0, 0)
START_DIRECTION = Direction.DOWN


class GameState(Enum):
    RUNNING = "running"
    DEAD = "dead"
    WON = "won"
    QUIT = "quit"

    @property
    def is_terminal(self) -> bool:
        return self is not GameState.RUNNING


class Game:
    """
    Snake on a fixed width x height board.

    The snake is a list of coords, head at index 0. `pending` is the direction
    the next tick() applies; it is the only field written from outside.
    """

    def __init__(
        self,
        height: int,
        width: int,
        rng: Optional[random.Random] = None,
        snake: Optional[Iterable[Coord]] = None,
        food: Optional[Coord] = None,
        pending: Direction = START_DIRECTION,
    ):
        if height < MIN_DIMENSION or width < MIN_DIMENSION:
            raise BoardTooSmallError(
                f"Board too small ({width}x{height}). "
                f"Must have minimum dimension of {MIN_DIMENSION}."
            )
        self.width = width
        self.height = height
        self.rng = rng if rng is not None else random.Random()
        self.snake: List[Coord] = list(snake) if snake is not None else [ORIGIN]
        self.state = GameState.RUNNING
        self.pending = pending
        self.food: Optional[Coord] = food
        self._check_layout()
        if self.food is None:
            self.place_food()

    def _check_layout(self) -> None:
        if not self.snake:
            raise ConfigError("snake needs at least one segment")
        for part in self.snake:
            if not self.in_bounds(part):
                raise ConfigError(f"snake segment {part} is off the {self.width}x{self.height} board")
        if len(set(self.snake)) != len(self.snake):
            raise ConfigError("snake segments overlap")
        if self.food is not None and (not self.in_bounds(self.food) or self.food in self.snake):
            raise ConfigError(f"food {self.food} must be a free cell on the board")

    @classmethod
    def create(cls, height: int, width: int, seed: Optional[int] = None) -> "Game":
        return cls(height, width, rng=random.Random(seed))

    # ---------- Queries ----------
    @property
    def head(self) -> Coord:
        return self.snake[0]

    @property
    def length(self) -> int:
        return len(self.snake)

    @property
    def is_running(self) -> bool:
        return self.state is GameState.RUNNING

    def in_bounds(self, coord: Coord) -> bool:
        return 0 <= coord.x < self.width and 0 <= coord.y < self.height

    def free_cells(self) -> List[Coord]:
        return free_cells(self.width, self.height, self.snake)

    def travel_direction(self) -> Optional[Direction]:
        """Direction the head last moved in; None for a single-segment snake."""
        if len(self.snake) < 2:
            return None
        return Direction.from_offset(self.snake[0] - self.snake[1])

    def next_head(self) -> Coord:
        new_head = self.head.move_by(self.pending)
        if len(self.snake) >= 2 and new_head == self.snake[1]:
            # Reversal guard: keep going the way we were travelling
            return self.head.move_by(self.travel_direction())
        return new_head

    # ---------- Mutation ----------
    def place_food(self) -> Optional[Coord]:
        self.food = place_food(self.width, self.height, self.snake, self.rng)
        return self.food

    def quit(self) -> GameState:
        """End a running game at the player's request. Terminal states are kept."""
        if self.is_running:
            self.state = GameState.QUIT
        return self.state

    def tick(self) -> List[CellUpdate]:
        """
        Advance one step using the pending direction.

        Returns the cells that changed, for incremental rendering: the new head,
        the vacated tail (unless the head moved into it) and any relocated food.
        Calling tick() after the game has ended does nothing.
        """
        if not self.is_running:
            logger.debug("tick() ignored, game already %s", self.state.value)
            return []

        new_head = self.next_head()

        # The tail is excluded: it moves out of the way this tick
        if new_head in self.snake[:-1]:
            logger.debug("self collision at %s", new_head)
            self.state = GameState.DEAD
            return []

        self.snake.insert(0, new_head)
        if not self.in_bounds(new_head):
            logger.debug("left the board at %s", new_head)
            self.state = GameState.DEAD
            return []

        updates = [CellUpdate(new_head, Tile.SNAKE)]
        if new_head == self.food:
            if self.place_food() is None:
                # no free cell left: the snake fills the board
                self.state = GameState.WON
                return updates
            updates.append(CellUpdate(self.food, Tile.FOOD))
            logger.debug("ate food, length=%d, food now at %s", self.length, self.food)
            return updates

        tail = self.snake.pop()
        if tail != new_head:
            updates.insert(0, CellUpdate(tail, Tile.EMPTY))
        return updates

    # ---------- Rendering ----------
    def board(self) -> Board:
        """Full tile grid. The off-board head of a game lost to a wall is left out."""
        snake = [part for part in self.snake if self.in_bounds(part)] \
            if self.state is GameState.DEAD else self.snake
        return Board.from_state(self.width, self.height, snake, self.food)

    def render(self) -> str:
        return self.board().to_text()

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return (
            f"Game({self.width}x{self.height}, state={self.state.name}, "
            f"length={self.length}, food={self.food}, pending={self.pending.name})"
        )

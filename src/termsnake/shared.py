# shared.py
from __future__ import annotations
from contextlib import contextmanager
from typing import Iterator, List
import threading

from .board import Board, CellUpdate
from .game import Game, GameState
from .geometry import Direction


class SharedGame:
    """
    One Game reachable from the ticker and the input thread.

    Every read or write goes through a single lock. Callers must never sleep or
    block on input while holding it.
    """

    def __init__(self, game: Game):
        self._game = game
        self._lock = threading.Lock()

    @contextmanager
    def locked(self) -> Iterator[Game]:
        with self._lock:
            yield self._game

    def set_direction(self, direction: Direction) -> GameState:
        """Overwrite the pending direction; returns the state seen under the same lock."""
        with self._lock:
            self._game.pending = direction
            return self._game.state

    def quit(self) -> GameState:
        with self._lock:
            return self._game.quit()

    @property
    def state(self) -> GameState:
        with self._lock:
            return self._game.state

    def snapshot(self) -> Board:
        with self._lock:
            return self._game.board()

    def tick(self):
        """Advance one step; returns (updates, state after the step)."""
        with self._lock:
            updates: List[CellUpdate] = self._game.tick()
            return updates, self._game.state

# display.py
"""
Output and input collaborators of the control loops.

The loops only talk to a Display (where frames go) and a KeySource (where key
symbols come from). Concrete terminal and window implementations live in
curses_frontend and pygame_frontend; this module holds the protocols plus the
stream-backed and scripted versions used for headless runs.
"""
from __future__ import annotations
from typing import Iterable, Optional, Protocol, Sequence, TextIO
import sys
import threading
import time

from .board import Board, CellUpdate
from .game import GameState


class Display(Protocol):
    def open(self, width: int, height: int) -> None: ...
    def draw_board(self, board: Board) -> None: ...
    def draw_cells(self, updates: Sequence[CellUpdate]) -> None: ...
    def show_status(self, state: GameState) -> None: ...
    def close(self) -> None: ...


class KeySource(Protocol):
    def poll(self, timeout: float) -> Optional[str]:
        """Wait up to `timeout` seconds for a key; None when nothing was pressed."""
        ...


class TextDisplay:
    """Writes full text snapshots of the board to a stream."""

    def __init__(self, stream: Optional[TextIO] = None):
        self.stream = stream if stream is not None else sys.stdout
        self.board: Optional[Board] = None
        self.frames = 0

    def open(self, width: int, height: int) -> None:
        self.board = Board(width, height)

    def draw_board(self, board: Board) -> None:
        self.board = board
        self._write_frame()

    def draw_cells(self, updates: Sequence[CellUpdate]) -> None:
        if self.board is None:
            raise RuntimeError("draw_cells() before open()")
        if not updates:
            return
        self.board.apply(updates)
        self._write_frame()

    def show_status(self, state: GameState) -> None:
        self.stream.write(f"{state.name}\n")
        self.stream.flush()

    def close(self) -> None:
        self.stream.flush()

    def _write_frame(self) -> None:
        self.stream.write(self.board.to_text())
        self.frames += 1


class ScriptedKeys:
    """Replays a fixed sequence of key symbols, one per poll."""

    def __init__(self, keys: Iterable[Optional[str]] = ()):
        self._keys = list(keys)
        self._lock = threading.Lock()

    def poll(self, timeout: float) -> Optional[str]:
        with self._lock:
            key = self._keys.pop(0) if self._keys else None
        if key is None:
            time.sleep(timeout)
        return key

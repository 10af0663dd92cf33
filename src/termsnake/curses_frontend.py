# curses_frontend.py
"""Terminal front-end: cursor-addressed drawing and raw key input through curses."""
from __future__ import annotations
from typing import Optional, Sequence
import curses
import logging
import select
import sys
import threading

from .board import Board, BoardInvariantError, CellUpdate, Tile
from .config import ConfigError
from .game import GameState
from .geometry import Coord

logger = logging.getLogger(__name__)

# curses key codes -> symbols understood by controls.direction_for_key
ARROW_KEYS = {
    curses.KEY_UP: "up",
    curses.KEY_DOWN: "down",
    curses.KEY_LEFT: "left",
    curses.KEY_RIGHT: "right",
}


def key_symbol(code: int) -> Optional[str]:
    if code in ARROW_KEYS:
        return ARROW_KEYS[code]
    if 0 <= code < 256:
        return chr(code)
    return None


class CursesDisplay:
    """
    Draws the bordered board at the top-left of the screen.

    draw_cells() only rewrites the cells that changed. The screen lock is
    shared with CursesKeys so drawing and key reads never interleave.
    """

    def __init__(self, stdscr, screen_lock: Optional[threading.Lock] = None):
        self.stdscr = stdscr
        self.screen_lock = screen_lock if screen_lock is not None else threading.Lock()
        self.width = 0
        self.height = 0

    def open(self, width: int, height: int) -> None:
        self.width, self.height = width, height
        rows, cols = self.stdscr.getmaxyx()
        # one extra row for the status line
        if rows < height + 3 or cols < width + 2:
            raise ConfigError(
                f"terminal is {cols}x{rows}, need at least {width + 2}x{height + 3}"
            )
        with self.screen_lock:
            try:
                curses.curs_set(0)
            except curses.error:
                logger.debug("terminal cannot hide the cursor")
            self.stdscr.clear()

    def draw_board(self, board: Board) -> None:
        with self.screen_lock:
            for y, line in enumerate(board.rows()):
                self.stdscr.addstr(y, 0, line)
            self.stdscr.refresh()

    def draw_cells(self, updates: Sequence[CellUpdate]) -> None:
        if not updates:
            return
        with self.screen_lock:
            for update in updates:
                self._put(update.coord, update.tile)
            self.stdscr.refresh()

    def show_status(self, state: GameState) -> None:
        with self.screen_lock:
            self.stdscr.addstr(self.height + 2, 0, state.name)
            self.stdscr.refresh()

    def close(self) -> None:
        with self.screen_lock:
            self.stdscr.refresh()

    def _put(self, coord: Coord, tile: Tile) -> None:
        if not (0 <= coord.x < self.width and 0 <= coord.y < self.height):
            raise BoardInvariantError(
                f"cell {coord} is outside the {self.width}x{self.height} board"
            )
        self.stdscr.addstr(coord.y + 1, coord.x + 1, tile.glyph)


class CursesKeys:
    """Waits on stdin with select(), then drains one key with a non-blocking getch."""

    def __init__(self, stdscr, screen_lock: threading.Lock, stream=None):
        self.stdscr = stdscr
        self.screen_lock = screen_lock
        self.stream = stream if stream is not None else sys.stdin
        self.stdscr.keypad(True)
        self.stdscr.nodelay(True)

    def poll(self, timeout: float) -> Optional[str]:
        ready, _, _ = select.select([self.stream], [], [], timeout)
        if not ready:
            return None
        with self.screen_lock:
            code = self.stdscr.getch()
        if code == -1:
            return None
        return key_symbol(code)


def frontend(stdscr):
    """Display and key source sharing one screen lock."""
    screen_lock = threading.Lock()
    return CursesDisplay(stdscr, screen_lock), CursesKeys(stdscr, screen_lock)

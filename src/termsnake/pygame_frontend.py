# pygame_frontend.py
from __future__ import annotations
from collections import deque
from typing import Deque, Optional, Sequence
import threading
import time

import pygame  # type: ignore

from .board import Board, CellUpdate, Tile
from .config import CELL_SIZE, BG, GREEN, RED, WALL, TEXT
from .controls import QUIT_KEY
from .game import GameState

TILE_COLORS = {
    Tile.EMPTY: BG,
    Tile.SNAKE: GREEN,
    Tile.FOOD: RED,
    Tile.WALL: WALL,
}

ARROW_KEYS = {
    pygame.K_UP: "up",
    pygame.K_DOWN: "down",
    pygame.K_LEFT: "left",
    pygame.K_RIGHT: "right",
}


def draw_cell(screen: pygame.Surface, gx: int, gy: int, color) -> None:
    rect = pygame.Rect(gx * CELL_SIZE, gy * CELL_SIZE, CELL_SIZE, CELL_SIZE)
    pygame.draw.rect(screen, color, rect)


class PygameDisplay:
    """Draws the board (walls included) as colored cells in a pygame window."""

    def __init__(self, caption: str = "termsnake", lock: Optional[threading.Lock] = None):
        self.caption = caption
        self.screen = None
        self.font = None
        # shared with PygameKeys: drawing and event pumping never interleave
        self.lock = lock if lock is not None else threading.Lock()

    def open(self, width: int, height: int) -> None:
        with self.lock:
            self._open(width, height)

    def _open(self, width: int, height: int) -> None:
        pygame.init()
        self.screen = pygame.display.set_mode(
            ((width + 2) * CELL_SIZE, (height + 2) * CELL_SIZE)
        )
        pygame.display.set_caption(self.caption)
        self.font = pygame.font.SysFont(None, 24)

    def draw_board(self, board: Board) -> None:
        with self.lock:
            self.screen.fill(BG)
            for gy, row in enumerate(board.grid):
                for gx, code in enumerate(row):
                    draw_cell(self.screen, gx, gy, TILE_COLORS[Tile(int(code))])
            pygame.display.flip()

    def draw_cells(self, updates: Sequence[CellUpdate]) -> None:
        if not updates:
            return
        with self.lock:
            for update in updates:
                draw_cell(
                    self.screen, update.coord.x + 1, update.coord.y + 1,
                    TILE_COLORS[update.tile],
                )
            pygame.display.flip()

    def show_status(self, state: GameState) -> None:
        with self.lock:
            txt = self.font.render(state.name, True, TEXT)
            self.screen.blit(txt, (8, 6))
            pygame.display.flip()

    def close(self) -> None:
        with self.lock:
            pygame.quit()


# Event queue is drained in short slices so the lock is never held for long
POLL_SLICE = 0.01


def event_symbol(event) -> Optional[str]:
    """Key symbol for a pygame event: arrow names, typed characters, or QUIT_KEY."""
    if event.type == pygame.QUIT:
        return QUIT_KEY
    if event.type != pygame.KEYDOWN:
        return None
    if event.key in ARROW_KEYS:
        return ARROW_KEYS[event.key]
    return event.unicode or None


class PygameKeys:
    """Reads KEYDOWN and QUIT events from the pygame event queue."""

    def __init__(self, lock: Optional[threading.Lock] = None):
        self.lock = lock if lock is not None else threading.Lock()
        self.pending: Deque[str] = deque()

    def poll(self, timeout: float) -> Optional[str]:
        deadline = time.monotonic() + timeout
        while True:
            if self.pending:
                return self.pending.popleft()
            with self.lock:
                events = pygame.event.get()
            for event in events:
                symbol = event_symbol(event)
                if symbol is not None:
                    self.pending.append(symbol)
            if self.pending:
                continue
            remaining = deadline - time.monotonic()
            if remaining <= 0:
                return None
            time.sleep(min(POLL_SLICE, remaining))


def frontend(caption: str = "termsnake"):
    """Display and key source sharing one lock."""
    lock = threading.Lock()
    return PygameDisplay(caption, lock), PygameKeys(lock)

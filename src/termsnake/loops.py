# loops.py
"""
The two threads of control that drive an interactive game.

ticker_loop renders, sleeps and advances the game; input_loop turns key
presses into direction changes. Both share one SharedGame and stop on their own
once the game reaches a terminal state. play() runs them side by side and
returns when both have finished.
"""
from __future__ import annotations
from typing import List, Optional
import logging
import threading
import time

from .config import Config
from .controls import direction_for_key, is_quit_key
from .display import Display, KeySource
from .game import Game, GameState
from .shared import SharedGame

logger = logging.getLogger(__name__)


def ticker_loop(
    handle: SharedGame,
    display: Display,
    tick_wait: float,
    incremental: bool = False,
    stop: Optional[threading.Event] = None,
) -> GameState:
    """
    - render the board
    - wait
    - tick
    until the game is over. Sleeping and drawing happen outside the lock.
    """
    if incremental:
        display.draw_board(handle.snapshot())

    while True:
        if stop is not None and stop.is_set():
            return handle.state

        if not incremental:
            board = handle.snapshot()
            display.draw_board(board)

        time.sleep(tick_wait)

        updates, state = handle.tick()
        if incremental:
            display.draw_cells(updates)

        if state.is_terminal:
            logger.info("game over: %s", state.name)
            display.show_status(state)
            return state


def input_loop(
    handle: SharedGame,
    keys: KeySource,
    tick_wait: float,
    stop: Optional[threading.Event] = None,
) -> GameState:
    """
    Poll for keys with the tick interval as timeout and write recognized
    directions into the game. Returns once the game has left RUNNING.
    """
    while True:
        if stop is not None and stop.is_set():
            return handle.state

        key = keys.poll(tick_wait)
        direction = direction_for_key(key)
        if is_quit_key(key):
            logger.info("quit requested")
            state = handle.quit()
        elif direction is not None:
            logger.debug("key %r -> %s", key, direction.name)
            state = handle.set_direction(direction)
        else:
            state = handle.state

        if state.is_terminal:
            return state


def play(
    handle: SharedGame,
    display: Display,
    keys: KeySource,
    tick_wait: float,
    incremental: bool = False,
) -> GameState:
    """
    Run the ticker and input loops on their own threads and wait for both.

    An exception in either loop stops the other one and is re-raised here.
    """
    with handle.locked() as game:
        width, height = game.width, game.height

    stop = threading.Event()
    errors: List[BaseException] = []

    def guarded(target, *args):
        try:
            target(*args, stop=stop)
        except BaseException as exc:
            logger.exception("%s crashed", target.__name__)
            errors.append(exc)
            stop.set()

    ticker = threading.Thread(
        target=guarded,
        args=(ticker_loop, handle, display, tick_wait, incremental),
        name="ticker",
        daemon=True,
    )
    input_handler = threading.Thread(
        target=guarded,
        args=(input_loop, handle, keys, tick_wait),
        name="input",
        daemon=True,
    )

    display.open(width, height)
    try:
        ticker.start()
        input_handler.start()
        try:
            ticker.join()
            input_handler.join()
        except KeyboardInterrupt:
            stop.set()
            raise
    finally:
        display.close()

    if errors:
        raise errors[0]
    return handle.state


def run(config: Config, display: Display, keys: KeySource) -> GameState:
    """Build a game from `config` and play it to the end."""
    config.validate()
    game = Game.create(config.height, config.width, seed=config.seed)
    logger.info(
        "starting %dx%d game, tick=%dms, seed=%s",
        config.width, config.height, config.tick_ms, config.seed,
    )
    return play(SharedGame(game), display, keys, config.tick_wait, config.incremental)

# main.py
from __future__ import annotations
import argparse
import logging
import sys

from .config import Config, ConfigError, FRONTENDS, GRID_H, GRID_W, TICK_MS
from .game import GameState
from .loops import run

logger = logging.getLogger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="termsnake",
        description="Snake in the terminal. Steer with WASD or the arrow keys.",
    )
    parser.add_argument("--height", type=int, default=GRID_H)
    parser.add_argument("--width", type=int, default=GRID_W)
    parser.add_argument("--tick-ms", type=int, default=TICK_MS,
                        help="milliseconds between moves")
    parser.add_argument("--seed", type=int, default=None,
                        help="seed for food placement")
    parser.add_argument("--frontend", choices=FRONTENDS, default="curses")
    parser.add_argument(
        "--incremental",
        action="store_true",
        help="redraw only the cells that changed each tick instead of the whole board",
    )
    parser.add_argument("--log-file", type=str, default=None,
                        help="write logs here (the terminal is used by the game)")
    parser.add_argument("--log-level", type=str.upper, default="INFO",
                        choices=LOG_LEVELS)
    return parser


def config_from_args(args: argparse.Namespace) -> Config:
    return Config(
        height=args.height,
        width=args.width,
        tick_ms=args.tick_ms,
        seed=args.seed,
        frontend=args.frontend,
        incremental=args.incremental,
    ).validate()


def setup_logging(log_file, level: str) -> None:
    if log_file is None:
        # keep log records off the game screen
        pkg_logger = logging.getLogger("termsnake")
        pkg_logger.addHandler(logging.NullHandler())
        pkg_logger.propagate = False
        return
    logging.basicConfig(
        filename=log_file,
        level=level,
        format="%(asctime)s %(threadName)s %(name)s %(levelname)s %(message)s",
    )


def play_curses(cfg: Config) -> GameState:
    import curses
    from .curses_frontend import frontend

    def _play(stdscr) -> GameState:
        display, keys = frontend(stdscr)
        return run(cfg, display, keys)

    # wrapper() restores the terminal even if the game raises
    return curses.wrapper(_play)


def play_pygame(cfg: Config) -> GameState:
    from .pygame_frontend import frontend

    display, keys = frontend()
    return run(cfg, display, keys)


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    try:
        cfg = config_from_args(args)
    except ConfigError as e:
        print(f"termsnake: {e}", file=sys.stderr)
        return 2

    setup_logging(args.log_file, args.log_level)

    try:
        if cfg.frontend == "pygame":
            state = play_pygame(cfg)
        else:
            state = play_curses(cfg)
    except KeyboardInterrupt:
        return 130
    except ConfigError as e:
        print(f"termsnake: {e}", file=sys.stderr)
        return 2

    logger.info("finished: %s", state.name)
    print(state.name)
    return 0


if __name__ == "__main__":
    sys.exit(main())

"""
Pygame key mapping, run against SDL's dummy video driver.
"""
import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

import pygame
import pytest

from termsnake.controls import QUIT_KEY
from termsnake.pygame_frontend import PygameKeys, event_symbol, frontend


@pytest.fixture
def window():
    pygame.display.init()
    pygame.display.set_mode((10, 10))
    pygame.event.clear()
    yield
    pygame.display.quit()


@pytest.mark.parametrize(
    "key,unicode,symbol",
    [
        (pygame.K_UP, "", "up"),
        (pygame.K_DOWN, "", "down"),
        (pygame.K_LEFT, "", "left"),
        (pygame.K_RIGHT, "", "right"),
        (pygame.K_w, "w", "w"),
        (pygame.K_a, "A", "A"),
        (pygame.K_LSHIFT, "", None),
    ],
)
def test_keydown_events_map_to_symbols(key, unicode, symbol):
    event = pygame.event.Event(pygame.KEYDOWN, key=key, unicode=unicode, mod=0)
    assert event_symbol(event) == symbol


def test_quit_event_maps_to_quit_key():
    assert event_symbol(pygame.event.Event(pygame.QUIT)) == QUIT_KEY


def test_other_events_are_ignored():
    event = pygame.event.Event(pygame.KEYUP, key=pygame.K_UP, unicode="", mod=0)
    assert event_symbol(event) is None


def test_poll_returns_posted_keys_in_order(window):
    keys = PygameKeys()
    pygame.event.post(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_RIGHT, unicode="", mod=0))
    pygame.event.post(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_s, unicode="s", mod=0))
    pygame.event.post(pygame.event.Event(pygame.QUIT))
    assert keys.poll(0.5) == "right"
    assert keys.poll(0.5) == "s"
    assert keys.poll(0.5) == QUIT_KEY
    assert keys.poll(0.02) is None


def test_poll_times_out_without_events(window):
    assert PygameKeys().poll(0.02) is None


def test_frontend_shares_one_lock():
    display, keys = frontend()
    assert display.lock is keys.lock

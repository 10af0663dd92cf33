import pytest

from termsnake.controls import direction_for_key
from termsnake.geometry import Direction


@pytest.mark.parametrize(
    "key,expected",
    [
        ("w", Direction.UP),
        ("W", Direction.UP),
        ("a", Direction.LEFT),
        ("A", Direction.LEFT),
        ("s", Direction.DOWN),
        ("S", Direction.DOWN),
        ("d", Direction.RIGHT),
        ("D", Direction.RIGHT),
        ("up", Direction.UP),
        ("Left", Direction.LEFT),
        ("DOWN", Direction.DOWN),
        ("right", Direction.RIGHT),
    ],
)
def test_recognized_keys(key, expected):
    assert direction_for_key(key) is expected


@pytest.mark.parametrize("key", ["x", "q", " ", "", None, "ww", "\x1b"])
def test_unrecognized_keys_map_to_nothing(key):
    assert direction_for_key(key) is None

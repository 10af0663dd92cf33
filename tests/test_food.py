import random
from collections import Counter

from termsnake.food import free_cells, place_food
from termsnake.geometry import Coord


def test_free_cells_are_the_exact_complement():
    snake = [Coord(0, 0), Coord(1, 0)]
    free = free_cells(3, 2, snake)
    assert free == [Coord(2, 0), Coord(0, 1), Coord(1, 1), Coord(2, 1)]


def test_free_cells_ignores_off_board_segments():
    free = free_cells(2, 2, [Coord(0, 0), Coord(0, -1)])
    assert len(free) == 3


def test_place_food_returns_none_on_full_board():
    snake = [Coord(0, 0), Coord(1, 0), Coord(1, 1), Coord(0, 1)]
    assert place_food(2, 2, snake, random.Random(0)) is None


def test_place_food_never_lands_on_snake():
    rng = random.Random(3)
    snake = [Coord(x, 0) for x in range(4)] + [Coord(3, y) for y in range(1, 4)]
    for _ in range(200):
        food = place_food(4, 4, snake, rng)
        assert food not in snake
        assert 0 <= food.x < 4 and 0 <= food.y < 4


def test_place_food_picks_last_free_cell_on_nearly_full_board():
    snake = [Coord(0, 0), Coord(1, 0), Coord(1, 1)]
    assert place_food(2, 2, snake, random.Random(9)) == Coord(0, 1)


def test_place_food_is_roughly_uniform():
    rng = random.Random(0)
    snake = [Coord(0, 0), Coord(1, 1)]
    counts = Counter(place_food(3, 3, snake, rng) for _ in range(7000))
    assert len(counts) == 7
    for n in counts.values():
        assert 850 < n < 1150


def test_place_food_is_deterministic_for_a_seed():
    snake = [Coord(0, 0)]
    a = [place_food(5, 5, snake, random.Random(42)) for _ in range(3)]
    b = [place_food(5, 5, snake, random.Random(42)) for _ in range(3)]
    assert a == b

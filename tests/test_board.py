import numpy as np
import pytest

from termsnake.board import Board, BoardInvariantError, CellUpdate, Tile
from termsnake.geometry import Coord


def test_empty_board_has_wall_border():
    board = Board(3, 2)
    assert board.grid.shape == (4, 5)
    assert board.count(Tile.WALL) == 14
    assert board.count(Tile.EMPTY) == 6


def test_to_text_draws_snake_food_and_walls():
    board = Board.from_state(3, 2, [Coord(0, 0)], Coord(2, 1))
    assert board.to_text() == (
        "█████\n"
        "█●  █\n"
        "█  *█\n"
        "█████\n"
    )


def test_from_state_without_food():
    board = Board.from_state(2, 2, [Coord(0, 0), Coord(1, 0), Coord(1, 1), Coord(0, 1)], None)
    assert board.count(Tile.SNAKE) == 4
    assert board.count(Tile.FOOD) == 0


@pytest.mark.parametrize("coord", [Coord(-1, 0), Coord(0, -1), Coord(3, 0), Coord(0, 2)])
def test_off_board_cells_fail_loudly(coord):
    board = Board(3, 2)
    with pytest.raises(BoardInvariantError):
        board.set(coord, Tile.SNAKE)
    with pytest.raises(BoardInvariantError):
        board.get(coord)
    # nothing was clamped onto the grid
    assert board.count(Tile.SNAKE) == 0


def test_apply_updates_in_order():
    board = Board.from_state(3, 3, [Coord(0, 0)], Coord(2, 2))
    board.apply([
        CellUpdate(Coord(0, 0), Tile.EMPTY),
        CellUpdate(Coord(0, 1), Tile.SNAKE),
    ])
    assert board.get(Coord(0, 0)) is Tile.EMPTY
    assert board.get(Coord(0, 1)) is Tile.SNAKE
    assert board.get(Coord(2, 2)) is Tile.FOOD


def test_grid_is_numpy_array_of_tile_codes():
    board = Board.from_state(2, 2, [Coord(1, 1)], None)
    assert isinstance(board.grid, np.ndarray)
    assert board.grid[2, 2] == Tile.SNAKE

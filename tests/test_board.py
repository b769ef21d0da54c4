"""Unit tests for the Board grid."""

import pytest

from carcassonne.board import Board
from carcassonne.tile import Direction


def test_new_board_is_empty():
    board = Board(2, 3)
    assert board.n_cells == 6
    assert board.is_empty()
    assert not board.is_full()
    assert all(board[row, col] is None for row, col in board.cells())


def test_set_and_get_by_1d_and_2d_index(pasture):
    board = Board(2, 3)
    board[1, 2] = pasture
    assert board[1, 2] is pasture
    assert board[5] is pasture
    assert board.get_1d_idx(1, 2) == 5
    assert board.get_2d_idx(5) == (1, 2)


def test_set_occupied_cell_raises(pasture, corner):
    board = Board(1, 1)
    board[0, 0] = pasture
    with pytest.raises(ValueError):
        board[0, 0] = corner
    assert board[0, 0] is pasture


@pytest.mark.parametrize("idx", [(2, 0), (0, 3), (-1, 0), 6, -1])
def test_out_of_range_access_raises(idx):
    board = Board(2, 3)
    with pytest.raises(IndexError):
        board[idx]


def test_erase_and_clear(pasture, corner):
    board = Board(1, 2)
    board[0, 0] = pasture
    board[0, 1] = corner
    assert board.is_full()

    board.erase(0, 0)
    assert board[0, 0] is None
    assert board[0, 1] is corner
    assert not board.is_full()

    board.clear()
    assert board.is_empty()


def test_neighbor_reports_boundary_and_contents(pasture):
    board = Board(2, 2)
    board[0, 1] = pasture
    assert board.neighbor(0, 0, Direction.EAST) == (True, pasture)
    assert board.neighbor(0, 0, Direction.SOUTH) == (True, None)
    assert board.neighbor(0, 0, Direction.NORTH) == (False, None)
    assert board.neighbor(0, 0, Direction.WEST) == (False, None)


def test_cells_are_row_major():
    assert list(Board(2, 2).cells()) == [(0, 0), (0, 1), (1, 0), (1, 1)]


def test_occupied_lists_placed_tiles(pasture, corner):
    board = Board(2, 2)
    board[1, 0] = corner
    board[0, 1] = pasture
    assert list(board.occupied()) == [(0, 1, pasture), (1, 0, corner)]


def test_zero_size_board_is_full_and_empty():
    board = Board(0, 0)
    assert board.n_cells == 0
    assert board.is_full()
    assert board.is_empty()


def test_negative_dimensions_rejected():
    with pytest.raises(ValueError):
        Board(-1, 2)

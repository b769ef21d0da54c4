"""Tests for text rendering."""

from carcassonne.board import Board
from carcassonne.render import draw_tile, format_solution, render_board
from carcassonne.solver.dedupe import Location, Solution


def test_pasture_tile_is_an_empty_frame(pasture):
    block = draw_tile(pasture, 11)
    assert block.shape == (11, 11)
    assert "".join(block[0]) == "+---------+"
    assert "".join(block[5]) == "|         |"


def test_road_runs_from_edge_to_center(make_tile):
    block = draw_tile(make_tile("road road pasture pasture"), 11)
    assert all(ch == "#" for ch in block[1:6, 5])
    assert all(ch == "#" for ch in block[5, 5:10])
    assert all(ch == " " for ch in block[6:10, 5])
    assert all(ch == " " for ch in block[5, 1:5])


def test_city_wedge_follows_rotation(make_tile):
    north = draw_tile(make_tile("city pasture pasture pasture"), 11)
    south = draw_tile(make_tile("pasture pasture city pasture"), 11)
    assert "".join(north[1, 2:9]) == "C" * 7
    assert "".join(north[2, 3:8]) == "C" * 5
    assert "".join(south[9, 2:9]) == "C" * 7
    assert "C" not in "".join(south[1])


def test_render_board_places_tiles_by_cell(pasture):
    board = Board(2, 2)
    board[1, 1] = pasture
    lines = render_board(board, 11).split("\n")
    assert len(lines) == 22
    assert lines[0] == ""
    assert lines[11] == " " * 11 + "+---------+"


def test_render_larger_tiles(pasture):
    board = Board(1, 1)
    board[0, 0] = pasture
    lines = render_board(board, 13).split("\n")
    assert len(lines) == 13
    assert lines[0] == "+-----------+"


def test_render_empty_board():
    assert render_board(Board(0, 0), 11) == ""


def test_format_solution():
    solution = Solution((Location(0, 0, 90), Location(0, 1, 0)))
    assert format_solution(solution) == "(0,0,90) (0,1,0)"

"""Placement legality checks for the tile solver.

Legality is checked in two phases:

1. `can_place` runs for every candidate placement during the search.  It checks the
   board boundary and any *occupied* neighbors only.  An empty neighbor may still be
   filled later, so no decision is made about it yet.
2. `validate_board` runs once all tiles are placed.  Every empty neighbor is now final,
   so edges facing one must be pasture, same as edges facing the boundary.  It also
   applies the diagonal-corner rule.
"""

from carcassonne.board import Board
from carcassonne.tile import Direction, Tile


def can_place(board: Board, tile: Tile, row: int, col: int) -> bool:
    """Returns whether `tile` (already rotated) may go at (row, col).

    Args:
        board (Board): The board, with (row, col) currently empty.
        tile (Tile): The candidate tile.
        row (int): Target row.
        col (int): Target column.
    """
    for direction in Direction:
        edge = tile[direction]
        exists, neighbor = board.neighbor(row, col, direction)
        if not exists:
            # Boundary rule
            if not edge.open_edge:
                return False
        elif neighbor is not None and neighbor[direction.opposite] is not edge:
            return False
    return True


def validate_board(board: Board) -> bool:
    """Validate a board on which every tile has been placed.

    For each occupied cell, every edge must either match the touching edge of an occupied
    neighbor, or be pasture if it faces the boundary or an empty cell.  No tile may sit
    diagonally from another when both cells between them are empty.
    """
    for row, col, tile in board.occupied():
        for direction in Direction:
            edge = tile[direction]
            _exists, neighbor = board.neighbor(row, col, direction)
            if neighbor is None:
                if not edge.open_edge:
                    return False
            elif neighbor[direction.opposite] is not edge:
                return False

        if _touches_only_diagonally(board, row, col, -1) or _touches_only_diagonally(
            board, row, col, 1
        ):
            return False

    return True


def _touches_only_diagonally(board: Board, row: int, col: int, d_row: int) -> bool:
    """Whether the cell at (row + d_row, col + 1) is occupied while both cells between it
    and (row, col) are empty.

    Checking the up-right and down-right diagonals of every occupied cell covers all
    diagonal pairs on the board.
    """
    if not board.in_bounds(row + d_row, col + 1):
        return False
    return (
        board[row + d_row, col] is None
        and board[row, col + 1] is None
        and board[row + d_row, col + 1] is not None
    )

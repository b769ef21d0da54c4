"""Text rendering of boards and solutions."""

import numpy as np

from carcassonne.board import Board
from carcassonne.solver.dedupe import Solution
from carcassonne.tile import Direction, Terrain, Tile

ROAD_CHAR = "#"
CITY_CHAR = "C"


def _edge_feature(terrain: Terrain, size: int) -> np.ndarray:
    """Draw the feature for one edge, as if it were the north edge.

    Returns a boolean mask of cells to mark.
    """
    mask = np.zeros((size, size), dtype=bool)
    center = size // 2
    if terrain is Terrain.ROAD:
        mask[1 : center + 1, center] = True
    elif terrain is Terrain.CITY:
        # Wedge narrowing towards the center
        for depth in range(1, size // 4 + 1):
            mask[depth, depth + 1 : size - depth - 1] = True
    return mask


def draw_tile(tile: Tile, size: int) -> np.ndarray:
    """Draw a single tile as a `size` x `size` character array."""
    block = np.full((size, size), " ", dtype="<U1")
    for direction in Direction:
        terrain = tile[direction]
        if terrain is Terrain.PASTURE:
            continue
        # np.rot90 with negative k rotates clockwise: north -> east -> south -> west
        mask = np.rot90(_edge_feature(terrain, size), -int(direction))
        block[mask] = ROAD_CHAR if terrain is Terrain.ROAD else CITY_CHAR

    block[0, :] = block[-1, :] = "-"
    block[:, 0] = block[:, -1] = "|"
    block[0, 0] = block[0, -1] = block[-1, 0] = block[-1, -1] = "+"
    return block


def render_board(board: Board, tile_size: int) -> str:
    """Render the board as text, one `tile_size` square per cell."""
    canvas = np.full((board.n_rows * tile_size, board.n_cols * tile_size), " ", dtype="<U1")
    for row, col, tile in board.occupied():
        top, left = row * tile_size, col * tile_size
        canvas[top : top + tile_size, left : left + tile_size] = draw_tile(tile, tile_size)
    return "\n".join("".join(line).rstrip() for line in canvas)


def format_solution(solution: Solution) -> str:
    """Format a solution as `(row,col,rotation)` tuples in tile order."""
    return str(solution)

"""Random tile placement, for demonstrating the output format."""

import random
from collections.abc import Sequence

from carcassonne.board import Board
from carcassonne.puzzle_config import PuzzleInputError
from carcassonne.solver.dedupe import Location, Solution
from carcassonne.tile import Tile


def randomly_place_tiles(
    board: Board, tiles: Sequence[Tile], *, seed: int | None = None
) -> Solution:
    """Put each tile on a random free cell, unrotated.

    The result is in all likelihood *not* a legal solution; no checks are made.
    """
    if board.n_cells < len(tiles):
        raise PuzzleInputError(
            f"Board {board.n_rows}x{board.n_cols} is not large enough for {len(tiles)} tiles."
        )
    rng = random.Random(seed)
    board.clear()
    locations: list[Location] = []
    for tile in tiles:
        free = [idx for idx, cell in enumerate(board.data) if cell is None]
        row, col = board.get_2d_idx(rng.choice(free))
        board[row, col] = tile
        locations.append(Location(row, col, 0))
    return Solution(tuple(locations))

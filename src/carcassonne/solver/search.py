"""Backtracking search for tile placements.

Tiles are placed one at a time in input order.  For each tile, empty cells are scanned in
row-major order and rotations are tried as 0, 90, 180, 270 degrees.  This fixed order makes
the enumeration reproducible, and the order of reported solutions depends on it.
"""

from collections.abc import Callable, Iterator, Sequence
from dataclasses import dataclass, field
from time import time

from carcassonne.board import Board
from carcassonne.puzzle_config import PuzzleInputError
from carcassonne.solver.checks import can_place, validate_board
from carcassonne.solver.dedupe import ROTATIONS, Location, Solution, SolutionSet
from carcassonne.tile import Tile


@dataclass
class SolverStats:
    """Statistics collected during solving."""

    placements_tried: int = 0
    """Number of candidate (cell, rotation) placements examined."""

    boards_checked: int = 0
    """Number of complete fills handed to `validate_board`."""

    solutions_found: int = 0
    """Number of distinct solutions reported."""

    start_time: float = field(default_factory=time)
    """Timestamp when solving started."""


ProgressCallback = Callable[[SolverStats], None]


def find_one_solution(
    tiles: Sequence[Tile],
    board: Board,
    allow_rotations: bool = False,
    *,
    stats: SolverStats | None = None,
    on_progress: ProgressCallback | None = None,
    report_interval: int = 0,
) -> Solution | None:
    """Find the first legal placement of all tiles.

    Args:
        tiles (Sequence[Tile]): Tiles to place, in order.
        board (Board): Board to place onto.  It is cleared before the search and left
            empty afterwards; use `place_solution` to show a result.
        allow_rotations (bool): Whether tiles may be rotated.
        stats (SolverStats | None): Optional statistics to update.
        on_progress (ProgressCallback | None): Called every `report_interval` placements.
        report_interval (int): Placements between progress callbacks (0 disables).

    Returns:
        The first `Solution` in search order, or None if none exists.

    Raises:
        PuzzleInputError: If the board has fewer cells than there are tiles.
    """
    search = _Search(tiles, board, allow_rotations, stats, on_progress, report_interval)
    fills = search.fills()
    try:
        solution = next(fills, None)
    finally:
        fills.close()
    if solution is not None:
        search.stats.solutions_found += 1
    return solution


def find_all_solutions(
    tiles: Sequence[Tile],
    board: Board,
    allow_rotations: bool = False,
    *,
    stats: SolverStats | None = None,
    on_progress: ProgressCallback | None = None,
    report_interval: int = 0,
) -> Iterator[Solution]:
    """Lazily enumerate all distinct solutions, in search order.

    Each legal fill is compared against the solutions yielded so far (see `SolutionSet`),
    and only new ones are yielded.  The generator is not restartable; arguments are as for
    `find_one_solution`.

    Raises:
        PuzzleInputError: If the board has fewer cells than there are tiles.  Raised on
            the call, before iteration begins.
    """
    search = _Search(tiles, board, allow_rotations, stats, on_progress, report_interval)
    return _distinct(search)


def _distinct(search: "_Search") -> Iterator[Solution]:
    results = SolutionSet(search.tiles)
    fills = search.fills()
    try:
        for solution in fills:
            if results.add(solution):
                search.stats.solutions_found += 1
                yield solution
    finally:
        fills.close()


def place_solution(board: Board, tiles: Sequence[Tile], solution: Solution) -> Board:
    """Clear `board` and lay out `solution` on it, with each tile rotated as recorded."""
    if solution.n_tiles != len(tiles):
        raise ValueError(f"Solution places {solution.n_tiles} tiles, expected {len(tiles)}.")
    board.clear()
    for tile, loc in zip(tiles, solution):
        board[loc.row, loc.col] = tile.rotate(ROTATIONS.index(loc.rotation))
    return board


class _Search:
    """Depth-first search state: the board and the stack of committed locations."""

    def __init__(
        self,
        tiles: Sequence[Tile],
        board: Board,
        allow_rotations: bool,
        stats: SolverStats | None,
        on_progress: ProgressCallback | None,
        report_interval: int,
    ) -> None:
        if board.n_cells < len(tiles):
            raise PuzzleInputError(
                f"Board {board.n_rows}x{board.n_cols} has {board.n_cells} cells, "
                f"not enough for {len(tiles)} tiles."
            )
        self.tiles = tuple(tiles)
        self.board = board
        self.n_turns = len(ROTATIONS) if allow_rotations else 1
        self.stats = stats if stats is not None else SolverStats()
        self.on_progress = on_progress
        self.report_interval = report_interval
        self.locations: list[Location] = []

    def fills(self) -> Iterator[Solution]:
        """Yield every legal fill, distinct or not, in search order."""
        self.board.clear()
        self.locations.clear()
        yield from self._place(0)

    def _place(self, index: int) -> Iterator[Solution]:
        if index == len(self.tiles):
            self.stats.boards_checked += 1
            if validate_board(self.board):
                yield Solution(tuple(self.locations))
            return

        tile = self.tiles[index]
        board = self.board
        for row, col in board.cells():
            if board[row, col] is not None:
                continue
            for turns in range(self.n_turns):
                candidate = tile.rotate(turns)
                self._count_placement()
                if not can_place(board, candidate, row, col):
                    continue

                board[row, col] = candidate
                self.locations.append(Location(row, col, ROTATIONS[turns]))
                try:
                    yield from self._place(index + 1)
                finally:
                    # Undo before trying the next alternative, also when the caller stops
                    # iterating early.
                    self.locations.pop()
                    board.erase(row, col)

    def _count_placement(self) -> None:
        self.stats.placements_tried += 1
        if (
            self.on_progress is not None
            and self.report_interval > 0
            and self.stats.placements_tried % self.report_interval == 0
        ):
            self.on_progress(self.stats)

"""Main solver module for tile placement puzzles."""

import os
import sys
from pathlib import Path
from pprint import pprint
from time import time
from typing import TextIO

from carcassonne.board import Board
from carcassonne.puzzle_config import PuzzleConfig
from carcassonne.render import format_solution, render_board
from carcassonne.solver.config import config as solver_config
from carcassonne.solver.dedupe import Solution
from carcassonne.solver.random_fill import randomly_place_tiles
from carcassonne.solver.search import (
    SolverStats,
    find_all_solutions,
    find_one_solution,
    place_solution,
)
from carcassonne.util import int_comma, time_str, timestamp_str


def get_logfile(config: PuzzleConfig) -> Path:
    """Path of the log file for a run."""
    suffix = ("-all" if config.all_solutions else "") + ("-rot" if config.allow_rotations else "")
    return Path(
        f"{solver_config.log_dir}/{config.tiles_path.stem}"
        f"/{config.dims[0]}x{config.dims[1]}{suffix}.log"
    )


def run(config: PuzzleConfig) -> int:
    """Run the solver on the given configuration.

    Args:
        config (PuzzleConfig): The configuration for the puzzle to solve.

    Returns:
        The number of solutions reported.
    """
    if solver_config.write_log:
        logfile = get_logfile(config)
        logfile.parent.mkdir(parents=True, exist_ok=True)
    else:
        logfile = Path(os.devnull)

    with open(logfile, "w", encoding="utf-8") as logf:
        try:
            return solve(config, logf=logf)
        except KeyboardInterrupt:
            print("Solver interrupted by user.", file=logf, flush=True)
            print("Solver interrupted by user.")
            sys.exit(1)


def solve(config: PuzzleConfig, *, logf: TextIO) -> int:
    """Solve (or randomly fill) a puzzle, printing results to stdout.

    Args:
        config (PuzzleConfig): The configuration for the puzzle to solve.
        logf: File object to log the solving process.

    Returns:
        The number of solutions reported.
    """
    print(f"Tile file: {config.tiles_path}", file=logf, flush=True)
    print(f"Dimensions: {config.dims}", file=logf, flush=True)
    print(f"Tiles: {len(config.tiles)}", file=logf, flush=True)
    for n, tile in enumerate(config.tiles):
        print(f"  {n:3d}. {tile}", file=logf, flush=True)
    print(
        f"All solutions: {config.all_solutions}, allow rotations: {config.allow_rotations}",
        file=logf,
        flush=True,
    )
    print("Solver config:", file=logf, flush=True)
    pprint(solver_config.model_dump(), stream=logf, width=120)

    board = Board(*config.dims)
    stats = SolverStats()
    print(f"Start time: {timestamp_str(stats.start_time)}", file=logf, flush=True)
    print("", file=logf, flush=True)

    if config.random_demo:
        solution = randomly_place_tiles(board, config.tiles, seed=solver_config.random_seed)
        print(f"Random placement: {format_solution(solution)}")
        _print_board(board, config)
        print("Random placement written.", file=logf, flush=True)
        return 0

    def report_progress(stats: SolverStats) -> None:
        print(
            f"Placements tried: {int_comma(stats.placements_tried)}, "
            f"fills checked: {int_comma(stats.boards_checked)}, "
            f"solutions: {stats.solutions_found}, "
            f"elapsed: {time_str(time() - stats.start_time)}",
            file=logf,
            flush=True,
        )

    search_kwargs = dict(
        stats=stats,
        on_progress=report_progress,
        report_interval=solver_config.report_interval,
    )

    n_found = 0
    if config.all_solutions:
        for solution in find_all_solutions(
            config.tiles, board, config.allow_rotations, **search_kwargs
        ):
            n_found += 1
            print(f"Solution {n_found} found.", file=logf, flush=True)
            _print_solution(solution, config)
        if n_found:
            print(f"Found {n_found} Solution(s).")
        else:
            print("No Solution.")
    else:
        solution = find_one_solution(config.tiles, board, config.allow_rotations, **search_kwargs)
        if solution is not None:
            n_found = 1
            _print_solution(solution, config)
        else:
            print("No Solution.")

    print("", file=logf, flush=True)
    print(f"Solutions found: {n_found}", file=logf, flush=True)
    print(f"Placements tried: {int_comma(stats.placements_tried)}", file=logf, flush=True)
    print(f"Fills checked: {int_comma(stats.boards_checked)}", file=logf, flush=True)
    print(f"Time taken: {time_str(time() - stats.start_time)}", file=logf, flush=True)
    return n_found


def _print_solution(solution: Solution, config: PuzzleConfig) -> None:
    print(f"Solution: {format_solution(solution)}")
    if solver_config.print_boards:
        board = place_solution(Board(*config.dims), config.tiles, solution)
        print(render_board(board, config.tile_size))


def _print_board(board: Board, config: PuzzleConfig) -> None:
    if solver_config.print_boards:
        print(render_board(board, config.tile_size))

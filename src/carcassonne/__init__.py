"""Carcassonne Tile Placement Solver.

Places a set of square tiles, each edge labelled road, city or pasture, onto a
rectangular board so that every shared edge matches and no road or city runs off
the board or into an empty cell.  Uses backtracking to explore possible placements,
optionally with rotations, and can enumerate all distinct solutions.
"""

import sys
from pathlib import Path

from .puzzle_config import PuzzleConfig, PuzzleInputError, default_dims, load_tiles
from .solver.config import config as solver_config
from .solver.solver import run

USAGE = """\
USAGE:
  carcassonne <filename>  -board_dimensions <h> <w>
  carcassonne <filename>  -board_dimensions <h> <w>  -all_solutions
  carcassonne <filename>  -board_dimensions <h> <w>  -allow_rotations
  carcassonne <filename>  -all_solutions  -allow_rotations
  carcassonne <filename>  -tile_size <odd # >= 11>
  carcassonne <filename>  -random"""


class UsageError(Exception):
    """Raised for malformed command-line arguments."""


def _int_arg(args: list[str], pos: int, name: str) -> int:
    if pos >= len(args):
        raise UsageError(f"missing value for {name}")
    try:
        return int(args[pos])
    except ValueError:
        raise UsageError(f"bad value for {name}: '{args[pos]}'") from None


def parse_args(args: list[str]) -> PuzzleConfig:
    """Build a PuzzleConfig from command-line arguments (excluding the program name).

    Raises:
        UsageError: If the arguments are malformed.
        FileNotFoundError: If the tile file does not exist.
        PuzzleInputError: If the tiles or board geometry are invalid.
    """
    if not args:
        raise UsageError("missing tile file")
    tiles_path = Path(args[0])

    dims: tuple[int, int] | None = None
    all_solutions = False
    allow_rotations = False
    random_demo = False
    tile_size = solver_config.tile_size

    i = 1
    while i < len(args):
        arg = args[i]
        if arg == "-tile_size":
            tile_size = _int_arg(args, i + 1, arg)
            i += 1
        elif arg == "-all_solutions":
            all_solutions = True
        elif arg == "-board_dimensions":
            dims = (_int_arg(args, i + 1, arg), _int_arg(args, i + 2, arg))
            i += 2
        elif arg == "-allow_rotations":
            allow_rotations = True
        elif arg == "-random":
            random_demo = True
        else:
            raise UsageError(f"unknown argument '{arg}'")
        i += 1

    tiles = load_tiles(tiles_path)
    return PuzzleConfig(
        tiles_path=tiles_path,
        tiles=tiles,
        dims=dims if dims is not None else default_dims(len(tiles)),
        all_solutions=all_solutions,
        allow_rotations=allow_rotations,
        tile_size=tile_size,
        random_demo=random_demo,
    )


def main(argv: list[str] | None = None) -> None:
    """Main entry point for the tile solver."""
    args = sys.argv[1:] if argv is None else argv
    try:
        config = parse_args(args)
    except (UsageError, PuzzleInputError, FileNotFoundError) as e:
        print(f"ERROR: {e}", file=sys.stderr)
        print(USAGE, file=sys.stderr)
        sys.exit(1)

    run(config)

"""Loader for tile files and validated run requests."""

from dataclasses import dataclass
from math import isqrt
from os import PathLike
from pathlib import Path

from carcassonne.solver.config import check_tile_size
from carcassonne.solver.config import config as solver_config
from carcassonne.tile import Terrain, Tile

RECORD_KEYWORD = "tile"
FIELDS_PER_RECORD = 5
"""Keyword plus four terrain tokens (north, east, south, west)."""


class PuzzleInputError(ValueError):
    """Raised for invalid tiles, board geometry or run options."""


def parse_terrain(token: str) -> Terrain:
    """Convert a terrain token (`road`, `city` or `pasture`) to a Terrain."""
    try:
        return Terrain(token)
    except ValueError:
        valid = ", ".join(t.value for t in Terrain)
        raise PuzzleInputError(f"Invalid terrain '{token}' (expected one of: {valid}).") from None


def parse_tiles(text: str) -> list[Tile]:
    """Parse tile records from text.

    Each record is `tile <north> <east> <south> <west>`; records are separated by any
    whitespace, usually one per line.
    """
    tokens = text.split()
    if len(tokens) % FIELDS_PER_RECORD != 0:
        raise PuzzleInputError(
            f"Incomplete tile record: {len(tokens) % FIELDS_PER_RECORD} trailing token(s)."
        )

    tiles: list[Tile] = []
    for start in range(0, len(tokens), FIELDS_PER_RECORD):
        keyword, *edges = tokens[start : start + FIELDS_PER_RECORD]
        record_no = start // FIELDS_PER_RECORD + 1
        if keyword != RECORD_KEYWORD:
            raise PuzzleInputError(
                f"Record {record_no}: expected '{RECORD_KEYWORD}', got '{keyword}'."
            )
        try:
            tiles.append(Tile(*(parse_terrain(token) for token in edges)))
        except PuzzleInputError as e:
            raise PuzzleInputError(f"Record {record_no}: {e}") from None
    return tiles


def load_tiles(tiles_path: PathLike | str) -> list[Tile]:
    """Load tiles from a tile file.

    Raises:
        FileNotFoundError: If the file does not exist.
        PuzzleInputError: If the file is malformed.
    """
    path = Path(tiles_path)
    if not path.is_file():
        raise FileNotFoundError(f"Tile file not found: {path}")
    return parse_tiles(path.read_text(encoding="utf-8"))


def default_dims(n_tiles: int) -> tuple[int, int]:
    """Smallest square board holding `n_tiles` tiles (at least 1x1)."""
    side = isqrt(n_tiles - 1) + 1 if n_tiles > 0 else 1
    return side, side


@dataclass
class PuzzleConfig:
    """A single run request."""

    tiles_path: Path
    """Tile file the tiles were read from."""

    tiles: list[Tile]
    """Tiles to place, in file order."""

    dims: tuple[int, int]
    """The height and width of the board."""

    all_solutions: bool = False
    """Whether to enumerate all distinct solutions instead of stopping at the first."""

    allow_rotations: bool = False
    """Whether tiles may be rotated by multiples of 90 degrees."""

    tile_size: int = solver_config.tile_size
    """Rendered tile size for printing boards."""

    random_demo: bool = False
    """Place the tiles at random (unchecked) instead of solving."""

    def __post_init__(self) -> None:
        """Validate the board geometry and options."""
        rows, cols = self.dims
        if rows < 1 or cols < 1:
            raise PuzzleInputError(f"Board dimensions must be positive, got {rows}x{cols}.")
        if rows * cols < len(self.tiles):
            raise PuzzleInputError(
                f"Board {rows}x{cols}={rows * cols} is not large enough for "
                f"{len(self.tiles)} tiles."
            )
        try:
            check_tile_size(self.tile_size)
        except ValueError as e:
            raise PuzzleInputError(str(e)) from None

    def __str__(self) -> str:
        """Return a string representation of the PuzzleConfig."""
        flags = [
            name
            for name, on in (
                ("all_solutions", self.all_solutions),
                ("allow_rotations", self.allow_rotations),
                ("random", self.random_demo),
            )
            if on
        ]
        return (
            f"{self.tiles_path.name} ({self.dims[0]}x{self.dims[1]}): "
            f"{len(self.tiles)} tiles" + (f" [{', '.join(flags)}]" if flags else "")
        )

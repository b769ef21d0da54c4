"""Solution records and the test for whether a solution is new."""

from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from typing import NamedTuple

from bitarray import bitarray
from bitarray.util import zeros

from carcassonne.tile import Tile

ROTATIONS = (0, 90, 180, 270)
"""Allowed rotations, in degrees clockwise, in the order the search tries them."""


class Location(NamedTuple):
    """Where one tile went: its cell and rotation."""

    row: int
    col: int
    rotation: int
    """Rotation in degrees, one of `ROTATIONS`."""

    def offset(self, other: "Location") -> tuple[int, int, int]:
        """Per-axis difference `self - other` as (d_row, d_col, d_rotation)."""
        return (self.row - other.row, self.col - other.col, self.rotation - other.rotation)

    def __str__(self) -> str:
        return f"({self.row},{self.col},{self.rotation})"


@dataclass(frozen=True)
class Solution:
    """A complete placement: one `Location` per input tile, in input order."""

    locations: tuple[Location, ...]

    def __iter__(self) -> Iterator[Location]:
        return iter(self.locations)

    def __getitem__(self, n: int) -> Location:
        return self.locations[n]

    @property
    def n_tiles(self) -> int:
        """Number of tiles placed."""
        return len(self.locations)

    def __str__(self) -> str:
        return " ".join(str(loc) for loc in self.locations)


def interchangeable_masks(tiles: Sequence[Tile]) -> list[bitarray]:
    """For each tile, a bitarray marking the *other* tiles with identical edges.

    Bit `i` of `masks[n]` is set if `tiles[i] == tiles[n]` and `i != n`.
    """
    n_tiles = len(tiles)
    masks = [zeros(n_tiles) for _ in range(n_tiles)]
    for n in range(n_tiles):
        for i in range(n + 1, n_tiles):
            if tiles[i] == tiles[n]:
                masks[n][i] = 1
                masks[i][n] = 1
    return masks


class SolutionSet:
    """Ordered, append-only collection of distinct solutions.

    A candidate duplicates an accepted solution `R` if every tile `n` lands where `R` put
    tile `n`, or where `R` put an interchangeable twin of it, after applying one fixed
    (row, col, rotation) offset.  The offset is taken from tile 0.  Exact equality, up to
    twins, is checked first as a special case.

    Each check costs O(accepted solutions x tiles^2).
    """

    def __init__(self, tiles: Sequence[Tile]) -> None:
        self.tiles = tuple(tiles)
        self.solutions: list[Solution] = []
        self._twins = interchangeable_masks(self.tiles)

    def __len__(self) -> int:
        return len(self.solutions)

    def __iter__(self) -> Iterator[Solution]:
        return iter(self.solutions)

    def add(self, solution: Solution) -> bool:
        """Append `solution` if it is new.

        Returns:
            True if it was added, False if it duplicates an accepted solution.
        """
        if solution.n_tiles != len(self.tiles):
            raise ValueError(
                f"Solution places {solution.n_tiles} tiles, expected {len(self.tiles)}."
            )
        if self.is_duplicate(solution):
            return False
        self.solutions.append(solution)
        return True

    def is_duplicate(self, solution: Solution) -> bool:
        """Whether `solution` is equivalent to any accepted solution."""
        return any(
            self._same_placement(solution, accepted) or self._same_up_to_offset(solution, accepted)
            for accepted in self.solutions
        )

    def _same_placement(self, solution: Solution, accepted: Solution) -> bool:
        for n, loc in enumerate(accepted):
            if solution[n] == loc:
                continue
            if not any(solution[i] == loc for i in self._twins[n].search(1)):
                return False
        return True

    def _same_up_to_offset(self, solution: Solution, accepted: Solution) -> bool:
        if not self.tiles:
            return True
        delta = solution[0].offset(accepted[0])
        for n, loc in enumerate(accepted):
            if solution[n].offset(loc) == delta:
                continue
            if not any(solution[i].offset(loc) == delta for i in self._twins[n].search(1)):
                return False
        return True

"""Module for tile-related classes and functions."""

from enum import Enum, IntEnum
from typing import NamedTuple


class Terrain(Enum):
    """Terrain kind on a tile edge."""

    ROAD = "road"
    CITY = "city"
    PASTURE = "pasture"

    @property
    def open_edge(self) -> bool:
        """Whether this terrain is allowed to face the boundary or an empty cell."""
        return self is Terrain.PASTURE


class Direction(IntEnum):
    """Tile edge directions, clockwise from north."""

    NORTH = 0
    EAST = 1
    SOUTH = 2
    WEST = 3

    @property
    def opposite(self) -> "Direction":
        """The direction facing this one across a shared edge."""
        return Direction((self + 2) % 4)

    @property
    def delta(self) -> tuple[int, int]:
        """(row, col) step to the neighboring cell in this direction."""
        return _DELTAS[self]


_DELTAS = {
    Direction.NORTH: (-1, 0),
    Direction.EAST: (0, 1),
    Direction.SOUTH: (1, 0),
    Direction.WEST: (0, -1),
}


class Tile(NamedTuple):
    """A square tile with four terrain edges.

    Two tiles comparing equal have identical terrain in every direction, and are
    interchangeable when deduplicating solutions.
    """

    north: Terrain
    east: Terrain
    south: Terrain
    west: Terrain

    def edge(self, direction: Direction) -> Terrain:
        """Get the terrain on the given edge."""
        return self[direction]

    def rotate(self, turns: int) -> "Tile":
        """Return a copy rotated clockwise by `turns` quarter turns.

        One turn maps (N, E, S, W) to (W, N, E, S): the west edge becomes north.

        Raises:
            ValueError: If `turns` is not in 0..3.
        """
        if turns not in range(4):
            raise ValueError(f"Invalid rotation: {turns} quarter turns (expected 0-3).")
        if turns == 0:
            return self
        return Tile(*(self[(idx - turns) % 4] for idx in range(4)))

    def __str__(self) -> str:
        return " ".join(terrain.value for terrain in self)

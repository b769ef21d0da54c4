"""Classes and functions for representing the game board."""

from collections.abc import Iterator

from carcassonne.tile import Direction, Tile


class Board:
    """Store a 2D grid of optional tiles as a 1D list.

    Contains support for both 1D and 2D indexing.  Empty cells hold `None`.
    """

    def __init__(self, rows: int, cols: int) -> None:
        if rows < 0 or cols < 0:
            raise ValueError(f"Board dimensions must be non-negative, got {rows}x{cols}.")
        self.n_rows = rows
        self.n_cols = cols
        self.data: list[Tile | None] = [None] * (rows * cols)

    @property
    def n_cells(self) -> int:
        """Total number of cells on the board."""
        return len(self.data)

    def __getitem__(self, idx: int | tuple[int, int]) -> Tile | None:
        """Get cell content by 1D (row-major order) or 2D index."""
        return self.data[self._to_1d(idx)]

    def __setitem__(self, idx: int | tuple[int, int], tile: Tile) -> None:
        """Place a tile by 1D (row-major order) or 2D index.

        No legality check is made here, see `carcassonne.solver.checks.can_place`.
        """
        one_d_idx = self._to_1d(idx)
        if self.data[one_d_idx] is not None:
            raise ValueError(f"Cell {self.get_2d_idx(one_d_idx)} is already occupied.")
        self.data[one_d_idx] = tile

    def _to_1d(self, idx: int | tuple[int, int]) -> int:
        if isinstance(idx, int):
            if not 0 <= idx < self.n_cells:
                raise IndexError(f"Cell index {idx} out of range for {self.n_cells} cells.")
            return idx
        if isinstance(idx, tuple) and len(idx) == 2:
            row, col = idx
            if not self.in_bounds(row, col):
                raise IndexError(
                    f"Cell ({row}, {col}) out of range for {self.n_rows}x{self.n_cols} board."
                )
            return row * self.n_cols + col
        raise IndexError("Invalid index type for Board.")

    def in_bounds(self, row: int, col: int) -> bool:
        """Whether (row, col) lies on the board."""
        return 0 <= row < self.n_rows and 0 <= col < self.n_cols

    def get_2d_idx(self, one_d_idx: int) -> tuple[int, int]:
        """Convert a 1D index to a (row, col) tuple."""
        return divmod(one_d_idx, self.n_cols)

    def get_1d_idx(self, row: int, col: int) -> int:
        """Convert a (row, col) tuple to a 1D index."""
        return row * self.n_cols + col

    def erase(self, row: int, col: int) -> None:
        """Remove the tile at (row, col), if any."""
        self.data[self._to_1d((row, col))] = None

    def clear(self) -> None:
        """Reset every cell to empty."""
        self.data = [None] * self.n_cells

    def is_full(self) -> bool:
        """Whether every cell holds a tile."""
        return all(tile is not None for tile in self.data)

    def is_empty(self) -> bool:
        """Whether no cell holds a tile."""
        return all(tile is None for tile in self.data)

    def neighbor(self, row: int, col: int, direction: Direction) -> tuple[bool, Tile | None]:
        """Look at the cell next to (row, col) in `direction`.

        Returns:
            A tuple `(exists, tile)`; `exists` is False when the neighbor would be off the
            board, in which case `tile` is always None.
        """
        d_row, d_col = direction.delta
        n_row, n_col = row + d_row, col + d_col
        if not self.in_bounds(n_row, n_col):
            return False, None
        return True, self.data[n_row * self.n_cols + n_col]

    def cells(self) -> Iterator[tuple[int, int]]:
        """Iterate over all (row, col) positions in row-major order."""
        for row in range(self.n_rows):
            for col in range(self.n_cols):
                yield row, col

    def occupied(self) -> Iterator[tuple[int, int, Tile]]:
        """Iterate over (row, col, tile) for every occupied cell, row-major."""
        for idx, tile in enumerate(self.data):
            if tile is not None:
                row, col = self.get_2d_idx(idx)
                yield row, col, tile

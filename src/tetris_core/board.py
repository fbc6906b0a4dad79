"""Board representation for the Tetris playfield.

The grid is addressed ``grid[x, y]`` with ``(0, 0)`` in the bottom-left corner,
``x`` growing to the right and ``y`` growing upwards.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

from .tetromino import Tetromino, draw


# Dimensions of the playfield.  The top rows above the visible 20 form the
# spawn buffer.
WIDTH = 10
HEIGHT = 25

Grid = NDArray[np.uint8]


def create_empty_grid(width: int = WIDTH, height: int = HEIGHT) -> Grid:
    """Return a new empty board grid filled with zeros."""

    return np.zeros((width, height), dtype=np.uint8)


class Board:
    """Tetris board holding the occupied cells."""

    def __init__(self, width: int = WIDTH, height: int = HEIGHT) -> None:
        self.width = width
        self.height = height
        self.grid: Grid = create_empty_grid(width, height)

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def get_cell(self, x: int, y: int) -> int:
        """Safely return the value at ``(x, y)``.

        Raises:
            IndexError: If the coordinates are outside the board.
        """
        if self.in_bounds(x, y):
            return int(self.grid[x, y])
        raise IndexError("Cell out of bounds")

    def set_cell(self, x: int, y: int, value: int) -> None:
        """Safely set the value at ``(x, y)``.

        Raises:
            IndexError: If the coordinates are outside the board.
        """
        if self.in_bounds(x, y):
            self.grid[x, y] = np.uint8(value)
        else:
            raise IndexError("Cell out of bounds")

    def is_empty(self, x: int, y: int) -> bool:
        """Return ``True`` if the cell at ``(x, y)`` is empty.

        Any coordinates outside the board are treated as occupied.
        """

        if self.in_bounds(x, y):
            return bool(self.grid[x, y] == 0)
        return False

    def copy(self) -> "Board":
        """Return an independent board with the same cells."""

        clone = Board(self.width, self.height)
        clone.grid = self.grid.copy()
        return clone

    def lock_piece(self, tetromino: Tetromino) -> None:
        """Write the tetromino's blocks into the grid at its position.

        Raises:
            IndexError: If any block lies outside the board.
        """

        coordinates = np.asarray(tetromino.blocks(), dtype=np.int16)
        if coordinates.size == 0:
            return

        xs, ys = coordinates.T
        if (
            np.any(xs < 0)
            or np.any(xs >= self.width)
            or np.any(ys < 0)
            or np.any(ys >= self.height)
        ):
            raise IndexError("Block out of bounds")

        x, y = tetromino.position
        draw(tetromino, self.grid, x, y)

    def clear_full_rows(self) -> int:
        """Clear completed rows and return how many were removed.

        Rows above a cleared row fall down to fill the gap.
        """

        full_rows = np.all(self.grid != 0, axis=0)
        cleared = int(np.count_nonzero(full_rows))
        if cleared:
            remaining = self.grid[:, ~full_rows]
            new_rows = np.zeros((self.width, cleared), dtype=self.grid.dtype)
            self.grid = np.hstack((remaining, new_rows))
        return cleared

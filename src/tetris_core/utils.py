"""Utility helpers for the Tetris engine."""

from __future__ import annotations

from typing import Optional, List

from .board import Board
from .tetromino import Tetromino


def render_grid(board: Board, active: Optional[Tetromino] = None) -> List[List[int]]:
    """Return a copy of the board with the active piece overlaid.

    Rows are returned top-down, the order in which a text or raster renderer
    draws them, so ``result[0]`` is the highest row of the board.  The board
    itself is not modified.
    """

    grid = board.grid.copy()
    if active is not None:
        for x, y in active.blocks():
            if board.in_bounds(x, y):
                grid[x, y] = active.value
    return [[int(grid[x, y]) for x in range(board.width)] for y in reversed(range(board.height))]

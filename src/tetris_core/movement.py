"""Movement, collision and rotation rules for the active tetromino.

The functions here borrow the board and the piece for the duration of a single
call and never keep a reference to either.  Instead of calling back into the
host, operations that can end a piece's life return a :class:`MoveResult`; the
host reacts to :attr:`MoveResult.LOCKED` by refreshing its auxiliary board and
spawning the next piece.
"""

from __future__ import annotations

import logging
from enum import Enum

import numpy as np

from .board import Board
from .tetromino import Mask, Tetromino


LOGGER = logging.getLogger(__name__)


class Rotation(str, Enum):
    """Direction of a 90 degree rotation."""

    RIGHT = "right"
    LEFT = "left"


class MoveResult(str, Enum):
    """Outcome of a translation attempt."""

    MOVED = "moved"
    BLOCKED = "blocked"
    LOCKED = "locked"


def can_move(board: Board, tetromino: Tetromino, dx: int, dy: int) -> bool:
    """Return ``True`` if ``tetromino`` can move by ``dx`` and ``dy`` on ``board``.

    Every occupied cell must stay inside the board and land on an empty cell.
    """

    x, y = tetromino.position
    for tx, ty in tetromino.cells():
        new_x = x + tx + dx
        new_y = y + ty + dy
        if not board.in_bounds(new_x, new_y):
            return False
        if not board.is_empty(new_x, new_y):
            return False
    return True


def try_move(board: Board, tetromino: Tetromino, dx: int, dy: int) -> MoveResult:
    """Attempt to move ``tetromino`` by ``dx`` and ``dy``.

    A blocked downward move locks the piece: it is drawn onto ``board`` at its
    current position and :attr:`MoveResult.LOCKED` is returned.  Any other
    blocked move leaves everything untouched.
    """

    if can_move(board, tetromino, dx, dy):
        tetromino.move(dx, dy)
        return MoveResult.MOVED
    if dy < 0:
        board.lock_piece(tetromino)
        LOGGER.debug("Locked %s at %s", tetromino.kind.value, tetromino.position)
        return MoveResult.LOCKED
    return MoveResult.BLOCKED


def drop_down(board: Board, tetromino: Tetromino) -> MoveResult:
    """Move the piece down one row, locking it if it cannot descend."""

    return try_move(board, tetromino, 0, -1)


def hard_drop(board: Board, tetromino: Tetromino) -> MoveResult:
    """Drop the piece until it locks."""

    rows = 0
    while drop_down(board, tetromino) is MoveResult.MOVED:
        rows += 1
    LOGGER.debug("Hard drop of %s fell %d rows", tetromino.kind.value, rows)
    return MoveResult.LOCKED


def rotated_shape(shape: Mask, direction: Rotation) -> Mask:
    """Return ``shape`` rotated 90 degrees in ``direction``.

    A ``w x h`` mask becomes ``h x w``.  For square masks this is
    ``new[i][j] = shape[j][h - i - 1]`` when turning ``LEFT`` (counter-clockwise)
    and ``new[i][j] = shape[w - j - 1][i]`` when turning ``RIGHT`` (clockwise);
    those index formulas only hold when ``w == h``.
    """

    if Rotation(direction) is Rotation.LEFT:
        return np.ascontiguousarray(shape.T[::-1, :])
    return np.ascontiguousarray(shape.T[:, ::-1])


def can_rotate(auxiliary: Board, tetromino: Tetromino, candidate: Mask) -> bool:
    """Return ``True`` if ``candidate`` fits at the piece's current position.

    The check runs against the auxiliary board, which mirrors the locked
    cells.  All occupied cells are evaluated before the result is decided.
    """

    coordinates = np.argwhere(candidate) + np.asarray(tetromino.position)
    if coordinates.size == 0:
        return True

    xs, ys = coordinates.T
    inside = (xs >= 0) & (xs < auxiliary.width) & (ys >= 0) & (ys < auxiliary.height)
    if not np.all(inside):
        return False
    return bool(np.all(auxiliary.grid[xs, ys] == 0))


def rotate(auxiliary: Board, tetromino: Tetromino, direction: Rotation) -> bool:
    """Rotate the piece in ``direction`` if the result fits.

    A rotation that would leave the board or overlap a locked cell is rejected
    outright and the piece keeps its current shape.  Returns whether the
    rotation was applied.
    """

    direction = Rotation(direction)
    candidate = rotated_shape(tetromino.shape, direction)
    if not can_rotate(auxiliary, tetromino, candidate):
        LOGGER.debug("Rejected %s rotation of %s", direction.value, tetromino.kind.value)
        return False
    tetromino.shape = candidate
    return True


def rotate_right(auxiliary: Board, tetromino: Tetromino) -> bool:
    """Rotate the piece clockwise."""

    return rotate(auxiliary, tetromino, Rotation.RIGHT)


def rotate_left(auxiliary: Board, tetromino: Tetromino) -> bool:
    """Rotate the piece counter-clockwise."""

    return rotate(auxiliary, tetromino, Rotation.LEFT)


__all__ = [
    "MoveResult",
    "Rotation",
    "can_move",
    "can_rotate",
    "drop_down",
    "hard_drop",
    "rotate",
    "rotate_left",
    "rotate_right",
    "rotated_shape",
    "try_move",
]

"""Tetromino definitions and basic behaviour.

Each of the seven pieces is described once by a :class:`PieceSpec` holding its
display colour and a canonical layout authored row-first, the way the shapes
are usually drawn on paper.  The board however is addressed ``[x, y]`` with the
origin in the bottom-left corner, so the layout is converted with
:func:`ij_to_xy` when a :class:`Tetromino` is created.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Tuple

import numpy as np
from numpy.typing import NDArray

Mask = NDArray[np.bool_]
Layout = Tuple[Tuple[int, ...], ...]

# Where every freshly spawned piece anchors its ``[0, 0]`` cell.
SPAWN_POSITION: Tuple[int, int] = (3, 20)


class TetrominoType(str, Enum):
    """Enumeration of the seven standard tetromino shapes."""

    I = "I"
    J = "J"
    L = "L"
    O = "O"
    S = "S"
    T = "T"
    Z = "Z"


@dataclass(frozen=True)
class PieceSpec:
    """Static data for one tetromino variant."""

    color: Tuple[int, int, int]
    layout: Layout

    def mask(self) -> Mask:
        """Return the layout as a fresh boolean array (row, column)."""

        return np.array(self.layout, dtype=bool)


# Colours from the Tetris wiki.
PIECE_SPECS: Dict[TetrominoType, PieceSpec] = {
    TetrominoType.I: PieceSpec(
        (0x31, 0xE7, 0xEF),
        (
            (0, 0, 0, 0),
            (1, 1, 1, 1),
            (0, 0, 0, 0),
            (0, 0, 0, 0),
        ),
    ),
    TetrominoType.J: PieceSpec(
        (0x5A, 0x65, 0xAD),
        (
            (1, 0, 0),
            (1, 1, 1),
            (0, 0, 0),
        ),
    ),
    TetrominoType.L: PieceSpec(
        (0xEF, 0x79, 0x21),
        (
            (0, 0, 1),
            (1, 1, 1),
            (0, 0, 0),
        ),
    ),
    TetrominoType.O: PieceSpec(
        (0xF7, 0xD3, 0x08),
        (
            (1, 1),
            (1, 1),
        ),
    ),
    TetrominoType.S: PieceSpec(
        (0x42, 0xB6, 0x42),
        (
            (0, 1, 1),
            (1, 1, 0),
            (0, 0, 0),
        ),
    ),
    TetrominoType.T: PieceSpec(
        (0xAD, 0x4D, 0x9C),
        (
            (0, 1, 0),
            (1, 1, 1),
            (0, 0, 0),
        ),
    ),
    TetrominoType.Z: PieceSpec(
        (0xEF, 0x20, 0x29),
        (
            (1, 1, 0),
            (0, 1, 1),
            (0, 0, 0),
        ),
    ),
}

# Mapping from ``TetrominoType`` to the integer stored in the grid.  ``0`` is
# reserved for empty cells.
PIECE_VALUES = {t: i + 1 for i, t in enumerate(TetrominoType)}


def ij_to_xy(layout: Mask) -> Mask:
    """Convert a row/column layout into the board's x/y addressing.

    For a layout with ``R`` rows and ``C`` columns the result has shape
    ``(C, R)`` and ``result[x, y] == layout[R - y - 1, x]``: the first authored
    row ends up at the top of the piece.  This is a change of convention, not a
    rotation of the piece.

    Raises:
        ValueError: If ``layout`` is not a non-empty 2D array.
    """

    layout = np.asarray(layout, dtype=bool)
    if layout.ndim != 2 or layout.size == 0:
        raise ValueError("Layout must be a non-empty rectangular 2D array")
    return np.ascontiguousarray(layout.T[:, ::-1])


@dataclass(eq=False)
class Tetromino:
    """Active falling piece in the game."""

    kind: TetrominoType
    position: Tuple[int, int] = SPAWN_POSITION  # (x, y)
    shape: Mask = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self.kind = TetrominoType(self.kind)
        self.shape = ij_to_xy(PIECE_SPECS[self.kind].mask())

    @property
    def width(self) -> int:
        return int(self.shape.shape[0])

    @property
    def height(self) -> int:
        return int(self.shape.shape[1])

    @property
    def color(self) -> Tuple[int, int, int]:
        return PIECE_SPECS[self.kind].color

    @property
    def value(self) -> int:
        """Integer written into the grid for this piece's tiles."""

        return PIECE_VALUES[self.kind]

    def reset(self) -> None:
        """Move the piece back to the spawn coordinate."""

        self.position = SPAWN_POSITION

    def move(self, dx: int, dy: int) -> None:
        """Translate the piece by ``dx`` columns and ``dy`` rows.

        No collision checking is done here; see :mod:`tetris_core.movement`.
        """

        x, y = self.position
        self.position = (x + dx, y + dy)

    def cells(self) -> List[Tuple[int, int]]:
        """Return the occupied ``(x, y)`` cells relative to ``position``."""

        return [(int(tx), int(ty)) for tx, ty in np.argwhere(self.shape)]

    def blocks(self) -> List[Tuple[int, int]]:
        """Return the global ``(x, y)`` block coordinates for this piece."""

        x, y = self.position
        return [(x + tx, y + ty) for tx, ty in self.cells()]


def draw(tetromino: Tetromino, grid: NDArray[np.uint8], bx: int, by: int) -> None:
    """Draw ``tetromino`` into ``grid`` with its origin at ``(bx, by)``.

    ``(0, 0)`` is the bottom-left cell.  No bounds checking is performed, the
    caller must make sure the piece fits.
    """

    for tx, ty in tetromino.cells():
        grid[bx + tx, by + ty] = tetromino.value


__all__ = [
    "PIECE_SPECS",
    "PIECE_VALUES",
    "SPAWN_POSITION",
    "PieceSpec",
    "Tetromino",
    "TetrominoType",
    "draw",
    "ij_to_xy",
]

"""High level game state container.

:class:`GameState` is the reference host for :mod:`tetris_core.movement`.  It
owns the primary board, the auxiliary board used for rotation checks and the
active piece slot, and turns the engine's :class:`MoveResult` values into the
lock/respawn bookkeeping.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional
import logging
import random

from . import movement
from .board import Board
from .movement import MoveResult, Rotation
from .tetromino import Tetromino, TetrominoType


LOGGER = logging.getLogger(__name__)


@dataclass
class GameState:
    """Mutable state for a Tetris game session."""

    board: Board = field(default_factory=Board)
    auxiliary: Board = field(init=False, repr=False)
    active: Optional[Tetromino] = None
    upcoming: Optional[TetrominoType] = None
    lock_pending: bool = False
    game_over: bool = False
    pieces: int = 0
    lines: int = 0
    rng: random.Random = field(default_factory=random.Random, repr=False)

    def __post_init__(self) -> None:
        self.fill_aux()

    def _random_type(self) -> TetrominoType:
        """Return a random tetromino type."""

        return self.rng.choice(list(TetrominoType))

    def spawn_tetromino(self) -> Optional[Tetromino]:
        """Spawn and return a new active tetromino.

        The piece in ``upcoming`` becomes active at the spawn coordinate and a
        new upcoming piece is randomly selected.  If the new piece overlaps
        locked blocks the game is over and ``None`` is returned.
        """

        shape = self.upcoming or self._random_type()
        piece = Tetromino(shape)
        piece.reset()
        self.upcoming = self._random_type()
        if not movement.can_move(self.board, piece, 0, 0):
            self.game_over = True
            self.active = None
            LOGGER.info("Game over after %d pieces and %d lines", self.pieces, self.lines)
            return None
        self.active = piece
        LOGGER.debug("Spawned %s, next is %s", shape.value, self.upcoming.value)
        return piece

    def fill_aux(self) -> None:
        """Refresh the auxiliary board from the primary board."""

        self.auxiliary = self.board.copy()

    def clear_active(self) -> None:
        """Empty the active piece slot; the next :meth:`step` respawns."""

        self.active = None

    def _handle(self, result: MoveResult) -> MoveResult:
        if result is MoveResult.LOCKED:
            self.fill_aux()
            self.lock_pending = True
            self.pieces += 1
            self.clear_active()
        return result

    # Inputs -----------------------------------------------------------
    def try_move(self, dx: int, dy: int) -> MoveResult:
        """Move the active piece, locking it when a downward move is blocked."""

        if self.active is None:
            return MoveResult.BLOCKED
        return self._handle(movement.try_move(self.board, self.active, dx, dy))

    def move_left(self) -> MoveResult:
        return self.try_move(-1, 0)

    def move_right(self) -> MoveResult:
        return self.try_move(1, 0)

    def drop_down(self) -> MoveResult:
        """Soft drop: move the active piece down one row."""

        if self.active is None:
            return MoveResult.BLOCKED
        return self._handle(movement.drop_down(self.board, self.active))

    def hard_drop(self) -> MoveResult:
        if self.active is None:
            return MoveResult.BLOCKED
        return self._handle(movement.hard_drop(self.board, self.active))

    def rotate(self, direction: Rotation) -> bool:
        if self.active is None:
            return False
        return movement.rotate(self.auxiliary, self.active, direction)

    def rotate_left(self) -> bool:
        return self.rotate(Rotation.LEFT)

    def rotate_right(self) -> bool:
        return self.rotate(Rotation.RIGHT)

    # Game loop --------------------------------------------------------
    def step(self) -> Optional[MoveResult]:
        """Advance the game by one tick.

        Pending locks are resolved first by clearing full rows.  Then an empty
        slot is refilled, otherwise gravity pulls the active piece down.
        Returns the gravity result, or ``None`` when no piece moved.
        """

        if self.game_over:
            return None
        if self.lock_pending:
            cleared = self.board.clear_full_rows()
            if cleared:
                self.lines += cleared
                LOGGER.debug("Cleared %d rows", cleared)
            self.fill_aux()
            self.lock_pending = False
        if self.active is None:
            self.spawn_tetromino()
            return None
        return self.drop_down()

    def reset_game(self, seed: Optional[int] = None) -> None:
        """Reset the entire game state for a new game."""

        if seed is not None:
            self.rng.seed(seed)
        self.board = Board(self.board.width, self.board.height)
        self.fill_aux()
        self.active = None
        self.upcoming = None
        self.lock_pending = False
        self.game_over = False
        self.pieces = 0
        self.lines = 0
        self.spawn_tetromino()

"""Falling-piece movement, collision and rotation core for Tetris."""

from .board import Board
from .tetromino import PIECE_SPECS, SPAWN_POSITION, Tetromino, TetrominoType, draw, ij_to_xy
from .movement import (
    MoveResult,
    Rotation,
    can_move,
    can_rotate,
    drop_down,
    hard_drop,
    rotate,
    rotate_left,
    rotate_right,
    try_move,
)
from .game_state import GameState
from .utils import render_grid

__all__ = [
    "Board",
    "Tetromino",
    "TetrominoType",
    "PIECE_SPECS",
    "SPAWN_POSITION",
    "GameState",
    "MoveResult",
    "Rotation",
    "can_move",
    "can_rotate",
    "draw",
    "drop_down",
    "hard_drop",
    "ij_to_xy",
    "render_grid",
    "rotate",
    "rotate_left",
    "rotate_right",
    "try_move",
]

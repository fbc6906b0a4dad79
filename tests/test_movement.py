import random

import numpy as np
import pytest

from tetris_core.board import Board
from tetris_core.game_state import GameState
from tetris_core.movement import MoveResult, can_move, drop_down, hard_drop, try_move
from tetris_core.tetromino import SPAWN_POSITION, Tetromino, TetrominoType


@pytest.mark.parametrize("kind", list(TetrominoType))
def test_spawned_piece_fits_on_empty_board(kind):
    board = Board()
    piece = Tetromino(kind)
    assert can_move(board, piece, 0, 0)
    assert can_move(board, piece, 0, -1)


def test_blocked_move_at_left_wall_changes_nothing():
    board = Board()
    piece = Tetromino(TetrominoType.O, position=(0, 10))
    before = board.grid.copy()

    assert try_move(board, piece, -1, 0) is MoveResult.BLOCKED
    assert piece.position == (0, 10)
    assert np.array_equal(board.grid, before)


def test_blocked_upward_move_does_not_lock():
    board = Board()
    piece = Tetromino(TetrominoType.O, position=(4, board.height - 2))
    assert try_move(board, piece, 0, 1) is MoveResult.BLOCKED
    assert not board.grid.any()


def test_cannot_move_onto_occupied_cell():
    board = Board()
    piece = Tetromino(TetrominoType.O, position=(4, 10))
    board.set_cell(6, 11, 1)
    assert not can_move(board, piece, 1, 0)
    assert can_move(board, piece, -1, 0)


def test_successful_move_translates_piece():
    board = Board()
    piece = Tetromino(TetrominoType.L)
    assert try_move(board, piece, 1, -2) is MoveResult.MOVED
    assert piece.position == (SPAWN_POSITION[0] + 1, SPAWN_POSITION[1] - 2)


def test_drop_down_locks_piece_on_floor():
    board = Board()
    piece = Tetromino(TetrominoType.O, position=(4, 0))

    assert drop_down(board, piece) is MoveResult.LOCKED
    assert piece.position == (4, 0)
    assert sorted(map(tuple, np.argwhere(board.grid))) == [(4, 0), (4, 1), (5, 0), (5, 1)]
    assert board.get_cell(4, 0) == piece.value


def test_drop_down_lands_on_locked_blocks():
    board = Board()
    board.set_cell(4, 5, 1)
    piece = Tetromino(TetrominoType.O, position=(4, 7))
    assert drop_down(board, piece) is MoveResult.MOVED
    assert drop_down(board, piece) is MoveResult.LOCKED
    assert piece.position == (4, 6)
    assert board.get_cell(5, 7) == piece.value


def test_hard_drop_from_spawn_reaches_floor():
    board = Board()
    piece = Tetromino(TetrominoType.O)
    assert hard_drop(board, piece) is MoveResult.LOCKED
    assert piece.position == (3, 0)
    assert board.grid[3:5, 0:2].all()
    assert np.count_nonzero(board.grid) == 4


def test_random_inputs_keep_piece_in_bounds():
    rng = random.Random(7)
    state = GameState()
    state.reset_game(seed=7)
    actions = [
        state.move_left,
        state.move_right,
        state.drop_down,
        state.rotate_left,
        state.rotate_right,
        state.step,
    ]
    for _ in range(2000):
        if state.game_over:
            break
        rng.choice(actions)()
        if state.active is None:
            continue
        for x, y in state.active.blocks():
            assert state.board.in_bounds(x, y)
            assert state.board.is_empty(x, y)


def test_empty_mask_can_always_move():
    board = Board()
    piece = Tetromino(TetrominoType.O, position=(0, 0))
    piece.shape = np.zeros((2, 2), dtype=bool)
    assert can_move(board, piece, -50, 0)
    assert can_move(board, piece, 0, -50)


def test_blocked_diagonal_down_move_locks():
    board = Board()
    piece = Tetromino(TetrominoType.O, position=(0, 5))

    assert try_move(board, piece, -1, -1) is MoveResult.LOCKED
    assert piece.position == (0, 5)
    assert sorted(map(tuple, np.argwhere(board.grid))) == [(0, 5), (0, 6), (1, 5), (1, 6)]

"""Simple ASCII demo for the Tetris engine.

Run with: `python -m tetris_core`

Hard-drops a handful of random pieces through :class:`GameState` and prints
the resulting frame, board plus active tetromino, top row first.
"""

from __future__ import annotations

import argparse
import logging

from . import GameState, render_grid


LOGGER = logging.getLogger(__name__)


def _print_grid(grid: list[list[int]]) -> None:
    for row in grid:
        print("".join("#" if cell else "." for cell in row))


def run(pieces: int, seed: int | None = None) -> GameState:
    gs = GameState()
    gs.reset_game(seed=seed)
    while gs.pieces < pieces and not gs.game_over:
        if gs.active is None:
            gs.step()
            continue
        gs.hard_drop()
    gs.step()
    LOGGER.info("Locked %d pieces, cleared %d lines", gs.pieces, gs.lines)
    return gs


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--pieces", type=int, default=5, help="Number of pieces to hard-drop.")
    parser.add_argument("--seed", type=int, default=None, help="Seed for the piece generator.")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        help="Logging level (e.g. DEBUG, INFO, WARNING).",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.WARNING), format="%(message)s")
    gs = run(args.pieces, seed=args.seed)
    _print_grid(render_grid(gs.board, gs.active))


if __name__ == "__main__":
    main()

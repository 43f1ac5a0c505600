from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

import colorama

from config import (
    CELL_COUNT,
    DEFAULT_MAX_ATTEMPTS,
    DEFAULT_PREFILLED,
    TERMINAL_WIDTH,
    SessionConfig,
)
from display import print_board
from generator import GenerationError, generate, make_rng
from model import create_board
from solver import SudokuSolver

log = logging.getLogger(__name__)

EXIT_SUCCESS = 0
EXIT_FAILURE = 1


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
        description="Generate a random 9x9 Sudoku puzzle and solve it by backtracking.",
    )
    parser.add_argument(
        "--prefilled",
        type=int,
        default=DEFAULT_PREFILLED,
        help=f"Number of cells to pre-fill (0-{CELL_COUNT}); high values may not be reachable",
    )
    parser.add_argument("--seed", type=int, default=None, help="Random seed for the generator")
    parser.add_argument(
        "--max-attempts",
        type=int,
        default=DEFAULT_MAX_ATTEMPTS,
        help="Random draws the generator may spend before giving up",
    )
    parser.add_argument(
        "--max-steps",
        type=int,
        default=None,
        help="Cap on solver assignments (unbounded if omitted)",
    )
    parser.add_argument("--no-color", action="store_true", help="Print plain digits")
    parser.add_argument(
        "--width", type=int, default=TERMINAL_WIDTH, help="Terminal width used for centering"
    )
    parser.add_argument("--verbose", action="store_true", help="Be verbose")
    return parser


def parse_config(argv: Optional[List[str]] = None) -> SessionConfig:
    parser = build_parser()
    args = parser.parse_args(argv)
    config = SessionConfig(
        prefilled=args.prefilled,
        seed=args.seed,
        max_attempts=args.max_attempts,
        max_steps=args.max_steps,
        color=not args.no_color,
        width=args.width,
        verbose=args.verbose,
    )
    try:
        config.validate()
    except ValueError as e:
        parser.error(str(e))
    return config


def run(config: SessionConfig) -> int:
    board = create_board()
    try:
        generate(board, config.prefilled, make_rng(config.seed), config.max_attempts)
    except GenerationError as e:
        log.error("%s", e)
        print(f"Failed to generate a puzzle: {e}")
        return EXIT_FAILURE

    print("Randomly generated Sudoku board:")
    print_board(board, color=config.color, width=config.width)

    trace = log.debug if config.verbose else None
    result = SudokuSolver(board, max_steps=config.max_steps, logger=trace).solve()
    if result.solved:
        print("\nSudoku solved successfully!")
        print_board(board, color=config.color, width=config.width)
        return EXIT_SUCCESS
    print(result.message)
    return EXIT_FAILURE


def main(argv: Optional[List[str]] = None) -> int:
    config = parse_config(argv)
    logging.basicConfig(
        level=logging.DEBUG if config.verbose else logging.WARNING,
        format="%(levelname)s:%(name)s:%(message)s",
    )
    colorama.just_fix_windows_console()
    return run(config)


if __name__ == "__main__":
    sys.exit(main())

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Callable, List, Optional

from config import EMPTY, VALUES
from constraints import Position, is_valid, to_row_col
from model import Board, Grid

log = logging.getLogger(__name__)

TraceLogger = Callable[[str], None]

SOLVED = "solved"
NO_SOLUTION = "no-solution"
BUDGET_EXCEEDED = "budget-exceeded"


def find_empty(board: Board) -> Optional[Position]:
    """Return the first empty position in row-major order, or None."""
    return board.first_empty()


def solve(board: Board) -> bool:
    """Fill ``board`` in place by depth-first backtracking.

    Candidates are tried 1 through 9 on the first empty cell and the first
    complete assignment wins. On failure every cell this call touched is
    empty again, so the board is back in its starting state.
    """
    position = find_empty(board)
    if position is None:
        return True
    for value in VALUES:
        if is_valid(board, position, value):
            board.set(position, value)
            if solve(board):
                return True
            board.clear(position)
    return False


def _label(position: Position) -> str:
    row, col = to_row_col(position)
    return f"r{row + 1}c{col + 1}"


@dataclass
class SolverResult:
    status: str
    solution: Optional[Grid]
    duration_ms: int
    assignments: int = 0
    backtracks: int = 0
    message: str = ""

    @property
    def solved(self) -> bool:
        return self.status == SOLVED


class SudokuSolver:
    """Same search order as ``solve`` driven by an explicit frame stack.

    Each frame is ``[position, next_candidate]``. The stack never grows past
    the number of empty cells, and ``max_steps`` caps the number of
    assignments so callers can bound the search.
    """

    def __init__(
        self,
        board: Board,
        max_steps: Optional[int] = None,
        logger: Optional[TraceLogger] = None,
    ) -> None:
        if max_steps is not None and max_steps < 1:
            raise ValueError(f"max_steps must be positive, got {max_steps}")
        self.board = board
        self.max_steps = max_steps
        self.logger = logger
        self.assignments = 0
        self.backtracks = 0

    def _trace(self, message: str) -> None:
        if self.logger:
            self.logger(message)

    def _search(self) -> str:
        board = self.board
        start = board.first_empty()
        if start is None:
            return SOLVED
        stack: List[List[int]] = [[start, VALUES[0]]]
        while stack:
            frame = stack[-1]
            position, candidate = frame
            previous = board.get(position)
            if previous != EMPTY:
                board.clear(position)
                self.backtracks += 1
                self._trace(f"Backtrack: {_label(position)} != {previous}")
            placed = False
            while candidate <= VALUES[-1]:
                value = candidate
                candidate += 1
                if not is_valid(board, position, value):
                    continue
                if self.max_steps is not None and self.assignments >= self.max_steps:
                    for pos, _ in stack:
                        board.clear(pos)
                    return BUDGET_EXCEEDED
                board.set(position, value)
                self.assignments += 1
                self._trace(f"Guess: {_label(position)} = {value}")
                frame[1] = candidate
                placed = True
                break
            if not placed:
                stack.pop()
                continue
            following = board.first_empty()
            if following is None:
                return SOLVED
            stack.append([following, VALUES[0]])
        return NO_SOLUTION

    def solve(self) -> SolverResult:
        start = time.time()
        self.assignments = 0
        self.backtracks = 0
        log.debug("[solver] solve start; %d cells empty", len(self.board.empty_positions()))
        status = self._search()
        duration_ms = int((time.time() - start) * 1000)
        log.debug(
            "[solver] solve end in %d ms; status %s; assignments %d; backtracks %d",
            duration_ms,
            status,
            self.assignments,
            self.backtracks,
        )
        if status == SOLVED:
            return SolverResult(
                status=SOLVED,
                solution=self.board.copy_grid(),
                duration_ms=duration_ms,
                assignments=self.assignments,
                backtracks=self.backtracks,
                message="Solved successfully.",
            )
        if status == BUDGET_EXCEEDED:
            return SolverResult(
                status=BUDGET_EXCEEDED,
                solution=None,
                duration_ms=duration_ms,
                assignments=self.assignments,
                backtracks=self.backtracks,
                message=f"Gave up after {self.max_steps} assignments.",
            )
        return SolverResult(
            status=NO_SOLUTION,
            solution=None,
            duration_ms=duration_ms,
            assignments=self.assignments,
            backtracks=self.backtracks,
            message="No solution exists for the given Sudoku puzzle.",
        )

from __future__ import annotations

import logging
import random
from typing import Optional

from config import BOARD_SIZE, CELL_COUNT, DEFAULT_MAX_ATTEMPTS, VALUES
from constraints import is_valid, to_position
from model import Board

log = logging.getLogger(__name__)


class GenerationError(RuntimeError):
    """Raised when the attempt budget runs out before enough cells are filled."""

    def __init__(self, requested: int, filled: int, attempts: int) -> None:
        super().__init__(
            f"Could not pre-fill {requested} cells within {attempts} attempts "
            f"(stuck at {filled})."
        )
        self.requested = requested
        self.filled = filled
        self.attempts = attempts


def make_rng(seed: Optional[int] = None) -> random.Random:
    return random.Random(seed)


def generate(
    board: Board,
    prefilled_count: int,
    rng: Optional[random.Random] = None,
    max_attempts: Optional[int] = DEFAULT_MAX_ATTEMPTS,
) -> int:
    """Seed ``board`` with ``prefilled_count`` random, mutually valid values.

    Each attempt draws a row and column uniformly; if that cell is empty a
    value 1-9 is drawn and kept only when ``is_valid`` allows it. Returns
    the number of attempts spent.

    With ``max_attempts=None`` the loop is unbounded and may never finish
    for high counts, since random filling cannot back out of a dead end.
    Otherwise ``GenerationError`` is raised once the budget is spent and
    every cell filled by this call is cleared again.
    """
    if isinstance(prefilled_count, bool) or not isinstance(prefilled_count, int):
        raise ValueError(f"prefilled_count must be an int, got {prefilled_count!r}")
    if not 0 <= prefilled_count <= CELL_COUNT:
        raise ValueError(
            f"prefilled_count must be between 0 and {CELL_COUNT}, got {prefilled_count}"
        )
    empty = len(board.empty_positions())
    if prefilled_count > empty:
        raise ValueError(
            f"prefilled_count {prefilled_count} exceeds the {empty} empty cells on the board"
        )
    if max_attempts is not None and max_attempts < 1:
        raise ValueError(f"max_attempts must be positive, got {max_attempts}")
    if rng is None:
        rng = make_rng()

    placed = []
    attempts = 0
    while len(placed) < prefilled_count:
        if max_attempts is not None and attempts >= max_attempts:
            for pos in placed:
                board.clear(pos)
            log.warning(
                "[generator] gave up after %d attempts with %d/%d cells filled",
                attempts,
                len(placed),
                prefilled_count,
            )
            raise GenerationError(prefilled_count, len(placed), attempts)
        attempts += 1
        pos = to_position(rng.randrange(BOARD_SIZE), rng.randrange(BOARD_SIZE))
        if board.cell(pos).is_empty:
            value = rng.choice(VALUES)
            if is_valid(board, pos, value):
                board.set(pos, value)
                placed.append(pos)
    log.debug("[generator] filled %d cells in %d attempts", prefilled_count, attempts)
    return attempts

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

BOARD_SIZE = 9
BOX_SIZE = 3
CELL_COUNT = BOARD_SIZE * BOARD_SIZE
EMPTY = 0
VALUES: Tuple[int, ...] = tuple(range(1, BOARD_SIZE + 1))

DEFAULT_PREFILLED = 10
# Upper bound on random draws the generator may spend before giving up.
DEFAULT_MAX_ATTEMPTS = 100_000
TERMINAL_WIDTH = 80


@dataclass(frozen=True)
class SessionConfig:
    """Settings for one generate-then-solve run."""

    prefilled: int = DEFAULT_PREFILLED
    seed: Optional[int] = None
    max_attempts: Optional[int] = DEFAULT_MAX_ATTEMPTS
    max_steps: Optional[int] = None
    color: bool = True
    width: int = TERMINAL_WIDTH
    verbose: bool = False

    def validate(self) -> None:
        if not 0 <= self.prefilled <= CELL_COUNT:
            raise ValueError(
                f"prefilled must be between 0 and {CELL_COUNT}, got {self.prefilled}"
            )
        if self.max_attempts is not None and self.max_attempts < 1:
            raise ValueError(f"max_attempts must be positive, got {self.max_attempts}")
        if self.max_steps is not None and self.max_steps < 1:
            raise ValueError(f"max_steps must be positive, got {self.max_steps}")
        if self.width < 1:
            raise ValueError(f"width must be positive, got {self.width}")

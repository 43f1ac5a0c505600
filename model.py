from __future__ import annotations

from dataclasses import dataclass
from typing import FrozenSet, Iterator, List, Optional, Sequence, Tuple

from config import BOARD_SIZE, CELL_COUNT, EMPTY, VALUES
from constraints import (
    ALL_POSITIONS,
    CONSTRAINT_GROUPS,
    ConstraintGroups,
    Position,
    box_of,
    to_position,
    to_row_col,
)

Grid = List[List[int]]
Snapshot = Tuple[int, ...]


@dataclass(frozen=True)
class Cell:
    """Read-only view of one board position."""

    position: Position
    value: int

    @property
    def row(self) -> int:
        return to_row_col(self.position)[0]

    @property
    def col(self) -> int:
        return to_row_col(self.position)[1]

    @property
    def box(self) -> int:
        return box_of(self.position)

    @property
    def ident(self) -> int:
        # 1-based, as printed to users
        return self.position + 1

    @property
    def is_empty(self) -> bool:
        return self.value == EMPTY


def _check_position(position: Position) -> None:
    if not 0 <= position < CELL_COUNT:
        raise ValueError(f"position must be between 0 and {CELL_COUNT - 1}, got {position}")


class Board:
    """81 cell values in a flat row-major array plus the static peer relation.

    Only values change after construction. Constraint groups are shared,
    immutable index sets.
    """

    def __init__(self, groups: ConstraintGroups = CONSTRAINT_GROUPS) -> None:
        if len(groups) != CELL_COUNT:
            raise ValueError(f"expected {CELL_COUNT} constraint groups, got {len(groups)}")
        self._groups = groups
        self.reset()

    def reset(self) -> None:
        self._values: List[int] = [EMPTY] * CELL_COUNT

    def get(self, position: Position) -> int:
        return self._values[position]

    def set(self, position: Position, value: int) -> None:
        """Assign ``value`` without any rule checking; see ``constraints.is_valid``."""
        _check_position(position)
        if value not in VALUES:
            raise ValueError(f"value must be between 1 and {BOARD_SIZE}, got {value!r}")
        self._values[position] = value

    def clear(self, position: Position) -> None:
        _check_position(position)
        self._values[position] = EMPTY

    def set_value(self, row: int, col: int, value: int) -> None:
        self.set(to_position(row, col), value)

    def peers(self, position: Position) -> FrozenSet[Position]:
        return self._groups[position]

    def topology(self) -> ConstraintGroups:
        return self._groups

    def cell(self, position: Position) -> Cell:
        _check_position(position)
        return Cell(position, self._values[position])

    def cells(self) -> Iterator[Cell]:
        for pos in ALL_POSITIONS:
            yield Cell(pos, self._values[pos])

    def empty_positions(self) -> List[Position]:
        return [pos for pos in ALL_POSITIONS if self._values[pos] == EMPTY]

    def first_empty(self) -> Optional[Position]:
        for pos in ALL_POSITIONS:
            if self._values[pos] == EMPTY:
                return pos
        return None

    def filled_count(self) -> int:
        return sum(1 for val in self._values if val != EMPTY)

    def is_full(self) -> bool:
        return EMPTY not in self._values

    def snapshot(self) -> Snapshot:
        return tuple(self._values)

    def restore(self, snapshot: Sequence[int]) -> None:
        if len(snapshot) != CELL_COUNT:
            raise ValueError(f"snapshot must hold {CELL_COUNT} values, got {len(snapshot)}")
        self._values = list(snapshot)

    def copy_grid(self) -> Grid:
        return [
            [self._values[to_position(r, c)] for c in range(BOARD_SIZE)]
            for r in range(BOARD_SIZE)
        ]

    @classmethod
    def from_grid(cls, grid: Sequence[Sequence[int]]) -> Board:
        if len(grid) != BOARD_SIZE or any(len(row) != BOARD_SIZE for row in grid):
            raise ValueError("Invalid grid: expected 9 rows of 9 values")
        board = cls()
        for r in range(BOARD_SIZE):
            for c in range(BOARD_SIZE):
                val = grid[r][c]
                if isinstance(val, bool) or not isinstance(val, int):
                    raise ValueError(f"Invalid grid value at r{r + 1}c{c + 1}: {val!r}")
                if val != EMPTY:
                    board.set_value(r, c, val)
        return board

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._values == other._values and self._groups == other._groups

    def __repr__(self) -> str:
        return f"Board(filled={self.filled_count()})"


def create_board() -> Board:
    """Return an empty board with every constraint group populated."""
    return Board()

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Dict, FrozenSet, Iterable, List, Sequence, Set, Tuple

from config import BOARD_SIZE, BOX_SIZE, CELL_COUNT, EMPTY

if TYPE_CHECKING:
    from model import Board

Position = int
ConstraintGroups = Tuple[FrozenSet[Position], ...]


def to_position(row: int, col: int) -> Position:
    return row * BOARD_SIZE + col


def to_row_col(position: Position) -> Tuple[int, int]:
    return divmod(position, BOARD_SIZE)


def box_of(position: Position) -> int:
    """Return the 0-based box index, counting boxes row-major."""
    row, col = to_row_col(position)
    return (row // BOX_SIZE) * BOX_SIZE + col // BOX_SIZE


ALL_POSITIONS: List[Position] = list(range(CELL_COUNT))


class Constraint:
    name: str = "constraint"

    def affected_cells(self) -> Iterable[Position]:
        raise NotImplementedError

    def is_satisfied(self, assignment: Dict[Position, int]) -> bool:
        """Return True if the fully assigned grid satisfies the constraint."""
        raise NotImplementedError


@dataclass
class AllDifferentConstraint(Constraint):
    cells: Sequence[Position]
    name: str = "all-different"

    def affected_cells(self) -> Iterable[Position]:
        return self.cells

    def is_satisfied(self, assignment: Dict[Position, int]) -> bool:
        vals = [assignment[cell] for cell in self.cells]
        return EMPTY not in vals and len(vals) == len(set(vals))


def build_row_constraints() -> List[AllDifferentConstraint]:
    return [
        AllDifferentConstraint([to_position(r, c) for c in range(BOARD_SIZE)], name="row")
        for r in range(BOARD_SIZE)
    ]


def build_col_constraints() -> List[AllDifferentConstraint]:
    return [
        AllDifferentConstraint([to_position(r, c) for r in range(BOARD_SIZE)], name="col")
        for c in range(BOARD_SIZE)
    ]


def build_box_constraints() -> List[AllDifferentConstraint]:
    constraints: List[AllDifferentConstraint] = []
    for box_r in range(BOX_SIZE):
        for box_c in range(BOX_SIZE):
            cells = []
            for dr in range(BOX_SIZE):
                for dc in range(BOX_SIZE):
                    cells.append(to_position(box_r * BOX_SIZE + dr, box_c * BOX_SIZE + dc))
            constraints.append(AllDifferentConstraint(cells, name="box"))
    return constraints


def build_units() -> List[AllDifferentConstraint]:
    units: List[AllDifferentConstraint] = []
    units.extend(build_row_constraints())
    units.extend(build_col_constraints())
    units.extend(build_box_constraints())
    return units


def build_constraint_groups() -> ConstraintGroups:
    """Derive, for every position, the positions it must not share a value with.

    A position's group is the union of its row, column and box minus itself,
    which always comes to 20 peers. Groups are plain index sets so the
    relation carries no references between cells.
    """
    peers: Dict[Position, Set[Position]] = {pos: set() for pos in ALL_POSITIONS}
    for unit in build_units():
        for cell in unit.affected_cells():
            peers[cell].update(unit.affected_cells())
    for pos in ALL_POSITIONS:
        peers[pos].discard(pos)
    return tuple(frozenset(peers[pos]) for pos in ALL_POSITIONS)


# The Sudoku rules never change, so the topology is derived exactly once.
CONSTRAINT_GROUPS: ConstraintGroups = build_constraint_groups()


def is_valid(board: Board, position: Position, value: int) -> bool:
    """Return False iff a peer of ``position`` already holds ``value``.

    The position's own value is ignored; it is either empty or about to be
    overwritten.
    """
    for peer in board.peers(position):
        if board.get(peer) == value:
            return False
    return True


def find_conflicts(board: Board) -> List[Tuple[Position, Position]]:
    conflicts: List[Tuple[Position, Position]] = []
    for pos in ALL_POSITIONS:
        val = board.get(pos)
        if val == EMPTY:
            continue
        for peer in sorted(board.peers(pos)):
            if peer > pos and board.get(peer) == val:
                conflicts.append((pos, peer))
    return conflicts


def is_solved(board: Board) -> bool:
    assignment = {pos: board.get(pos) for pos in ALL_POSITIONS}
    return all(unit.is_satisfied(assignment) for unit in build_units())

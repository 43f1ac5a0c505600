from constraints import is_solved
from model import Board, create_board
from solver import (
    BUDGET_EXCEEDED,
    NO_SOLUTION,
    SOLVED,
    SudokuSolver,
    find_empty,
    solve,
)

PUZZLE = [
    [5, 3, 0, 0, 7, 0, 0, 0, 0],
    [6, 0, 0, 1, 9, 5, 0, 0, 0],
    [0, 9, 8, 0, 0, 0, 0, 6, 0],
    [8, 0, 0, 0, 6, 0, 0, 0, 3],
    [4, 0, 0, 8, 0, 3, 0, 0, 1],
    [7, 0, 0, 0, 2, 0, 0, 0, 6],
    [0, 6, 0, 0, 0, 0, 2, 8, 0],
    [0, 0, 0, 4, 1, 9, 0, 0, 5],
    [0, 0, 0, 0, 8, 0, 0, 7, 9],
]

SOLUTION = [
    [5, 3, 4, 6, 7, 8, 9, 1, 2],
    [6, 7, 2, 1, 9, 5, 3, 4, 8],
    [1, 9, 8, 3, 4, 2, 5, 6, 7],
    [8, 5, 9, 7, 6, 1, 4, 2, 3],
    [4, 2, 6, 8, 5, 3, 7, 9, 1],
    [7, 1, 3, 9, 2, 4, 8, 5, 6],
    [9, 6, 1, 5, 3, 7, 2, 8, 4],
    [2, 8, 7, 4, 1, 9, 6, 3, 5],
    [3, 4, 5, 2, 8, 6, 1, 7, 9],
]


def dead_end_board():
    # r1c1 has no candidate: its peers already hold 1-9, including a duplicate 7
    board = create_board()
    for col, value in enumerate([1, 2, 3, 4, 5, 6, 7, 7], start=1):
        board.set_value(0, col, value)
    board.set_value(1, 0, 8)
    board.set_value(2, 0, 9)
    return board


def two_deep_board():
    # r1c1 can only be 2, after which r1c2 has no candidate left
    board = create_board()
    for col, value in enumerate([3, 4, 5, 6, 7, 8, 9], start=2):
        board.set_value(0, col, value)
    board.set_value(1, 0, 1)
    return board


def test_find_empty_scans_row_major(board):
    assert find_empty(board) == 0
    board.set(0, 1)
    assert find_empty(board) == 1


def test_solve_empty_board():
    board = create_board()
    assert solve(board)
    assert is_solved(board)
    assert board.copy_grid()[0] == [1, 2, 3, 4, 5, 6, 7, 8, 9]


def test_solve_known_puzzle():
    board = Board.from_grid(PUZZLE)
    assert solve(board)
    assert board.copy_grid() == SOLUTION


def test_solve_keeps_givens():
    board = Board.from_grid(PUZZLE)
    givens = {cell.position: cell.value for cell in board.cells() if not cell.is_empty}
    solve(board)
    assert all(board.get(pos) == val for pos, val in givens.items())


def test_solve_is_deterministic():
    first = create_board()
    second = create_board()
    solve(first)
    solve(second)
    assert first.copy_grid() == second.copy_grid()


def test_solve_full_board_is_noop():
    board = Board.from_grid(SOLUTION)
    assert solve(board)
    assert board.copy_grid() == SOLUTION


def test_solve_reports_dead_end_and_reverts():
    board = dead_end_board()
    before = board.snapshot()
    assert not solve(board)
    assert board.snapshot() == before


def test_solve_backtracks_then_reverts():
    board = two_deep_board()
    before = board.snapshot()
    assert not solve(board)
    assert board.snapshot() == before


def test_stack_solver_matches_recursive_solver():
    recursive = Board.from_grid(PUZZLE)
    stacked = Board.from_grid(PUZZLE)
    solve(recursive)
    result = SudokuSolver(stacked).solve()
    assert result.status == SOLVED
    assert result.solved
    assert result.solution == recursive.copy_grid()
    assert stacked.copy_grid() == recursive.copy_grid()
    assert result.assignments >= 51
    assert result.duration_ms >= 0


def test_stack_solver_on_empty_board_matches_recursive_solver():
    recursive = create_board()
    stacked = create_board()
    solve(recursive)
    assert SudokuSolver(stacked).solve().solution == recursive.copy_grid()


def test_stack_solver_no_solution():
    board = two_deep_board()
    before = board.snapshot()
    result = SudokuSolver(board).solve()
    assert result.status == NO_SOLUTION
    assert result.solution is None
    assert result.assignments == 1
    assert result.backtracks == 1
    assert "No solution" in result.message
    assert board.snapshot() == before


def test_stack_solver_budget_exceeded_reverts_board():
    board = Board.from_grid(PUZZLE)
    before = board.snapshot()
    result = SudokuSolver(board, max_steps=5).solve()
    assert result.status == BUDGET_EXCEEDED
    assert result.assignments == 5
    assert not result.solved
    assert board.snapshot() == before


def test_stack_solver_trace_logger():
    messages = []
    SudokuSolver(two_deep_board(), logger=messages.append).solve()
    assert messages == ["Guess: r1c1 = 2", "Backtrack: r1c1 != 2"]


def test_stack_solver_full_board():
    result = SudokuSolver(Board.from_grid(SOLUTION)).solve()
    assert result.solved
    assert result.assignments == 0

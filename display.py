"""Terminal rendering of a board: one color per digit, centered in the terminal."""

from __future__ import annotations

import sys
from enum import Enum
from typing import List, Optional, TextIO

from colorama import Fore, Style

from config import BOARD_SIZE, TERMINAL_WIDTH
from constraints import to_position
from model import Board


class Colors(Enum):
    NONE = Style.RESET_ALL
    RED = Fore.RED
    ORANGE = Fore.LIGHTRED_EX
    YELLOW = Fore.YELLOW
    GREEN = Fore.GREEN
    BLUE = Fore.BLUE
    PURPLE = Fore.MAGENTA
    PINK = Fore.LIGHTMAGENTA_EX
    CYAN = Fore.CYAN
    VIOLET = Fore.LIGHTBLUE_EX

    @property
    def terminal_code(self) -> str:
        return self.value

    @classmethod
    def for_value(cls, value: int) -> "Colors":
        # Declaration order matches digits: NONE is 0, RED is 1, ...
        return list(cls)[value]


def center_text(text: str, width: int = TERMINAL_WIDTH) -> str:
    padding = (width - len(text)) // 2
    return " " * max(padding, 0) + text


def _format_value(value: int, color: bool) -> str:
    if not color:
        return str(value)
    return f"{Colors.for_value(value).terminal_code}{value}{Style.RESET_ALL}"


def render_board(
    board: Board,
    color: bool = True,
    width: int = TERMINAL_WIDTH,
    title: str = "Sudoku Board",
) -> str:
    board_width = BOARD_SIZE * 2 - 1
    indent = " " * max((width - board_width) // 2, 0)
    rule = indent + "-" * board_width

    lines: List[str] = [indent + title, rule]
    for r in range(BOARD_SIZE):
        values = (board.get(to_position(r, c)) for c in range(BOARD_SIZE))
        lines.append(indent + " ".join(_format_value(v, color) for v in values))
    lines.append(rule)
    return "\n".join(lines)


def print_board(
    board: Board,
    color: bool = True,
    width: int = TERMINAL_WIDTH,
    stream: Optional[TextIO] = None,
) -> None:
    print(render_board(board, color=color, width=width), file=stream or sys.stdout)


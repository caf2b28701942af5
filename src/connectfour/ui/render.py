from __future__ import annotations
from typing import Optional, Iterable, Set

from connectfour.config import CLEAR_SCREEN
from connectfour.core.board import Board
from connectfour.types import Cell, Coord
from connectfour.ui.colors import c, BOLD, DIM, FG_CYAN, FG_GRAY, FG_GREEN, FG_RED, FG_YELLOW, REVERSE

_PIECE_COLOR = {"X": FG_RED, "O": FG_YELLOW}


def _piece(cell: Cell, highlighted: bool = False) -> str:
    if cell is None:
        return c("·", FG_GRAY)
    if highlighted:
        return c(cell, REVERSE, BOLD, FG_GREEN)
    return c(cell, _PIECE_COLOR[cell])


def clear_screen() -> None:
    if CLEAR_SCREEN:
        print("\033[2J\033[H", end="")


def board_lines(board: Board, highlight: Optional[Iterable[Coord]] = None) -> list[str]:
    hl: Set[Coord] = set(highlight) if highlight else set()

    lines = [c("   " + " ".join(str(i + 1) for i in range(board.cols)), DIM)]
    for r in range(board.rows):
        parts = [_piece(board.grid[r][col], (r, col) in hl) for col in range(board.cols)]
        lines.append(" | " + " ".join(parts) + " |")
    lines.append(c("   " + "—" * (2 * board.cols - 1), DIM))
    return lines


def render(board: Board, status: str = "", highlight: Optional[Iterable[Coord]] = None) -> None:
    clear_screen()

    print(c("CONNECT 4", BOLD))
    if status:
        print(c(status, FG_CYAN))
    else:
        print()

    for line in board_lines(board, highlight):
        print(line)
    print(c(f"   Enter 1-{board.cols} to drop. Enter q to quit.", DIM))

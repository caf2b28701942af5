from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, List, Tuple

from connectfour.config import CONNECT_N
from connectfour.core.board import BoardLike, check_column
from connectfour.errors import InvalidRowError
from connectfour.types import Coord, Player, check_player

# horizontal, vertical, diagonal, anti-diagonal
DIRECTIONS: Tuple[Coord, ...] = ((0, 1), (1, 0), (1, 1), (1, -1))


@dataclass(frozen=True, slots=True)
class WinResult:
    player: Player
    cells: Tuple[Coord, ...]  # exactly CONNECT_N cells, in line order


def _check_row(row: object, rows: int) -> int:
    if isinstance(row, bool) or not isinstance(row, int):
        raise InvalidRowError(f"Row must be an int, got {row!r}.")
    if row < 0 or row >= rows:
        raise InvalidRowError(f"Row {row} out of range 0..{rows - 1}.")
    return row


def check_winner(board: BoardLike, row: int, col: int, player: Player) -> Optional[WinResult]:
    """
    Look for a line through (row, col), the cell that was just filled.

    Each axis is walked outward in both directions for up to CONNECT_N - 1 steps.
    Cells found in the negative direction are prepended so the run stays in
    board order; the first CONNECT_N cells of the first long-enough run win.
    """
    player = check_player(player)
    row = _check_row(row, board.rows)
    col = check_column(col, board.cols)

    g = board.grid
    rows, cols = board.rows, board.cols

    for dr, dc in DIRECTIONS:
        run: List[Coord] = [(row, col)]

        for i in range(1, CONNECT_N):
            r, c = row + i * dr, col + i * dc
            if 0 <= r < rows and 0 <= c < cols and g[r][c] == player:
                run.append((r, c))
            else:
                break

        for i in range(1, CONNECT_N):
            r, c = row - i * dr, col - i * dc
            if 0 <= r < rows and 0 <= c < cols and g[r][c] == player:
                run.insert(0, (r, c))
            else:
                break

        if len(run) >= CONNECT_N:
            return WinResult(player, tuple(run[:CONNECT_N]))

    return None


def find_winner(board: BoardLike, player: Optional[Player] = None) -> Optional[WinResult]:
    """
    Full-board scan for when the last move is unknown.

    With ``player`` set, only that side's lines count.
    """
    if player is not None:
        player = check_player(player)
    g = board.grid
    for r in range(board.rows):
        for c in range(board.cols):
            p = g[r][c]
            if p is not None and (player is None or p == player):
                res = check_winner(board, r, c, p)
                if res is not None:
                    return res
    return None


def check_draw(board: BoardLike) -> bool:
    # Pieces stack bottom-up, so a full top row means a full board.
    return all(board.grid[0][c] is not None for c in range(board.cols))

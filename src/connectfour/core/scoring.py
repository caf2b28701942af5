from __future__ import annotations
from typing import Iterator, List, Sequence

from connectfour.config import (
    CENTER_WEIGHT,
    CONNECT_N,
    WINDOW_FOUR,
    WINDOW_OPP_THREE,
    WINDOW_THREE,
    WINDOW_TWO,
)
from connectfour.core.board import BoardLike
from connectfour.types import Cell, Player, other


def evaluate_window(window: Sequence[Cell], player: Player) -> int:
    opp = other(player)

    p_count = window.count(player)
    o_count = window.count(opp)
    e_count = window.count(None)

    score = 0

    if p_count == 4:
        score += WINDOW_FOUR
    elif p_count == 3 and e_count == 1:
        score += WINDOW_THREE
    elif p_count == 2 and e_count == 2:
        score += WINDOW_TWO

    # Opponent about to connect: weighted harder than our own three
    if o_count == 3 and e_count == 1:
        score += WINDOW_OPP_THREE

    return score


def iter_windows(board: BoardLike) -> Iterator[List[Cell]]:
    """
    Every run of CONNECT_N cells: horizontal, vertical, diagonal down-right,
    diagonal up-right.
    """
    g = board.grid
    rows, cols = board.rows, board.cols
    n = CONNECT_N

    # Horizontal
    for r in range(rows):
        for c in range(cols - n + 1):
            yield [g[r][c + i] for i in range(n)]

    # Vertical
    for r in range(rows - n + 1):
        for c in range(cols):
            yield [g[r + i][c] for i in range(n)]

    # Diagonal down-right
    for r in range(rows - n + 1):
        for c in range(cols - n + 1):
            yield [g[r + i][c + i] for i in range(n)]

    # Diagonal up-right
    for r in range(n - 1, rows):
        for c in range(cols - n + 1):
            yield [g[r - i][c + i] for i in range(n)]


def evaluate_windows(board: BoardLike, player: Player) -> int:
    return sum(evaluate_window(w, player) for w in iter_windows(board))


def evaluate_board(board: BoardLike, player: Player) -> int:
    opp = other(player)
    score = 0

    # center column preference
    center = board.cols // 2
    for r in range(board.rows):
        if board.grid[r][center] == player:
            score += CENTER_WEIGHT
        elif board.grid[r][center] == opp:
            score -= CENTER_WEIGHT

    score += evaluate_windows(board, player) - evaluate_windows(board, opp)
    return score

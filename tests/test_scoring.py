from __future__ import annotations

import pytest

from connectfour.core.board import Board
from connectfour.core.scoring import evaluate_board, evaluate_window, evaluate_windows, iter_windows


@pytest.mark.parametrize(
    "window, expected",
    [
        (["X", "X", "X", "X"], 100),
        (["X", "X", "X", None], 10),
        ([None, "X", "X", "X"], 10),
        (["X", None, "X", None], 2),
        (["X", None, None, None], 0),
        ([None, None, None, None], 0),
        (["O", "O", "O", None], -80),
        (["O", None, "O", "O"], -80),
        (["O", "O", "O", "O"], 0),
        (["X", "X", "X", "O"], 0),
        (["X", "X", "O", None], 0),
        (["O", "O", None, None], 0),
    ],
)
def test_window_scores_for_x(window, expected):
    assert evaluate_window(window, "X") == expected


def test_window_scores_are_side_relative():
    assert evaluate_window(["O", "O", "O", None], "O") == 10
    assert evaluate_window(["X", "X", "X", None], "O") == -80


def test_window_count_covers_all_four_directions(empty_board):
    windows = list(iter_windows(empty_board))
    # 24 horizontal + 21 vertical + 12 + 12 diagonal
    assert len(windows) == 69
    assert all(len(w) == 4 for w in windows)


def test_empty_board_is_neutral(empty_board):
    assert evaluate_windows(empty_board, "X") == 0
    assert evaluate_board(empty_board, "X") == 0
    assert evaluate_board(empty_board, "O") == 0


def test_center_column_bonus():
    board = Board.from_strings([
        ".......",
        ".......",
        ".......",
        ".......",
        ".......",
        "...X...",
    ])
    assert evaluate_board(board, "X") == 3
    assert evaluate_board(board, "O") == -3


def test_open_three_and_block_signal():
    board = Board.from_strings([
        ".......",
        ".......",
        ".......",
        ".......",
        ".......",
        "XXX....",
    ])
    # XXX. = 10, XX.. = 2
    assert evaluate_windows(board, "X") == 12
    # O sees X's three as an urgent block
    assert evaluate_windows(board, "O") == -80
    assert evaluate_board(board, "X") == 12 - (-80)


def test_board_score_is_antisymmetric():
    board = Board.from_strings([
        ".......",
        ".......",
        "...O...",
        "..XX...",
        "..OXO..",
        ".XOXOX.",
    ])
    assert evaluate_board(board, "X") == -evaluate_board(board, "O")

from __future__ import annotations

import pytest

from connectfour.ai.search import MinimaxSearch
from connectfour.core.board import Board, drop_piece
from connectfour.core.rules import check_winner
from connectfour.errors import InvalidLevelError

X_THREE_ON_BOTTOM = [
    ".......",
    ".......",
    ".......",
    ".......",
    "OO.....",
    "XXX....",
]

O_VERTICAL_THREE = [
    ".......",
    ".......",
    ".......",
    "...O...",
    "X..O..X",
    "X.XOX.X",
]

MIDGAMES = [
    [
        ".......",
        ".......",
        ".......",
        "...X...",
        "..OO...",
        ".XOXX..",
    ],
    [
        ".......",
        ".......",
        "..O....",
        "..XO...",
        "..XXO..",
        ".OXOXX.",
    ],
    [
        ".......",
        ".......",
        ".......",
        ".......",
        ".......",
        "...X...",
    ],
]


@pytest.mark.parametrize("depth", [2, 3, 4])
def test_takes_immediate_win(depth):
    board = Board.from_strings(X_THREE_ON_BOTTOM)
    move = MinimaxSearch().best_move(board, "X", depth)

    res = drop_piece(board, move, "X")
    assert move == 3
    assert check_winner(res.board, res.row, move, "X") is not None


def test_blocks_immediate_loss():
    board = Board.from_strings(X_THREE_ON_BOTTOM)
    assert MinimaxSearch().best_move(board, "O", 4) == 3


@pytest.mark.parametrize("depth", [4, 5])
def test_completes_vertical_four(depth):
    board = Board.from_strings(O_VERTICAL_THREE)
    search = MinimaxSearch()

    assert search.best_move(board, "O", depth) == 3
    # the immediate win is scored with the most depth left
    assert search.last_info["eval"] == 1000 + depth - 1


@pytest.mark.parametrize("diagram", MIDGAMES)
def test_pruning_does_not_change_the_choice(diagram):
    board = Board.from_strings(diagram)
    pruned = MinimaxSearch(prune=True)
    exhaustive = MinimaxSearch(prune=False)

    for player in ("X", "O"):
        assert pruned.best_move(board, player, 4) == exhaustive.best_move(board, player, 4)
        assert pruned.last_info["eval"] == exhaustive.last_info["eval"]
        assert pruned.last_info["nodes"] <= exhaustive.last_info["nodes"]
        assert exhaustive.last_info["cutoffs"] == 0


@pytest.mark.parametrize("diagram", MIDGAMES)
def test_root_values_match_with_and_without_pruning(diagram):
    board = Board.from_strings(diagram)
    for maximizing in (True, False):
        a = MinimaxSearch(prune=True).score(board, "O", 3, maximizing=maximizing)
        b = MinimaxSearch(prune=False).score(board, "O", 3, maximizing=maximizing)
        assert a == b


def test_pruning_actually_cuts():
    board = Board.from_strings(MIDGAMES[0])
    search = MinimaxSearch()
    search.best_move(board, "X", 4)
    assert search.last_info["cutoffs"] > 0


def test_terminal_scores_prefer_depth():
    won = Board.from_strings([
        ".......",
        ".......",
        ".......",
        ".......",
        "OOO....",
        "XXXX...",
    ])
    assert MinimaxSearch().score(won, "X", 3) == 1003
    assert MinimaxSearch().score(won, "O", 3) == -1003


def test_own_line_outranks_opponent_line_on_a_given_board():
    # both sides already have four; the searching side's line is checked first
    both = Board.from_strings([
        ".......",
        ".......",
        "X.....O",
        "X.....O",
        "X.....O",
        "X.....O",
    ])
    assert MinimaxSearch().score(both, "O", 2) == 1002
    assert MinimaxSearch().score(both, "X", 2) == 1002
    assert MinimaxSearch().score(both, "O", 2, maximizing=False) == 1002


def test_fail_high_window_reports_a_lower_bound():
    board = Board.from_strings(MIDGAMES[0])
    exact = MinimaxSearch().score(board, "X", 3)
    # a fail-high search still reports a value at or above the window
    bounded = MinimaxSearch().score(board, "X", 3, alpha=exact - 1, beta=exact)
    assert bounded >= exact


def test_horizon_uses_evaluation(empty_board):
    assert MinimaxSearch().score(empty_board, "X", 0) == 0


def test_search_does_not_touch_the_board():
    board = Board.from_strings(MIDGAMES[1])
    before = board.grid
    MinimaxSearch().best_move(board, "X", 4)
    assert board.grid == before


def test_full_board_gives_no_move(full_board):
    assert MinimaxSearch().best_move(full_board, "X", 5) is None


def test_finished_game_returns_first_open_column():
    won = Board.from_strings([
        ".......",
        ".......",
        ".......",
        ".......",
        "OOO....",
        "XXXX...",
    ])
    assert MinimaxSearch().best_move(won, "O", 4) == 0


def test_depth_must_be_positive(empty_board):
    with pytest.raises(InvalidLevelError):
        MinimaxSearch().best_move(empty_board, "X", 0)

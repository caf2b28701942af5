from __future__ import annotations

import pytest

from connectfour import ColumnFull, Drop, drop_piece, valid_columns
from connectfour.core.board import Board
from connectfour.errors import InvalidBoardError, InvalidColumnError, UnknownSideError


def test_empty_board_shape(empty_board):
    assert empty_board.rows == 6
    assert empty_board.cols == 7
    assert all(cell is None for row in empty_board.grid for cell in row)
    assert valid_columns(empty_board) == [0, 1, 2, 3, 4, 5, 6]


def test_drop_lands_on_bottom_row(empty_board):
    res = drop_piece(empty_board, 3, "X")
    assert isinstance(res, Drop)
    assert res.row == 5
    assert res.board.cell(5, 3) == "X"


def test_drop_stacks_and_never_mutates_input(empty_board):
    first = drop_piece(empty_board, 2, "X")
    second = drop_piece(first.board, 2, "O")

    assert second.row == 4
    assert second.board.cell(5, 2) == "X"
    assert second.board.cell(4, 2) == "O"
    # earlier snapshots are untouched
    assert empty_board == Board()
    assert first.board.cell(4, 2) is None


def test_column_fills_then_leaves_valid_columns(empty_board):
    board = empty_board
    players = ["X", "O"] * 3
    for expected_row, p in zip(range(5, -1, -1), players):
        res = drop_piece(board, 0, p)
        assert isinstance(res, Drop)
        assert res.row == expected_row
        board = res.board
        if expected_row > 0:
            assert 0 in valid_columns(board)

    assert 0 not in valid_columns(board)
    assert valid_columns(board) == [1, 2, 3, 4, 5, 6]


def test_full_column_is_a_typed_failure():
    board = Board.from_strings([
        "X......",
        "O......",
        "X......",
        "O......",
        "X......",
        "O......",
    ])
    res = drop_piece(board, 0, "X")
    assert res == ColumnFull(0)
    assert "full" in str(res)


def test_full_board_has_no_valid_columns(full_board):
    assert valid_columns(full_board) == []
    assert full_board.is_full()


@pytest.mark.parametrize("col", [-1, 7, 99])
def test_out_of_range_column_fails_fast(empty_board, col):
    with pytest.raises(InvalidColumnError):
        drop_piece(empty_board, col, "X")


@pytest.mark.parametrize("col", ["3", 2.0, True, None])
def test_non_int_column_fails_fast(empty_board, col):
    with pytest.raises(InvalidColumnError):
        drop_piece(empty_board, col, "X")


def test_unknown_side_fails_fast(empty_board):
    with pytest.raises(UnknownSideError):
        drop_piece(empty_board, 0, "red")


def test_floating_piece_is_rejected():
    with pytest.raises(InvalidBoardError):
        Board.from_strings([
            ".......",
            ".......",
            ".......",
            "...X...",
            ".......",
            ".......",
        ])


def test_bad_shape_and_values_are_rejected():
    with pytest.raises(InvalidBoardError):
        Board.from_rows([[None] * 7] * 5 + [[None] * 6])
    with pytest.raises(InvalidBoardError):
        Board.from_rows([[None] * 7] * 5 + [["Z"] + [None] * 6])
    with pytest.raises(InvalidBoardError):
        Board.from_strings(["X?....."])


def test_str_round_trips_through_from_strings():
    board = Board.from_strings([
        ".......",
        ".......",
        ".......",
        ".......",
        "...O...",
        "..XXO..",
    ])
    assert Board.from_strings(str(board).splitlines()) == board


def test_scratch_drop_and_undo_restore_the_grid(empty_board):
    scratch = empty_board.scratch()
    row = scratch.drop(4, "O")
    assert row == 5
    assert scratch.grid[5][4] == "O"
    scratch.undo(4)
    assert scratch.grid == [list(r) for r in empty_board.grid]
    with pytest.raises(ValueError):
        scratch.undo(4)

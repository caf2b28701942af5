from __future__ import annotations

import random

import pytest

from connectfour.core.board import Board

# Full board with no four-in-a-row anywhere: every 4-row span contains two
# identical alternating rows, which breaks every diagonal.
DRAW_ROWS = [
    "XOXOXOX",
    "XOXOXOX",
    "OXOXOXO",
    "OXOXOXO",
    "XOXOXOX",
    "XOXOXOX",
]


@pytest.fixture
def empty_board() -> Board:
    return Board()


@pytest.fixture
def full_board() -> Board:
    return Board.from_strings(DRAW_ROWS)


@pytest.fixture
def rng() -> random.Random:
    return random.Random(7)

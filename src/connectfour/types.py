# src/connectfour/types.py

from __future__ import annotations
from typing import Literal, Optional, NewType, Tuple, Union

from connectfour.errors import UnknownSideError

Player = Literal["X", "O"]   # X moves first
Cell = Optional[Player]
Move = NewType("Move", int)   # column index 0..6
Coord = Tuple[int, int]       # (row, col)

Difficulty = Literal["easy", "medium", "hard"]
Level = Union[Difficulty, int]

PLAYERS: Tuple[Player, Player] = ("X", "O")


def other(p: Player) -> Player:
    if p == "X":
        return "O"
    if p == "O":
        return "X"
    raise UnknownSideError(f"Unknown side: {p!r}")


def check_player(p: object) -> Player:
    if p not in PLAYERS:
        raise UnknownSideError(f"Unknown side: {p!r}")
    return p  # type: ignore[return-value]

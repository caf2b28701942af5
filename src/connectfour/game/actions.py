from __future__ import annotations
from dataclasses import dataclass
from typing import Optional

from connectfour.core.board import ColumnFull, drop_piece
from connectfour.core.rules import WinResult, check_draw, check_winner
from connectfour.errors import GameOverError
from connectfour.game.state import GameState
from connectfour.types import Player, check_player, other


@dataclass(frozen=True, slots=True)
class MoveOutcome:
    accepted: bool
    player: Player
    column: int
    row: Optional[int] = None
    win: Optional[WinResult] = None
    draw: bool = False
    message: str = ""


def new_game(first: Player = "X") -> GameState:
    first = check_player(first)
    return GameState(current=first, last_status=f"Player {first} starts.")


def apply_move(state: GameState, column: int) -> MoveOutcome:
    """
    Play ``column`` for the side to move.

    A full column leaves the state untouched and comes back as
    ``accepted=False``. The win is checked before the draw, so a line that
    also fills the board is reported as a win.
    """
    if state.over:
        raise GameOverError("The game is already over.")

    player = state.current
    res = drop_piece(state.board, column, player)
    if isinstance(res, ColumnFull):
        state.last_status = str(res)
        return MoveOutcome(False, player, column, message=state.last_status)

    state.board = res.board
    state.history.append((player, column, res.row))

    win = check_winner(res.board, res.row, column, player)
    if win is not None:
        state.winner = win
        state.last_status = f"Player {player} wins!"
        return MoveOutcome(True, player, column, res.row, win=win, message=state.last_status)

    if check_draw(res.board):
        state.draw = True
        state.last_status = "Draw game."
        return MoveOutcome(True, player, column, res.row, draw=True, message=state.last_status)

    state.current = other(player)
    state.last_status = f"Player {player} chose {column + 1} | Next: Player {state.current}"
    return MoveOutcome(True, player, column, res.row, message=state.last_status)

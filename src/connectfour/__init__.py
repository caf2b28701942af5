from connectfour.ai.policy import choose_move
from connectfour.core.board import Board, ColumnFull, Drop, drop_piece, valid_columns
from connectfour.core.rules import WinResult, check_draw, check_winner

__all__ = [
    "Board",
    "ColumnFull",
    "Drop",
    "WinResult",
    "check_draw",
    "check_winner",
    "choose_move",
    "drop_piece",
    "valid_columns",
]

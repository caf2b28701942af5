from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from connectfour.core.board import Board
from connectfour.core.rules import WinResult
from connectfour.types import Player


@dataclass(slots=True)
class GameState:
    board: Board = field(default_factory=Board)
    current: Player = "X"
    winner: Optional[WinResult] = None
    draw: bool = False
    history: List[Tuple[Player, int, int]] = field(default_factory=list)  # (player, col, row)
    last_status: str = "Player X starts."

    @property
    def over(self) -> bool:
        return self.winner is not None or self.draw

from __future__ import annotations
from typing import Optional, Protocol

from connectfour.game.state import GameState
from connectfour.types import Move


class Agent(Protocol):
    name: str

    def choose_move(self, state: GameState) -> Optional[Move]:
        ...

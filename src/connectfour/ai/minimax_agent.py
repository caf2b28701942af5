from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from connectfour.ai.search import MinimaxSearch
from connectfour.config import DEFAULT_HARD_DEPTH
from connectfour.game.state import GameState
from connectfour.types import Move


@dataclass(slots=True)
class MinimaxAgent:
    name: str = "Hard AI"
    depth: int = DEFAULT_HARD_DEPTH
    search: MinimaxSearch = field(default_factory=MinimaxSearch)

    last_info: dict = field(default_factory=dict)

    def choose_move(self, state: GameState) -> Optional[Move]:
        move = self.search.best_move(state.board, state.current, self.depth)
        self.last_info = dict(self.search.last_info)
        return move

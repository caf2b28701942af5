from __future__ import annotations
import random
from dataclasses import dataclass, field
from typing import Optional

from connectfour.ai.policy import random_move
from connectfour.game.state import GameState
from connectfour.types import Move


@dataclass
class RandomAgent:
    name: str = "Easy AI"
    rng: random.Random = field(default_factory=random.Random)
    last_info: dict = field(default_factory=dict)

    def choose_move(self, state: GameState) -> Optional[Move]:
        self.last_info = {"nodes": 0, "depth": 0, "time_ms": 1}
        return random_move(state.board, self.rng)

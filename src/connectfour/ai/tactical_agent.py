
from __future__ import annotations

import random
import time
from dataclasses import dataclass, field
from typing import Optional

from connectfour.ai.policy import tactical_move
from connectfour.game.state import GameState
from connectfour.types import Move


@dataclass
class TacticalAgent:
    """
    One-ply tactical agent:
      1) Play an immediate winning move if available
      2) Block the opponent's immediate winning move
      3) Otherwise random valid move
    """
    name: str = "Medium AI"
    rng: random.Random = field(default_factory=random.Random)
    last_info: dict = field(default_factory=dict)

    def choose_move(self, state: GameState) -> Optional[Move]:
        t0 = time.perf_counter()
        move = tactical_move(state.board, state.current, self.rng)
        self.last_info = {
            "time_ms": max(1, int((time.perf_counter() - t0) * 1000)),
            # two one-ply sweeps over the open columns
            "nodes": 2 * len(state.board.valid_moves()),
            "depth": 1,
        }
        return move

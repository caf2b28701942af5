from __future__ import annotations

from connectfour.game.state import GameState
from connectfour.types import Move


class HumanAgent:
    """Placeholder seat; the controller reads moves from the terminal instead."""
    name = "Human"

    def choose_move(self, state: GameState) -> Move:
        raise RuntimeError("HumanAgent.choose_move should never be called.")

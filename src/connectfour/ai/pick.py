from __future__ import annotations

import random
from typing import Optional

from connectfour.ai.base import Agent
from connectfour.ai.minimax_agent import MinimaxAgent
from connectfour.ai.policy import resolve_level
from connectfour.ai.random_agent import RandomAgent
from connectfour.ai.tactical_agent import TacticalAgent
from connectfour.types import Level


def level_label(level: Level) -> str:
    if isinstance(level, str):
        return level.strip().capitalize()
    return f"Depth {level}"


def agent_for(level: Level, name: Optional[str] = None, rng: Optional[random.Random] = None) -> Agent:
    """
    Build the agent that plays at ``level``: a difficulty name or a search depth.
    Depths follow the same tiers as choose_move().
    """
    strategy, depth = resolve_level(level)
    label = name or f"{level_label(level)} AI"
    rng = rng or random.Random()

    if strategy == "random":
        return RandomAgent(name=label, rng=rng)
    if strategy == "tactical":
        return TacticalAgent(name=label, rng=rng)
    return MinimaxAgent(name=label, depth=depth)

from __future__ import annotations

import logging
from typing import Dict, Optional, Tuple

from connectfour.ai.base import Agent
from connectfour.game.actions import apply_move, new_game
from connectfour.game.state import GameState
from connectfour.types import Player
from connectfour.ui.effects import ai_thinking
from connectfour.ui.prompts import parse_move
from connectfour.ui.render import render

logger = logging.getLogger(__name__)

# "X", "O" or "D" for a draw
Outcome = str
SideStats = Dict[str, int]


def _agent_name(agent: Agent, fallback: str) -> str:
    name = getattr(agent, "name", None)
    if not name:
        return fallback
    return str(name)


def _is_human(agent: Agent) -> bool:
    return getattr(agent, "name", "") == "Human"


def _status_with_agents(status: str, agent_x: Agent, agent_o: Agent, current: Player) -> str:
    """
    Prepend a persistent header showing who X and O are.
    """
    x_name = _agent_name(agent_x, "Player X")
    o_name = _agent_name(agent_o, "Player O")

    header = f"X: {x_name} | O: {o_name} | Turn: {current}"
    if status:
        return f"{header}\n{status}"
    return header


def _ai_status(agent: Agent, move: int) -> str:
    info = getattr(agent, "last_info", None)
    if info and "cutoffs" in info:
        return (
            f"{agent.name} chose {int(move) + 1} | "
            f"d={info.get('depth')} | "
            f"nodes={info.get('nodes')} | "
            f"cut={info.get('cutoffs')} | "
            f"eval={info.get('eval')} | "
            f"{info.get('time_ms')}ms"
        )
    return f"{agent.name} chose {int(move) + 1}"


def run_game(agent_x: Agent, agent_o: Agent, show_thinking: bool = True) -> GameState:
    state = new_game("X")

    while True:
        highlight = state.winner.cells if state.winner else None
        render(
            state.board,
            _status_with_agents(state.last_status, agent_x, agent_o, state.current),
            highlight=highlight,
        )
        if state.over:
            return state

        current_agent = agent_x if state.current == "X" else agent_o

        try:
            if _is_human(current_agent):
                raw = input(f"Player {state.current} move: ")
                move = parse_move(raw, state.board.cols)
                if move is None:
                    render(
                        state.board,
                        _status_with_agents("Game quit.", agent_x, agent_o, state.current),
                    )
                    return state
                apply_move(state, move)

            else:
                if show_thinking:
                    ai_thinking(f"{current_agent.name}")

                move = current_agent.choose_move(state)
                if move is None:
                    # only reachable on a full board, which apply_move already ends as a draw
                    state.last_status = "No move available."
                    return state

                status = _ai_status(current_agent, move)
                outcome = apply_move(state, move)
                if not state.over and outcome.accepted:
                    state.last_status = f"{status} | Next: Player {state.current}"

        except ValueError as e:
            state.last_status = str(e)


def play_headless(agent_x: Agent, agent_o: Agent) -> Tuple[Outcome, Dict[Player, SideStats]]:
    """
    Play a full game without rendering. Returns the outcome and per-side
    move/time/node/depth totals taken from each agent's ``last_info``.
    """
    state = new_game("X")
    stats: Dict[Player, SideStats] = {
        "X": {"moves": 0, "time_ms": 0, "nodes": 0, "depth": 0},
        "O": {"moves": 0, "time_ms": 0, "nodes": 0, "depth": 0},
    }

    while not state.over:
        agent = agent_x if state.current == "X" else agent_o
        move: Optional[int] = agent.choose_move(state)
        if move is None:
            break

        info = getattr(agent, "last_info", None) or {}
        side_stats = stats[state.current]
        side_stats["moves"] += 1
        side_stats["time_ms"] += max(1, int(info.get("time_ms", 0)))
        side_stats["nodes"] += int(info.get("nodes", 0))
        side_stats["depth"] += int(info.get("depth", 0))

        outcome = apply_move(state, move)
        if not outcome.accepted:
            raise RuntimeError(f"{_agent_name(agent, state.current)} played a full column {move}.")

    if state.winner is not None:
        logger.debug("headless game won by %s in %d moves", state.winner.player, len(state.history))
        return state.winner.player, stats
    return "D", stats

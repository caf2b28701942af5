from __future__ import annotations

import random
from typing import Dict, Iterator, List, Sequence, Tuple, TypeVar

from connectfour.ai.pick import agent_for
from connectfour.game.controller import Outcome, SideStats, play_headless
from connectfour.types import Level

from .arena_types import Standing

T = TypeVar("T")

# (a_name, b_name, a_level, b_level, base_seed)
Pairing = Tuple[str, str, Level, Level, int]
# (a_name, b_name, a_is_x, outcome, stats)
GameRecord = Tuple[str, str, bool, Outcome, Dict[str, SideStats]]


def add_result(a: Standing, b: Standing, outcome: Outcome, a_is_x: bool) -> None:
    """Book one finished game for both teams; ``outcome`` is "X", "O" or "D"."""
    if outcome == "D":
        a.draws += 1
        b.draws += 1
        return

    a_won = outcome == ("X" if a_is_x else "O")
    winner, loser = (a, b) if a_won else (b, a)
    winner.wins += 1
    loser.losses += 1


def add_side_stats(s: Standing, stats: SideStats) -> None:
    s.moves += stats["moves"]
    s.time_ms += stats["time_ms"]
    s.nodes += stats["nodes"]
    s.depth_sum += stats["depth"]


def play_pairing(pairing: Pairing, games: int) -> List[GameRecord]:
    """Play ``games`` games between two levels, swapping colours every game."""
    a_name, b_name, a_level, b_level, base_seed = pairing
    out: List[GameRecord] = []
    for g in range(games):
        seed = base_seed + g
        a = agent_for(a_level, name=a_name, rng=random.Random(seed + 101))
        b = agent_for(b_level, name=b_name, rng=random.Random(seed + 202))
        if g % 2 == 0:
            outcome, stats = play_headless(a, b)
            out.append((a_name, b_name, True, outcome, stats))
        else:
            outcome, stats = play_headless(b, a)
            out.append((a_name, b_name, False, outcome, stats))
    return out


def run_pairings_batch(args: Tuple[Sequence[Pairing], int]) -> List[GameRecord]:
    batch, games_per_pair = args
    out: List[GameRecord] = []
    for pairing in batch:
        out.extend(play_pairing(pairing, games_per_pair))
    return out


def chunked(lst: Sequence[T], size: int) -> Iterator[Sequence[T]]:
    for i in range(0, len(lst), size):
        yield lst[i : i + size]

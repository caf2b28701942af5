from __future__ import annotations

import time

from connectfour.ai.pick import agent_for
from connectfour.config import DEFAULT_HARD_DEPTH
from connectfour.game.controller import run_game
from connectfour.ui.human import HumanAgent
from connectfour.ui.prompts import describe_depth, parse_choice, parse_depth

DIFFICULTIES = ("easy", "medium", "hard")


def _ask(prompt: str, parse, *args):
    while True:
        try:
            return parse(input(prompt), *args)
        except ValueError as e:
            print(e)


def _countdown(title: str) -> None:
    print(f"\nStarting game: {title}")
    print("Game will start in 3 seconds...\n")
    time.sleep(3)


def run_menu() -> None:
    print("Select mode:")
    print("1) Human vs Human")
    print("2) Human vs AI")
    print("3) AI vs AI")
    print("4) Run AI arena (round-robin by depth)")

    choice = input("Choice: ").strip()

    if choice == "1":
        p1 = HumanAgent()
        p2 = HumanAgent()
        _countdown(f"{p1.name} vs {p2.name}")
        run_game(p1, p2)
        return

    if choice == "2":
        level = _ask("Difficulty [easy/medium/hard] (default medium): ", parse_choice, DIFFICULTIES, "medium")
        human = HumanAgent()
        ai = agent_for(level)
        _countdown(f"{human.name} vs {ai.name}")
        run_game(human, ai)
        return

    if choice == "3":
        d1 = _ask(f"AI X depth 1-8 (default {DEFAULT_HARD_DEPTH}): ", parse_depth, DEFAULT_HARD_DEPTH)
        d2 = _ask(f"AI O depth 1-8 (default {DEFAULT_HARD_DEPTH}): ", parse_depth, DEFAULT_HARD_DEPTH)
        ai_x = agent_for(d1, name=f"Depth {d1} AI ({describe_depth(d1)})")
        ai_o = agent_for(d2, name=f"Depth {d2} AI ({describe_depth(d2)})")
        _countdown(f"{ai_x.name} vs {ai_o.name}")
        run_game(ai_x, ai_o)
        return

    if choice == "4":
        print("\nStarting AI arena in 3 seconds...\n")
        time.sleep(3)
        from connectfour.scripts.arena import main as arena_main
        arena_main([])
        return

    print("\nInvalid choice. Defaulting to Human vs Human.\n")
    time.sleep(3)
    run_game(HumanAgent(), HumanAgent())

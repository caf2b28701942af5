from __future__ import annotations
from typing import Optional, Sequence

from connectfour.config import MAX_DEPTH, MIN_DEPTH
from connectfour.types import Move

QUIT_WORDS = {"q", "quit", "exit"}


def parse_move(raw: str, cols: int) -> Optional[Move]:
    """Columns are typed 1-based; returns None when the player quits."""
    s = raw.strip().lower()
    if s in QUIT_WORDS:
        return None
    if not s.isdigit():
        raise ValueError("Invalid input. Enter a number or q.")
    col = int(s) - 1
    if col < 0 or col >= cols:
        raise ValueError(f"Column must be between 1 and {cols}.")
    return Move(col)


def parse_choice(raw: str, options: Sequence[str], default: str) -> str:
    s = raw.strip().lower()
    if not s:
        return default
    for opt in options:
        if opt.startswith(s):
            return opt
    raise ValueError(f"Choose one of: {', '.join(options)}.")


def parse_depth(raw: str, default: int) -> int:
    s = raw.strip()
    if not s:
        return default
    if not s.isdigit():
        raise ValueError(f"Depth must be a number between {MIN_DEPTH} and {MAX_DEPTH}.")
    depth = int(s)
    if depth < MIN_DEPTH or depth > MAX_DEPTH:
        raise ValueError(f"Depth must be between {MIN_DEPTH} and {MAX_DEPTH}.")
    return depth


def describe_depth(depth: int) -> str:
    if depth <= 1:
        return "Random moves"
    if depth <= 3:
        return "Basic strategy"
    if depth <= 5:
        return "Good strategy"
    return "Advanced strategy"

from __future__ import annotations

import logging
import random
from typing import Optional, Protocol, Sequence, TypeVar

from connectfour.config import DEFAULT_HARD_DEPTH, RANDOM_MAX_DEPTH, TACTICAL_MAX_DEPTH
from connectfour.ai.search import MinimaxSearch
from connectfour.core.board import Board, Drop, drop_piece
from connectfour.core.rules import check_winner
from connectfour.errors import InvalidLevelError
from connectfour.types import Level, Move, Player, check_player, other

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Chooser(Protocol):
    def choice(self, seq: Sequence[T]) -> T:
        ...


_rng = random.Random()


def winning_move(board: Board, player: Player) -> Optional[Move]:
    """First column (ascending) where ``player`` connects immediately."""
    for m in board.valid_moves():
        res = drop_piece(board, m, player)
        if isinstance(res, Drop) and check_winner(res.board, res.row, m, player) is not None:
            return m
    return None


def random_move(board: Board, rng: Optional[Chooser] = None) -> Optional[Move]:
    moves = board.valid_moves()
    if not moves:
        return None
    return (rng or _rng).choice(moves)


def tactical_move(board: Board, player: Player, rng: Optional[Chooser] = None) -> Optional[Move]:
    """Win now if possible, else block the opponent's immediate win, else random."""
    me = check_player(player)

    m = winning_move(board, me)
    if m is not None:
        return m

    m = winning_move(board, other(me))
    if m is not None:
        return m

    return random_move(board, rng)


def search_move(board: Board, player: Player, depth: int) -> Optional[Move]:
    return MinimaxSearch().best_move(board, player, depth)


def resolve_level(level: Level) -> tuple[str, int]:
    """
    Map a difficulty name or depth to (strategy, depth).
    Strategy is one of "random", "tactical", "search".
    """
    if isinstance(level, str):
        key = level.strip().lower()
        if key == "easy":
            return "random", RANDOM_MAX_DEPTH
        if key == "medium":
            return "tactical", TACTICAL_MAX_DEPTH
        if key == "hard":
            return "search", DEFAULT_HARD_DEPTH
        raise InvalidLevelError(f"Unknown difficulty {level!r}; expected easy, medium, hard or a depth.")

    if isinstance(level, bool) or not isinstance(level, int):
        raise InvalidLevelError(f"Difficulty must be a name or an int depth, got {level!r}.")

    if level <= RANDOM_MAX_DEPTH:
        return "random", level
    if level <= TACTICAL_MAX_DEPTH:
        return "tactical", level
    return "search", level


def choose_move(board: Board, player: Player, level: Level, rng: Optional[Chooser] = None) -> Optional[Move]:
    """
    Pick a column for ``player`` at the given difficulty or depth.

    Returns None when the board has no playable column.
    """
    me = check_player(player)
    strategy, depth = resolve_level(level)

    if not board.valid_moves():
        return None

    logger.debug("choose_move %s level=%r -> %s (depth %d)", me, level, strategy, depth)

    if strategy == "random":
        return random_move(board, rng)
    if strategy == "tactical":
        return tactical_move(board, me, rng)
    return search_move(board, me, depth)

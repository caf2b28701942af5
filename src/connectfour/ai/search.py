from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from math import inf
from typing import Optional, Tuple

from connectfour.config import WIN_SCORE
from connectfour.core.board import Board, ScratchBoard
from connectfour.core.rules import check_draw, check_winner, find_winner
from connectfour.core.scoring import evaluate_board
from connectfour.errors import InvalidLevelError
from connectfour.types import Move, Player, check_player, other

logger = logging.getLogger(__name__)

# (row, col, player) of the piece placed to reach a node
LastMove = Tuple[int, int, Player]


@dataclass(slots=True)
class MinimaxSearch:
    """
    Depth-limited minimax with alpha-beta pruning.

    Scores are always from the searching side's point of view:
    ``WIN_SCORE + depth`` for a line of ours (sooner is better),
    ``-WIN_SCORE - depth`` for theirs (later is better), and the positional
    evaluation at the horizon or on a full board.

    Exploration happens on a private scratch grid (drop, recurse, undo), so
    the caller's Board is never touched. With ``prune=False`` the same tree is
    walked without cutoffs; the chosen column does not change.
    """
    prune: bool = True

    # Stats for the most recent best_move() call
    last_info: dict = field(default_factory=dict)

    _nodes: int = 0
    _cutoffs: int = 0

    def best_move(self, board: Board, player: Player, depth: int) -> Optional[Move]:
        me = check_player(player)
        if depth < 1:
            raise InvalidLevelError(f"Search depth must be >= 1, got {depth}.")

        moves = board.valid_moves()
        if not moves:
            return None

        start = time.perf_counter()
        self._nodes = 0
        self._cutoffs = 0

        if find_winner(board) is not None:
            # Every child is terminal with the same score; first column wins the tie.
            logger.warning("best_move called on a finished game; returning column %d", moves[0])
            self._record(moves[0], None, depth, start)
            return moves[0]

        scratch = board.scratch()
        best = moves[0]
        best_score = -inf

        for m in moves:
            row = scratch.drop(m, me)
            score = self._min_value(scratch, depth - 1, -inf, inf, me, (row, int(m), me))
            scratch.undo(m)

            if score > best_score:
                best_score = score
                best = m

        self._record(best, best_score, depth, start)
        logger.debug(
            "search %s d=%d -> col %d eval=%s nodes=%d cutoffs=%d",
            me, depth, best, best_score, self._nodes, self._cutoffs,
        )
        return best

    def score(
        self,
        board: Board,
        player: Player,
        depth: int,
        alpha: float = -inf,
        beta: float = inf,
        maximizing: bool = True,
    ) -> float:
        """
        Value of ``board`` for ``player`` searched ``depth`` plies deep.

        ``maximizing`` says whose turn it is: True when ``player`` moves next.
        A narrower (alpha, beta) window may return a bound instead of the exact value.
        """
        me = check_player(player)
        scratch = board.scratch()
        if maximizing:
            return self._max_value(scratch, depth, alpha, beta, me, None)
        return self._min_value(scratch, depth, alpha, beta, me, None)

    def _record(self, move: Move, score: Optional[float], depth: int, start: float) -> None:
        elapsed = time.perf_counter() - start
        self.last_info = {
            "depth": depth,
            "nodes": self._nodes,
            "cutoffs": self._cutoffs,
            "eval": None if score is None else int(score),
            "move_col": int(move) + 1,
            "time_ms": max(1, int(elapsed * 1000)),
        }

    def _terminal_score(self, board: ScratchBoard, depth: int, me: Player, last: Optional[LastMove]) -> Optional[int]:
        if last is None:
            # ours first, then theirs
            w = find_winner(board, me) or find_winner(board, other(me))
        else:
            w = check_winner(board, *last)

        if w is not None:
            if w.player == me:
                return WIN_SCORE + depth
            return -WIN_SCORE - depth

        if depth == 0 or check_draw(board):
            return evaluate_board(board, me)
        return None

    def _max_value(self, board: ScratchBoard, depth: int, alpha: float, beta: float, me: Player, last: Optional[LastMove]) -> float:
        self._nodes += 1

        term = self._terminal_score(board, depth, me, last)
        if term is not None:
            return term

        v = -inf
        for m in board.valid_moves():
            row = board.drop(m, me)
            v = max(v, self._min_value(board, depth - 1, alpha, beta, me, (row, int(m), me)))
            board.undo(m)

            alpha = max(alpha, v)
            if self.prune and beta <= alpha:
                self._cutoffs += 1
                break

        return v

    def _min_value(self, board: ScratchBoard, depth: int, alpha: float, beta: float, me: Player, last: Optional[LastMove]) -> float:
        self._nodes += 1

        term = self._terminal_score(board, depth, me, last)
        if term is not None:
            return term

        opp = other(me)
        v = inf
        for m in board.valid_moves():
            row = board.drop(m, opp)
            v = min(v, self._max_value(board, depth - 1, alpha, beta, me, (row, int(m), opp)))
            board.undo(m)

            beta = min(beta, v)
            if self.prune and beta <= alpha:
                self._cutoffs += 1
                break

        return v

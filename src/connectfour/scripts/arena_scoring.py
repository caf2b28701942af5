from __future__ import annotations

import math

from .arena_types import Standing


def _per(total: float, count: int) -> float:
    return total / count if count else 0.0


def ppg(s: Standing) -> float:
    return _per(s.points, s.games)


def avg_ms_per_move(s: Standing) -> float:
    return _per(s.time_ms, s.moves)


def avg_depth(s: Standing) -> float:
    return _per(s.depth_sum, s.moves)


def wilson_lcb(points: float, games: int, z: float) -> float:
    """
    Lower Wilson bound on the share of available points a team takes.

    A draw counts as half a success, so ``points`` may be fractional.
    """
    if games <= 0:
        return 0.0
    share = min(1.0, max(0.0, points / games))
    spread = z * z / games
    margin = z * math.sqrt(share * (1.0 - share) / games + spread / (4.0 * games))
    return max(0.0, (share + spread / 2.0 - margin) / (1.0 + spread))


def strength_score(s: Standing, z: float) -> float:
    return wilson_lcb(s.points, s.games, z)

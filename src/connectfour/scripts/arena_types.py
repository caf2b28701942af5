from __future__ import annotations

from dataclasses import dataclass

from connectfour.types import Level


@dataclass(frozen=True)
class Team:
    name: str
    level: Level


@dataclass(slots=True)
class Standing:
    """One team's running record: W-D-L plus the engine work behind its moves."""
    wins: int = 0
    draws: int = 0
    losses: int = 0

    moves: int = 0
    time_ms: int = 0
    nodes: int = 0
    depth_sum: int = 0

    @property
    def games(self) -> int:
        return self.wins + self.draws + self.losses

    @property
    def points(self) -> float:
        # win 1, draw 1/2, loss 0
        return self.wins + 0.5 * self.draws

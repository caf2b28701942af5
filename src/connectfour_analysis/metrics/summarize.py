from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

import pandas as pd


MetricKey = Literal[
    "strength_wilson_lcb",
    "ppg",
    "points",
    "wins",
    "avg_ms_per_move",
    "nodes",
]

TABLE_COLS = [
    "name",
    "games", "wins", "draws", "losses",
    "ppg",
    "strength_wilson_lcb",
    "avg_ms_per_move",
    "nodes", "avg_depth",
]


@dataclass(frozen=True)
class SummaryConfig:
    metric: MetricKey = "strength_wilson_lcb"
    top_n: int = 20
    min_games: int = 0


def _require_cols(df: pd.DataFrame, cols: list[str]) -> None:
    missing = [c for c in cols if c not in df.columns]
    if missing:
        raise ValueError(f"Missing required columns: {missing}. Present: {list(df.columns)}")


def filter_rows(df: pd.DataFrame, cfg: SummaryConfig) -> pd.DataFrame:
    if cfg.min_games <= 0:
        return df.copy()
    _require_cols(df, ["games"])
    return df[df["games"].fillna(0) >= cfg.min_games].copy()


def top_table(df: pd.DataFrame, cfg: SummaryConfig) -> pd.DataFrame:
    _require_cols(df, ["name", cfg.metric])

    out = filter_rows(df, cfg)

    # Lower is better only for time per move
    ascending = cfg.metric == "avg_ms_per_move"
    out = out.sort_values(cfg.metric, ascending=ascending)

    keep = [c for c in TABLE_COLS if c in out.columns]
    out = out[keep].head(cfg.top_n).reset_index(drop=True)
    out.insert(0, "rk", range(1, len(out) + 1))
    return out


def numeric_summary(df: pd.DataFrame) -> pd.DataFrame:
    num = df.select_dtypes(include="number")
    if num.empty:
        return pd.DataFrame()
    return num.describe(percentiles=[0.25, 0.5, 0.75]).T


def top_correlations(df: pd.DataFrame, top_k: int = 10) -> pd.DataFrame:
    num = df.select_dtypes(include="number").dropna(axis=1, how="all")
    if num.shape[1] < 2:
        return pd.DataFrame(columns=["a", "b", "corr", "abs"])

    pairs = (
        num.corr()
        .stack()
        .reset_index()
        .rename(columns={"level_0": "a", "level_1": "b", 0: "corr"})
    )

    # one row per unordered pair
    pairs = pairs[pairs["a"] < pairs["b"]].copy()
    pairs["abs"] = pairs["corr"].abs()
    return pairs.sort_values("abs", ascending=False).head(top_k).reset_index(drop=True)

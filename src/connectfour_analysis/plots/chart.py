from __future__ import annotations

from pathlib import Path
from typing import Iterable, Optional

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
import pandas as pd


def _numeric(df: pd.DataFrame, col: str) -> bool:
    return col in df.columns and pd.api.types.is_numeric_dtype(df[col])


def _finish(fig, outdir: Path, filename: str) -> Path:
    outdir.mkdir(parents=True, exist_ok=True)
    path = outdir / filename
    fig.savefig(path, dpi=150, bbox_inches="tight")
    plt.close(fig)
    return path


def plot_histograms(df: pd.DataFrame, outdir: Path, cols: Iterable[str]) -> list[Path]:
    written = []
    for col in cols:
        if not _numeric(df, col):
            continue
        fig, ax = plt.subplots()
        ax.hist(df[col].dropna(), bins=min(30, max(5, len(df))))
        ax.set_title(f"Histogram: {col}")
        ax.set_xlabel(col)
        ax.set_ylabel("count")
        written.append(_finish(fig, outdir, f"hist_{col}.png"))
    return written


def plot_scatter(df: pd.DataFrame, outdir: Path, x: str, y: str) -> Optional[Path]:
    """Quality vs cost, one labelled point per agent."""
    if not (_numeric(df, x) and _numeric(df, y)):
        return None

    fig, ax = plt.subplots()
    ax.scatter(df[x], df[y], alpha=0.7)
    if "name" in df.columns:
        for _, row in df.iterrows():
            ax.annotate(str(row["name"]), (row[x], row[y]), fontsize=7, xytext=(3, 3), textcoords="offset points")
    ax.set_title(f"{y} vs {x}")
    ax.set_xlabel(x)
    ax.set_ylabel(y)
    return _finish(fig, outdir, f"scatter_{y}_vs_{x}.png")


def plot_top_bar(df: pd.DataFrame, outdir: Path, metric: str, top_n: int) -> Optional[Path]:
    if "name" not in df.columns or not _numeric(df, metric):
        return None

    top = df[["name", metric]].dropna().sort_values(metric, ascending=False).head(top_n)
    fig, ax = plt.subplots(figsize=(8, 4))
    ax.bar(top["name"].astype(str), top[metric].astype(float))
    ax.set_title(f"Top {len(top)}: {metric}")
    ax.set_xlabel("agent")
    ax.set_ylabel(metric)
    ax.tick_params(axis="x", labelrotation=45)
    return _finish(fig, outdir, f"top_{metric}.png")

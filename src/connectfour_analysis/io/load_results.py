from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import pandas as pd

NUMERIC_COLS = (
    "games", "wins", "draws", "losses",
    "points", "ppg",
    "strength_wilson_lcb",
    "avg_ms_per_move",
    "moves", "time_ms", "nodes", "avg_depth",
)

DEFAULT_PATTERN = "arena_results_*.csv"


@dataclass(frozen=True)
class LoadSpec:
    csv_path: Path
    numeric_cols: tuple[str, ...] = NUMERIC_COLS


def load_results(spec: LoadSpec) -> pd.DataFrame:
    if not spec.csv_path.exists():
        raise FileNotFoundError(f"CSV not found: {spec.csv_path}")

    df = pd.read_csv(spec.csv_path)
    df.columns = [c.strip() for c in df.columns]

    if "name" not in df.columns:
        raise ValueError(f"CSV missing required column 'name'. Columns: {list(df.columns)}")

    for c in spec.numeric_cols:
        if c in df.columns:
            df[c] = pd.to_numeric(df[c], errors="coerce")

    df["name"] = df["name"].fillna("").astype(str).str.strip()
    return df[df["name"].str.len() > 0].reset_index(drop=True)


def load_latest_from_dir(results_dir: Path, pattern: str = DEFAULT_PATTERN) -> Path:
    if not results_dir.exists():
        raise FileNotFoundError(f"Results directory not found: {results_dir}")

    files = sorted(results_dir.glob(pattern))
    if not files:
        raise FileNotFoundError(f"No files matching {pattern} in {results_dir}")

    # arena filenames carry a sortable timestamp
    return files[-1]

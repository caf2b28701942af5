from __future__ import annotations

import argparse
import csv
import logging
import os
import time
from concurrent.futures import ProcessPoolExecutor, as_completed
from pathlib import Path
from typing import Dict, List, Sequence

from connectfour.ai.pick import level_label
from connectfour.config import MAX_DEPTH

from .arena_format import A, Col, print_table
from .arena_play import GameRecord, Pairing, add_result, add_side_stats, chunked, run_pairings_batch
from .arena_scoring import avg_depth, avg_ms_per_move, ppg, strength_score
from .arena_types import Standing, Team

logger = logging.getLogger(__name__)

CSV_COLUMNS = [
    "name",
    "games", "wins", "draws", "losses",
    "points", "ppg",
    "strength_wilson_lcb",
    "avg_ms_per_move",
    "moves", "time_ms", "nodes", "avg_depth",
]


def build_roster(max_depth: int = 5) -> List[Team]:
    teams = [Team("Easy", "easy"), Team("Medium", "medium")]
    for d in range(4, max_depth + 1):
        teams.append(Team(level_label(d), d))
    return teams


def schedule_round_robin(teams: Sequence[Team], seed: int) -> List[Pairing]:
    pairings: List[Pairing] = []
    n = len(teams)
    for i in range(n):
        for j in range(i + 1, n):
            a, b = teams[i], teams[j]
            pairings.append((a.name, b.name, a.level, b.level, seed + i * 10_000 + j * 100))
    return pairings


def apply_records(table: Dict[str, Standing], records: Sequence[GameRecord]) -> None:
    for a_name, b_name, a_is_x, outcome, stats in records:
        add_result(table[a_name], table[b_name], outcome, a_is_x)
        add_side_stats(table[a_name], stats["X" if a_is_x else "O"])
        add_side_stats(table[b_name], stats["O" if a_is_x else "X"])


def run_arena(
    teams: Sequence[Team],
    games_per_pair: int = 2,
    seed: int = 1234,
    max_workers: int | None = None,
    batch_pairings: int = 2,
) -> Dict[str, Standing]:
    """
    Round-robin between ``teams``. With ``max_workers=1`` everything runs in
    this process; otherwise pairings are farmed out to a process pool.
    """
    table: Dict[str, Standing] = {t.name: Standing() for t in teams}
    pairings = schedule_round_robin(teams, seed)
    logger.info("arena: %d teams, %d pairings, %d games each", len(teams), len(pairings), games_per_pair)

    if max_workers is None:
        max_workers = min(os.cpu_count() or 2, 6)

    batches = [(chunk, games_per_pair) for chunk in chunked(pairings, batch_pairings)]

    if max_workers <= 1:
        for batch in batches:
            apply_records(table, run_pairings_batch(batch))
        return table

    with ProcessPoolExecutor(max_workers=max_workers) as ex:
        futures = [ex.submit(run_pairings_batch, batch) for batch in batches]
        done = 0
        for fut in as_completed(futures):
            apply_records(table, fut.result())
            done += 1
            logger.info("arena: batch %d/%d complete", done, len(futures))

    return table


def result_rows(teams: Sequence[Team], table: Dict[str, Standing], z: float) -> List[list]:
    rows = []
    for t in teams:
        s = table[t.name]
        rows.append([
            t.name,
            s.games, s.wins, s.draws, s.losses,
            s.points, round(ppg(s), 6),
            round(strength_score(s, z), 6),
            round(avg_ms_per_move(s), 3),
            s.moves, s.time_ms, s.nodes, round(avg_depth(s), 3),
        ])
    rows.sort(key=lambda r: r[7], reverse=True)
    return rows


def print_results(rows: Sequence[list]) -> None:
    cols = [
        Col("rk", 3, "right"),
        Col("agent", 18),
        Col("strength", 9, "right"),
        Col("ppg", 6, "right"),
        Col("W-D-L", 9, "right"),
        Col("ms/mv", 8, "right"),
        Col("nodes", 10, "right"),
    ]
    table = [
        [i, r[0], f"{r[7]:.3f}", f"{r[6]:.3f}", f"{r[2]}-{r[3]}-{r[4]}", f"{r[8]:.1f}", r[11]]
        for i, r in enumerate(rows, start=1)
    ]
    print_table("Arena results", cols, table)


def export_csv(rows: Sequence[list], outdir: Path) -> Path:
    outdir.mkdir(parents=True, exist_ok=True)
    ts = time.strftime("%Y%m%d_%H%M%S")
    out_path = outdir / f"arena_results_{ts}.csv"
    with open(out_path, "w", newline="") as f:
        w = csv.writer(f)
        w.writerow(CSV_COLUMNS)
        w.writerows(rows)
    return out_path


def build_argparser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="connectfour-arena", description="Round-robin between AI difficulty levels.")
    ap.add_argument("--max-depth", type=int, default=5, help=f"Deepest search level in the roster (4..{MAX_DEPTH}).")
    ap.add_argument("--games", type=int, default=2, help="Games per pairing; colours alternate.")
    ap.add_argument("--seed", type=int, default=1234)
    ap.add_argument("--workers", type=int, default=None, help="Process pool size (1 = run inline).")
    ap.add_argument("--z", type=float, default=1.28, help="Z for the Wilson lower bound.")
    ap.add_argument("--outdir", type=str, default="data/results", help="Where to write arena_results_*.csv.")
    ap.add_argument("--no-csv", action="store_true", help="Skip CSV export.")
    return ap


def main(argv: list[str] | None = None) -> int:
    args = build_argparser().parse_args(argv)
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    max_depth = max(4, min(MAX_DEPTH, args.max_depth))
    teams = build_roster(max_depth)
    print(A.bold(f"Roster: {', '.join(t.name for t in teams)}"))

    start = time.perf_counter()
    table = run_arena(teams, games_per_pair=args.games, seed=args.seed, max_workers=args.workers)
    elapsed = time.perf_counter() - start

    rows = result_rows(teams, table, args.z)
    print_results(rows)
    print(A.dim(f"Total runtime: {elapsed:.1f}s"))

    if not args.no_csv:
        out_path = export_csv(rows, Path(args.outdir))
        print(f"Wrote CSV: {out_path}")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())

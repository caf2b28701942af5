from __future__ import annotations

import argparse
from pathlib import Path

from ..io.load_results import DEFAULT_PATTERN, LoadSpec, load_latest_from_dir, load_results
from ..metrics.summarize import SummaryConfig, filter_rows, numeric_summary, top_correlations, top_table
from ..plots.chart import plot_histograms, plot_scatter, plot_top_bar


DEFAULT_NUMERIC_PLOTS = [
    "ppg",
    "strength_wilson_lcb",
    "avg_ms_per_move",
    "nodes",
    "avg_depth",
]


def build_argparser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="connectfour_analysis", description="Analyze Connect-4 arena CSV results.")
    ap.add_argument("--csv", type=str, default=None, help="Path to a results CSV. If omitted, uses latest in --results-dir.")
    ap.add_argument("--results-dir", type=str, default="data/results", help="Directory containing arena_results_*.csv")
    ap.add_argument("--pattern", type=str, default=DEFAULT_PATTERN, help="Glob pattern for selecting latest file")

    ap.add_argument("--outdir", type=str, default="data/figures", help="Directory for saving plots")
    ap.add_argument("--top", type=int, default=20, help="Top N for tables/bar charts")
    ap.add_argument("--metric", type=str, default="strength_wilson_lcb", help="Ranking metric (e.g. strength_wilson_lcb, ppg)")
    ap.add_argument("--min-games", type=int, default=0, help="Filter out agents with fewer than this many games")
    ap.add_argument("--no-plots", action="store_true", help="Print tables only")

    return ap


def main(argv: list[str] | None = None) -> int:
    args = build_argparser().parse_args(argv)

    if args.csv:
        csv_path = Path(args.csv)
    else:
        csv_path = load_latest_from_dir(Path(args.results_dir), pattern=args.pattern)

    df = load_results(LoadSpec(csv_path=csv_path))

    print(f"\nLoaded: {csv_path}")
    print(f"Rows: {len(df):,}  Cols: {len(df.columns)}")

    cfg = SummaryConfig(
        metric=args.metric,  # type: ignore[arg-type]
        top_n=args.top,
        min_games=args.min_games,
    )

    print("\n=== Top table ===")
    print(top_table(df, cfg).to_string(index=False))

    desc = numeric_summary(df)
    if not desc.empty:
        print("\n=== Numeric summary ===")
        print(desc.to_string())

    corrs = top_correlations(df)
    if not corrs.empty:
        print("\n=== Top correlations (abs) ===")
        print(corrs[["a", "b", "corr"]].to_string(index=False))

    if args.no_plots:
        return 0

    outdir = Path(args.outdir)
    filtered = filter_rows(df, cfg)
    written = plot_histograms(filtered, outdir, DEFAULT_NUMERIC_PLOTS)
    for p in (
        plot_scatter(filtered, outdir, x="avg_ms_per_move", y=args.metric),
        plot_top_bar(filtered, outdir, metric=args.metric, top_n=args.top),
    ):
        if p is not None:
            written.append(p)

    print(f"\nSaved {len(written)} figures to: {outdir.resolve()}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

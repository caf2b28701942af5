from __future__ import annotations

from pathlib import Path

import pandas as pd
import pytest

from connectfour.scripts.arena import build_roster, export_csv, result_rows, run_arena, schedule_round_robin
from connectfour.scripts.arena_play import add_result
from connectfour.scripts.arena_scoring import ppg, strength_score, wilson_lcb
from connectfour.scripts.arena_types import Standing, Team
from connectfour_analysis.__main__ import main as analysis_main
from connectfour_analysis.cli.analyze_csv import main as analyze_main
from connectfour_analysis.io.load_results import LoadSpec, load_latest_from_dir, load_results
from connectfour_analysis.metrics.summarize import SummaryConfig, numeric_summary, top_correlations, top_table
from connectfour_analysis.plots import plot_histograms, plot_scatter, plot_top_bar


def test_roster_tiers():
    names = [t.name for t in build_roster(6)]
    assert names == ["Easy", "Medium", "Depth 4", "Depth 5", "Depth 6"]


def test_round_robin_pairs_each_team_once():
    teams = build_roster(5)
    pairings = schedule_round_robin(teams, seed=1)
    assert len(pairings) == 6
    assert len({(a, b) for a, b, *_ in pairings}) == 6


def test_add_result_points():
    a, b = Standing(), Standing()
    add_result(a, b, "X", a_is_x=True)
    add_result(a, b, "X", a_is_x=False)
    add_result(a, b, "D", a_is_x=True)

    assert (a.wins, a.losses, a.draws) == (1, 1, 1)
    assert (b.wins, b.losses, b.draws) == (1, 1, 1)
    assert a.points == b.points == 1.5
    assert ppg(a) == pytest.approx(0.5)


def test_wilson_lower_bound():
    assert wilson_lcb(0.0, 0, 1.28) == 0.0
    assert wilson_lcb(9, 10, 1.28) == pytest.approx(0.7178, abs=1e-3)
    # more games, tighter bound
    assert wilson_lcb(90, 100, 1.28) > wilson_lcb(9, 10, 1.28)


def test_standing_counts_draws_as_half_points():
    s = Standing(wins=3, draws=2)
    assert s.games == 5
    assert s.points == 4.0
    assert ppg(s) == pytest.approx(0.8)
    assert strength_score(s, 1.28) == wilson_lcb(4.0, 5, 1.28)
    assert 0.0 < strength_score(s, 1.28) < 0.8
    assert strength_score(Standing(), 1.28) == 0.0


@pytest.fixture
def arena_rows():
    teams = [Team("Easy", "easy"), Team("Medium", "medium")]
    table = run_arena(teams, games_per_pair=4, seed=3, max_workers=1)
    return teams, table, result_rows(teams, table, z=1.28)


def test_inline_arena_plays_every_game(arena_rows):
    teams, table, rows = arena_rows
    assert table["Easy"].games == table["Medium"].games == 4
    for s in table.values():
        assert s.wins + s.draws + s.losses == 4
        assert s.moves > 0
    assert table["Easy"].wins == table["Medium"].losses
    assert len(rows) == 2


def test_csv_export_loads_back_into_pandas(arena_rows, tmp_path: Path):
    _, _, rows = arena_rows
    path = export_csv(rows, tmp_path)

    assert load_latest_from_dir(tmp_path) == path
    df = load_results(LoadSpec(csv_path=path))

    assert set(df["name"]) == {"Easy", "Medium"}
    assert pd.api.types.is_numeric_dtype(df["ppg"])
    assert df["games"].tolist() == [4, 4]

    table = top_table(df, SummaryConfig(metric="ppg", top_n=5))
    assert table["rk"].tolist() == [1, 2]
    assert table["ppg"].is_monotonic_decreasing

    assert not numeric_summary(df).empty
    assert set(top_correlations(df).columns) >= {"a", "b", "corr"}


def test_load_results_requires_name_column(tmp_path: Path):
    path = tmp_path / "arena_results_bad.csv"
    path.write_text("games,wins\n1,1\n")
    with pytest.raises(ValueError):
        load_results(LoadSpec(csv_path=path))


def test_missing_results_dir(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        load_latest_from_dir(tmp_path / "nope")
    with pytest.raises(FileNotFoundError):
        load_latest_from_dir(tmp_path)


def test_analysis_cli_saves_figures(arena_rows, tmp_path: Path, capsys):
    _, _, rows = arena_rows
    path = export_csv(rows, tmp_path / "results")
    figs = tmp_path / "figs"

    assert analyze_main(["--csv", str(path), "--outdir", str(figs)]) == 0

    out = capsys.readouterr().out
    assert "=== Top table ===" in out
    names = {p.name for p in figs.iterdir()}
    assert "hist_ppg.png" in names
    assert "hist_strength_wilson_lcb.png" in names
    assert "scatter_strength_wilson_lcb_vs_avg_ms_per_move.png" in names
    assert "top_strength_wilson_lcb.png" in names


def test_module_entry_point_picks_latest_csv(arena_rows, tmp_path: Path, capsys):
    _, _, rows = arena_rows
    results = tmp_path / "results"
    results.mkdir()
    (results / "arena_results_19990101_000000.csv").write_text("name,games\nOld,1\n")
    path = export_csv(rows, results)

    code = analysis_main(["analyze", "--results-dir", str(results), "--no-plots", "--outdir", str(tmp_path / "figs")])

    assert code == 0
    assert f"Loaded: {path}" in capsys.readouterr().out
    assert not (tmp_path / "figs").exists()


def test_plots_skip_missing_columns(tmp_path: Path):
    df = pd.DataFrame({"name": ["A", "B", "C"], "ppg": [0.9, 0.5, 0.1]})

    written = plot_histograms(df, tmp_path, ["ppg", "nodes"])
    assert [p.name for p in written] == ["hist_ppg.png"]
    assert written[0].exists()

    assert plot_scatter(df, tmp_path, x="avg_ms_per_move", y="ppg") is None
    bar = plot_top_bar(df, tmp_path, metric="ppg", top_n=2)
    assert bar is not None and bar.name == "top_ppg.png" and bar.exists()
    assert plot_top_bar(df, tmp_path, metric="nodes", top_n=2) is None

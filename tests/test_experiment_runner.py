import csv
from pathlib import Path

from experiment_runner import aggregate_by_experiment, main, run_experiments

TINY = """
seed: 1
seed_count: 2
queries: 20
graph:
  initial_capacity: 4
experiments:
  - name: sparse
    nodes: 12
    out_degree: 1
  - name: dense
    nodes: 12
    out_degree: 4
    max_weight: 3.0
"""


def test_run_experiments_executes_with_small_config(tmp_path: Path):
    """Smoke-test: runner processes a tiny config sequentially."""
    cfg = tmp_path / "exp.yml"
    cfg.write_text(TINY)

    results = run_experiments(cfg, use_processes=False)

    # 2 experiments * 2 seeds
    assert len(results) == 4
    assert {(r["experiment"], r["seed"]) for r in results} == {
        ("dense", 1),
        ("dense", 2),
        ("sparse", 1),
        ("sparse", 2),
    }
    for res in results:
        assert res["nodes"] == 12
        assert res["queries"] == 20
        assert 0 <= res["reachable"] <= 20
        assert res["duration_sec"] >= 0.0
    dense = [r for r in results if r["experiment"] == "dense"]
    assert all(r["edges"] == 48 for r in dense)


def test_runs_are_reproducible(tmp_path: Path):
    cfg = tmp_path / "exp.yml"
    cfg.write_text(TINY)

    first = run_experiments(cfg, use_processes=False)
    second = run_experiments(cfg, use_processes=False)

    strip = lambda rows: [{k: v for k, v in r.items() if k != "duration_sec"} for r in rows]
    assert strip(first) == strip(second)


def test_aggregated_values_reflect_inputs():
    results = [
        {"experiment": "e", "seed": 0, "reachable": 4, "avg_cost": 2.0, "avg_hops": 1.0, "duration_sec": 0.5},
        {"experiment": "e", "seed": 1, "reachable": 6, "avg_cost": 4.0, "avg_hops": 3.0, "duration_sec": 1.5},
        {"experiment": "f", "seed": 0, "reachable": 1, "avg_cost": 1.0, "avg_hops": 1.0, "duration_sec": 0.1},
    ]

    aggregated = aggregate_by_experiment(results)

    assert set(aggregated) == {"e", "f"}
    assert aggregated["e"]["runs"] == 2.0
    assert aggregated["e"]["avg_reachable"] == 5.0
    assert aggregated["e"]["avg_cost"] == 3.0
    assert aggregated["e"]["avg_hops"] == 2.0
    assert aggregated["e"]["avg_duration_sec"] == 1.0
    assert aggregated["f"]["runs"] == 1.0


def test_main_writes_csv(tmp_path: Path):
    cfg = tmp_path / "exp.yml"
    cfg.write_text(TINY)
    results_csv = tmp_path / "out" / "runs.csv"
    aggregates_csv = tmp_path / "out" / "aggregates.csv"

    code = main(
        [
            str(cfg),
            "--results", str(results_csv),
            "--aggregates", str(aggregates_csv),
            "--sequential",
            "--log-level", "WARNING",
        ]
    )

    assert code == 0
    with results_csv.open() as f:
        rows = list(csv.DictReader(f))
    assert len(rows) == 4
    assert {row["experiment"] for row in rows} == {"sparse", "dense"}
    with aggregates_csv.open() as f:
        agg_rows = list(csv.DictReader(f))
    assert {row["experiment"] for row in agg_rows} == {"sparse", "dense"}
    assert all(float(row["runs"]) == 2.0 for row in agg_rows)

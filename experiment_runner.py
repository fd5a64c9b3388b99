"""
CLI to benchmark shortest-path queries across graph sizes and seeds.

Reads a YAML experiments file, builds seeded random graphs, runs random
start/end queries against each and produces per-run and aggregate metrics.

Example file:

    seed: 1
    seed_count: 3
    queries: 50
    graph:
      initial_capacity: 64
    experiments:
      - name: sparse
        nodes: 200
        out_degree: 2
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Dict, Iterable, List, Mapping, Optional, Sequence
from concurrent.futures import ProcessPoolExecutor, as_completed
import argparse
import csv
import logging
import time

import numpy as np

from config import GraphConfig, config_from_mapping, configure_logging
from errors import NoPathFoundError
from topology_builder import build_random_graph, node_name

logger = logging.getLogger(__name__)

RESULT_FIELDS = [
    "experiment",
    "seed",
    "nodes",
    "edges",
    "queries",
    "reachable",
    "avg_cost",
    "avg_hops",
    "duration_sec",
]


@dataclass(frozen=True)
class ExperimentConfig:
    name: str
    nodes: int
    out_degree: int
    max_weight: float = 10.0


@dataclass(frozen=True)
class Config:
    seed: int
    seed_count: int
    queries: int
    graph: GraphConfig
    experiments: Sequence[ExperimentConfig]


def load_config(path: Path) -> Config:
    import yaml  # type: ignore

    data = yaml.safe_load(Path(path).read_text())
    experiments = [
        ExperimentConfig(
            name=str(exp["name"]),
            nodes=int(exp["nodes"]),
            out_degree=int(exp["out_degree"]),
            max_weight=float(exp.get("max_weight", 10.0)),
        )
        for exp in data["experiments"]
    ]
    return Config(
        seed=int(data["seed"]),
        seed_count=int(data.get("seed_count", 1)),
        queries=int(data.get("queries", 10)),
        graph=config_from_mapping(data.get("graph") or {}),
        experiments=experiments,
    )


def run_experiments(
    config_path: Path,
    results_csv: Path | None = None,
    aggregates_csv: Path | None = None,
    max_workers: int | None = None,
    use_processes: bool = True,
) -> List[Dict[str, object]]:
    cfg = load_config(config_path)
    start = time.time()

    tasks = [
        (exp, cfg.seed + offset)
        for exp in cfg.experiments
        for offset in range(cfg.seed_count)
    ]
    logger.info("queued %d tasks", len(tasks))

    results: List[Dict[str, object]] = []
    if use_processes:
        try:
            with ProcessPoolExecutor(max_workers=max_workers) as executor:
                future_to_task = {
                    executor.submit(_run_task, asdict(exp), asdict(cfg.graph), seed, cfg.queries): (exp.name, seed)
                    for exp, seed in tasks
                }
                for future in as_completed(future_to_task):
                    exp_name, seed = future_to_task[future]
                    res = future.result()
                    results.append(res)
                    logger.info("completed experiment=%s seed=%d duration=%.2fs", exp_name, seed, res["duration_sec"])
        except (PermissionError, NotImplementedError, OSError) as exc:
            logger.warning("process pool unavailable (%s), falling back to sequential execution", exc)
            results = []
            use_processes = False

    if not use_processes:
        for exp, seed in tasks:
            res = _run_task(asdict(exp), asdict(cfg.graph), seed, cfg.queries)
            results.append(res)
            logger.info("completed experiment=%s seed=%d duration=%.2fs", exp.name, seed, res["duration_sec"])

    results.sort(key=lambda r: (str(r["experiment"]), int(r["seed"])))

    if results_csv:
        write_results_csv(results, results_csv)
    if aggregates_csv:
        write_aggregates_csv(aggregate_by_experiment(results), aggregates_csv)

    logger.info("completed %d runs in %.2fs", len(results), time.time() - start)
    return results


def aggregate_by_experiment(results: Iterable[Mapping[str, object]]) -> Dict[str, Dict[str, float]]:
    """
    Average per-run metrics for each experiment across seeds.
    """
    sums: Dict[str, Dict[str, float]] = {}
    for res in results:
        bucket = sums.setdefault(
            str(res["experiment"]),
            {"runs": 0.0, "reachable": 0.0, "avg_cost": 0.0, "avg_hops": 0.0, "duration_sec": 0.0},
        )
        bucket["runs"] += 1.0
        for key in ("reachable", "avg_cost", "avg_hops", "duration_sec"):
            bucket[key] += float(res.get(key, 0.0))  # type: ignore[arg-type]

    aggregated: Dict[str, Dict[str, float]] = {}
    for name, bucket in sums.items():
        n = bucket["runs"]
        aggregated[name] = {
            "runs": n,
            "avg_reachable": bucket["reachable"] / n,
            "avg_cost": bucket["avg_cost"] / n,
            "avg_hops": bucket["avg_hops"] / n,
            "avg_duration_sec": bucket["duration_sec"] / n,
        }
    return aggregated


def _run_task(exp_dict: Dict[str, object], graph_dict: Dict[str, object], seed: int, queries: int) -> Dict[str, object]:
    start_run = time.time()
    exp = ExperimentConfig(**exp_dict)  # type: ignore[arg-type]
    res = _run_single(exp, GraphConfig(**graph_dict), seed, queries)  # type: ignore[arg-type]
    res["duration_sec"] = time.time() - start_run
    return res


def _run_single(exp: ExperimentConfig, graph_config: GraphConfig, seed: int, queries: int) -> Dict[str, object]:
    graph = build_random_graph(exp.nodes, exp.out_degree, seed=seed, max_weight=exp.max_weight, config=graph_config)
    rng = np.random.default_rng([seed, 1])

    costs: List[float] = []
    hops: List[int] = []
    for _ in range(queries if exp.nodes else 0):
        u, v = rng.integers(0, exp.nodes, size=2)
        try:
            result = graph.shortest_path(node_name(int(u)), node_name(int(v)))
        except NoPathFoundError:
            continue
        costs.append(float(result.cost))
        hops.append(result.hops)

    return {
        "experiment": exp.name,
        "seed": seed,
        "nodes": graph.get_node_count(),
        "edges": graph.get_edge_count(),
        "queries": queries,
        "reachable": len(costs),
        "avg_cost": float(np.mean(costs)) if costs else 0.0,
        "avg_hops": float(np.mean(hops)) if hops else 0.0,
    }


def write_results_csv(results: Iterable[Mapping[str, object]], path: Path) -> None:
    """
    Write per-run results to CSV for downstream analysis.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", newline="") as f:
        writer = csv.DictWriter(f, fieldnames=RESULT_FIELDS)
        writer.writeheader()
        for res in results:
            writer.writerow({key: res.get(key) for key in RESULT_FIELDS})


def write_aggregates_csv(aggregated: Mapping[str, Mapping[str, float]], path: Path) -> None:
    fieldnames = ["experiment", "runs", "avg_reachable", "avg_cost", "avg_hops", "avg_duration_sec"]
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", newline="") as f:
        writer = csv.DictWriter(f, fieldnames=fieldnames)
        writer.writeheader()
        for name, metrics in aggregated.items():
            writer.writerow({"experiment": name, **metrics})


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Benchmark shortest-path queries on random graphs.")
    parser.add_argument("config", type=Path, help="YAML experiments file")
    parser.add_argument("--results", type=Path, help="Per-run CSV output")
    parser.add_argument("--aggregates", type=Path, help="Per-experiment CSV output")
    parser.add_argument("--workers", type=int, help="Max worker processes")
    parser.add_argument("--sequential", action="store_true", help="Run without a process pool")
    parser.add_argument("--log-level", default=None, help="Python logging level (DEBUG, INFO, WARNING, ERROR)")
    args = parser.parse_args(argv)

    configure_logging(args.log_level)
    run_experiments(
        args.config,
        results_csv=args.results,
        aggregates_csv=args.aggregates,
        max_workers=args.workers,
        use_processes=not args.sequential,
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

"""
Utilities to generate seeded random directed graphs for benchmarks and tests.
"""

from typing import List, Optional, Tuple

import numpy as np

from config import GraphConfig
from dijkstra_graph import DijkstraGraph


def node_name(index: int) -> str:
    return f"n{index}"


def random_edge_records(
    node_count: int,
    out_degree: int,
    seed: Optional[int] = None,
    max_weight: float = 10.0,
) -> List[Tuple[str, str, float]]:
    """
    Sample (pred, succ, weight) records.

    Args:
        node_count: number of nodes, named n0..n{node_count-1}.
        out_degree: distinct successors drawn per node (capped at node_count - 1).
        seed: RNG seed for reproducibility.
        max_weight: weights are uniform in [1, max_weight].
    """
    if node_count < 0:
        raise ValueError("node_count must be non-negative")
    if out_degree < 0:
        raise ValueError("out_degree must be non-negative")
    if max_weight < 1.0:
        raise ValueError("max_weight must be at least 1")

    rng = np.random.default_rng(seed)
    degree = min(out_degree, max(node_count - 1, 0))

    records: List[Tuple[str, str, float]] = []
    for u in range(node_count):
        if degree == 0:
            continue
        others = np.delete(np.arange(node_count), u)
        successors = rng.choice(others, size=degree, replace=False)
        weights = rng.uniform(1.0, max_weight, size=degree)
        for v, w in zip(successors, weights):
            records.append((node_name(u), node_name(int(v)), float(w)))
    return records


def build_random_graph(
    node_count: int,
    out_degree: int,
    seed: Optional[int] = None,
    max_weight: float = 10.0,
    config: Optional[GraphConfig] = None,
) -> DijkstraGraph:
    """
    Build a DijkstraGraph with every node present, including isolated ones.
    """
    graph = DijkstraGraph(config)
    for u in range(node_count):
        graph.insert_node(node_name(u))
    for pred, succ, weight in random_edge_records(node_count, out_degree, seed, max_weight):
        graph.insert_edge(pred, succ, weight)
    return graph


def cost_matrix(graph: DijkstraGraph, order: List[str]) -> np.ndarray:
    """
    Dense weight matrix for the given node order; inf where there is no edge.
    """
    index = {data: i for i, data in enumerate(order)}
    matrix = np.full((len(order), len(order)), np.inf)
    np.fill_diagonal(matrix, 0.0)
    for u in order:
        for v, w in graph.outgoing(u):
            matrix[index[u], index[v]] = min(matrix[index[u], index[v]], float(w))
    return matrix

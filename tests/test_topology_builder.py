import numpy as np
import pytest

from topology_builder import build_random_graph, cost_matrix, random_edge_records


def test_records_are_reproducible():
    assert random_edge_records(20, 3, seed=7) == random_edge_records(20, 3, seed=7)
    assert random_edge_records(20, 3, seed=7) != random_edge_records(20, 3, seed=8)


def test_records_have_distinct_successors_and_bounded_weights():
    records = random_edge_records(15, 4, seed=3, max_weight=5.0)

    assert len(records) == 15 * 4
    pairs = {(u, v) for u, v, _ in records}
    assert len(pairs) == len(records)
    for u, v, w in records:
        assert u != v
        assert 1.0 <= w <= 5.0


def test_degree_is_capped_by_node_count():
    records = random_edge_records(3, 10, seed=0)
    assert len(records) == 3 * 2


def test_build_random_graph_keeps_isolated_nodes():
    g = build_random_graph(5, 0, seed=1)
    assert g.get_node_count() == 5
    assert g.get_edge_count() == 0


def test_cost_matrix_layout():
    g = build_random_graph(6, 2, seed=2)
    order = [f"n{i}" for i in range(6)]

    matrix = cost_matrix(g, order)

    assert matrix.shape == (6, 6)
    assert np.all(np.diag(matrix) == 0.0)
    for i, u in enumerate(order):
        for j, v in enumerate(order):
            if i == j:
                continue
            if g.contains_edge(u, v):
                assert matrix[i, j] == pytest.approx(g.get_edge(u, v))
            else:
                assert np.isinf(matrix[i, j])


def test_invalid_arguments():
    with pytest.raises(ValueError):
        random_edge_records(-1, 1)
    with pytest.raises(ValueError):
        random_edge_records(3, -1)
    with pytest.raises(ValueError):
        random_edge_records(3, 1, max_weight=0.5)

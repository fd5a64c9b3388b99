from pathlib import Path

import pytest

from adjacency_list_graph import AdjacencyListGraph
from config import DEFAULT_CONFIG, GraphConfig, config_from_mapping, load_config


def test_defaults():
    assert DEFAULT_CONFIG.initial_capacity == 64
    assert DEFAULT_CONFIG.load_factor_threshold == 0.8
    assert DEFAULT_CONFIG.reject_negative_weights is False


def test_load_config_from_yaml(tmp_path: Path):
    cfg_path = tmp_path / "graph.yml"
    cfg_path.write_text(
        """
initial_capacity: 8
load_factor_threshold: 0.5
reject_negative_weights: true
log_level: debug
"""
    )

    cfg = load_config(cfg_path)

    assert cfg == GraphConfig(
        initial_capacity=8,
        load_factor_threshold=0.5,
        reject_negative_weights=True,
        log_level="debug",
    )
    g = AdjacencyListGraph(cfg)
    assert g.config.reject_negative_weights


def test_empty_yaml_gives_defaults(tmp_path: Path):
    cfg_path = tmp_path / "empty.yml"
    cfg_path.write_text("")
    assert load_config(cfg_path) == GraphConfig()


def test_unknown_keys_rejected():
    with pytest.raises(ValueError, match="unknown config keys"):
        config_from_mapping({"initial_capacity": 8, "colour": "blue"})


def test_non_mapping_yaml_rejected(tmp_path: Path):
    cfg_path = tmp_path / "list.yml"
    cfg_path.write_text("- 1\n- 2\n")
    with pytest.raises(ValueError):
        load_config(cfg_path)


def test_missing_file(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "nope.yml")


@pytest.mark.parametrize(
    "kwargs",
    [
        {"initial_capacity": 0},
        {"load_factor_threshold": 0.0},
        {"load_factor_threshold": 1.2},
        {"log_level": "LOUD"},
    ],
)
def test_invalid_values(kwargs):
    with pytest.raises(ValueError):
        GraphConfig(**kwargs)

"""
Runtime settings for graphs and their backing maps.

Settings can be built in code or read from a YAML file:

    initial_capacity: 128
    load_factor_threshold: 0.75
    reject_negative_weights: true
    log_level: DEBUG
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Mapping
import logging
import os

from chained_map import DEFAULT_CAPACITY, DEFAULT_LOAD_FACTOR_THRESHOLD

# Default log level, overridable from the environment.
LOG_LEVEL = os.environ.get("GRAPHROUTE_LOG_LEVEL", "INFO")

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


@dataclass(frozen=True)
class GraphConfig:
    """
    Tunables shared by AdjacencyListGraph and its node index.

    reject_negative_weights turns negative edge weights into an insertion
    error; left False, they are stored and shortest-path results on graphs
    containing them are undefined.
    """

    initial_capacity: int = DEFAULT_CAPACITY
    load_factor_threshold: float = DEFAULT_LOAD_FACTOR_THRESHOLD
    reject_negative_weights: bool = False
    log_level: str = LOG_LEVEL

    def __post_init__(self) -> None:
        if self.initial_capacity < 1:
            raise ValueError("initial_capacity must be at least 1")
        if not 0.0 < self.load_factor_threshold <= 1.0:
            raise ValueError("load_factor_threshold must be in (0, 1]")
        if not isinstance(logging.getLevelName(self.log_level.upper()), int):
            raise ValueError(f"unknown log level: {self.log_level!r}")


DEFAULT_CONFIG = GraphConfig()


def config_from_mapping(data: Mapping[str, Any]) -> GraphConfig:
    known = {f.name for f in fields(GraphConfig)}
    unknown = set(data) - known
    if unknown:
        raise ValueError(f"unknown config keys: {sorted(unknown)}")
    return GraphConfig(**dict(data))


def load_config(path: Path) -> GraphConfig:
    import yaml  # type: ignore

    data = yaml.safe_load(Path(path).read_text())
    if data is None:
        return GraphConfig()
    if not isinstance(data, Mapping):
        raise ValueError(f"config file {path} must contain a mapping")
    return config_from_mapping(data)


def configure_logging(level: str | None = None) -> None:
    """Install a basic root handler once and set the level."""
    level_name = (level or LOG_LEVEL).upper()
    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(format=LOG_FORMAT)
    root.setLevel(level_name)

"""
Error kinds raised by the map, graph and search layers.

Every class derives from GraphError so callers can catch the whole family,
and from the closest built-in so generic handlers keep working.
"""

from typing import Any, Hashable, Optional


class GraphError(Exception):
    """Base class for all errors raised by this library."""


class NullKeyError(GraphError, ValueError):
    """A ``None`` key was supplied where a key is required."""

    def __init__(self, message: str = "key must not be None") -> None:
        super().__init__(message)


class DuplicateKeyError(GraphError, ValueError):
    """Insertion of a key that is already present."""

    def __init__(self, key: Hashable) -> None:
        super().__init__(f"duplicate key: {key!r}")
        self.key = key


class KeyNotFoundError(GraphError, LookupError):
    """Lookup or removal of a key that is not present."""

    def __init__(self, key: Any, message: Optional[str] = None) -> None:
        super().__init__(message or f"key not found: {key!r}")
        self.key = key


class NodeNotFoundError(KeyNotFoundError):
    """No node holds the given data."""

    def __init__(self, data: Any) -> None:
        super().__init__(data, f"node not found: {data!r}")
        self.data = data


class EdgeNotFoundError(KeyNotFoundError):
    """No edge connects the given ordered pair."""

    def __init__(self, pred: Any, succ: Any) -> None:
        super().__init__((pred, succ), f"edge not found: {pred!r} -> {succ!r}")
        self.pred = pred
        self.succ = succ


class NoPathFoundError(GraphError, LookupError):
    """Both endpoints exist but the target is unreachable from the start."""

    def __init__(self, start: Any, end: Any, message: Optional[str] = None) -> None:
        super().__init__(message or f"no path: {start!r} -> {end!r}")
        self.start = start
        self.end = end


class NegativeWeightError(GraphError, ValueError):
    """A negative edge weight was rejected."""

    def __init__(self, pred: Any, succ: Any, weight: Any) -> None:
        super().__init__(f"negative weight {weight!r} on edge {pred!r} -> {succ!r}")
        self.pred = pred
        self.succ = succ
        self.weight = weight

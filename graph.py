"""
Directed, weighted graph abstraction.

Nodes are identified by hashable caller data.
Edges are directed: u -> v with a real-valued weight.
"""

from abc import ABC, abstractmethod
from numbers import Real
from typing import Hashable, Iterable, Tuple


class Graph(ABC):
    """Read-only view of a directed, weighted graph used by search engines."""

    @abstractmethod
    def nodes(self) -> Iterable[Hashable]:
        """Return the data of all nodes in the graph."""
        raise NotImplementedError

    @abstractmethod
    def contains_node(self, data: Hashable) -> bool:
        """True if a node holds ``data``."""
        raise NotImplementedError

    @abstractmethod
    def outgoing(self, data: Hashable) -> Iterable[Tuple[Hashable, Real]]:
        """
        Outgoing neighbours and edge weights for the node holding ``data``.

        Yields (successor_data, weight) pairs.
        """
        raise NotImplementedError

"""
Algorithm interfaces for routing.

Keeps graph algorithms separate from graph storage and the query surface.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from numbers import Real
from typing import Hashable, Tuple

from chained_map import ChainedMap
from graph import Graph


@dataclass(frozen=True)
class PathResult:
    """
    Flattened outcome of one shortest-path query.

    path holds node data from start to end inclusive; cost is the sum of the
    edge weights along it.
    """

    path: Tuple[Hashable, ...]
    cost: Real

    @property
    def hops(self) -> int:
        return len(self.path) - 1


class DijkstraEngine(ABC):
    """
    Interface for shortest-path computation over a Graph.
    """

    @abstractmethod
    def shortest_path(self, graph: Graph, start: Hashable, end: Hashable) -> PathResult:
        """
        Compute the cheapest path from start to end.

        Raises:
            NodeNotFoundError: start or end is not in the graph.
            NoPathFoundError: end is unreachable from start.
        """
        raise NotImplementedError

    @abstractmethod
    def shortest_path_costs(self, graph: Graph, source: Hashable) -> ChainedMap[Hashable, Real]:
        """
        Compute shortest-path costs from source to all reachable nodes.

        Returns:
            Mapping dest_data -> path_cost(source -> dest), source included at 0.
        """
        raise NotImplementedError

"""
Graph storage with built-in shortest-path queries.
"""

from numbers import Real
from typing import Hashable, List, Optional

from adjacency_list_graph import AdjacencyListGraph
from algorithms import DijkstraEngine, PathResult
from chained_map import ChainedMap
from config import GraphConfig
from dijkstra_engine import SimpleDijkstraEngine


class DijkstraGraph(AdjacencyListGraph):
    """
    AdjacencyListGraph that answers shortest-path queries with a DijkstraEngine.

    The engine holds no state between queries, so one instance can be shared.
    """

    def __init__(
        self,
        config: Optional[GraphConfig] = None,
        engine: Optional[DijkstraEngine] = None,
    ) -> None:
        super().__init__(config)
        self._engine = engine or SimpleDijkstraEngine(self.config)

    def shortest_path(self, start: Hashable, end: Hashable) -> PathResult:
        return self._engine.shortest_path(self, start, end)

    def shortest_path_data(self, start: Hashable, end: Hashable) -> List[Hashable]:
        """
        Node data along the cheapest path from start to end, both included.

        Raises NodeNotFoundError for unknown endpoints and NoPathFoundError
        when end cannot be reached.
        """
        return list(self.shortest_path(start, end).path)

    def shortest_path_cost(self, start: Hashable, end: Hashable) -> Real:
        """Total weight of the cheapest path; 0 when start == end."""
        return self.shortest_path(start, end).cost

    def shortest_path_costs(self, source: Hashable) -> ChainedMap[Hashable, Real]:
        return self._engine.shortest_path_costs(self, source)

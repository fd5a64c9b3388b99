"""
Query surface used by loaders and presentation code.

RouteService wraps a DijkstraGraph and exposes the handful of operations
outer layers need: bulk edge loading, the node list, path/cost queries,
per-hop weights and the furthest reachable destination.
"""

from dataclasses import dataclass
from numbers import Real
from typing import Hashable, Iterable, List, Optional, Tuple
import logging

from dijkstra_graph import DijkstraGraph
from errors import NodeNotFoundError, NoPathFoundError

logger = logging.getLogger(__name__)

EdgeRecord = Tuple[Hashable, Hashable, Real]


@dataclass(frozen=True)
class Route:
    """
    Cheapest route between two nodes.

    hop_weights[i] is the weight of the edge path[i] -> path[i + 1].
    """
    path: Tuple[Hashable, ...]
    hop_weights: Tuple[Real, ...]
    cost: Real


class RouteService:
    def __init__(self, graph: Optional[DijkstraGraph] = None) -> None:
        self._graph = graph if graph is not None else DijkstraGraph()

    @property
    def graph(self) -> DijkstraGraph:
        return self._graph

    def load_edges(self, records: Iterable[EdgeRecord], clear: bool = True) -> int:
        """
        Insert one edge per (pred, succ, weight) record, creating nodes as needed.

        With clear=True every existing node (and so every edge) is removed
        first. Returns the number of records loaded.
        """
        if clear and self._graph.get_node_count():
            self._graph.clear()

        loaded = 0
        for pred, succ, weight in records:
            self._graph.insert_node(pred)
            self._graph.insert_node(succ)
            self._graph.insert_edge(pred, succ, weight)
            loaded += 1

        logger.info(
            "loaded %d edge records (%d nodes, %d edges)",
            loaded, self._graph.get_node_count(), self._graph.get_edge_count(),
        )
        return loaded

    def get_all_nodes(self) -> List[Hashable]:
        return self._graph.get_all_nodes()

    def shortest_path_data(self, start: Hashable, end: Hashable) -> List[Hashable]:
        return self._graph.shortest_path_data(start, end)

    def shortest_path_cost(self, start: Hashable, end: Hashable) -> Real:
        return self._graph.shortest_path_cost(start, end)

    def hop_weights(self, start: Hashable, end: Hashable) -> List[Real]:
        """Edge weights along the cheapest path; empty when start == end."""
        path = self._graph.shortest_path_data(start, end)
        return [self._graph.get_edge(u, v) for u, v in zip(path, path[1:])]

    def find_route(self, start: Hashable, end: Hashable) -> Route:
        result = self._graph.shortest_path(start, end)
        weights = tuple(
            self._graph.get_edge(u, v) for u, v in zip(result.path, result.path[1:])
        )
        return Route(result.path, weights, result.cost)

    def get_furthest_destination_from(self, start: Hashable) -> Hashable:
        """
        Reachable node with the largest shortest-path cost from start.

        Ties keep the first node in get_all_nodes() order.

        Raises:
            NodeNotFoundError: start is not in the graph.
            NoPathFoundError: no other node is reachable from start.
        """
        if not self._graph.contains_node(start):
            raise NodeNotFoundError(start)

        dist = self._graph.shortest_path_costs(start)

        furthest: Optional[Hashable] = None
        max_cost: Optional[Real] = None
        for dest in self._graph.get_all_nodes():
            if dest == start or not dist.contains_key(dest):
                continue
            cost = dist.get(dest)
            if max_cost is None or cost > max_cost:
                furthest, max_cost = dest, cost

        if max_cost is None:
            raise NoPathFoundError(start, None, f"no destinations reachable from {start!r}")
        return furthest

"""
Heap-based DijkstraEngine implementation.

Uses Python's heapq for the frontier and a ChainedMap as the settled set.
Works over any Graph implementation that satisfies the Graph interface.
"""

from dataclasses import dataclass
from numbers import Real
from typing import Any, Hashable, List, Optional, Tuple
import heapq
import logging

from algorithms import DijkstraEngine, PathResult
from chained_map import ChainedMap
from config import DEFAULT_CONFIG, GraphConfig
from errors import NodeNotFoundError, NoPathFoundError
from graph import Graph

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SearchNode:
    """
    One candidate path explored during a query.

    predecessor is the arena index of the SearchNode this path extends, or
    None for the start.
    """

    data: Hashable
    cost: Real
    predecessor: Optional[int]


class SimpleDijkstraEngine(DijkstraEngine):
    """
    Single-target Dijkstra using a binary heap.

    Every pushed SearchNode lives in a per-query arena list and the heap
    holds (cost, push_sequence, arena_index) triples, so equal costs pop in
    push order and SearchNodes never need to be compared directly.

    Complexity:
        O(E log E) over the edges reachable from the start.
    """

    def __init__(self, config: Optional[GraphConfig] = None) -> None:
        # Sizing for the per-query settled and distance maps.
        self._config = config or DEFAULT_CONFIG

    def shortest_path(self, graph: Graph, start: Hashable, end: Hashable) -> PathResult:
        if not graph.contains_node(start):
            raise NodeNotFoundError(start)
        if not graph.contains_node(end):
            raise NodeNotFoundError(end)

        if start == end:
            return PathResult((start,), 0)

        arena: List[SearchNode] = [SearchNode(start, 0, None)]
        settled: ChainedMap[Hashable, int] = self._new_map()
        pq: List[Tuple[Real, int, int]] = [(0, 0, 0)]
        pushes = 1

        while pq:
            cost, _, index = heapq.heappop(pq)
            current = arena[index]

            if current.data == end:
                result = PathResult(self._unwind(arena, index), cost)
                logger.debug(
                    "path %r -> %r: cost=%r hops=%d explored=%d",
                    start, end, cost, result.hops, len(arena),
                )
                return result

            # Dominated entry: this node was settled more cheaply already.
            if self._settled_cost(settled, arena, current.data) <= cost:
                continue
            self._settle(settled, current.data, index)

            for neighbor, weight in graph.outgoing(current.data):
                neighbor_cost = cost + weight
                if self._settled_cost(settled, arena, neighbor) <= neighbor_cost:
                    continue
                arena.append(SearchNode(neighbor, neighbor_cost, index))
                heapq.heappush(pq, (neighbor_cost, pushes, len(arena) - 1))
                pushes += 1

        logger.debug("no path %r -> %r after exploring %d", start, end, len(arena))
        raise NoPathFoundError(start, end)

    def shortest_path_costs(self, graph: Graph, source: Hashable) -> ChainedMap[Hashable, Real]:
        """
        Single-source sweep with the same settle/discard rules as shortest_path.

        Unreachable nodes are absent from the returned map.
        """
        if not graph.contains_node(source):
            raise NodeNotFoundError(source)

        dist: ChainedMap[Hashable, Real] = self._new_map()
        pq: List[Tuple[Real, int, Hashable]] = [(0, 0, source)]
        pushes = 1

        while pq:
            d_u, _, u = heapq.heappop(pq)
            if dist.contains_key(u) and dist.get(u) <= d_u:
                continue
            self._settle(dist, u, d_u)

            for v, w in graph.outgoing(u):
                alt = d_u + w
                if dist.contains_key(v) and dist.get(v) <= alt:
                    continue
                heapq.heappush(pq, (alt, pushes, v))
                pushes += 1

        return dist

    # --- Internals -----------------------------------------------------------

    def _new_map(self) -> ChainedMap:
        return ChainedMap(self._config.initial_capacity, self._config.load_factor_threshold)

    @staticmethod
    def _settled_cost(
        settled: ChainedMap[Hashable, int], arena: List[SearchNode], data: Hashable
    ) -> Real:
        if not settled.contains_key(data):
            return float("inf")
        return arena[settled.get(data)].cost

    @staticmethod
    def _settle(settled: ChainedMap[Hashable, Any], data: Hashable, value: Any) -> None:
        # A cheaper re-settle can only happen with negative weights.
        if settled.contains_key(data):
            settled.remove(data)
        settled.put(data, value)

    @staticmethod
    def _unwind(arena: List[SearchNode], index: int) -> Tuple[Hashable, ...]:
        path: List[Hashable] = []
        cursor: Optional[int] = index
        while cursor is not None:
            node = arena[cursor]
            path.append(node.data)
            cursor = node.predecessor
        path.reverse()
        return tuple(path)

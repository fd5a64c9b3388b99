"""
Concrete directed, weighted graph.

Implements the Graph interface with per-node edge lists, indexed by a
ChainedMap from node data to Node records.
"""

from numbers import Real
from typing import Hashable, Iterator, List, Optional, Tuple
import logging

from chained_map import ChainedMap
from config import DEFAULT_CONFIG, GraphConfig
from errors import EdgeNotFoundError, NegativeWeightError, NodeNotFoundError, NullKeyError
from graph import Graph
from nodes import Edge, Node

logger = logging.getLogger(__name__)


class AdjacencyListGraph(Graph):
    """
    Directed, weighted graph backed by a data -> Node chained map.

    Inserting data that is already present is a no-op; inserting an edge
    for an existing (pred, succ) pair overwrites its weight. Removing a node
    removes every edge incident to it in either direction.
    """

    def __init__(self, config: Optional[GraphConfig] = None) -> None:
        self._config = config or DEFAULT_CONFIG
        self._nodes: ChainedMap[Hashable, Node] = ChainedMap(
            self._config.initial_capacity, self._config.load_factor_threshold
        )
        self._edge_count = 0

    @property
    def config(self) -> GraphConfig:
        return self._config

    # --- Mutation API --------------------------------------------------------

    def insert_node(self, data: Hashable) -> bool:
        """Add a node for ``data``. Returns False if one already exists."""
        if data is None:
            raise NullKeyError("node data must not be None")
        if self._nodes.contains_key(data):
            return False
        self._nodes.put(data, Node(data))
        return True

    def remove_node(self, data: Hashable) -> bool:
        """Remove the node holding ``data`` and all of its edges."""
        node = self._node(data)
        out_count = len(node.edges_leaving)
        in_count = len(node.edges_entering)

        # A self-loop leaves edges_entering in the first pass, so it is counted once.
        for edge in node.edges_leaving:
            edge.successor.edges_entering.remove(edge)
            self._edge_count -= 1
        for edge in node.edges_entering:
            edge.predecessor.edges_leaving.remove(edge)
            self._edge_count -= 1

        self._nodes.remove(data)
        logger.debug("removed node %r (%d out, %d in)", data, out_count, in_count)
        node.edges_leaving.clear()
        node.edges_entering.clear()
        return True

    def insert_edge(self, pred: Hashable, succ: Hashable, weight: Real) -> bool:
        """
        Add or update the directed edge pred -> succ.

        Both endpoints must already exist. Returns True when a new edge was
        created and False when an existing edge's weight was replaced.
        """
        if isinstance(weight, bool) or not isinstance(weight, Real):
            raise TypeError(f"edge weight must be a real number, got {type(weight).__name__}")
        if self._config.reject_negative_weights and weight < 0:
            raise NegativeWeightError(pred, succ, weight)

        tail = self._node(pred)
        head = self._node(succ)

        existing = tail.edge_to(head)
        if existing is not None:
            existing.weight = weight
            return False

        edge = Edge(tail, head, weight)
        tail.edges_leaving.append(edge)
        head.edges_entering.append(edge)
        self._edge_count += 1
        return True

    def remove_edge(self, pred: Hashable, succ: Hashable) -> bool:
        edge = self._edge(pred, succ)
        edge.predecessor.edges_leaving.remove(edge)
        edge.successor.edges_entering.remove(edge)
        self._edge_count -= 1
        return True

    def clear(self) -> None:
        """Remove every node and edge."""
        for data in list(self._nodes.keys()):
            self.remove_node(data)

    # --- Queries -------------------------------------------------------------

    def contains_node(self, data: Hashable) -> bool:
        return self._nodes.contains_key(data)

    def contains_edge(self, pred: Hashable, succ: Hashable) -> bool:
        try:
            self._edge(pred, succ)
        except (NodeNotFoundError, EdgeNotFoundError):
            return False
        return True

    def get_edge(self, pred: Hashable, succ: Hashable) -> Real:
        """Weight of pred -> succ; EdgeNotFoundError if there is no such edge."""
        return self._edge(pred, succ).weight

    def get_all_nodes(self) -> List[Hashable]:
        """Node data in index order (unspecified, stable between mutations)."""
        return list(self._nodes.keys())

    def get_node_count(self) -> int:
        return self._nodes.size()

    def get_edge_count(self) -> int:
        return self._edge_count

    # --- Graph interface -----------------------------------------------------

    def nodes(self) -> Iterator[Hashable]:
        return self._nodes.keys()

    def outgoing(self, data: Hashable) -> Iterator[Tuple[Hashable, Real]]:
        for edge in self._node(data).edges_leaving:
            yield edge.successor.data, edge.weight

    # --- Internals -----------------------------------------------------------

    def _node(self, data: Hashable) -> Node:
        if not self._nodes.contains_key(data):
            raise NodeNotFoundError(data)
        return self._nodes.get(data)

    def _edge(self, pred: Hashable, succ: Hashable) -> Edge:
        if not self._nodes.contains_key(pred) or not self._nodes.contains_key(succ):
            raise EdgeNotFoundError(pred, succ)
        edge = self._nodes.get(pred).edge_to(self._nodes.get(succ))
        if edge is None:
            raise EdgeNotFoundError(pred, succ)
        return edge

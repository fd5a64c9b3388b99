"""
Node and edge records for AdjacencyListGraph.

Nodes are identified by the caller's data; the records themselves compare
by identity so they can be stored and unlinked without ambiguity.
"""

from dataclasses import dataclass, field
from numbers import Real
from typing import Generic, Hashable, List, Optional, TypeVar

D = TypeVar("D", bound=Hashable)


@dataclass(eq=False)
class Node(Generic[D]):
    """
    Graph vertex wrapping caller data.

    edges_leaving owns the outgoing edges; edges_entering mirrors the edges
    owned by other nodes that point here.
    """

    data: D
    edges_leaving: List["Edge[D]"] = field(default_factory=list)
    edges_entering: List["Edge[D]"] = field(default_factory=list)

    def edge_to(self, successor: "Node[D]") -> Optional["Edge[D]"]:
        for edge in self.edges_leaving:
            if edge.successor is successor:
                return edge
        return None

    def __repr__(self) -> str:
        return f"Node({self.data!r})"


@dataclass(eq=False)
class Edge(Generic[D]):
    """Directed weighted connection predecessor -> successor."""

    predecessor: Node[D]
    successor: Node[D]
    weight: Real

    def __repr__(self) -> str:
        return f"Edge({self.predecessor.data!r} -> {self.successor.data!r}, {self.weight!r})"

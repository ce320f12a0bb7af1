"""
Adjacency-list storage for directed graphs with generic edge metadata.

Nodes are implicit: every integer in [0, node_count) is a node, and the
node space grows on demand when an edge names a node past the end.

Usage:
    from mazegraph.graph.adjacency import AdjacencyList

    adjacency = AdjacencyList()
    adjacency.add_edge(0, 5, "weight")
    adjacency.node_count        # 6
    adjacency.neighbors(0)      # [5]
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from typing import Generic, TypeVar

from mazegraph.exceptions import NodeLimitExceeded, NodeNotFoundError
from mazegraph.graph.edge import Edge

T = TypeVar("T")

logger = logging.getLogger(__name__)


class AdjacencyList(Generic[T]):
    """
    Per-node lists of outgoing edges.

    Invariant: len(adjacency) == node_count, and every stored edge has
    both endpoints below node_count. Parallel edges and self-loops are
    kept as inserted.

    Attributes:
        max_nodes: Upper bound on node_count, or None for unbounded growth
    """

    def __init__(self, size: int = 0, max_nodes: int | None = None) -> None:
        """
        Initialize storage.

        Args:
            size: Number of (edgeless) nodes to pre-allocate
            max_nodes: Refuse to grow past this many nodes (None = no limit)
        """
        if size < 0:
            raise ValueError(f"size must be >= 0, got {size}")
        if max_nodes is not None and size > max_nodes:
            raise NodeLimitExceeded(max_nodes, size)

        self.max_nodes = max_nodes
        self._adjacency: list[list[Edge[T]]] = [[] for _ in range(size)]
        self._node_count = size

    # =========================================================================
    # Mutation
    # =========================================================================

    def ensure_node(self, node: int) -> None:
        """Grow the node space until `node` is a valid id."""
        if node < 0:
            raise ValueError(f"Node ids must be >= 0, got {node}")
        if node < self._node_count:
            return
        if self.max_nodes is not None and node >= self.max_nodes:
            raise NodeLimitExceeded(self.max_nodes, node + 1)

        logger.debug(f"Growing node space from {self._node_count} to {node + 1}")
        # One node at a time so the invariant holds after every step
        while node >= self._node_count:
            self._adjacency.append([])
            self._node_count += 1

    def add_edge(self, source: int, destination: int, metadata: T | None = None) -> Edge[T]:
        """
        Insert one directed edge, growing the node space first if needed.

        Returns:
            The stored Edge
        """
        if source < 0 or destination < 0:
            raise ValueError(f"Node ids must be >= 0, got ({source}, {destination})")
        self.ensure_node(max(source, destination))

        edge = Edge(source, destination, metadata)
        self._adjacency[source].append(edge)
        return edge

    def add_edges(self, edges: Iterable[Edge[T] | tuple]) -> int:
        """
        Insert many edges.

        Accepts Edge instances or (source, destination[, metadata]) tuples.

        Returns:
            Number of edges inserted
        """
        count = 0
        for item in edges:
            if isinstance(item, Edge):
                self.add_edge(item.source, item.destination, item.metadata)
            else:
                self.add_edge(*item)
            count += 1
        return count

    def clear(self) -> None:
        """Remove all nodes and edges."""
        self._adjacency = []
        self._node_count = 0

    # =========================================================================
    # Accessors
    # =========================================================================

    @property
    def node_count(self) -> int:
        """Number of nodes (ids 0..node_count-1)."""
        return self._node_count

    @property
    def edge_count(self) -> int:
        """Total number of stored edges."""
        return sum(len(edges) for edges in self._adjacency)

    def _check_node(self, node: int) -> None:
        if not 0 <= node < self._node_count:
            raise NodeNotFoundError(node, self._node_count)

    def edges_from(self, node: int) -> list[Edge[T]]:
        """Outgoing edges of a node, in insertion order."""
        self._check_node(node)
        return list(self._adjacency[node])

    def neighbors(self, node: int) -> list[int]:
        """Destinations of a node's outgoing edges, in insertion order."""
        self._check_node(node)
        return [edge.destination for edge in self._adjacency[node]]

    def has_edge(self, source: int, destination: int) -> bool:
        """Check if at least one edge source -> destination exists."""
        if not 0 <= source < self._node_count:
            return False
        return any(edge.destination == destination for edge in self._adjacency[source])

    def edges(self) -> Iterator[Edge[T]]:
        """Iterate over every edge, grouped by source node."""
        for node_edges in self._adjacency:
            yield from node_edges

    def describe(self) -> list[str]:
        """One line per edge, for debug output."""
        return [
            f"Source: {edge.source} Destination: {edge.destination} Metadata: {edge.metadata}"
            for edge in self.edges()
        ]

    def __len__(self) -> int:
        return self._node_count

    def __contains__(self, node: object) -> bool:
        return isinstance(node, int) and 0 <= node < self._node_count

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(nodes={self._node_count}, edges={self.edge_count})"

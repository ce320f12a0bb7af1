"""
Generic graph variant populated from an in-memory edge list.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Generic, TypeVar

from mazegraph.config import (
    DEFAULT_MAX_DEPTH,
    DEFAULT_MAX_NODES,
    DEFAULT_MAX_STEPS,
    DEFAULT_STRATEGY,
)
from mazegraph.graph.adjacency import AdjacencyList
from mazegraph.graph.base import Graph
from mazegraph.graph.edge import Edge
from mazegraph.search import SearchStrategy, get_strategy

T = TypeVar("T")

logger = logging.getLogger(__name__)


class EdgeListGraph(Graph, Generic[T]):
    """
    Graph whose source is a sequence of edges supplied by the caller.

    Edges may also be inserted directly with add_edge() at any time
    before a search.
    """

    def __init__(
        self,
        edges: Iterable[Edge[T] | tuple] = (),
        size: int = 0,
        strategy: str = DEFAULT_STRATEGY,
        max_depth: int | None = DEFAULT_MAX_DEPTH,
        max_nodes: int | None = DEFAULT_MAX_NODES,
        max_steps: int | None = DEFAULT_MAX_STEPS,
    ) -> None:
        """
        Initialize the graph.

        Args:
            edges: Edges inserted by load()
            size: Number of nodes to pre-allocate
            strategy: Search strategy name (dfs, bfs)
            max_depth: Maximum route length in nodes (None = unlimited)
            max_nodes: Maximum node count (None = unlimited)
            max_steps: Maximum node expansions per search (None = unlimited)
        """
        self._source = list(edges)
        self._adjacency: AdjacencyList[T] = AdjacencyList(size, max_nodes=max_nodes)
        self._strategy = get_strategy(strategy, max_depth=max_depth, max_steps=max_steps)
        self._loaded = False

    @property
    def adjacency(self) -> AdjacencyList[T]:
        return self._adjacency

    @property
    def strategy(self) -> SearchStrategy:
        return self._strategy

    def load(self) -> None:
        """Insert the edges given at construction (only once)."""
        if self._loaded:
            return
        count = self._adjacency.add_edges(self._source)
        self._loaded = True
        logger.info(f"Loaded {count} edges ({self._adjacency.node_count} nodes)")

    def find_route(self, start: int, end: int) -> list[int]:
        return self._strategy.search(self._adjacency, start, end)

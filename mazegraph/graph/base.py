"""
Graph capability interface.

Every graph variant owns its own AdjacencyList and search strategy and
must implement load() and find_route().
"""

from __future__ import annotations

import logging
import time
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from mazegraph.search.result import SearchResult

if TYPE_CHECKING:
    from mazegraph.graph.adjacency import AdjacencyList
    from mazegraph.graph.edge import Edge
    from mazegraph.search.base import SearchStrategy

logger = logging.getLogger(__name__)


class Graph(ABC):
    """
    Abstract base class for searchable graphs.

    Variants (EdgeListGraph, MazeGraph, ...) decide where their edges come
    from and how a route is found; this class only wires the shared helpers
    to the storage each variant exposes.
    """

    # Set by solve(); None means no search has run yet
    last_result: SearchResult | None = None

    @property
    @abstractmethod
    def adjacency(self) -> AdjacencyList:
        """Storage owned by this variant."""
        ...

    @property
    @abstractmethod
    def strategy(self) -> SearchStrategy:
        """Search strategy used by find_route()."""
        ...

    @abstractmethod
    def load(self) -> None:
        """
        Populate the graph from its source.

        Raises:
            LoadError: If the source cannot be read or is malformed
        """
        ...

    @abstractmethod
    def find_route(self, start: int, end: int) -> list[int]:
        """
        Find a route between two nodes.

        Returns:
            Node ids from start to end inclusive, or [] if no route exists
        """
        ...

    @property
    def node_count(self) -> int:
        return self.adjacency.node_count

    def add_edge(self, source: int, destination: int, metadata=None) -> Edge:
        """Insert one directed edge, growing the node space if needed."""
        return self.adjacency.add_edge(source, destination, metadata)

    def solve(self, start: int, end: int) -> SearchResult:
        """
        Run find_route() and record timing and frontier statistics.

        The result is also kept as `last_result`.
        """
        logger.info(f"Searching route {start} -> {end} with {self.strategy.name}")

        search_start = time.time() * 1000
        path = self.find_route(start, end)
        elapsed = time.time() * 1000 - search_start

        result = SearchResult(
            start=start,
            end=end,
            path=path,
            strategy=self.strategy.name,
            expanded=self.strategy.expanded,
            elapsed_ms=elapsed,
        )
        self.last_result = result

        if result.found:
            logger.info(
                f"Found route ({result.length} edges, {result.expanded} nodes expanded) "
                f"in {elapsed:.1f}ms"
            )
        else:
            logger.warning(f"No route from {start} to {end}")

        return result

"""
Search strategy base class for route finding over an adjacency list.

All strategies must implement search() to return the route between two nodes.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from mazegraph.exceptions import NodeNotFoundError, StepLimitExceeded

if TYPE_CHECKING:
    from mazegraph.graph.adjacency import AdjacencyList


class SearchStrategy(ABC):
    """
    Abstract base class for route search strategies.

    Strategies read a static adjacency list and return the ordered node ids
    of a route from start to end, or an empty list when end is unreachable.
    """

    def __init__(self, max_depth: int | None = None, max_steps: int | None = None) -> None:
        """
        Initialize the strategy.

        Args:
            max_depth: Maximum number of nodes in a route (None = unlimited)
            max_steps: Maximum number of node expansions per search (None = unlimited)
        """
        if max_depth is not None and max_depth < 1:
            raise ValueError(f"max_depth must be >= 1, got {max_depth}")
        if max_steps is not None and max_steps < 1:
            raise ValueError(f"max_steps must be >= 1, got {max_steps}")
        self._max_depth = max_depth
        self._max_steps = max_steps
        self.expanded: int = 0

    @property
    @abstractmethod
    def name(self) -> str:
        """Short identifier for the strategy (e.g., 'dfs', 'bfs')."""
        ...

    @property
    @abstractmethod
    def description(self) -> str:
        """Human-readable description of the strategy."""
        ...

    @property
    def max_depth(self) -> int | None:
        return self._max_depth

    @property
    def max_steps(self) -> int | None:
        return self._max_steps

    def search(self, adjacency: AdjacencyList, start: int, end: int) -> list[int]:
        """
        Find a route from start to end.

        Args:
            adjacency: Graph storage to search (not modified)
            start: Node to start from
            end: Node to reach

        Returns:
            Node ids from start to end inclusive, or [] if end is unreachable

        Raises:
            NodeNotFoundError: If start or end is not a node of the graph
            DepthLimitExceeded: If no route was found and the depth limit cut
                at least one branch short
            StepLimitExceeded: If the search expanded max_steps nodes without
                reaching a result
        """
        for node in (start, end):
            if node not in adjacency:
                raise NodeNotFoundError(node, adjacency.node_count)

        self.expanded = 0
        if start == end:
            return [start]
        return self._search(adjacency, start, end)

    def _step(self) -> None:
        """Count one node expansion against max_steps."""
        if self._max_steps is not None and self.expanded >= self._max_steps:
            raise StepLimitExceeded(self._max_steps, self.expanded)
        self.expanded += 1

    @abstractmethod
    def _search(self, adjacency: AdjacencyList, start: int, end: int) -> list[int]:
        """Strategy-specific search, called with validated, distinct endpoints."""
        ...

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(name={self.name!r}, "
            f"max_depth={self._max_depth}, max_steps={self._max_steps})"
        )

"""
Exception hierarchy for graph construction, maze loading and route search.

A route that does not exist is not an error: searches return an empty
list for it. Everything here signals a condition the caller must handle.
"""

from __future__ import annotations

from pathlib import Path


class MazeGraphError(Exception):
    """Base class for all mazegraph errors."""


# =============================================================================
# Graph Errors
# =============================================================================

class GraphError(MazeGraphError):
    """Raised for invalid operations on a graph's node space."""


class NodeLimitExceeded(GraphError):
    """Raised when inserting an edge would grow a graph past its node limit."""

    def __init__(self, limit: int, requested: int) -> None:
        self.limit = limit
        self.requested = requested
        super().__init__(
            f"Edge requires {requested:,} nodes but the graph is limited to {limit:,}"
        )


class NodeNotFoundError(GraphError, IndexError):
    """Raised when a node id falls outside [0, node_count)."""

    def __init__(self, node: int, node_count: int) -> None:
        self.node = node
        self.node_count = node_count
        super().__init__(f"Node {node} out of range [0, {node_count})")


# =============================================================================
# Load Errors
# =============================================================================

class LoadError(MazeGraphError):
    """Raised when a graph cannot be populated from its source."""


class SourceUnavailable(LoadError):
    """Raised when the maze source cannot be read."""

    def __init__(self, source: str | Path, reason: str) -> None:
        self.source = source
        super().__init__(f"Cannot read maze source '{source}': {reason}")


class MalformedGrid(LoadError):
    """Raised when maze text is not a rectangular grid with start and end cells."""

    def __init__(self, message: str, row: int | None = None) -> None:
        self.row = row
        if row is not None:
            message = f"Row {row}: {message}"
        super().__init__(message)


class MazeNotLoaded(LoadError):
    """Raised when a maze operation needs a grid that has not been loaded."""

    def __init__(self) -> None:
        super().__init__("Maze has not been loaded; call load() first")


# =============================================================================
# Search Errors
# =============================================================================

class SearchError(MazeGraphError):
    """Raised when a search cannot reach a definite answer."""


class DepthLimitExceeded(SearchError):
    """
    Raised when no route was found but at least one branch was cut short.

    The search cannot tell whether the route is missing or merely longer
    than the configured limit.
    """

    def __init__(self, limit: int, expanded: int = 0) -> None:
        self.limit = limit
        self.expanded = expanded
        super().__init__(
            f"Search gave up after routes reached the depth limit of {limit:,} nodes "
            f"({expanded:,} nodes expanded)"
        )


class StepLimitExceeded(SearchError):
    """Raised when a search expands more nodes than its step budget allows."""

    def __init__(self, limit: int, expanded: int) -> None:
        self.limit = limit
        self.expanded = expanded
        super().__init__(
            f"Search stopped after expanding {expanded:,} nodes "
            f"(step limit {limit:,}) without a result"
        )

"""
Search module.

Provides route search strategies over adjacency lists:
- DepthFirstSearch: First route found by backtracking DFS
- BreadthFirstSearch: Shortest route by edge count
- SearchResult: Record of one search
"""

from mazegraph.search.base import SearchStrategy
from mazegraph.search.bfs import BreadthFirstSearch
from mazegraph.search.dfs import DepthFirstSearch
from mazegraph.search.result import SearchResult

__all__ = [
    "SearchStrategy",
    "DepthFirstSearch",
    "BreadthFirstSearch",
    "SearchResult",
    "get_strategy",
]

STRATEGIES: dict[str, type[SearchStrategy]] = {
    "dfs": DepthFirstSearch,
    "bfs": BreadthFirstSearch,
}


def get_strategy(name: str, **kwargs) -> SearchStrategy:
    """
    Get a search strategy by name.

    Args:
        name: Strategy identifier (dfs, bfs)
        **kwargs: Additional arguments passed to the strategy constructor (e.g., max_depth)

    Returns:
        Instantiated strategy

    Raises:
        ValueError: If strategy name is unknown
    """
    if name not in STRATEGIES:
        available = ", ".join(STRATEGIES.keys())
        raise ValueError(f"Unknown strategy '{name}'. Available: {available}")

    return STRATEGIES[name](**kwargs)

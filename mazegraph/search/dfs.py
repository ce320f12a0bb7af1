"""
Depth-first search with in-path exclusion.

Explores branches in edge insertion order and returns the first route that
reaches the target, which is deterministic for a fixed graph but not
necessarily the shortest. A node may not appear twice on one route, but may
be revisited on a different branch.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from mazegraph.exceptions import DepthLimitExceeded
from mazegraph.search.base import SearchStrategy

if TYPE_CHECKING:
    from mazegraph.graph.adjacency import AdjacencyList

logger = logging.getLogger(__name__)


class DepthFirstSearch(SearchStrategy):
    """
    Backtracking DFS over an explicit frontier.

    Each frontier entry carries its own copy of the route so far, so sibling
    branches never see each other's exploration. With max_depth set, routes
    stop growing at that many nodes. If the search then fails and some
    route had unexplored children at the limit, the failure is reported as
    DepthLimitExceeded rather than "no route". max_steps caps the total
    number of expansions across all branches.
    """

    @property
    def name(self) -> str:
        return "dfs"

    @property
    def description(self) -> str:
        limit = "unlimited" if self._max_depth is None else f"max depth {self._max_depth}"
        return f"Depth-first backtracking search ({limit})"

    def _search(self, adjacency: AdjacencyList, start: int, end: int) -> list[int]:
        frontier: list[tuple[int, tuple[int, ...]]] = [(start, ())]
        truncated = False

        while frontier:
            current, path = frontier.pop()
            path = path + (current,)
            self._step()

            if current == end:
                logger.debug(f"DFS reached {end} after expanding {self.expanded} nodes")
                return list(path)

            children = [node for node in adjacency.neighbors(current) if node not in path]
            if not children:
                continue

            if self._max_depth is not None and len(path) >= self._max_depth:
                truncated = True
                continue

            # Reverse so the first-inserted edge is popped (explored) first
            for child in reversed(children):
                frontier.append((child, path))

        if truncated:
            logger.warning(
                f"DFS from {start} to {end} hit depth limit {self._max_depth} "
                f"without finding a route"
            )
            raise DepthLimitExceeded(self._max_depth, self.expanded)

        logger.debug(f"DFS exhausted {self.expanded} nodes; {end} unreachable from {start}")
        return []

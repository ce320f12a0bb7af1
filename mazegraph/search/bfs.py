"""
Breadth-first search returning a route with the fewest edges.
"""

from __future__ import annotations

import logging
from collections import deque
from typing import TYPE_CHECKING

from mazegraph.exceptions import DepthLimitExceeded
from mazegraph.search.base import SearchStrategy

if TYPE_CHECKING:
    from mazegraph.graph.adjacency import AdjacencyList

logger = logging.getLogger(__name__)


class BreadthFirstSearch(SearchStrategy):
    """
    Queue-based BFS with a global visited set and parent tracking.

    Unlike DFS, each node is expanded at most once, so cycles cost nothing
    extra and the route found is a shortest one by edge count.
    """

    @property
    def name(self) -> str:
        return "bfs"

    @property
    def description(self) -> str:
        limit = "unlimited" if self._max_depth is None else f"max depth {self._max_depth}"
        return f"Breadth-first shortest route ({limit})"

    def _search(self, adjacency: AdjacencyList, start: int, end: int) -> list[int]:
        # depth counts nodes on the route, so the start sits at depth 1
        queue = deque([(start, 1)])
        parents: dict[int, int | None] = {start: None}
        truncated = False

        while queue:
            current, depth = queue.popleft()
            self._step()

            for neighbor in adjacency.neighbors(current):
                if neighbor in parents:
                    continue

                if self._max_depth is not None and depth >= self._max_depth:
                    truncated = True
                    break

                parents[neighbor] = current

                if neighbor == end:
                    # Found! Reconstruct path
                    path = []
                    node: int | None = neighbor
                    while node is not None:
                        path.append(node)
                        node = parents[node]
                    logger.debug(f"BFS reached {end} after expanding {self.expanded} nodes")
                    return list(reversed(path))

                queue.append((neighbor, depth + 1))

        if truncated:
            logger.warning(
                f"BFS from {start} to {end} hit depth limit {self._max_depth} "
                f"without finding a route"
            )
            raise DepthLimitExceeded(self._max_depth, self.expanded)

        logger.debug(f"BFS exhausted {self.expanded} nodes; {end} unreachable from {start}")
        return []

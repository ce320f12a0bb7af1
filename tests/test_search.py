"""
Unit tests for route search strategies.
"""

import random

import pytest

from mazegraph.exceptions import (
    DepthLimitExceeded,
    NodeNotFoundError,
    SearchError,
    StepLimitExceeded,
)
from mazegraph.graph import AdjacencyList
from mazegraph.search import (
    BreadthFirstSearch,
    DepthFirstSearch,
    SearchStrategy,
    get_strategy,
)


def build(edges, size: int = 0) -> AdjacencyList:
    adjacency = AdjacencyList(size=size)
    adjacency.add_edges(edges)
    return adjacency


def reachable(adjacency: AdjacencyList, start: int) -> set[int]:
    """Nodes reachable from start, computed independently of the strategies."""
    seen = {start}
    todo = [start]
    while todo:
        node = todo.pop()
        for neighbor in adjacency.neighbors(node):
            if neighbor not in seen:
                seen.add(neighbor)
                todo.append(neighbor)
    return seen


def random_graph(seed: int, nodes: int = 8, edges: int = 14) -> AdjacencyList:
    rng = random.Random(seed)
    adjacency = AdjacencyList(size=nodes)
    for _ in range(edges):
        adjacency.add_edge(rng.randrange(nodes), rng.randrange(nodes))
    return adjacency


DEMO = [(2, 3), (3, 4), (4, 5), (5, 1), (1, 0), (0, 8), (8, 10)]


class TestDepthFirstSearch:
    """Test DFS route finding."""

    def test_demo_chain(self):
        """The demo chain is followed edge by edge."""
        dfs = DepthFirstSearch()
        assert dfs.search(build(DEMO), 2, 10) == [2, 3, 4, 5, 1, 0, 8, 10]

    def test_first_inserted_branch_wins(self):
        """Branches are tried in edge insertion order, not by length."""
        adjacency = build([(0, 1), (0, 3), (1, 2), (2, 3)])
        assert DepthFirstSearch().search(adjacency, 0, 3) == [0, 1, 2, 3]

    def test_backtracks_from_dead_end(self):
        """A dead-end branch is abandoned for the next sibling."""
        adjacency = build([(0, 1), (0, 2), (1, 4), (2, 3)])
        assert DepthFirstSearch().search(adjacency, 0, 3) == [0, 2, 3]

    def test_abandoned_branch_leaves_no_trace(self):
        """Nodes from a failed branch do not leak into the returned route."""
        adjacency = build([(0, 1), (1, 4), (4, 5), (0, 2), (2, 3)])
        assert DepthFirstSearch().search(adjacency, 0, 3) == [0, 2, 3]

    def test_in_path_exclusion_tries_next_sibling(self):
        """An edge back into the current path is skipped, not followed."""
        adjacency = build([(0, 1), (0, 2), (1, 2), (2, 1), (1, 3)])
        assert DepthFirstSearch().search(adjacency, 0, 3) == [0, 1, 3]

    def test_no_route(self):
        """Unreachable targets give an empty list."""
        assert DepthFirstSearch().search(build(DEMO), 10, 2) == []

    def test_start_equals_end(self):
        """A node is a route to itself."""
        assert DepthFirstSearch().search(build(DEMO), 4, 4) == [4]

    def test_cycle_without_route_terminates(self):
        """In-path exclusion stops a cycle from looping forever."""
        adjacency = build([(0, 1), (1, 2), (2, 0), (2, 3), (3, 1), (4, 5)])
        assert DepthFirstSearch(max_depth=None).search(adjacency, 0, 5) == []

    def test_deterministic(self):
        """Repeated searches return the same route."""
        adjacency = random_graph(3)
        dfs = DepthFirstSearch()
        first = dfs.search(adjacency, 0, 7)
        assert all(dfs.search(adjacency, 0, 7) == first for _ in range(5))

    def test_expanded_counter(self):
        """expanded counts nodes taken off the frontier."""
        dfs = DepthFirstSearch()
        dfs.search(build(DEMO), 2, 10)
        assert dfs.expanded == 8

    def test_unknown_nodes(self):
        """Endpoints outside the graph raise NodeNotFoundError."""
        with pytest.raises(NodeNotFoundError):
            DepthFirstSearch().search(build(DEMO), 2, 11)
        with pytest.raises(NodeNotFoundError):
            DepthFirstSearch().search(build(DEMO), -1, 2)


class TestDepthLimit:
    """Test the depth limit on DFS and BFS."""

    @pytest.mark.parametrize("strategy", ["dfs", "bfs"])
    def test_cycle_hits_limit(self, strategy):
        """A cycle explored past the limit is reported, not hung on."""
        adjacency = build([(0, 1), (1, 2), (2, 0), (2, 3), (3, 1), (4, 5)])
        with pytest.raises(DepthLimitExceeded) as exc_info:
            get_strategy(strategy, max_depth=3).search(adjacency, 0, 5)
        assert exc_info.value.limit == 3

    @pytest.mark.parametrize("strategy", ["dfs", "bfs"])
    def test_route_longer_than_limit(self, strategy):
        """A route longer than the limit raises instead of returning []."""
        adjacency = build([(i, i + 1) for i in range(9)])
        with pytest.raises(DepthLimitExceeded):
            get_strategy(strategy, max_depth=5).search(adjacency, 0, 9)

    @pytest.mark.parametrize("strategy", ["dfs", "bfs"])
    def test_route_at_limit(self, strategy):
        """A route of exactly max_depth nodes is still found."""
        adjacency = build([(i, i + 1) for i in range(9)])
        route = get_strategy(strategy, max_depth=5).search(adjacency, 0, 4)
        assert route == [0, 1, 2, 3, 4]

    @pytest.mark.parametrize("strategy", ["dfs", "bfs"])
    def test_dead_end_at_limit_is_no_route(self, strategy):
        """A route that ends in a dead end exactly at the limit was not cut short."""
        adjacency = build([(0, 1), (1, 2), (3, 4)])
        assert get_strategy(strategy, max_depth=3).search(adjacency, 0, 4) == []

    def test_exhausted_without_truncation(self):
        """No route and no truncated branch gives [] even with a limit."""
        adjacency = build([(0, 1), (2, 3)])
        assert DepthFirstSearch(max_depth=3).search(adjacency, 0, 3) == []

    def test_limit_is_search_error(self):
        """DepthLimitExceeded is part of the SearchError family."""
        assert issubclass(DepthLimitExceeded, SearchError)

    def test_invalid_limit(self):
        """max_depth must be positive."""
        with pytest.raises(ValueError):
            DepthFirstSearch(max_depth=0)


class TestStepLimit:
    """Test the cap on node expansions."""

    @staticmethod
    def dense_graph() -> AdjacencyList:
        """Complete graph on nodes 0-7 plus an isolated node 8."""
        return build([(i, j) for i in range(8) for j in range(8) if i != j], size=9)

    def test_route_within_budget(self):
        """A search needing exactly max_steps expansions succeeds."""
        dfs = DepthFirstSearch(max_steps=8)
        assert dfs.search(build(DEMO), 2, 10) == [2, 3, 4, 5, 1, 0, 8, 10]
        assert dfs.expanded == 8

    def test_budget_exhausted(self):
        """One expansion short of the route raises StepLimitExceeded."""
        with pytest.raises(StepLimitExceeded) as exc_info:
            DepthFirstSearch(max_steps=7).search(build(DEMO), 2, 10)
        assert exc_info.value.limit == 7
        assert exc_info.value.expanded == 7

    def test_backtracking_blowup_is_reported(self):
        """Exhaustive DFS over a dense graph stops at the step limit."""
        with pytest.raises(StepLimitExceeded):
            DepthFirstSearch(max_steps=1000).search(self.dense_graph(), 0, 8)

    def test_bfs_stays_within_budget(self):
        """BFS expands each node once, so the same budget suffices."""
        bfs = BreadthFirstSearch(max_steps=1000)
        assert bfs.search(self.dense_graph(), 0, 8) == []
        assert bfs.expanded == 8

    def test_limit_is_search_error(self):
        """StepLimitExceeded is part of the SearchError family."""
        assert issubclass(StepLimitExceeded, SearchError)

    def test_invalid_limit(self):
        """max_steps must be positive."""
        with pytest.raises(ValueError):
            BreadthFirstSearch(max_steps=0)


class TestBreadthFirstSearch:
    """Test BFS route finding."""

    def test_shortest_route(self):
        """BFS prefers the route with fewer edges."""
        adjacency = build([(0, 1), (0, 3), (1, 2), (2, 3)])
        assert BreadthFirstSearch().search(adjacency, 0, 3) == [0, 3]

    def test_demo_chain(self):
        """A chain has only one route."""
        assert BreadthFirstSearch().search(build(DEMO), 2, 10) == [2, 3, 4, 5, 1, 0, 8, 10]

    def test_no_route(self):
        """Unreachable targets give an empty list."""
        assert BreadthFirstSearch().search(build(DEMO), 10, 2) == []

    def test_never_longer_than_dfs(self):
        """BFS routes are never longer than DFS routes."""
        for seed in range(20):
            adjacency = random_graph(seed)
            dfs_route = DepthFirstSearch().search(adjacency, 0, 7)
            bfs_route = BreadthFirstSearch().search(adjacency, 0, 7)
            assert bool(dfs_route) == bool(bfs_route)
            if bfs_route:
                assert len(bfs_route) <= len(dfs_route)


class TestRouteProperties:
    """Properties every returned route must satisfy."""

    @pytest.mark.parametrize("strategy", ["dfs", "bfs"])
    @pytest.mark.parametrize("seed", range(15))
    def test_route_properties(self, strategy, seed):
        """Routes are valid, repeat-free, and empty iff unreachable."""
        adjacency = random_graph(seed)
        search = get_strategy(strategy, max_depth=None)
        for end in range(adjacency.node_count):
            route = search.search(adjacency, 0, end)

            assert (route == []) == (end not in reachable(adjacency, 0))
            if not route:
                continue
            assert route[0] == 0
            assert route[-1] == end
            assert len(route) == len(set(route))
            for source, destination in zip(route, route[1:]):
                assert adjacency.has_edge(source, destination)


class TestRegistry:
    """Test strategy lookup by name."""

    def test_get_known_strategies(self):
        """Known names return the matching strategy."""
        assert isinstance(get_strategy("dfs"), DepthFirstSearch)
        assert isinstance(get_strategy("bfs"), BreadthFirstSearch)

    def test_kwargs_forwarded(self):
        """Keyword arguments reach the strategy constructor."""
        assert get_strategy("dfs", max_depth=12).max_depth == 12
        assert get_strategy("bfs", max_steps=50).max_steps == 50

    def test_unknown_strategy(self):
        """Unknown names raise ValueError listing the options."""
        with pytest.raises(ValueError, match="dfs, bfs"):
            get_strategy("dijkstra")

    def test_strategies_are_abstract(self):
        """The base class cannot be instantiated."""
        with pytest.raises(TypeError):
            SearchStrategy()

    def test_descriptions(self):
        """Descriptions mention the depth limit."""
        assert "unlimited" in DepthFirstSearch().description
        assert "max depth 4" in BreadthFirstSearch(max_depth=4).description

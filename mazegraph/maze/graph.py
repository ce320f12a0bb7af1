"""
Maze specialization of the graph: converts a character grid into directed
edges between traversable cells and searches it.

Usage:
    from mazegraph.maze import MazeGraph

    maze = MazeGraph(path_char=".", end_char="E", start_char="S", source="maze.txt")
    maze.load()
    route = maze.find_route()          # start cell -> end cell
    print("\\n".join(maze.render(route)))
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from mazegraph.config import (
    DEFAULT_END_CHAR,
    DEFAULT_MAX_DEPTH,
    DEFAULT_MAX_NODES,
    DEFAULT_MAX_STEPS,
    DEFAULT_MAZE_PATH,
    DEFAULT_PATH_CHAR,
    DEFAULT_START_CHAR,
    DEFAULT_STRATEGY,
    PATH_MARKER,
)
from mazegraph.exceptions import MalformedGrid, MazeNotLoaded, SourceUnavailable
from mazegraph.graph.adjacency import AdjacencyList
from mazegraph.graph.base import Graph
from mazegraph.maze.grid import MazeGrid
from mazegraph.maze.render import render_route
from mazegraph.search import SearchResult, SearchStrategy, get_strategy

logger = logging.getLogger(__name__)

# Probe order for orthogonal neighbours: (name, row offset, col offset)
DIRECTIONS = (
    ("left", 0, -1),
    ("right", 0, 1),
    ("up", -1, 0),
    ("down", 1, 0),
)


@dataclass(frozen=True)
class MazeMetadata:
    """
    Metadata stored on every maze edge.

    Attributes:
        int_tag: Node id of the cell the edge leaves
        text_tag: Direction of travel ("left", "right", "up", "down")
    """

    int_tag: int
    text_tag: str

    def __str__(self) -> str:
        return f"{self.int_tag} {self.text_tag}"


def _validate_chars(**chars: str) -> None:
    """Check maze characters are single, printable, non-blank and distinct."""
    for label, char in chars.items():
        if not isinstance(char, str) or len(char) != 1:
            raise ValueError(f"{label} must be a single character, got {char!r}")
        if not char.isprintable() or char.isspace():
            raise ValueError(f"{label} must be a printable, non-blank character, got {char!r}")

    if len(set(chars.values())) != len(chars):
        raise ValueError(f"Maze characters must be distinct, got {chars}")


class MazeGraph(Graph):
    """
    Graph over the cells of a 2-D character maze.

    Each cell is node row * width + col. Path and start cells get an edge to
    every orthogonal neighbour that is a path or end cell; end cells get no
    outgoing edges. Cells outside the grid are never traversable.

    Attributes:
        path_char: Character of traversable cells
        end_char: Character of goal cells
        start_char: Character of the origin cell
        source: Maze file read by load()
        grid: Parsed grid (None until loaded)
        start_node: Node id of the start cell (None until loaded)
        end_node: Node id of the last end cell in row-major order (None until loaded)
        end_nodes: Node ids of all end cells
    """

    def __init__(
        self,
        path_char: str = DEFAULT_PATH_CHAR,
        end_char: str = DEFAULT_END_CHAR,
        start_char: str = DEFAULT_START_CHAR,
        source: str | Path | None = None,
        *,
        strategy: str = DEFAULT_STRATEGY,
        max_depth: int | None = DEFAULT_MAX_DEPTH,
        max_nodes: int | None = DEFAULT_MAX_NODES,
        max_steps: int | None = DEFAULT_MAX_STEPS,
        link_start_below: bool = False,
    ) -> None:
        """
        Initialize an empty maze graph.

        Args:
            path_char: Character of traversable cells
            end_char: Character of goal cells
            start_char: Character of the origin cell
            source: Maze file (default: config.DEFAULT_MAZE_PATH)
            strategy: Search strategy name (dfs, bfs)
            max_depth: Maximum route length in nodes (None = unlimited)
            max_nodes: Maximum node count (None = unlimited)
            max_steps: Maximum node expansions per search (None = unlimited)
            link_start_below: Link the start cell to the cell directly below it
                whatever that cell holds, instead of probing its neighbours
        """
        _validate_chars(path_char=path_char, end_char=end_char, start_char=start_char)

        self.path_char = path_char
        self.end_char = end_char
        self.start_char = start_char
        self.source = Path(source) if source is not None else DEFAULT_MAZE_PATH
        self.link_start_below = link_start_below

        self._adjacency: AdjacencyList[MazeMetadata] = AdjacencyList(max_nodes=max_nodes)
        self._strategy = get_strategy(strategy, max_depth=max_depth, max_steps=max_steps)

        self.grid: MazeGrid | None = None
        self.start_node: int | None = None
        self.end_node: int | None = None
        self.end_nodes: list[int] = []

    @property
    def adjacency(self) -> AdjacencyList[MazeMetadata]:
        return self._adjacency

    @property
    def strategy(self) -> SearchStrategy:
        return self._strategy

    @property
    def grid_width(self) -> int:
        return self._require_grid().width

    def _require_grid(self) -> MazeGrid:
        if self.grid is None:
            raise MazeNotLoaded()
        return self.grid

    # =========================================================================
    # Loading
    # =========================================================================

    def load(self) -> None:
        """
        Read the maze file and build the graph.

        Raises:
            SourceUnavailable: If the file cannot be read
            MalformedGrid: If the grid is not rectangular or lacks start/end cells
        """
        logger.info(f"Loading maze from {self.source}...")
        try:
            text = self.source.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise SourceUnavailable(self.source, str(e)) from e

        self.load_text(text)

    def load_text(self, text: str) -> None:
        """Build the graph from maze text already in memory."""
        grid = MazeGrid.parse(text)

        starts = grid.positions(self.start_char)
        if len(starts) != 1:
            raise MalformedGrid(
                f"Expected exactly one start cell '{self.start_char}', found {len(starts)}"
            )
        ends = grid.positions(self.end_char)
        if not ends:
            raise MalformedGrid(f"No end cell '{self.end_char}' found")

        logger.info(f"Rows: {grid.height} Columns: {grid.width}")
        logger.debug(f"Maze:\n{grid}")

        # Built aside so a refused grid leaves the loaded maze untouched
        adjacency: AdjacencyList[MazeMetadata] = AdjacencyList(
            max_nodes=self._adjacency.max_nodes
        )
        # Every cell is a node, edges or not
        adjacency.ensure_node(grid.size - 1)
        self._build_edges(grid, adjacency)

        self._adjacency = adjacency
        self.grid = grid
        self.start_node = grid.cell_id(*starts[0])
        self.end_nodes = [grid.cell_id(*pos) for pos in ends]
        self.end_node = self.end_nodes[-1]
        self.last_result = None

        logger.info(
            f"Built maze graph: {self._adjacency.node_count:,} nodes, "
            f"{self._adjacency.edge_count:,} edges"
        )

    def _build_edges(self, grid: MazeGrid, adjacency: AdjacencyList[MazeMetadata]) -> None:
        """Add an edge for every move between traversable cells."""
        for row in range(grid.height):
            for col in range(grid.width):
                char = grid.char_at(row, col)

                if char == self.start_char and self.link_start_below:
                    if grid.in_bounds(row + 1, col):
                        self._link(adjacency, grid, row, col, "down", row + 1, col)
                elif char in (self.path_char, self.start_char):
                    self._link_neighbors(adjacency, grid, row, col)

    def _link_neighbors(
        self, adjacency: AdjacencyList[MazeMetadata], grid: MazeGrid, row: int, col: int
    ) -> None:
        for direction, d_row, d_col in DIRECTIONS:
            neighbor = grid.char_at(row + d_row, col + d_col)
            if neighbor in (self.path_char, self.end_char):
                self._link(adjacency, grid, row, col, direction, row + d_row, col + d_col)

    def _link(
        self,
        adjacency: AdjacencyList[MazeMetadata],
        grid: MazeGrid,
        row: int,
        col: int,
        direction: str,
        to_row: int,
        to_col: int,
    ) -> None:
        source = grid.cell_id(row, col)
        adjacency.add_edge(
            source,
            grid.cell_id(to_row, to_col),
            MazeMetadata(int_tag=source, text_tag=direction),
        )

    # =========================================================================
    # Search & Output
    # =========================================================================

    def find_route(self, start: int | None = None, end: int | None = None) -> list[int]:
        """
        Find a route through the maze.

        Args:
            start: Node to start from (default: the start cell)
            end: Node to reach (default: the end cell)

        Returns:
            Node ids from start to end inclusive, or [] if the maze is unsolvable
        """
        self._require_grid()
        start = self.start_node if start is None else start
        end = self.end_node if end is None else end
        return self._strategy.search(self._adjacency, start, end)

    def solve(self, start: int | None = None, end: int | None = None) -> SearchResult:
        """Run find_route() between the start and end cells by default."""
        self._require_grid()
        start = self.start_node if start is None else start
        end = self.end_node if end is None else end
        return super().solve(start, end)

    def render(self, path: list[int], marker: str = PATH_MARKER) -> list[str]:
        """Grid rows with the route's interior cells replaced by `marker`."""
        grid = self._require_grid()
        start, end = (path[0], path[-1]) if path else (None, None)
        return render_route(grid, path, start, end, marker)

    def describe(self) -> list[str]:
        """One line per edge, for debug output."""
        return self._adjacency.describe()

    def __repr__(self) -> str:
        shape = "unloaded" if self.grid is None else f"{self.grid.height}x{self.grid.width}"
        return (
            f"{self.__class__.__name__}({shape}, path={self.path_char!r}, "
            f"end={self.end_char!r}, start={self.start_char!r})"
        )

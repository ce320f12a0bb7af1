#!/usr/bin/env python3
"""
Maze solver CLI - Load a character maze and print the route through it.

Usage:
    python scripts/solve.py . E S
    python scripts/solve.py . E S --maze data/maze.txt --strategy bfs
    python scripts/solve.py . E S --demo-graph
    python scripts/solve.py o X A --maze my_maze.txt --max-depth 500 -v

Positional arguments are the path, end and start characters, in that order.

Strategies:
    dfs - Depth-first backtracking search (first route found)
    bfs - Breadth-first search (shortest route)
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

# Fix Windows console encoding
if sys.platform == "win32":
    sys.stdout.reconfigure(encoding="utf-8", errors="replace")

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from mazegraph.config import (  # noqa: E402
    DEFAULT_MAX_DEPTH,
    DEFAULT_MAX_STEPS,
    DEFAULT_MAZE_PATH,
    DEFAULT_STRATEGY,
    LOG_DATE_FORMAT,
    LOG_FORMAT,
    LOG_LEVEL,
)
from mazegraph.exceptions import MazeGraphError  # noqa: E402
from mazegraph.graph import Edge, EdgeListGraph  # noqa: E402
from mazegraph.maze import MazeGraph, MazeMetadata, format_route  # noqa: E402
from mazegraph.search import STRATEGIES  # noqa: E402

# Edges of the demo graph: 2->3->4->5->1->0->8->10
DEMO_EDGES = [
    Edge(2, 3, MazeMetadata(2, "test")),
    Edge(3, 4, MazeMetadata(3, "test")),
    Edge(4, 5, MazeMetadata(4, "test")),
    Edge(5, 1, MazeMetadata(5, "maze")),
    Edge(1, 0, MazeMetadata(1, "maze")),
    Edge(0, 8, MazeMetadata(0, "maze")),
    Edge(8, 10, MazeMetadata(8, "maze")),
]


def parse_args() -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Solve a character-grid maze",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )

    parser.add_argument("path_char", help="Character of traversable cells")
    parser.add_argument("end_char", help="Character of the goal cell")
    parser.add_argument("start_char", help="Character of the start cell")
    parser.add_argument(
        "--maze",
        type=Path,
        default=DEFAULT_MAZE_PATH,
        help=f"Maze file (default: {DEFAULT_MAZE_PATH})",
    )
    parser.add_argument(
        "--strategy",
        type=str,
        default=DEFAULT_STRATEGY,
        choices=list(STRATEGIES),
        help=f"Search strategy (default: {DEFAULT_STRATEGY})",
    )
    parser.add_argument(
        "--max-depth",
        type=int,
        default=DEFAULT_MAX_DEPTH,
        help="Maximum route length in nodes, 0 for unlimited",
    )
    parser.add_argument(
        "--max-steps",
        type=int,
        default=DEFAULT_MAX_STEPS,
        help="Maximum node expansions per search, 0 for unlimited",
    )
    parser.add_argument(
        "--link-start-below",
        action="store_true",
        help="Always link the start cell to the cell below it",
    )
    parser.add_argument(
        "--demo-graph",
        action="store_true",
        help="Also search the built-in demo graph from node 2 to node 10",
    )
    parser.add_argument(
        "--show-edges",
        action="store_true",
        help="Print every edge of the loaded graph",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging",
    )

    return parser.parse_args()


def run_demo_graph(strategy: str, max_depth: int | None, max_steps: int | None) -> None:
    """Search the demo edge list and print the route."""
    print("Constructing example graph with MazeMetadata edges. Edges are:")
    graph = EdgeListGraph(
        DEMO_EDGES, size=3, strategy=strategy, max_depth=max_depth, max_steps=max_steps
    )
    graph.load()
    for line in graph.adjacency.describe():
        print(f"  {line}")

    print("\nSearching from node 2 to node 10:")
    result = graph.solve(2, 10)
    print(f"  {format_route(result.path)}")
    print("_" * 45 + "\n")


def main() -> int:
    """Main entry point."""
    args = parse_args()

    # Set up logging
    log_level = logging.DEBUG if args.verbose else LOG_LEVEL
    logging.basicConfig(level=log_level, format=LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

    max_depth = args.max_depth or None
    max_steps = args.max_steps or None

    try:
        if args.demo_graph:
            run_demo_graph(args.strategy, max_depth, max_steps)

        maze = MazeGraph(
            args.path_char,
            args.end_char,
            args.start_char,
            source=args.maze,
            strategy=args.strategy,
            max_depth=max_depth,
            max_steps=max_steps,
            link_start_below=args.link_start_below,
        )
        maze.load()

        if args.show_edges:
            for line in maze.describe():
                print(line)

        result = maze.solve()
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2
    except MazeGraphError as e:
        logging.getLogger(__name__).error(str(e))
        return 2

    print("\n" + "=" * 60)
    print(f"Maze: {args.maze}")
    print(f"  Strategy: {maze.strategy.description}")
    print("=" * 60 + "\n")

    print(format_route(result.path))
    print()
    for row in maze.render(result.path):
        print(row)

    if result.found:
        print(f"\nRoute length: {result.length} moves ({result.expanded} nodes expanded)")
    else:
        print("\nNo route from start to end")
    print(f"Search time: {result.elapsed_ms:.1f}ms")

    return 0 if result.found else 1


if __name__ == "__main__":
    sys.exit(main())

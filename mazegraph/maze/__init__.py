"""
Maze module.

Provides grid mazes solved as graphs:
- MazeGrid: Parsed, validated character grid
- MazeGraph: Grid-to-graph conversion and route search
- MazeMetadata: Metadata stored on maze edges
- render_route / format_route: Text output for solved mazes
"""

from mazegraph.maze.graph import MazeGraph, MazeMetadata
from mazegraph.maze.grid import MazeGrid
from mazegraph.maze.render import format_route, render_route

__all__ = [
    "MazeGraph",
    "MazeMetadata",
    "MazeGrid",
    "render_route",
    "format_route",
]

"""
Text output for solved mazes.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from mazegraph.config import PATH_MARKER
from mazegraph.maze.grid import MazeGrid


def render_route(
    grid: MazeGrid,
    path: Iterable[int],
    start: int | None = None,
    end: int | None = None,
    marker: str = PATH_MARKER,
) -> list[str]:
    """
    Overlay a route on the grid.

    Every route cell except the start and end cells is replaced with
    `marker`; all other characters pass through unchanged.

    Returns:
        Grid rows as strings

    Raises:
        ValueError: If marker is not a single printable character
    """
    if not isinstance(marker, str) or len(marker) != 1 or not marker.isprintable():
        raise ValueError(f"marker must be a single printable character, got {marker!r}")

    canvas = grid.cells.copy()
    for node in path:
        if node == start or node == end:
            continue
        row, col = grid.cell_position(node)
        canvas[row, col] = marker
    return ["".join(row) for row in canvas]


def format_route(path: Sequence[int]) -> str:
    """Format a route as 'Start->2->3->10', or a no-route notice."""
    if not path:
        return "Start: no route"
    return "Start" + "".join(f"->{node}" for node in path)

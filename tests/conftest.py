"""
Pytest configuration and shared fixtures.

This file is automatically loaded by pytest and provides
fixtures available to all test files.
"""

from pathlib import Path

import pytest

from mazegraph.graph import Edge


@pytest.fixture
def project_root() -> Path:
    """Return the project root directory."""
    return Path(__file__).parent.parent


@pytest.fixture
def data_dir(project_root: Path) -> Path:
    """Return the data directory."""
    return project_root / "data"


@pytest.fixture
def demo_edges() -> list[Edge]:
    """Return the chain 2->3->4->5->1->0->8->10 with string metadata."""
    return [
        Edge(2, 3, "test"),
        Edge(3, 4, "test"),
        Edge(4, 5, "test"),
        Edge(5, 1, "maze"),
        Edge(1, 0, "maze"),
        Edge(0, 8, "maze"),
        Edge(8, 10, "maze"),
    ]


@pytest.fixture
def small_maze() -> str:
    """Return a 3x3 maze with start at node 0 and end at node 8."""
    return "S.#\n..#\n#.E"


@pytest.fixture
def sealed_maze() -> str:
    """Return a maze whose start only reaches a dead-end cell below it."""
    return "S#E\n.##\n###\n"


@pytest.fixture
def maze_file(tmp_path: Path, small_maze: str) -> Path:
    """Write the small maze to a temporary file and return its path."""
    path = tmp_path / "maze.txt"
    path.write_text(small_maze + "\n", encoding="utf-8")
    return path

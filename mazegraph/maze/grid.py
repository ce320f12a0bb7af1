"""
Rectangular character grids parsed from row-delimited maze text.

Cells are addressed by (row, col) and mapped to graph node ids with
id = row * width + col.
"""

from __future__ import annotations

import logging

import numpy as np

from mazegraph.exceptions import MalformedGrid, NodeNotFoundError

logger = logging.getLogger(__name__)


class MazeGrid:
    """
    Immutable 2-D grid of single-character cells.

    Attributes:
        cells: numpy array of shape (height, width), one character per cell
    """

    def __init__(self, cells: np.ndarray) -> None:
        if cells.ndim != 2 or cells.size == 0:
            raise MalformedGrid(f"Grid must be a non-empty 2-D array, got shape {cells.shape}")
        self.cells = cells
        self.cells.setflags(write=False)

    @classmethod
    def parse(cls, text: str) -> MazeGrid:
        """
        Parse newline-delimited rows into a grid.

        The width is taken from the first row; a single trailing newline is
        allowed. Windows line endings are accepted.

        Raises:
            MalformedGrid: If the text is empty or rows differ in width
        """
        lines = text.split("\n")
        if lines and lines[-1] == "":
            lines.pop()
        rows = [line[:-1] if line.endswith("\r") else line for line in lines]

        if not rows:
            raise MalformedGrid("Maze source is empty")

        width = len(rows[0])
        if width == 0:
            raise MalformedGrid("First row is empty", row=0)

        for i, row in enumerate(rows):
            if len(row) != width:
                raise MalformedGrid(f"expected {width} columns, found {len(row)}", row=i)

        cells = np.array([list(row) for row in rows], dtype="<U1")
        logger.debug(f"Parsed grid: {cells.shape[0]} rows x {cells.shape[1]} columns")
        return cls(cells)

    # =========================================================================
    # Geometry
    # =========================================================================

    @property
    def height(self) -> int:
        return self.cells.shape[0]

    @property
    def width(self) -> int:
        return self.cells.shape[1]

    @property
    def size(self) -> int:
        """Number of cells (and of node ids the grid maps to)."""
        return int(self.cells.size)

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.height and 0 <= col < self.width

    def cell_id(self, row: int, col: int) -> int:
        """Node id of a cell."""
        if not self.in_bounds(row, col):
            raise IndexError(f"Cell ({row}, {col}) outside {self.height}x{self.width} grid")
        return row * self.width + col

    def cell_position(self, node: int) -> tuple[int, int]:
        """(row, col) of a node id."""
        if not 0 <= node < self.size:
            raise NodeNotFoundError(node, self.size)
        return divmod(node, self.width)

    # =========================================================================
    # Cell Accessors
    # =========================================================================

    def char_at(self, row: int, col: int) -> str | None:
        """Character of a cell, or None outside the grid."""
        if not self.in_bounds(row, col):
            return None
        return str(self.cells[row, col])

    def positions(self, char: str) -> list[tuple[int, int]]:
        """All (row, col) cells holding `char`, in row-major order."""
        return [(int(r), int(c)) for r, c in np.argwhere(self.cells == char)]

    def lines(self) -> list[str]:
        """Grid rows as strings."""
        return ["".join(row) for row in self.cells]

    def __str__(self) -> str:
        return "\n".join(self.lines())

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(height={self.height}, width={self.width})"

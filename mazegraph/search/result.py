"""
Search result dataclass for recording one route search.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime


@dataclass
class SearchResult:
    """
    Complete record of a finished search.

    Attributes:
        start: Node the search started from
        end: Node the search was looking for
        path: Route found (including start and end), empty if none
        strategy: Name of the strategy that ran
        expanded: Number of nodes taken off the frontier
        elapsed_ms: Wall time spent searching (milliseconds)
        timestamp: When the search ran
    """

    start: int
    end: int
    path: list[int]
    strategy: str
    expanded: int
    elapsed_ms: float
    timestamp: datetime = field(default_factory=datetime.now)

    @property
    def found(self) -> bool:
        """Whether a route was found."""
        return bool(self.path)

    @property
    def length(self) -> int:
        """Number of edges on the route (0 when no route was found)."""
        return max(len(self.path) - 1, 0)

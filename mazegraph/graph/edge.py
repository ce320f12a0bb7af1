"""
Directed edge value type.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Edge(Generic[T]):
    """
    A directed edge with an arbitrary metadata payload.

    Attributes:
        source: Node the edge leaves from
        destination: Node the edge points to
        metadata: Caller-defined payload (weight, label, struct...), or None
    """

    source: int
    destination: int
    metadata: T | None = None


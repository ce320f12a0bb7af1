"""
Graph module.

Provides directed graphs with generic edge metadata:
- Edge: Directed edge value type
- AdjacencyList: Node/edge storage with on-demand growth
- Graph: Capability interface (load, find_route)
- EdgeListGraph: Graph populated from an in-memory edge list
"""

from mazegraph.graph.adjacency import AdjacencyList
from mazegraph.graph.base import Graph
from mazegraph.graph.edge import Edge
from mazegraph.graph.edge_list import EdgeListGraph

__all__ = [
    "Edge",
    "AdjacencyList",
    "Graph",
    "EdgeListGraph",
]

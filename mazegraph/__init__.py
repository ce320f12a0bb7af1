"""
mazegraph.

A generic directed graph with per-edge metadata, specialized to solve
character-grid mazes by depth-first search.
"""

__version__ = "0.1.0"

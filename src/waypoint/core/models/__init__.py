"""
Core domain models package for the weighted graph.

This package provides the node and edge records the graph hands out to callers.
"""

from .edge import Edge
from .node import Node

__all__ = [
    "Node",
    "Edge",
]

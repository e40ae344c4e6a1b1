"""
waypoint - Interactive weighted graph and shortest path engine

This package provides the data structure and algorithm core behind an interactive
graph editor:

- An undirected weighted graph built node by node and edge by edge
- Dijkstra shortest path queries returning labels and total distance
- Mutation events for the rendering layer

For more information, please see the documentation.
"""

__version__ = "0.1.0"
__author__ = "waypoint Team"
__license__ = "See LICENSE file"

# Version compatibility check
import sys

if sys.version_info < (3, 9):
    raise RuntimeError("waypoint requires Python 3.9 or higher")

# Import commonly used components for easier access
from .core.config import GraphConfig, SelectionStrategy
from .core.exceptions import DuplicateLabelError, NodeNotFoundError
from .core.graph import WeightedGraph
from .core.graph.traversal import PathResult
from .core.models import Edge, Node

__all__ = [
    "WeightedGraph",
    "GraphConfig",
    "SelectionStrategy",
    "Node",
    "Edge",
    "PathResult",
    "DuplicateLabelError",
    "NodeNotFoundError",
]

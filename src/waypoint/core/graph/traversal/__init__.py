"""
Graph traversal algorithms and path finding functionality.
"""

from .algorithms.shortest_path import DijkstraFinder
from .base import PathFinder
from .path_models import PathResult, PerformanceMetrics
from .utils import MemoryManager, PriorityQueue, reconstruct_path

__all__ = [
    "PathFinder",
    "DijkstraFinder",
    "PathResult",
    "PerformanceMetrics",
    "PriorityQueue",
    "MemoryManager",
    "reconstruct_path",
]

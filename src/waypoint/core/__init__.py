"""Core graph functionality."""

from .config import GraphConfig, SelectionStrategy
from .exceptions import (
    DuplicateLabelError,
    GraphOperationError,
    NodeNotFoundError,
    ResourceNotFoundError,
    ValidationError,
)
from .models import Edge, Node
from .graph import GraphEvent, WeightedGraph
from .graph.traversal import PathResult, PerformanceMetrics

__all__ = [
    "DuplicateLabelError",
    "Edge",
    "GraphConfig",
    "GraphEvent",
    "GraphOperationError",
    "Node",
    "NodeNotFoundError",
    "PathResult",
    "PerformanceMetrics",
    "ResourceNotFoundError",
    "SelectionStrategy",
    "ValidationError",
    "WeightedGraph",
]

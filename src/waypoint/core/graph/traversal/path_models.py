"""
Data models for graph path finding.

This module provides the result types returned by path finding:
- PathResult: the route as node labels plus its total distance
- PerformanceMetrics: timing and exploration counters for a single query

A PathResult is always returned, even when the destination is unreachable; in that
case its distance is ``math.inf`` and ``found`` is False.

Example:
    >>> result = graph.shortest_path(a, c)
    >>> result.path
    ['A', 'B', 'C']
    >>> result.route
    'A → B → C'
"""

import math
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Union

ROUTE_SEPARATOR = " → "


@dataclass(frozen=True)
class PathResult:
    """
    Container for shortest path results.

    Attributes:
        path: Node labels from start to end. When the end is unreachable this
            holds only the end node's label.
        distance: Total weight of the path, ``math.inf`` when unreachable
        node_ids: Node ids matching ``path`` element by element
    """

    path: List[str]
    distance: float
    node_ids: List[int] = field(default_factory=list)

    def __post_init__(self):
        """Validate initialization parameters."""
        if not isinstance(self.path, list):
            raise TypeError("path must be a list")
        if not isinstance(self.distance, (int, float)):
            raise TypeError("distance must be a numeric value")
        if self.node_ids and len(self.node_ids) != len(self.path):
            raise ValueError("node_ids must match path element by element")

    def __len__(self) -> int:
        """Return the number of nodes on the path."""
        return len(self.path)

    def __iter__(self):
        """Return an iterator over the path labels."""
        return iter(self.path)

    @property
    def found(self) -> bool:
        """True when the end node is reachable from the start node."""
        return not math.isinf(self.distance)

    @property
    def hops(self) -> int:
        """Number of edges traversed, 0 when no path exists."""
        return len(self.path) - 1 if self.found else 0

    @property
    def route(self) -> str:
        """Human readable route, e.g. ``"A → B → C"``."""
        return ROUTE_SEPARATOR.join(self.path)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the ``{"path", "distance"}`` mapping consumed by renderers."""
        return {"path": list(self.path), "distance": self.distance}


@dataclass
class PerformanceMetrics:
    """
    Container for path finding performance metrics.

    Attributes:
        operation: Name of the path finding operation
        start_time: Operation start timestamp
        end_time: Operation end timestamp (0.0 if not completed)
        path_length: Number of nodes on the returned path
        nodes_explored: Number of nodes settled during search
        max_memory_used: Peak memory usage during operation (bytes), when tracked

    Example:
        >>> metrics = PerformanceMetrics(operation="shortest_path", start_time=time())
        >>> # ... perform operation ...
        >>> metrics.end_time = time()
        >>> print(f"Operation took {metrics.duration:.2f}ms")
    """

    operation: str
    start_time: float
    end_time: float = 0.0
    path_length: Optional[int] = None
    nodes_explored: int = 0
    max_memory_used: Optional[int] = None

    def __post_init__(self):
        """Validate metrics after initialization."""
        if not isinstance(self.operation, str) or not self.operation.strip():
            raise ValueError("operation must be a non-empty string")
        if not isinstance(self.start_time, (int, float)):
            raise TypeError("start_time must be a numeric value")
        if self.end_time and self.end_time < self.start_time:
            raise ValueError("end_time cannot be before start_time")

    @property
    def duration(self) -> float:
        """Operation duration in milliseconds."""
        return (self.end_time - self.start_time) * 1000 if self.end_time else 0.0

    def to_dict(self) -> Dict[str, Union[str, float, int, None]]:
        """Convert metrics to dictionary format."""
        return {
            "operation": self.operation,
            "duration_ms": self.duration,
            "path_length": self.path_length,
            "nodes_explored": self.nodes_explored,
            "max_memory_used": self.max_memory_used,
        }

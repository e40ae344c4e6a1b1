"""Base classes for graph traversal algorithms."""

from abc import ABC, abstractmethod
from typing import List, Optional, Tuple

from ..base import BaseGraph, NodeRef
from .path_models import PathResult, PerformanceMetrics


class PathFinder(ABC):
    """Abstract base class for path finding algorithms.

    Finders only read the graph; running a query never changes nodes, edges
    or adjacency.
    """

    def __init__(self, graph: BaseGraph):
        """Initialize finder with graph."""
        self.graph = graph
        self.last_metrics: Optional[PerformanceMetrics] = None

    @abstractmethod
    def find_path(self, start_node: NodeRef, end_node: NodeRef) -> PathResult:
        """Find a path between two nodes of the graph."""

    def validate_nodes(self, start_node: NodeRef, end_node: NodeRef) -> Tuple[int, int]:
        """
        Resolve both endpoints to node ids.

        Raises:
            NodeNotFoundError: If either node does not belong to the graph
        """
        return self.graph.resolve(start_node), self.graph.resolve(end_node)

    def _create_path_result(self, node_ids: List[int], distance: float) -> PathResult:
        """Create a path result carrying the labels of ``node_ids``."""
        labels = [self.graph.get_node(node_id).label for node_id in node_ids]
        return PathResult(path=labels, distance=distance, node_ids=list(node_ids))

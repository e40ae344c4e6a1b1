"""
Graph module for waypoint.

This module provides the WeightedGraph facade used by interactive front ends:
- Node and edge creation through a small mutation API
- Shortest path queries via Dijkstra's algorithm
- Mutation events so a renderer can redraw without polling

The graph is undirected and single threaded. Callers serialise access; nothing
here locks.
"""

import logging
from typing import Iterator, List, Optional, Tuple

from ..config import GraphConfig
from ..models.edge import Edge
from ..models.node import Node
from .base import AdjacencyEntry, BaseGraph, NodeRef
from .events import (
    GraphEvent,
    GraphEventDetails,
    GraphEventListener,
    GraphEventManager,
)
from .traversal import DijkstraFinder, PathResult, PerformanceMetrics

logger = logging.getLogger(__name__)


def auto_label(index: int) -> str:
    """
    Spreadsheet-style label for the ``index``-th node.

    >>> [auto_label(i) for i in (0, 1, 25, 26, 27)]
    ['A', 'B', 'Z', 'AA', 'AB']
    """
    if index < 0:
        raise ValueError("index must be non-negative")
    label = ""
    n = index + 1
    while n:
        n, remainder = divmod(n - 1, 26)
        label = chr(ord("A") + remainder) + label
    return label


class WeightedGraph:
    """
    High-level weighted graph interface.

    Combines the base graph structure with configuration, event dispatch and
    path finding. Queries never change the graph.

    Example:
        >>> graph = WeightedGraph()
        >>> a, b, c = (graph.add_node(0, 0, label) for label in "ABC")
        >>> _ = graph.add_edge(a, b, 4)
        >>> _ = graph.add_edge(b, c, 3)
        >>> _ = graph.add_edge(a, c, 10)
        >>> graph.shortest_path(a, c).to_dict()
        {'path': ['A', 'B', 'C'], 'distance': 7}
    """

    def __init__(self, config: Optional[GraphConfig] = None):
        """
        Initialize an empty graph.

        Args:
            config (Optional[GraphConfig]): Path finding and label policy settings
        """
        self.config = config or GraphConfig()
        self._base_graph = BaseGraph()
        self.event_manager = GraphEventManager()
        self._last_metrics: Optional[PerformanceMetrics] = None

    @classmethod
    def from_env(cls) -> "WeightedGraph":
        """Create an empty graph configured from ``WAYPOINT_*`` environment variables."""
        return cls(GraphConfig.from_env())

    # Events

    def add_listener(self, listener: GraphEventListener) -> None:
        """Subscribe a listener to mutation events."""
        self.event_manager.add_listener(listener)

    def remove_listener(self, listener: GraphEventListener) -> None:
        """Unsubscribe a listener."""
        self.event_manager.remove_listener(listener)

    def _dispatch(self, event: GraphEvent, details: GraphEventDetails) -> None:
        if self.event_manager.listener_count:
            self.event_manager.notify(event, details)

    # Mutation

    def next_label(self) -> str:
        """The label ``add_node`` assigns when none is given."""
        index = self._base_graph.get_node_count()
        label = auto_label(index)
        while self._base_graph.has_label(label):
            index += 1
            label = auto_label(index)
        return label

    def add_node(self, x: float = 0.0, y: float = 0.0, label: Optional[str] = None) -> Node:
        """
        Register a node at the given display coordinates.

        Args:
            x (float): Horizontal display coordinate
            y (float): Vertical display coordinate
            label (Optional[str]): Unique display label, generated when omitted

        Returns:
            Node: The new node, carrying the next sequential id

        Raises:
            DuplicateLabelError: If the label is in use and the configured
                policy is ``"raise"``
        """
        if label is None:
            label = self.next_label()

        overwrite = self.config.duplicate_labels == "overwrite"
        replaced = self._base_graph.has_label(label)
        node = self._base_graph.add_node(x, y, label, overwrite=overwrite)
        if replaced:
            logger.warning("Label '%s' reassigned to node %d", label, node.id)
        logger.debug("Added node %d '%s' at (%s, %s)", node.id, node.label, node.x, node.y)

        details = GraphEventDetails()
        details.add_node(node)
        self._dispatch(GraphEvent.NODE_ADDED, details)
        return node

    def add_edge(self, from_node: NodeRef, to_node: NodeRef, weight: float) -> Edge:
        """
        Connect two nodes with an undirected edge.

        Each endpoint gets one adjacency entry pointing at the other. Parallel
        edges are kept; a self-loop is recorded but never shortens a path.
        The weight is not range checked.

        Returns:
            Edge: The recorded edge

        Raises:
            NodeNotFoundError: If either endpoint is not in this graph
        """
        edge = self._base_graph.add_edge(from_node, to_node, weight)
        logger.debug(
            "Added edge %d: %d -- %d (weight %s)", edge.id, edge.from_node, edge.to_node, weight
        )

        details = GraphEventDetails()
        details.add_edge(edge)
        details.add_node(self._base_graph.get_node(edge.from_node))
        details.add_node(self._base_graph.get_node(edge.to_node))
        self._dispatch(GraphEvent.EDGE_ADDED, details)
        return edge

    def move_node(self, node: NodeRef, x: float, y: float) -> Node:
        """
        Update a node's display coordinates.

        Raises:
            NodeNotFoundError: If the node is not in this graph
        """
        target = self._base_graph.get_node(self._base_graph.resolve(node))
        target.x = x
        target.y = y

        details = GraphEventDetails()
        details.add_node(target)
        self._dispatch(GraphEvent.NODE_MOVED, details)
        return target

    def clear(self) -> None:
        """Discard every node and edge; ids start again from 0."""
        node_count = self._base_graph.get_node_count()
        edge_count = self._base_graph.get_edge_count()
        self._base_graph.clear()
        self._last_metrics = None
        logger.debug("Cleared graph (%d nodes, %d edges)", node_count, edge_count)

        details = GraphEventDetails()
        details.add_metadata("nodes_removed", node_count)
        details.add_metadata("edges_removed", edge_count)
        self._dispatch(GraphEvent.GRAPH_CLEARED, details)

    # Queries

    def shortest_path(self, start: NodeRef, end: NodeRef) -> PathResult:
        """
        Find the minimum-weight path between two nodes.

        An unreachable ``end`` is not an error: the result has an infinite
        distance and a path holding only ``end``'s label.

        Raises:
            NodeNotFoundError: If either node is not in this graph
        """
        finder = DijkstraFinder(
            self._base_graph,
            strategy=self.config.selection_strategy,
            max_memory_mb=self.config.max_memory_mb,
        )
        try:
            return finder.find_path(start, end)
        finally:
            self._last_metrics = finder.last_metrics

    def shortest_path_by_label(self, start_label: str, end_label: str) -> PathResult:
        """Shortest path between the nodes carrying the given labels."""
        return self.shortest_path(
            self._base_graph.get_node_by_label(start_label),
            self._base_graph.get_node_by_label(end_label),
        )

    @property
    def last_metrics(self) -> Optional[PerformanceMetrics]:
        """Metrics of the most recent shortest path query."""
        return self._last_metrics

    def get_node(self, node_id: int) -> Node:
        """Get a node by id, raising NodeNotFoundError if absent."""
        return self._base_graph.get_node(node_id)

    def get_node_by_label(self, label: str) -> Node:
        """Get a node by label, raising NodeNotFoundError if absent."""
        return self._base_graph.get_node_by_label(label)

    def has_node(self, node: NodeRef) -> bool:
        """Check if a node handle or id belongs to this graph."""
        return self._base_graph.has_node(node)

    def adjacency_of(self, node: NodeRef) -> List[AdjacencyEntry]:
        """``(neighbor id, weight)`` entries of a node in edge order."""
        return self._base_graph.get_neighbors(node)

    def neighbors(self, node: NodeRef) -> List[Tuple[Node, float]]:
        """``(neighbor node, weight)`` pairs of a node in edge order."""
        return [
            (self._base_graph.get_node(neighbor_id), weight)
            for neighbor_id, weight in self._base_graph.get_neighbors(node)
        ]

    def degree(self, node: NodeRef) -> int:
        """Number of adjacency entries of a node."""
        return self._base_graph.get_degree(node)

    @property
    def nodes(self) -> List[Node]:
        """All nodes ordered by id."""
        return self._base_graph.get_nodes()

    @property
    def edges(self) -> List[Edge]:
        """All edges in insertion order."""
        return list(self._base_graph.get_edges())

    @property
    def node_count(self) -> int:
        return self._base_graph.get_node_count()

    @property
    def edge_count(self) -> int:
        return self._base_graph.get_edge_count()

    def __len__(self) -> int:
        return self._base_graph.get_node_count()

    def __contains__(self, node: object) -> bool:
        return isinstance(node, (Node, int)) and self._base_graph.has_node(node)

    def __iter__(self) -> Iterator[Node]:
        return iter(self._base_graph.get_nodes())


__all__ = [
    "WeightedGraph",
    "BaseGraph",
    "GraphEvent",
    "GraphEventDetails",
    "GraphEventListener",
    "GraphEventManager",
    "auto_label",
]

"""
Graph event system.

This module lets a rendering layer subscribe to graph mutations so it can redraw
without polling. Events are delivered synchronously, in registration order, on the
caller's thread; queries never emit events.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any, Dict, List, Protocol

from ..models.edge import Edge
from ..models.node import Node

logger = logging.getLogger(__name__)


class GraphEvent(Enum):
    """Events that can occur in the graph."""

    NODE_ADDED = auto()
    NODE_MOVED = auto()
    EDGE_ADDED = auto()
    GRAPH_CLEARED = auto()


class GraphEventListener(Protocol):
    """Protocol for objects that listen to graph state changes."""

    def on_state_change(self, event: GraphEvent, details: Dict[str, Any]) -> None:
        """
        Called when the graph state changes.

        Args:
            event (GraphEvent): Type of event that occurred
            details (Dict[str, Any]): Output of ``GraphEventDetails.to_dict``
        """
        ...


@dataclass
class GraphEventDetails:
    """
    Container for graph event details.

    Attributes:
        nodes (List[Node]): Affected nodes
        edges (List[Edge]): Affected edges
        metadata (Dict[str, Any]): Additional event metadata
    """

    nodes: List[Node] = field(default_factory=list)
    edges: List[Edge] = field(default_factory=list)
    metadata: Dict[str, Any] = field(default_factory=dict)

    def add_node(self, node: Node) -> None:
        """Add an affected node."""
        if not any(existing is node for existing in self.nodes):
            self.nodes.append(node)

    def add_edge(self, edge: Edge) -> None:
        """Add an affected edge."""
        self.edges.append(edge)

    def add_metadata(self, key: str, value: Any) -> None:
        """Add additional metadata."""
        self.metadata[key] = value

    def to_dict(self) -> Dict[str, Any]:
        """Convert event details to dictionary format."""
        return {
            "nodes": [
                {"id": node.id, "label": node.label, "x": node.x, "y": node.y}
                for node in self.nodes
            ],
            "edges": [
                {
                    "id": edge.id,
                    "from_node": edge.from_node,
                    "to_node": edge.to_node,
                    "weight": edge.weight,
                }
                for edge in self.edges
            ],
            "metadata": dict(self.metadata),
        }


@dataclass
class GraphEventManager:
    """
    Manages graph event subscriptions and notifications.

    Attributes:
        _listeners (List[GraphEventListener]): Registered event listeners
    """

    _listeners: List[GraphEventListener] = field(default_factory=list)

    def add_listener(self, listener: GraphEventListener) -> None:
        """Add a listener for graph events; adding the same listener twice is a no-op."""
        if listener not in self._listeners:
            self._listeners.append(listener)

    def remove_listener(self, listener: GraphEventListener) -> None:
        """Remove a graph event listener if it is registered."""
        if listener in self._listeners:
            self._listeners.remove(listener)

    @property
    def listener_count(self) -> int:
        return len(self._listeners)

    def notify(self, event: GraphEvent, details: GraphEventDetails) -> None:
        """
        Notify all listeners of a graph event.

        A failing listener is logged and skipped; the remaining listeners are
        still notified and the mutation that triggered the event stands.
        """
        payload = details.to_dict()
        for listener in list(self._listeners):
            try:
                listener.on_state_change(event, payload)
            except Exception:
                logger.exception("Error notifying listener %r of %s", listener, event.name)

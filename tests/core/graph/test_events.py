"""
Tests for the graph event system.
"""

import logging
from typing import Any, Dict, List, Tuple

import pytest

from waypoint.core.graph import WeightedGraph
from waypoint.core.graph.events import GraphEvent, GraphEventDetails, GraphEventManager
from waypoint.core.models import Edge, Node


class RecordingListener:
    """Listener that records every notification."""

    def __init__(self):
        self.events: List[Tuple[GraphEvent, Dict[str, Any]]] = []

    def on_state_change(self, event: GraphEvent, details: Dict[str, Any]) -> None:
        self.events.append((event, details))


class FailingListener:
    """Listener that always raises."""

    def on_state_change(self, event: GraphEvent, details: Dict[str, Any]) -> None:
        raise RuntimeError("renderer crashed")


@pytest.fixture
def listener() -> RecordingListener:
    return RecordingListener()


def test_event_details_to_dict():
    """Test conversion of event details to a plain mapping."""
    details = GraphEventDetails()
    node = Node(id=0, label="A", x=1, y=2)
    details.add_node(node)
    details.add_node(node)
    details.add_edge(Edge(from_node=0, to_node=0, weight=2.0, id=5))
    details.add_metadata("reason", "test")

    assert details.to_dict() == {
        "nodes": [{"id": 0, "label": "A", "x": 1, "y": 2}],
        "edges": [{"id": 5, "from_node": 0, "to_node": 0, "weight": 2.0}],
        "metadata": {"reason": "test"},
    }


def test_listener_registration(listener):
    """Test adding and removing listeners."""
    manager = GraphEventManager()
    manager.add_listener(listener)
    manager.add_listener(listener)
    assert manager.listener_count == 1

    manager.remove_listener(listener)
    manager.remove_listener(listener)
    assert manager.listener_count == 0


def test_mutations_emit_events(listener):
    """Test that each mutation notifies listeners."""
    graph = WeightedGraph()
    graph.add_listener(listener)

    a = graph.add_node(10, 20, "A")
    b = graph.add_node(30, 40, "B")
    graph.add_edge(a, b, 5)
    graph.move_node(a, 11, 21)
    graph.clear()

    assert [event for event, _ in listener.events] == [
        GraphEvent.NODE_ADDED,
        GraphEvent.NODE_ADDED,
        GraphEvent.EDGE_ADDED,
        GraphEvent.NODE_MOVED,
        GraphEvent.GRAPH_CLEARED,
    ]
    _, edge_details = listener.events[2]
    assert edge_details["edges"] == [{"id": 0, "from_node": 0, "to_node": 1, "weight": 5}]
    assert [node["label"] for node in edge_details["nodes"]] == ["A", "B"]
    _, moved = listener.events[3]
    assert moved["nodes"] == [{"id": 0, "label": "A", "x": 11, "y": 21}]
    _, cleared = listener.events[4]
    assert cleared["metadata"] == {"nodes_removed": 2, "edges_removed": 1}


def test_queries_emit_no_events(listener):
    """Test that shortest path queries do not notify listeners."""
    graph = WeightedGraph()
    a = graph.add_node(0, 0, "A")
    b = graph.add_node(0, 0, "B")
    graph.add_edge(a, b, 1)
    graph.add_listener(listener)

    graph.shortest_path(a, b)
    graph.neighbors(a)
    assert listener.events == []


def test_removed_listener_is_not_notified(listener):
    """Test that unsubscribed listeners stop receiving events."""
    graph = WeightedGraph()
    graph.add_listener(listener)
    graph.add_node(0, 0, "A")
    graph.remove_listener(listener)
    graph.add_node(0, 0, "B")
    assert len(listener.events) == 1


def test_failing_listener_is_logged_and_skipped(listener, caplog):
    """Test that a failing listener neither blocks others nor undoes the mutation."""
    graph = WeightedGraph()
    graph.add_listener(FailingListener())
    graph.add_listener(listener)

    with caplog.at_level(logging.ERROR, logger="waypoint.core.graph.events"):
        node = graph.add_node(0, 0, "A")

    assert graph.has_node(node)
    assert len(listener.events) == 1
    assert "Error notifying listener" in caplog.text
    assert "NODE_ADDED" in caplog.text

"""Shared test fixtures."""

import pytest

from waypoint.core.config import GraphConfig, SelectionStrategy
from waypoint.core.graph import WeightedGraph


@pytest.fixture(params=list(SelectionStrategy), ids=lambda strategy: strategy.value)
def config(request) -> GraphConfig:
    """Fixture providing a configuration for each selection strategy."""
    return GraphConfig(selection_strategy=request.param)


@pytest.fixture
def graph(config) -> WeightedGraph:
    """Fixture providing an empty graph, once per selection strategy."""
    return WeightedGraph(config)


@pytest.fixture
def detour_graph(graph) -> WeightedGraph:
    """
    Fixture providing a graph where the direct edge is not the shortest:

    A --4-- B --3-- C
     \\_____10______/
    """
    a = graph.add_node(0, 0, "A")
    b = graph.add_node(0, 0, "B")
    c = graph.add_node(0, 0, "C")
    graph.add_edge(a, b, 4)
    graph.add_edge(b, c, 3)
    graph.add_edge(a, c, 10)
    return graph

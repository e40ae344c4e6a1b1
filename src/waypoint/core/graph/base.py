"""
Core graph data structure with an id-keyed adjacency list.

This module provides the BaseGraph class: the node table, the edge list and the
adjacency index derived from them. The graph is undirected; every edge adds one
entry to each endpoint's adjacency list. Adjacency is keyed by node id, so labels
are display attributes only and cannot corrupt the index.

The implementation is pure, focusing only on graph operations without side concerns
like events or logging, which are handled by the WeightedGraph facade.
"""

from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Tuple, Union

from ..exceptions import DuplicateLabelError, NodeNotFoundError
from ..models.edge import Edge
from ..models.node import Node

# (neighbor id, weight)
AdjacencyEntry = Tuple[int, float]
NodeRef = Union[Node, int]


def _is_node_id(value: object) -> bool:
    """True for ints usable as node ids; bool is excluded although it is an int."""
    return isinstance(value, int) and not isinstance(value, bool)


@dataclass
class BaseGraph:
    """
    Pure graph data structure implementation using adjacency list representation.

    Nodes and edges only accumulate; there is no removal. ``clear`` discards
    everything and restarts id assignment.

    Attributes:
        _nodes (Dict[int, Node]): Node table keyed by id, in creation order
        _labels (Dict[str, int]): Label to node id lookup
        _edges (List[Edge]): All edges in insertion order
        _adjacency (Dict[int, List[AdjacencyEntry]]): Adjacency index
        _next_id (int): Id the next node will receive
    """

    _nodes: Dict[int, Node] = field(default_factory=dict)
    _labels: Dict[str, int] = field(default_factory=dict)
    _edges: List[Edge] = field(default_factory=list)
    _adjacency: Dict[int, List[AdjacencyEntry]] = field(default_factory=dict)
    _next_id: int = 0

    def add_node(self, x: float, y: float, label: str, overwrite: bool = False) -> Node:
        """
        Register a new node and give it an empty adjacency list.

        Args:
            x (float): Horizontal display coordinate
            y (float): Vertical display coordinate
            label (str): Display label
            overwrite (bool): If True, a reused label is repointed at the new node
                instead of raising

        Returns:
            Node: The created node

        Raises:
            DuplicateLabelError: If the label is taken and ``overwrite`` is False
            TypeError, ValueError: If the node fields are invalid
        """
        if label in self._labels and not overwrite:
            raise DuplicateLabelError(f"Label '{label}' is already used by node {self._labels[label]}")

        # Build first so a validation failure leaves the graph untouched
        node = Node(id=self._next_id, label=label, x=x, y=y)
        self._nodes[node.id] = node
        self._labels[label] = node.id
        self._adjacency[node.id] = []
        self._next_id += 1
        return node

    def add_edge(self, from_node: NodeRef, to_node: NodeRef, weight: float) -> Edge:
        """
        Record an undirected edge and index it from both endpoints.

        A self-loop adds two entries to its node's list, one per direction,
        like any other edge.

        Returns:
            Edge: The recorded edge

        Raises:
            NodeNotFoundError: If either endpoint is not in this graph
            TypeError: If the weight is not numeric
        """
        from_id = self.resolve(from_node)
        to_id = self.resolve(to_node)

        edge = Edge(from_node=from_id, to_node=to_id, weight=weight, id=len(self._edges))
        self._edges.append(edge)
        self._adjacency[from_id].append((to_id, weight))
        self._adjacency[to_id].append((from_id, weight))
        return edge

    def resolve(self, node: NodeRef) -> int:
        """
        Resolve a node handle or id to an id registered in this graph.

        A Node handle must be the very object this graph created; handles from
        another graph, or from before a ``clear``, are rejected even when their
        id happens to exist.

        Raises:
            NodeNotFoundError: If the node does not belong to this graph
        """
        if isinstance(node, Node):
            if self._nodes.get(node.id) is not node:
                raise NodeNotFoundError(f"Node '{node.label}' (id {node.id}) not found in the graph")
            return node.id
        if not _is_node_id(node) or node not in self._nodes:
            raise NodeNotFoundError(f"Node id {node!r} not found in the graph")
        return node

    def get_node(self, node_id: int) -> Node:
        """
        Get a node by id.

        Raises:
            NodeNotFoundError: If no node has this id
        """
        if not _is_node_id(node_id):
            raise NodeNotFoundError(f"Node id {node_id!r} not found in the graph")
        try:
            return self._nodes[node_id]
        except KeyError:
            raise NodeNotFoundError(f"Node id {node_id!r} not found in the graph") from None

    def get_node_by_label(self, label: str) -> Node:
        """
        Get a node by label.

        Raises:
            NodeNotFoundError: If no node has this label
        """
        try:
            return self._nodes[self._labels[label]]
        except KeyError:
            raise NodeNotFoundError(f"Node with label '{label}' not found in the graph") from None

    def has_node(self, node: NodeRef) -> bool:
        """Check if a node handle or id belongs to this graph."""
        if isinstance(node, Node):
            return self._nodes.get(node.id) is node
        return _is_node_id(node) and node in self._nodes

    def has_label(self, label: str) -> bool:
        """Check if a label is registered."""
        return label in self._labels

    def get_neighbors(self, node: NodeRef) -> List[AdjacencyEntry]:
        """
        Get the adjacency entries of a node.

        Returns:
            List[AdjacencyEntry]: Copy of the ``(neighbor id, weight)`` list in edge order

        Raises:
            NodeNotFoundError: If the node does not belong to this graph
        """
        return list(self._adjacency[self.resolve(node)])

    def iter_adjacency(self, node_id: int) -> Iterator[AdjacencyEntry]:
        """Iterate a registered node's adjacency entries without copying."""
        return iter(self._adjacency[node_id])

    def get_degree(self, node: NodeRef) -> int:
        """Number of adjacency entries of a node; a self-loop counts twice."""
        return len(self._adjacency[self.resolve(node)])

    def get_nodes(self) -> List[Node]:
        """All nodes ordered by id."""
        return list(self._nodes.values())

    def get_node_ids(self) -> List[int]:
        """All node ids in ascending order."""
        return list(self._nodes)

    def get_edges(self) -> Iterator[Edge]:
        """Iterate over all edges in insertion order."""
        return iter(self._edges)

    def get_edge_count(self) -> int:
        return len(self._edges)

    def get_node_count(self) -> int:
        return len(self._nodes)

    def clear(self) -> None:
        """Clear all nodes and edges from the graph and restart id assignment."""
        self._nodes.clear()
        self._labels.clear()
        self._edges.clear()
        self._adjacency.clear()
        self._next_id = 0

"""
Edge models for the weighted graph.

Edges are undirected and reference their endpoints by node id; the owning graph
resolves ids through its node table. Weights are stored as given. Path finding
is only correct for non-negative weights, but rejecting negative values is left
to the caller.
"""

from dataclasses import dataclass
from typing import Tuple

from ...utils.validation import validate_dataclass


@validate_dataclass
@dataclass(frozen=True)
class Edge:
    """
    An undirected, weighted connection between two nodes.

    Attributes:
        from_node (int): Id of the first endpoint
        to_node (int): Id of the second endpoint
        weight (float): Traversal cost in either direction
        id (int): Insertion sequence number within the graph
    """

    from_node: int
    to_node: int
    weight: float
    id: int = 0

    def __post_init__(self):
        """Validate edge after initialization."""
        if self.from_node < 0 or self.to_node < 0:
            raise ValueError("endpoint ids must be non-negative integers")

    @property
    def endpoints(self) -> Tuple[int, int]:
        """Both endpoint ids in insertion order."""
        return (self.from_node, self.to_node)

    @property
    def is_self_loop(self) -> bool:
        """True when both endpoints are the same node."""
        return self.from_node == self.to_node

    def connects(self, node_id: int) -> bool:
        """Return True if the node is one of this edge's endpoints."""
        return node_id in (self.from_node, self.to_node)

    def other(self, node_id: int) -> int:
        """
        Get the endpoint opposite to ``node_id``.

        Raises:
            ValueError: If ``node_id`` is not an endpoint of this edge
        """
        if node_id == self.from_node:
            return self.to_node
        if node_id == self.to_node:
            return self.from_node
        raise ValueError(f"node {node_id} is not an endpoint of edge {self.id}")

"""
Node models for the weighted graph.

This module defines the vertex record handed out to callers. The rendering layer
owns the display coordinates and may move a node at any time; identity and label
are fixed once the node exists.
"""

from dataclasses import dataclass

from ...utils.validation import validate_dataclass

# Fields that can be assigned exactly once, during construction
IMMUTABLE_FIELDS = frozenset({"id", "label"})


@validate_dataclass
@dataclass(eq=False)
class Node:
    """
    A vertex in the weighted graph.

    Nodes compare and hash by identity, so two nodes with equal coordinates
    are still distinct vertices.

    Attributes:
        id (int): Sequential identifier assigned by the graph, never reused
        label (str): Display label, unique within its graph
        x (float): Horizontal display coordinate, ignored by path finding
        y (float): Vertical display coordinate, ignored by path finding
    """

    id: int
    label: str
    x: float = 0.0
    y: float = 0.0

    def __post_init__(self):
        """Validate node after initialization."""
        if self.id < 0:
            raise ValueError("id must be a non-negative integer")
        if not self.label.strip():
            raise ValueError("label must be a non-empty string")

    def __setattr__(self, name: str, value) -> None:
        if name in IMMUTABLE_FIELDS and name in self.__dict__:
            raise AttributeError(f"Node {name} cannot be changed after creation")
        super().__setattr__(name, value)

    @property
    def position(self) -> tuple:
        """Current display coordinates as an ``(x, y)`` pair."""
        return (self.x, self.y)

"""
Custom exceptions for the weighted graph system.

This module defines the hierarchy of custom exceptions used throughout the package
to handle error conditions in a structured way. Lookup failures derive from the
built-in ``LookupError`` so callers can catch them without importing this module.

An unreachable destination is never an error: shortest path queries report it
as an infinite distance.
"""


class ValidationError(Exception):
    """
    Raised when configuration or input validation fails.

    Examples:
        * Unknown selection strategy name
        * Negative memory limit
    """

    def __str__(self) -> str:
        """Format validation error message."""
        return f"Validation Error: {super().__str__()}"


class GraphOperationError(Exception):
    """
    Raised when graph operations fail.

    This exception is raised when operations on the graph structure would
    violate one of its integrity rules.

    Examples:
        * Registering a node whose label is already in use
        * Graph integrity violations
    """

    def __str__(self) -> str:
        """Format graph operation error message."""
        return f"Graph Operation Error: {super().__str__()}"


class ResourceNotFoundError(LookupError):
    """
    Raised when a requested resource is not found.

    Examples:
        * Node not found
        * Node handle that belongs to another graph
    """


class NodeNotFoundError(ResourceNotFoundError):
    """
    Raised when a requested node is not found.

    Examples:
        * Node lookup by non-existent id or label
        * Edge creation referencing a node never added
        * Shortest path query referencing a node from a cleared graph
    """


class DuplicateLabelError(GraphOperationError, ValueError):
    """
    Raised when a node label is already registered.

    Labels are display keys and must be unique within a graph. The graph
    raises this before any state is changed, so a failed ``add_node`` leaves
    the graph exactly as it was.
    """

"""Path finding algorithm implementations."""

from .shortest_path import DijkstraFinder

__all__ = ["DijkstraFinder"]

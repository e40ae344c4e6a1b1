"""Dijkstra shortest path over the undirected adjacency index.

Two interchangeable strategies select the next node to settle:

``SelectionStrategy.LINEAR_SCAN``
    Scans the unvisited set for the smallest tentative distance, O(n) per step.
    Ties go to the node with the lowest id.
``SelectionStrategy.HEAP``
    Pops a binary heap with lazy deletion, O(log n) per step. Ties go to the
    node whose distance was set first.

Distances are identical under both strategies. When several routes share the
minimum distance, which of them is reported depends on the strategy.

Relaxation is strict: an equal-cost alternative never replaces an existing
predecessor. Weights must be non-negative for the result to be optimal; negative
weights are not rejected and give the usual (possibly wrong) Dijkstra answer.
"""

import logging
import time
from contextlib import contextmanager
from typing import Dict, Optional, Tuple

from ....config import SelectionStrategy
from ...base import BaseGraph, NodeRef
from ..base import PathFinder
from ..path_models import PathResult, PerformanceMetrics
from ..utils import INFINITY, MemoryManager, PriorityQueue, reconstruct_path, timer

logger = logging.getLogger(__name__)

Distances = Dict[int, float]
Predecessors = Dict[int, Optional[int]]


class DijkstraFinder(PathFinder):
    """Single-pair shortest path using Dijkstra's algorithm."""

    def __init__(
        self,
        graph: BaseGraph,
        strategy: SelectionStrategy = SelectionStrategy.LINEAR_SCAN,
        max_memory_mb: Optional[float] = None,
    ):
        """Initialize finder with selection strategy and optional memory limit."""
        super().__init__(graph)
        self.strategy = strategy
        self.max_memory_mb = max_memory_mb
        self.memory_manager: Optional[MemoryManager] = None

    @contextmanager
    def _search_context(self):
        """Set up memory tracking for one search when a limit is configured."""
        if self.max_memory_mb:
            self.memory_manager = MemoryManager(self.max_memory_mb)
        try:
            yield
        finally:
            if self.memory_manager is not None:
                self.memory_manager.reset_peak_memory()

    def _check_memory(self) -> None:
        if self.memory_manager is not None:
            self.memory_manager.check_memory()

    def _initial_state(self, start_id: int) -> Tuple[Distances, Predecessors]:
        distances: Distances = {}
        previous: Predecessors = {}
        for node_id in self.graph.get_node_ids():
            distances[node_id] = INFINITY
            previous[node_id] = None
        distances[start_id] = 0
        return distances, previous

    def _linear_search(
        self, start_id: int, end_id: int, metrics: PerformanceMetrics
    ) -> Tuple[Distances, Predecessors]:
        """Settle nodes by scanning the unvisited set for the minimum distance."""
        distances, previous = self._initial_state(start_id)
        # dict keeps id order, which makes the scan's tie-break deterministic
        unvisited = dict.fromkeys(distances)

        while unvisited:
            current: Optional[int] = None
            for node_id in unvisited:
                if current is None or distances[node_id] < distances[current]:
                    current = node_id

            # Everything left is unreachable
            if current is None or distances[current] == INFINITY:
                break
            if current == end_id:
                break

            del unvisited[current]
            metrics.nodes_explored += 1

            for neighbor, weight in self.graph.iter_adjacency(current):
                if neighbor not in unvisited:
                    continue
                candidate = distances[current] + weight
                if candidate < distances[neighbor]:
                    distances[neighbor] = candidate
                    previous[neighbor] = current

            self._check_memory()

        return distances, previous

    def _heap_search(
        self, start_id: int, end_id: int, metrics: PerformanceMetrics
    ) -> Tuple[Distances, Predecessors]:
        """Settle nodes in priority-queue order."""
        distances, previous = self._initial_state(start_id)
        visited = set()
        queue = PriorityQueue(maxsize=max(len(distances), 1))
        queue.add_or_update(start_id, distances[start_id])

        while not queue.empty():
            popped = queue.pop()
            if popped is None:
                break
            _, current = popped
            if current == end_id:
                break

            visited.add(current)
            metrics.nodes_explored += 1

            for neighbor, weight in self.graph.iter_adjacency(current):
                if neighbor in visited:
                    continue
                candidate = distances[current] + weight
                if candidate < distances[neighbor]:
                    distances[neighbor] = candidate
                    previous[neighbor] = current
                    queue.add_or_update(neighbor, candidate)

            self._check_memory()

        return distances, previous

    def find_path(self, start_node: NodeRef, end_node: NodeRef) -> PathResult:
        """
        Find the minimum-weight path from ``start_node`` to ``end_node``.

        Returns:
            PathResult: Labels from start to end and the total distance. If the end
            is unreachable the distance is ``math.inf`` and the path holds only the
            end node's label.

        Raises:
            NodeNotFoundError: If either node does not belong to the graph
            MemoryError: If a memory limit is configured and exceeded
        """
        start_id, end_id = self.validate_nodes(start_node, end_node)
        metrics = PerformanceMetrics(operation="shortest_path", start_time=time.time())

        with self._search_context(), timer(f"shortest_path {start_id}->{end_id}"):
            try:
                if self.strategy is SelectionStrategy.HEAP:
                    distances, previous = self._heap_search(start_id, end_id, metrics)
                else:
                    distances, previous = self._linear_search(start_id, end_id, metrics)
            finally:
                metrics.end_time = time.time()
                if self.memory_manager is not None:
                    metrics.max_memory_used = self.memory_manager.peak_memory
                self.last_metrics = metrics

            result = self._create_path_result(
                reconstruct_path(previous, end_id), distances[end_id]
            )

        metrics.path_length = len(result.path)
        logger.debug(
            "Shortest path %s: distance=%s explored=%d strategy=%s",
            result.route,
            result.distance,
            metrics.nodes_explored,
            self.strategy.value,
        )
        return result

"""
Utility functions for path finding operations.
"""

import gc
import logging
import math
import os
import time
from contextlib import contextmanager
from heapq import heappop, heappush
from typing import Dict, Generator, List, Mapping, Optional, Tuple

import psutil  # type: ignore # Missing stubs

logger = logging.getLogger(__name__)

INFINITY = math.inf
MAX_QUEUE_SIZE = 100000  # Maximum size for priority queues


@contextmanager
def timer(label: str = "") -> Generator[None, None, None]:
    """Context manager that logs the duration of the wrapped block at DEBUG."""
    start = time.perf_counter()
    try:
        yield
    finally:
        duration = time.perf_counter() - start
        if label:
            logger.debug("%s: %.1fms", label, duration * 1000)


def reconstruct_path(previous: Mapping[int, Optional[int]], end: int) -> List[int]:
    """
    Walk predecessors back from ``end`` and return node ids in travel order.

    The walk stops at the first node without a predecessor: the start node, or
    ``end`` itself when it was never reached.
    """
    path: List[int] = []
    current: Optional[int] = end
    while current is not None:
        path.append(current)
        current = previous.get(current)
    path.reverse()
    return path


class PriorityQueue:
    """Priority queue with decrease-key functionality.

    Items with equal priority come out in insertion order.
    """

    def __init__(self, maxsize: int = MAX_QUEUE_SIZE):
        self._queue: List[Tuple[float, int, int]] = []
        self._entry_finder: Dict[int, Tuple[float, int]] = {}
        self._counter = 0  # Unique counter to break ties
        self._maxsize = maxsize

    def add_or_update(self, item: int, priority: float) -> bool:
        """
        Add a new item or lower the priority of an existing one.

        Returns:
            bool: True if the queue changed

        Raises:
            OverflowError: If a new item would exceed ``maxsize``
        """
        if item in self._entry_finder:
            old_priority, _ = self._entry_finder[item]
            if not priority < old_priority:
                return False
        elif len(self._entry_finder) >= self._maxsize:
            raise OverflowError(f"Priority queue exceeded {self._maxsize} items")

        # The superseded heap entry stays behind and is skipped on pop
        entry = (priority, self._counter, item)
        self._entry_finder[item] = (priority, self._counter)
        heappush(self._queue, entry)
        self._counter += 1
        return True

    def pop(self) -> Optional[Tuple[float, int]]:
        """Remove and return the ``(priority, item)`` pair with the lowest priority."""
        while self._queue:
            priority, count, item = heappop(self._queue)
            if self._entry_finder.get(item) == (priority, count):
                del self._entry_finder[item]
                return (priority, item)
        return None

    def empty(self) -> bool:
        """Return True if the queue is empty."""
        return len(self._entry_finder) == 0

    def __len__(self) -> int:
        """Return the number of valid items in the queue."""
        return len(self._entry_finder)


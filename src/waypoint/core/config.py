"""
Configuration for graph construction and path finding.

Settings are plain dataclasses with validation on construction. ``GraphConfig.from_env``
builds one from ``WAYPOINT_*`` environment variables for hosts that configure the
graph without code changes.
"""

import logging
import os
from dataclasses import dataclass
from enum import Enum
from typing import Mapping, Optional

from ..utils.validation import RangeRule
from .exceptions import ValidationError

logger = logging.getLogger(__name__)

ENV_PREFIX = "WAYPOINT_"

DUPLICATE_LABEL_POLICIES = ("raise", "overwrite")


class SelectionStrategy(Enum):
    """How Dijkstra's algorithm picks the next node to settle."""

    # Scan every unvisited node for the minimum, O(n) per step
    LINEAR_SCAN = "linear"
    # Binary heap with lazy deletion, O(log n) per step
    HEAP = "heap"


@dataclass
class GraphConfig:
    """
    Configuration for a WeightedGraph.

    Attributes:
        selection_strategy: Minimum-selection strategy used by shortest path queries
        duplicate_labels: ``"raise"`` to reject a reused label, ``"overwrite"`` to
            point the label at the newest node
        max_memory_mb: Optional memory budget for a single query
    """

    selection_strategy: SelectionStrategy = SelectionStrategy.LINEAR_SCAN
    duplicate_labels: str = "raise"
    max_memory_mb: Optional[float] = None

    def __post_init__(self):
        if isinstance(self.selection_strategy, str):
            self.selection_strategy = parse_strategy(self.selection_strategy)
        if not isinstance(self.selection_strategy, SelectionStrategy):
            raise ValidationError(
                f"selection_strategy must be a SelectionStrategy, got {self.selection_strategy!r}"
            )
        if self.duplicate_labels not in DUPLICATE_LABEL_POLICIES:
            raise ValidationError(
                f"duplicate_labels must be one of {', '.join(DUPLICATE_LABEL_POLICIES)}"
            )
        if self.max_memory_mb is not None:
            rule = RangeRule(min_value=0.0, error_message="max_memory_mb must be positive")
            if not rule.validate(self.max_memory_mb) or self.max_memory_mb == 0:
                raise ValidationError(rule.error_message)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "GraphConfig":
        """
        Build a configuration from environment variables.

        Recognised variables are ``WAYPOINT_SELECTION_STRATEGY``,
        ``WAYPOINT_DUPLICATE_LABELS`` and ``WAYPOINT_MAX_MEMORY_MB``. Unset
        variables fall back to the defaults.

        Raises:
            ValidationError: If a variable holds an invalid value
        """
        env = os.environ if environ is None else environ
        kwargs = {}

        strategy = env.get(f"{ENV_PREFIX}SELECTION_STRATEGY")
        if strategy:
            kwargs["selection_strategy"] = parse_strategy(strategy)

        duplicates = env.get(f"{ENV_PREFIX}DUPLICATE_LABELS")
        if duplicates:
            kwargs["duplicate_labels"] = duplicates.strip().lower()

        memory = env.get(f"{ENV_PREFIX}MAX_MEMORY_MB")
        if memory:
            try:
                kwargs["max_memory_mb"] = float(memory)
            except ValueError as e:
                raise ValidationError(f"{ENV_PREFIX}MAX_MEMORY_MB must be a number") from e

        config = cls(**kwargs)
        logger.debug("Loaded graph configuration from environment: %s", config)
        return config


def parse_strategy(value: str) -> SelectionStrategy:
    """Resolve a strategy from its value (``"heap"``) or name (``"HEAP"``)."""
    normalized = value.strip()
    for strategy in SelectionStrategy:
        if normalized.lower() == strategy.value or normalized.upper() == strategy.name:
            return strategy
    raise ValidationError(f"Unknown selection strategy: {value!r}")

"""
Tests for graph configuration.
"""

import pytest

from waypoint.core.config import GraphConfig, SelectionStrategy, parse_strategy
from waypoint.core.exceptions import ValidationError


def test_default_config():
    """Test default configuration values."""
    config = GraphConfig()
    assert config.selection_strategy is SelectionStrategy.LINEAR_SCAN
    assert config.duplicate_labels == "raise"
    assert config.max_memory_mb is None


@pytest.mark.parametrize(
    "value,expected",
    [
        ("heap", SelectionStrategy.HEAP),
        ("HEAP", SelectionStrategy.HEAP),
        (" linear ", SelectionStrategy.LINEAR_SCAN),
        ("LINEAR_SCAN", SelectionStrategy.LINEAR_SCAN),
    ],
)
def test_parse_strategy(value, expected):
    """Test resolving strategies by value or name."""
    assert parse_strategy(value) is expected


def test_strategy_string_in_constructor():
    """Test that a strategy may be given as a string."""
    assert GraphConfig(selection_strategy="heap").selection_strategy is SelectionStrategy.HEAP


def test_unknown_strategy():
    """Test rejection of unknown strategies."""
    with pytest.raises(ValidationError, match="Unknown selection strategy"):
        GraphConfig(selection_strategy="fibonacci")
    with pytest.raises(ValidationError, match="selection_strategy must be a SelectionStrategy"):
        GraphConfig(selection_strategy=3)  # type: ignore[arg-type]


def test_invalid_duplicate_label_policy():
    """Test rejection of unknown duplicate label policies."""
    with pytest.raises(ValidationError, match="duplicate_labels must be one of"):
        GraphConfig(duplicate_labels="ignore")


@pytest.mark.parametrize("limit", [0, -1.0, "64"])
def test_invalid_memory_limit(limit):
    """Test rejection of non-positive or non-numeric memory limits."""
    with pytest.raises(ValidationError, match="max_memory_mb must be positive"):
        GraphConfig(max_memory_mb=limit)  # type: ignore[arg-type]


def test_from_env():
    """Test loading configuration from environment variables."""
    config = GraphConfig.from_env(
        {
            "WAYPOINT_SELECTION_STRATEGY": "heap",
            "WAYPOINT_DUPLICATE_LABELS": "Overwrite",
            "WAYPOINT_MAX_MEMORY_MB": "256",
        }
    )
    assert config.selection_strategy is SelectionStrategy.HEAP
    assert config.duplicate_labels == "overwrite"
    assert config.max_memory_mb == pytest.approx(256.0)


def test_from_env_defaults():
    """Test that unset variables keep the defaults."""
    assert GraphConfig.from_env({}) == GraphConfig()


def test_from_env_reads_process_environment(monkeypatch):
    """Test that os.environ is used when no mapping is given."""
    monkeypatch.setenv("WAYPOINT_SELECTION_STRATEGY", "heap")
    monkeypatch.delenv("WAYPOINT_DUPLICATE_LABELS", raising=False)
    monkeypatch.delenv("WAYPOINT_MAX_MEMORY_MB", raising=False)
    assert GraphConfig.from_env().selection_strategy is SelectionStrategy.HEAP


def test_from_env_invalid_memory():
    """Test rejection of a non-numeric memory limit variable."""
    with pytest.raises(ValidationError, match="WAYPOINT_MAX_MEMORY_MB must be a number"):
        GraphConfig.from_env({"WAYPOINT_MAX_MEMORY_MB": "lots"})

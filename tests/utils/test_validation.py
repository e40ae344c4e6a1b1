"""
Tests for validation utilities.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple, Union

import pytest

from waypoint.utils.validation import (
    DataclassRule,
    RangeRule,
    ValidationRule,
    validate_dataclass,
)


@dataclass
class Sample:
    name: str
    score: float
    tags: List[str] = field(default_factory=list)
    parent: Optional[int] = None
    key: Union[int, str] = 0
    pair: Tuple[int, str] = (0, "")
    extra: Dict[str, int] = field(default_factory=dict)


def test_dataclass_rule_accepts_valid_instance():
    """Test validation of a well-typed dataclass."""
    rule = DataclassRule(Sample)
    assert rule.validate(Sample(name="a", score=1, tags=["x"], parent=3, key="k", pair=(1, "b")))


@pytest.mark.parametrize(
    "overrides,bad_field",
    [
        ({"score": True}, "score"),
        ({"score": "1.0"}, "score"),
        ({"tags": [1]}, "tags"),
        ({"parent": "3"}, "parent"),
        ({"key": 1.5}, "key"),
        ({"pair": (1, 2)}, "pair"),
        ({"extra": {"a": "b"}}, "extra"),
    ],
)
def test_dataclass_rule_reports_invalid_fields(overrides, bad_field):
    """Test detection of mistyped fields, including Optional and Union members."""
    kwargs = {"name": "a", "score": 1.0}
    kwargs.update(overrides)
    rule = DataclassRule(Sample)
    assert rule.invalid_fields(Sample(**kwargs)) == [bad_field]


def test_dataclass_rule_rejects_other_types():
    assert not DataclassRule(Sample).validate(object())


def test_validate_dataclass_decorator():
    """Test that the decorator checks types before the class's own validation."""
    seen = []

    @validate_dataclass
    @dataclass
    class Point:
        x: float
        y: float

        def __post_init__(self):
            seen.append((self.x, self.y))
            if self.x < 0:
                raise ValueError("x must be non-negative")

    assert Point(1, 2.5).y == 2.5
    with pytest.raises(TypeError, match="Invalid field types in Point: y"):
        Point(1, "2")
    with pytest.raises(ValueError, match="x must be non-negative"):
        Point(-1, 0)
    assert seen == [(1, 2.5), (-1, 0)]


def test_validate_dataclass_without_post_init():
    """Test that types are checked for classes that define no __post_init__."""

    @validate_dataclass
    @dataclass(frozen=True)
    class Span:
        start: int
        length: float = 1.0

    assert Span(2).length == 1.0
    with pytest.raises(TypeError, match="Invalid field types in Span: length"):
        Span(2, "long")
    with pytest.raises(TypeError, match="Invalid field types in Span: start"):
        Span(True)


def test_range_rule():
    """Test open and closed numeric ranges."""
    rule = RangeRule(min_value=0.0, max_value=1.0, error_message="out of range")
    assert rule.validate(0.5)
    assert not rule.validate(1.5)
    assert not rule.validate(-0.1)
    assert not rule.validate(True)
    assert RangeRule(min_value=0.0).validate(1e9)


def test_base_rule_is_abstract():
    with pytest.raises(NotImplementedError):
        ValidationRule("message").validate(1)

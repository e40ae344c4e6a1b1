"""
Validation package for waypoint.

This package provides validation utilities and rules for ensuring data integrity
and type safety throughout the system.
"""

from .base import (
    DataclassRule,
    RangeRule,
    ValidationRule,
    validate_dataclass,
)

__all__ = [
    "ValidationRule",
    "RangeRule",
    "DataclassRule",
    "validate_dataclass",
]

"""
Base Validation Components for waypoint

This module provides the validation building blocks used by the graph models and the
configuration layer. It includes a small hierarchy of ValidationRule classes and the
``validate_dataclass`` decorator that adds runtime type checking to dataclass fields.

The framework supports:
- Numeric range validation
- Dataclass field validation, including ``Optional`` and ``Union`` annotations
"""

import functools
from typing import (
    Any,
    List,
    Optional,
    Type,
    Union,
    get_args,
    get_origin,
    get_type_hints,
)


class ValidationRule:
    """
    Base class for all validation rules.

    Subclasses override validate() to implement specific validation logic.

    Attributes:
        error_message (str): Message to display when validation fails
    """

    def __init__(self, error_message: str):
        self.error_message = error_message

    def validate(self, value: Any) -> bool:
        """
        Validate a value against the rule.

        Raises:
            NotImplementedError: If the subclass doesn't implement this method
        """
        raise NotImplementedError("Validation rules must implement validate()")


class RangeRule(ValidationRule):
    """
    Rule for validating numeric ranges.

    Either min_value or max_value can be None to create an open-ended range.
    Booleans are rejected even though they are ints.
    """

    def __init__(
        self,
        min_value: Optional[float] = None,
        max_value: Optional[float] = None,
        error_message: str = "",
    ):
        super().__init__(error_message)
        self.min_value = min_value
        self.max_value = max_value

    def validate(self, value: Any) -> bool:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            return False
        if self.min_value is not None and value < self.min_value:
            return False
        if self.max_value is not None and value > self.max_value:
            return False
        return True


class DataclassRule(ValidationRule):
    """
    Rule for validating dataclass fields.

    This rule ensures that fields in a dataclass instance match their type hints.

    Attributes:
        dataclass_type: The dataclass type to validate against
    """

    def __init__(self, dataclass_type: Type, error_message: str = ""):
        super().__init__(error_message or f"Invalid value for {dataclass_type.__name__}")
        self.dataclass_type = dataclass_type
        self.type_hints = get_type_hints(dataclass_type)

    def _validate_type(self, value: Any, expected_type: Any) -> bool:
        """Validate a value against its expected type."""
        if expected_type is Any:
            return True

        origin = get_origin(expected_type)

        # Optional[X] is Union[X, None]; any member may match
        if origin is Union:
            return any(self._validate_type(value, arg) for arg in get_args(expected_type))

        if expected_type is type(None):
            return value is None
        if value is None:
            return False

        if origin is list:
            if not isinstance(value, list):
                return False
            args = get_args(expected_type)
            return not args or all(self._validate_type(item, args[0]) for item in value)
        if origin is dict:
            if not isinstance(value, dict):
                return False
            args = get_args(expected_type)
            if len(args) != 2:
                return True
            key_type, val_type = args
            return all(
                self._validate_type(k, key_type) and self._validate_type(v, val_type)
                for k, v in value.items()
            )
        if origin is tuple:
            if not isinstance(value, tuple):
                return False
            args = get_args(expected_type)
            if not args:
                return True
            if len(args) == 2 and args[1] is Ellipsis:
                return all(self._validate_type(item, args[0]) for item in value)
            if len(args) != len(value):
                return False
            return all(self._validate_type(val, typ) for val, typ in zip(value, args))
        if origin is not None:
            try:
                return isinstance(value, origin)
            except TypeError:
                return True

        # int is acceptable wherever float is annotated
        if expected_type is float:
            return isinstance(value, (int, float)) and not isinstance(value, bool)
        # bool is an int subclass but never a valid id or count
        if expected_type is int:
            return isinstance(value, int) and not isinstance(value, bool)
        try:
            return isinstance(value, expected_type)
        except TypeError:
            return True

    def invalid_fields(self, value: Any) -> List[str]:
        """Return the names of fields whose values do not match their type hints."""
        return [
            field_name
            for field_name, field_type in self.type_hints.items()
            if not self._validate_type(getattr(value, field_name), field_type)
        ]

    def validate(self, value: Any) -> bool:
        if not isinstance(value, self.dataclass_type):
            return False
        return not self.invalid_fields(value)


def validate_dataclass(cls: Type[Any]) -> Type[Any]:
    """
    Decorator that adds runtime type checking to dataclass fields.

    Field types are checked first, so the class's own ``__post_init__`` can
    rely on them. The check runs whether or not the class defines
    ``__post_init__``.

    Example:
        >>> @validate_dataclass
        ... @dataclass
        ... class Example:
        ...     name: str
        ...     count: int
    """
    original_post_init = getattr(cls, "__post_init__", None)

    def validated_post_init(self):
        """Validate all fields after initialization."""
        invalid = DataclassRule(cls).invalid_fields(self)
        if invalid:
            raise TypeError(f"Invalid field types in {cls.__name__}: {', '.join(invalid)}")
        if original_post_init:
            original_post_init(self)

    cls.__post_init__ = validated_post_init

    if original_post_init is None:
        # The generated __init__ only calls __post_init__ if one existed
        # when @dataclass ran, so wrap __init__ instead
        original_init = cls.__init__

        @functools.wraps(original_init)
        def validated_init(self, *args, **kwargs):
            original_init(self, *args, **kwargs)
            validated_post_init(self)

        cls.__init__ = validated_init

    return cls

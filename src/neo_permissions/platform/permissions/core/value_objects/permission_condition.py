"""Permission condition value object.

A condition narrows when a grant applies: ``field operator value`` evaluated
against the runtime context of an access request. Evaluation is pure and
never raises; a type mismatch simply makes the condition false.
"""

import json
import logging
import re
from dataclasses import dataclass
from enum import Enum
from functools import lru_cache
from numbers import Real
from typing import Any, Dict, Mapping, Optional, Pattern, Union

from ..exceptions import InvalidPermissionConditionError


logger = logging.getLogger(__name__)

_MISSING = object()


class ConditionOperator(str, Enum):
    """Operators a condition can apply."""
    
    EQUALS = "equals"
    NOT_EQUALS = "not_equals"
    IN = "in"
    NOT_IN = "not_in"
    CONTAINS = "contains"
    NOT_CONTAINS = "not_contains"
    STARTS_WITH = "starts_with"
    ENDS_WITH = "ends_with"
    GREATER_THAN = "greater_than"
    LESS_THAN = "less_than"
    GREATER_THAN_OR_EQUAL = "greater_than_or_equal"
    LESS_THAN_OR_EQUAL = "less_than_or_equal"
    IS_NULL = "is_null"
    IS_NOT_NULL = "is_not_null"
    REGEX = "regex"
    CUSTOM = "custom"
    
    def __str__(self) -> str:
        return self.value
    
    @property
    def is_null_check(self) -> bool:
        return self in NULL_CHECK_OPERATORS
    
    @property
    def is_comparison(self) -> bool:
        return self in COMPARISON_OPERATORS
    
    @property
    def is_string_operation(self) -> bool:
        return self in STRING_OPERATORS
    
    @property
    def is_array_operation(self) -> bool:
        return self in ARRAY_OPERATORS


NULL_CHECK_OPERATORS = frozenset({ConditionOperator.IS_NULL, ConditionOperator.IS_NOT_NULL})
COMPARISON_OPERATORS = frozenset({
    ConditionOperator.GREATER_THAN,
    ConditionOperator.LESS_THAN,
    ConditionOperator.GREATER_THAN_OR_EQUAL,
    ConditionOperator.LESS_THAN_OR_EQUAL,
})
STRING_OPERATORS = frozenset({
    ConditionOperator.CONTAINS,
    ConditionOperator.NOT_CONTAINS,
    ConditionOperator.STARTS_WITH,
    ConditionOperator.ENDS_WITH,
    ConditionOperator.REGEX,
})
ARRAY_OPERATORS = frozenset({ConditionOperator.IN, ConditionOperator.NOT_IN})

_SCALAR_TYPES = (str, int, float, bool)

ConditionValue = Union[str, int, float, bool, tuple, None]


@lru_cache(maxsize=256)
def _compile_pattern(pattern: str) -> Pattern:
    return re.compile(pattern)


def _strict_equals(left: Any, right: Any) -> bool:
    """Equality that never treats a bool as a number."""
    if isinstance(left, bool) or isinstance(right, bool):
        return type(left) is type(right) and left == right
    return left == right


def _is_number(value: Any) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool)


def _typed(value: Any) -> Any:
    """Identity form of a value in which a bool never matches a number."""
    if isinstance(value, tuple):
        return tuple(_typed(item) for item in value)
    return (isinstance(value, bool), value)


@dataclass(frozen=True, eq=False)
class PermissionCondition:
    """Immutable predicate evaluated against an access request context.
    
    Field names may use dot notation (``user.department``) to reach into
    nested mappings when the context has no key with the literal name.
    """
    
    field: str
    operator: ConditionOperator
    value: ConditionValue = None
    description: Optional[str] = None
    
    def __post_init__(self) -> None:
        """Validate and normalize condition data."""
        if not isinstance(self.field, str) or not self.field.strip():
            raise InvalidPermissionConditionError("Condition field cannot be empty")
        object.__setattr__(self, 'field', self.field.strip())
        
        if isinstance(self.operator, str):
            try:
                object.__setattr__(self, 'operator', ConditionOperator(self.operator.strip()))
            except ValueError:
                supported = ", ".join(op.value for op in ConditionOperator)
                raise InvalidPermissionConditionError(
                    f"Invalid condition operator: {self.operator}. Supported operators: {supported}",
                    field=self.field,
                    operator=self.operator,
                ) from None
        else:
            raise InvalidPermissionConditionError(
                "Condition operator cannot be empty", field=self.field
            )
        
        if isinstance(self.value, list):
            object.__setattr__(self, 'value', tuple(self.value))
        
        if self.operator.is_null_check:
            if self.value is not None:
                raise InvalidPermissionConditionError(
                    f"Value for the {self.operator} operator must be null",
                    field=self.field,
                    operator=self.operator,
                )
        elif self.value is None:
            raise InvalidPermissionConditionError(
                f"Value for the {self.operator} operator cannot be null",
                field=self.field,
                operator=self.operator,
            )
        else:
            self._validate_value_type()
        
        if self.description is not None:
            object.__setattr__(self, 'description', str(self.description).strip() or None)
    
    def _validate_value_type(self) -> None:
        """Values are scalars or flat sequences of scalars."""
        if isinstance(self.value, tuple):
            if not all(isinstance(item, _SCALAR_TYPES) for item in self.value):
                raise InvalidPermissionConditionError(
                    "Condition list values may only contain strings, numbers or booleans",
                    field=self.field,
                    operator=self.operator,
                )
        elif not isinstance(self.value, _SCALAR_TYPES):
            raise InvalidPermissionConditionError(
                f"Unsupported condition value type: {type(self.value).__name__}",
                field=self.field,
                operator=self.operator,
            )
        
        if self.operator is ConditionOperator.REGEX:
            if not isinstance(self.value, str):
                raise InvalidPermissionConditionError(
                    "Regex condition value must be a pattern string",
                    field=self.field,
                    operator=self.operator,
                )
            try:
                _compile_pattern(self.value)
            except re.error as e:
                raise InvalidPermissionConditionError(
                    f"Invalid regex pattern '{self.value}': {e}",
                    field=self.field,
                    operator=self.operator,
                ) from e
    
    def _resolve_field(self, context: Mapping[str, Any]) -> Any:
        """Look up the field, falling back to a dotted path walk."""
        if self.field in context:
            return context[self.field]
        
        current: Any = context
        for part in self.field.split('.'):
            if isinstance(current, Mapping) and part in current:
                current = current[part]
            else:
                return _MISSING
        return current
    
    def evaluate(self, context: Mapping[str, Any]) -> bool:
        """Evaluate the condition against a runtime context.
        
        Args:
            context: Attributes of the access request
            
        Returns:
            True if the condition holds, False otherwise
        """
        field_value = self._resolve_field(context or {})
        if field_value is _MISSING:
            field_value = None
        
        op = self.operator
        expected = self.value
        
        if op is ConditionOperator.EQUALS:
            return _strict_equals(field_value, expected)
        if op is ConditionOperator.NOT_EQUALS:
            return not _strict_equals(field_value, expected)
        
        if op is ConditionOperator.IN:
            return isinstance(expected, tuple) and any(
                _strict_equals(field_value, item) for item in expected
            )
        if op is ConditionOperator.NOT_IN:
            return isinstance(expected, tuple) and not any(
                _strict_equals(field_value, item) for item in expected
            )
        
        if op.is_string_operation:
            if not isinstance(field_value, str) or not isinstance(expected, str):
                return False
            if op is ConditionOperator.CONTAINS:
                return expected in field_value
            if op is ConditionOperator.NOT_CONTAINS:
                return expected not in field_value
            if op is ConditionOperator.STARTS_WITH:
                return field_value.startswith(expected)
            if op is ConditionOperator.ENDS_WITH:
                return field_value.endswith(expected)
            return _compile_pattern(expected).search(field_value) is not None
        
        if op.is_comparison:
            if not _is_number(field_value) or not _is_number(expected):
                return False
            if op is ConditionOperator.GREATER_THAN:
                return field_value > expected
            if op is ConditionOperator.LESS_THAN:
                return field_value < expected
            if op is ConditionOperator.GREATER_THAN_OR_EQUAL:
                return field_value >= expected
            return field_value <= expected
        
        if op is ConditionOperator.IS_NULL:
            return field_value is None
        if op is ConditionOperator.IS_NOT_NULL:
            return field_value is not None
        
        # custom: extension point with no defined semantics yet, always rejects
        logger.debug(f"Custom condition on '{self.field}' evaluated as False")
        return False
    
    @property
    def is_null_check(self) -> bool:
        return self.operator.is_null_check
    
    @property
    def is_comparison(self) -> bool:
        return self.operator.is_comparison
    
    @property
    def is_string_operation(self) -> bool:
        return self.operator.is_string_operation
    
    @property
    def is_array_operation(self) -> bool:
        return self.operator.is_array_operation
    
    def to_json(self) -> Dict[str, Any]:
        """Convert condition to dictionary for serialization."""
        return {
            "field": self.field,
            "operator": self.operator.value,
            "value": list(self.value) if isinstance(self.value, tuple) else self.value,
            "description": self.description,
        }
    
    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> 'PermissionCondition':
        """Create condition from dictionary.
        
        Args:
            data: Dictionary with field, operator, value and optional description
            
        Returns:
            PermissionCondition instance
        """
        if not isinstance(data, Mapping):
            raise InvalidPermissionConditionError("Permission condition data cannot be empty")
        return cls(
            field=data.get("field"),
            operator=data.get("operator"),
            value=data.get("value"),
            description=data.get("description"),
        )
    
    @classmethod
    def equals(cls, field: str, value: Any) -> 'PermissionCondition':
        """Create equals condition convenience method."""
        return cls(field=field, operator=ConditionOperator.EQUALS, value=value)
    
    @classmethod
    def one_of(cls, field: str, values: Any) -> 'PermissionCondition':
        """Create in condition convenience method."""
        return cls(field=field, operator=ConditionOperator.IN, value=list(values))
    
    @classmethod
    def is_null(cls, field: str) -> 'PermissionCondition':
        """Create is_null condition convenience method."""
        return cls(field=field, operator=ConditionOperator.IS_NULL)
    
    @classmethod
    def is_not_null(cls, field: str) -> 'PermissionCondition':
        """Create is_not_null condition convenience method."""
        return cls(field=field, operator=ConditionOperator.IS_NOT_NULL)
    
    def _identity(self) -> tuple:
        return (self.field, self.operator, _typed(self.value), self.description)
    
    def __eq__(self, other: object) -> bool:
        """Equality by field, operator, typed value and description."""
        if not isinstance(other, PermissionCondition):
            return NotImplemented
        return self._identity() == other._identity()
    
    def __hash__(self) -> int:
        return hash(self._identity())
    
    def __str__(self) -> str:
        value = list(self.value) if isinstance(self.value, tuple) else self.value
        return f"{self.field} {self.operator.value} {json.dumps(value)}"

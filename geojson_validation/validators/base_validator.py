"""
Base validator interface and result formatting for geojson-validation
"""

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, Callable, Dict, List, Optional, Tuple, Union

from ..exceptions import GeoJSONInvalidError

# Result of a public checker: a bool, or the error list in trace mode
CheckResult = Union[bool, List[str]]

# Inner checkers take (value, context) and always return the full error list
ErrorCheck = Callable[..., List[str]]


@dataclass
class ValidationResult:
    """Result of validation operation"""

    is_valid: bool
    message: str = ""
    normalized_value: Any = None
    metadata: Dict[str, Any] = field(default_factory=dict)
    errors: List[str] = field(default_factory=list)

    @classmethod
    def from_errors(
        cls, value: Any, errors: List[str], metadata: Optional[Dict[str, Any]] = None
    ) -> "ValidationResult":
        """Build a result from a detailed error list"""
        if errors:
            message = f"{len(errors)} validation error(s): {errors[0]}"
        else:
            message = "GeoJSON validation passed"
        return cls(
            is_valid=not errors,
            message=message,
            normalized_value=value,
            metadata=dict(metadata or {}),
            errors=list(errors),
        )

    @property
    def error(self) -> Optional[str]:
        """Get error message if validation failed"""
        return self.message if not self.is_valid else None

    def to_tuple(self) -> Tuple[bool, str, Any]:
        """Convert to (is_valid, message, value) tuple"""
        return (self.is_valid, self.message, self.normalized_value)

    def raise_for_errors(self) -> None:
        """Raise GeoJSONInvalidError if validation failed"""
        if not self.is_valid:
            raise GeoJSONInvalidError(self.errors, self.metadata.get("type"))


def format_result(errors: List[str], trace: bool = False) -> CheckResult:
    """
    Turn an accumulated error list into the public return value

    Args:
        errors: Detailed error messages
        trace: Return the error list instead of a boolean

    Returns:
        A copy of ``errors`` when tracing, otherwise True iff it is empty
    """
    if trace:
        return list(errors)
    return not errors


def prefix_errors(index: int, errors: List[str]) -> List[str]:
    return [f"at {index}: {error}" for error in errors]


def collect_indexed(items: List[Any], check: ErrorCheck, ctx: Any) -> List[str]:
    """Run ``check`` on every item, prefixing failures with their index"""
    errors: List[str] = []
    for index, item in enumerate(items):
        errors.extend(prefix_errors(index, check(item, ctx)))
    return errors


def is_array(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def is_object(value: Any) -> bool:
    return isinstance(value, dict)


def is_number(value: Any) -> bool:
    """Finite int, float or Decimal, booleans excluded"""
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    if isinstance(value, float):
        return math.isfinite(value)
    if isinstance(value, Decimal):
        return value.is_finite()
    return False


class BaseValidator(ABC):
    """Abstract base class for validators"""

    @abstractmethod
    def validate(
        self, value: Any, constraints: Optional[Dict[str, Any]] = None
    ) -> ValidationResult:
        """
        Validate a value against constraints

        Args:
            value: The value to validate
            constraints: Optional constraints to apply

        Returns:
            ValidationResult object
        """
        pass

    def is_supported_type(self, data_type: str) -> bool:
        """
        Check if this validator supports the given data type

        Args:
            data_type: The data type to check

        Returns:
            True if supported, False otherwise
        """
        return data_type in self.get_supported_types()

    @abstractmethod
    def get_supported_types(self) -> List[str]:
        """
        Get list of supported data types

        Returns:
            List of supported type names
        """
        pass

    def get_type_info(self) -> Dict[str, Any]:
        """
        Get information about this validator

        Returns:
            Dictionary with validator metadata
        """
        return {
            "name": self.__class__.__name__,
            "supported_types": self.get_supported_types(),
            "description": self.__class__.__doc__ or "No description available",
        }

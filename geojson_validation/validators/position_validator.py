"""
Position and bbox checkers
"""

import json
from typing import Any, List

from ..models import GeoJSONType
from .base_validator import is_array, is_number
from .context import ValidationContext


def _describe(item: Any) -> str:
    return json.dumps(item, default=str)


def position_errors(value: Any, ctx: ValidationContext) -> List[str]:
    """
    Check a single position

    A position is an array of at least two elements. In strict mode every
    element must also be a finite number, and each offending element is
    reported.
    """
    errors: List[str] = []

    if not is_array(value):
        errors.append("Position must be an array")
    elif len(value) < 2:
        errors.append("Position must be at least two elements")
    elif ctx.strict_positions:
        for index, item in enumerate(value):
            if not is_number(item):
                errors.append(
                    f"Position must only contain numbers. Item {_describe(item)} at index {index} is invalid."
                )

    return errors + ctx.registry.apply(GeoJSONType.POSITION, value)


def bbox_errors(value: Any, ctx: ValidationContext) -> List[str]:
    """Check a bbox: an array of 2*n elements. Element values are not inspected."""
    errors: List[str] = []

    if not is_array(value):
        errors.append("bbox must be an array")
    elif len(value) % 2 != 0:
        errors.append("bbox, must be a 2*n array")

    return errors + ctx.registry.apply(GeoJSONType.BBOX, value)

"""
Shared object-shape checks for GeoJSON objects
"""

from typing import Any, List, Optional

from ..models import GeoJSONType
from .base_validator import ErrorCheck, is_object
from .context import ValidationContext
from .position_validator import bbox_errors

NOT_AN_OBJECT = "must be a JSON Object"


def missing_member(name: str) -> str:
    return f"must have a member with the name '{name}'"


def object_header_errors(value: dict, expected_type: GeoJSONType, ctx: ValidationContext) -> List[str]:
    """Check the optional ``bbox`` member and the ``type`` discriminant"""
    errors: List[str] = []

    if "bbox" in value:
        errors.extend(bbox_errors(value["bbox"], ctx))

    if "type" in value:
        if value["type"] != expected_type.value:
            errors.append(f"type must be '{expected_type.value}'")
    else:
        errors.append(missing_member("type"))

    return errors


def object_shape_errors(
    value: Any,
    expected_type: GeoJSONType,
    ctx: ValidationContext,
    coordinate_check: Optional[ErrorCheck] = None,
) -> List[str]:
    """
    Validate the common skeleton of a GeoJSON object

    Args:
        value: Raw decoded value
        expected_type: Required value of the ``type`` member
        ctx: Validation context
        coordinate_check: Checker for the ``coordinates`` member, if the
            object carries one

    Returns:
        Error messages, including those of any custom validator registered
        for ``expected_type``
    """
    if not is_object(value):
        return [NOT_AN_OBJECT]

    errors = object_header_errors(value, expected_type, ctx)

    if coordinate_check is not None:
        if "coordinates" in value:
            errors.extend(coordinate_check(value["coordinates"], ctx))
        else:
            errors.append(missing_member("coordinates"))

    return errors + ctx.registry.apply(expected_type, value)

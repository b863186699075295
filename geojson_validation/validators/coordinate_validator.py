"""
Coordinate payload checkers

Each "multi" shape is an array of the shape one level below it, so the
checkers compose: MultiPoint is an array of positions, MultiLineString an
array of LineString coordinates, Polygon an array of linear rings and
MultiPolygon an array of Polygon coordinates.
"""

from typing import Any, List

from .base_validator import ErrorCheck, collect_indexed, is_array
from .context import ValidationContext
from .position_validator import position_errors


def coordinate_array_errors(value: Any, element_check: ErrorCheck, ctx: ValidationContext) -> List[str]:
    """Apply ``element_check`` to every element of a coordinate array"""
    if not is_array(value):
        return ["coordinates must be an array"]
    return collect_indexed(value, element_check, ctx)


def point_coordinate_errors(value: Any, ctx: ValidationContext) -> List[str]:
    errors = position_errors(value, ctx)
    if errors:
        return ["Coordinates must be a single position"] + errors
    return []


def multi_point_coordinate_errors(value: Any, ctx: ValidationContext) -> List[str]:
    return coordinate_array_errors(value, position_errors, ctx)


def line_string_coordinate_errors(value: Any, ctx: ValidationContext) -> List[str]:
    """LineString coordinates: two or more positions"""
    if is_array(value) and len(value) <= 1:
        return ["coordinates must have at least two elements"]
    return coordinate_array_errors(value, position_errors, ctx)


def multi_line_string_coordinate_errors(value: Any, ctx: ValidationContext) -> List[str]:
    return coordinate_array_errors(value, line_string_coordinate_errors, ctx)


def _positions_equal(first: Any, last: Any) -> bool:
    # Element-wise over all dimensions; 1 and 1.0 compare equal
    return list(first) == list(last)


def linear_ring_errors(value: Any, ctx: ValidationContext) -> List[str]:
    """
    Check one linear ring of a Polygon

    A ring holds at least four positions and its first and last positions
    are equal. Closure is only checked once everything else passed.
    """
    if not is_array(value):
        return ["coordinates must be an array"]

    errors: List[str] = []
    if len(value) < 4:
        errors.append("coordinates must have at least four positions")

    errors.extend(collect_indexed(value, position_errors, ctx))

    if not errors and not _positions_equal(value[0], value[-1]):
        errors.append("The first and last positions must be equivalent")

    return errors


def polygon_coordinate_errors(value: Any, ctx: ValidationContext) -> List[str]:
    return coordinate_array_errors(value, linear_ring_errors, ctx)


def multi_polygon_coordinate_errors(value: Any, ctx: ValidationContext) -> List[str]:
    return coordinate_array_errors(value, polygon_coordinate_errors, ctx)

"""
Geometry object validators and the geometry dispatcher
"""

from typing import Any, Dict, List

from ..models import GEOMETRY_TYPES, GeoJSONType
from .base_validator import ErrorCheck, collect_indexed, is_array, is_object
from .context import ValidationContext
from .coordinate_validator import (
    line_string_coordinate_errors,
    multi_line_string_coordinate_errors,
    multi_point_coordinate_errors,
    multi_polygon_coordinate_errors,
    point_coordinate_errors,
    polygon_coordinate_errors,
)
from .object_validator import NOT_AN_OBJECT, missing_member, object_header_errors, object_shape_errors


def _one_of(types) -> str:
    names = [f'"{t.value}"' for t in types]
    return ", ".join(names[:-1]) + " or " + names[-1]


UNKNOWN_GEOMETRY_TYPE = f"type must be one of: {_one_of(GEOMETRY_TYPES)}"


def point_errors(value: Any, ctx: ValidationContext) -> List[str]:
    return object_shape_errors(value, GeoJSONType.POINT, ctx, point_coordinate_errors)


def multi_point_errors(value: Any, ctx: ValidationContext) -> List[str]:
    return object_shape_errors(value, GeoJSONType.MULTI_POINT, ctx, multi_point_coordinate_errors)


def line_string_errors(value: Any, ctx: ValidationContext) -> List[str]:
    return object_shape_errors(value, GeoJSONType.LINE_STRING, ctx, line_string_coordinate_errors)


def multi_line_string_errors(value: Any, ctx: ValidationContext) -> List[str]:
    return object_shape_errors(
        value, GeoJSONType.MULTI_LINE_STRING, ctx, multi_line_string_coordinate_errors
    )


def polygon_errors(value: Any, ctx: ValidationContext) -> List[str]:
    return object_shape_errors(value, GeoJSONType.POLYGON, ctx, polygon_coordinate_errors)


def multi_polygon_errors(value: Any, ctx: ValidationContext) -> List[str]:
    return object_shape_errors(value, GeoJSONType.MULTI_POLYGON, ctx, multi_polygon_coordinate_errors)


def geometry_collection_errors(value: Any, ctx: ValidationContext) -> List[str]:
    """A GeometryCollection carries a ``geometries`` array instead of coordinates"""
    if not is_object(value):
        return [NOT_AN_OBJECT]

    errors = object_header_errors(value, GeoJSONType.GEOMETRY_COLLECTION, ctx)

    if "geometries" in value:
        if is_array(value["geometries"]):
            errors.extend(collect_indexed(value["geometries"], geometry_object_errors, ctx))
        else:
            errors.append("'geometries' must be an array")
    else:
        errors.append(missing_member("geometries"))

    return errors + ctx.registry.apply(GeoJSONType.GEOMETRY_COLLECTION, value)


GEOMETRY_CHECKS: Dict[GeoJSONType, ErrorCheck] = {
    GeoJSONType.POINT: point_errors,
    GeoJSONType.MULTI_POINT: multi_point_errors,
    GeoJSONType.LINE_STRING: line_string_errors,
    GeoJSONType.MULTI_LINE_STRING: multi_line_string_errors,
    GeoJSONType.POLYGON: polygon_errors,
    GeoJSONType.MULTI_POLYGON: multi_polygon_errors,
    GeoJSONType.GEOMETRY_COLLECTION: geometry_collection_errors,
}


def geometry_object_errors(value: Any, ctx: ValidationContext) -> List[str]:
    """Route a geometry to its validator by its ``type`` member"""
    if not is_object(value):
        return [NOT_AN_OBJECT]

    if "type" not in value:
        errors = [missing_member("type")]
    else:
        check = GEOMETRY_CHECKS.get(GeoJSONType.from_name(value["type"]))
        if check is not None:
            return check(value, ctx)
        errors = [UNKNOWN_GEOMETRY_TYPE]

    return errors + ctx.registry.apply(GeoJSONType.GEOMETRY_OBJECT, value)

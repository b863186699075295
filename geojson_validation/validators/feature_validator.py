"""
Feature and FeatureCollection validators
"""

from typing import Any, List, Optional

from ..models import GeoJSONType
from .base_validator import collect_indexed, is_array, is_object
from .context import ValidationContext
from .geometry_validator import geometry_object_errors
from .object_validator import NOT_AN_OBJECT, missing_member, object_header_errors


def feature_errors(
    value: Any,
    ctx: ValidationContext,
    make_properties_required: Optional[bool] = None,
) -> List[str]:
    """
    Validate a Feature

    ``geometry`` must be present and is either null or a valid geometry.
    ``properties`` must be present when required; its contents are never
    inspected and null is accepted.

    Args:
        value: Raw decoded value
        ctx: Validation context
        make_properties_required: Overrides the context's properties policy
    """
    if not is_object(value):
        return [NOT_AN_OBJECT]

    errors = object_header_errors(value, GeoJSONType.FEATURE, ctx)

    if make_properties_required is None:
        make_properties_required = ctx.require_feature_properties
    if make_properties_required and "properties" not in value:
        errors.append(missing_member("properties"))

    if "geometry" in value:
        if value["geometry"] is not None:
            errors.extend(geometry_object_errors(value["geometry"], ctx))
    else:
        errors.append(missing_member("geometry"))

    return errors + ctx.registry.apply(GeoJSONType.FEATURE, value)


def feature_collection_errors(value: Any, ctx: ValidationContext) -> List[str]:
    if not is_object(value):
        return [NOT_AN_OBJECT]

    errors = object_header_errors(value, GeoJSONType.FEATURE_COLLECTION, ctx)

    if "features" in value:
        if is_array(value["features"]):
            errors.extend(collect_indexed(value["features"], feature_errors, ctx))
        else:
            errors.append("'features' must be an array")
    else:
        errors.append(missing_member("features"))

    return errors + ctx.registry.apply(GeoJSONType.FEATURE_COLLECTION, value)

"""
GeoJSON validator: top-level dispatch and the public checker API

Every public checker takes a ``trace`` flag. With ``trace=False`` (the
default) it returns True iff the value is valid; with ``trace=True`` it
returns the list of error messages, empty on success.
"""

import logging
import threading
from typing import Any, Dict, List, Optional, Union

from ..config.settings import GeoJSONValidationSettings, get_settings
from ..exceptions import UnknownGeoJSONTypeError
from ..models import GeoJSONType
from .base_validator import BaseValidator, CheckResult, ErrorCheck, ValidationResult, format_result, is_object
from .context import ValidationContext
from .coordinate_validator import (
    line_string_coordinate_errors,
    multi_line_string_coordinate_errors,
    multi_point_coordinate_errors,
    multi_polygon_coordinate_errors,
    polygon_coordinate_errors,
)
from .custom_registry import CustomValidator, CustomValidatorRegistry, get_default_registry
from .feature_validator import feature_collection_errors, feature_errors
from .geometry_validator import GEOMETRY_CHECKS, geometry_object_errors
from .object_validator import NOT_AN_OBJECT, missing_member
from .position_validator import bbox_errors, position_errors

logger = logging.getLogger(__name__)

UNKNOWN_GEOJSON_TYPE = (
    'type must be one of: "Point", "MultiPoint", "LineString", "MultiLineString", '
    '"Polygon", "MultiPolygon", "GeometryCollection", "Feature", or "FeatureCollection"'
)

FEATURE_CHECKS: Dict[GeoJSONType, ErrorCheck] = {
    GeoJSONType.FEATURE: feature_errors,
    GeoJSONType.FEATURE_COLLECTION: feature_collection_errors,
}


def geojson_object_errors(value: Any, ctx: ValidationContext) -> List[str]:
    """Route any GeoJSON object by its ``type``, Feature kinds first"""
    if not is_object(value):
        return [NOT_AN_OBJECT]

    if "type" not in value:
        errors = [missing_member("type")]
    else:
        geojson_type = GeoJSONType.from_name(value["type"])
        check = FEATURE_CHECKS.get(geojson_type) or GEOMETRY_CHECKS.get(geojson_type)
        if check is not None:
            return check(value, ctx)
        errors = [UNKNOWN_GEOJSON_TYPE]

    return errors + ctx.registry.apply(GeoJSONType.GEOJSON, value)


# Checker for each type a validator instance can be bound to
TYPE_CHECKS: Dict[GeoJSONType, ErrorCheck] = {
    GeoJSONType.POSITION: position_errors,
    GeoJSONType.BBOX: bbox_errors,
    **GEOMETRY_CHECKS,
    **FEATURE_CHECKS,
    GeoJSONType.GEOMETRY_OBJECT: geometry_object_errors,
    GeoJSONType.GEOJSON: geojson_object_errors,
}


class GeoJSONValidator(BaseValidator):
    """Validator for GeoJSON objects

    Holds its own custom validator registry and settings, so independent
    instances never see each other's custom checks.
    """

    def __init__(
        self,
        object_type: Union[str, GeoJSONType] = GeoJSONType.GEOJSON,
        registry: Optional[CustomValidatorRegistry] = None,
        settings: Optional[GeoJSONValidationSettings] = None,
    ):
        resolved = GeoJSONType.from_name(object_type)
        if resolved is None:
            raise UnknownGeoJSONTypeError(object_type)
        self.object_type = resolved
        self.registry = registry if registry is not None else CustomValidatorRegistry()
        self.settings = settings or get_settings()

    @property
    def context(self) -> ValidationContext:
        return ValidationContext(
            registry=self.registry,
            strict_positions=self.settings.strict_positions,
            require_feature_properties=self.settings.require_feature_properties,
        )

    def define_custom(self, type_name: Union[str, GeoJSONType], fn: CustomValidator) -> None:
        """Register an extra check run after the built-in check for ``type_name``"""
        self.registry.register(type_name, fn)

    def errors_for(
        self,
        value: Any,
        object_type: Union[str, GeoJSONType, None] = None,
        make_properties_required: Optional[bool] = None,
    ) -> List[str]:
        """
        Collect every error for ``value`` checked as ``object_type``

        Args:
            value: Raw decoded value
            object_type: Type to check against; defaults to the bound type
            make_properties_required: Feature properties policy override

        Returns:
            Error messages, empty when valid
        """
        geojson_type = self.object_type if object_type is None else GeoJSONType.from_name(object_type)
        if geojson_type is None:
            raise UnknownGeoJSONTypeError(object_type)

        if geojson_type is GeoJSONType.FEATURE:
            return feature_errors(value, self.context, make_properties_required)
        return TYPE_CHECKS[geojson_type](value, self.context)

    def validate(
        self, value: Any, constraints: Optional[Dict[str, Any]] = None
    ) -> ValidationResult:
        """Validate a decoded value

        Supported constraints: ``type`` (GeoJSON type name to check against)
        and ``makePropertiesRequired`` (Feature properties policy).
        """
        if constraints is None:
            constraints = {}

        geojson_type = GeoJSONType.from_name(constraints.get("type", self.object_type))
        if geojson_type is None:
            return ValidationResult(
                is_valid=False, message=f"Unsupported GeoJSON type: {constraints.get('type')}"
            )

        errors = self.errors_for(
            value, geojson_type, constraints.get("makePropertiesRequired")
        )
        return ValidationResult.from_errors(
            value, errors, metadata={"type": geojson_type.value, "error_count": len(errors)}
        )

    def get_supported_types(self) -> List[str]:
        return [geojson_type.value for geojson_type in TYPE_CHECKS]

    # Public checkers

    def is_position(self, value: Any, trace: bool = False) -> CheckResult:
        return format_result(position_errors(value, self.context), trace)

    def is_bbox(self, value: Any, trace: bool = False) -> CheckResult:
        return format_result(bbox_errors(value, self.context), trace)

    def is_multi_point_coor(self, value: Any, trace: bool = False) -> CheckResult:
        return format_result(multi_point_coordinate_errors(value, self.context), trace)

    def is_line_string_coor(self, value: Any, trace: bool = False) -> CheckResult:
        return format_result(line_string_coordinate_errors(value, self.context), trace)

    def is_multi_line_string_coor(self, value: Any, trace: bool = False) -> CheckResult:
        return format_result(multi_line_string_coordinate_errors(value, self.context), trace)

    def is_polygon_coor(self, value: Any, trace: bool = False) -> CheckResult:
        return format_result(polygon_coordinate_errors(value, self.context), trace)

    def is_multi_polygon_coor(self, value: Any, trace: bool = False) -> CheckResult:
        return format_result(multi_polygon_coordinate_errors(value, self.context), trace)

    def is_point(self, value: Any, trace: bool = False) -> CheckResult:
        return format_result(self.errors_for(value, GeoJSONType.POINT), trace)

    def is_multi_point(self, value: Any, trace: bool = False) -> CheckResult:
        return format_result(self.errors_for(value, GeoJSONType.MULTI_POINT), trace)

    def is_line_string(self, value: Any, trace: bool = False) -> CheckResult:
        return format_result(self.errors_for(value, GeoJSONType.LINE_STRING), trace)

    def is_multi_line_string(self, value: Any, trace: bool = False) -> CheckResult:
        return format_result(self.errors_for(value, GeoJSONType.MULTI_LINE_STRING), trace)

    def is_polygon(self, value: Any, trace: bool = False) -> CheckResult:
        return format_result(self.errors_for(value, GeoJSONType.POLYGON), trace)

    def is_multi_polygon(self, value: Any, trace: bool = False) -> CheckResult:
        return format_result(self.errors_for(value, GeoJSONType.MULTI_POLYGON), trace)

    def is_geometry_collection(self, value: Any, trace: bool = False) -> CheckResult:
        return format_result(self.errors_for(value, GeoJSONType.GEOMETRY_COLLECTION), trace)

    def is_feature(
        self, value: Any, trace: bool = False, make_properties_required: Optional[bool] = None
    ) -> CheckResult:
        errors = self.errors_for(value, GeoJSONType.FEATURE, make_properties_required)
        return format_result(errors, trace)

    def is_feature_collection(self, value: Any, trace: bool = False) -> CheckResult:
        return format_result(self.errors_for(value, GeoJSONType.FEATURE_COLLECTION), trace)

    def is_geometry_object(self, value: Any, trace: bool = False) -> CheckResult:
        return format_result(self.errors_for(value, GeoJSONType.GEOMETRY_OBJECT), trace)

    def is_geojson_object(self, value: Any, trace: bool = False) -> CheckResult:
        return format_result(self.errors_for(value, GeoJSONType.GEOJSON), trace)

    valid = is_geojson_object


_default_validator: Optional[GeoJSONValidator] = None
_default_lock = threading.Lock()


def get_default_validator() -> GeoJSONValidator:
    """
    Get the process-wide validator behind the module-level functions

    It uses the process-wide custom registry and the global settings.
    """
    global _default_validator
    if _default_validator is None:
        with _default_lock:
            if _default_validator is None:
                settings = get_settings()
                _default_validator = GeoJSONValidator(
                    registry=get_default_registry(), settings=settings
                )
                logger.debug("Created default GeoJSON validator")
    return _default_validator


def reset_default_validator() -> None:
    """Drop the default validator so the next call picks up current settings"""
    global _default_validator
    with _default_lock:
        _default_validator = None


# Module-level checkers backed by the default validator


def is_position(value: Any, trace: bool = False) -> CheckResult:
    """Check a single position: an array of two or more finite numbers"""
    return get_default_validator().is_position(value, trace)


def is_bbox(value: Any, trace: bool = False) -> CheckResult:
    """Check a bbox: an array of 2*n elements"""
    return get_default_validator().is_bbox(value, trace)


def is_multi_point_coor(value: Any, trace: bool = False) -> CheckResult:
    return get_default_validator().is_multi_point_coor(value, trace)


def is_line_string_coor(value: Any, trace: bool = False) -> CheckResult:
    return get_default_validator().is_line_string_coor(value, trace)


def is_multi_line_string_coor(value: Any, trace: bool = False) -> CheckResult:
    return get_default_validator().is_multi_line_string_coor(value, trace)


def is_polygon_coor(value: Any, trace: bool = False) -> CheckResult:
    return get_default_validator().is_polygon_coor(value, trace)


def is_multi_polygon_coor(value: Any, trace: bool = False) -> CheckResult:
    return get_default_validator().is_multi_polygon_coor(value, trace)


def is_point(value: Any, trace: bool = False) -> CheckResult:
    return get_default_validator().is_point(value, trace)


def is_multi_point(value: Any, trace: bool = False) -> CheckResult:
    return get_default_validator().is_multi_point(value, trace)


def is_line_string(value: Any, trace: bool = False) -> CheckResult:
    return get_default_validator().is_line_string(value, trace)


def is_multi_line_string(value: Any, trace: bool = False) -> CheckResult:
    return get_default_validator().is_multi_line_string(value, trace)


def is_polygon(value: Any, trace: bool = False) -> CheckResult:
    return get_default_validator().is_polygon(value, trace)


def is_multi_polygon(value: Any, trace: bool = False) -> CheckResult:
    return get_default_validator().is_multi_polygon(value, trace)


def is_geometry_collection(value: Any, trace: bool = False) -> CheckResult:
    return get_default_validator().is_geometry_collection(value, trace)


def is_feature(
    value: Any, trace: bool = False, make_properties_required: Optional[bool] = None
) -> CheckResult:
    """
    Check a Feature

    Args:
        value: Raw decoded value
        trace: Return the error list instead of a boolean
        make_properties_required: Require a ``properties`` member; None
            falls back to the ``require_feature_properties`` setting
    """
    return get_default_validator().is_feature(value, trace, make_properties_required)


def is_feature_collection(value: Any, trace: bool = False) -> CheckResult:
    return get_default_validator().is_feature_collection(value, trace)


def is_geometry_object(value: Any, trace: bool = False) -> CheckResult:
    """Check any of the seven geometry kinds, routed by ``type``"""
    return get_default_validator().is_geometry_object(value, trace)


def is_geojson_object(value: Any, trace: bool = False) -> CheckResult:
    """Check any GeoJSON object: a geometry, Feature or FeatureCollection"""
    return get_default_validator().is_geojson_object(value, trace)


valid = is_geojson_object


def define_custom(type_name: Union[str, GeoJSONType], fn: CustomValidator) -> None:
    """Register a custom check on the process-wide registry"""
    get_default_registry().register(type_name, fn)


__all__ = [
    "GeoJSONValidator",
    "define_custom",
    "geojson_object_errors",
    "get_default_validator",
    "reset_default_validator",
    "is_position",
    "is_bbox",
    "is_multi_point_coor",
    "is_line_string_coor",
    "is_multi_line_string_coor",
    "is_polygon_coor",
    "is_multi_polygon_coor",
    "is_point",
    "is_multi_point",
    "is_line_string",
    "is_multi_line_string",
    "is_polygon",
    "is_multi_polygon",
    "is_geometry_collection",
    "is_feature",
    "is_feature_collection",
    "is_geometry_object",
    "is_geojson_object",
    "valid",
]

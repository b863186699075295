"""
Validators for geojson-validation
"""

from typing import Dict, Optional, Type

from ..models import GeoJSONType
from .base_validator import BaseValidator, CheckResult, ValidationResult, format_result
from .context import ValidationContext
from .custom_registry import CustomValidatorRegistry, get_default_registry
from .geojson_validator import (
    GeoJSONValidator,
    define_custom,
    get_default_validator,
    is_bbox,
    is_feature,
    is_feature_collection,
    is_geojson_object,
    is_geometry_collection,
    is_geometry_object,
    is_line_string,
    is_line_string_coor,
    is_multi_line_string,
    is_multi_line_string_coor,
    is_multi_point,
    is_multi_point_coor,
    is_multi_polygon,
    is_multi_polygon_coor,
    is_point,
    is_polygon,
    is_polygon_coor,
    is_position,
    reset_default_validator,
    valid,
)

# Validators registered by name (lower-cased); GeoJSON type names resolve without an entry
_VALIDATOR_REGISTRY: Dict[str, Type[BaseValidator]] = {}

_TYPE_ALIASES: Dict[str, GeoJSONType] = {"geometry": GeoJSONType.GEOMETRY_OBJECT}


def get_validator(data_type: str) -> Optional[BaseValidator]:
    """
    Get validator instance for a GeoJSON type name

    GeoJSON validators are bound to the requested type and share the
    process-wide custom registry.

    Args:
        data_type: The type name, case-insensitive (e.g. "polygon")

    Returns:
        Validator instance or None if not found
    """
    key = data_type.lower()
    validator_class = _VALIDATOR_REGISTRY.get(key)
    if validator_class is not None:
        return validator_class()

    geojson_type = GeoJSONType.lookup(data_type) or _TYPE_ALIASES.get(key)
    if geojson_type is None:
        return None
    return GeoJSONValidator(object_type=geojson_type, registry=get_default_registry())


def register_validator(data_type: str, validator_class: Type[BaseValidator]):
    """
    Register a new validator

    Args:
        data_type: The data type name
        validator_class: The validator class
    """
    _VALIDATOR_REGISTRY[data_type.lower()] = validator_class


__all__ = [
    "BaseValidator",
    "CheckResult",
    "CustomValidatorRegistry",
    "GeoJSONValidator",
    "ValidationContext",
    "ValidationResult",
    "define_custom",
    "format_result",
    "get_default_registry",
    "get_default_validator",
    "get_validator",
    "register_validator",
    "reset_default_validator",
    "is_bbox",
    "is_feature",
    "is_feature_collection",
    "is_geojson_object",
    "is_geometry_collection",
    "is_geometry_object",
    "is_line_string",
    "is_line_string_coor",
    "is_multi_line_string",
    "is_multi_line_string_coor",
    "is_multi_point",
    "is_multi_point_coor",
    "is_multi_polygon",
    "is_multi_polygon_coor",
    "is_point",
    "is_polygon",
    "is_polygon_coor",
    "is_position",
    "valid",
]

"""
geojson-validation

Structural validation of decoded GeoJSON values: positions, bboxes, the
seven geometry kinds, Features and FeatureCollections.

    >>> from geojson_validation import valid, is_polygon
    >>> valid({"type": "Point", "coordinates": [2, 3]})
    True
    >>> is_polygon({"type": "Polygon", "coordinates": [[[0, 0], [1, 0], [0, 0]]]}, trace=True)
    ['at 0: coordinates must have at least four positions']
"""

from .exceptions import (
    GeoJSONInvalidError,
    GeoJSONValidationException,
    InvalidCustomValidatorError,
    UnknownGeoJSONTypeError,
)
from .models import GeoJSONType
from .validators import (
    CustomValidatorRegistry,
    GeoJSONValidator,
    ValidationResult,
    define_custom,
    get_default_registry,
    get_default_validator,
    get_validator,
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
    register_validator,
    reset_default_validator,
    valid,
)

__version__ = "0.1.0"

__all__ = [
    "GeoJSONType",
    "GeoJSONValidator",
    "CustomValidatorRegistry",
    "ValidationResult",
    "GeoJSONValidationException",
    "UnknownGeoJSONTypeError",
    "InvalidCustomValidatorError",
    "GeoJSONInvalidError",
    "define_custom",
    "get_default_registry",
    "get_default_validator",
    "get_validator",
    "register_validator",
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

"""
Exception definitions for geojson-validation
"""

from .base import (
    GeoJSONInvalidError,
    GeoJSONValidationException,
    InvalidCustomValidatorError,
    UnknownGeoJSONTypeError,
)

__all__ = [
    "GeoJSONValidationException",
    "UnknownGeoJSONTypeError",
    "InvalidCustomValidatorError",
    "GeoJSONInvalidError",
]

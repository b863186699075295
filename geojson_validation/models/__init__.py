"""
Data models for geojson-validation
"""

from .geojson_types import GEOMETRY_TYPES, GeoJSONType

__all__ = ["GeoJSONType", "GEOMETRY_TYPES"]

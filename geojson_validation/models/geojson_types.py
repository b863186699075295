"""
GeoJSON object type names
"""

from enum import Enum
from typing import Optional, Tuple, Union


class GeoJSONType(str, Enum):
    """GeoJSON object type enumeration

    The first nine members are the values a ``type`` member may carry. The
    remaining ones only name checkers so custom validators can attach to them.
    """

    POINT = "Point"
    MULTI_POINT = "MultiPoint"
    LINE_STRING = "LineString"
    MULTI_LINE_STRING = "MultiLineString"
    POLYGON = "Polygon"
    MULTI_POLYGON = "MultiPolygon"
    GEOMETRY_COLLECTION = "GeometryCollection"
    FEATURE = "Feature"
    FEATURE_COLLECTION = "FeatureCollection"

    # Checker names
    POSITION = "Position"
    BBOX = "Bbox"
    GEOMETRY_OBJECT = "GeometryObject"
    GEOJSON = "GeoJSON"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def from_name(cls, name: Union[str, "GeoJSONType"]) -> Optional["GeoJSONType"]:
        """Look up a member by its exact value, returning None when unknown"""
        if isinstance(name, cls):
            return name
        try:
            return cls(name)
        except (ValueError, TypeError):
            return None

    @classmethod
    def lookup(cls, name: str) -> Optional["GeoJSONType"]:
        """Case-insensitive lookup by value"""
        if isinstance(name, cls):
            return name
        if not isinstance(name, str):
            return None
        lowered = name.strip().lower()
        for member in cls:
            if member.value.lower() == lowered:
                return member
        return None


GEOMETRY_TYPES: Tuple[GeoJSONType, ...] = (
    GeoJSONType.POINT,
    GeoJSONType.MULTI_POINT,
    GeoJSONType.LINE_STRING,
    GeoJSONType.MULTI_LINE_STRING,
    GeoJSONType.POLYGON,
    GeoJSONType.MULTI_POLYGON,
    GeoJSONType.GEOMETRY_COLLECTION,
)

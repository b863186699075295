"""
Configuration package for geojson-validation
"""

from .settings import GeoJSONValidationSettings, get_settings, reload_settings

__all__ = ["GeoJSONValidationSettings", "get_settings", "reload_settings"]

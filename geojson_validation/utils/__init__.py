"""
Utility helpers for geojson-validation
"""

from .app_logger import LOG_FORMAT, PACKAGE_LOGGER, configure_logging

__all__ = ["LOG_FORMAT", "PACKAGE_LOGGER", "configure_logging"]

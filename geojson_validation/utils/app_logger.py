"""
Logging utilities for geojson-validation
Centralized logging configuration for the package namespace
"""

import logging
import sys
from typing import Optional, Union

from ..config.settings import get_settings

PACKAGE_LOGGER = "geojson_validation"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: Optional[Union[str, int]] = None) -> logging.Logger:
    """
    Configure logging for the package namespace.

    Nothing in the package calls this; applications opt in at startup.

    Module loggers (``logging.getLogger(__name__)``) propagate to the
    package logger configured here.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
            Defaults to the configured ``log_level`` setting.

    Returns:
        The package logger
    """
    if level is None:
        log_level = get_settings().log_level_value
    elif isinstance(level, str):
        log_level = getattr(logging, level.upper(), logging.INFO)
    else:
        log_level = level

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(log_level)

    # Only add handler if no handlers exist (avoid duplicate handlers)
    if not package_logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        package_logger.addHandler(handler)

    return package_logger

"""
Configuration for geojson-validation

Type-safe settings using Pydantic Settings. Values are read from environment
variables prefixed with ``GEOJSON_VALIDATION_`` and, when present, a local
``.env`` file.
"""

import logging

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class GeoJSONValidationSettings(BaseSettings):
    """Validation policy and logging settings"""

    model_config = SettingsConfigDict(
        env_prefix="GEOJSON_VALIDATION_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    require_feature_properties: bool = Field(
        default=True,
        description="Require a 'properties' member on Features unless the caller overrides it"
    )
    strict_positions: bool = Field(
        default=True,
        description="Require every position element to be a finite number"
    )
    log_level: str = Field(
        default="INFO",
        description="Log level for the geojson_validation logger"
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v):
        level = str(v or "INFO").strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(_LOG_LEVELS)}")
        return level

    @property
    def log_level_value(self) -> int:
        """Numeric logging level"""
        return getattr(logging, self.log_level)


settings = GeoJSONValidationSettings()


def get_settings() -> GeoJSONValidationSettings:
    """
    Get the global settings instance

    Returns:
        GeoJSONValidationSettings: The global settings instance
    """
    return settings


def reload_settings() -> GeoJSONValidationSettings:
    """
    Re-read settings from the environment

    Returns:
        GeoJSONValidationSettings: The new global settings instance
    """
    global settings
    settings = GeoJSONValidationSettings()
    return settings

from __future__ import annotations

import pytest

from geojson_validation import GeoJSONValidator, get_default_registry, reset_default_validator
from geojson_validation.config.settings import GeoJSONValidationSettings


@pytest.fixture
def settings() -> GeoJSONValidationSettings:
    """Default policy, independent of any GEOJSON_VALIDATION_* variables on the host."""
    return GeoJSONValidationSettings(
        require_feature_properties=True,
        strict_positions=True,
        log_level="INFO",
    )


@pytest.fixture
def validator(settings: GeoJSONValidationSettings) -> GeoJSONValidator:
    """Validator with its own empty custom registry."""
    return GeoJSONValidator(settings=settings)


@pytest.fixture(autouse=True)
def _isolate_default_validator():
    """Module-level define_custom() mutates process-wide state; undo it after each test."""
    yield
    get_default_registry().clear()
    reset_default_validator()

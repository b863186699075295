from __future__ import annotations

import pytest
from pydantic import ValidationError

from geojson_validation import get_default_validator, is_feature, is_position, reset_default_validator
from geojson_validation.config import settings as settings_module
from geojson_validation.config.settings import GeoJSONValidationSettings, get_settings, reload_settings


@pytest.fixture
def restore_settings():
    original = settings_module.settings
    yield
    settings_module.settings = original
    reset_default_validator()


def test_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("GEOJSON_VALIDATION_REQUIRE_FEATURE_PROPERTIES", "GEOJSON_VALIDATION_STRICT_POSITIONS",
                 "GEOJSON_VALIDATION_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)

    config = GeoJSONValidationSettings(_env_file=None)

    assert config.require_feature_properties is True
    assert config.strict_positions is True
    assert config.log_level == "INFO"


def test_environment_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("GEOJSON_VALIDATION_REQUIRE_FEATURE_PROPERTIES", "false")
    monkeypatch.setenv("GEOJSON_VALIDATION_STRICT_POSITIONS", "0")
    monkeypatch.setenv("GEOJSON_VALIDATION_LOG_LEVEL", "debug")

    config = GeoJSONValidationSettings(_env_file=None)

    assert config.require_feature_properties is False
    assert config.strict_positions is False
    assert config.log_level == "DEBUG"
    assert config.log_level_value == 10


def test_invalid_log_level_is_rejected() -> None:
    with pytest.raises(ValidationError):
        GeoJSONValidationSettings(log_level="chatty", _env_file=None)


def test_reload_settings_feeds_the_default_validator(monkeypatch: pytest.MonkeyPatch, restore_settings) -> None:
    feature = {"type": "Feature", "geometry": None}
    assert is_feature(feature) is False

    monkeypatch.setenv("GEOJSON_VALIDATION_REQUIRE_FEATURE_PROPERTIES", "false")
    monkeypatch.setenv("GEOJSON_VALIDATION_STRICT_POSITIONS", "false")
    reloaded = reload_settings()
    reset_default_validator()

    assert get_settings() is reloaded
    assert settings_module.settings is reloaded
    assert get_default_validator().settings is reloaded
    assert is_feature(feature) is True
    assert is_position(["a", "b"]) is True

"""
Unit tests for custom validators layered on the built-in checks
"""

import threading

import pytest

from geojson_validation import (
    CustomValidatorRegistry,
    GeoJSONType,
    GeoJSONValidator,
    InvalidCustomValidatorError,
    UnknownGeoJSONTypeError,
    define_custom,
    get_default_registry,
    is_point,
    valid,
)

POINT = {"type": "Point", "coordinates": [2, 3]}


def _require_name(feature):
    if not (feature.get("properties") or {}).get("name"):
        return "Feature must have a name"
    return None


class TestCustomValidatorRegistry:

    def setup_method(self):
        self.registry = CustomValidatorRegistry()

    def test_register_and_get(self):
        self.registry.register("Point", _require_name)
        assert self.registry.get("Point") is _require_name
        assert self.registry.get(GeoJSONType.POINT) is _require_name
        assert "Point" in self.registry
        assert len(self.registry) == 1

    def test_later_registration_replaces_earlier(self):
        first = lambda value: "first"
        second = lambda value: "second"
        self.registry.register("Point", first)
        self.registry.register(GeoJSONType.POINT, second)
        assert self.registry.apply("Point", POINT) == ["second"]

    def test_unknown_type_name_is_rejected(self):
        with pytest.raises(UnknownGeoJSONTypeError) as exc_info:
            self.registry.register("Circle", _require_name)
        assert exc_info.value.code == "UNKNOWN_GEOJSON_TYPE"

    def test_type_names_are_case_sensitive(self):
        with pytest.raises(UnknownGeoJSONTypeError):
            self.registry.register("point", _require_name)

    def test_non_callable_is_rejected(self):
        with pytest.raises(InvalidCustomValidatorError) as exc_info:
            self.registry.register("Point", "not callable")
        assert exc_info.value.details == {"type_name": "Point"}

    def test_result_interpretation(self):
        self.registry.register("Point", lambda value: ["a", "b"])
        self.registry.register("Polygon", lambda value: ("c",))
        self.registry.register("Feature", lambda value: 42)
        self.registry.register("Bbox", lambda value: None)
        assert self.registry.apply("Point", POINT) == ["a", "b"]
        assert self.registry.apply("Polygon", {}) == ["c"]
        assert self.registry.apply("Feature", {}) == []
        assert self.registry.apply("Bbox", []) == []

    def test_apply_without_registration(self):
        assert self.registry.apply("Point", POINT) == []

    def test_raised_exception_becomes_an_error(self):
        def broken(value):
            raise ValueError("boom")

        self.registry.register("Point", broken)
        assert self.registry.apply("Point", POINT) == ["Problem with custom definition for Point: boom"]

    def test_unregister_and_clear(self):
        self.registry.register("Point", _require_name)
        self.registry.register("Feature", _require_name)
        assert self.registry.unregister("Point") is True
        assert self.registry.unregister("Point") is False
        assert self.registry.registered_types() == [GeoJSONType.FEATURE]
        self.registry.clear()
        assert len(self.registry) == 0

    def test_concurrent_registration(self):
        names = [t for t in GeoJSONType]

        def register(type_name):
            for _ in range(50):
                self.registry.register(type_name, lambda value, t=type_name: t.value)

        threads = [threading.Thread(target=register, args=(name,)) for name in names]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert sorted(t.value for t in self.registry.registered_types()) == sorted(t.value for t in names)


class TestCustomValidatorsInValidation:

    def test_runs_after_builtin_checks(self, validator):
        validator.define_custom("Feature", _require_name)
        feature = {"type": "Feature", "geometry": None, "properties": {}}
        assert validator.is_feature(feature, True) == ["Feature must have a name"]

        named = {"type": "Feature", "geometry": None, "properties": {"name": "x"}}
        assert validator.is_feature(named) is True

    def test_runs_even_when_builtin_checks_fail(self, validator):
        validator.define_custom("Point", lambda value: "custom")
        assert validator.is_point({"type": "Point"}, True) == [
            "must have a member with the name 'coordinates'",
            "custom",
        ]

    def test_not_run_when_value_is_not_an_object(self, validator):
        validator.define_custom("Point", lambda value: "custom")
        assert validator.is_point([], True) == ["must be a JSON Object"]

    def test_position_validator_applies_inside_arrays(self, validator):
        validator.define_custom("Position", lambda pos: "too high" if len(pos) > 2 and pos[2] > 100 else None)
        line = {"type": "LineString", "coordinates": [[0, 0, 10], [1, 1, 500]]}
        assert validator.is_line_string(line, True) == ["at 1: too high"]

    def test_fault_does_not_abort_sibling_validation(self, validator):
        def broken(value):
            raise RuntimeError("bad plugin")

        validator.define_custom("Point", broken)
        collection = {
            "type": "GeometryCollection",
            "geometries": [POINT, {"type": "LineString", "coordinates": [[0, 0]]}],
        }
        assert validator.is_geometry_collection(collection, True) == [
            "at 0: Problem with custom definition for Point: bad plugin",
            "at 1: coordinates must have at least two elements",
        ]

    def test_dispatcher_fallback_keys(self, validator):
        validator.define_custom("GeoJSON", lambda value: "geojson fallback")
        validator.define_custom("GeometryObject", lambda value: "geometry fallback")
        assert validator.is_geojson_object({"type": "Circle"}, True)[-1] == "geojson fallback"
        assert validator.is_geometry_object({"type": "Circle"}, True)[-1] == "geometry fallback"
        assert validator.is_geojson_object(POINT) is True

    def test_instances_do_not_share_registries(self, validator, settings):
        validator.define_custom("Point", lambda value: "only here")
        other = GeoJSONValidator(settings=settings)
        assert validator.is_point(POINT) is False
        assert other.is_point(POINT) is True


class TestDefineCustom:
    """Module-level registration affects the module-level checkers"""

    def test_define_custom_uses_process_registry(self):
        define_custom("Point", lambda value: "rejected")
        assert get_default_registry().get("Point") is not None
        assert is_point(POINT) is False
        assert valid(POINT) is False

    def test_registry_is_cleared_between_tests(self):
        assert len(get_default_registry()) == 0
        assert is_point(POINT) is True

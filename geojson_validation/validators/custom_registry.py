"""
Registry of caller-supplied validators layered on the built-in checks.

A custom validator receives the raw value after the built-in structural
check for its type has run. It may return a string (one extra error), a
list or tuple of strings (several extra errors) or anything else (no
error). Exceptions it raises are reported as a single error.
"""

import logging
import threading
from types import MappingProxyType
from typing import Any, Callable, List, Mapping, Optional, Union

from ..exceptions import InvalidCustomValidatorError, UnknownGeoJSONTypeError
from ..models import GeoJSONType

logger = logging.getLogger(__name__)

CustomValidator = Callable[[Any], Any]
TypeName = Union[str, GeoJSONType]


def _resolve_type(type_name: TypeName) -> GeoJSONType:
    geojson_type = GeoJSONType.from_name(type_name)
    if geojson_type is None:
        raise UnknownGeoJSONTypeError(type_name)
    return geojson_type


class CustomValidatorRegistry:
    """Custom validators keyed by GeoJSON type.

    Writers are serialized by a lock and publish a fresh read-only mapping;
    readers use whichever snapshot is current without locking.
    """

    def __init__(self, validators: Optional[Mapping[TypeName, CustomValidator]] = None):
        self._lock = threading.Lock()
        self._validators: Mapping[GeoJSONType, CustomValidator] = MappingProxyType({})
        for type_name, fn in (validators or {}).items():
            self.register(type_name, fn)

    def register(self, type_name: TypeName, fn: CustomValidator) -> None:
        """Store ``fn`` for ``type_name``, replacing any earlier one"""
        geojson_type = _resolve_type(type_name)
        if not callable(fn):
            raise InvalidCustomValidatorError(geojson_type.value, fn)

        with self._lock:
            updated = dict(self._validators)
            updated[geojson_type] = fn
            self._validators = MappingProxyType(updated)
        logger.debug(f"Registered custom validator for {geojson_type.value}")

    def unregister(self, type_name: TypeName) -> bool:
        """Remove the validator for ``type_name``; returns whether one existed"""
        geojson_type = _resolve_type(type_name)
        with self._lock:
            if geojson_type not in self._validators:
                return False
            updated = dict(self._validators)
            del updated[geojson_type]
            self._validators = MappingProxyType(updated)
        logger.debug(f"Removed custom validator for {geojson_type.value}")
        return True

    def clear(self) -> None:
        with self._lock:
            self._validators = MappingProxyType({})

    def get(self, type_name: TypeName) -> Optional[CustomValidator]:
        geojson_type = GeoJSONType.from_name(type_name)
        if geojson_type is None:
            return None
        return self._validators.get(geojson_type)

    def registered_types(self) -> List[GeoJSONType]:
        return list(self._validators)

    def apply(self, type_name: TypeName, value: Any) -> List[str]:
        """
        Run the custom validator registered for ``type_name``, if any

        Args:
            type_name: GeoJSON type the built-in check was for
            value: The raw value that was checked

        Returns:
            Additional error messages (empty when nothing is registered)
        """
        geojson_type = GeoJSONType.from_name(type_name)
        fn = self._validators.get(geojson_type) if geojson_type is not None else None
        if fn is None:
            return []

        try:
            result = fn(value)
        except Exception as e:
            logger.warning(f"Custom validator for {geojson_type.value} raised: {e}")
            return [f"Problem with custom definition for {geojson_type.value}: {e}"]

        if isinstance(result, str):
            return [result]
        if isinstance(result, (list, tuple)):
            return [str(message) for message in result]
        return []

    def __contains__(self, type_name: TypeName) -> bool:
        return self.get(type_name) is not None

    def __len__(self) -> int:
        return len(self._validators)


_default_registry = CustomValidatorRegistry()


def get_default_registry() -> CustomValidatorRegistry:
    """Get the process-wide registry used by the module-level checkers"""
    return _default_registry

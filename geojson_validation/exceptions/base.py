"""
Base exceptions for geojson-validation

Validation findings are returned as error lists, never raised. The exceptions
here cover invalid call patterns (bad registrations) and the opt-in
raise-on-invalid helper.
"""

from typing import Any, Dict, List, Optional


class GeoJSONValidationException(Exception):
    """Base exception for the package"""

    def __init__(self, message: str, code: str = "GEOJSON_VALIDATION_ERROR",
                 details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.code = code
        self.details = details or {}


class UnknownGeoJSONTypeError(GeoJSONValidationException):
    """Raised when a type name is not a known GeoJSON object type"""

    def __init__(self, type_name: Any):
        super().__init__(
            message=f"Unknown GeoJSON type: {type_name}",
            code="UNKNOWN_GEOJSON_TYPE",
            details={"type_name": type_name}
        )


class InvalidCustomValidatorError(GeoJSONValidationException):
    """Raised when a custom validator is not callable"""

    def __init__(self, type_name: str, validator: Any):
        super().__init__(
            message=f"Custom validator for {type_name} must be callable, got {type(validator).__name__}",
            code="INVALID_CUSTOM_VALIDATOR",
            details={"type_name": type_name}
        )


class GeoJSONInvalidError(GeoJSONValidationException):
    """Raised on request when a value fails validation"""

    def __init__(self, errors: List[str], object_type: Optional[str] = None):
        message = "GeoJSON validation failed"
        if object_type:
            message += f" for {object_type}"
        message += f": {'; '.join(errors)}"

        super().__init__(
            message=message,
            code="GEOJSON_INVALID",
            details={"errors": list(errors), "object_type": object_type}
        )
        self.errors = list(errors)

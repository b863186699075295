"""
Per-call validation context threaded through the checkers
"""

from dataclasses import dataclass

from .custom_registry import CustomValidatorRegistry


@dataclass(frozen=True)
class ValidationContext:
    """Registry and policy flags shared by one validation call"""

    registry: CustomValidatorRegistry
    strict_positions: bool = True
    require_feature_properties: bool = True

"""
flightfuel Validation

Provides:
- ValidationResult / Violation: failures reported as data
- PathValidator: mass and maneuver-sequence rules
"""

from .taxonomy import (
    ViolationField,
    Violation,
    ValidationResult,
)
from .path_validator import (
    PathValidator,
    validate,
)

__all__ = [
    # Taxonomy
    "ViolationField",
    "Violation",
    "ValidationResult",
    # Validator
    "PathValidator",
    "validate",
]

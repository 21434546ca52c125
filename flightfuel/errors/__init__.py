"""
errors/ - Error Taxonomy

Reason codes for validation failures (reported as data) and the exceptions
raised when host identifiers cannot be parsed.
"""

from .taxonomy import (
    ErrorCategory,
    ErrorCode,
    CATEGORY_BY_CODE,
    DEFAULT_MESSAGES,
    MASS_ERRORS,
    SEQUENCE_ERRORS,
    FlightFuelError,
    UnknownBodyError,
    UnknownActionError,
)

__all__ = [
    # Taxonomy
    "ErrorCategory",
    "ErrorCode",
    "CATEGORY_BY_CODE",
    "DEFAULT_MESSAGES",
    "MASS_ERRORS",
    "SEQUENCE_ERRORS",
    # Exceptions
    "FlightFuelError",
    "UnknownBodyError",
    "UnknownActionError",
]

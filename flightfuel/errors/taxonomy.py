"""
errors/taxonomy.py - Error classification system

Reason codes reported by the path validator, grouped into the mass and
sequence families, plus the exception hierarchy used where host-provided
identifiers are ingested.
"""

from __future__ import annotations
from enum import Enum
from typing import Any, Dict, List


class ErrorCategory(str, Enum):
    """Error families."""
    MASS = "mass"            # MassError
    SEQUENCE = "sequence"    # SequenceError


class ErrorCode(str, Enum):
    """
    Stable, machine-distinguishable reason codes.

    Declaration order is the reporting order of a ValidationResult.
    """

    # Mass (MassError)
    MASS_REQUIRED = "mass_required"
    MASS_MUST_BE_POSITIVE = "mass_must_be_positive"

    # Sequence (SequenceError)
    STEPS_EMPTY = "steps_empty"
    MUST_START_WITH_LAUNCH = "must_start_with_launch"
    MUST_END_WITH_LAND = "must_end_with_land"
    MUST_ALTERNATE = "must_alternate"
    LAUNCH_BODY_MISMATCH = "launch_body_mismatch"
    UNKNOWN_ACTION = "unknown_action"
    UNKNOWN_BODY = "unknown_body"

    @property
    def category(self) -> ErrorCategory:
        return CATEGORY_BY_CODE[self]

    @property
    def message(self) -> str:
        """Default human-readable message."""
        return DEFAULT_MESSAGES[self]

    @property
    def rank(self) -> int:
        """Position in the fixed reporting order."""
        return _ORDER[self]


CATEGORY_BY_CODE: Dict[ErrorCode, ErrorCategory] = {
    ErrorCode.MASS_REQUIRED: ErrorCategory.MASS,
    ErrorCode.MASS_MUST_BE_POSITIVE: ErrorCategory.MASS,
    ErrorCode.STEPS_EMPTY: ErrorCategory.SEQUENCE,
    ErrorCode.MUST_START_WITH_LAUNCH: ErrorCategory.SEQUENCE,
    ErrorCode.MUST_END_WITH_LAND: ErrorCategory.SEQUENCE,
    ErrorCode.MUST_ALTERNATE: ErrorCategory.SEQUENCE,
    ErrorCode.LAUNCH_BODY_MISMATCH: ErrorCategory.SEQUENCE,
    ErrorCode.UNKNOWN_ACTION: ErrorCategory.SEQUENCE,
    ErrorCode.UNKNOWN_BODY: ErrorCategory.SEQUENCE,
}

# Wording follows the messages shown by the calculator form
DEFAULT_MESSAGES: Dict[ErrorCode, str] = {
    ErrorCode.MASS_REQUIRED: "can't be blank",
    ErrorCode.MASS_MUST_BE_POSITIVE: "must be a positive number",
    ErrorCode.STEPS_EMPTY: "flight path cannot be empty",
    ErrorCode.MUST_START_WITH_LAUNCH: "flight path must start with a launch",
    ErrorCode.MUST_END_WITH_LAND: "flight path must end with a landing",
    ErrorCode.MUST_ALTERNATE: "actions must alternate between launch and land",
    ErrorCode.LAUNCH_BODY_MISMATCH: "must launch from the planet where you last landed",
    ErrorCode.UNKNOWN_ACTION: "action must be one of: launch, land",
    ErrorCode.UNKNOWN_BODY: "body must be one of: earth, moon, mars",
}

_ORDER: Dict[ErrorCode, int] = {code: i for i, code in enumerate(ErrorCode)}

MASS_ERRORS: List[ErrorCode] = [c for c in ErrorCode if c.category == ErrorCategory.MASS]
SEQUENCE_ERRORS: List[ErrorCode] = [c for c in ErrorCode if c.category == ErrorCategory.SEQUENCE]


# =============================================================================
# EXCEPTIONS
# =============================================================================

class FlightFuelError(Exception):
    """Base class for flightfuel exceptions."""

    code: ErrorCode = None

    def __init__(self, message: str, value: Any = None):
        super().__init__(message)
        self.message = message
        self.value = value

    def to_dict(self) -> Dict[str, Any]:
        return {
            "error": type(self).__name__,
            "code": self.code.value if self.code else None,
            "message": self.message,
            "value": None if self.value is None else str(self.value),
        }


class UnknownBodyError(FlightFuelError, ValueError):
    """Body identifier is not in the gravity table."""

    code = ErrorCode.UNKNOWN_BODY


class UnknownActionError(FlightFuelError, ValueError):
    """Action identifier is neither launch nor land."""

    code = ErrorCode.UNKNOWN_ACTION

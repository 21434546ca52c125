"""
flightfuel Validation Taxonomy

Defines the structured result returned by the path validator. Failures are
reported as data: an ordered list of violations, each carrying a reason
code, the field it is attributed to, and a human-readable message.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional

from flightfuel.errors.taxonomy import ErrorCategory, ErrorCode


class ViolationField(str, Enum):
    """Input field a violation is attributed to."""
    MASS = "mass"
    MANEUVERS = "maneuvers"


@dataclass(frozen=True)
class Violation:
    """A single violated rule."""
    code: ErrorCode
    field: ViolationField
    message: str

    @classmethod
    def for_code(cls, code: ErrorCode, message: Optional[str] = None) -> "Violation":
        """Build a violation with the field implied by the code's family."""
        target = (
            ViolationField.MASS
            if code.category == ErrorCategory.MASS
            else ViolationField.MANEUVERS
        )
        return cls(code=code, field=target, message=message or code.message)

    @property
    def category(self) -> ErrorCategory:
        return self.code.category

    def to_dict(self) -> Dict[str, Any]:
        return {
            "code": self.code.value,
            "category": self.category.value,
            "field": self.field.value,
            "message": self.message,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Violation":
        return cls(
            code=ErrorCode(data["code"]),
            field=ViolationField(data["field"]),
            message=data["message"],
        )


@dataclass
class ValidationResult:
    """Outcome of validating a flight path: Valid, or Invalid with reasons."""

    violations: List[Violation] = field(default_factory=list)

    @property
    def valid(self) -> bool:
        return not self.violations

    @property
    def reasons(self) -> List[ErrorCode]:
        """Reason codes in reporting order."""
        return [v.code for v in self.violations]

    @property
    def mass_violations(self) -> List[Violation]:
        return self.errors_for(ViolationField.MASS)

    @property
    def sequence_violations(self) -> List[Violation]:
        return self.errors_for(ViolationField.MANEUVERS)

    def errors_for(self, target: ViolationField) -> List[Violation]:
        """Violations attributed to one field."""
        return [v for v in self.violations if v.field == target]

    def first_message(self, target: ViolationField) -> Optional[str]:
        """First message for a field, as a form would display it."""
        errors = self.errors_for(target)
        return errors[0].message if errors else None

    def add_violation(self, violation: Violation) -> None:
        self.violations.append(violation)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize for API/CLI output."""
        return {
            "valid": self.valid,
            "reasons": [c.value for c in self.reasons],
            "violations": [v.to_dict() for v in self.violations],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ValidationResult":
        return cls(
            violations=[Violation.from_dict(v) for v in data.get("violations", [])],
        )

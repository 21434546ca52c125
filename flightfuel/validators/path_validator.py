"""
validators/path_validator.py - Flight path validation

Decides whether a (mass, maneuvers) pair can be handed to the fuel engine,
and explains every rule it breaks.

Rules are evaluated independently and accumulated. Reasons are reported in
a fixed order: the mass reason first, then steps_empty,
must_start_with_launch, must_end_with_land, must_alternate,
launch_body_mismatch, unknown_action, unknown_body.
"""

from __future__ import annotations
from typing import Any, List, Optional, Sequence, Tuple

from flightfuel.core.enums import Action, Body
from flightfuel.core.maneuver import maneuver_fields
from flightfuel.errors.taxonomy import ErrorCode, FlightFuelError
from .taxonomy import ValidationResult, Violation


# (action, body) with None standing in for an identifier that did not parse
_Step = Tuple[Optional[Action], Optional[Body]]


class PathValidator:
    """Validate spacecraft mass and maneuver ordering."""

    VALIDATOR_ID = "flight_path"
    VALIDATOR_NAME = "Flight Path Validator"

    def validate(self, mass: Optional[int], maneuvers: Sequence[Any]) -> ValidationResult:
        """
        Validate a flight path snapshot.

        Args:
            mass: Spacecraft mass in kg, or None if not entered
            maneuvers: Ordered maneuvers (Maneuver, (action, body) pairs, or
                mappings with action/body keys)

        Returns:
            ValidationResult; valid only when no rule fired
        """
        codes: List[ErrorCode] = []

        mass_code = self._check_mass(mass)
        if mass_code is not None:
            codes.append(mass_code)

        steps, unknown_action, unknown_body = self._ingest(maneuvers)

        if not steps:
            codes.append(ErrorCode.STEPS_EMPTY)
        else:
            if steps[0][0] != Action.LAUNCH:
                codes.append(ErrorCode.MUST_START_WITH_LAUNCH)
            if steps[-1][0] != Action.LAND:
                codes.append(ErrorCode.MUST_END_WITH_LAND)
            if not self._alternates(steps):
                codes.append(ErrorCode.MUST_ALTERNATE)
            if not self._launches_from_landing(steps):
                codes.append(ErrorCode.LAUNCH_BODY_MISMATCH)

        if unknown_action:
            codes.append(ErrorCode.UNKNOWN_ACTION)
        if unknown_body:
            codes.append(ErrorCode.UNKNOWN_BODY)

        return ValidationResult(violations=[Violation.for_code(c) for c in codes])

    def _check_mass(self, mass: Any) -> Optional[ErrorCode]:
        # Absence is terminal for the mass field
        if mass is None:
            return ErrorCode.MASS_REQUIRED
        # Only whole kilograms count; bools and numeric strings are not masses
        if not isinstance(mass, int) or isinstance(mass, bool) or mass <= 0:
            return ErrorCode.MASS_MUST_BE_POSITIVE
        return None

    def _ingest(self, maneuvers: Sequence[Any]) -> Tuple[List[_Step], bool, bool]:
        """Parse each entry field by field so one bad identifier keeps the rest checkable."""
        steps: List[_Step] = []
        unknown_action = False
        unknown_body = False

        for entry in maneuvers or ():
            raw_action, raw_body = maneuver_fields(entry)

            try:
                action = Action.parse(raw_action)
            except FlightFuelError:
                action = None
                unknown_action = True

            try:
                body = Body.parse(raw_body)
            except FlightFuelError:
                body = None
                unknown_body = True

            steps.append((action, body))

        return steps, unknown_action, unknown_body

    def _alternates(self, steps: List[_Step]) -> bool:
        return all(
            first[0] != second[0]
            for first, second in zip(steps, steps[1:])
        )

    def _launches_from_landing(self, steps: List[_Step]) -> bool:
        for (action, body), (next_action, next_body) in zip(steps, steps[1:]):
            if action != Action.LAND or next_action != Action.LAUNCH:
                continue
            # Unparsed bodies are reported as unknown_body instead
            if body is None or next_body is None:
                continue
            if body != next_body:
                return False
        return True


_default_validator = PathValidator()


def validate(mass: Optional[int], maneuvers: Sequence[Any]) -> ValidationResult:
    """Validate with the shared stateless PathValidator."""
    return _default_validator.validate(mass, maneuvers)

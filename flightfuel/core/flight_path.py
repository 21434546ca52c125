"""
core/flight_path.py - Editable flight path

A FlightPath is the snapshot a host session edits: an optional spacecraft
mass and an ordered tuple of maneuvers. Editing returns a new FlightPath.
Incomplete states (no mass, no steps) are legal here; they only fail when
the path is validated or calculated.
"""

from __future__ import annotations
from dataclasses import dataclass, field, replace
from typing import Any, Dict, List, Optional, Tuple
import logging

from flightfuel.core.enums import Action, Body
from flightfuel.core.maneuver import Maneuver
from flightfuel.physics.fuel import FuelEngine, StageFuel
from flightfuel.validators.path_validator import PathValidator
from flightfuel.validators.taxonomy import ValidationResult

logger = logging.getLogger("core.flight_path")

_validator = PathValidator()
_engine = FuelEngine()


@dataclass
class FuelCalculation:
    """Result of calculating a flight path."""

    validation: ValidationResult
    total_fuel: Optional[int] = None
    stages: List[StageFuel] = field(default_factory=list)

    @property
    def success(self) -> bool:
        return self.validation.valid

    def to_dict(self) -> Dict[str, Any]:
        data = self.validation.to_dict()
        data["total_fuel"] = self.total_fuel
        data["stages"] = [s.to_dict() for s in self.stages]
        return data


@dataclass(frozen=True)
class FlightPath:
    """Spacecraft mass plus ordered maneuvers."""

    mass: Optional[int] = None
    maneuvers: Tuple[Maneuver, ...] = ()

    @classmethod
    def new(cls) -> "FlightPath":
        return cls(mass=None, maneuvers=())

    @classmethod
    def from_steps(cls, mass: Optional[int], steps: List[Any]) -> "FlightPath":
        """Build from host values; raises on unknown identifiers."""
        return cls(mass=mass, maneuvers=tuple(Maneuver.parse(s) for s in steps))

    # ==================== Editing ====================

    def add_step(self, action: Any, body: Any) -> "FlightPath":
        """Append a maneuver."""
        step = Maneuver.create(action, body)
        return replace(self, maneuvers=self.maneuvers + (step,))

    def remove_step(self, index: int) -> "FlightPath":
        """Drop the maneuver at index; out-of-range indices change nothing."""
        count = len(self.maneuvers)
        if index < 0:
            index += count
        if not 0 <= index < count:
            return self
        steps = self.maneuvers[:index] + self.maneuvers[index + 1:]
        return replace(self, maneuvers=steps)

    def clear_steps(self) -> "FlightPath":
        return replace(self, maneuvers=())

    def set_mass(self, mass: Any) -> "FlightPath":
        """Store mass if it is a positive integer, otherwise unset it."""
        if isinstance(mass, int) and not isinstance(mass, bool) and mass > 0:
            return replace(self, mass=mass)
        return replace(self, mass=None)

    # ==================== Calculation ====================

    def validate(self) -> ValidationResult:
        return _validator.validate(self.mass, self.maneuvers)

    def calculate_fuel(self) -> FuelCalculation:
        """Validate, then compute fuel only if the path is valid."""
        validation = self.validate()
        if not validation.valid:
            logger.debug(f"Flight path invalid: {[c.value for c in validation.reasons]}")
            return FuelCalculation(validation=validation)

        stages = _engine.breakdown(self.mass, self.maneuvers)
        total = sum(s.fuel_kg for s in stages)
        logger.debug(f"Flight path of {len(stages)} steps needs {total} kg fuel")
        return FuelCalculation(validation=validation, total_fuel=total, stages=stages)

    # ==================== Accessors ====================

    def steps_to_path(self) -> List[Tuple[Action, Body]]:
        return [m.as_tuple() for m in self.maneuvers]

    @staticmethod
    def planets() -> List[Body]:
        return list(Body)

    @staticmethod
    def actions() -> List[Action]:
        return list(Action)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "mass": self.mass,
            "maneuvers": [m.to_dict() for m in self.maneuvers],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "FlightPath":
        return cls.from_steps(data.get("mass"), data.get("maneuvers", []))

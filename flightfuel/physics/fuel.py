"""
flightfuel Fuel Engine

Computes the propellant mass needed to fly a validated flight path.

Fuel has mass, so the fuel burned by a maneuver needs fuel of its own; each
maneuver's requirement is the sum of successive stages of the maneuver
formula applied to the previous stage, until a stage comes out <= 0.

Fuel for later maneuvers is carried through every earlier one. The path is
therefore accumulated from its last maneuver back to its first, each
maneuver moving the dry mass plus all fuel already accounted for.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Mapping, Sequence
import math

from flightfuel.core.constants import (
    GRAVITY_M_S2,
    LAND_FACTOR,
    LAND_OFFSET,
    LAUNCH_FACTOR,
    LAUNCH_OFFSET,
)
from flightfuel.core.enums import Action
from flightfuel.core.maneuver import Maneuver


# =============================================================================
# FORMULAS
# =============================================================================

@dataclass(frozen=True)
class FuelFormula:
    """Linear fuel formula: floor(mass * g * factor - offset)."""
    factor: float
    offset: int

    def __call__(self, mass: int, gravity: float) -> int:
        return math.floor(mass * gravity * self.factor - self.offset)


LAUNCH_FORMULA = FuelFormula(factor=LAUNCH_FACTOR, offset=LAUNCH_OFFSET)
LAND_FORMULA = FuelFormula(factor=LAND_FACTOR, offset=LAND_OFFSET)

FORMULAS: Mapping[Action, FuelFormula] = {
    Action.LAUNCH: LAUNCH_FORMULA,
    Action.LAND: LAND_FORMULA,
}


def formula_for(action: Action) -> FuelFormula:
    return FORMULAS[Action.parse(action)]


def recursive_fuel(mass: int, gravity: float, formula: Callable[[int, float], int]) -> int:
    """
    Fuel for one maneuver, including fuel to carry that fuel.

    Each stage feeds the previous stage's fuel mass back into the formula.
    Stages strictly decrease, so the loop ends once a stage is <= 0.
    """
    if mass <= 0 or gravity <= 0:
        return 0

    total = 0
    stage = formula(mass, gravity)
    while stage > 0:
        total += stage
        stage = formula(stage, gravity)
    return total


# =============================================================================
# ENGINE
# =============================================================================

@dataclass(frozen=True)
class StageFuel:
    """Fuel requirement of one maneuver within a path."""
    maneuver: Maneuver
    mass_kg: int
    """Mass moved by this maneuver (dry mass plus fuel for later maneuvers)."""
    fuel_kg: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "action": self.maneuver.action.value,
            "body": self.maneuver.body.value,
            "mass_kg": self.mass_kg,
            "fuel_kg": self.fuel_kg,
        }


class FuelEngine:
    """
    Total fuel mass for a (mass, maneuvers) pair.

    Does not re-validate: callers run PathValidator first. Entries are parsed
    into Maneuvers, so an unknown body raises UnknownBodyError.
    """

    def breakdown(self, mass: int, maneuvers: Sequence[Any]) -> List[StageFuel]:
        """Per-maneuver fuel, returned in flight order."""
        path = [Maneuver.parse(m) for m in maneuvers]
        if mass <= 0:
            return [StageFuel(maneuver=m, mass_kg=0, fuel_kg=0) for m in path]

        stages: List[StageFuel] = []
        current_mass = mass
        for maneuver in reversed(path):
            gravity = GRAVITY_M_S2[maneuver.body]
            fuel = recursive_fuel(current_mass, gravity, FORMULAS[maneuver.action])
            stages.append(StageFuel(maneuver=maneuver, mass_kg=current_mass, fuel_kg=fuel))
            current_mass += fuel

        stages.reverse()
        return stages

    def compute(self, mass: int, maneuvers: Sequence[Any]) -> int:
        """Total fuel in kg."""
        return sum(stage.fuel_kg for stage in self.breakdown(mass, maneuvers))


_default_engine = FuelEngine()


def compute_fuel(mass: int, maneuvers: Sequence[Any]) -> int:
    """Compute total fuel with the shared stateless FuelEngine."""
    return _default_engine.compute(mass, maneuvers)

"""
flightfuel Core Module

Contains the foundation layer:
- Body / Action enumerations and the surface gravity table
- Maneuver: one launch or landing
- FlightPath: the editable (mass, maneuvers) snapshot
"""

from flightfuel.core.enums import (
    Action,
    Body,
)
from flightfuel.core.constants import (
    GRAVITY_M_S2,
)
from flightfuel.core.maneuver import (
    Maneuver,
    maneuver_fields,
)
from flightfuel.core.flight_path import (
    FlightPath,
    FuelCalculation,
)

__all__ = [
    "Action",
    "Body",
    "GRAVITY_M_S2",
    "Maneuver",
    "maneuver_fields",
    "FlightPath",
    "FuelCalculation",
]

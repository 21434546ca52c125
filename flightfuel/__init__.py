"""
flightfuel - Launch/landing fuel calculator

Validates an ordered flight path of launches and landings and computes the
propellant mass needed to fly it.

    >>> from flightfuel import validate, compute_fuel
    >>> path = [("launch", "earth"), ("land", "moon"), ("launch", "moon"), ("land", "earth")]
    >>> validate(28801, path).valid
    True
    >>> compute_fuel(28801, path)
    51898
"""

from flightfuel.core import (
    Action,
    Body,
    GRAVITY_M_S2,
    Maneuver,
    FlightPath,
    FuelCalculation,
)
from flightfuel.validators import (
    PathValidator,
    ValidationResult,
    Violation,
    ViolationField,
    validate,
)
from flightfuel.physics import (
    FuelEngine,
    compute_fuel,
    recursive_fuel,
)
from flightfuel.errors import (
    ErrorCategory,
    ErrorCode,
    FlightFuelError,
    UnknownBodyError,
    UnknownActionError,
)

__version__ = "1.0.0"

GRAVITY = GRAVITY_M_S2

__all__ = [
    "Action",
    "Body",
    "GRAVITY",
    "GRAVITY_M_S2",
    "Maneuver",
    "FlightPath",
    "FuelCalculation",
    "PathValidator",
    "ValidationResult",
    "Violation",
    "ViolationField",
    "validate",
    "FuelEngine",
    "compute_fuel",
    "recursive_fuel",
    "ErrorCategory",
    "ErrorCode",
    "FlightFuelError",
    "UnknownBodyError",
    "UnknownActionError",
    "__version__",
]

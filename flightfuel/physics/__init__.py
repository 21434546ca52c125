"""
flightfuel Physics

Provides the fuel engine: launch/land formulas and the fuel-for-fuel loop.
"""

from .fuel import (
    FuelFormula,
    LAUNCH_FORMULA,
    LAND_FORMULA,
    FORMULAS,
    formula_for,
    recursive_fuel,
    StageFuel,
    FuelEngine,
    compute_fuel,
)

__all__ = [
    # Formulas
    "FuelFormula",
    "LAUNCH_FORMULA",
    "LAND_FORMULA",
    "FORMULAS",
    "formula_for",
    "recursive_fuel",
    # Engine
    "StageFuel",
    "FuelEngine",
    "compute_fuel",
]

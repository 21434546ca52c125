"""
flightfuel Physical Constants

Surface gravity table and fuel formula coefficients.
"""

from types import MappingProxyType
from typing import Mapping

from flightfuel.core.enums import Body

# ==================== Surface Gravity ====================

GRAVITY_M_S2: Mapping[Body, float] = MappingProxyType({
    Body.EARTH: 9.807,
    Body.MOON: 1.62,
    Body.MARS: 3.711,
})

# ==================== Fuel Formulas ====================
# fuel = floor(mass * g * factor - offset)

LAUNCH_FACTOR = 0.042
LAUNCH_OFFSET = 33

LAND_FACTOR = 0.033
LAND_OFFSET = 42

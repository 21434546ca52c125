"""
flightfuel Core Enumerations

Closed sets of celestial bodies and maneuver actions.
"""

from enum import Enum
from typing import Any

from flightfuel.errors.taxonomy import UnknownActionError, UnknownBodyError


class Action(str, Enum):
    """Maneuver action."""
    LAUNCH = "launch"
    LAND = "land"

    @classmethod
    def parse(cls, value: Any) -> "Action":
        """Parse an action identifier (case-insensitive)."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        raise UnknownActionError(f"Unknown action: {value!r}", value)


class Body(str, Enum):
    """Celestial body of travel."""
    EARTH = "earth"
    MOON = "moon"
    MARS = "mars"

    @classmethod
    def parse(cls, value: Any) -> "Body":
        """Parse a body identifier (case-insensitive)."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        raise UnknownBodyError(f"Unknown body: {value!r}", value)

    @property
    def gravity(self) -> float:
        """Surface gravity (m/s²)."""
        from flightfuel.core.constants import GRAVITY_M_S2
        return GRAVITY_M_S2[self]

    @property
    def label(self) -> str:
        return self.value.capitalize()

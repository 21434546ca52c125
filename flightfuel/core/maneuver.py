"""
core/maneuver.py - Single launch/landing step

A Maneuver pairs an Action with a Body. Host-provided identifiers are parsed
once here; everything past this boundary works with the enum types.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Tuple

from flightfuel.core.enums import Action, Body


def maneuver_fields(value: Any) -> Tuple[Any, Any]:
    """
    Extract raw (action, body) identifiers from a host value without parsing.

    Accepts a Maneuver, a 2-item tuple/list, or a mapping with ``action`` and
    ``body`` (or ``planet``) keys. Unrecognized shapes yield (None, None).
    """
    if isinstance(value, Maneuver):
        return value.action, value.body
    if isinstance(value, Mapping):
        body = value.get("body", value.get("planet"))
        return value.get("action"), body
    if isinstance(value, (tuple, list)) and len(value) == 2:
        return value[0], value[1]
    return None, None


@dataclass(frozen=True)
class Maneuver:
    """One launch from, or landing on, a body."""

    action: Action
    body: Body

    @classmethod
    def create(cls, action: Any, body: Any) -> "Maneuver":
        """Build from identifiers; raises UnknownActionError / UnknownBodyError."""
        return cls(action=Action.parse(action), body=Body.parse(body))

    @classmethod
    def parse(cls, value: Any) -> "Maneuver":
        """Parse any accepted host shape (see maneuver_fields)."""
        if isinstance(value, cls):
            return value
        action, body = maneuver_fields(value)
        return cls.create(action, body)

    @property
    def is_launch(self) -> bool:
        return self.action == Action.LAUNCH

    @property
    def is_land(self) -> bool:
        return self.action == Action.LAND

    @property
    def label(self) -> str:
        """Display label, e.g. 'Launch Earth'."""
        return f"{self.action.value.capitalize()} {self.body.label}"

    def as_tuple(self) -> Tuple[Action, Body]:
        return self.action, self.body

    def to_dict(self) -> Dict[str, str]:
        return {"action": self.action.value, "body": self.body.value}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Maneuver":
        return cls.parse(data)

"""
deployment/ - HTTP deployment

FastAPI application exposing validate and compute_fuel.
"""

from .api import (
    API_VERSION,
    ManeuverIn,
    FlightPathRequest,
    BodyInfo,
    create_fastapi_app,
)

__all__ = [
    "API_VERSION",
    "ManeuverIn",
    "FlightPathRequest",
    "BodyInfo",
    "create_fastapi_app",
]

"""
deployment/api.py - REST API

Exposes validation and fuel calculation over HTTP. Every request is an
independent computation over the posted snapshot; the server keeps no
flight path state.
"""

from typing import Any, Dict, List, Optional
from datetime import datetime, timezone
import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import AliasChoices, BaseModel, Field

from flightfuel.bootstrap.config import FlightFuelConfig, get_config
from flightfuel.core.constants import GRAVITY_M_S2
from flightfuel.errors.taxonomy import FlightFuelError
from flightfuel.physics.fuel import FuelEngine
from flightfuel.validators.path_validator import PathValidator

logger = logging.getLogger("deployment.api")

API_VERSION = "1.0.0"


# =============================================================================
# Request/Response Models
# =============================================================================

class ManeuverIn(BaseModel):
    """One step as posted by a client; identifiers are checked by the validator."""
    action: str
    body: str = Field(validation_alias=AliasChoices("body", "planet"))

    def as_pair(self):
        return self.action, self.body


class FlightPathRequest(BaseModel):
    """Spacecraft mass and ordered steps."""
    mass: Optional[int] = None
    maneuvers: List[ManeuverIn] = Field(
        default_factory=list,
        validation_alias=AliasChoices("maneuvers", "steps"),
    )

    def steps(self) -> List[tuple]:
        return [m.as_pair() for m in self.maneuvers]


class BodyInfo(BaseModel):
    body: str
    gravity: float


# =============================================================================
# Application
# =============================================================================

def create_fastapi_app(config: Optional[FlightFuelConfig] = None) -> FastAPI:
    """
    Create FastAPI application.

    Args:
        config: Application configuration (global config if not provided)

    Returns:
        FastAPI application instance
    """
    config = config or get_config()

    app = FastAPI(
        title="flightfuel API",
        description="Launch/landing fuel calculator",
        version=API_VERSION,
        docs_url=config.api.docs_url if config.api.enable_docs else None,
        redoc_url="/redoc" if config.api.enable_docs else None,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.api.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    validator = PathValidator()
    engine = FuelEngine()

    @app.exception_handler(FlightFuelError)
    async def flightfuel_error_handler(request: Request, exc: FlightFuelError):
        logger.warning(f"{request.url.path}: {exc}")
        return JSONResponse(status_code=400, content=exc.to_dict())

    # =========================================================================
    # Health Endpoints
    # =========================================================================

    @app.get("/health")
    def health_check() -> Dict[str, Any]:
        """Health check endpoint."""
        return {
            "status": "healthy",
            "version": API_VERSION,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }

    # =========================================================================
    # Flight Path Endpoints
    # =========================================================================

    @app.get("/api/v1/bodies", response_model=List[BodyInfo])
    def list_bodies():
        """Bodies of travel and their surface gravity."""
        return [
            BodyInfo(body=body.value, gravity=gravity)
            for body, gravity in GRAVITY_M_S2.items()
        ]

    @app.post("/api/v1/validate")
    def validate_path(request: FlightPathRequest) -> Dict[str, Any]:
        """Validate a flight path. Always 200; validity is in the body."""
        result = validator.validate(request.mass, request.steps())
        if not result.valid:
            logger.info(f"Rejected flight path: {[c.value for c in result.reasons]}")
        return result.to_dict()

    @app.post("/api/v1/fuel")
    def calculate_fuel(request: FlightPathRequest):
        """Validate, then compute total fuel. Invalid paths return 422."""
        steps = request.steps()
        result = validator.validate(request.mass, steps)
        if not result.valid:
            logger.info(f"Rejected flight path: {[c.value for c in result.reasons]}")
            return JSONResponse(status_code=422, content=result.to_dict())

        stages = engine.breakdown(request.mass, steps)
        total = sum(s.fuel_kg for s in stages)
        logger.info(f"Computed {total} kg fuel for {len(stages)} steps, mass {request.mass} kg")
        return {
            "valid": True,
            "mass": request.mass,
            "total_fuel": total,
            "stages": [s.to_dict() for s in stages],
        }

    return app

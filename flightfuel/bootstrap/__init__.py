"""
bootstrap/ - Bootstrap Layer

Provides configuration loading, logging setup and entry points.
"""

from .config import (
    FlightFuelConfig,
    APIConfig,
    LoggingConfig,
    CLIConfig,
    load_config,
    get_config,
    reset_config,
)

from .entrypoints import (
    cli_main,
    api_main,
    setup_logging,
)


__all__ = [
    # Config
    "FlightFuelConfig",
    "APIConfig",
    "LoggingConfig",
    "CLIConfig",
    "load_config",
    "get_config",
    "reset_config",
    # Entry points
    "cli_main",
    "api_main",
    "setup_logging",
]

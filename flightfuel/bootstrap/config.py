"""
bootstrap/config.py - Application configuration

Provides configuration loading from files, environment variables, and defaults.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional
from pathlib import Path
import os
import json
import logging

logger = logging.getLogger("bootstrap.config")

DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


@dataclass
class APIConfig:
    """API server configuration."""

    host: str = "0.0.0.0"
    port: int = 8000
    enable_docs: bool = True
    docs_url: str = "/docs"
    cors_origins: List[str] = field(default_factory=lambda: ["*"])

    @classmethod
    def from_env(cls) -> "APIConfig":
        cors = os.getenv("FLIGHTFUEL_API_CORS_ORIGINS", "*")
        return cls(
            host=os.getenv("FLIGHTFUEL_API_HOST", "0.0.0.0"),
            port=int(os.getenv("FLIGHTFUEL_API_PORT", "8000")),
            enable_docs=os.getenv("FLIGHTFUEL_API_ENABLE_DOCS", "true").lower() == "true",
            docs_url=os.getenv("FLIGHTFUEL_API_DOCS_URL", "/docs"),
            cors_origins=cors.split(",") if cors else ["*"],
        )


@dataclass
class LoggingConfig:
    """Logging configuration."""

    level: str = "INFO"
    format: str = DEFAULT_LOG_FORMAT
    log_file: Optional[str] = None
    json_logs: bool = False

    @classmethod
    def from_env(cls) -> "LoggingConfig":
        return cls(
            level=os.getenv("FLIGHTFUEL_LOG_LEVEL", "INFO"),
            format=os.getenv("FLIGHTFUEL_LOG_FORMAT", DEFAULT_LOG_FORMAT),
            log_file=os.getenv("FLIGHTFUEL_LOG_FILE"),
            json_logs=os.getenv("FLIGHTFUEL_JSON_LOGS", "false").lower() == "true",
        )


@dataclass
class CLIConfig:
    """CLI defaults."""

    output_format: str = "text"
    prompt: str = "flightfuel> "

    @classmethod
    def from_env(cls) -> "CLIConfig":
        return cls(
            output_format=os.getenv("FLIGHTFUEL_CLI_FORMAT", "text"),
            prompt=os.getenv("FLIGHTFUEL_CLI_PROMPT", "flightfuel> "),
        )


@dataclass
class FlightFuelConfig:
    """Root configuration for the flightfuel application."""

    environment: str = "development"
    debug: bool = False
    version: str = "1.0.0"

    api: APIConfig = field(default_factory=APIConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    cli: CLIConfig = field(default_factory=CLIConfig)

    @classmethod
    def from_env(cls) -> "FlightFuelConfig":
        """Create configuration from environment variables."""
        return cls(
            environment=os.getenv("FLIGHTFUEL_ENVIRONMENT", "development"),
            debug=os.getenv("FLIGHTFUEL_DEBUG", "false").lower() == "true",
            api=APIConfig.from_env(),
            logging=LoggingConfig.from_env(),
            cli=CLIConfig.from_env(),
        )

    @classmethod
    def from_file(cls, filepath: str) -> "FlightFuelConfig":
        """Load configuration from JSON file."""
        path = Path(filepath)
        if not path.exists():
            logger.warning(f"Config file not found: {filepath}, using defaults")
            return cls.from_env()

        with open(path) as f:
            data = json.load(f)

        return cls._from_dict(data)

    @classmethod
    def _from_dict(cls, data: Dict[str, Any]) -> "FlightFuelConfig":
        """Create config from dictionary; file values override the environment."""
        config = cls.from_env()

        if "environment" in data:
            config.environment = data["environment"]
        if "debug" in data:
            config.debug = data["debug"]

        for section in ("api", "logging", "cli"):
            target = getattr(config, section)
            for key, value in data.get(section, {}).items():
                if hasattr(target, key):
                    setattr(target, key, value)
                else:
                    logger.warning(f"Ignoring unknown config key: {section}.{key}")

        return config

    def to_dict(self) -> Dict[str, Any]:
        """Serialize config to dictionary."""
        return {
            "environment": self.environment,
            "debug": self.debug,
            "version": self.version,
            "api": {
                "host": self.api.host,
                "port": self.api.port,
                "enable_docs": self.api.enable_docs,
            },
            "logging": {
                "level": self.logging.level,
                "log_file": self.logging.log_file,
                "json_logs": self.logging.json_logs,
            },
            "cli": {
                "output_format": self.cli.output_format,
            },
        }


# Global config instance
_config: Optional[FlightFuelConfig] = None


def load_config(filepath: str = None) -> FlightFuelConfig:
    """
    Load configuration from file or environment.

    Args:
        filepath: Optional path to JSON config file

    Returns:
        FlightFuelConfig instance
    """
    global _config

    if filepath:
        _config = FlightFuelConfig.from_file(filepath)
    else:
        default_paths = [
            "./flightfuel.json",
            "./config/flightfuel.json",
            os.path.expanduser("~/.flightfuel/config.json"),
        ]

        for path in default_paths:
            if Path(path).exists():
                logger.info(f"Loading config from: {path}")
                _config = FlightFuelConfig.from_file(path)
                return _config

        _config = FlightFuelConfig.from_env()

    logger.info(f"Configuration loaded: environment={_config.environment}")
    return _config


def get_config() -> FlightFuelConfig:
    """Get current configuration, loading if needed."""
    global _config
    if _config is None:
        _config = load_config()
    return _config


def reset_config() -> None:
    """Drop the cached configuration."""
    global _config
    _config = None

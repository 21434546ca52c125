"""
bootstrap/entrypoints.py - Application entry points

Provides CLI and API entry points.
"""

from __future__ import annotations
from typing import Optional
import argparse
import json
import logging
import sys

from .config import load_config

logger = logging.getLogger("bootstrap.entrypoints")

# Handlers installed by setup_logging, replaced on each call
_installed_handlers: list = []


class JSONFormatter(logging.Formatter):
    """One JSON object per log record."""

    def format(self, record):
        return json.dumps({
            "timestamp": self.formatTime(record),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        })


def setup_logging(
    level: str = "INFO",
    log_file: Optional[str] = None,
    json_format: bool = False,
    fmt: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
) -> None:
    """
    Configure application logging.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR)
        log_file: Optional log file path
        json_format: Use JSON format for logs
        fmt: Format string for plain-text logs
    """
    log_level = getattr(logging, level.upper(), logging.INFO)
    formatter = JSONFormatter() if json_format else logging.Formatter(fmt)

    # Logs go to stderr so command output on stdout stays parseable
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    console_handler.setLevel(log_level)

    root_logger = logging.getLogger()
    for handler in _installed_handlers:
        root_logger.removeHandler(handler)
        handler.close()
    _installed_handlers.clear()

    root_logger.setLevel(log_level)
    root_logger.addHandler(console_handler)
    _installed_handlers.append(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(formatter)
        file_handler.setLevel(log_level)
        root_logger.addHandler(file_handler)
        _installed_handlers.append(file_handler)

    # Reduce noise from third-party libraries
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)


def cli_main(args: list = None) -> int:
    """
    CLI entry point.

    Args:
        args: Command line arguments (defaults to sys.argv)

    Returns:
        Exit code
    """
    parser = argparse.ArgumentParser(
        description="Launch/landing fuel calculator",
        prog="flightfuel",
    )

    parser.add_argument(
        "-c", "--config",
        help="Path to configuration file",
        default=None,
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=None,
        help="Log level",
    )
    parser.add_argument(
        "--log-file",
        help="Log file path",
        default=None,
    )
    parser.add_argument(
        "-s", "--script",
        help="Execute script file",
        default=None,
    )
    parser.add_argument(
        "-e", "--execute",
        help="Execute single command",
        default=None,
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Output in JSON format",
    )

    parsed = parser.parse_args(args)

    config = load_config(parsed.config)
    log_level = "DEBUG" if parsed.verbose else (parsed.log_level or config.logging.level)
    setup_logging(
        level=log_level,
        log_file=parsed.log_file or config.logging.log_file,
        json_format=config.logging.json_logs,
        fmt=config.logging.format,
    )

    from flightfuel.cli.core import CLIContext, OutputFormat, format_output
    from flightfuel.cli.repl import REPL

    try:
        output_format = OutputFormat.JSON if parsed.json else OutputFormat(config.cli.output_format)
    except ValueError:
        logger.warning(f"Unknown output format {config.cli.output_format!r}, using text")
        output_format = OutputFormat.TEXT

    ctx = CLIContext(output_format=output_format)
    repl = REPL(ctx)

    try:
        if parsed.script:
            results = repl.execute_file(parsed.script)
            for result in results:
                print(format_output(result, ctx.output_format))
            return 0 if all(r.success for r in results) else 1

        elif parsed.execute:
            result = repl.execute_line(parsed.execute)
            print(format_output(result, ctx.output_format))
            return result.exit_code

        else:
            repl.run(prompt=config.cli.prompt)
            return 0

    except KeyboardInterrupt:
        print("\nInterrupted")
        return 130
    except OSError as e:
        logger.error(f"Cannot read script: {e}")
        return 1


def api_main(args: list = None) -> None:
    """
    API server entry point.

    Args:
        args: Command line arguments
    """
    parser = argparse.ArgumentParser(
        description="flightfuel API Server",
        prog="flightfuel-api",
    )

    parser.add_argument(
        "-c", "--config",
        help="Path to configuration file",
        default=None,
    )
    parser.add_argument(
        "-p", "--port",
        type=int,
        help="API port",
        default=None,
    )
    parser.add_argument(
        "-H", "--host",
        help="API host",
        default=None,
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=None,
        help="Log level",
    )

    parsed = parser.parse_args(args)

    config = load_config(parsed.config)
    if parsed.port:
        config.api.port = parsed.port
    if parsed.host:
        config.api.host = parsed.host

    log_level = parsed.log_level or config.logging.level
    setup_logging(
        level=log_level,
        log_file=config.logging.log_file,
        json_format=config.logging.json_logs,
        fmt=config.logging.format,
    )

    import uvicorn
    from flightfuel.deployment.api import create_fastapi_app

    app = create_fastapi_app(config)
    logger.info(f"Starting API on {config.api.host}:{config.api.port}")

    try:
        uvicorn.run(
            app,
            host=config.api.host,
            port=config.api.port,
            log_level=log_level.lower(),
        )
    except KeyboardInterrupt:
        print("\nShutting down...")


if __name__ == "__main__":
    sys.exit(cli_main())

"""
cli/core.py - Session context, command results and output rendering
"""

from __future__ import annotations
from typing import Any, Dict, List, Optional, Tuple
from dataclasses import dataclass, field
from enum import Enum
from abc import ABC, abstractmethod
import argparse
import json

from flightfuel.core.flight_path import FlightPath


class OutputFormat(str, Enum):
    """How command results are rendered."""
    TEXT = "text"
    JSON = "json"
    TABLE = "table"
    MINIMAL = "minimal"


@dataclass
class CLIContext:
    """State shared by the commands of one session."""

    # Replaced wholesale on every edit; FlightPath is immutable
    flight_path: FlightPath = field(default_factory=FlightPath.new)
    output_format: OutputFormat = OutputFormat.TEXT
    history: List[str] = field(default_factory=list)


@dataclass
class CommandResult:
    """Outcome of one command line."""

    success: bool = True
    message: str = ""
    data: Any = None
    error: Optional[str] = None
    exit_code: int = 0

    @classmethod
    def failure(cls, error: str, data: Any = None, message: str = "") -> "CommandResult":
        return cls(success=False, message=message, data=data, error=error, exit_code=1)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "success": self.success,
            "message": self.message,
            "data": self.data,
            "error": self.error,
        }


class CLICommand(ABC):
    """A named command with its own argument layout."""

    name: str = "command"
    description: str = ""
    aliases: List[str] = []

    @abstractmethod
    def execute(self, ctx: CLIContext, args: argparse.Namespace) -> CommandResult:
        ...

    def configure_parser(self, parser: argparse.ArgumentParser) -> None:
        pass


class CommandArgumentParser(argparse.ArgumentParser):
    """Raises ValueError on bad arguments so a typo never ends the session."""

    def error(self, message):
        raise ValueError(message)


class CommandRegistry:
    """Commands by name and alias, each paired with its argument parser."""

    def __init__(self):
        self._commands: Dict[str, Tuple[CLICommand, argparse.ArgumentParser]] = {}
        self._aliases: Dict[str, str] = {}

    def register(self, command: CLICommand) -> None:
        parser = CommandArgumentParser(prog=command.name, description=command.description)
        command.configure_parser(parser)
        self._commands[command.name] = (command, parser)
        for alias in command.aliases:
            self._aliases[alias] = command.name

    def resolve(self, name: str) -> Optional[Tuple[CLICommand, argparse.ArgumentParser]]:
        """Look up a command by name or alias."""
        return self._commands.get(self._aliases.get(name, name))

    def help_rows(self) -> List[Tuple[str, List[str], str]]:
        """(name, aliases, description) sorted by name."""
        return [
            (name, command.aliases, command.description)
            for name, (command, _) in sorted(self._commands.items())
        ]


def format_number(value: Any) -> str:
    """Integer with thousands separators (51898 -> '51,898')."""
    if isinstance(value, int) and not isinstance(value, bool):
        return f"{value:,}"
    return str(value)


def _render_table(rows: List[Dict[str, Any]]) -> str:
    keys = list(rows[0].keys())
    lines = [" | ".join(keys), "-" * (len(keys) * 15)]
    lines.extend(" | ".join(str(row.get(k, "")) for k in keys) for row in rows)
    return "\n".join(lines)


def _render_text(result: CommandResult) -> str:
    lines = [result.message] if result.message else []
    data = result.data
    if isinstance(data, dict):
        lines.extend(f"  {k}: {v}" for k, v in data.items())
    elif isinstance(data, list):
        lines.extend(f"  {row}" for row in data)
    elif data is not None:
        lines.append(str(data))
    return "\n".join(lines)


def format_output(result: CommandResult, format: OutputFormat) -> str:
    """Render a command result for the terminal."""
    if format == OutputFormat.JSON:
        return json.dumps(result.to_dict(), indent=2, default=str)

    if not result.success:
        if format == OutputFormat.MINIMAL:
            return result.error or "Error"
        return f"Error: {result.error}"

    if format == OutputFormat.TABLE:
        if isinstance(result.data, list) and result.data and isinstance(result.data[0], dict):
            return _render_table(result.data)
        return _render_text(result)

    if format == OutputFormat.MINIMAL:
        return "" if result.data is None else str(result.data)

    return _render_text(result)

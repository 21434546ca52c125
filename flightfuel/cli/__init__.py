"""
cli/ - Command line interface

Interactive REPL and one-shot commands over the flight path session.
"""

from .core import (
    OutputFormat,
    CLIContext,
    CommandResult,
    CLICommand,
    CommandRegistry,
    format_number,
    format_output,
)
from .commands import (
    parse_mass,
    parse_step_token,
    session_summary,
    MassCommand,
    AddCommand,
    RemoveCommand,
    ClearCommand,
    ShowCommand,
    CheckCommand,
    FuelCommand,
    ValidateCommand,
    CalculateCommand,
    BodiesCommand,
    HistoryCommand,
)
from .repl import REPL, default_registry

__all__ = [
    # Core
    "OutputFormat",
    "CLIContext",
    "CommandResult",
    "CLICommand",
    "CommandRegistry",
    "format_number",
    "format_output",
    # Commands
    "parse_mass",
    "parse_step_token",
    "session_summary",
    "MassCommand",
    "AddCommand",
    "RemoveCommand",
    "ClearCommand",
    "ShowCommand",
    "CheckCommand",
    "FuelCommand",
    "ValidateCommand",
    "CalculateCommand",
    "BodiesCommand",
    "HistoryCommand",
    # REPL
    "REPL",
    "default_registry",
]

"""
cli/repl.py - Interactive flight path session

Each line is split with shlex and dispatched to a registered command.
"""

from __future__ import annotations
from typing import Iterable, List, Optional
import logging
import shlex

from .core import CLIContext, CommandRegistry, CommandResult, format_output
from .commands import (
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

logger = logging.getLogger("cli.repl")

QUIT_WORDS = ("quit", "exit", "q")


def default_registry() -> CommandRegistry:
    """Registry holding every flightfuel command."""
    registry = CommandRegistry()
    for command in (
        MassCommand(),
        AddCommand(),
        RemoveCommand(),
        ClearCommand(),
        ShowCommand(),
        CheckCommand(),
        FuelCommand(),
        ValidateCommand(),
        CalculateCommand(),
        BodiesCommand(),
        HistoryCommand(),
    ):
        registry.register(command)
    return registry


class REPL:
    """
    Read-eval-print loop over one flight path session.

    The session flight path lives on ``ctx`` and survives between lines, so
    ``mass``, ``add`` and ``remove`` build it up step by step while
    ``validate`` and ``calculate`` work on their arguments only.
    """

    def __init__(
        self,
        ctx: Optional[CLIContext] = None,
        registry: Optional[CommandRegistry] = None,
    ):
        self.ctx = ctx or CLIContext()
        self.registry = registry or default_registry()

    def run(self, prompt: str = "flightfuel> ") -> None:
        """Prompt for lines until quit or end of input."""
        print("flightfuel - launch/landing fuel calculator")
        print("Type 'help' for commands, 'quit' to exit\n")

        while True:
            try:
                line = input(prompt).strip()
            except KeyboardInterrupt:
                print("\nUse 'quit' to exit")
                continue
            except EOFError:
                print()
                break

            if line.lower() in QUIT_WORDS:
                break
            if line.lower() == "help":
                print(self.help_text())
            elif line:
                print(format_output(self.execute_line(line), self.ctx.output_format))

        print("Goodbye!")

    def execute_line(self, line: str) -> CommandResult:
        """Parse and run one command line."""
        try:
            parts = shlex.split(line)
        except ValueError as e:
            return CommandResult.failure(f"Parse error: {e}")

        if not parts:
            return CommandResult()

        name, argv = parts[0], parts[1:]
        self.ctx.history.append(line)

        resolved = self.registry.resolve(name)
        if resolved is None:
            return CommandResult.failure(
                f"Unknown command: {name}. Type 'help' for available commands."
            )
        command, parser = resolved

        try:
            args = parser.parse_args(argv)
        except ValueError as e:
            return CommandResult.failure(f"Invalid arguments for {name}: {e}")
        except SystemExit:
            # --help printed usage
            return CommandResult()

        logger.debug(f"Executing {command.name} {argv}")
        return command.execute(self.ctx, args)

    def execute_batch(self, lines: Iterable[str]) -> List[CommandResult]:
        """Run lines in order, skipping blanks and '#' comments; stop at the first failure."""
        results: List[CommandResult] = []
        for line in lines:
            line = line.strip()
            if not line or line.startswith("#"):
                continue
            result = self.execute_line(line)
            results.append(result)
            if not result.success:
                break
        return results

    def execute_file(self, filepath: str) -> List[CommandResult]:
        """Run a script of command lines."""
        with open(filepath, "r") as f:
            return self.execute_batch(f.readlines())

    def help_text(self) -> str:
        lines = ["Commands:"]
        for name, aliases, description in self.registry.help_rows():
            alias_text = f" ({', '.join(aliases)})" if aliases else ""
            lines.append(f"  {name}{alias_text}")
            lines.append(f"      {description}")
        lines.append("  help / quit")
        return "\n".join(lines)

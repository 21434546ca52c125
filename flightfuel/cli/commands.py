"""
cli/commands.py - CLI command implementations

Session commands edit the context's flight path and report the recalculated
fuel after every edit. One-shot commands (validate, calculate) take the mass
and steps as arguments and leave the session untouched.
"""

from __future__ import annotations
from typing import Any, Dict, List, Optional, Tuple
import argparse

from .core import CLICommand, CLIContext, CommandResult, format_number
from flightfuel.core.constants import GRAVITY_M_S2
from flightfuel.core.flight_path import FlightPath
from flightfuel.errors.taxonomy import FlightFuelError
from flightfuel.physics.fuel import FuelEngine
from flightfuel.validators.path_validator import PathValidator
from flightfuel.validators.taxonomy import ViolationField


def parse_mass(value: str) -> Optional[int]:
    """Parse typed mass; anything but a positive integer yields None."""
    try:
        mass = int(value.strip())
    except (AttributeError, ValueError):
        return None
    return mass if mass > 0 else None


def parse_step_token(token: str) -> Tuple[str, Optional[str]]:
    """Split 'launch:earth' into raw identifiers; identifiers are checked by the validator."""
    action, sep, body = token.partition(":")
    return action, (body if sep else None)


def session_summary(path: FlightPath) -> Dict[str, Any]:
    """Mass, steps and either total fuel or the first error per field."""
    calc = path.calculate_fuel()
    data: Dict[str, Any] = {
        "mass": f"{format_number(path.mass)} kg" if path.mass else "-",
        "steps": " -> ".join(m.label for m in path.maneuvers) or "(none)",
    }
    if calc.success:
        data["total_fuel"] = f"{format_number(calc.total_fuel)} kg"
    else:
        mass_error = calc.validation.first_message(ViolationField.MASS)
        steps_error = calc.validation.first_message(ViolationField.MANEUVERS)
        if mass_error:
            data["mass_error"] = mass_error
        if steps_error:
            data["steps_error"] = steps_error
    return data


# =============================================================================
# SESSION COMMANDS
# =============================================================================

class MassCommand(CLICommand):
    """Set spacecraft mass."""

    name = "mass"
    description = "Set spacecraft mass in kg"
    aliases = ["set-mass"]

    def configure_parser(self, parser: argparse.ArgumentParser) -> None:
        parser.add_argument("value", help="Mass in kg (positive integer)")

    def execute(self, ctx: CLIContext, args: argparse.Namespace) -> CommandResult:
        mass = parse_mass(args.value)
        ctx.flight_path = ctx.flight_path.set_mass(mass)

        if mass is None:
            message = f"Mass cleared: {args.value!r} is not a positive integer"
        else:
            message = f"Mass set to {format_number(mass)} kg"

        return CommandResult(success=True, message=message, data=session_summary(ctx.flight_path))


class AddCommand(CLICommand):
    """Append a launch or landing."""

    name = "add"
    description = "Add a step: add <launch|land> <earth|moon|mars>"
    aliases = ["add-step"]

    def configure_parser(self, parser: argparse.ArgumentParser) -> None:
        parser.add_argument("action", help="launch or land")
        parser.add_argument("body", help="earth, moon or mars")

    def execute(self, ctx: CLIContext, args: argparse.Namespace) -> CommandResult:
        try:
            ctx.flight_path = ctx.flight_path.add_step(args.action, args.body)
        except FlightFuelError as e:
            return CommandResult.failure(str(e))

        step = ctx.flight_path.maneuvers[-1]
        return CommandResult(
            success=True,
            message=f"Added step {len(ctx.flight_path.maneuvers) - 1}: {step.label}",
            data=session_summary(ctx.flight_path),
        )


class RemoveCommand(CLICommand):
    """Remove a step by index."""

    name = "remove"
    description = "Remove the step at INDEX (0-based, negative counts from the end)"
    aliases = ["rm"]

    def configure_parser(self, parser: argparse.ArgumentParser) -> None:
        parser.add_argument("index", type=int, help="Step index")

    def execute(self, ctx: CLIContext, args: argparse.Namespace) -> CommandResult:
        steps = ctx.flight_path.maneuvers
        if not -len(steps) <= args.index < len(steps):
            return CommandResult.failure(f"No step at index {args.index} ({len(steps)} steps)")

        removed = steps[args.index]
        ctx.flight_path = ctx.flight_path.remove_step(args.index)
        return CommandResult(
            success=True,
            message=f"Removed step {args.index}: {removed.label}",
            data=session_summary(ctx.flight_path),
        )


class ClearCommand(CLICommand):
    """Remove all steps."""

    name = "clear"
    description = "Remove all steps (mass is kept)"
    aliases = ["clear-path"]

    def execute(self, ctx: CLIContext, args: argparse.Namespace) -> CommandResult:
        ctx.flight_path = ctx.flight_path.clear_steps()
        return CommandResult(success=True, message="Flight path cleared")


class ShowCommand(CLICommand):
    """Show the session flight path."""

    name = "show"
    description = "Show mass, steps and total fuel"
    aliases = ["status"]

    def execute(self, ctx: CLIContext, args: argparse.Namespace) -> CommandResult:
        return CommandResult(
            success=True,
            message="Flight path:",
            data=session_summary(ctx.flight_path),
        )


class CheckCommand(CLICommand):
    """Validate the session flight path."""

    name = "check"
    description = "Validate the session flight path"

    def execute(self, ctx: CLIContext, args: argparse.Namespace) -> CommandResult:
        result = ctx.flight_path.validate()
        return _validation_result(result)


class FuelCommand(CLICommand):
    """Calculate fuel for the session flight path."""

    name = "fuel"
    description = "Calculate total fuel for the session flight path"

    def execute(self, ctx: CLIContext, args: argparse.Namespace) -> CommandResult:
        calc = ctx.flight_path.calculate_fuel()
        if not calc.success:
            return _invalid_result(calc.validation)
        return _fuel_result(ctx.flight_path.mass, calc.total_fuel, calc.stages)


# =============================================================================
# ONE-SHOT COMMANDS
# =============================================================================

class _OneShotCommand(CLICommand):
    """Shared argument layout: --mass N step [step ...]."""

    def configure_parser(self, parser: argparse.ArgumentParser) -> None:
        parser.add_argument("--mass", "-m", type=int, default=None, help="Spacecraft mass in kg")
        parser.add_argument(
            "steps", nargs="*",
            help="Steps as action:body, e.g. launch:earth land:moon",
        )

    def _steps(self, args: argparse.Namespace) -> List[Tuple[str, Optional[str]]]:
        return [parse_step_token(token) for token in args.steps]


class ValidateCommand(_OneShotCommand):
    """Validate a flight path given on the command line."""

    name = "validate"
    description = "Validate --mass N and steps (action:body ...)"

    def execute(self, ctx: CLIContext, args: argparse.Namespace) -> CommandResult:
        result = PathValidator().validate(args.mass, self._steps(args))
        return _validation_result(result)


class CalculateCommand(_OneShotCommand):
    """Calculate fuel for a flight path given on the command line."""

    name = "calculate"
    description = "Calculate fuel for --mass N and steps (action:body ...)"
    aliases = ["calc"]

    def execute(self, ctx: CLIContext, args: argparse.Namespace) -> CommandResult:
        steps = self._steps(args)
        result = PathValidator().validate(args.mass, steps)
        if not result.valid:
            return _invalid_result(result)

        stages = FuelEngine().breakdown(args.mass, steps)
        total = sum(s.fuel_kg for s in stages)
        return _fuel_result(args.mass, total, stages)


# =============================================================================
# INFORMATION
# =============================================================================

class BodiesCommand(CLICommand):
    """List bodies and their gravity."""

    name = "bodies"
    description = "List bodies of travel and surface gravity"
    aliases = ["planets"]

    def execute(self, ctx: CLIContext, args: argparse.Namespace) -> CommandResult:
        rows = [
            {"body": body.value, "gravity_m_s2": gravity}
            for body, gravity in GRAVITY_M_S2.items()
        ]
        return CommandResult(success=True, message="Bodies:", data=rows)


class HistoryCommand(CLICommand):
    """Show command history."""

    name = "history"
    description = "Show command history"

    def configure_parser(self, parser: argparse.ArgumentParser) -> None:
        parser.add_argument("--limit", "-n", type=int, default=20, help="Most recent N lines")

    def execute(self, ctx: CLIContext, args: argparse.Namespace) -> CommandResult:
        history = ctx.history[-args.limit:] if args.limit > 0 else []
        return CommandResult(success=True, message="Command history:", data=history)


# =============================================================================
# HELPERS
# =============================================================================

def _validation_result(result) -> CommandResult:
    if result.valid:
        return CommandResult(success=True, message="Flight path is valid", data=result.to_dict())
    return _invalid_result(result)


def _invalid_result(result) -> CommandResult:
    reasons = ", ".join(c.value for c in result.reasons)
    return CommandResult.failure(
        f"Invalid flight path: {reasons}",
        data=result.to_dict(),
        message="Flight path is invalid",
    )


def _fuel_result(mass: int, total: int, stages) -> CommandResult:
    return CommandResult(
        success=True,
        message=f"Total fuel required: {format_number(total)} kg (spacecraft {format_number(mass)} kg)",
        data={
            "total_fuel": total,
            "mass": mass,
            "stages": [s.to_dict() for s in stages],
        },
    )

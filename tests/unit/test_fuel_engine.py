"""
Unit tests for flightfuel/physics/fuel.py

Tests the launch/land formulas, the fuel-for-fuel loop and path accumulation.
"""

import pytest

from flightfuel.core.constants import GRAVITY_M_S2
from flightfuel.core.enums import Action, Body
from flightfuel.core.maneuver import Maneuver
from flightfuel.errors.taxonomy import UnknownBodyError
from flightfuel.physics.fuel import (
    FuelEngine,
    LAND_FORMULA,
    LAUNCH_FORMULA,
    compute_fuel,
    formula_for,
    recursive_fuel,
)

EARTH = GRAVITY_M_S2[Body.EARTH]
MOON = GRAVITY_M_S2[Body.MOON]
MARS = GRAVITY_M_S2[Body.MARS]


class TestFormulas:
    """Tests for the single-stage formulas."""

    def test_land_formula(self):
        # 28801 * 9.807 * 0.033 - 42 = 9278.9...
        assert LAND_FORMULA(28801, EARTH) == 9278

    def test_launch_formula_floors_toward_negative_infinity(self):
        # 1 * 9.807 * 0.042 - 33 = -32.58...
        assert LAUNCH_FORMULA(1, EARTH) == -33

    def test_formula_for_action(self):
        assert formula_for(Action.LAUNCH) is LAUNCH_FORMULA
        assert formula_for("land") is LAND_FORMULA


class TestRecursiveFuel:
    """Tests for the fuel-for-fuel loop."""

    def test_landing_apollo_on_earth(self):
        # 9278 + 2960 + 915 + 254 + 40
        assert recursive_fuel(28801, EARTH, LAND_FORMULA) == 13447

    def test_launch_apollo_from_earth(self):
        assert recursive_fuel(28801, EARTH, LAUNCH_FORMULA) == 19772

    def test_single_stage(self):
        assert recursive_fuel(1000, MOON, LAUNCH_FORMULA) == 35

    def test_zero_when_base_formula_not_positive(self):
        assert recursive_fuel(100, MOON, LAND_FORMULA) == 0
        assert recursive_fuel(1, EARTH, LAUNCH_FORMULA) == 0

    def test_launch_threshold_on_earth(self):
        assert recursive_fuel(82, EARTH, LAUNCH_FORMULA) == 0
        assert recursive_fuel(83, EARTH, LAUNCH_FORMULA) == 1

    def test_non_positive_mass(self):
        assert recursive_fuel(0, EARTH, LAUNCH_FORMULA) == 0
        assert recursive_fuel(-500, EARTH, LAND_FORMULA) == 0

    @pytest.mark.parametrize("formula", [LAUNCH_FORMULA, LAND_FORMULA])
    @pytest.mark.parametrize("gravity", [EARTH, MOON, MARS])
    def test_monotonic_in_mass(self, formula, gravity):
        previous = 0
        for mass in range(0, 200001, 997):
            fuel = recursive_fuel(mass, gravity, formula)
            assert fuel >= previous
            previous = fuel

    @pytest.mark.parametrize("formula", [LAUNCH_FORMULA, LAND_FORMULA])
    @pytest.mark.parametrize("mass", [500, 5000, 28801, 75432])
    def test_monotonic_in_gravity(self, formula, mass):
        fuels = [recursive_fuel(mass, g, formula) for g in sorted([MOON, MARS, EARTH])]
        assert fuels == sorted(fuels)

    def test_large_mass_terminates(self):
        fuel = recursive_fuel(10 ** 12, EARTH, LAUNCH_FORMULA)
        assert fuel > 0


class TestFuelEngine:
    """Tests for path accumulation."""

    def test_apollo_11(self, engine, apollo_path):
        mass, steps = apollo_path
        assert engine.compute(mass, steps) == 51898

    def test_breakdown_in_flight_order(self, engine, apollo_path):
        mass, steps = apollo_path
        stages = engine.breakdown(mass, steps)

        assert [s.maneuver.label for s in stages] == [
            "Launch Earth", "Land Moon", "Launch Moon", "Land Earth",
        ]
        assert [s.fuel_kg for s in stages] == [32988, 2462, 3001, 13447]
        assert sum(s.fuel_kg for s in stages) == 51898

    def test_later_fuel_is_carried_by_earlier_maneuvers(self, engine, apollo_path):
        mass, steps = apollo_path
        stages = engine.breakdown(mass, steps)

        # Final landing moves only the dry mass
        assert stages[-1].mass_kg == mass
        assert [s.mass_kg for s in stages] == [47711, 45249, 42248, 28801]

    def test_two_step_path(self, engine):
        steps = [("launch", "earth"), ("land", "moon")]
        assert engine.compute(28801, steps) == 1535 + 20845

    def test_accepts_maneuver_objects(self, engine):
        steps = [Maneuver(Action.LAUNCH, Body.EARTH), Maneuver(Action.LAND, Body.MOON)]
        assert engine.compute(28801, steps) == 22380

    def test_non_positive_mass_yields_zero(self, engine, apollo_path):
        _, steps = apollo_path
        assert engine.compute(0, steps) == 0
        assert engine.compute(-10, steps) == 0

    def test_empty_path_yields_zero(self, engine):
        assert engine.compute(28801, []) == 0

    def test_unknown_body_raises(self, engine):
        with pytest.raises(UnknownBodyError):
            engine.compute(28801, [("launch", "earth"), ("land", "pluto")])

    def test_unknown_body_is_value_error(self, engine):
        with pytest.raises(ValueError):
            engine.compute(28801, [("launch", "venus")])

    def test_module_level_compute_fuel(self, apollo_path):
        mass, steps = apollo_path
        assert compute_fuel(mass, steps) == 51898

    def test_stage_to_dict(self, engine):
        stage = engine.breakdown(28801, [("land", "earth")])[0]
        assert stage.to_dict() == {
            "action": "land",
            "body": "earth",
            "mass_kg": 28801,
            "fuel_kg": 13447,
        }

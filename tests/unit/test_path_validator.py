"""
Unit tests for flightfuel/validators/path_validator.py

Tests mass rules, sequence rules, reason ordering and input handling.
"""

import pytest

from flightfuel.core.enums import Action, Body
from flightfuel.core.maneuver import Maneuver
from flightfuel.errors.taxonomy import ErrorCode
from flightfuel.validators.path_validator import PathValidator, validate
from flightfuel.validators.taxonomy import ValidationResult, ViolationField


VALID_STEPS = [("launch", "earth"), ("land", "moon")]


class TestMassRules:
    """Tests for mass validation."""

    def test_positive_mass_is_valid(self, validator):
        result = validator.validate(28801, VALID_STEPS)
        assert result.valid
        assert result.reasons == []

    def test_missing_mass(self, validator):
        result = validator.validate(None, VALID_STEPS)
        assert not result.valid
        assert result.reasons == [ErrorCode.MASS_REQUIRED]
        assert result.first_message(ViolationField.MASS) == "can't be blank"

    def test_zero_mass(self, validator):
        result = validator.validate(0, VALID_STEPS)
        assert result.reasons == [ErrorCode.MASS_MUST_BE_POSITIVE]
        assert result.first_message(ViolationField.MASS) == "must be a positive number"

    def test_negative_mass(self, validator):
        result = validator.validate(-100, VALID_STEPS)
        assert result.reasons == [ErrorCode.MASS_MUST_BE_POSITIVE]

    def test_only_one_mass_reason(self, validator):
        result = validator.validate(None, VALID_STEPS)
        assert len(result.mass_violations) == 1

    def test_mass_of_one_is_valid(self, validator):
        assert validator.validate(1, VALID_STEPS).valid

    @pytest.mark.parametrize("mass", [True, False, "5", 12.5, [28801]])
    def test_non_integer_mass_is_reported(self, validator, mass):
        result = validator.validate(mass, VALID_STEPS)
        assert result.reasons == [ErrorCode.MASS_MUST_BE_POSITIVE]


class TestSequenceRules:
    """Tests for maneuver sequence validation."""

    def test_empty_steps(self, validator):
        result = validator.validate(28801, [])
        assert result.reasons == [ErrorCode.STEPS_EMPTY]
        assert result.first_message(ViolationField.MANEUVERS) == "flight path cannot be empty"

    def test_none_steps_treated_as_empty(self, validator):
        result = validator.validate(28801, None)
        assert result.reasons == [ErrorCode.STEPS_EMPTY]

    def test_not_starting_with_launch(self, validator):
        result = validator.validate(28801, [("land", "earth"), ("launch", "earth"), ("land", "moon")])
        assert result.reasons == [ErrorCode.MUST_START_WITH_LAUNCH]

    def test_not_ending_with_land(self, validator):
        result = validator.validate(28801, [("launch", "earth"), ("land", "moon"), ("launch", "moon")])
        assert result.reasons == [ErrorCode.MUST_END_WITH_LAND]

    def test_single_launch(self, validator):
        result = validator.validate(28801, [("launch", "earth")])
        assert result.reasons == [ErrorCode.MUST_END_WITH_LAND]

    def test_single_land_only_fails_start(self, validator):
        # The lone step is a landing, so the path does end with one
        result = validator.validate(28801, [("land", "earth")])
        assert result.reasons == [ErrorCode.MUST_START_WITH_LAUNCH]

    def test_consecutive_launches(self, validator):
        result = validator.validate(
            28801, [("launch", "earth"), ("launch", "moon"), ("land", "mars")]
        )
        assert result.reasons == [ErrorCode.MUST_ALTERNATE]
        assert result.first_message(ViolationField.MANEUVERS) == (
            "actions must alternate between launch and land"
        )

    def test_consecutive_lands(self, validator):
        result = validator.validate(
            28801, [("launch", "earth"), ("land", "moon"), ("land", "mars")]
        )
        assert result.reasons == [ErrorCode.MUST_ALTERNATE]

    def test_alternation_reported_once(self, validator):
        steps = [
            ("launch", "earth"), ("launch", "earth"),
            ("land", "moon"), ("land", "moon"),
            ("launch", "moon"), ("launch", "moon"),
            ("land", "earth"),
        ]
        result = validator.validate(28801, steps)
        assert result.reasons.count(ErrorCode.MUST_ALTERNATE) == 1

    def test_launch_from_other_body(self, validator):
        steps = [("launch", "earth"), ("land", "moon"), ("launch", "mars"), ("land", "earth")]
        result = validator.validate(28801, steps)
        assert result.reasons == [ErrorCode.LAUNCH_BODY_MISMATCH]
        assert result.first_message(ViolationField.MANEUVERS) == (
            "must launch from the planet where you last landed"
        )

    def test_mismatch_reported_once(self, validator):
        steps = [
            ("launch", "earth"), ("land", "moon"),
            ("launch", "mars"), ("land", "earth"),
            ("launch", "moon"), ("land", "mars"),
        ]
        result = validator.validate(28801, steps)
        assert result.reasons == [ErrorCode.LAUNCH_BODY_MISMATCH]

    def test_launch_from_landing_body(self, validator):
        steps = [("launch", "earth"), ("land", "moon"), ("launch", "moon"), ("land", "earth")]
        assert validator.validate(28801, steps).valid

    def test_first_launch_body_is_unconstrained(self, validator):
        assert validator.validate(500, [("launch", "mars"), ("land", "moon")]).valid


class TestReasonOrdering:
    """Reasons are reported in the fixed order regardless of combination."""

    def test_missing_mass_and_empty_steps(self, validator):
        result = validator.validate(None, [])
        assert result.reasons == [ErrorCode.MASS_REQUIRED, ErrorCode.STEPS_EMPTY]

    def test_every_structural_rule(self, validator):
        # land earth, land earth, launch moon: bad start, bad end, no alternation;
        # (land earth -> launch moon) is also a relaunch mismatch
        steps = [("land", "earth"), ("land", "earth"), ("launch", "moon")]
        result = validator.validate(-5, steps)
        assert result.reasons == [
            ErrorCode.MASS_MUST_BE_POSITIVE,
            ErrorCode.MUST_START_WITH_LAUNCH,
            ErrorCode.MUST_END_WITH_LAND,
            ErrorCode.MUST_ALTERNATE,
            ErrorCode.LAUNCH_BODY_MISMATCH,
        ]

    def test_order_matches_code_declaration(self, validator):
        steps = [("land", "pluto"), ("land", "earth"), ("launch", "moon"), ("hover", "moon")]
        result = validator.validate(None, steps)
        ranks = [c.rank for c in result.reasons]
        assert ranks == sorted(ranks)

    def test_mass_reasons_first(self, validator):
        result = validator.validate(0, [("land", "earth")])
        assert result.violations[0].field == ViolationField.MASS
        assert all(v.field == ViolationField.MANEUVERS for v in result.violations[1:])


class TestUnknownIdentifiers:
    """Unknown actions and bodies are reported, not raised."""

    def test_unknown_body(self, validator):
        result = validator.validate(28801, [("launch", "earth"), ("land", "pluto")])
        assert result.reasons == [ErrorCode.UNKNOWN_BODY]

    def test_unknown_body_does_not_double_report_mismatch(self, validator):
        steps = [("launch", "earth"), ("land", "pluto"), ("launch", "moon"), ("land", "earth")]
        result = validator.validate(28801, steps)
        assert result.reasons == [ErrorCode.UNKNOWN_BODY]

    def test_unknown_action(self, validator):
        result = validator.validate(28801, [("launch", "earth"), ("orbit", "moon")])
        assert ErrorCode.UNKNOWN_ACTION in result.reasons
        assert ErrorCode.MUST_END_WITH_LAND in result.reasons

    def test_unknown_reported_once(self, validator):
        steps = [("launch", "venus"), ("land", "pluto")]
        result = validator.validate(28801, steps)
        assert result.reasons == [ErrorCode.UNKNOWN_BODY]

    def test_unrecognized_entry_shape(self, validator):
        result = validator.validate(28801, [("launch", "earth"), "land-moon"])
        assert ErrorCode.UNKNOWN_ACTION in result.reasons
        assert ErrorCode.UNKNOWN_BODY in result.reasons


class TestInputShapes:
    """Validator accepts Maneuvers, pairs and mappings."""

    def test_maneuver_objects(self, validator):
        steps = [Maneuver(Action.LAUNCH, Body.EARTH), Maneuver(Action.LAND, Body.MOON)]
        assert validator.validate(100, steps).valid

    def test_mappings_with_planet_key(self, validator):
        steps = [
            {"action": "launch", "planet": "earth"},
            {"action": "land", "body": "moon"},
        ]
        assert validator.validate(100, steps).valid

    def test_case_insensitive_identifiers(self, validator):
        assert validator.validate(100, [("LAUNCH", "Earth"), ("Land", "MOON")]).valid

    def test_input_not_mutated(self, validator):
        steps = [("launch", "earth"), ("land", "moon")]
        snapshot = list(steps)
        validator.validate(100, steps)
        assert steps == snapshot


class TestPurity:
    """Validation is deterministic."""

    def test_idempotent(self, validator):
        steps = [("land", "earth"), ("land", "mars")]
        first = validator.validate(None, steps)
        second = validator.validate(None, steps)
        assert first == second
        assert first.to_dict() == second.to_dict()

    def test_module_level_validate(self):
        result = validate(28801, VALID_STEPS)
        assert isinstance(result, ValidationResult)
        assert result.valid

    def test_validator_id(self):
        assert PathValidator.VALIDATOR_ID == "flight_path"

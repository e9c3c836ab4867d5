# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""End-to-end behaviour of the synchronous pipeline."""

from __future__ import annotations

import pytest

import attrvet
from attrvet import ConstraintValidator, ErrorRecord
from attrvet.exceptions import ConfigurationError, UnknownFormatError, UnknownValidatorError


# ------------------------------------------------------------------
# Module-level API
# ------------------------------------------------------------------


def test_missing_attribute_fails_presence():
    assert attrvet.validate({}, {"name": {"presence": True}}) == {"name": ["Name can't be blank"]}


def test_wrong_length():
    assert attrvet.validate({"foo": "bar"}, {"foo": {"length": {"is": 5}}}) == {
        "foo": ["Foo is the wrong length (should be 5 characters)"]
    }


def test_flat_format_numericality():
    errors = attrvet.validate(
        {"foo": 0}, {"foo": {"numericality": {"greaterThan": 0}}}, {"format": "flat"}
    )
    assert errors == ["Foo must be greater than 0"]


@pytest.mark.parametrize("fmt", ["grouped", "flat", "detailed", "constraint"])
def test_valid_attributes_return_none_in_every_format(fmt):
    constraints = {"name": {"presence": True, "length": {"maximum": 10}}}
    assert attrvet.validate({"name": "Ada"}, constraints, {"format": fmt}) is None


def test_unknown_validator_raises():
    with pytest.raises(UnknownValidatorError, match="Unknown validator bogus"):
        attrvet.validate({"foo": 1}, {"foo": {"bogus": True}})


def test_unknown_format_raises():
    with pytest.raises(UnknownFormatError, match="Unknown format nope"):
        attrvet.validate({}, {"foo": {"presence": True}}, {"format": "nope"})


def test_registered_validator_is_used_by_module_api():
    attrvet.register_validator("even", lambda value, *_: None if value % 2 == 0 else "must be even")

    assert attrvet.validate({"n": 3}, {"n": {"even": True}}) == {"n": ["N must be even"]}


# ------------------------------------------------------------------
# Constraint resolution
# ------------------------------------------------------------------


def test_constraints_run_in_declaration_order(engine):
    constraints = {
        "b": {"presence": True},
        "a": {"length": {"minimum": 2}, "presence": True},
    }

    errors = engine.validate({"a": "x"}, constraints, {"format": "detailed"})

    assert [(r.attribute, r.validator) for r in errors] == [("b", "presence"), ("a", "length")]
    assert all(isinstance(r, ErrorRecord) for r in errors)


def test_computed_constraints_receive_resolution_arguments(engine):
    seen = []

    def constraint(value, attributes, attribute, options, constraints):
        seen.append((value, attributes, attribute, options["format"], list(constraints)))
        return {"presence": {"allowEmpty": False}}

    errors = engine.validate({"name": ""}, {"name": constraint})

    assert errors == {"name": ["Name can't be blank"]}
    assert seen == [("", {"name": ""}, "name", "grouped", ["name"])]


def test_computed_options_can_disable_a_validator(engine):
    constraints = {
        "password": {"presence": True},
        "confirm": {"presence": lambda value, attributes, *_: bool(attributes.get("password"))},
    }

    assert engine.validate({}, constraints) == {"password": ["Password can't be blank"]}
    assert engine.validate({"password": "x"}, constraints) == {"confirm": ["Confirm can't be blank"]}


@pytest.mark.parametrize("options", [None, False])
def test_none_and_false_options_skip(engine, options):
    assert engine.validate({}, {"name": {"presence": options}}) is None


def test_empty_mapping_options_still_run(engine):
    assert engine.validate({}, {"name": {"presence": {}}}) == {"name": ["Name can't be blank"]}


def test_non_mapping_constraint_contributes_nothing(engine):
    assert engine.validate({}, {"name": None, "other": "presence"}) is None


def test_unknown_validator_aborts_even_after_failures(engine):
    with pytest.raises(UnknownValidatorError):
        engine.validate({}, {"a": {"presence": True}, "b": {"nope": True}})


def test_nested_attributes_via_keypath(engine):
    errors = engine.validate(
        {"user": {"address": {"city": ""}}},
        {"user.address.city": {"presence": {"allowEmpty": False}}},
    )

    assert errors == {"user.address.city": ["User address city can't be blank"]}


def test_validate_does_not_clean_attributes(engine):
    seen = []
    engine.validators.register("spy", lambda value, options, attribute, attributes, _g: seen.append(attributes))

    engine.validate({"a": 1, "b": 2}, {"a": {"spy": True}})

    assert seen == [{"a": 1, "b": 2}]


def test_multiple_messages_from_one_validator(engine):
    engine.validators.register("double", lambda *_: ["err1", "err2"])

    assert engine.validate({"x": 1}, {"x": {"double": True}}) == {"x": ["X err1", "X err2"]}


# ------------------------------------------------------------------
# Options and catalogue state
# ------------------------------------------------------------------


def test_instance_options_sit_under_call_options(catalogue):
    engine = ConstraintValidator({"format": "flat", "fullMessages": False}, validators=catalogue)

    assert engine.validate({}, {"a": {"presence": True}}) == ["can't be blank"]
    assert engine.validate({}, {"a": {"presence": True}}, {"fullMessages": True}) == ["A can't be blank"]


def test_environment_overrides_default_format(monkeypatch, engine):
    monkeypatch.setenv("ATTRVET_FORMAT", "flat")
    monkeypatch.setenv("ATTRVET_FULL_MESSAGES", "0")

    assert engine.validate({}, {"a": {"presence": True}}) == ["can't be blank"]


def test_prettify_option_controls_attribute_names(engine):
    errors = engine.validate({}, {"firstName": {"presence": True}}, {"prettify": lambda s: str(s).upper()})

    assert errors == {"firstName": ["FIRSTNAME can't be blank"]}


def test_entry_messages_and_options_are_persistent(engine, catalogue):
    catalogue.get("presence").messages["message"] = "is required"
    catalogue.get("length").options["minimum"] = 3

    errors = engine.validate({"a": "xy"}, {"a": {"length": True}, "b": {"presence": True}})

    assert errors == {
        "a": ["A is too short (minimum is 3 characters)"],
        "b": ["B is required"],
    }


def test_copied_catalogue_is_isolated(catalogue):
    isolated = ConstraintValidator(validators=catalogue.copy())
    catalogue.get("presence").messages["message"] = "is required"

    assert isolated.validate({}, {"a": {"presence": True}}) == {"a": ["A can't be blank"]}


def test_process_results_on_raw_records(engine):
    records = engine.run_validations({}, {"a": {"presence": True}}, engine.resolve_options())

    assert engine.process_results(records, {"format": "flat"}) == ["A can't be blank"]
    assert engine.process_results([], {"format": "flat"}) is None


# ------------------------------------------------------------------
# single()
# ------------------------------------------------------------------


def test_single_returns_flat_unprefixed_messages():
    assert attrvet.single("foo", {"length": {"minimum": 5}, "format": "^\\d+$"}) == [
        "is too short (minimum is 5 characters)",
        "is invalid",
    ]
    assert attrvet.single(7, {"numericality": {"odd": True}}) is None


def test_single_ignores_caller_format():
    assert attrvet.single(None, {"presence": True}, {"format": "grouped", "fullMessages": True}) == [
        "can't be blank"
    ]


def test_single_surfaces_configuration_errors():
    with pytest.raises(UnknownValidatorError):
        attrvet.single("x", {"bogus": True})
    with pytest.raises(ConfigurationError):
        attrvet.single("x", {"equality": {}})

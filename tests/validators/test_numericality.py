# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

from __future__ import annotations

import math

import pytest


@pytest.fixture()
def numericality(catalogue):
    return catalogue.get("numericality")


@pytest.mark.parametrize("value", [None, 0, -3, 2.5, "12", " 4.5 ", "1e3"])
def test_numbers_and_numeric_strings_pass(numericality, value):
    assert numericality(value, True) is None


@pytest.mark.parametrize("value", ["abc", "", True, [1], {"a": 1}, float("nan")])
def test_non_numbers_fail(numericality, value):
    assert numericality(value, True) == "is not a number"


def test_no_strings(numericality):
    assert numericality("5", {"noStrings": True}) == "is not a number"
    assert numericality(5, {"noStrings": True}) is None


@pytest.mark.parametrize("value", ["01", "1.", ".5", "+1", "1e3", " 1"])
def test_strict_rejects_non_canonical_numerals(numericality, value):
    assert numericality(value, {"strict": True}) == "must be a valid number"


def test_strict_accepts_canonical_numerals(numericality):
    assert numericality("-10.25", {"strict": True}) is None
    assert numericality("3", {"strict": True, "onlyInteger": True}) is None
    assert numericality("3.5", {"strict": True, "onlyInteger": True}) == "must be a valid number"


def test_only_integer(numericality):
    assert numericality(3.5, {"onlyInteger": True}) == "must be an integer"
    assert numericality("3.0", {"onlyInteger": True}) is None
    assert numericality(3.5, {"onlyInteger": True, "notInteger": "must be whole"}) == "must be whole"


@pytest.mark.parametrize(
    "options,value,expected",
    [
        ({"greaterThan": 2}, 2, "must be greater than 2"),
        ({"greaterThanOrEqualTo": 2}, 1, "must be greater than or equal to 2"),
        ({"equalTo": 2}, 3, "must be equal to 2"),
        ({"lessThan": 2}, 2, "must be less than 2"),
        ({"lessThanOrEqualTo": 2}, 3, "must be less than or equal to 2"),
        ({"divisibleBy": 3}, 4, "must be divisible by 3"),
    ],
)
def test_comparisons(numericality, options, value, expected):
    assert numericality(value, options) == [expected]


def test_comparison_failures_accumulate_in_order(numericality):
    errors = numericality(5, {"lessThan": 3, "greaterThan": 10, "even": True})

    assert errors == ["must be greater than 10", "must be less than 3", "must be even"]


def test_odd_and_even(numericality):
    assert numericality(2, {"odd": True}) == ["must be odd"]
    assert numericality(-3, {"odd": True}) is None
    assert numericality(3, {"even": True}) == ["must be even"]


def test_comparison_message_keys_and_message_override(numericality):
    assert numericality(1, {"greaterThan": 5, "notGreaterThan": "is too small (%{count})"}) == [
        "is too small (5)"
    ]
    assert numericality(1, {"greaterThan": 5, "message": "is out of range"}) == "is out of range"


def test_prettify_option_renders_comparison_name(numericality):
    errors = numericality(1, {"greaterThan": 5}, "age", {"age": 1}, {"prettify": lambda s: s.upper()})

    assert errors == ["must be GREATERTHAN 5"]


def test_entry_messages(numericality):
    numericality.messages["notValid"] = "should be numeric"
    numericality.messages["notOdd"] = "should be odd"

    assert numericality("x", True) == "should be numeric"
    assert numericality(2, {"odd": True}) == ["should be odd"]


def test_zero_divisor_fails_instead_of_raising(numericality):
    assert numericality(4, {"divisibleBy": 0}) == ["must be divisible by 0"]


def test_infinite_values_render_in_messages(engine):
    errors = engine.validate(
        {"x": math.inf},
        {"x": {"numericality": {"lessThan": 10}}},
        {"format": "flat"},
    )

    assert errors == ["X must be less than 10"]
    assert engine.validate({"x": -math.inf}, {"x": {"inclusion": [1]}}, {"format": "flat"}) == [
        "-Infinity is not included in the list"
    ]

# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

from __future__ import annotations

import asyncio
from datetime import date, datetime

import pytest

from attrvet.validation.predicates import (
    contains,
    is_array,
    is_disabled,
    is_empty,
    is_integer,
    is_number,
    is_object,
    is_promise,
    result,
    unique,
)


@pytest.mark.parametrize(
    "value",
    [None, "", "   ", "\n\t", [], (), set(), {}],
)
def test_empty_values(value):
    assert is_empty(value) is True


@pytest.mark.parametrize(
    "value",
    [0, False, "a", " a ", [None], {"a": 1}, date(2020, 1, 1), datetime(2020, 1, 1), lambda: None],
)
def test_non_empty_values(value):
    assert is_empty(value) is False


def test_numbers_exclude_booleans_and_nan():
    assert is_number(1)
    assert is_number(1.5)
    assert is_number(float("inf"))
    assert not is_number(True)
    assert not is_number(float("nan"))
    assert not is_number("1")


def test_integers_include_integral_floats():
    assert is_integer(3)
    assert is_integer(3.0)
    assert not is_integer(3.5)
    assert not is_integer(False)


def test_arrays_and_objects_do_not_overlap():
    assert is_array([1]) and is_array((1,))
    assert not is_array("abc")
    assert not is_array({"a": 1})
    assert is_object({"a": 1})
    assert not is_object([("a", 1)])


def test_contains_checks_sequences_and_mapping_keys():
    assert contains([1, 2, 3], 2)
    assert not contains([1, 2, 3], 4)
    assert contains({"a": "Label"}, "a")
    assert not contains({"a": "Label"}, "Label")
    assert not contains({"a": 1}, ["unhashable"])
    assert not contains(None, 1)
    assert not contains("abc", "a")


def test_unique_keeps_first_occurrence():
    assert unique(["b", "a", "b", "c", "a"]) == ["b", "a", "c"]
    assert unique("not a list") == "not a list"


def test_result_calls_callables_with_arguments():
    assert result(lambda a, b: a + b, 1, 2) == 3
    assert result(5, 1, 2) == 5


def test_awaitables_are_promises():
    async def pending():
        return None

    coro = pending()
    try:
        assert is_promise(coro)
    finally:
        coro.close()
    assert not is_promise(pending)
    assert not is_promise("x")


def test_only_none_and_false_disable():
    assert is_disabled(None)
    assert is_disabled(False)
    assert not is_disabled({})
    assert not is_disabled(0)
    assert not is_disabled(True)

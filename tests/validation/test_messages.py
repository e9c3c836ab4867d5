# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

from __future__ import annotations

from datetime import date

import pytest

from attrvet.validation.messages import capitalize, format_message, prettify, stringify_value


def test_format_message_substitutes_placeholders():
    assert format_message("must be %{type} %{count}", {"type": "greater than", "count": 3}) == (
        "must be greater than 3"
    )


def test_format_message_escape_renders_literal_placeholder():
    assert format_message("%%{value} is %{value}", {"value": "x"}) == "%{value} is x"


def test_format_message_leaves_unknown_placeholders():
    assert format_message("needs %{other}", {"value": 1}) == "needs %{other}"


def test_format_message_passes_non_strings_through():
    marker = object()
    assert format_message(marker, {}) is marker


@pytest.mark.parametrize(
    "value,expected",
    [
        ("fooBar", "foo bar"),
        ("foo_bar-baz", "foo bar baz"),
        ("foo.bar", "foo bar"),
        ("foo\\.bar", "foo bar"),
        ("greaterThanOrEqualTo", "greater than or equal to"),
        ("FOO", "foo"),
        (1, "1"),
        (2.0, "2"),
        (1.25, "1.25"),
        (1.256, "1.26"),
        (0.1, "0.1"),
        (0.123, "0.12"),
        (float("inf"), "Infinity"),
        (float("-inf"), "-Infinity"),
        ([1, "fooBar"], "1, foo bar"),
        ({"a": 1}, '{"a": 1}'),
        (date(2020, 1, 2), "2020-01-02"),
        (True, "true"),
        (None, "none"),
    ],
)
def test_prettify(value, expected):
    assert prettify(value) == expected


def test_capitalize():
    assert capitalize("foo bar") == "Foo bar"
    assert capitalize("") == ""
    assert capitalize(3) == 3


def test_stringify_value_uses_prettify_option():
    assert stringify_value("fooBar") == "foo bar"
    assert stringify_value("fooBar", {"prettify": str.upper}) == "FOOBAR"

# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

from __future__ import annotations

from attrvet.validation.base import ErrorRecord, SignalKind, classify_signal
from attrvet.validation.normalize import (
    convert_error_messages,
    expand_multiple_errors,
    normalize,
    prune_empty_errors,
)


def _record(error, attribute="firstName", value="x", validator="custom"):
    return ErrorRecord(
        attribute=attribute,
        value=value,
        validator=validator,
        options=True,
        attributes={attribute: value},
        global_options={},
        error=error,
    )


def test_classify_signal():
    async def pending():
        return None

    coro = pending()
    try:
        assert classify_signal(coro) is SignalKind.PENDING
    finally:
        coro.close()
    assert classify_signal(None) is SignalKind.PASS
    assert classify_signal("bad") is SignalKind.MESSAGE
    assert classify_signal(["a", "b"]) is SignalKind.MESSAGES
    assert classify_signal(lambda *_: "late") is SignalKind.DEFERRED
    assert classify_signal({"code": 1}) is SignalKind.OPAQUE


def test_prune_drops_empty_errors_only():
    records = [_record(None), _record(""), _record("  "), _record([]), _record("kept"), _record(0)]

    assert [r.error for r in prune_empty_errors(records)] == ["kept", 0]


def test_expand_creates_one_record_per_message():
    original = _record(["one", "two"])
    expanded = expand_multiple_errors([original, _record("three")])

    assert [r.error for r in expanded] == ["one", "two", "three"]
    assert original.error == ["one", "two"]
    assert expanded[0] is not original


def test_convert_prefixes_prettified_attribute():
    converted = convert_error_messages([_record("is bad")], {})

    assert converted[0].error == "First name is bad"


def test_convert_respects_caret_and_full_messages():
    records = [_record("^Custom message"), _record("Has \\^ caret")]

    assert [r.error for r in convert_error_messages(records, {})] == [
        "Custom message",
        "First name Has ^ caret",
    ]
    assert convert_error_messages([_record("is bad")], {"fullMessages": False})[0].error == "is bad"


def test_convert_substitutes_prettified_value():
    converted = convert_error_messages([_record("^%{value} is taken", value="someValue")], {})

    assert converted[0].error == "some value is taken"


def test_convert_calls_deferred_errors():
    seen = []

    def deferred(value, attribute, options, attributes, global_options):
        seen.append((value, attribute, options))
        return "was computed later"

    converted = convert_error_messages([_record(deferred)], {})

    assert converted[0].error == "First name was computed later"
    assert seen == [("x", "firstName", True)]


def test_convert_passes_opaque_errors_through():
    opaque = {"code": "E42"}
    converted = convert_error_messages([_record(opaque)], {})

    assert converted[0].error is opaque


def test_normalize_runs_all_stages():
    records = [_record(None), _record(["is short", "^Nope"], attribute="name")]

    assert [r.error for r in normalize(records, {})] == ["Name is short", "Nope"]

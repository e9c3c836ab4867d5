# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

from __future__ import annotations

import pytest


# ------------------------------------------------------------------
# presence
# ------------------------------------------------------------------


@pytest.mark.parametrize("value", [0, False, "", "  ", [], {}, "text"])
def test_presence_allows_empty_values_by_default(catalogue, value):
    assert catalogue.get("presence")(value, True) is None


@pytest.mark.parametrize("value", ["", "  ", [], {}, None])
def test_presence_rejects_empty_values_when_disallowed(catalogue, value):
    assert catalogue.get("presence")(value, {"allowEmpty": False}) == "can't be blank"


@pytest.mark.parametrize("value", [0, False, "x", [0]])
def test_presence_still_accepts_values_when_empty_disallowed(catalogue, value):
    assert catalogue.get("presence")(value, {"allowEmpty": False}) is None


def test_presence_message_precedence(catalogue):
    presence = catalogue.get("presence")

    assert presence(None, {"message": "is needed"}) == "is needed"
    presence.messages["message"] = "is required"
    assert presence(None, True) == "is required"
    assert presence(None, {"message": "is needed"}) == "is needed"


# ------------------------------------------------------------------
# length
# ------------------------------------------------------------------


def test_length_none_passes(catalogue):
    assert catalogue.get("length")(None, {"is": 3}) is None


def test_length_reports_every_violated_bound(catalogue):
    length = catalogue.get("length")

    assert length("ab", {"is": 3, "minimum": 3}) == [
        "is the wrong length (should be 3 characters)",
        "is too short (minimum is 3 characters)",
    ]
    assert length("abcdef", {"maximum": 5}) == ["is too long (maximum is 5 characters)"]
    assert length([1, 2, 3], {"minimum": 1, "maximum": 3}) is None


def test_length_message_replaces_all_errors(catalogue):
    assert catalogue.get("length")("ab", {"is": 3, "minimum": 3, "message": "has a bad size"}) == "has a bad size"


def test_length_custom_bound_messages(catalogue):
    errors = catalogue.get("length")("abc", {"maximum": 2, "tooLong": "needs at most %{count} letters"})

    assert errors == ["needs at most 2 letters"]


def test_length_values_without_len(catalogue):
    length = catalogue.get("length")

    assert length(3, {"is": 1}) == "has an incorrect length"
    length.messages["notValid"] = "cannot be measured"
    assert length(3, {"is": 1}) == "cannot be measured"


def test_length_tokenizer(catalogue):
    words = {"tokenizer": lambda value: value.split(), "minimum": 3, "tooShort": "needs %{count} words"}

    assert catalogue.get("length")("two words", words) == ["needs 3 words"]
    assert catalogue.get("length")("now three words", words) is None

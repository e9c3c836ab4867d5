# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Turn raw validator output into one error record per message.

The three stages run in order: prune, expand, convert. Each returns a new list
and leaves the input records untouched.
"""

from __future__ import annotations

from dataclasses import replace
from typing import Any, List, Mapping, Optional

from .base import ErrorRecord, SignalKind, classify_signal
from .messages import capitalize, format_message, prettify, stringify_value
from .predicates import is_empty

ESCAPED_CARET = "\\^"


def prune_empty_errors(records: List[ErrorRecord]) -> List[ErrorRecord]:
    return [record for record in records if not is_empty(record.error)]


def expand_multiple_errors(records: List[ErrorRecord]) -> List[ErrorRecord]:
    expanded: List[ErrorRecord] = []
    for record in records:
        if classify_signal(record.error) is SignalKind.MESSAGES:
            expanded.extend(replace(record, error=message) for message in record.error)
        else:
            expanded.append(record)
    return expanded


def convert_error_messages(
    records: List[ErrorRecord], options: Optional[Mapping[str, Any]] = None
) -> List[ErrorRecord]:
    """Render string errors into final messages.

    A deferred error is called with ``(value, attribute, options, attributes,
    global_options)`` first. A leading ``^`` keeps the message verbatim;
    otherwise the prettified attribute name is prepended unless
    ``fullMessages`` is ``False``. ``%{value}`` is then filled in.
    """

    options = options or {}
    render_name = options.get("prettify") or prettify
    converted: List[ErrorRecord] = []

    for record in records:
        error = record.error
        if classify_signal(error) is SignalKind.DEFERRED:
            error = error(
                record.value,
                record.attribute,
                record.options,
                record.attributes,
                record.global_options,
            )

        if not isinstance(error, str):
            converted.append(record)
            continue

        if error.startswith("^"):
            error = error[1:]
        elif options.get("fullMessages") is not False:
            error = f"{capitalize(render_name(record.attribute))} {error}"

        error = error.replace(ESCAPED_CARET, "^")
        error = format_message(error, {"value": stringify_value(record.value, options)})

        converted.append(replace(record, error=error))

    return converted


def normalize(records: List[ErrorRecord], options: Optional[Mapping[str, Any]] = None) -> List[ErrorRecord]:
    """Prune, expand and convert in one call."""

    records = prune_empty_errors(records)
    records = expand_multiple_errors(records)
    return convert_error_messages(records, options)


__all__ = [
    "convert_error_messages",
    "expand_multiple_errors",
    "normalize",
    "prune_empty_errors",
]

# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

from __future__ import annotations

import operator
import re
from typing import Any, Callable, Final, List, Tuple

from ..validation.messages import capitalize, format_message, prettify
from ..validation.predicates import is_defined, is_empty, is_integer, is_number
from .base import BaseValidator

# Evaluated in this order; each failure adds one message.
COMPARISONS: Final[Tuple[Tuple[str, Callable[[Any, Any], bool]], ...]] = (
    ("greaterThan", operator.gt),
    ("greaterThanOrEqualTo", operator.ge),
    ("equalTo", operator.eq),
    ("lessThan", operator.lt),
    ("lessThanOrEqualTo", operator.le),
    ("divisibleBy", lambda value, count: count != 0 and value % count == 0),
)

_STRICT_INTEGER = re.compile(r"^-?(0|[1-9]\d*)$")
_STRICT_NUMBER = re.compile(r"^-?(0|[1-9]\d*)(\.\d+)?$")
_INTEGER_TEXT = re.compile(r"^\s*[-+]?\d+\s*$")


def coerce_number(text: str) -> Any:
    """Parse a numeric string; anything unparseable becomes NaN."""

    if _INTEGER_TEXT.match(text):
        return int(text)
    try:
        return float(text)
    except ValueError:
        return float("nan")


class NumericalityValidator(BaseValidator):
    """Checks that a value is a number and satisfies the configured comparisons.

    Strings are coerced unless ``noStrings`` is set; ``strict`` first demands
    a canonical numeral (no leading zeros, no exponent). Comparison failures
    render ``must be %{type} %{count}`` where ``type`` is the prettified
    comparison name, overridable per comparison with ``notGreaterThan`` and
    friends.
    """

    name = "numericality"

    def _not_valid(self, opts):
        return (
            opts.get("message")
            or opts.get("notValid")
            or self.message("notValid")
            or self.message()
        )

    def check(self, value, options, attribute, attributes, global_options):
        if not is_defined(value):
            return None

        opts = self.merge_options(options)
        render = opts.get("prettify") or global_options.get("prettify") or prettify

        if isinstance(value, str) and opts.get("strict"):
            pattern = _STRICT_INTEGER if opts.get("onlyInteger") else _STRICT_NUMBER
            if not pattern.match(value):
                return self._not_valid(opts) or "must be a valid number"

        if opts.get("noStrings") is not True and isinstance(value, str) and not is_empty(value):
            value = coerce_number(value)

        if not is_number(value):
            return self._not_valid(opts) or "is not a number"

        if opts.get("onlyInteger") and not is_integer(value):
            return (
                opts.get("message")
                or opts.get("notInteger")
                or self.message("notInteger")
                or self.message()
                or "must be an integer"
            )

        errors: List[str] = []
        for name, passes in COMPARISONS:
            count = opts.get(name)
            if is_number(count) and not passes(value, count):
                key = "not" + capitalize(name)
                template = opts.get(key) or self.message(key) or self.message() or "must be %{type} %{count}"
                errors.append(format_message(template, {"count": count, "type": render(name)}))

        if opts.get("odd") and value % 2 != 1:
            errors.append(opts.get("notOdd") or self.message("notOdd") or self.message() or "must be odd")

        if opts.get("even") and value % 2 != 0:
            errors.append(opts.get("notEven") or self.message("notEven") or self.message() or "must be even")

        if errors:
            return opts.get("message") or errors
        return None

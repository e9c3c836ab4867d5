# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Message templating and human-readable rendering of names and values."""

from __future__ import annotations

import json
import math
import re
from typing import Any, Mapping, Optional

from .predicates import is_array, is_number, is_object

FORMAT_PATTERN = re.compile(r"(%?)%\{([^}]+)\}")

_DOT_BETWEEN_WORDS = re.compile(r"([^\s])\.([^\s])")
_BACKSLASHES = re.compile(r"\\+")
_SEPARATORS = re.compile(r"[_-]")
_CAMEL_HUMP = re.compile(r"([a-z])([A-Z])")


def format_message(template: Any, values: Mapping[str, Any]) -> Any:
    """Substitute ``%{name}`` placeholders in *template*.

    ``%%{name}`` is an escape and renders as the literal ``%{name}``.
    Placeholders without a value are left untouched. Non-string templates are
    returned as-is.
    """

    if not isinstance(template, str):
        return template

    def substitute(match: "re.Match[str]") -> str:
        escaped, name = match.group(1), match.group(2)
        if escaped == "%":
            return "%{" + name + "}"
        if name not in values:
            return match.group(0)
        return str(values[name])

    return FORMAT_PATTERN.sub(substitute, template)


def prettify(value: Any) -> str:
    """Render an attribute name or value for humans.

    ``"fooBar"`` and ``"foo_bar"`` become ``"foo bar"``, keypath dots become
    spaces, numbers keep at most two decimals and sequences are joined with
    ``", "``.
    """

    if is_number(value):
        if math.isinf(value):
            return "Infinity" if value > 0 else "-Infinity"
        if float(value).is_integer():
            return str(int(value))
        if (value * 100) % 1 == 0:
            return str(value)
        return f"{round(value * 100) / 100:.2f}"

    if is_array(value):
        return ", ".join(prettify(item) for item in value)

    if is_object(value):
        return json.dumps(dict(value), default=str)

    if value is not None and not isinstance(value, (str, bool)):
        return str(value)

    text = str(value)
    text = _DOT_BETWEEN_WORDS.sub(r"\1 \2", text)
    text = _BACKSLASHES.sub("", text)
    text = _SEPARATORS.sub(" ", text)
    text = _CAMEL_HUMP.sub(lambda m: f"{m.group(1)} {m.group(2).lower()}", text)
    return text.lower()


def capitalize(value: Any) -> Any:
    if not isinstance(value, str) or not value:
        return value
    return value[0].upper() + value[1:]


def stringify_value(value: Any, options: Optional[Mapping[str, Any]] = None) -> str:
    """Prettify *value* with the ``prettify`` global option when one is set."""

    render = (options or {}).get("prettify") or prettify
    return render(value)


__all__ = [
    "FORMAT_PATTERN",
    "capitalize",
    "format_message",
    "prettify",
    "stringify_value",
]

# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Type and value-shape predicates shared by the pipeline and the validators."""

from __future__ import annotations

import inspect
import math
import numbers
import re
from datetime import date
from typing import Any, Callable, Mapping, Sequence

EMPTY_STRING_PATTERN = re.compile(r"^\s*$")


def result(value: Any, *args: Any) -> Any:
    """Return *value*, or the result of calling it with *args* when callable."""

    return value(*args) if callable(value) else value


def is_number(value: Any) -> bool:
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        return False
    return not math.isnan(value)


def is_integer(value: Any) -> bool:
    return is_number(value) and value % 1 == 0


def is_boolean(value: Any) -> bool:
    return isinstance(value, bool)


def is_string(value: Any) -> bool:
    return isinstance(value, str)


def is_function(value: Any) -> bool:
    return callable(value)


def is_array(value: Any) -> bool:
    """Lists and tuples; strings and mappings are not arrays."""

    return isinstance(value, (list, tuple))


def is_object(value: Any) -> bool:
    """Mappings are the only containers keypaths descend into."""

    return isinstance(value, Mapping)


def is_date(value: Any) -> bool:
    return isinstance(value, date)


def is_defined(value: Any) -> bool:
    return value is not None


def is_promise(value: Any) -> bool:
    """Awaitables (coroutines, futures, tasks) are pending validator results."""

    return inspect.isawaitable(value)


def is_empty(value: Any) -> bool:
    """Shared emptiness rule for error pruning, presence checks and results.

    ``None``, whitespace-only strings, and empty lists, tuples, sets or
    mappings are empty. Callables, dates, numbers and booleans never are.
    """

    if value is None:
        return True
    if callable(value):
        return False
    if isinstance(value, str):
        return EMPTY_STRING_PATTERN.match(value) is not None
    if isinstance(value, (list, tuple, set, frozenset)):
        return len(value) == 0
    if is_date(value):
        return False
    if isinstance(value, Mapping):
        return len(value) == 0
    return False


def contains(collection: Any, value: Any) -> bool:
    """Membership in a sequence, or in a mapping's key set."""

    if collection is None:
        return False
    if isinstance(collection, Mapping):
        try:
            return value in collection
        except TypeError:
            return False
    if isinstance(collection, (Sequence, set, frozenset)) and not isinstance(collection, str):
        return value in collection
    return False


def unique(items: Any) -> Any:
    """De-duplicate a list by equality, keeping the first occurrence."""

    if not is_array(items):
        return items
    seen = []
    for item in items:
        if item not in seen:
            seen.append(item)
    return seen


def is_disabled(option: Any) -> bool:
    """``None`` and ``False`` switch a validator (or a whitelist entry) off."""

    return option is None or option is False


Predicate = Callable[[Any], bool]

__all__ = [
    "EMPTY_STRING_PATTERN",
    "Predicate",
    "contains",
    "is_array",
    "is_boolean",
    "is_date",
    "is_defined",
    "is_disabled",
    "is_empty",
    "is_function",
    "is_integer",
    "is_number",
    "is_object",
    "is_promise",
    "is_string",
    "result",
    "unique",
]

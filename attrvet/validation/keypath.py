# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Dotted keypath access into nested attribute mappings.

A keypath is a string such as ``"address.street"``. ``.`` separates keys,
``\\.`` is a literal dot inside a key and ``\\\\`` a literal backslash; any
other backslash is dropped.

    >>> get_deep_value({"a.b": {"c": 1}}, "a\\\\.b.c")
    1
"""

from __future__ import annotations

from typing import Any, Callable, List, MutableMapping, Optional

from .predicates import is_object

KeyCallback = Callable[[Any, str, bool], Any]


def split_keypath(keypath: str) -> List[str]:
    """Split *keypath* into its unescaped keys."""

    keys: List[str] = []

    def collect(obj: Any, key: str, last: bool) -> Any:
        keys.append(key)
        return obj

    for_each_key_in_keypath(None, keypath, collect)
    return keys


def for_each_key_in_keypath(obj: Any, keypath: Any, callback: KeyCallback) -> Any:
    """Walk *keypath*, threading *obj* through ``callback(obj, key, is_last)``.

    Returns the value of the final callback, or ``None`` when *keypath* is not
    a string.
    """

    if not isinstance(keypath, str):
        return None

    key = ""
    escape = False

    for char in keypath:
        if char == ".":
            if escape:
                escape = False
                key += "."
            else:
                obj = callback(obj, key, False)
                key = ""
        elif char == "\\":
            if escape:
                escape = False
                key += "\\"
            else:
                escape = True
        else:
            escape = False
            key += char

    return callback(obj, key, True)


def get_deep_value(obj: Any, keypath: Any) -> Any:
    """Read the value at *keypath*, or ``None`` when any step is missing."""

    if not is_object(obj):
        return None

    def step(current: Any, key: str, last: bool) -> Any:
        return current.get(key) if is_object(current) else None

    return for_each_key_in_keypath(obj, keypath, step)


def set_deep_value(obj: MutableMapping[str, Any], keypath: str, value: Any) -> Optional[Any]:
    """Write *value* at *keypath*, creating intermediate dicts as needed.

    Non-mapping values found on the way are replaced by dicts.
    """

    def step(current: MutableMapping[str, Any], key: str, last: bool) -> Any:
        if last:
            current[key] = value
            return value
        nested = current.get(key)
        if not isinstance(nested, MutableMapping):
            nested = current[key] = {}
        return nested

    return for_each_key_in_keypath(obj, keypath, step)


__all__ = [
    "for_each_key_in_keypath",
    "get_deep_value",
    "set_deep_value",
    "split_keypath",
]

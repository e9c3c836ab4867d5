# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Global option defaults and environment overrides."""

from __future__ import annotations

import os
from types import MappingProxyType
from typing import Any, Dict, Final, Mapping, Optional

DEFAULT_FORMAT: Final[str] = "grouped"

DEFAULT_OPTIONS: Final[Mapping[str, Any]] = MappingProxyType(
    {
        "format": DEFAULT_FORMAT,
        "fullMessages": True,
        "cleanAttributes": True,
    }
)

_FALSE_VALUES: Final = ("", "0", "false", "no")


def env_flag(name: str, default: bool) -> bool:
    """Read a boolean flag from the environment."""

    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() not in _FALSE_VALUES


def default_options() -> Dict[str, Any]:
    """Return the global option defaults with ``ATTRVET_*`` overrides applied."""

    options = dict(DEFAULT_OPTIONS)
    fmt = os.getenv("ATTRVET_FORMAT")
    if fmt:
        options["format"] = fmt
    options["fullMessages"] = env_flag("ATTRVET_FULL_MESSAGES", options["fullMessages"])
    options["cleanAttributes"] = env_flag("ATTRVET_CLEAN_ATTRIBUTES", options["cleanAttributes"])
    return options


def strict_sync() -> bool:
    """Whether guarded sync functions refuse to run inside an event loop."""

    return env_flag("ATTRVET_STRICT_SYNC", False)


def merge_options(*layers: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
    """Merge option mappings left to right; later layers win, ``None`` is skipped."""

    merged: Dict[str, Any] = {}
    for layer in layers:
        if layer:
            merged.update(layer)
    return merged


__all__ = [
    "DEFAULT_FORMAT",
    "DEFAULT_OPTIONS",
    "default_options",
    "env_flag",
    "merge_options",
    "strict_sync",
]

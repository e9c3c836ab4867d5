# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Strip attributes that no constraint mentions."""

from __future__ import annotations

import logging
from typing import Any, Dict, Mapping

from .keypath import for_each_key_in_keypath
from .predicates import is_disabled, is_object

logger = logging.getLogger(__name__)


def _build_whitelist(constraints: Mapping[str, Any]) -> Dict[str, Any]:
    tree: Dict[str, Any] = {}

    def grow(node: Dict[str, Any], key: str, last: bool) -> Any:
        existing = node.get(key)
        if isinstance(existing, dict):
            return existing
        node[key] = True if last else {}
        return node[key]

    for keypath, constraint in constraints.items():
        if is_disabled(constraint):
            continue
        for_each_key_in_keypath(tree, keypath, grow)
    return tree


def _clean(attributes: Any, whitelist: Mapping[str, Any]) -> Any:
    if not is_object(attributes):
        return attributes

    cleaned = dict(attributes)
    for attribute in attributes:
        allowed = whitelist.get(attribute)
        if isinstance(allowed, dict):
            cleaned[attribute] = _clean(cleaned[attribute], allowed)
        elif not allowed:
            del cleaned[attribute]
    return cleaned


def clean_attributes(attributes: Any, constraints: Any) -> Dict[str, Any]:
    """Return a copy of *attributes* holding only constrained keys.

    Dotted constraint keys whitelist nested keys. Every mapping along a kept
    path is a fresh ``dict``; leaf values are shared with the input. A
    constraint of ``None`` or ``False`` whitelists nothing, while an empty
    validator map still keeps its attribute.
    """

    if not is_object(constraints) or not is_object(attributes):
        return {}

    whitelist = _build_whitelist(constraints)
    cleaned = _clean(attributes, whitelist)
    logger.debug(
        "Cleaned attributes: kept %d of %d top-level keys", len(cleaned), len(attributes)
    )
    return cleaned


__all__ = ["clean_attributes"]

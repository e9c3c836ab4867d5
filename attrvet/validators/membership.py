# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""``inclusion`` and ``exclusion``: membership in an allow or deny collection.

``within`` may be a list (or tuple/set) or a mapping, in which case its keys
are the members. A bare list option is shorthand for ``{"within": [...]}``.
"""

from __future__ import annotations

from typing import Any, Mapping

from ..validation.messages import format_message, stringify_value
from ..validation.predicates import contains, is_array, is_defined
from .base import BaseValidator


def _normalise(options: Any) -> Any:
    if is_array(options):
        return {"within": options}
    return options


def _display(value: Any, global_options: Any) -> Any:
    # strings are shown verbatim
    if isinstance(value, str):
        return value
    return stringify_value(value, global_options)


class InclusionValidator(BaseValidator):
    name = "inclusion"

    def check(self, value, options, attribute, attributes, global_options):
        if not is_defined(value):
            return None

        opts = self.merge_options(_normalise(options))
        if contains(opts.get("within"), value):
            return None

        message = opts.get("message") or self.message() or "^%{value} is not included in the list"
        return format_message(message, {"value": _display(value, global_options)})


class ExclusionValidator(BaseValidator):
    """Deny list; a mapping ``within`` can give each member a display label."""

    name = "exclusion"

    def check(self, value, options, attribute, attributes, global_options):
        if not is_defined(value):
            return None

        opts = self.merge_options(_normalise(options))
        within = opts.get("within")
        if not contains(within, value):
            return None

        message = opts.get("message") or self.message() or "^%{value} is restricted"
        if isinstance(within, Mapping) and isinstance(within.get(value), str):
            return format_message(message, {"value": within[value]})
        return format_message(message, {"value": _display(value, global_options)})


__all__ = ["ExclusionValidator", "InclusionValidator"]

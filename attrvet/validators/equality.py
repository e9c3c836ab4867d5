# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

from __future__ import annotations

import operator

from ..exceptions import ConfigurationError
from ..validation.keypath import get_deep_value
from ..validation.messages import format_message, prettify
from ..validation.predicates import is_defined, is_empty
from .base import BaseValidator


class EqualityValidator(BaseValidator):
    """Compares the value with another attribute, read by keypath.

    ``{"equality": "password"}`` is shorthand for
    ``{"equality": {"attribute": "password"}}``. A ``comparator`` option
    replaces ``==`` and is called as
    ``comparator(value, other, options, attribute, attributes)``.
    """

    name = "equality"

    def check(self, value, options, attribute, attributes, global_options):
        if not is_defined(value):
            return None

        if isinstance(options, str):
            options = {"attribute": options}

        opts = self.merge_options(options)
        message = opts.get("message") or self.message() or "is not equal to %{attribute}"

        other_attribute = opts.get("attribute")
        if not isinstance(other_attribute, str) or is_empty(other_attribute):
            raise ConfigurationError("The attribute must be a non empty string")

        other = get_deep_value(attributes, other_attribute)
        comparator = opts.get("comparator")
        if comparator is None:
            equal = operator.eq(value, other)
        else:
            equal = comparator(value, other, opts, attribute, attributes)

        if equal:
            return None
        render = opts.get("prettify") or global_options.get("prettify") or prettify
        return format_message(message, {"attribute": render(other_attribute)})

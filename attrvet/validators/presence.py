# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

from __future__ import annotations

from ..validation.predicates import is_defined, is_empty
from .base import BaseValidator


class PresenceValidator(BaseValidator):
    """Fails for ``None``; with ``allowEmpty: False`` also for empty values."""

    name = "presence"

    def check(self, value, options, attribute, attributes, global_options):
        opts = self.merge_options(options)
        if opts.get("allowEmpty") is not False:
            missing = not is_defined(value)
        else:
            missing = is_empty(value)
        if missing:
            return opts.get("message") or self.message() or "can't be blank"
        return None

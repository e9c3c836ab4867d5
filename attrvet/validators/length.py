# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

from __future__ import annotations

from typing import Any, List, Optional

from ..validation.messages import format_message
from ..validation.predicates import is_defined, is_number
from .base import BaseValidator


def _length_of(value: Any) -> Optional[int]:
    try:
        return len(value)
    except TypeError:
        return None


class LengthValidator(BaseValidator):
    """Checks ``len(tokenizer(value))`` against ``is``, ``minimum`` and ``maximum``.

    Each violated bound contributes its own message (``wrongLength``,
    ``tooShort``, ``tooLong``; ``%{count}`` is the bound). A ``message`` option
    replaces the whole list. Values without a length fail with ``notValid``.
    """

    name = "length"

    def check(self, value, options, attribute, attributes, global_options):
        if not is_defined(value):
            return None

        opts = self.merge_options(options)
        tokenizer = opts.get("tokenizer") or (lambda val: val)
        length = _length_of(tokenizer(value))

        if not is_number(length):
            return opts.get("message") or self.message("notValid") or "has an incorrect length"

        errors: List[str] = []
        exact, minimum, maximum = opts.get("is"), opts.get("minimum"), opts.get("maximum")

        if is_number(exact) and length != exact:
            template = (
                opts.get("wrongLength")
                or self.message("wrongLength")
                or "is the wrong length (should be %{count} characters)"
            )
            errors.append(format_message(template, {"count": exact}))

        if is_number(minimum) and length < minimum:
            template = (
                opts.get("tooShort")
                or self.message("tooShort")
                or "is too short (minimum is %{count} characters)"
            )
            errors.append(format_message(template, {"count": minimum}))

        if is_number(maximum) and length > maximum:
            template = (
                opts.get("tooLong")
                or self.message("tooLong")
                or "is too long (maximum is %{count} characters)"
            )
            errors.append(format_message(template, {"count": maximum}))

        if errors:
            return opts.get("message") or errors
        return None

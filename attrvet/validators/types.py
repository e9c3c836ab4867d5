# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

from __future__ import annotations

from typing import Any, Dict, Mapping, Optional

from ..exceptions import ConfigurationError
from ..validation.messages import format_message, prettify
from ..validation.predicates import (
    Predicate,
    is_array,
    is_boolean,
    is_date,
    is_defined,
    is_integer,
    is_number,
    is_object,
    is_string,
)
from .base import BaseValidator


def default_types() -> Dict[str, Predicate]:
    return {
        "object": lambda value: is_object(value) and not is_array(value),
        "array": is_array,
        "integer": is_integer,
        "number": is_number,
        "string": is_string,
        "date": is_date,
        "boolean": is_boolean,
    }


class TypeValidator(BaseValidator):
    """Checks the value against a named type or a predicate.

    Named types live in ``types``; register more with
    ``registry.get("type").types["uuid"] = ...``. ``type_messages`` holds a
    message per named type.
    """

    name = "type"

    def __init__(
        self,
        options: Optional[Mapping[str, Any]] = None,
        messages: Optional[Mapping[str, Any]] = None,
        types: Optional[Mapping[str, Predicate]] = None,
        type_messages: Optional[Mapping[str, Any]] = None,
    ):
        super().__init__(options, messages)
        self.types: Dict[str, Predicate] = dict(types) if types is not None else default_types()
        self.type_messages: Dict[str, Any] = dict(type_messages or {})

    def check(self, value, original_options, attribute, attributes, global_options):
        if isinstance(original_options, str):
            original_options = {"type": original_options}

        if not is_defined(value):
            return None

        options = self.merge_options(original_options)
        type_ = options.get("type")

        if not is_defined(type_):
            raise ConfigurationError("No type was specified")

        predicate = type_ if callable(type_) else self.types.get(type_)
        if not callable(predicate):
            raise ConfigurationError(f"Type '{type_}' has no predicate; add one to the type validator's types")

        # Named predicates only take the value; custom callables get the full context.
        if callable(type_):
            valid = predicate(value, options, attribute, attributes, global_options)
        else:
            valid = predicate(value)
        if valid:
            return None

        explicit = original_options.get("message") if isinstance(original_options, Mapping) else None
        message = (
            explicit
            or (None if callable(type_) else self.type_messages.get(type_))
            or self.message()
            or options.get("message")
            or ("must be of the correct type" if callable(type_) else "must be of type %{type}")
        )
        if callable(message):
            message = message(value, original_options, attribute, attributes, global_options)

        return format_message(message, {"attribute": prettify(attribute), "type": type_})


__all__ = ["TypeValidator", "default_types"]

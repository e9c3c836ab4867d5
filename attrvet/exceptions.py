# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Exception hierarchy for attrvet.

Configuration problems (unknown validator or format names, missing required
validator options, awaitables handed to the synchronous entry point) raise
immediately. Validation failures are data: ``validate`` returns them, and only
the asynchronous entry point raises them, wrapped in :class:`ValidationFailed`.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional


class AttrvetError(Exception):
    """Base class for every error raised by attrvet."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ConfigurationError(AttrvetError):
    """The constraints, options or catalogue are not usable as given."""


class UnknownValidatorError(ConfigurationError):
    """A constraint names a validator that is not in the catalogue."""

    def __init__(self, name: str):
        super().__init__(f"Unknown validator {name}")
        self.name = name


class UnknownFormatError(ConfigurationError):
    """The ``format`` option names a formatter that is not registered."""

    def __init__(self, name: Any):
        super().__init__(f"Unknown format {name}")
        self.name = name


class AsyncResultError(ConfigurationError):
    """A validator returned an awaitable to the synchronous entry point."""

    def __init__(self, attribute: Optional[str] = None, validator: Optional[str] = None):
        super().__init__("Use validate_async if you want support for awaitable results")
        self.attribute = attribute
        self.validator = validator


class CapabilityError(AttrvetError):
    """Asynchronous validation was requested without an async runtime."""


class ValidationFailed(AttrvetError):
    """Raised by the asynchronous entry point when validation errors exist.

    The rendered errors (in whatever shape the selected formatter produced) are
    available as :attr:`errors`.
    """

    def __init__(
        self,
        errors: Any,
        options: Optional[Mapping[str, Any]] = None,
        attributes: Any = None,
        constraints: Optional[Mapping[str, Any]] = None,
    ):
        super().__init__(_describe(errors))
        self.errors = errors
        self.options = dict(options or {})
        self.attributes = attributes
        self.constraints = constraints


def _describe(errors: Any) -> str:
    if isinstance(errors, Mapping):
        lines = ["Validation failed:"]
        for attribute, messages in errors.items():
            if isinstance(messages, (list, tuple)):
                lines.extend(f" - {attribute}: {message}" for message in messages)
            else:
                lines.append(f" - {attribute}: {messages}")
        return "\n".join(lines)
    if isinstance(errors, (list, tuple)):
        return "Validation failed:\n" + "\n".join(f" - {error}" for error in errors)
    return f"Validation failed: {errors}"


__all__ = [
    "AttrvetError",
    "ConfigurationError",
    "UnknownValidatorError",
    "UnknownFormatError",
    "AsyncResultError",
    "CapabilityError",
    "ValidationFailed",
]

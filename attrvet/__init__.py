# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""attrvet: declarative attribute validation.

.. code-block:: python

    import attrvet

    constraints = {
        "username": {"presence": True, "length": {"minimum": 3}},
        "password": {"presence": True},
        "confirm": {"equality": "password"},
    }
    attrvet.validate({"username": "ab", "password": "x", "confirm": "y"}, constraints)
    # {"username": ["Username is too short (minimum is 3 characters)"],
    #  "confirm": ["Confirm is not equal to password"]}
"""

from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional

from .config import DEFAULT_OPTIONS, default_options
from .decorator import validate_arguments
from .exceptions import (
    AsyncResultError,
    AttrvetError,
    CapabilityError,
    ConfigurationError,
    UnknownFormatError,
    UnknownValidatorError,
    ValidationFailed,
)
from .formatters import (
    Formatter,
    FormatterRegistry,
    get_formatter_registry,
    reset_formatter_registry,
    set_formatter_registry,
)
from .runtime.default import get_constraint_validator
from .validation import (
    ErrorRecord,
    SignalKind,
    capitalize,
    format_message,
    get_deep_value,
    is_defined,
    is_dom_element,
    is_empty,
    is_jquery_element,
    prettify,
    sanitize_form_value,
    set_deep_value,
)
from .validation import clean_attributes as _clean_attributes
from .validation.engine import ConstraintValidator
from .validators import (
    BaseValidator,
    FunctionValidator,
    ValidatorLike,
    ValidatorRegistry,
    build_default_validators,
    format_iso,
    get_validator_registry,
    parse_iso,
    reset_validator_registry,
    set_validator_registry,
)

__version__ = "0.1.0"


def validate(
    attributes: Any,
    constraints: Mapping[str, Any],
    options: Optional[Mapping[str, Any]] = None,
) -> Any:
    """Validate with the process-wide engine; see :meth:`ConstraintValidator.validate`."""

    return get_constraint_validator().validate(attributes, constraints, options)


async def validate_async(
    attributes: Any,
    constraints: Mapping[str, Any],
    options: Optional[Mapping[str, Any]] = None,
) -> Any:
    return await get_constraint_validator().validate_async(attributes, constraints, options)


def single(
    value: Any,
    constraints: Mapping[str, Any],
    options: Optional[Mapping[str, Any]] = None,
) -> Optional[List[Any]]:
    return get_constraint_validator().single(value, constraints, options)


def clean_attributes(attributes: Any, constraints: Any) -> Dict[str, Any]:
    return _clean_attributes(attributes, constraints)


def collect_form_values(form: Any, options: Optional[Mapping[str, Any]] = None) -> Dict[str, Any]:
    return get_constraint_validator().collect_form_values(form, options)


def register_validator(name: str, validator: ValidatorLike) -> BaseValidator:
    """Add (or replace) a validator in the process-wide registry."""

    return get_validator_registry().register(name, validator)


def register_formatter(name: str, formatter: Formatter) -> Formatter:
    """Add (or replace) a formatter in the process-wide registry."""

    return get_formatter_registry().register(name, formatter)


__all__ = [
    "AsyncResultError",
    "AttrvetError",
    "BaseValidator",
    "CapabilityError",
    "ConfigurationError",
    "ConstraintValidator",
    "DEFAULT_OPTIONS",
    "ErrorRecord",
    "Formatter",
    "FormatterRegistry",
    "FunctionValidator",
    "SignalKind",
    "UnknownFormatError",
    "UnknownValidatorError",
    "ValidationFailed",
    "ValidatorRegistry",
    "build_default_validators",
    "capitalize",
    "clean_attributes",
    "collect_form_values",
    "default_options",
    "format_iso",
    "format_message",
    "get_constraint_validator",
    "get_deep_value",
    "get_formatter_registry",
    "get_validator_registry",
    "is_defined",
    "is_dom_element",
    "is_empty",
    "is_jquery_element",
    "parse_iso",
    "prettify",
    "register_formatter",
    "register_validator",
    "reset_formatter_registry",
    "reset_validator_registry",
    "sanitize_form_value",
    "set_deep_value",
    "set_formatter_registry",
    "set_validator_registry",
    "single",
    "validate",
    "validate_arguments",
    "validate_async",
]

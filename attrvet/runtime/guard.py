# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Helper functions used by the argument-validation decorator."""

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional, Sequence, Set

from ..config import merge_options
from ..exceptions import ConfigurationError, ValidationFailed
from ..validation.engine import ConstraintValidator
from ..validation.keypath import split_keypath

logger = logging.getLogger(__name__)


def collect_constraint_keys(constraints: Mapping[str, Any]) -> Set[str]:
    """Top-level parameter names addressed by *constraints* (``"user.name"`` → ``"user"``)."""

    keys: Set[str] = set()
    for keypath in constraints:
        parts = split_keypath(str(keypath))
        if parts:
            keys.add(parts[0])
    return keys


def check_constraint_keys(
    func_name: str,
    constraints: Mapping[str, Any],
    allowed_params: Sequence[str],
    has_var_kwargs: bool = False,
) -> None:
    """Refuse constraints on parameters the function does not have."""

    if has_var_kwargs:
        return

    invalid = collect_constraint_keys(constraints) - set(allowed_params)
    if invalid:
        logger.error(
            "Constraints for '%s' reference unknown arguments: %s",
            func_name,
            ", ".join(sorted(invalid)),
        )
        raise ConfigurationError(
            f"Constraints for '{func_name}' reference undefined parameter(s): {sorted(invalid)}"
        )


def format_validation_reason(func_name: str, failure: ValidationFailed) -> str:
    """Produce a human-readable summary of a rejected call."""

    return f"Arguments of '{func_name}' are invalid. {failure.message}"


async def validate_arguments_async(
    engine: ConstraintValidator,
    func_name: str,
    arguments: Mapping[str, Any],
    constraints: Mapping[str, Any],
    options: Optional[Mapping[str, Any]] = None,
) -> Optional[ValidationFailed]:
    """Validate bound call arguments; return the failure instead of raising it.

    Arguments are never cleaned here: validators see every bound argument and
    the function receives them untouched.
    """

    opts = merge_options(options, {"cleanAttributes": False})
    try:
        await engine.validate_async(dict(arguments), constraints, opts)
    except ValidationFailed as failure:
        logger.info("%s", format_validation_reason(func_name, failure))
        return failure
    return None


__all__ = [
    "check_constraint_keys",
    "collect_constraint_keys",
    "format_validation_reason",
    "validate_arguments_async",
]

# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Name → validator catalogue.

Registries are ordinary objects so callers and tests can hold isolated
catalogues; a lazily created process-wide registry backs the module-level
API.
"""

from __future__ import annotations

import copy
import logging
import threading
from typing import Any, Callable, Dict, Iterator, List, Mapping, Optional, Union

from ..exceptions import UnknownValidatorError
from .base import BaseValidator, FunctionValidator

logger = logging.getLogger(__name__)

ValidatorLike = Union[BaseValidator, Callable[..., Any]]


class ValidatorRegistry:
    """Mutable mapping from validator name to catalogue entry.

    Usage::

        registry = build_default_validators()
        registry.register("even", lambda value, *_: None if value % 2 == 0 else "must be even")
        registry.get("presence").messages["message"] = "is required"
    """

    def __init__(self, validators: Optional[Mapping[str, ValidatorLike]] = None):
        self._validators: Dict[str, BaseValidator] = {}
        self._lock = threading.Lock()
        for name, validator in (validators or {}).items():
            self.register(name, validator)

    def register(self, name: str, validator: ValidatorLike) -> BaseValidator:
        """Add or replace the entry for *name*; plain callables are wrapped."""

        if not isinstance(validator, BaseValidator):
            if not callable(validator):
                raise TypeError(f"Validator '{name}' must be callable, got {type(validator).__name__}")
            validator = FunctionValidator(name, validator)

        with self._lock:
            existing = self._validators.get(name)
            if isinstance(existing, FunctionValidator):
                logger.debug("Replacing validator '%s' (%r)", name, existing)
            elif existing is not None:
                logger.warning("Replacing built-in validator '%s' with %r", name, validator)
            self._validators[name] = validator
        return validator

    def unregister(self, name: str) -> None:
        with self._lock:
            self._validators.pop(name, None)

    def get(self, name: str) -> Optional[BaseValidator]:
        return self._validators.get(name)

    def __getitem__(self, name: str) -> BaseValidator:
        try:
            return self._validators[name]
        except KeyError:
            raise UnknownValidatorError(name) from None

    def has(self, name: str) -> bool:
        return name in self._validators

    __contains__ = has

    def names(self) -> List[str]:
        return list(self._validators)

    def __iter__(self) -> Iterator[str]:
        return iter(self.names())

    def __len__(self) -> int:
        return len(self._validators)

    def copy(self) -> "ValidatorRegistry":
        """Deep copy: entry state (options, messages, hooks) is not shared."""

        clone = ValidatorRegistry()
        with self._lock:
            clone._validators = copy.deepcopy(self._validators)
        return clone

    def clear(self) -> None:
        with self._lock:
            self._validators.clear()

    def __repr__(self) -> str:
        return f"ValidatorRegistry(validators={self.names()})"


_global_registry: Optional[ValidatorRegistry] = None
_global_registry_lock = threading.Lock()


def get_validator_registry() -> ValidatorRegistry:
    """Return the process-wide registry, building the built-ins on first use."""

    global _global_registry

    if _global_registry is None:
        with _global_registry_lock:
            if _global_registry is None:
                from . import build_default_validators

                _global_registry = build_default_validators()

    return _global_registry


def set_validator_registry(registry: ValidatorRegistry) -> None:
    global _global_registry
    with _global_registry_lock:
        _global_registry = registry


def reset_validator_registry() -> None:
    """Drop the process-wide registry; the next access rebuilds the built-ins."""

    global _global_registry
    with _global_registry_lock:
        _global_registry = None


__all__ = [
    "ValidatorLike",
    "ValidatorRegistry",
    "get_validator_registry",
    "reset_validator_registry",
    "set_validator_registry",
]

# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Output formatters: normalized error records in, report shape out."""

from __future__ import annotations

import logging
import threading
from typing import Any, Callable, Dict, List, Mapping, Optional

from ..exceptions import UnknownFormatError
from ..validation.base import ErrorRecord

logger = logging.getLogger(__name__)

Formatter = Callable[[List[ErrorRecord]], Any]


def group_errors_by_attribute(records: List[ErrorRecord]) -> Dict[str, List[ErrorRecord]]:
    """Bucket records per attribute, in first-seen attribute order."""

    grouped: Dict[str, List[ErrorRecord]] = {}
    for record in records:
        grouped.setdefault(record.attribute, []).append(record)
    return grouped


def flatten_errors_to_array(records: List[ErrorRecord]) -> List[Any]:
    """The records' errors, de-duplicated by equality, first occurrence kept."""

    flat: List[Any] = []
    for record in records:
        if record.error not in flat:
            flat.append(record.error)
    return flat


def detailed(records: List[ErrorRecord]) -> List[ErrorRecord]:
    return records


def flat(records: List[ErrorRecord]) -> List[Any]:
    return flatten_errors_to_array(records)


def grouped(records: List[ErrorRecord]) -> Dict[str, List[Any]]:
    return {
        attribute: flatten_errors_to_array(bucket)
        for attribute, bucket in group_errors_by_attribute(records).items()
    }


def constraint(records: List[ErrorRecord]) -> Dict[str, List[str]]:
    """Sorted validator names per attribute, one entry per record."""

    return {
        attribute: sorted(record.validator for record in bucket)
        for attribute, bucket in group_errors_by_attribute(records).items()
    }


class FormatterRegistry:
    """Name → formatter mapping, pre-populated with the built-in shapes."""

    def __init__(self, formatters: Optional[Mapping[str, Formatter]] = None):
        self._formatters: Dict[str, Formatter] = {}
        self._lock = threading.Lock()
        for name, formatter in (formatters if formatters is not None else builtin_formatters()).items():
            self.register(name, formatter)

    def register(self, name: str, formatter: Formatter) -> Formatter:
        if not callable(formatter):
            raise TypeError(f"Formatter '{name}' must be callable, got {type(formatter).__name__}")
        with self._lock:
            if name in self._formatters:
                logger.debug("Replacing formatter '%s'", name)
            self._formatters[name] = formatter
        return formatter

    def unregister(self, name: str) -> None:
        with self._lock:
            self._formatters.pop(name, None)

    def get(self, name: str) -> Optional[Formatter]:
        return self._formatters.get(name)

    def has(self, name: str) -> bool:
        return name in self._formatters

    __contains__ = has

    def names(self) -> List[str]:
        return list(self._formatters)

    def format(self, records: List[ErrorRecord], name: Any) -> Any:
        """Render *records* with the formatter called *name*."""

        formatter = self._formatters.get(name) if isinstance(name, str) else None
        if formatter is None:
            raise UnknownFormatError(name)
        return formatter(records)

    def copy(self) -> "FormatterRegistry":
        with self._lock:
            return FormatterRegistry(dict(self._formatters))

    def __repr__(self) -> str:
        return f"FormatterRegistry(formatters={self.names()})"


def builtin_formatters() -> Dict[str, Formatter]:
    return {
        "detailed": detailed,
        "flat": flat,
        "grouped": grouped,
        "constraint": constraint,
    }


_global_formatters: Optional[FormatterRegistry] = None
_global_formatters_lock = threading.Lock()


def get_formatter_registry() -> FormatterRegistry:
    global _global_formatters

    if _global_formatters is None:
        with _global_formatters_lock:
            if _global_formatters is None:
                _global_formatters = FormatterRegistry()

    return _global_formatters


def set_formatter_registry(registry: FormatterRegistry) -> None:
    global _global_formatters
    with _global_formatters_lock:
        _global_formatters = registry


def reset_formatter_registry() -> None:
    global _global_formatters
    with _global_formatters_lock:
        _global_formatters = None


__all__ = [
    "Formatter",
    "FormatterRegistry",
    "builtin_formatters",
    "constraint",
    "detailed",
    "flat",
    "flatten_errors_to_array",
    "get_formatter_registry",
    "group_errors_by_attribute",
    "grouped",
    "reset_formatter_registry",
    "set_formatter_registry",
]

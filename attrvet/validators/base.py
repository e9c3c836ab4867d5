# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Catalogue entry types.

Every entry is a callable object invoked as
``entry(value, options, attribute, attributes, global_options)``. The entry
carries its own persistent state:

* ``options``: defaults merged under the options of every call;
* ``messages``: default messages keyed by failure kind (``"message"``,
  ``"notValid"``, ``"tooShort"`` ...), consulted after per-call options.

This state is shared by every caller of the registry holding the entry.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, Mapping, Optional


class BaseValidator:
    """Base class for stateful validators."""

    name: str = "validator"

    def __init__(
        self,
        options: Optional[Mapping[str, Any]] = None,
        messages: Optional[Mapping[str, Any]] = None,
    ):
        self.options: Dict[str, Any] = dict(options or {})
        self.messages: Dict[str, Any] = dict(messages or {})

    def __call__(
        self,
        value: Any,
        options: Any,
        attribute: Optional[str] = None,
        attributes: Any = None,
        global_options: Optional[Mapping[str, Any]] = None,
    ) -> Any:
        return self.check(value, options, attribute, attributes, global_options or {})

    def check(
        self,
        value: Any,
        options: Any,
        attribute: Optional[str],
        attributes: Any,
        global_options: Mapping[str, Any],
    ) -> Any:
        raise NotImplementedError

    def merge_options(self, options: Any) -> Dict[str, Any]:
        """Entry defaults overlaid with the call's options (a bare ``True`` adds nothing)."""

        merged = dict(self.options)
        if isinstance(options, Mapping):
            merged.update(options)
        return merged

    def message(self, key: str = "message") -> Any:
        """The persistent default message for failure kind *key*, if any."""

        return self.messages.get(key)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"


class FunctionValidator(BaseValidator):
    """Adapts a plain function to the catalogue entry interface.

    Entry ``options`` are merged under mapping options (or stand in for a bare
    ``True``) before the function is called; other option values pass through.
    """

    def __init__(self, name: str, func: Callable[..., Any]):
        super().__init__()
        self.name = name
        self.func = func

    def check(self, value, options, attribute, attributes, global_options):
        if isinstance(options, Mapping) or (options is True and self.options):
            options = self.merge_options(options)
        return self.func(value, options, attribute, attributes, global_options)

    def __repr__(self) -> str:
        return f"FunctionValidator(name={self.name!r}, func={self.func!r})"


__all__ = ["BaseValidator", "FunctionValidator"]

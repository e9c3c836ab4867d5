# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Core data structures shared by the pipeline, normalization and formatters."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Mapping

from .predicates import is_array, is_promise


class SignalKind(str, Enum):
    """What a validator handed back for one (attribute, validator) pair."""

    PASS = "pass"
    MESSAGE = "message"
    MESSAGES = "messages"
    PENDING = "pending"
    DEFERRED = "deferred"
    OPAQUE = "opaque"


def classify_signal(error: Any) -> SignalKind:
    if error is None:
        return SignalKind.PASS
    if is_promise(error):
        return SignalKind.PENDING
    if isinstance(error, str):
        return SignalKind.MESSAGE
    if is_array(error):
        return SignalKind.MESSAGES
    if callable(error):
        return SignalKind.DEFERRED
    return SignalKind.OPAQUE


@dataclass
class ErrorRecord:
    """The outcome of running one validator against one attribute.

    ``error`` starts out as whatever the validator returned. The async
    coordinator may replace a pending awaitable in place; every later stage
    builds new records instead of mutating this one.
    """

    attribute: str
    value: Any
    validator: str
    options: Any
    attributes: Any = field(repr=False)
    global_options: Mapping[str, Any] = field(default_factory=dict, repr=False)
    error: Any = None

    @property
    def kind(self) -> SignalKind:
        return classify_signal(self.error)

    def as_dict(self) -> Dict[str, Any]:
        return {
            "attribute": self.attribute,
            "value": self.value,
            "validator": self.validator,
            "options": self.options,
            "attributes": self.attributes,
            "globalOptions": dict(self.global_options),
            "error": self.error,
        }


__all__ = ["ErrorRecord", "SignalKind", "classify_signal"]

# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Metric instrument definitions for attrvet."""

from __future__ import annotations

import logging
import time
from typing import Iterable, Optional

from .runtime import meter

logger = logging.getLogger(__name__)

validate_total = meter.create_counter(
    name="attrvet.validate.total",
    description="Counts validation calls, partitioned by entry point and outcome.",
    unit="1",
)

validator_invocation_total = meter.create_counter(
    name="attrvet.validator.invocation.total",
    description="Counts individual validator invocations.",
    unit="1",
)

configuration_error_total = meter.create_counter(
    name="attrvet.configuration_error.total",
    description="Counts calls aborted by a configuration error (unknown validator, missing option...).",
    unit="1",
)

error_record_total = meter.create_counter(
    name="attrvet.error_record.total",
    description="Counts error records that survived normalization.",
    unit="1",
)

validate_latency_ms = meter.create_histogram(
    name="attrvet.validate.latency.ms",
    description="End-to-end time for a single validation call.",
    unit="ms",
)


def record_validator_invocations(validators: Iterable[str]) -> None:
    """Count one invocation per validator name; never raises."""

    try:
        for name in validators:
            validator_invocation_total.add(1, {"validator": name})
    except Exception:
        # Telemetry must never interfere with validation
        logger.debug("Failed to record validator invocations", exc_info=True)


def record_configuration_error(entry_point: str, error: BaseException) -> None:
    try:
        configuration_error_total.add(1, {"entry_point": entry_point, "kind": type(error).__name__})
    except Exception:
        logger.debug("Failed to record configuration error metric", exc_info=True)


def record_validation_metrics(
    entry_point: str,
    outcome: str,
    started_at: float,
    error_count: Optional[int] = None,
) -> None:
    """Record latency and outcome for one entry-point call.

    Args:
        entry_point: ``"validate"``, ``"validate_async"`` or ``"single"``
        outcome: ``"valid"``, ``"invalid"`` or ``"error"``
        started_at: Timestamp from ``time.perf_counter()`` when the call started
        error_count: Number of normalized error records, when known
    """

    try:
        duration_ms = (time.perf_counter() - started_at) * 1000.0
        attributes = {"entry_point": entry_point, "outcome": outcome}
        validate_latency_ms.record(duration_ms, attributes)
        validate_total.add(1, attributes)
        if error_count:
            error_record_total.add(error_count, {"entry_point": entry_point})
    except Exception:
        # Telemetry must never interfere with validation
        logger.debug("Failed to record validation metrics", exc_info=True)


__all__ = [
    "configuration_error_total",
    "error_record_total",
    "record_configuration_error",
    "record_validation_metrics",
    "record_validator_invocations",
    "validate_latency_ms",
    "validate_total",
    "validator_invocation_total",
]

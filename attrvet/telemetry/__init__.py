# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

from .metrics import (
    configuration_error_total,
    error_record_total,
    record_configuration_error,
    record_validation_metrics,
    record_validator_invocations,
    validate_latency_ms,
    validate_total,
    validator_invocation_total,
)
from .runtime import get_tracer, meter

__all__ = [
    "configuration_error_total",
    "error_record_total",
    "get_tracer",
    "meter",
    "record_configuration_error",
    "record_validation_metrics",
    "record_validator_invocations",
    "validate_latency_ms",
    "validate_total",
    "validator_invocation_total",
]

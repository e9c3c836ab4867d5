# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""OpenTelemetry handles for attrvet.

Only the API package is required; without an SDK installed by the host
application every instrument and span is a no-op.
"""

from __future__ import annotations

from opentelemetry import metrics, trace

meter = metrics.get_meter("attrvet")


def get_tracer(name: str = "attrvet") -> trace.Tracer:
    return trace.get_tracer(name)


__all__ = ["get_tracer", "meter"]

# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""The process-wide engine behind the module-level API."""

from __future__ import annotations

from typing import Final

from ..validation.engine import ConstraintValidator

_ENGINE: Final[ConstraintValidator] = ConstraintValidator()


def get_constraint_validator() -> ConstraintValidator:
    """Return the process-wide engine instance.

    It holds no registries of its own, so it always dispatches to the current
    process-wide validator and formatter registries.
    """

    return _ENGINE


__all__ = ["get_constraint_validator"]

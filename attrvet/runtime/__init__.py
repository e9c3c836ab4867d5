# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Runtime support: async coordination, the default engine and decorator helpers.

Only the coordinator is imported eagerly; ``default`` and ``guard`` depend on
the engine, which itself imports the coordinator.
"""

from .coordinator import TaskGroupFactory, close_pending, wait_for_results

__all__ = ["TaskGroupFactory", "close_pending", "wait_for_results"]

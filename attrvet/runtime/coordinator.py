# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Settle awaitable validator results concurrently."""

from __future__ import annotations

import inspect
import logging
from typing import Any, Callable, List, Optional

import anyio

from ..exceptions import CapabilityError
from ..validation.base import ErrorRecord
from ..validation.predicates import is_promise

logger = logging.getLogger(__name__)

TaskGroupFactory = Callable[[], Any]


def close_pending(records: List[ErrorRecord]) -> None:
    """Close coroutines that will never be awaited."""

    for record in records:
        if inspect.iscoroutine(record.error):
            record.error.close()


async def wait_for_results(
    records: List[ErrorRecord],
    task_group_factory: Optional[TaskGroupFactory] = anyio.create_task_group,
) -> List[ErrorRecord]:
    """Await every pending ``error`` in *records* and store the settled value.

    All awaitables run inside one task group. A falsy settled value becomes
    ``None``. The first exception cancels the remaining work and is re-raised
    unchanged once the group has exited.
    """

    if task_group_factory is None:
        raise CapabilityError("async support is required")

    pending = [record for record in records if is_promise(record.error)]
    if not pending:
        return records

    logger.debug("Waiting for %d pending validator result(s)", len(pending))
    failures: List[BaseException] = []

    async with task_group_factory() as task_group:

        async def settle(record: ErrorRecord) -> None:
            try:
                settled = await record.error
            except Exception as exc:
                if not failures:
                    failures.append(exc)
                task_group.cancel_scope.cancel()
                return
            record.error = settled or None

        for record in pending:
            task_group.start_soon(settle, record)

    if failures:
        close_pending(pending)
        raise failures[0]
    return records


__all__ = ["TaskGroupFactory", "close_pending", "wait_for_results"]

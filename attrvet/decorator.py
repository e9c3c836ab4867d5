# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

# attrvet/decorator.py

import asyncio
import concurrent.futures as _cf
import contextvars as _ctxvars
import functools
import inspect
import logging
from typing import Any, Callable, Mapping, Optional

import anyio

from .config import strict_sync
from .exceptions import CapabilityError, ValidationFailed
from .runtime.default import get_constraint_validator
from .runtime.guard import check_constraint_keys, validate_arguments_async
from .telemetry import get_tracer
from .validation.engine import ConstraintValidator

logger = logging.getLogger(__name__)

# Sentinel object to detect if a parameter was provided by the user
_sentinel = object()


def _accepts_argument(handler: Callable) -> bool:
    try:
        signature = inspect.signature(handler)
    except (TypeError, ValueError):
        return True
    try:
        signature.bind(None)
    except TypeError:
        return False
    return True


def validate_arguments(
    constraints: Mapping[str, Any],
    *,
    options: Optional[Mapping[str, Any]] = None,
    on_invalid: Any = _sentinel,
    strict: Optional[bool] = None,
    validator: Optional[ConstraintValidator] = None,
):
    """
    Validate a function's arguments against a constraint set before running it.

    The bound call arguments (defaults applied) are the attributes; constraint
    keys name parameters, and dotted keypaths reach into mapping arguments.
    Validation always goes through the async entry point, so validators that
    return awaitables work for sync functions too.

    :param constraints: Constraint set keyed by parameter name.
    :param options: Global options for every call (``fullMessages``, ``format`` ...).
    :param on_invalid: Optional. If not provided, :class:`ValidationFailed` is
                       raised. If it is a callable, it is invoked (with the
                       ``ValidationFailed`` instance when it accepts an
                       argument) and its result returned. Any other value is
                       returned directly.
    :param strict: Optional. For sync functions called while an event loop is
                   running in the calling thread: raise instead of validating
                   on a worker thread. Defaults to ``ATTRVET_STRICT_SYNC``.
    :param validator: Optional. Engine to use; defaults to the process-wide one.

    .. code-block:: python

        from attrvet import validate_arguments

        @validate_arguments({"age": {"numericality": {"greaterThan": 0}}})
        def set_age(user_id: str, age: int): ...

        @validate_arguments({"email": {"email": True}}, on_invalid=None)
        async def subscribe(email: str): ...

        def reject(error):
            return {"error": "INVALID_ARGUMENTS", "details": error.errors}

        @validate_arguments({"query": {"presence": {"allowEmpty": False}}}, on_invalid=reject)
        def search(query: str): ...
    """

    def decorator(func: Callable):
        qualname = func.__qualname__
        signature = inspect.signature(func)
        allowed_params = tuple(signature.parameters.keys())
        has_var_kwargs = any(
            param.kind == inspect.Parameter.VAR_KEYWORD
            for param in signature.parameters.values()
        )

        # Fail at import time rather than on the first call.
        check_constraint_keys(qualname, constraints, allowed_params, has_var_kwargs)

        async def _check(args, kwargs) -> Optional[ValidationFailed]:
            engine = validator or get_constraint_validator()
            bound = signature.bind(*args, **kwargs)
            bound.apply_defaults()
            arguments = dict(bound.arguments)
            for param in signature.parameters.values():
                # **kwargs are checked as if they were named parameters
                if param.kind == inspect.Parameter.VAR_KEYWORD:
                    arguments.update(arguments.pop(param.name, {}))

            with get_tracer("attrvet").start_as_current_span(
                f"attrvet.guard:{qualname}",
                attributes={"attrvet.function": qualname},
            ) as span:
                failure = await validate_arguments_async(engine, qualname, arguments, constraints, options)
                span.set_attribute("attrvet.valid", failure is None)
            return failure

        @functools.wraps(func)
        def sync_wrapper(*args, **kwargs):
            """Wrapper for synchronous functions."""

            async def check_and_run():
                failure = await _check(args, kwargs)
                if failure is not None:
                    return await _handle_invalid(failure)
                return func(*args, **kwargs)

            # Detect if an event loop is already running in this thread.
            try:
                asyncio.get_running_loop()
            except RuntimeError:
                return anyio.run(check_and_run)

            effective_strict = strict if strict is not None else strict_sync()
            if effective_strict:
                raise CapabilityError(
                    f"Cannot call validated sync function '{qualname}' from a running event loop "
                    f"(strict mode). Set strict=False or unset ATTRVET_STRICT_SYNC to auto-thread."
                )

            # Run the whole check-then-call path on a worker thread with its own
            # event loop, carrying the caller's context variables along.
            _ctx = _ctxvars.copy_context()
            with _cf.ThreadPoolExecutor(max_workers=1) as _exec:
                _future = _exec.submit(_ctx.run, anyio.run, check_and_run)
                return _future.result()

        @functools.wraps(func)
        async def async_wrapper(*args, **kwargs):
            """Wrapper for asynchronous functions."""

            failure = await _check(args, kwargs)
            if failure is not None:
                return await _handle_invalid(failure)
            return await func(*args, **kwargs)

        async def _handle_invalid(error: ValidationFailed):
            """Executes the user-supplied `on_invalid` handler or raises by default."""

            if on_invalid is _sentinel:
                raise error

            if not callable(on_invalid):
                return on_invalid

            outcome = on_invalid(error) if _accepts_argument(on_invalid) else on_invalid()
            if inspect.isawaitable(outcome):
                outcome = await outcome
            return outcome

        wrapper = async_wrapper if inspect.iscoroutinefunction(func) else sync_wrapper
        wrapper.__attrvet_constraints__ = constraints
        return wrapper

    return decorator


__all__ = ["validate_arguments"]

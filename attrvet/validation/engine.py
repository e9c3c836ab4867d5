# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""The validation pipeline.

``ConstraintValidator`` resolves constraints into validator calls, collects
one :class:`ErrorRecord` per call, settles awaitable results (async entry
point only), normalizes the records and renders them with the selected
formatter.

Usage::

    engine = ConstraintValidator()
    engine.validate({"age": "x"}, {"age": {"numericality": True}})
    # {"age": ["Age is not a number"]}
"""

from __future__ import annotations

import logging
import time
from typing import Any, Callable, Dict, List, Mapping, Optional, Tuple

import anyio

from ..config import default_options, merge_options
from ..exceptions import AsyncResultError, CapabilityError, ConfigurationError, ValidationFailed
from ..formatters.registry import FormatterRegistry, get_formatter_registry
from ..runtime.coordinator import TaskGroupFactory, close_pending, wait_for_results
from ..telemetry.metrics import (
    record_configuration_error,
    record_validation_metrics,
    record_validator_invocations,
)
from ..telemetry.runtime import get_tracer
from ..validators.registry import ValidatorRegistry, get_validator_registry
from .base import ErrorRecord
from .cleaning import clean_attributes
from .forms import collect_form_values, is_form_source
from .keypath import get_deep_value
from .normalize import normalize
from .predicates import is_disabled, is_empty, is_object, is_promise, result

logger = logging.getLogger(__name__)

FormCollector = Callable[[Any, Optional[Mapping[str, Any]]], Dict[str, Any]]


class ConstraintValidator:
    """Runs constraint sets against attribute mappings.

    ``options`` are instance defaults layered over :data:`DEFAULT_OPTIONS`
    (and its environment overrides) and under per-call options. Without
    ``validators``/``formatters`` the process-wide registries are looked up
    on every call, so replacing or resetting them takes effect immediately.
    """

    def __init__(
        self,
        options: Optional[Mapping[str, Any]] = None,
        *,
        validators: Optional[ValidatorRegistry] = None,
        formatters: Optional[FormatterRegistry] = None,
        form_collector: Optional[FormCollector] = None,
        task_group_factory: Optional[TaskGroupFactory] = anyio.create_task_group,
    ):
        self._options: Dict[str, Any] = dict(options or {})
        self._validators = validators
        self._formatters = formatters
        self.form_collector: FormCollector = form_collector or collect_form_values
        self.task_group_factory = task_group_factory

    @property
    def validators(self) -> ValidatorRegistry:
        return self._validators if self._validators is not None else get_validator_registry()

    @property
    def formatters(self) -> FormatterRegistry:
        return self._formatters if self._formatters is not None else get_formatter_registry()

    @property
    def options(self) -> Dict[str, Any]:
        return merge_options(default_options(), self._options)

    def resolve_options(self, options: Optional[Mapping[str, Any]] = None) -> Dict[str, Any]:
        return merge_options(self.options, options)

    # ------------------------------------------------------------------
    # Pipeline stages
    # ------------------------------------------------------------------

    def collect_form_values(self, form: Any, options: Optional[Mapping[str, Any]] = None) -> Dict[str, Any]:
        return self.form_collector(form, options)

    def run_validations(
        self,
        attributes: Any,
        constraints: Mapping[str, Any],
        global_options: Mapping[str, Any],
    ) -> List[ErrorRecord]:
        """Call every enabled validator once and record what it returned.

        Unknown validator names raise :class:`UnknownValidatorError` and
        abort the whole call.
        """

        if is_form_source(attributes):
            attributes = self.collect_form_values(attributes, global_options)

        registry = self.validators
        records: List[ErrorRecord] = []

        try:
            for attribute, constraint in constraints.items():
                value = get_deep_value(attributes, attribute)
                validator_map = result(constraint, value, attributes, attribute, global_options, constraints)
                if not is_object(validator_map):
                    continue

                for name, raw_options in validator_map.items():
                    validator = registry[name]
                    validator_options = result(
                        raw_options, value, attributes, attribute, global_options, constraints
                    )
                    if is_disabled(validator_options):
                        logger.debug("Skipping validator '%s' for '%s'", name, attribute)
                        continue

                    records.append(
                        ErrorRecord(
                            attribute=attribute,
                            value=value,
                            validator=name,
                            options=validator_options,
                            attributes=attributes,
                            global_options=global_options,
                            error=validator(value, validator_options, attribute, attributes, global_options),
                        )
                    )
        except BaseException:
            close_pending(records)
            raise

        logger.debug(
            "Ran %d validator(s) over %d constraint(s)", len(records), len(constraints)
        )
        return records

    def _render(self, records: List[ErrorRecord], options: Mapping[str, Any]) -> Tuple[Any, int]:
        normalized = normalize(records, options)
        rendered = self.formatters.format(normalized, options.get("format") or "grouped")
        return (None if is_empty(rendered) else rendered), len(normalized)

    def process_results(self, records: List[ErrorRecord], options: Mapping[str, Any]) -> Any:
        """Prune, expand, convert and format; ``None`` when nothing is left."""

        rendered, _ = self._render(records, options)
        return rendered

    @staticmethod
    def clean_attributes(attributes: Any, constraints: Any) -> Dict[str, Any]:
        return clean_attributes(attributes, constraints)

    # ------------------------------------------------------------------
    # Entry points
    # ------------------------------------------------------------------

    def validate(
        self,
        attributes: Any,
        constraints: Mapping[str, Any],
        options: Optional[Mapping[str, Any]] = None,
    ) -> Any:
        """Validate synchronously and return the rendered errors, or ``None``.

        Raises :class:`AsyncResultError` if any validator returned an
        awaitable; use :meth:`validate_async` for those.
        """

        opts = self.resolve_options(options)
        started_at = time.perf_counter()

        with get_tracer("attrvet").start_as_current_span(
            "attrvet.validate",
            attributes={"attrvet.format": str(opts.get("format")), "attrvet.constraints": len(constraints)},
        ) as span:
            try:
                records = self.run_validations(attributes, constraints, opts)
                record_validator_invocations(record.validator for record in records)

                pending = next((record for record in records if is_promise(record.error)), None)
                if pending is not None:
                    close_pending(records)
                    raise AsyncResultError(attribute=pending.attribute, validator=pending.validator)

                errors, count = self._render(records, opts)
            except ConfigurationError as exc:
                record_configuration_error("validate", exc)
                record_validation_metrics("validate", "error", started_at)
                raise

            span.set_attribute("attrvet.valid", errors is None)

        record_validation_metrics("validate", "valid" if errors is None else "invalid", started_at, count)
        return errors

    async def validate_async(
        self,
        attributes: Any,
        constraints: Mapping[str, Any],
        options: Optional[Mapping[str, Any]] = None,
    ) -> Any:
        """Validate, awaiting pending validator results concurrently.

        Returns the (cleaned, when ``cleanAttributes`` is set) attributes.
        On failure raises ``wrapErrors(errors, options, attributes,
        constraints)``, :class:`ValidationFailed` by default.
        """

        if self.task_group_factory is None:
            raise CapabilityError("async support is required")

        opts = self.resolve_options(options)
        wrap_errors = opts.get("wrapErrors") or ValidationFailed
        started_at = time.perf_counter()

        with get_tracer("attrvet").start_as_current_span(
            "attrvet.validate_async",
            attributes={"attrvet.format": str(opts.get("format")), "attrvet.constraints": len(constraints)},
        ) as span:
            try:
                if is_form_source(attributes):
                    attributes = self.collect_form_values(attributes, opts)
                if opts.get("cleanAttributes"):
                    attributes = self.clean_attributes(attributes, constraints)

                records = self.run_validations(attributes, constraints, opts)
                record_validator_invocations(record.validator for record in records)
                await wait_for_results(records, self.task_group_factory)
                errors, count = self._render(records, opts)
            except ConfigurationError as exc:
                record_configuration_error("validate_async", exc)
                record_validation_metrics("validate_async", "error", started_at)
                raise

            span.set_attribute("attrvet.valid", errors is None)

        if errors is None:
            record_validation_metrics("validate_async", "valid", started_at)
            return attributes

        record_validation_metrics("validate_async", "invalid", started_at, count)
        failure = wrap_errors(errors, opts, attributes, constraints)
        if not isinstance(failure, BaseException):
            raise ConfigurationError(
                f"wrapErrors must produce an exception, got {type(failure).__name__}"
            )
        raise failure

    def single(
        self,
        value: Any,
        constraints: Mapping[str, Any],
        options: Optional[Mapping[str, Any]] = None,
    ) -> Optional[List[Any]]:
        """Validate one bare value; messages come back flat and unprefixed."""

        opts = merge_options(options, {"format": "flat", "fullMessages": False})
        return self.validate({"single": value}, {"single": constraints}, opts)

    def __repr__(self) -> str:
        return f"ConstraintValidator(options={self._options!r})"


__all__ = ["ConstraintValidator", "FormCollector"]

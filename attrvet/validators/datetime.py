# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Date and datetime range checks.

The validators never interpret dates themselves: a ``parse`` hook turns any
input into milliseconds since the epoch (``NaN`` or ``None`` when invalid)
and a ``format`` hook renders such a number for messages. Both hooks must be
installed before either validator is used::

    registry.get("datetime").configure(parse=parse_iso, format=format_iso)
"""

from __future__ import annotations

import math
from datetime import date, datetime, timedelta, timezone
from typing import Any, Callable, Mapping, Optional

from ..exceptions import ConfigurationError
from ..validation.messages import format_message
from ..validation.predicates import is_defined, is_number, unique
from .base import BaseValidator

MS_PER_DAY = 86_400_000
EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

ParseHook = Callable[[Any, Mapping[str, Any]], Any]
FormatHook = Callable[[Any, Mapping[str, Any]], str]


def parse_iso(value: Any, options: Optional[Mapping[str, Any]] = None) -> float:
    """Milliseconds since the epoch for dates, datetimes, ISO strings and numbers.

    Naive datetimes are taken as UTC. Anything unparseable yields ``NaN``.
    """

    if isinstance(value, bool):
        return math.nan
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str):
        text = value.strip()
        if text.endswith("Z"):
            text = text[:-1] + "+00:00"
        try:
            value = datetime.fromisoformat(text)
        except ValueError:
            return math.nan
    if isinstance(value, datetime):
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return (value - EPOCH) / timedelta(milliseconds=1)
    if isinstance(value, date):
        return float((value - EPOCH.date()).days * MS_PER_DAY)
    return math.nan


def format_iso(value: Any, options: Optional[Mapping[str, Any]] = None) -> str:
    """Render epoch milliseconds as ``YYYY-MM-DD`` or ``YYYY-MM-DD HH:MM:SS`` (UTC)."""

    moment = EPOCH + timedelta(milliseconds=value)
    if (options or {}).get("dateOnly"):
        return moment.strftime("%Y-%m-%d")
    return moment.strftime("%Y-%m-%d %H:%M:%S")


class DatetimeValidator(BaseValidator):
    """Range check on parsed timestamps (``earliest``, ``latest``, ``dateOnly``)."""

    name = "datetime"

    def __init__(
        self,
        options: Optional[Mapping[str, Any]] = None,
        messages: Optional[Mapping[str, Any]] = None,
        parse: Optional[ParseHook] = None,
        format: Optional[FormatHook] = None,
    ):
        super().__init__(options, messages)
        self.parse = parse
        self.format = format

    def configure(self, parse: Optional[ParseHook] = None, format: Optional[FormatHook] = None) -> "DatetimeValidator":
        """Install the parse/format hooks; ``None`` leaves a hook unchanged."""

        if parse is not None:
            self.parse = parse
        if format is not None:
            self.format = format
        return self

    def check(self, value, options, attribute, attributes, global_options):
        if not callable(self.parse) or not callable(self.format):
            raise ConfigurationError(
                "Both the parse and format functions needs to be set to use the datetime/date validator"
            )

        if not is_defined(value):
            return None

        opts = self.merge_options(options)
        earliest = self.parse(opts["earliest"], opts) if opts.get("earliest") else None
        latest = self.parse(opts["latest"], opts) if opts.get("latest") else None

        parsed = self.parse(value, opts)

        if not is_number(parsed) or (opts.get("dateOnly") and parsed % MS_PER_DAY != 0):
            template = (
                opts.get("notValid")
                or opts.get("message")
                or self.message("notValid")
                or "must be a valid date"
            )
            return format_message(template, {"value": value})

        errors = []
        if is_number(earliest) and parsed < earliest:
            template = (
                opts.get("tooEarly")
                or opts.get("message")
                or self.message("tooEarly")
                or "must be no earlier than %{date}"
            )
            errors.append(
                format_message(
                    template,
                    {"value": self.format(parsed, opts), "date": self.format(earliest, opts)},
                )
            )

        if is_number(latest) and parsed > latest:
            template = (
                opts.get("tooLate")
                or opts.get("message")
                or self.message("tooLate")
                or "must be no later than %{date}"
            )
            errors.append(
                format_message(
                    template,
                    {"value": self.format(parsed, opts), "date": self.format(latest, opts)},
                )
            )

        return unique(errors) if errors else None


class DateValidator(BaseValidator):
    """``datetime`` with ``dateOnly`` forced.

    Holds no state of its own: options, messages and the parse/format hooks
    all come from the shared datetime entry.
    """

    name = "date"

    def __init__(self, datetime_validator: DatetimeValidator):
        super().__init__()
        self.datetime_validator = datetime_validator

    def check(self, value, options, attribute, attributes, global_options):
        opts = dict(options) if isinstance(options, Mapping) else {}
        opts["dateOnly"] = True
        return self.datetime_validator(value, opts, attribute, attributes, global_options)


__all__ = [
    "DateValidator",
    "DatetimeValidator",
    "MS_PER_DAY",
    "format_iso",
    "parse_iso",
]

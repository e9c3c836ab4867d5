# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Regular-expression validators: ``format``, ``email`` and ``url``."""

from __future__ import annotations

import re
from functools import lru_cache
from typing import Any, Final, Mapping, Sequence, Tuple

from ..validation.predicates import is_defined
from .base import BaseValidator

# Letter flags accepted by the ``flags`` option; ``g`` and ``u`` have no effect.
_FLAG_LETTERS: Final[Mapping[str, int]] = {
    "i": re.IGNORECASE,
    "m": re.MULTILINE,
    "s": re.DOTALL,
    "x": re.VERBOSE,
    "g": 0,
    "u": 0,
}

EMAIL_PATTERN: Final = re.compile(
    r"(?:[a-z0-9!#$%&'*+/=?^_`{|}~-]+(?:\.[a-z0-9!#$%&'*+/=?^_`{|}~-]+)*"
    r'|"(?:[\x01-\x08\x0b\x0c\x0e-\x1f\x21\x23-\x5b\x5d-\x7f]|\\[\x01-\x09\x0b\x0c\x0e-\x7f])*")'
    r"@(?:(?:[a-z0-9](?:[a-z0-9-]*[a-z0-9])?\.)+[a-z0-9](?:[a-z0-9-]*[a-z0-9])?"
    r"|\[(?:(?:25[0-5]|2[0-4][0-9]|[01]?[0-9][0-9]?)\.){3}"
    r"(?:25[0-5]|2[0-4][0-9]|[01]?[0-9][0-9]?|[a-z0-9-]*[a-z0-9]:"
    r"(?:[\x01-\x08\x0b\x0c\x0e-\x1f\x21-\x5a\x53-\x7f]|\\[\x01-\x09\x0b\x0c\x0e-\x7f])+)\])",
    re.IGNORECASE,
)

_PRIVATE_NETWORKS = (
    r"(?!(?:10|127)(?:\.\d{1,3}){3})"
    r"(?!(?:169\.254|192\.168)(?:\.\d{1,3}){2})"
    r"(?!172\.(?:1[6-9]|2\d|3[0-1])(?:\.\d{1,3}){2})"
)
_PUBLIC_IPV4 = (
    r"(?:[1-9]\d?|1\d\d|2[01]\d|22[0-3])"
    r"(?:\.(?:1?\d{1,2}|2[0-4]\d|25[0-5])){2}"
    r"(?:\.(?:[1-9]\d?|1\d\d|2[0-4]\d|25[0-4]))"
)
_HOSTNAME = (
    r"(?:(?:[a-z\u00a1-\uffff0-9]-*)*[a-z\u00a1-\uffff0-9]+)"
    r"(?:\.(?:[a-z\u00a1-\uffff0-9]-*)*[a-z\u00a1-\uffff0-9]+)*"
)
_TLD = r"(?:\.(?:[a-z\u00a1-\uffff]{2,}))"
_DATA_URL = (
    r"data:(?:\w+/[-+.\w]+(?:;[\w=]+)*)?(?:;base64)?,"
    r"[A-Za-z0-9\-_.!~*'();/?:@&=+$,%]*"
)


def compile_flags(flags: Any) -> int:
    """Translate ``"im"``-style letters (or pass through ``re`` flag ints)."""

    if not flags:
        return 0
    if isinstance(flags, int):
        return flags
    value = 0
    for letter in str(flags):
        if letter not in _FLAG_LETTERS:
            raise ValueError(f"Unsupported regular expression flag {letter!r}")
        value |= _FLAG_LETTERS[letter]
    return value


@lru_cache(maxsize=64)
def build_url_pattern(schemes: Tuple[str, ...], allow_local: bool, allow_data_url: bool) -> "re.Pattern[str]":
    scheme_group = "|".join(schemes)
    tld = _TLD + "?" if allow_local else _TLD
    host = ("" if allow_local else _PRIVATE_NETWORKS) + _PUBLIC_IPV4 + "|" + _HOSTNAME + tld
    regex = (
        rf"(?:(?:{scheme_group})://)"
        r"(?:\S+(?::\S*)?@)?"
        rf"(?:{host})"
        r"(?::\d{2,5})?"
        r"(?:[/?#]\S*)?"
    )
    if allow_data_url:
        regex = rf"(?:{regex})|(?:{_DATA_URL})"
    return re.compile(regex, re.IGNORECASE)


class FormatValidator(BaseValidator):
    """The whole string must match ``pattern`` (a string or compiled regex)."""

    name = "format"

    def check(self, value, options, attribute, attributes, global_options):
        if isinstance(options, (str, re.Pattern)):
            options = {"pattern": options}

        opts = self.merge_options(options)
        message = opts.get("message") or self.message() or "is invalid"

        if not is_defined(value):
            return None
        if not isinstance(value, str):
            return message

        pattern = opts.get("pattern")
        if isinstance(pattern, str):
            pattern = re.compile(pattern, compile_flags(opts.get("flags")))

        match = pattern.search(value)
        if match is None or len(match.group(0)) != len(value):
            return message
        return None


class EmailValidator(BaseValidator):
    name = "email"

    pattern = EMAIL_PATTERN

    def check(self, value, options, attribute, attributes, global_options):
        opts = self.merge_options(options)
        message = opts.get("message") or self.message() or "is not a valid email"

        if not is_defined(value):
            return None
        if not isinstance(value, str):
            return message

        return None if self.pattern.fullmatch(value) else message


class UrlValidator(BaseValidator):
    """Absolute URLs with one of ``schemes`` (``http``/``https`` by default).

    Private and loopback hosts are rejected unless ``allowLocal`` is set;
    ``allowDataUrl`` also accepts ``data:`` URLs.
    """

    name = "url"

    def check(self, value, options, attribute, attributes, global_options):
        if not is_defined(value):
            return None

        opts = self.merge_options(options)
        message = opts.get("message") or self.message() or "is not a valid url"
        schemes: Sequence[str] = opts.get("schemes") or ("http", "https")

        if not isinstance(value, str):
            return message

        pattern = build_url_pattern(
            tuple(schemes),
            bool(opts.get("allowLocal")),
            bool(opts.get("allowDataUrl")),
        )
        return None if pattern.fullmatch(value) else message


__all__ = [
    "EMAIL_PATTERN",
    "EmailValidator",
    "FormatValidator",
    "UrlValidator",
    "build_url_pattern",
    "compile_flags",
]

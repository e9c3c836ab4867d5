# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Building blocks of the validation pipeline.

The engine itself lives in :mod:`attrvet.validation.engine`; it is not
imported here because it depends on the validator and formatter catalogues,
which in turn depend on these helpers.
"""

from .base import ErrorRecord, SignalKind, classify_signal
from .cleaning import clean_attributes
from .forms import collect_form_values, is_dom_element, is_form_source, is_jquery_element, sanitize_form_value
from .keypath import for_each_key_in_keypath, get_deep_value, set_deep_value, split_keypath
from .messages import capitalize, format_message, prettify, stringify_value
from .normalize import convert_error_messages, expand_multiple_errors, normalize, prune_empty_errors
from .predicates import (
    contains,
    is_array,
    is_boolean,
    is_date,
    is_defined,
    is_disabled,
    is_empty,
    is_function,
    is_integer,
    is_number,
    is_object,
    is_promise,
    is_string,
    result,
    unique,
)

__all__ = [
    "ErrorRecord",
    "SignalKind",
    "capitalize",
    "classify_signal",
    "clean_attributes",
    "collect_form_values",
    "contains",
    "convert_error_messages",
    "expand_multiple_errors",
    "for_each_key_in_keypath",
    "format_message",
    "get_deep_value",
    "is_array",
    "is_boolean",
    "is_date",
    "is_defined",
    "is_disabled",
    "is_dom_element",
    "is_empty",
    "is_form_source",
    "is_function",
    "is_integer",
    "is_jquery_element",
    "is_number",
    "is_object",
    "is_promise",
    "is_string",
    "normalize",
    "prettify",
    "prune_empty_errors",
    "result",
    "sanitize_form_value",
    "set_deep_value",
    "split_keypath",
    "stringify_value",
    "unique",
]

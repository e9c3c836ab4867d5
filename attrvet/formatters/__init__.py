# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

from .registry import (
    Formatter,
    FormatterRegistry,
    builtin_formatters,
    flatten_errors_to_array,
    get_formatter_registry,
    group_errors_by_attribute,
    reset_formatter_registry,
    set_formatter_registry,
)

__all__ = [
    "Formatter",
    "FormatterRegistry",
    "builtin_formatters",
    "flatten_errors_to_array",
    "get_formatter_registry",
    "group_errors_by_attribute",
    "reset_formatter_registry",
    "set_formatter_registry",
]

# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Collect attributes from DOM-like form sources.

attrvet does not parse HTML. A form source is any object following the small
element protocol below, e.g. an adapter over a headless browser or a template
test harness:

* element: ``query_selector_all(selector)``, ``query_selector(selector)``,
  ``node_type`` (1 for elements, 9 for documents) and ``node_name``;
* ``input``/``textarea``: ``name``, ``value``, ``type``, ``checked`` and
  ``get_attribute(name)`` (``None`` when the attribute is absent);
* ``select``: ``name``, ``multiple``, ``selected_index`` and ``options``,
  each option exposing ``value`` and ``selected``.

A jQuery-like wrapper is any indexable object with a string ``jquery``
attribute; its first element is collected.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Mapping, Optional

from .predicates import is_string

logger = logging.getLogger(__name__)

ELEMENT_NODE = 1
DOCUMENT_NODE = 9

INPUT_SELECTOR = "input[name], textarea[name]"
SELECT_SELECTOR = "select[name]"


def is_dom_element(obj: Any) -> bool:
    if obj is None or isinstance(obj, (str, bytes, Mapping)):
        return False
    if not callable(getattr(obj, "query_selector_all", None)):
        return False
    if not callable(getattr(obj, "query_selector", None)):
        return False
    return getattr(obj, "node_type", None) in (ELEMENT_NODE, DOCUMENT_NODE) and is_string(
        getattr(obj, "node_name", None)
    )


def is_jquery_element(obj: Any) -> bool:
    if obj is None or isinstance(obj, (str, bytes, Mapping)):
        return False
    return is_string(getattr(obj, "jquery", None))


def is_form_source(obj: Any) -> bool:
    return is_dom_element(obj) or is_jquery_element(obj)


def sanitize_form_value(value: Any, options: Optional[Mapping[str, Any]] = None) -> Any:
    """Apply the ``trim`` and ``nullify`` options to one collected value."""

    options = options or {}
    if options.get("trim") and is_string(value):
        value = value.strip()
    if options.get("nullify") is not False and value == "":
        return None
    return value


def _escape_name(name: str) -> str:
    return name.replace(".", "\\\\.")


def _is_ignored(element: Any) -> bool:
    return element.get_attribute("data-ignored") is not None


def _to_number(value: Any) -> Any:
    if value is None or value == "":
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    return int(number) if number.is_integer() else number


def collect_form_values(form: Any, options: Optional[Mapping[str, Any]] = None) -> Dict[str, Any]:
    """Read every named ``input``, ``textarea`` and ``select`` of *form*.

    Dots in field names are escaped so that they stay literal when the names
    are used as constraint keypaths. Elements carrying ``data-ignored`` are
    skipped.
    """

    options = options or {}
    values: Dict[str, Any] = {}

    if is_jquery_element(form):
        form = form[0] if len(form) else None
    if not form:
        return values

    for field in form.query_selector_all(INPUT_SELECTOR):
        if _is_ignored(field):
            continue

        name = _escape_name(field.name)
        value = sanitize_form_value(field.value, options)
        field_type = getattr(field, "type", None)

        if field_type == "number":
            value = _to_number(value)
        elif field_type == "checkbox":
            if field.get_attribute("value") is not None:
                value = value if field.checked else (values.get(name) or None)
            else:
                value = bool(field.checked)
        elif field_type == "radio" and not field.checked:
            value = values.get(name) or None

        values[name] = value

    for select in form.query_selector_all(SELECT_SELECTOR):
        if _is_ignored(select):
            continue

        if select.multiple:
            value = [
                sanitize_form_value(option.value, options)
                for option in select.options
                if option.selected
            ]
        else:
            index = select.selected_index
            selected = ""
            if index is not None and 0 <= index < len(select.options):
                selected = select.options[index].value or ""
            value = sanitize_form_value(selected, options)

        values[_escape_name(select.name)] = value

    logger.debug("Collected %d form values", len(values))
    return values


__all__ = [
    "collect_form_values",
    "is_dom_element",
    "is_form_source",
    "is_jquery_element",
    "sanitize_form_value",
]

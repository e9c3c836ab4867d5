# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Signup Form Demo: Declarative Constraints and Report Formats.

This demo validates a signup payload against one constraint set and shows the
same failures rendered in every built-in report format.

Run with:
    python examples/signup_form_demo.py
"""

import json

import attrvet
from attrvet.validators.datetime import format_iso, parse_iso

CONSTRAINTS = {
    "username": {
        "presence": {"allowEmpty": False},
        "length": {"minimum": 3, "maximum": 20},
        "format": {"pattern": "[a-z0-9_]+", "flags": "i", "message": "can only contain a-z, 0-9 and _"},
    },
    "email": {"presence": True, "email": True},
    "password": {"presence": True, "length": {"minimum": 8}},
    "confirmPassword": {"equality": "password"},
    "age": {"numericality": {"onlyInteger": True, "greaterThanOrEqualTo": 13}},
    "birthday": {"date": {"latest": "2012-01-01"}},
    "plan": {"inclusion": {"within": ["free", "pro"], "message": "^Pick a plan we actually sell"}},
    "profile.homepage": {"url": True},
}

PAYLOAD = {
    "username": "x!",
    "email": "not-an-email",
    "password": "hunter2",
    "confirmPassword": "hunter3",
    "age": "12",
    "birthday": "2015-06-01",
    "plan": "enterprise",
    "profile": {"homepage": "http://localhost:8000"},
    "isAdmin": True,
}


def demo_formats():
    """Render the same failures as grouped, flat and constraint reports."""
    print("\n" + "=" * 70)
    print("DEMO 1: One constraint set, four report shapes")
    print("=" * 70)

    for fmt in ("grouped", "flat", "constraint"):
        errors = attrvet.validate(PAYLOAD, CONSTRAINTS, {"format": fmt})
        print(f"\n  format={fmt!r}:")
        print("    " + json.dumps(errors, indent=2).replace("\n", "\n    "))

    detailed = attrvet.validate(PAYLOAD, CONSTRAINTS, {"format": "detailed"})
    print("\n  format='detailed' (first record):")
    print(f"    {detailed[0]!r}")


def demo_single_value():
    """Validate a bare value without naming an attribute."""
    print("\n" + "=" * 70)
    print("DEMO 2: single() for one-off values")
    print("=" * 70)

    for value in ("42", "4.2", "forty-two"):
        print(f"  {value!r:12} -> {attrvet.single(value, {'numericality': {'onlyInteger': True}})}")


def demo_cleaning():
    """Strip attributes nobody asked for."""
    print("\n" + "=" * 70)
    print("DEMO 3: clean_attributes drops unconstrained input")
    print("=" * 70)

    cleaned = attrvet.clean_attributes(PAYLOAD, CONSTRAINTS)
    print(f"  isAdmin kept? {'isAdmin' in cleaned}")
    print(f"  profile: {cleaned['profile']}")


if __name__ == "__main__":
    attrvet.get_validator_registry().get("datetime").configure(parse=parse_iso, format=format_iso)
    demo_formats()
    demo_single_value()
    demo_cleaning()

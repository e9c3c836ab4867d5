# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Async Checks Demo: Awaitable Validators and Guarded Functions.

A validator may return an awaitable (for example a database lookup). The
async entry point awaits every pending check concurrently; the synchronous
entry point refuses them. ``@validate_arguments`` runs the async path for
both sync and async functions.

Run with:
    python examples/async_checks_demo.py
"""

import anyio

import attrvet
from attrvet import validate_arguments
from attrvet.exceptions import AsyncResultError, ValidationFailed

TAKEN = {"admin", "root", "ada"}


async def username_available(value, options, attribute, attributes, global_options):
    await anyio.sleep(0.05)  # pretend to query a database
    if value in TAKEN:
        return "^%{value} is already taken"
    return None


attrvet.register_validator("available", username_available)

CONSTRAINTS = {"username": {"presence": {"allowEmpty": False}, "available": True}}


@validate_arguments(CONSTRAINTS, on_invalid=lambda error: error.errors)
def create_account(username, display_name=None):
    return f"created {username}"


async def main():
    print("\n" + "=" * 70)
    print("DEMO 1: validate_async awaits pending checks")
    print("=" * 70)
    print(f"  free name -> {await attrvet.validate_async({'username': 'grace', 'extra': 1}, CONSTRAINTS)}")
    try:
        await attrvet.validate_async({"username": "ada"}, CONSTRAINTS)
    except ValidationFailed as failure:
        print(f"  taken name -> {failure.errors}")

    print("\n" + "=" * 70)
    print("DEMO 2: validate() refuses awaitables")
    print("=" * 70)
    try:
        attrvet.validate({"username": "grace"}, CONSTRAINTS)
    except AsyncResultError as error:
        print(f"  {type(error).__name__}: {error}")


if __name__ == "__main__":
    anyio.run(main)

    print("\n" + "=" * 70)
    print("DEMO 3: @validate_arguments on a sync function")
    print("=" * 70)
    print(f"  {create_account('grace')}")
    print(f"  {create_account('root')}")

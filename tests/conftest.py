"""Pytest fixtures for the attrvet test-suite."""
from __future__ import annotations

import pytest

from attrvet import ConstraintValidator, build_default_validators
from attrvet.formatters import FormatterRegistry, reset_formatter_registry
from attrvet.validators import reset_validator_registry


@pytest.fixture()
def catalogue():
    """An isolated validator registry; mutations never leak between tests."""
    return build_default_validators()


@pytest.fixture()
def engine(catalogue):
    """Engine bound to the isolated ``catalogue`` and a fresh formatter registry."""
    return ConstraintValidator(validators=catalogue, formatters=FormatterRegistry())


@pytest.fixture(autouse=True)
def _reset_global_registries():
    """Tests that touch the process-wide registries start and end clean."""
    reset_validator_registry()
    reset_formatter_registry()
    yield
    reset_validator_registry()
    reset_formatter_registry()


@pytest.fixture(autouse=True)
def _clean_environment(monkeypatch):
    for name in ("ATTRVET_FORMAT", "ATTRVET_FULL_MESSAGES", "ATTRVET_CLEAN_ATTRIBUTES", "ATTRVET_STRICT_SYNC"):
        monkeypatch.delenv(name, raising=False)
    yield


@pytest.fixture(autouse=True)
def _silence_logging(caplog):  # noqa: D401
    """Reduce noise – most tests assert behaviour, not log output."""
    caplog.set_level("WARNING")
    yield


@pytest.fixture()
def anyio_backend():  # noqa: D401
    """Force *anyio* tests to use the standard asyncio backend only."""
    return "asyncio"

"""
Pytest configuration and fixtures for omnieventing tests.

Shared fixtures for the event-type cleaner and application registry tests.
"""

from __future__ import annotations

import logging

import pytest

from omnieventing.application import InMemoryApplicationRegistry, ModelApplication
from omnieventing.constants import TYPE_LABEL
from omnieventing.testing import make_application, make_registry

# =========================================================================
# Application Fixtures
# =========================================================================


@pytest.fixture
def plain_application() -> ModelApplication:
    """Registered application without a type label."""
    return make_application("testapp")


@pytest.fixture
def typed_application() -> ModelApplication:
    """Registered application carrying a type label."""
    return make_application("testapp", {TYPE_LABEL: "testapptype"})


@pytest.fixture
def empty_registry() -> InMemoryApplicationRegistry:
    """Registry with no applications."""
    return make_registry()


# =========================================================================
# Logging Fixtures
# =========================================================================


@pytest.fixture
def test_logger() -> logging.Logger:
    """Dedicated logger injected into cleaners under test."""
    return logging.getLogger("omnieventing.tests")


@pytest.fixture
def clean_eventing_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    """Remove EVENTING_* variables so settings start from defaults."""
    for name in (
        "EVENTING_EVENT_TYPE_PREFIX",
        "EVENTING_APPLICATION_REGISTRY_PATH",
        "EVENTING_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch

# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Testing utilities for omnieventing.

Helpers that build applications and registries for tests, standing in for
the application lister that backs the cleaner in a running controller.
"""

from __future__ import annotations

from omnieventing.application.models import ModelApplication
from omnieventing.application.registry import InMemoryApplicationRegistry


def make_application(
    name: str, labels: dict[str, str] | None = None
) -> ModelApplication:
    """Build an application with the given name and labels."""
    return ModelApplication(name=name, labels=labels or {})


def make_registry(*applications: ModelApplication) -> InMemoryApplicationRegistry:
    """Build a registry holding ``applications``.

    Applications with an empty name are skipped, so a test can express
    "no application registered" with ``make_application("")``.
    """
    return InMemoryApplicationRegistry(app for app in applications if app.name)


__all__ = [
    "make_application",
    "make_registry",
]

# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""In-memory application registry.

Concrete implementation of ``ProtocolApplicationRegistry`` backed by a dict
keyed on the exact application name. The registry is updated by whoever owns
it (a watcher, a file loader, a test); the cleaner only ever calls ``get``.

Registry files are YAML documents of the form::

    applications:
      - name: commerce
        labels:
          application-type: commerce
      - name: marketing
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterable
from pathlib import Path

import yaml
from pydantic import ValidationError

from omnieventing.application.models import ModelApplication

logger = logging.getLogger(__name__)


class InMemoryApplicationRegistry:
    """Thread-safe, name-keyed store of applications.

    Values are immutable ``ModelApplication`` instances, so ``get`` hands out
    a consistent snapshot without copying.
    """

    def __init__(self, applications: Iterable[ModelApplication] = ()) -> None:
        self._lock = threading.Lock()
        self._applications: dict[str, ModelApplication] = {}
        for application in applications:
            self._applications[application.name] = application

    def get(self, name: str) -> ModelApplication | None:
        """Return the application registered under exactly ``name``, or None."""
        with self._lock:
            return self._applications.get(name)

    def upsert(self, application: ModelApplication) -> None:
        """Insert or replace the application with the same name."""
        with self._lock:
            self._applications[application.name] = application

    def delete(self, name: str) -> bool:
        """Remove an application. Returns False if it was not registered."""
        with self._lock:
            return self._applications.pop(name, None) is not None

    def list_applications(self) -> list[ModelApplication]:
        """Return all applications sorted by name."""
        with self._lock:
            return sorted(self._applications.values(), key=lambda app: app.name)

    def __len__(self) -> int:
        with self._lock:
            return len(self._applications)

    def __contains__(self, name: object) -> bool:
        with self._lock:
            return name in self._applications


def load_registry_file(path: Path) -> InMemoryApplicationRegistry:
    """Load an application registry from a YAML file.

    Args:
        path: Path to the registry YAML file.

    Returns:
        Registry holding every listed application. An empty registry is
        returned if the file does not exist.

    Raises:
        ValueError: If the YAML is malformed or an entry is not a valid
            application.
    """
    if not path.exists():
        logger.warning("Application registry file not found, using empty registry: %s", path)
        return InMemoryApplicationRegistry()

    with path.open() as f:
        try:
            data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in registry file '{path}': {e}") from e

    if not isinstance(data, dict):
        raise ValueError(f"Registry file '{path}' must contain a mapping at the top level")

    entries = data.get("applications") or []
    if not isinstance(entries, list):
        raise ValueError(f"'applications' in registry file '{path}' must be a list")

    applications: list[ModelApplication] = []
    for index, entry in enumerate(entries):
        if not isinstance(entry, dict):
            raise ValueError(
                f"Invalid application entry #{index} in registry file '{path}': expected a mapping"
            )
        try:
            applications.append(
                ModelApplication(
                    name=entry.get("name"),
                    labels=entry.get("labels") or {},
                )
            )
        except ValidationError as e:
            raise ValueError(
                f"Invalid application entry #{index} in registry file '{path}': {e}"
            ) from e

    logger.debug("Loaded %d application(s) from %s", len(applications), path)
    return InMemoryApplicationRegistry(applications)


__all__ = [
    "InMemoryApplicationRegistry",
    "load_registry_file",
]

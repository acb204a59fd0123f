# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Shared protocol definitions for omnieventing.

The cleaner depends on these protocols rather than on concrete classes, so
any registry that can answer an exact-name lookup (an in-memory store, a
cached watcher, a test double) can be plugged in.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from omnieventing.application.models import ModelApplication


@runtime_checkable
class ProtocolApplicationRegistry(Protocol):
    """Read-only lookup of applications by exact name.

    Implementations must support concurrent reads. The cleaner never writes
    through this interface.
    """

    def get(self, name: str) -> ModelApplication | None:
        """Return the application registered under ``name``, or None if unknown."""
        ...


@runtime_checkable
class ProtocolEventTypeCleaner(Protocol):
    """Converts raw event types into their canonical form."""

    def clean(self, event_type: str) -> str:
        """Return the canonical event type or raise an ``EventTypeCleanError``."""
        ...


__all__ = [
    "ProtocolApplicationRegistry",
    "ProtocolEventTypeCleaner",
]

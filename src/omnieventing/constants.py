# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Shared constants for event-type normalization.

Centralizes the structural bounds of an event type and the reserved
application label, so the parser, the cleaner and the application helpers
agree on a single set of values.
"""

from __future__ import annotations

from typing import Final

# =============================================================================
# Event-type structure
# =============================================================================

EVENT_TYPE_SEPARATOR: Final[str] = "."
"""Separator between event-type segments."""

MIN_EVENT_TYPE_SEGMENTS: Final[int] = 2
"""Fewest segments an event type can have and still hold an application and a version."""

MIN_MIDDLE_SEGMENTS: Final[int] = 2
"""Fewest name segments required between the application and the version."""

MAX_MIDDLE_SEGMENTS: Final[int] = 2
"""Name segments kept in the canonical form; extra leading segments are concatenated."""

# =============================================================================
# Application labels
# =============================================================================

TYPE_LABEL: Final[str] = "application-type"
"""Application label whose value replaces the application name in event types."""


__all__ = [
    "EVENT_TYPE_SEPARATOR",
    "MAX_MIDDLE_SEGMENTS",
    "MIN_EVENT_TYPE_SEGMENTS",
    "MIN_MIDDLE_SEGMENTS",
    "TYPE_LABEL",
]

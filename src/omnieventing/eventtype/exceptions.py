# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Exceptions for event-type cleaning.

Every failure of ``Cleaner.clean`` is one of the typed errors below. None is
retried by the cleaner and none leaves the cleaner unusable.

Error Codes:
    - EVENTTYPE_001: Event type has too few or empty segments
    - EVENTTYPE_002: Event type does not start with the configured prefix
    - EVENTTYPE_003: Fewer than two name segments before the version
"""

from __future__ import annotations


class EventTypeCleanError(ValueError):
    """Base exception for event-type cleaning errors.

    Attributes:
        message: Human-readable error description.
        code: Error code (e.g., EVENTTYPE_001).
        event_type: The raw event type that was rejected.

    Example:
        >>> try:
        ...     raise EventTypeCleanError("bad", event_type="a", code="EVENTTYPE_999")
        ... except EventTypeCleanError as e:
        ...     print(f"Error {e.code}: {e.message}")
        Error EVENTTYPE_999: bad
    """

    def __init__(
        self, message: str, *, event_type: str, code: str | None = None
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
        self.event_type = event_type


class MalformedEventTypeError(EventTypeCleanError):
    """Raised when the event type cannot even hold an application and a version.

    Contract Error Code: EVENTTYPE_001
    """

    def __init__(self, message: str, *, event_type: str) -> None:
        super().__init__(message, event_type=event_type, code="EVENTTYPE_001")


class PrefixMismatchError(EventTypeCleanError):
    """Raised when the leading segments do not equal the configured prefix.

    Contract Error Code: EVENTTYPE_002

    Attributes:
        prefix: The configured prefix the event type was checked against.
    """

    def __init__(self, message: str, *, event_type: str, prefix: str) -> None:
        super().__init__(message, event_type=event_type, code="EVENTTYPE_002")
        self.prefix = prefix


class IncompleteEventTypeError(EventTypeCleanError):
    """Raised when fewer than two name segments precede the version.

    Contract Error Code: EVENTTYPE_003
    """

    def __init__(self, message: str, *, event_type: str) -> None:
        super().__init__(message, event_type=event_type, code="EVENTTYPE_003")


__all__ = [
    "EventTypeCleanError",
    "IncompleteEventTypeError",
    "MalformedEventTypeError",
    "PrefixMismatchError",
]

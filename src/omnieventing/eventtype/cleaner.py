# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Event-type cleaner.

Turns the event types published by producers into the canonical form that
subscriptions match against::

    [prefix.]application.name.lastName.version

Application resolution precedence:
    1. Registered application with a type label -> cleaned label value.
    2. Registered application without the label -> cleaned application name.
    3. Unknown application -> cleaned raw segment.

Name segments beyond two are concatenated into the first one, so the
canonical form never grows with the producer's naming depth.
"""

from __future__ import annotations

import logging

from omnieventing.application.naming import (
    clean_name,
    get_clean_type_or_name,
    is_clean_name,
)
from omnieventing.constants import EVENT_TYPE_SEPARATOR
from omnieventing.eventtype.parser import merge_middle_segments, parse_event_type
from omnieventing.protocols import ProtocolApplicationRegistry
from omnieventing.settings import EventingSettings


class Cleaner:
    """Cleans event types against a fixed prefix and an application registry.

    The cleaner holds no mutable state. ``clean`` may be called concurrently
    as long as the registry supports concurrent reads, and it stays usable
    after raising.

    Args:
        prefix: Prefix every event type must start with; empty disables the
            check.
        registry: Read-only application lookup.
        logger: Logger for diagnostics; defaults to this module's logger.
    """

    def __init__(
        self,
        prefix: str,
        registry: ProtocolApplicationRegistry,
        logger: logging.Logger | None = None,
    ) -> None:
        self._prefix = prefix
        self._registry = registry
        self._logger = logger if logger is not None else logging.getLogger(__name__)

    @property
    def prefix(self) -> str:
        return self._prefix

    def clean(self, event_type: str) -> str:
        """Return the canonical form of ``event_type``.

        Raises:
            MalformedEventTypeError: Too few or empty segments.
            PrefixMismatchError: The configured prefix is not matched exactly.
            IncompleteEventTypeError: Fewer than two name segments.
        """
        parsed = parse_event_type(event_type, self._prefix)

        application = self._resolve_application(parsed.application)
        if not application:
            self._logger.warning(
                "Application segment is empty after cleaning. event_type=%s application=%s",
                event_type,
                parsed.application,
            )

        segments: list[str] = []
        if self._prefix:
            segments.append(self._prefix)
        segments.append(application)
        segments.extend(merge_middle_segments(parsed.middle_segments))
        segments.append(parsed.version)

        clean_event_type = EVENT_TYPE_SEPARATOR.join(segments)
        self._logger.debug(
            "Cleaned event type. event_type=%s clean_event_type=%s",
            event_type,
            clean_event_type,
        )
        return clean_event_type

    def _resolve_application(self, raw_application: str) -> str:
        application = self._registry.get(raw_application)
        if application is None:
            self._logger.debug(
                "Application not found, cleaning raw segment. application=%s clean=%s",
                raw_application,
                is_clean_name(raw_application),
            )
            return clean_name(raw_application)

        if application.type_override is not None:
            self._logger.debug(
                "Using application type label. application=%s type=%s",
                application.name,
                application.type_override,
            )
        else:
            self._logger.debug(
                "Using application name, no type label. application=%s clean=%s",
                application.name,
                is_clean_name(application.name),
            )
        return get_clean_type_or_name(application)


def create_cleaner(
    registry: ProtocolApplicationRegistry,
    *,
    settings: EventingSettings | None = None,
    logger: logging.Logger | None = None,
) -> Cleaner:
    """Build a cleaner from settings (read from the environment if omitted)."""
    if settings is None:
        settings = EventingSettings()
    return Cleaner(settings.event_type_prefix, registry, logger=logger)


__all__ = [
    "Cleaner",
    "create_cleaner",
]

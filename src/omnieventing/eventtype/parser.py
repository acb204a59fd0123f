# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Structural parsing of raw event types.

An event type is a dot-separated sequence of non-empty segments::

    [prefix.]application.name1.name2[...nameN].version

Parsing validates and strips the configured prefix, takes the next segment as
the raw application name and splits the remainder into name segments and the
trailing version. It does not consult the application registry.

Validation order (first failure wins):
    1. At least two segments                -> MalformedEventTypeError
    2. Prefix match                         -> PrefixMismatchError
    3. No empty segment after the prefix    -> MalformedEventTypeError
    4. At least two name segments           -> IncompleteEventTypeError
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from omnieventing.constants import (
    EVENT_TYPE_SEPARATOR,
    MAX_MIDDLE_SEGMENTS,
    MIN_EVENT_TYPE_SEGMENTS,
    MIN_MIDDLE_SEGMENTS,
)
from omnieventing.eventtype.exceptions import (
    IncompleteEventTypeError,
    MalformedEventTypeError,
    PrefixMismatchError,
)


@dataclass(frozen=True)
class ParsedEventType:
    """Segments of an event type with the prefix already removed.

    Attributes:
        application: Raw, uncleaned application segment.
        middle_segments: Name segments between application and version.
        version: Trailing version segment.
    """

    application: str
    middle_segments: tuple[str, ...]
    version: str


def split_segments(value: str) -> list[str]:
    """Split on the separator. The empty string has no segments."""
    if not value:
        return []
    return value.split(EVENT_TYPE_SEPARATOR)


def parse_event_type(event_type: str, prefix: str) -> ParsedEventType:
    """Parse ``event_type`` against the configured ``prefix``.

    Args:
        event_type: Raw event type as published by the producer.
        prefix: Configured prefix; empty disables prefix enforcement.

    Returns:
        The parsed segments.

    Raises:
        MalformedEventTypeError: Fewer than two segments, or an empty segment
            after the prefix.
        PrefixMismatchError: The leading segments are not exactly ``prefix``,
            or ``prefix`` has an empty token.
        IncompleteEventTypeError: Fewer than two name segments before the
            version.
    """
    segments = split_segments(event_type)
    if len(segments) < MIN_EVENT_TYPE_SEGMENTS:
        raise MalformedEventTypeError(
            f"Event type '{event_type}' has {len(segments)} segment(s), "
            f"at least {MIN_EVENT_TYPE_SEGMENTS} are required",
            event_type=event_type,
        )

    prefix_segments = split_segments(prefix)
    if prefix_segments:
        # A prefix with an empty token never matches.
        given_prefix = EVENT_TYPE_SEPARATOR.join(segments[: len(prefix_segments)])
        if given_prefix != prefix or not all(prefix_segments):
            raise PrefixMismatchError(
                f"Event type '{event_type}' does not start with prefix '{prefix}'",
                event_type=event_type,
                prefix=prefix,
            )
        segments = segments[len(prefix_segments) :]

    if any(not segment for segment in segments):
        raise MalformedEventTypeError(
            f"Event type '{event_type}' contains an empty segment",
            event_type=event_type,
        )

    # application + at least MIN_MIDDLE_SEGMENTS + version
    if len(segments) < MIN_MIDDLE_SEGMENTS + 2:
        raise IncompleteEventTypeError(
            f"Event type '{event_type}' needs at least {MIN_MIDDLE_SEGMENTS} "
            "name segments between the application and the version",
            event_type=event_type,
        )

    return ParsedEventType(
        application=segments[0],
        middle_segments=tuple(segments[1:-1]),
        version=segments[-1],
    )


def merge_middle_segments(segments: Sequence[str]) -> tuple[str, ...]:
    """Bound the name segments to two without dropping information.

    Up to two segments are returned unchanged. Otherwise every segment but
    the last is concatenated without a separator, and the last is kept as-is.

    Example:
        >>> merge_middle_segments(["a", "b", "c", "d"])
        ('abc', 'd')
    """
    if len(segments) <= MAX_MIDDLE_SEGMENTS:
        return tuple(segments)
    return ("".join(segments[:-1]), segments[-1])


__all__ = [
    "ParsedEventType",
    "merge_middle_segments",
    "parse_event_type",
    "split_segments",
]

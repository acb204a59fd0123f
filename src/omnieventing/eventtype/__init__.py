# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Event-type normalization.

Producers publish event types such as
``sap.kyma.custom.commerce-app.order.created.v1``; the cleaner turns them
into a canonical, structurally bounded form that subscriptions rely on.

Usage:
    from omnieventing.eventtype import Cleaner
    from omnieventing.application import InMemoryApplicationRegistry

    cleaner = Cleaner("sap.kyma.custom", InMemoryApplicationRegistry())
    cleaner.clean("sap.kyma.custom.commerce-app.order.created.v1")
    # Returns: "sap.kyma.custom.commerceapp.order.created.v1"
"""

from omnieventing.eventtype.cleaner import Cleaner, create_cleaner
from omnieventing.eventtype.exceptions import (
    EventTypeCleanError,
    IncompleteEventTypeError,
    MalformedEventTypeError,
    PrefixMismatchError,
)
from omnieventing.eventtype.parser import (
    ParsedEventType,
    merge_middle_segments,
    parse_event_type,
)

__all__ = [
    "Cleaner",
    "EventTypeCleanError",
    "IncompleteEventTypeError",
    "MalformedEventTypeError",
    "ParsedEventType",
    "PrefixMismatchError",
    "create_cleaner",
    "merge_middle_segments",
    "parse_event_type",
]

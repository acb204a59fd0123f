# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""OmniEventing - event-type normalization for event routing.

Quick Start:
    >>> from omnieventing import Cleaner, InMemoryApplicationRegistry, ModelApplication
    >>> registry = InMemoryApplicationRegistry(
    ...     [ModelApplication(name="testapp", labels={"application-type": "testapptype"})]
    ... )
    >>> Cleaner("prefix", registry).clean("prefix.testapp.Segment1.Segment2.Segment3.v1")
    'prefix.testapptype.Segment1Segment2.Segment3.v1'
"""

from omnieventing.application import (
    InMemoryApplicationRegistry,
    ModelApplication,
    clean_name,
)
from omnieventing.eventtype import (
    Cleaner,
    EventTypeCleanError,
    IncompleteEventTypeError,
    MalformedEventTypeError,
    PrefixMismatchError,
    create_cleaner,
)
from omnieventing.settings import EventingSettings

__version__ = "0.1.0"

__all__ = [
    # Main API
    "Cleaner",
    "create_cleaner",
    "clean_name",
    # Applications
    "InMemoryApplicationRegistry",
    "ModelApplication",
    # Configuration
    "EventingSettings",
    # Exceptions
    "EventTypeCleanError",
    "IncompleteEventTypeError",
    "MalformedEventTypeError",
    "PrefixMismatchError",
]

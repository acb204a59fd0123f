# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Applications that produce events, and how their names are cleaned.

The registry answers one question for the event-type cleaner: does an
application with this exact name exist, and what are its labels.
"""

from omnieventing.application.models import ModelApplication
from omnieventing.application.naming import (
    clean_name,
    get_clean_type_or_name,
    is_clean_name,
)
from omnieventing.application.registry import (
    InMemoryApplicationRegistry,
    load_registry_file,
)

__all__ = [
    "InMemoryApplicationRegistry",
    "ModelApplication",
    "clean_name",
    "get_clean_type_or_name",
    "is_clean_name",
    "load_registry_file",
]

# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Name cleaning helpers for application segments."""

from __future__ import annotations

import re

from omnieventing.application.models import ModelApplication

# Anything outside ASCII letters and digits is dropped.
_INVALID_NAME_CHARS = re.compile(r"[^a-zA-Z0-9]+")


def clean_name(value: str) -> str:
    """Remove every character that is not an ASCII letter or digit.

    Order and case of the remaining characters are preserved and nothing is
    inserted, so the function is idempotent.

    Example:
        >>> clean_name("te--s__t!!a@@p##p%%")
        'testapp'
    """
    return _INVALID_NAME_CHARS.sub("", value)


def is_clean_name(value: str) -> bool:
    """Return True if ``value`` is unchanged by :func:`clean_name`."""
    return clean_name(value) == value


def get_clean_type_or_name(application: ModelApplication) -> str:
    """Return the cleaned type override of ``application``, else its cleaned name."""
    type_override = application.type_override
    if type_override is not None:
        return clean_name(type_override)
    return clean_name(application.name)


__all__ = [
    "clean_name",
    "get_clean_type_or_name",
    "is_clean_name",
]

# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Application model consumed by the event-type cleaner.

An application is the producer of events. Only its name and labels matter
here; one reserved label (``TYPE_LABEL``) overrides the name used in
canonical event types.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator

from omnieventing.constants import TYPE_LABEL


class ModelApplication(BaseModel):
    """Point-in-time view of a registered application.

    Attributes:
        name: Exact application name as known to the registry.
        labels: Read-only string labels attached to the application; a copy
            of the mapping passed in, so neither side can change the other.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", from_attributes=True)

    name: str = Field(..., description="Exact application name")
    labels: Mapping[str, str] = Field(
        default_factory=dict,
        validate_default=True,
        description="Application labels (string keys to string values)",
    )

    @field_validator("labels", mode="after")
    @classmethod
    def _freeze_labels(cls, value: Mapping[str, str]) -> Mapping[str, str]:
        return MappingProxyType(dict(value))

    @field_serializer("labels")
    def _serialize_labels(self, value: Mapping[str, str]) -> dict[str, str]:
        return dict(value)

    @property
    def type_override(self) -> str | None:
        """Value of the reserved type label, or None when the label is absent."""
        return self.labels.get(TYPE_LABEL)


__all__ = ["ModelApplication"]

# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Environment-driven settings for omnieventing.

Environment variables:
    EVENTING_EVENT_TYPE_PREFIX: Prefix every event type must start with
        (default: empty, prefix enforcement disabled).
    EVENTING_APPLICATION_REGISTRY_PATH: YAML file with known applications
        (default: unset, empty registry).
    EVENTING_LOG_LEVEL: Log level name for the CLI (default: INFO).
"""

from __future__ import annotations

import logging
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class EventingSettings(BaseSettings):
    """Pydantic Settings for event-type cleaning, loaded from environment."""

    model_config = SettingsConfigDict(
        env_prefix="EVENTING_",
        extra="ignore",
        frozen=True,
    )

    event_type_prefix: str = Field(
        default="",
        description="Prefix required on every event type; empty disables the check",
    )
    application_registry_path: Path | None = Field(
        default=None,
        description="YAML file listing known applications and their labels",
    )
    log_level: str = Field(
        default="INFO",
        description="Log level name used by the command line entry point",
    )

    @field_validator("log_level")
    @classmethod
    def _validate_log_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {value!r}")
        return level


__all__ = ["EventingSettings"]

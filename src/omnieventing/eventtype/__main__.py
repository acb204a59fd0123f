# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT
"""
Event-Type Cleaner CLI.

Cleans raw event types the same way the eventing controller does before it
creates subscriptions, so producers can check their naming up front.

Usage:
    python -m omnieventing.eventtype prefix.commerce-app.order.created.v1
    python -m omnieventing.eventtype --prefix sap.kyma.custom <event-type>...
    python -m omnieventing.eventtype --registry applications.yaml --json
    cat event_types.txt | python -m omnieventing.eventtype

Settings come from EVENTING_* environment variables; --prefix and
--registry override them.

Exit Codes:
    0 - Success: every event type was cleaned
    1 - Rejected: at least one event type is invalid
    2 - Error: CLI usage error or invalid configuration
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from omnieventing.application.registry import (
    InMemoryApplicationRegistry,
    load_registry_file,
)
from omnieventing.eventtype.cleaner import Cleaner
from omnieventing.eventtype.exceptions import EventTypeCleanError
from omnieventing.protocols import ProtocolEventTypeCleaner
from omnieventing.settings import EventingSettings

# JSON output indentation (spaces)
JSON_INDENT_SPACES = 2

EXIT_OK = 0
EXIT_REJECTED = 1
EXIT_ERROR = 2


def _read_event_types(values: list[str]) -> list[str]:
    if values:
        return values
    return [line.strip() for line in sys.stdin if line.strip()]


def _clean_all(
    cleaner: ProtocolEventTypeCleaner, event_types: list[str]
) -> list[dict[str, Any]]:
    results: list[dict[str, Any]] = []
    for event_type in event_types:
        try:
            clean_event_type = cleaner.clean(event_type)
        except EventTypeCleanError as e:
            results.append(
                {
                    "event_type": event_type,
                    "clean_event_type": None,
                    "error": e.message,
                    "code": e.code,
                }
            )
        else:
            results.append(
                {
                    "event_type": event_type,
                    "clean_event_type": clean_event_type,
                    "error": None,
                    "code": None,
                }
            )
    return results


def _format_text(results: list[dict[str, Any]]) -> str:
    lines: list[str] = []
    for result in results:
        if result["error"] is None:
            lines.append(f"{result['event_type']} -> {result['clean_event_type']}")
        else:
            lines.append(f"{result['event_type']} !! [{result['code']}] {result['error']}")
    return "\n".join(lines)


def main(args: list[str] | None = None) -> int:
    """Run the event-type cleaner CLI.

    Args:
        args: Command line arguments (defaults to sys.argv[1:]).

    Returns:
        Exit code (0, 1 or 2).
    """
    parser = argparse.ArgumentParser(
        prog="python -m omnieventing.eventtype",
        description="Clean event types into their canonical form.",
        epilog=__doc__,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "event_types",
        nargs="*",
        help="Event types to clean (default: read one per line from stdin)",
    )
    parser.add_argument(
        "--prefix",
        default=None,
        help="Required event-type prefix (overrides EVENTING_EVENT_TYPE_PREFIX)",
    )
    parser.add_argument(
        "--registry",
        type=Path,
        default=None,
        help="YAML file of known applications (overrides EVENTING_APPLICATION_REGISTRY_PATH)",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Output results as JSON",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable debug logging",
    )
    parsed = parser.parse_args(args)

    try:
        settings = EventingSettings()
    except ValidationError as e:
        print(f"Error: invalid settings: {e}", file=sys.stderr)
        return EXIT_ERROR

    logging.basicConfig(
        level=logging.DEBUG if parsed.verbose else settings.log_level,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        stream=sys.stderr,
    )

    prefix = parsed.prefix if parsed.prefix is not None else settings.event_type_prefix
    registry_path = parsed.registry or settings.application_registry_path

    try:
        registry = (
            load_registry_file(registry_path)
            if registry_path is not None
            else InMemoryApplicationRegistry()
        )
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_ERROR

    results = _clean_all(Cleaner(prefix, registry), _read_event_types(parsed.event_types))

    if parsed.json:
        print(json.dumps(results, indent=JSON_INDENT_SPACES))
    elif results:
        print(_format_text(results))

    if any(result["error"] is not None for result in results):
        return EXIT_REJECTED
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())

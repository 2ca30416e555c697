"""Identifier and timestamp helpers for persisted records."""

from __future__ import annotations

import uuid
from datetime import UTC, datetime

from agentguard.constants.store import ID_RANDOM_HEX_LENGTH


def new_record_id(prefix: str) -> str:
    """Return a unique record identifier such as ``evt_1a2b3c4d5e6f``."""
    return f"{prefix}{uuid.uuid4().hex[:ID_RANDOM_HEX_LENGTH]}"


def utc_timestamp() -> str:
    """Return the current UTC time as an ISO-8601 string with millisecond precision."""
    return datetime.now(UTC).isoformat(timespec="milliseconds").replace("+00:00", "Z")

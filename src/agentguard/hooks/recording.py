"""Activity recording that never alters a hook's decision."""

from __future__ import annotations

import logging
from typing import Any

from agentguard.exceptions import StoreError
from agentguard.model import ActivityEvent
from agentguard.store import ActivityLog

logger = logging.getLogger(__name__)


def record_event(activity: ActivityLog, **fields: Any) -> ActivityEvent | None:
    """Append an activity event, logging storage failures instead of raising."""
    try:
        return activity.record(**fields)
    except StoreError as exc:
        logger.error("Failed to record activity event: %s", exc, extra={"fields": {"event": "STORE_ERROR"}})
        return None

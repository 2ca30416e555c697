"""Outbound hook response contract."""

from __future__ import annotations

import json
from typing import TextIO

from agentguard.constants.hooks import PERMISSION_DENY, PRE_TOOL_USE
from agentguard.types import JsonObject


def allow_response() -> JsonObject:
    return {}


def deny_response(reason: str) -> JsonObject:
    return {
        "hookSpecificOutput": {
            "hookEventName": PRE_TOOL_USE,
            "permissionDecision": PERMISSION_DENY,
            "permissionDecisionReason": reason,
        }
    }


def write_response(response: JsonObject, stream: TextIO) -> None:
    """Emit ``response`` as a single JSON line."""
    stream.write(json.dumps(response) + "\n")
    stream.flush()

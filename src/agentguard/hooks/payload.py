"""Inbound tool-invocation payload parsing."""

from __future__ import annotations

import json
from dataclasses import dataclass, field

from agentguard.exceptions import HookInputError
from agentguard.types import JsonObject


@dataclass(frozen=True)
class HookPayload:
    """Tool invocation description delivered on a hook's stdin."""

    tool_name: str
    tool_input: JsonObject = field(default_factory=dict)
    session_id: str | None = None
    cwd: str | None = None

    def text(self, key: str) -> str:
        """Return ``tool_input[key]`` when it is a string, else an empty string."""
        value = self.tool_input.get(key)
        return value if isinstance(value, str) else ""


def parse_payload(raw: str | bytes) -> HookPayload:
    """Decode a hook payload, raising ``HookInputError`` on malformed input."""
    if isinstance(raw, bytes):
        try:
            raw = raw.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise HookInputError(f"Hook input is not valid UTF-8: {exc}") from exc

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise HookInputError(f"Hook input is not valid JSON: {exc}") from exc

    if not isinstance(data, dict):
        raise HookInputError("Hook input must be a JSON object")

    tool_name = data.get("tool_name")
    if not isinstance(tool_name, str) or not tool_name:
        raise HookInputError("Hook input is missing 'tool_name'")

    tool_input = data.get("tool_input", {})
    if tool_input is None:
        tool_input = {}
    if not isinstance(tool_input, dict):
        raise HookInputError("'tool_input' must be a JSON object")

    session_id = data.get("session_id")
    cwd = data.get("cwd")
    return HookPayload(
        tool_name=tool_name,
        tool_input=tool_input,
        session_id=session_id if isinstance(session_id, str) else None,
        cwd=cwd if isinstance(cwd, str) and cwd else None,
    )

"""Hook protocol adapters."""

from .payload import HookPayload, parse_payload
from .post_tool_use import handle_post_tool_use
from .pre_tool_use import PreToolUseOutcome, evaluate_pre_tool_use, handle_pre_tool_use
from .response import allow_response, deny_response

__all__ = [
    "HookPayload",
    "PreToolUseOutcome",
    "allow_response",
    "deny_response",
    "evaluate_pre_tool_use",
    "handle_post_tool_use",
    "handle_pre_tool_use",
    "parse_payload",
]

"""Hook protocol names, tool names, and truncation limits."""

from __future__ import annotations

from agentguard.types import HookName

PRE_TOOL_USE: HookName = "PreToolUse"
POST_TOOL_USE: HookName = "PostToolUse"

PRE_HOOK_LOG_NAME: str = "security-scanner-pre"
POST_HOOK_LOG_NAME: str = "security-scanner-post"

TOOL_BASH: str = "Bash"
TOOL_WRITE: str = "Write"
TOOL_EDIT: str = "Edit"
WRITE_TOOLS: frozenset[str] = frozenset({TOOL_WRITE, TOOL_EDIT})

PERMISSION_DENY: str = "deny"
UNKNOWN_FILE_PATH: str = "unknown"

TARGET_MAX_LENGTH: int = 200
REASON_COMMAND_MAX_LENGTH: int = 150
DENY_DETAIL_LIMIT: int = 5
WARNING_FINDINGS_LIMIT: int = 5
EVENT_FINDINGS_LIMIT: int = 10

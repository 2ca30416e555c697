"""Human-readable deny reasons returned to the calling agent."""

from __future__ import annotations

from collections.abc import Sequence

from agentguard.constants.hooks import DENY_DETAIL_LIMIT, REASON_COMMAND_MAX_LENGTH
from agentguard.model import Finding
from agentguard.rules import CommandPattern


def format_command_reason(pattern: CommandPattern, command: str) -> str:
    return (
        f"[{pattern.id}] Dangerous command blocked: {pattern.reason}\n\n"
        f"Command: {command[:REASON_COMMAND_MAX_LENGTH]}\n\n"
        "This command was blocked because it could cause irreversible damage.\n"
        "If you really need to run this, do it manually in your terminal."
    )


def format_write_reason(blockable: Sequence[Finding], file_path: str) -> str:
    """Describe the first few blocking findings and summarize the remainder."""
    lines = [f"Security scan blocked this write ({len(blockable)} issue(s) in {file_path}):", ""]
    for finding in blockable[:DENY_DETAIL_LIMIT]:
        lines.append(f"[{finding.severity.upper()}] {finding.rule}")
        lines.append(f"   {finding.description}")
        lines.append(f"   Line {finding.line}: {finding.snippet}")
    remainder = len(blockable) - DENY_DETAIL_LIMIT
    if remainder > 0:
        lines.append(f"   ... and {remainder} more issue(s)")
    lines.append("")
    lines.append("Fix the issues above and try again.")
    return "\n".join(lines)

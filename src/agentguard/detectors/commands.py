"""Dangerous shell-command classification."""

from __future__ import annotations

from dataclasses import dataclass

from agentguard.constants.detectors import CATEGORY_COMMANDS
from agentguard.constants.severity import COMMAND_LEVEL_SEVERITY, SAFETY_LEVEL_RANK
from agentguard.detectors.base import Detector
from agentguard.detectors.common import snippet
from agentguard.model import Finding
from agentguard.rules import DANGEROUS_COMMANDS, CommandPattern
from agentguard.types import SafetyLevel


@dataclass(frozen=True)
class CommandVerdict:
    """Outcome of classifying one shell command."""

    blocked: bool
    pattern: CommandPattern | None = None


NOT_BLOCKED = CommandVerdict(blocked=False)


def check_command(
    command: str,
    safety_level: SafetyLevel,
    patterns: tuple[CommandPattern, ...] = DANGEROUS_COMMANDS,
) -> CommandVerdict:
    """Return the first pattern, in catalog order, that applies at ``safety_level``.

    A pattern applies when its level is no stricter than the configured level
    and its regex matches anywhere in the command.
    """
    if not command:
        return NOT_BLOCKED

    threshold = SAFETY_LEVEL_RANK[safety_level]
    for pattern in patterns:
        if SAFETY_LEVEL_RANK[pattern.level] <= threshold and pattern.regex.search(command):
            return CommandVerdict(blocked=True, pattern=pattern)
    return NOT_BLOCKED


class CommandDetector(Detector):
    """Report the first dangerous pattern in a command string as a finding.

    Classification uses the most permissive level so any catalogued pattern
    is reported; blocking decisions go through ``check_command`` instead.
    """

    category = CATEGORY_COMMANDS

    def run(self, *, content: str, file_path: str) -> list[Finding]:
        verdict = check_command(content, "strict")
        if verdict.pattern is None:
            return []
        pattern = verdict.pattern
        return [
            Finding(
                category=self.category,
                rule=pattern.id,
                severity=COMMAND_LEVEL_SEVERITY[pattern.level],
                file=file_path,
                line=1,
                column=1,
                description=pattern.reason,
                snippet=snippet(content),
            )
        ]

"""Allow/warn/deny decisions for proposed agent actions."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from agentguard.constants.detectors import WRITE_POLICY_CATEGORIES
from agentguard.constants.severity import DEFAULT_SAFETY_LEVEL
from agentguard.detectors import build_detectors, check_command
from agentguard.model import Finding
from agentguard.policy.formatting import format_command_reason, format_write_reason
from agentguard.rules import CommandPattern
from agentguard.scanner.score import is_blocking
from agentguard.types import Outcome, SafetyLevel

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Decision:
    """Result of evaluating one proposed action.

    ``warn`` permits the action but signals that non-blocking findings exist.
    """

    outcome: Outcome
    reason: str | None = None
    findings: tuple[Finding, ...] = ()
    blockable: tuple[Finding, ...] = ()
    pattern: CommandPattern | None = None

    @property
    def denied(self) -> bool:
        return self.outcome == "deny"


ALLOW = Decision(outcome="allow")


class PolicyEngine:
    """Apply the configured safety level to commands and write content."""

    def __init__(self, safety_level: SafetyLevel = DEFAULT_SAFETY_LEVEL) -> None:
        self.safety_level = safety_level
        self._write_detectors = build_detectors(WRITE_POLICY_CATEGORIES)

    def decide_command(self, command: str) -> Decision:
        """Deny when the first applicable dangerous-command pattern matches."""
        verdict = check_command(command, self.safety_level)
        if verdict.pattern is None:
            return ALLOW
        logger.debug("Command matched pattern %s", verdict.pattern.id)
        return Decision(
            outcome="deny",
            reason=format_command_reason(verdict.pattern, command),
            pattern=verdict.pattern,
        )

    def decide_write(self, content: str, file_path: str) -> Decision:
        """Scan proposed content and deny when any finding reaches the blocking threshold."""
        if not content:
            return ALLOW

        findings: list[Finding] = []
        for detector in self._write_detectors:
            findings.extend(detector.run(content=content, file_path=file_path))
        if not findings:
            return ALLOW

        blockable = tuple(finding for finding in findings if is_blocking(finding.severity, self.safety_level))
        if not blockable:
            return Decision(outcome="warn", findings=tuple(findings))
        return Decision(
            outcome="deny",
            reason=format_write_reason(blockable, file_path),
            findings=tuple(findings),
            blockable=blockable,
        )

"""PreToolUse adapter: decide whether a proposed write or command may run.

Any failure while parsing or classifying resolves to allow so a broken hook
never stalls the calling agent. The decision is emitted before its activity
event is stored.
"""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass
from typing import Any, BinaryIO, TextIO

from agentguard.config import GuardConfig
from agentguard.constants.hooks import (
    EVENT_FINDINGS_LIMIT,
    PRE_HOOK_LOG_NAME,
    PRE_TOOL_USE,
    TARGET_MAX_LENGTH,
    TOOL_BASH,
    UNKNOWN_FILE_PATH,
    WARNING_FINDINGS_LIMIT,
    WRITE_TOOLS,
)
from agentguard.hooks.diagnostics import diagnostics_log
from agentguard.hooks.payload import HookPayload, parse_payload
from agentguard.hooks.recording import record_event
from agentguard.hooks.response import allow_response, deny_response, write_response
from agentguard.policy import Decision, PolicyEngine
from agentguard.store import ActivityLog
from agentguard.types import JsonObject

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PreToolUseOutcome:
    """Response for one invocation and the activity event it leaves, if any."""

    response: JsonObject
    event: dict[str, Any] | None = None


def evaluate_pre_tool_use(
    raw: str | bytes,
    config: GuardConfig,
    *,
    engine: PolicyEngine | None = None,
) -> PreToolUseOutcome:
    """Decide one PreToolUse invocation without touching the activity store."""
    payload: HookPayload | None = None
    try:
        payload = parse_payload(raw)
        engine = engine or PolicyEngine(config.safety_level)
        if payload.tool_name == TOOL_BASH:
            return _evaluate_bash(payload, engine)
        if payload.tool_name in WRITE_TOOLS:
            return _evaluate_write(payload, engine)
        return PreToolUseOutcome(allow_response())
    except Exception as exc:
        logger.error("PreToolUse hook failed, allowing: %s", exc, exc_info=True, extra={"fields": {"event": "ERROR"}})
        if payload is None:
            return PreToolUseOutcome(allow_response())
        return PreToolUseOutcome(
            allow_response(),
            {
                "action": "error",
                "hook": PRE_TOOL_USE,
                "tool": payload.tool_name,
                "target": _target_for(payload),
                "reason": str(exc),
            },
        )


def handle_pre_tool_use(
    raw: str | bytes,
    config: GuardConfig,
    *,
    activity: ActivityLog | None = None,
    engine: PolicyEngine | None = None,
) -> JsonObject:
    """Return the response object for one PreToolUse invocation, recording its event."""
    outcome = evaluate_pre_tool_use(raw, config, engine=engine)
    _record(outcome, activity or ActivityLog.from_config(config))
    return outcome.response


def _record(outcome: PreToolUseOutcome, activity: ActivityLog) -> None:
    if outcome.event is not None:
        record_event(activity, **outcome.event)


def _evaluate_bash(payload: HookPayload, engine: PolicyEngine) -> PreToolUseOutcome:
    command = payload.text("command")
    if not command:
        return PreToolUseOutcome(allow_response())

    decision = engine.decide_command(command)
    target = command[:TARGET_MAX_LENGTH]
    if decision.pattern is not None and decision.reason is not None:
        pattern = decision.pattern
        logger.info(
            "Blocked command matching %s",
            pattern.id,
            extra={
                "fields": {
                    "event": "BLOCKED",
                    "type": "bash",
                    "id": pattern.id,
                    "priority": pattern.level,
                    "command": target,
                    "session_id": payload.session_id,
                }
            },
        )
        return PreToolUseOutcome(
            deny_response(decision.reason),
            {
                "action": "blocked",
                "hook": PRE_TOOL_USE,
                "tool": TOOL_BASH,
                "target": target,
                "reason": pattern.reason,
                "severity": pattern.level,
                "pattern_id": pattern.id,
            },
        )

    logger.info(
        "Allowed command",
        extra={"fields": {"event": "ALLOWED", "type": "bash", "command": target, "session_id": payload.session_id}},
    )
    return PreToolUseOutcome(
        allow_response(),
        {"action": "allowed", "hook": PRE_TOOL_USE, "tool": TOOL_BASH, "target": target},
    )


def _evaluate_write(payload: HookPayload, engine: PolicyEngine) -> PreToolUseOutcome:
    content = payload.text("content") or payload.text("new_string")
    file_path = payload.text("file_path") or UNKNOWN_FILE_PATH
    event: dict[str, Any] = {"hook": PRE_TOOL_USE, "tool": payload.tool_name, "target": file_path}

    decision = engine.decide_write(content, file_path)
    if decision.outcome == "deny" and decision.reason is not None:
        _log_write(decision, file_path, payload, event="BLOCKED")
        event.update(
            action="blocked",
            reason=f"{len(decision.blockable)} security issue(s) detected",
            severity=decision.blockable[0].severity,
            findings=tuple(
                {
                    "rule": finding.rule,
                    "severity": finding.severity,
                    "line": finding.line,
                    "description": finding.description,
                }
                for finding in decision.blockable[:EVENT_FINDINGS_LIMIT]
            ),
        )
        return PreToolUseOutcome(deny_response(decision.reason), event)

    _log_write(decision, file_path, payload, event="ALLOWED")
    if decision.outcome == "warn":
        event.update(
            action="warning",
            findings=tuple(
                {"rule": finding.rule, "severity": finding.severity, "line": finding.line}
                for finding in decision.findings[:WARNING_FINDINGS_LIMIT]
            ),
        )
    else:
        event["action"] = "allowed"
    return PreToolUseOutcome(allow_response(), event)


def _log_write(decision: Decision, file_path: str, payload: HookPayload, *, event: str) -> None:
    fields: JsonObject = {
        "event": event,
        "type": "write",
        "file": file_path,
        "total_findings": len(decision.findings),
        "session_id": payload.session_id,
    }
    if decision.blockable:
        fields["findings"] = [
            {"rule": finding.rule, "severity": finding.severity, "line": finding.line} for finding in decision.blockable
        ]
    logger.info("%s write to %s", event.capitalize(), file_path, extra={"fields": fields})


def _target_for(payload: HookPayload) -> str:
    if payload.tool_name == TOOL_BASH:
        return payload.text("command")
    return payload.text("file_path") or UNKNOWN_FILE_PATH


def main(config: GuardConfig, stdin: BinaryIO | TextIO | None = None, stdout: TextIO | None = None) -> int:
    """Read one payload from ``stdin``, write the decision to ``stdout``, then record it."""
    stdin = stdin or sys.stdin.buffer
    stdout = stdout or sys.stdout
    with diagnostics_log(PRE_HOOK_LOG_NAME, config.log_dir):
        outcome = evaluate_pre_tool_use(stdin.read(), config)
        write_response(outcome.response, stdout)
        _record(outcome, ActivityLog.from_config(config))
    return 0

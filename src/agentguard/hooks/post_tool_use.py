"""PostToolUse adapter: scan a file after the agent wrote it.

This hook only observes. It always answers with an empty response.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import BinaryIO, TextIO

from agentguard.config import GuardConfig
from agentguard.constants.hooks import EVENT_FINDINGS_LIMIT, POST_HOOK_LOG_NAME, POST_TOOL_USE, WRITE_TOOLS
from agentguard.constants.severity import MAX_SCORE
from agentguard.hooks.diagnostics import diagnostics_log
from agentguard.hooks.payload import parse_payload
from agentguard.hooks.recording import record_event
from agentguard.hooks.response import allow_response, write_response
from agentguard.scanner.orchestrator import scan_target
from agentguard.store import ActivityLog, ResultStore
from agentguard.types import JsonObject

logger = logging.getLogger(__name__)


def handle_post_tool_use(
    raw: str | bytes,
    config: GuardConfig,
    *,
    activity: ActivityLog | None = None,
    results: ResultStore | None = None,
) -> JsonObject:
    """Scan the written file, record the outcome, and return an empty response."""
    activity = activity or ActivityLog.from_config(config)
    try:
        payload = parse_payload(raw)
        if payload.tool_name not in WRITE_TOOLS:
            return allow_response()
        file_path = payload.text("file_path")
        if not file_path:
            return allow_response()

        base = Path(payload.cwd) if payload.cwd else Path.cwd()
        resolved = Path(file_path) if Path(file_path).is_absolute() else base / file_path
        result = scan_target(resolved, config=config, base_path=base, store=results)

        if result.total_findings > 0:
            logger.info(
                "Findings in %s",
                file_path,
                extra={
                    "fields": {
                        "event": "FINDINGS",
                        "file": file_path,
                        "score": result.score,
                        "total": result.total_findings,
                        "severity_counts": result.severity_counts,
                        "session_id": payload.session_id,
                    }
                },
            )
            record_event(
                activity,
                action="findings",
                hook=POST_TOOL_USE,
                tool=payload.tool_name,
                target=file_path,
                score=result.score,
                total_findings=result.total_findings,
                severity_counts=dict(result.severity_counts),
                findings=tuple(
                    {
                        "rule": finding.rule,
                        "severity": finding.severity,
                        "line": finding.line,
                        "description": finding.description,
                    }
                    for finding in result.findings[:EVENT_FINDINGS_LIMIT]
                ),
            )
        else:
            logger.info(
                "Clean scan of %s",
                file_path,
                extra={"fields": {"event": "CLEAN", "file": file_path, "session_id": payload.session_id}},
            )
            record_event(
                activity,
                action="allowed",
                hook=POST_TOOL_USE,
                tool=payload.tool_name,
                target=file_path,
                score=MAX_SCORE,
            )
    except Exception as exc:
        logger.error("PostToolUse hook failed: %s", exc, exc_info=True, extra={"fields": {"event": "ERROR"}})
    return allow_response()


def main(config: GuardConfig, stdin: BinaryIO | TextIO | None = None, stdout: TextIO | None = None) -> int:
    """Read one payload from ``stdin`` and acknowledge on ``stdout``."""
    stdin = stdin or sys.stdin.buffer
    stdout = stdout or sys.stdout
    with diagnostics_log(POST_HOOK_LOG_NAME, config.log_dir):
        response = handle_post_tool_use(stdin.read(), config)
    write_response(response, stdout)
    return 0

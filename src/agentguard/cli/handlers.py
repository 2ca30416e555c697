"""CLI subcommand handlers."""

from __future__ import annotations

import json
import sys
from pathlib import Path

from agentguard.config import GuardConfig
from agentguard.constants.reporting import NO_RESULTS_MESSAGE
from agentguard.exceptions import AgentGuardError, ScanTargetError
from agentguard.hooks import post_tool_use, pre_tool_use
from agentguard.model import ScanResult
from agentguard.reporting import StdoutReporter
from agentguard.scanner.orchestrator import scan_target
from agentguard.store import ActivityLog, ResultStore
from agentguard.types import JsonValue


def _print_json(payload: JsonValue) -> None:
    print(json.dumps(payload, indent=2))


def scan_exit_code(result: ScanResult) -> int:
    """Return 1 when the result holds any critical finding, 0 otherwise."""
    return 1 if result.severity_counts.get("critical", 0) > 0 else 0


def handle_scan(path: Path, config: GuardConfig, *, as_json: bool, dry_run: bool, color: bool) -> int:
    """Scan ``path`` and print the report."""
    print(f"Scanning: {path.resolve()}", file=sys.stderr)
    try:
        result = scan_target(path, config=config, dry_run=dry_run)
    except ScanTargetError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 2
    except AgentGuardError as exc:
        print(f"Scanner error: {exc}", file=sys.stderr)
        return 2

    if as_json:
        _print_json(result.to_dict())
    else:
        print(StdoutReporter(result, color=color).render())
    for warning in result.warnings:
        print(f"Warning: {warning}", file=sys.stderr)
    return scan_exit_code(result)


def handle_results(config: GuardConfig) -> int:
    latest = ResultStore.from_config(config).latest()
    if latest is None:
        print(NO_RESULTS_MESSAGE)
        return 0
    _print_json(latest)
    return 0


def handle_summary(config: GuardConfig) -> int:
    _print_json(ResultStore.from_config(config).summary())
    return 0


def handle_activity(config: GuardConfig, *, limit: int) -> int:
    _print_json(ActivityLog.from_config(config).recent(limit))
    return 0


def handle_stats(config: GuardConfig) -> int:
    _print_json(ActivityLog.from_config(config).stats())
    return 0


def handle_hook(event: str, config: GuardConfig) -> int:
    """Run one hook adapter against the process stdin and stdout."""
    if event == "pre-tool-use":
        return pre_tool_use.main(config)
    return post_tool_use.main(config)

"""Tests for JSON Schema validation of persisted documents."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import jsonschema
import pytest

from agentguard.config import GuardConfig
from agentguard.hooks import handle_post_tool_use, handle_pre_tool_use
from agentguard.scanner import scan_target
from agentguard.store import ActivityLog, ResultStore

SCHEMAS_DIR: Path = Path(__file__).resolve().parents[2] / "schemas"
SCAN_RESULT_SCHEMA_PATH: Path = SCHEMAS_DIR / "scan-result.schema.json"
ACTIVITY_EVENT_SCHEMA_PATH: Path = SCHEMAS_DIR / "activity-event.schema.json"


def _load_schema(path: Path) -> dict[str, Any]:
    """Load a JSON Schema file from disk."""
    return json.loads(path.read_text(encoding="utf-8"))


@pytest.fixture()
def scan_result_schema() -> dict[str, Any]:
    return _load_schema(SCAN_RESULT_SCHEMA_PATH)


@pytest.fixture()
def activity_event_schema() -> dict[str, Any]:
    return _load_schema(ACTIVITY_EVENT_SCHEMA_PATH)


def test_schemas_are_valid_json_schema(
    scan_result_schema: dict[str, Any],
    activity_event_schema: dict[str, Any],
) -> None:
    jsonschema.Draft202012Validator.check_schema(scan_result_schema)
    jsonschema.Draft202012Validator.check_schema(activity_event_schema)


def test_persisted_scan_results_validate(
    vulnerable_repo_root: Path,
    clean_repo_root: Path,
    guard_config: GuardConfig,
    scan_result_schema: dict[str, Any],
) -> None:
    scan_target(vulnerable_repo_root, config=guard_config, base_path=vulnerable_repo_root)
    scan_target(clean_repo_root, config=guard_config, base_path=clean_repo_root)

    stored = ResultStore.from_config(guard_config).read_all()

    assert len(stored) == 2
    for entry in stored:
        jsonschema.validate(instance=entry, schema=scan_result_schema)


def test_persisted_activity_events_validate(
    tmp_path: Path,
    guard_config: GuardConfig,
    activity_event_schema: dict[str, Any],
) -> None:
    (tmp_path / "app.js").write_text("eval(x);\n", encoding="utf-8")
    payloads = [
        {"tool_name": "Bash", "tool_input": {"command": "rm -rf /"}},
        {"tool_name": "Bash", "tool_input": {"command": "ls"}},
        {"tool_name": "Write", "tool_input": {"file_path": "a.js", "content": "eval(x);"}},
        {"tool_name": "Write", "tool_input": {"file_path": "b.js", "content": 'const ip = "10.1.2.3";'}},
    ]
    for payload in payloads:
        handle_pre_tool_use(json.dumps(payload), guard_config)
    handle_post_tool_use(
        json.dumps({"tool_name": "Write", "tool_input": {"file_path": "app.js"}, "cwd": str(tmp_path)}),
        guard_config,
    )

    events = ActivityLog.from_config(guard_config).read_all()

    assert [event["action"] for event in events] == ["blocked", "allowed", "blocked", "warning", "findings"]
    for event in events:
        jsonschema.validate(instance=event, schema=activity_event_schema)

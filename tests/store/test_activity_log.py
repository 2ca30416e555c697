"""Tests for the activity event log."""

from __future__ import annotations

from agentguard.config import GuardConfig
from agentguard.store import ActivityLog


def _log(config: GuardConfig) -> ActivityLog:
    return ActivityLog.from_config(config)


def test_record_stamps_id_and_timestamp(guard_config: GuardConfig) -> None:
    event = _log(guard_config).record(action="allowed", hook="PreToolUse", tool="Bash", target="ls")

    assert event.id.startswith("evt_")
    assert event.timestamp.endswith("Z")
    assert _log(guard_config).read_all() == [event.to_dict()]


def test_optional_fields_are_omitted(guard_config: GuardConfig) -> None:
    event = _log(guard_config).record(action="allowed", hook="PreToolUse", tool="Write", target="a.js")

    assert set(event.to_dict()) == {"id", "timestamp", "action", "hook", "tool", "target"}


def test_target_is_truncated(guard_config: GuardConfig) -> None:
    event = _log(guard_config).record(action="allowed", hook="PreToolUse", tool="Bash", target="y" * 500)

    assert len(event.target) == 200


def test_recent_returns_newest_first(guard_config: GuardConfig) -> None:
    log = _log(guard_config)
    for index in range(4):
        log.record(action="allowed", hook="PreToolUse", tool="Bash", target=f"cmd {index}")

    assert [entry["target"] for entry in log.recent(2)] == ["cmd 3", "cmd 2"]
    assert log.recent(0) == []


def test_event_log_is_bounded(guard_config: GuardConfig) -> None:
    log = _log(guard_config)
    for index in range(guard_config.max_events + 1):
        log.record(action="allowed", hook="PreToolUse", tool="Bash", target=f"cmd {index}")

    targets = [entry["target"] for entry in log.read_all()]

    assert len(targets) == guard_config.max_events
    assert targets[0] == "cmd 1"


def test_stats_aggregate_by_action_tool_and_hook(guard_config: GuardConfig) -> None:
    log = _log(guard_config)
    log.record(action="blocked", hook="PreToolUse", tool="Bash", target="rm -rf /", pattern_id="rm-root")
    log.record(action="allowed", hook="PreToolUse", tool="Write", target="a.js")
    log.record(action="warning", hook="PreToolUse", tool="Edit", target="b.js")
    log.record(action="findings", hook="PostToolUse", tool="Write", target="a.js", score=75)
    log.record(action="blocked", hook="PreToolUse", tool="Write", target="c.js")

    stats = log.stats()

    assert stats["total"] == 5
    assert stats["blocked"] == 2
    assert stats["allowed"] == 1
    assert stats["warnings"] == 1
    assert stats["by_tool"] == {"Bash": 1, "Write": 3, "Edit": 1}
    assert stats["by_hook"] == {"PreToolUse": 4, "PostToolUse": 1}
    assert [entry["target"] for entry in stats["recent_blocked"]] == ["c.js", "rm -rf /"]

"""Bounded audit log of hook decisions."""

from __future__ import annotations

from collections import Counter

from agentguard.config import GuardConfig
from agentguard.constants.hooks import TARGET_MAX_LENGTH
from agentguard.constants.store import EVENT_ID_PREFIX, RECENT_BLOCKED_LIMIT, RECENT_EVENTS_DEFAULT_LIMIT
from agentguard.model import ActivityEvent
from agentguard.store.json_store import JsonListStore
from agentguard.types import EventAction, HookName, JsonObject, Severity
from agentguard.utils import new_record_id, utc_timestamp


class ActivityLog:
    """Append-only history of activity events, oldest evicted first."""

    def __init__(self, store: JsonListStore) -> None:
        self._store = store

    @classmethod
    def from_config(cls, config: GuardConfig) -> ActivityLog:
        return cls(JsonListStore(config.events_path, config.max_events))

    def record(
        self,
        *,
        action: EventAction,
        hook: HookName,
        tool: str,
        target: str,
        reason: str | None = None,
        severity: str | None = None,
        pattern_id: str | None = None,
        score: int | None = None,
        total_findings: int | None = None,
        severity_counts: dict[Severity, int] | None = None,
        findings: tuple[JsonObject, ...] | None = None,
    ) -> ActivityEvent:
        """Stamp a new event with an id and timestamp and append it."""
        event = ActivityEvent(
            id=new_record_id(EVENT_ID_PREFIX),
            timestamp=utc_timestamp(),
            action=action,
            hook=hook,
            tool=tool,
            target=target[:TARGET_MAX_LENGTH],
            reason=reason,
            severity=severity,
            pattern_id=pattern_id,
            score=score,
            total_findings=total_findings,
            severity_counts=severity_counts,
            findings=findings,
        )
        self._store.append(event.to_dict())
        return event

    def read_all(self) -> list[JsonObject]:
        return self._store.read_all()

    def recent(self, limit: int = RECENT_EVENTS_DEFAULT_LIMIT) -> list[JsonObject]:
        """Return up to ``limit`` events, most recent first."""
        if limit <= 0:
            return []
        return list(reversed(self.read_all()[-limit:]))

    def stats(self) -> JsonObject:
        """Count events by action, tool, and hook, plus the latest blocked events."""
        entries = self.read_all()
        actions = Counter(entry.get("action") for entry in entries)
        by_tool = Counter(str(entry.get("tool")) for entry in entries)
        by_hook = Counter(str(entry.get("hook")) for entry in entries)
        blocked = [entry for entry in entries if entry.get("action") == "blocked"]
        return {
            "total": len(entries),
            "blocked": actions.get("blocked", 0),
            "allowed": actions.get("allowed", 0),
            "warnings": actions.get("warning", 0),
            "by_tool": dict(by_tool),
            "by_hook": dict(by_hook),
            "recent_blocked": list(reversed(blocked[-RECENT_BLOCKED_LIMIT:])),
        }

"""Frozen record types produced by matchers, scans, and hooks."""

from __future__ import annotations

from dataclasses import dataclass, field

from agentguard.types import Category, EventAction, HookName, JsonObject, Severity


@dataclass(frozen=True)
class Finding:
    """A single rule match with its source location."""

    category: Category
    rule: str
    severity: Severity
    file: str
    line: int
    column: int
    description: str
    snippet: str

    def to_dict(self) -> JsonObject:
        """Serialize finding to a JSON-compatible dictionary."""
        return {
            "category": self.category,
            "rule": self.rule,
            "severity": self.severity,
            "file": self.file,
            "line": self.line,
            "column": self.column,
            "description": self.description,
            "snippet": self.snippet,
        }

    def location_key(self) -> tuple[str, str, int, int]:
        """Return the identity of this finding independent of scan metadata."""
        return (self.category, self.rule, self.line, self.column)


@dataclass(frozen=True)
class ScanResult:
    """Immutable outcome of one file or directory scan."""

    id: str
    timestamp: str
    target_path: str
    file_list: tuple[str, ...]
    score: int
    severity_counts: dict[Severity, int]
    total_findings: int
    findings: tuple[Finding, ...]
    category_counts: dict[str, int]
    duration_seconds: float = 0.0
    warnings: tuple[str, ...] = ()

    @property
    def files_scanned(self) -> int:
        return len(self.file_list)

    def to_dict(self) -> JsonObject:
        """Serialize scan result to a JSON-compatible dictionary."""
        return {
            "id": self.id,
            "timestamp": self.timestamp,
            "target_path": self.target_path,
            "files_scanned": self.files_scanned,
            "file_list": list(self.file_list),
            "score": self.score,
            "severity_counts": dict(self.severity_counts),
            "total_findings": self.total_findings,
            "findings": [finding.to_dict() for finding in self.findings],
            "category_counts": dict(self.category_counts),
            "duration_seconds": round(self.duration_seconds, 3),
            "warnings": list(self.warnings),
        }


@dataclass(frozen=True)
class ActivityEvent:
    """Audit record of one hook outcome.

    Optional fields left as ``None`` are omitted from the serialized form.
    """

    id: str
    timestamp: str
    action: EventAction
    hook: HookName
    tool: str
    target: str
    reason: str | None = None
    severity: str | None = None
    pattern_id: str | None = None
    score: int | None = None
    total_findings: int | None = None
    severity_counts: dict[Severity, int] | None = None
    findings: tuple[JsonObject, ...] | None = field(default=None)

    def to_dict(self) -> JsonObject:
        """Serialize event to a JSON-compatible dictionary."""
        payload: JsonObject = {
            "id": self.id,
            "timestamp": self.timestamp,
            "action": self.action,
            "hook": self.hook,
            "tool": self.tool,
            "target": self.target,
        }
        optional: JsonObject = {
            "reason": self.reason,
            "severity": self.severity,
            "pattern_id": self.pattern_id,
            "score": self.score,
            "total_findings": self.total_findings,
            "severity_counts": dict(self.severity_counts) if self.severity_counts is not None else None,
            "findings": list(self.findings) if self.findings is not None else None,
        }
        payload.update({key: value for key, value in optional.items() if value is not None})
        return payload

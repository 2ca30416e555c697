"""Cross-module type aliases."""

from __future__ import annotations

from typing import Literal, TypeAlias

Severity: TypeAlias = Literal["critical", "high", "medium", "low"]
SafetyLevel: TypeAlias = Literal["critical", "high", "strict"]
Category: TypeAlias = Literal["Secrets", "OWASP", "Dependencies", "Code Patterns", "Commands"]
EventAction: TypeAlias = Literal["blocked", "allowed", "warning", "findings", "error"]
HookName: TypeAlias = Literal["PreToolUse", "PostToolUse"]
Outcome: TypeAlias = Literal["allow", "warn", "deny"]

JsonScalar: TypeAlias = str | int | float | bool | None
JsonValue: TypeAlias = JsonScalar | list["JsonValue"] | dict[str, "JsonValue"]
JsonObject: TypeAlias = dict[str, JsonValue]

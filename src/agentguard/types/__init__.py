"""Shared type aliases for AgentGuard."""

from .common import (
    Category,
    EventAction,
    HookName,
    JsonObject,
    JsonScalar,
    JsonValue,
    Outcome,
    SafetyLevel,
    Severity,
)

__all__ = [
    "Category",
    "EventAction",
    "HookName",
    "JsonObject",
    "JsonScalar",
    "JsonValue",
    "Outcome",
    "SafetyLevel",
    "Severity",
]

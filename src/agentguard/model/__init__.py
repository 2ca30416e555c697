"""Core data models for AgentGuard."""

from .entities import ActivityEvent, Finding, ScanResult

__all__ = ["ActivityEvent", "Finding", "ScanResult"]

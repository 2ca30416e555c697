"""Scan-related exceptions."""

from __future__ import annotations

from agentguard.exceptions.base import AgentGuardError


class ScanTargetError(AgentGuardError, FileNotFoundError):
    """Raised when a scan target does not exist."""

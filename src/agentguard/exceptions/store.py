"""Persistence-related exceptions."""

from __future__ import annotations

from agentguard.exceptions.base import AgentGuardError


class StoreError(AgentGuardError, OSError):
    """Raised when a result or activity store cannot be written."""

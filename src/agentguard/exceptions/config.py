"""Configuration-related exceptions."""

from __future__ import annotations

from agentguard.exceptions.base import AgentGuardError


class ConfigError(AgentGuardError, ValueError):
    """Raised when guard configuration is invalid."""

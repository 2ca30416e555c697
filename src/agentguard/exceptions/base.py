"""Base exception for AgentGuard."""

from __future__ import annotations


class AgentGuardError(Exception):
    """Base class for all AgentGuard errors."""

"""Hook protocol exceptions."""

from __future__ import annotations

from agentguard.exceptions.base import AgentGuardError


class HookInputError(AgentGuardError, ValueError):
    """Raised when a hook invocation payload is malformed."""

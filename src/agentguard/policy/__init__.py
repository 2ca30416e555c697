"""Policy decision engine."""

from .engine import ALLOW, Decision, PolicyEngine
from .formatting import format_command_reason, format_write_reason

__all__ = ["ALLOW", "Decision", "PolicyEngine", "format_command_reason", "format_write_reason"]

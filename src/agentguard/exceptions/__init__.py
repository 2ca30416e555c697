"""Shared exception hierarchy for AgentGuard."""

from __future__ import annotations

from .base import AgentGuardError
from .config import ConfigError
from .hooks import HookInputError
from .scanning import ScanTargetError
from .store import StoreError

__all__ = [
    "AgentGuardError",
    "ConfigError",
    "HookInputError",
    "ScanTargetError",
    "StoreError",
]

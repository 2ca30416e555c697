"""Configuration loading and validation for AgentGuard."""

from __future__ import annotations

from agentguard.config.loader import load_config, resolve_config_path
from agentguard.config.model import GuardConfig

__all__ = ["GuardConfig", "load_config", "resolve_config_path"]

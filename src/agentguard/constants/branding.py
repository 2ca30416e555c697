"""Branding constants for terminal output."""

from __future__ import annotations

BRAND_NAME: str = "AGENTGUARD"
CLI_DESCRIPTION: str = f"{BRAND_NAME} policy guard for AI coding agent tool calls"

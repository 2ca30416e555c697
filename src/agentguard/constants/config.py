"""Configuration defaults and filenames."""

from __future__ import annotations

from pathlib import Path

CONFIG_FILENAME: str = "agentguard.yaml"
CONFIG_ENV_VAR: str = "AGENTGUARD_CONFIG"

DEFAULT_DATA_DIR: Path = Path.home() / ".agentguard" / "data"
DEFAULT_LOG_DIR: Path = Path.home() / ".claude" / "hooks-logs"

CONFIG_ALLOWED_KEYS: frozenset[str] = frozenset(
    {"safety_level", "data_dir", "max_results", "max_events", "log_dir", "max_workers"}
)

"""Config loading and normalization for AgentGuard."""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from agentguard.config.model import GuardConfig
from agentguard.constants.config import (
    CONFIG_ALLOWED_KEYS,
    CONFIG_ENV_VAR,
    CONFIG_FILENAME,
    DEFAULT_DATA_DIR,
    DEFAULT_LOG_DIR,
)
from agentguard.constants.severity import DEFAULT_SAFETY_LEVEL, SAFETY_LEVELS
from agentguard.constants.store import DEFAULT_MAX_EVENTS, DEFAULT_MAX_RESULTS
from agentguard.exceptions import ConfigError


def resolve_config_path(
    config_path: Path | None = None,
    *,
    cwd: Path | None = None,
    environ: Mapping[str, str] | None = None,
) -> Path | None:
    """Pick the config file: explicit path, then ``AGENTGUARD_CONFIG``, then ``<cwd>/agentguard.yaml``.

    Explicit and environment paths must exist; the working-directory file is optional.
    """
    environ = os.environ if environ is None else environ
    if config_path is not None:
        path = config_path.expanduser().resolve()
        if not path.is_file():
            raise ConfigError(f"Config file not found: {path}")
        return path

    env_value = environ.get(CONFIG_ENV_VAR, "").strip()
    if env_value:
        path = Path(env_value).expanduser().resolve()
        if not path.is_file():
            raise ConfigError(f"Config file from {CONFIG_ENV_VAR} not found: {path}")
        return path

    candidate = (cwd or Path.cwd()) / CONFIG_FILENAME
    return candidate.resolve() if candidate.is_file() else None


def load_config(
    config_path: Path | None = None,
    *,
    cwd: Path | None = None,
    environ: Mapping[str, str] | None = None,
) -> GuardConfig:
    """Load and validate guard config, falling back to defaults when no file is found."""
    path = resolve_config_path(config_path, cwd=cwd, environ=environ)
    if path is None:
        return GuardConfig()

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML config file at {path}: {exc}") from exc
    except OSError as exc:
        raise ConfigError(f"Cannot read config file at {path}: {exc}") from exc

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigError(f"Config file at {path} must be a YAML mapping")

    unknown = sorted(str(key) for key in raw if key not in CONFIG_ALLOWED_KEYS)
    if unknown:
        raise ConfigError(f"Unknown config key(s): {', '.join(unknown)}")

    safety_level = raw.get("safety_level", DEFAULT_SAFETY_LEVEL)
    if not isinstance(safety_level, str) or safety_level not in SAFETY_LEVELS:
        raise ConfigError(f"safety_level must be one of {list(SAFETY_LEVELS)}, got {safety_level!r}")

    max_workers = raw.get("max_workers")
    if max_workers is not None:
        max_workers = _ensure_positive_int(max_workers, "max_workers")

    return GuardConfig(
        safety_level=safety_level,  # type: ignore[arg-type]
        data_dir=_resolve_dir(raw.get("data_dir"), "data_dir", base=path.parent, default=DEFAULT_DATA_DIR),
        max_results=_ensure_positive_int(raw.get("max_results", DEFAULT_MAX_RESULTS), "max_results"),
        max_events=_ensure_positive_int(raw.get("max_events", DEFAULT_MAX_EVENTS), "max_events"),
        log_dir=_resolve_dir(raw.get("log_dir"), "log_dir", base=path.parent, default=DEFAULT_LOG_DIR),
        max_workers=max_workers,
        source=path,
    )


def _ensure_positive_int(value: Any, key_name: str) -> int:
    """Reject booleans, non-integers, and values below 1."""
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise ConfigError(f"{key_name} must be a positive integer")
    return value


def _resolve_dir(value: Any, key_name: str, *, base: Path, default: Path) -> Path:
    """Expand ``~`` and resolve relative directories against the config file location."""
    if value is None:
        return default
    if not isinstance(value, str) or not value.strip():
        raise ConfigError(f"{key_name} must be a non-empty string path")
    path = Path(value.strip()).expanduser()
    return path if path.is_absolute() else (base / path).resolve()

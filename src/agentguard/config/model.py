"""Config data model for AgentGuard."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from agentguard.constants.config import DEFAULT_DATA_DIR, DEFAULT_LOG_DIR
from agentguard.constants.severity import DEFAULT_SAFETY_LEVEL
from agentguard.constants.store import DEFAULT_MAX_EVENTS, DEFAULT_MAX_RESULTS, EVENTS_FILENAME, RESULTS_FILENAME
from agentguard.types import SafetyLevel


@dataclass(frozen=True)
class GuardConfig:
    """Resolved guard config."""

    safety_level: SafetyLevel = DEFAULT_SAFETY_LEVEL
    data_dir: Path = DEFAULT_DATA_DIR
    max_results: int = DEFAULT_MAX_RESULTS
    max_events: int = DEFAULT_MAX_EVENTS
    log_dir: Path = DEFAULT_LOG_DIR
    max_workers: int | None = None
    source: Path | None = None

    @property
    def results_path(self) -> Path:
        return self.data_dir / RESULTS_FILENAME

    @property
    def events_path(self) -> Path:
        return self.data_dir / EVENTS_FILENAME

    @property
    def worker_count(self) -> int:
        """Upper bound on concurrent per-file scans."""
        return self.max_workers if self.max_workers is not None else (os.cpu_count() or 1)

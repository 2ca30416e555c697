"""Scanner orchestration package."""

from __future__ import annotations

from typing import Any

__all__ = ["scan_target"]


def __getattr__(name: str) -> Any:
    """Lazily expose scanner APIs to avoid import cycles at package import time."""
    if name == "scan_target":
        from .orchestrator import scan_target

        return scan_target
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")

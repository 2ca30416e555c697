"""File-level helpers."""

from __future__ import annotations

import logging
from pathlib import Path

logger = logging.getLogger(__name__)


def read_text_or_none(path: Path) -> str | None:
    """Return file text, or None when the file cannot be read."""
    try:
        return path.read_text(encoding="utf-8", errors="replace")
    except OSError as exc:
        logger.debug("Skipping unreadable file %s: %s", path, exc)
        return None

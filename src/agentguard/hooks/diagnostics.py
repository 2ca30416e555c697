"""Best-effort JSON-lines diagnostic log for hook processes.

Hook stdout carries the response contract, so diagnostics go to
``<log_dir>/<YYYY-MM-DD>.jsonl`` instead. Structured fields are passed with
``extra={"fields": {...}}``.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterator
from contextlib import contextmanager
from datetime import UTC, datetime
from pathlib import Path

from agentguard.utils import utc_timestamp

PACKAGE_LOGGER_NAME = "agentguard"


class JsonLinesFormatter(logging.Formatter):
    """Render each record as one JSON object tagged with the hook name."""

    def __init__(self, hook_name: str) -> None:
        super().__init__()
        self.hook_name = hook_name

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, object] = {
            "ts": utc_timestamp(),
            "hook": self.hook_name,
            "level": record.levelname,
            "message": record.getMessage(),
        }
        fields = getattr(record, "fields", None)
        if isinstance(fields, dict):
            payload.update(fields)
        if record.exc_info:
            payload["error"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str)


def diagnostics_path(log_dir: Path) -> Path:
    return log_dir / f"{datetime.now(UTC).date().isoformat()}.jsonl"


@contextmanager
def diagnostics_log(hook_name: str, log_dir: Path) -> Iterator[logging.Handler | None]:
    """Attach a JSON-lines file handler to the package logger for the duration of a hook.

    Yields ``None`` when the log directory cannot be created; the hook still runs.
    """
    try:
        log_dir.mkdir(parents=True, exist_ok=True)
        handler: logging.Handler | None = logging.FileHandler(diagnostics_path(log_dir), encoding="utf-8")
    except OSError:
        handler = None

    if handler is None:
        yield None
        return

    package_logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    previous_level = package_logger.level
    handler.setFormatter(JsonLinesFormatter(hook_name))
    handler.setLevel(logging.INFO)
    package_logger.addHandler(handler)
    if previous_level == logging.NOTSET or previous_level > logging.INFO:
        package_logger.setLevel(logging.INFO)
    try:
        yield handler
    finally:
        package_logger.removeHandler(handler)
        package_logger.setLevel(previous_level)
        handler.close()

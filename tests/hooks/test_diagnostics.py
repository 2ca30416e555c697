"""Tests for the hook diagnostics log."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from agentguard.hooks.diagnostics import diagnostics_log, diagnostics_path

logger = logging.getLogger("agentguard.hooks.test")


def test_records_are_written_as_json_lines(tmp_path: Path) -> None:
    with diagnostics_log("security-scanner-pre", tmp_path) as handler:
        assert handler is not None
        logger.info("Allowed command", extra={"fields": {"event": "ALLOWED", "command": "ls"}})
        logger.debug("not written")

    (line,) = diagnostics_path(tmp_path).read_text(encoding="utf-8").splitlines()
    record = json.loads(line)
    assert record["hook"] == "security-scanner-pre"
    assert record["level"] == "INFO"
    assert record["message"] == "Allowed command"
    assert record["event"] == "ALLOWED"
    assert record["command"] == "ls"
    assert record["ts"].endswith("Z")


def test_handler_is_detached_afterwards(tmp_path: Path) -> None:
    package_logger = logging.getLogger("agentguard")
    before = list(package_logger.handlers)
    level = package_logger.level

    with diagnostics_log("security-scanner-post", tmp_path):
        assert len(package_logger.handlers) == len(before) + 1

    assert package_logger.handlers == before
    assert package_logger.level == level


def test_unusable_log_dir_yields_none(tmp_path: Path) -> None:
    blocker = tmp_path / "blocker"
    blocker.write_text("file", encoding="utf-8")

    with diagnostics_log("security-scanner-pre", blocker / "logs") as handler:
        assert handler is None

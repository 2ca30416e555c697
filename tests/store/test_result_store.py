"""Tests for the scan result history."""

from __future__ import annotations

from agentguard.config import GuardConfig
from agentguard.model import ScanResult
from agentguard.store import ResultStore


def _result(result_id: str, score: int, findings: int = 0) -> ScanResult:
    return ScanResult(
        id=result_id,
        timestamp=f"2026-01-01T00:00:0{result_id[-1]}.000Z",
        target_path=".",
        file_list=("a.js",),
        score=score,
        severity_counts={"critical": 0, "high": 0, "medium": 0, "low": 0},
        total_findings=findings,
        findings=(),
        category_counts={},
    )


def test_empty_summary_reports_perfect_score(guard_config: GuardConfig) -> None:
    summary = ResultStore.from_config(guard_config).summary()

    assert summary == {
        "total_scans": 0,
        "latest_score": 100,
        "latest_findings": 0,
        "latest_timestamp": None,
        "results": [],
    }


def test_latest_and_summary_track_newest_result(guard_config: GuardConfig) -> None:
    store = ResultStore.from_config(guard_config)
    store.append(_result("scan_1", 90))
    store.append(_result("scan_2", 75))

    latest = store.latest()
    summary = store.summary()

    assert latest is not None
    assert latest["id"] == "scan_2"
    assert summary["total_scans"] == 2
    assert summary["latest_score"] == 75
    assert summary["latest_timestamp"] == "2026-01-01T00:00:02.000Z"


def test_history_is_bounded_by_max_results(guard_config: GuardConfig) -> None:
    store = ResultStore.from_config(guard_config)
    for index in range(guard_config.max_results + 2):
        store.append(_result(f"scan_{index}", 100))

    ids = [entry["id"] for entry in store.read_all()]

    assert len(ids) == guard_config.max_results
    assert ids[0] == "scan_2"
    assert ids[-1] == f"scan_{guard_config.max_results + 1}"

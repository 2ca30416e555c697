"""End-to-end scan orchestration for AgentGuard."""

from __future__ import annotations

import logging
import time
from concurrent.futures import ThreadPoolExecutor
from dataclasses import replace
from pathlib import Path

from agentguard.config import GuardConfig
from agentguard.constants.detectors import CONTENT_CATEGORIES
from agentguard.constants.store import SCAN_ID_PREFIX
from agentguard.detectors import Detector, build_detectors
from agentguard.exceptions import StoreError
from agentguard.io import read_text_or_none
from agentguard.model import Finding, ScanResult
from agentguard.scanner.discovery import discover_scan_targets, relative_display_path
from agentguard.scanner.score import category_counts, compute_score, severity_counts
from agentguard.store import ResultStore
from agentguard.utils import new_record_id, utc_timestamp

logger = logging.getLogger(__name__)


def scan_target(
    target: Path,
    *,
    config: GuardConfig | None = None,
    dry_run: bool = False,
    base_path: Path | None = None,
    store: ResultStore | None = None,
) -> ScanResult:
    """Scan a file or directory with every content matcher and record the result.

    Unreadable and empty files are skipped. Findings keep discovery order, then
    matcher order within a file. Unless ``dry_run`` is set the result is appended
    to the result store; a storage failure is reported in ``warnings`` instead
    of raised.
    """
    config = config or GuardConfig()
    base_path = (base_path or Path.cwd()).resolve()
    started_at = time.perf_counter()

    files = discover_scan_targets(target)
    detectors = build_detectors(CONTENT_CATEGORIES)

    def scan_one(path: Path) -> tuple[str, list[Finding]] | None:
        content = read_text_or_none(path)
        if not content:
            return None
        display_path = relative_display_path(path, base_path)
        return display_path, _run_detectors(detectors, content=content, file_path=display_path)

    scanned: list[tuple[str, list[Finding]]] = []
    if files:
        workers = max(1, min(config.worker_count, len(files)))
        with ThreadPoolExecutor(max_workers=workers) as executor:
            scanned = [item for item in executor.map(scan_one, files) if item is not None]

    findings = tuple(finding for _, file_findings in scanned for finding in file_findings)
    result = ScanResult(
        id=new_record_id(SCAN_ID_PREFIX),
        timestamp=utc_timestamp(),
        target_path=relative_display_path(target.resolve(), base_path),
        file_list=tuple(display_path for display_path, _ in scanned),
        score=compute_score(findings),
        severity_counts=severity_counts(findings),
        total_findings=len(findings),
        findings=findings,
        category_counts=category_counts(findings),
        duration_seconds=time.perf_counter() - started_at,
    )
    logger.info(
        "Scanned %d file(s) under %s: %d finding(s), score %d",
        result.files_scanned,
        result.target_path,
        result.total_findings,
        result.score,
    )

    if dry_run:
        return result

    store = store or ResultStore.from_config(config)
    try:
        store.append(result)
    except StoreError as exc:
        warning = f"Scan result was not saved: {exc}"
        logger.warning(warning)
        result = replace(result, warnings=(*result.warnings, warning))
    return result


def _run_detectors(detectors: list[Detector], *, content: str, file_path: str) -> list[Finding]:
    findings: list[Finding] = []
    for detector in detectors:
        findings.extend(detector.run(content=content, file_path=file_path))
    return findings

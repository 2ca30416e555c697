"""Scoring utilities for findings."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable

from agentguard.constants.severity import (
    MAX_SCORE,
    MIN_SCORE,
    SAFETY_LEVEL_RANK,
    SEVERITIES,
    SEVERITY_RANK,
    SEVERITY_WEIGHTS,
)
from agentguard.model import Finding
from agentguard.types import SafetyLevel, Severity


def compute_score(findings: Iterable[Finding]) -> int:
    """Return ``100 - sum(weights)`` clamped to the 0-100 range.

    Unknown severities carry no penalty.
    """
    penalty = sum(SEVERITY_WEIGHTS.get(finding.severity, 0) for finding in findings)
    return max(MIN_SCORE, min(MAX_SCORE, MAX_SCORE - penalty))


def severity_counts(findings: Iterable[Finding]) -> dict[Severity, int]:
    """Count findings by severity with stable keys."""
    counts = Counter(finding.severity for finding in findings)
    return {severity: int(counts.get(severity, 0)) for severity in SEVERITIES}


def category_counts(findings: Iterable[Finding]) -> dict[str, int]:
    """Group findings by category."""
    return dict(Counter(finding.category for finding in findings))


def is_blocking(severity: str, safety_level: SafetyLevel) -> bool:
    """Return True when ``severity`` ranks at or above the level's threshold."""
    rank = SEVERITY_RANK.get(severity)
    if rank is None:
        return False
    return rank <= SAFETY_LEVEL_RANK[safety_level]

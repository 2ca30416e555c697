"""Severity weights, ranks, and safety-level thresholds.

Penalty weights feed the 0-100 score only. Ranks are compared against a
safety level's rank to decide blocking. The two numeric spaces are unrelated.
"""

from __future__ import annotations

from agentguard.types import SafetyLevel, Severity

SEVERITIES: tuple[Severity, ...] = ("critical", "high", "medium", "low")

SEVERITY_WEIGHTS: dict[str, int] = {
    "critical": 25,
    "high": 10,
    "medium": 3,
    "low": 1,
}

SEVERITY_RANK: dict[str, int] = {
    "critical": 1,
    "high": 2,
    "medium": 3,
    "low": 4,
}

SAFETY_LEVELS: tuple[SafetyLevel, ...] = ("critical", "high", "strict")
DEFAULT_SAFETY_LEVEL: SafetyLevel = "high"

# strict sits beyond every severity rank so it blocks all of them.
SAFETY_LEVEL_RANK: dict[str, int] = {
    "critical": 1,
    "high": 2,
    "strict": 4,
}

# Command-pattern level -> finding severity when commands are reported as findings.
COMMAND_LEVEL_SEVERITY: dict[str, Severity] = {
    "critical": "critical",
    "high": "high",
    "strict": "medium",
}

MAX_SCORE: int = 100
MIN_SCORE: int = 0

"""Constants for stdout report formatting."""

from __future__ import annotations

REPORT_TITLE: str = "SECURITY SCAN REPORT"
REPORT_RULE_WIDTH: int = 60

GOOD_SCORE_MIN: int = 80
FAIR_SCORE_MIN: int = 50

# ANSI escape codes for terminal colouring.
ANSI_RESET: str = "\033[0m"
ANSI_RED: str = "\033[31m"
ANSI_YELLOW: str = "\033[33m"
ANSI_GREEN: str = "\033[32m"
ANSI_CYAN: str = "\033[36m"
ANSI_WHITE: str = "\033[37m"

SEVERITY_COLORS: dict[str, str] = {
    "critical": ANSI_RED,
    "high": ANSI_YELLOW,
    "medium": ANSI_CYAN,
    "low": ANSI_WHITE,
}

NO_RESULTS_MESSAGE: str = "No scan results found. Run a scan first."

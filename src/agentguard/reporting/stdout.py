"""Human-readable stdout reporter for scan results."""

from __future__ import annotations

from agentguard.constants.reporting import (
    ANSI_GREEN,
    ANSI_RED,
    ANSI_RESET,
    ANSI_YELLOW,
    FAIR_SCORE_MIN,
    GOOD_SCORE_MIN,
    REPORT_RULE_WIDTH,
    REPORT_TITLE,
    SEVERITY_COLORS,
)
from agentguard.constants.severity import MAX_SCORE, SEVERITIES
from agentguard.model import Finding, ScanResult


def _colorize(text: str, color: str) -> str:
    return f"{color}{text}{ANSI_RESET}"


def _score_color(score: int) -> str:
    if score >= GOOD_SCORE_MIN:
        return ANSI_GREEN
    if score >= FAIR_SCORE_MIN:
        return ANSI_YELLOW
    return ANSI_RED


class StdoutReporter:
    """Formats a scan result as a terminal report."""

    def __init__(self, result: ScanResult, *, color: bool = True) -> None:
        self._result = result
        self._color = color

    def render(self) -> str:
        """Render the full report as a single string."""
        sections = [self._render_header()]
        if self._result.findings:
            sections.append(self._render_findings())
        if self._result.warnings:
            sections.append("\n".join(f"  warning: {warning}" for warning in self._result.warnings))
        return "\n".join(sections)

    def _paint(self, text: str, color: str) -> str:
        return _colorize(text, color) if self._color and color else text

    def _render_header(self) -> str:
        r = self._result
        rule = "=" * REPORT_RULE_WIDTH
        score = self._paint(f"{r.score}/{MAX_SCORE}", _score_color(r.score))
        lines = [
            "",
            rule,
            f"  {REPORT_TITLE}",
            rule,
            f"  Score:    {score}",
            f"  Files:    {r.files_scanned} scanned",
            f"  Findings: {r.total_findings} total",
            "",
        ]
        for severity in SEVERITIES:
            label = f"{severity.capitalize() + ':':<10}{r.severity_counts.get(severity, 0)}"
            lines.append(f"  {self._paint(label, SEVERITY_COLORS.get(severity, ''))}")
        lines.append(rule)
        return "\n".join(lines)

    def _render_findings(self) -> str:
        lines = ["", "Findings:", ""]
        for finding in self._result.findings:
            lines.extend(self._render_finding(finding))
        return "\n".join(lines)

    def _render_finding(self, finding: Finding) -> list[str]:
        tag = self._paint(f"[{finding.severity.upper()}]", SEVERITY_COLORS.get(finding.severity, ""))
        return [
            f"  {tag} {finding.rule}",
            f"    File: {finding.file}:{finding.line}",
            f"    {finding.description}",
            f"    > {finding.snippet}",
            "",
        ]

"""Shared helpers for detector implementations."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator

from agentguard.constants.detectors import SNIPPET_MAX_LENGTH
from agentguard.model import Finding
from agentguard.rules import Rule
from agentguard.types import Category


def snippet(text: str) -> str:
    """Return stripped ``text`` truncated for display."""
    return text.strip()[:SNIPPET_MAX_LENGTH]


def numbered_lines(content: str) -> Iterator[tuple[int, str]]:
    """Yield ``(line_number, line)`` for every physical line, 1-based."""
    return enumerate(content.split("\n"), start=1)


def line_number_at(content: str, offset: int) -> int:
    """Return the 1-based line number containing character ``offset``."""
    return content.count("\n", 0, offset) + 1


def match_rules(
    rules: Iterable[Rule],
    *,
    category: Category,
    content: str,
    file_path: str,
    skip_line: Callable[[str], bool] | None = None,
) -> list[Finding]:
    """Apply ``rules`` to ``content`` and collect findings in rule order.

    Per-line rules report the line and 1-based column of each match.
    Multiline rules run over the whole content and report column 1.
    """
    findings: list[Finding] = []
    lines = list(numbered_lines(content))

    for rule in rules:
        if rule.multiline:
            for match in rule.pattern.finditer(content):
                findings.append(
                    Finding(
                        category=category,
                        rule=rule.name,
                        severity=rule.severity,
                        file=file_path,
                        line=line_number_at(content, match.start()),
                        column=1,
                        description=rule.description,
                        snippet=snippet(match.group(0)),
                    )
                )
            continue

        for line_number, line in lines:
            if skip_line is not None and skip_line(line):
                continue
            for match in rule.pattern.finditer(line):
                if not rule.accepts(line, match.group(0)):
                    continue
                findings.append(
                    Finding(
                        category=category,
                        rule=rule.name,
                        severity=rule.severity,
                        file=file_path,
                        line=line_number,
                        column=match.start() + 1,
                        description=rule.description,
                        snippet=snippet(line),
                    )
                )

    return findings

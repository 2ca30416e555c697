"""Immutable rule records shared by every catalog."""

from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass
from typing import TypeAlias

from agentguard.types import SafetyLevel, Severity

TextPredicate: TypeAlias = Callable[[str], bool]


@dataclass(frozen=True)
class Rule:
    """A single lexical detection rule.

    ``context`` is evaluated against the whole physical line and must return
    True for a match to count. ``exclude`` is evaluated against the matched
    text and drops the match when it returns True. ``multiline`` rules are run
    against the entire content instead of line by line.
    """

    name: str
    pattern: re.Pattern[str]
    severity: Severity
    description: str
    context: TextPredicate | None = None
    exclude: TextPredicate | None = None
    multiline: bool = False

    def accepts(self, line: str, matched: str) -> bool:
        """Return True when optional predicates keep a raw regex match."""
        if self.context is not None and not self.context(line):
            return False
        if self.exclude is not None and self.exclude(matched):
            return False
        return True


@dataclass(frozen=True)
class DependencyAdvisory:
    """Known-vulnerable package entry: versions strictly below ``below`` are flagged."""

    package: str
    below: str
    severity: Severity
    advisory: str


@dataclass(frozen=True)
class CommandPattern:
    """Dangerous shell-command pattern tagged with the safety level that blocks it."""

    level: SafetyLevel
    id: str
    regex: re.Pattern[str]
    reason: str


def mentions(pattern: re.Pattern[str]) -> TextPredicate:
    """Build a predicate that is True when ``pattern`` occurs anywhere in the text."""

    def _predicate(text: str) -> bool:
        return pattern.search(text) is not None

    return _predicate

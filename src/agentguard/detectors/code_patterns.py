"""Unsafe code idiom matcher."""

from __future__ import annotations

from agentguard.constants.detectors import (
    CATEGORY_CODE_PATTERNS,
    CODE_PATTERN_SKIPPED_SUFFIXES,
    COMMENT_LINE_PREFIXES,
)
from agentguard.detectors.base import Detector
from agentguard.detectors.common import match_rules
from agentguard.model import Finding
from agentguard.rules import CODE_PATTERN_RULES


def is_comment_line(line: str) -> bool:
    """Return True for lines whose first non-blank text is a comment marker."""
    return line.strip().startswith(COMMENT_LINE_PREFIXES)


def is_source_file(file_path: str) -> bool:
    """Return False for manifests, docs, and plain text."""
    return not file_path.endswith(CODE_PATTERN_SKIPPED_SUFFIXES)


class CodePatternDetector(Detector):
    """Detect eval, weak hashing, disabled TLS, and similar unsafe constructs.

    Non-source files are skipped entirely and comment lines are ignored.
    """

    category = CATEGORY_CODE_PATTERNS

    def run(self, *, content: str, file_path: str) -> list[Finding]:
        if not is_source_file(file_path):
            return []
        return match_rules(
            CODE_PATTERN_RULES,
            category=self.category,
            content=content,
            file_path=file_path,
            skip_line=is_comment_line,
        )

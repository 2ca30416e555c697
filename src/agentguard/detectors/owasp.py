"""OWASP-style matcher for injection, XSS, SSRF, and misconfiguration idioms."""

from __future__ import annotations

from agentguard.constants.detectors import CATEGORY_OWASP
from agentguard.detectors.base import Detector
from agentguard.detectors.common import match_rules
from agentguard.model import Finding
from agentguard.rules import OWASP_RULES


class OwaspDetector(Detector):
    """Detect web-vulnerability patterns, including calls spanning several lines."""

    category = CATEGORY_OWASP

    def run(self, *, content: str, file_path: str) -> list[Finding]:
        return match_rules(OWASP_RULES, category=self.category, content=content, file_path=file_path)

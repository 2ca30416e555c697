"""Secret matcher: every physical line, comments included."""

from __future__ import annotations

from agentguard.constants.detectors import CATEGORY_SECRETS
from agentguard.detectors.base import Detector
from agentguard.detectors.common import match_rules
from agentguard.model import Finding
from agentguard.rules import SECRET_RULES


class SecretsDetector(Detector):
    """Detect hardcoded credentials, tokens, and private keys."""

    category = CATEGORY_SECRETS

    def run(self, *, content: str, file_path: str) -> list[Finding]:
        return match_rules(SECRET_RULES, category=self.category, content=content, file_path=file_path)

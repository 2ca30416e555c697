"""Pattern matchers for AgentGuard."""

from __future__ import annotations

from agentguard.detectors.base import Detector
from agentguard.detectors.code_patterns import CodePatternDetector
from agentguard.detectors.commands import CommandDetector, CommandVerdict, check_command
from agentguard.detectors.dependencies import DependencyDetector
from agentguard.detectors.owasp import OwaspDetector
from agentguard.detectors.secrets import SecretsDetector
from agentguard.model import Finding
from agentguard.types import Category

DETECTOR_CLASSES: tuple[type[Detector], ...] = (
    SecretsDetector,
    OwaspDetector,
    DependencyDetector,
    CodePatternDetector,
    CommandDetector,
)


def build_detectors(categories: tuple[Category, ...] | None = None) -> list[Detector]:
    """Instantiate detectors, optionally restricted to ``categories`` in the given order."""
    by_category = {cls.category: cls for cls in DETECTOR_CLASSES}
    if categories is None:
        return [cls() for cls in DETECTOR_CLASSES]
    unknown = [category for category in categories if category not in by_category]
    if unknown:
        raise ValueError(f"Unknown detector categories: {', '.join(unknown)}")
    return [by_category[category]() for category in categories]


def match(domain: Category, content: str, file_path: str) -> list[Finding]:
    """Run the single matcher for ``domain`` against ``content``."""
    (detector,) = build_detectors((domain,))
    return detector.run(content=content, file_path=file_path)


__all__ = [
    "CommandVerdict",
    "DETECTOR_CLASSES",
    "Detector",
    "build_detectors",
    "check_command",
    "match",
]

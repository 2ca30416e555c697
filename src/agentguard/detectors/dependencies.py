"""Dependency manifest matcher for pinned-version hygiene and known advisories."""

from __future__ import annotations

import json
import logging
import re
from typing import Any

from agentguard.constants.detectors import (
    BROAD_RANGE_ALTERNATION,
    BROAD_RANGE_PREFIX,
    CATEGORY_DEPENDENCIES,
    MANIFEST_DEPENDENCY_SECTIONS,
    MANIFEST_FILENAME,
    VERSION_OPERATOR_CHARS,
    WILDCARD_VERSIONS,
)
from agentguard.detectors.base import Detector
from agentguard.model import Finding
from agentguard.rules import KNOWN_VULNERABLE
from agentguard.rules.dependencies import (
    BROAD_RANGE_RULE,
    KNOWN_VULNERABILITY_RULE,
    WILDCARD_VERSION_RULE,
)
from agentguard.types import Severity

logger = logging.getLogger(__name__)

_LEADING_NON_DIGITS = re.compile(r"^[^0-9]*")


def parse_version(version: str) -> tuple[int, int, int]:
    """Parse ``major.minor.patch``; missing or non-numeric parts become 0."""
    cleaned = _LEADING_NON_DIGITS.sub("", version)
    parts = cleaned.split(".")
    numbers: list[int] = []
    for index in range(3):
        try:
            numbers.append(int(parts[index]))
        except (IndexError, ValueError):
            numbers.append(0)
    return numbers[0], numbers[1], numbers[2]


def is_version_below(version: str, threshold: str) -> bool:
    """Return True when ``version`` is strictly lower than ``threshold``."""
    return parse_version(version) < parse_version(threshold)


def declared_dependencies(manifest: Any) -> dict[str, str]:
    """Merge regular and development dependencies with string version ranges."""
    if not isinstance(manifest, dict):
        return {}
    merged: dict[str, str] = {}
    for section in MANIFEST_DEPENDENCY_SECTIONS:
        entries = manifest.get(section)
        if not isinstance(entries, dict):
            continue
        for name, version_range in entries.items():
            if isinstance(version_range, str):
                merged[name] = version_range
    return merged


def dependency_line(content: str, name: str) -> int:
    """Return the first line mentioning ``"name"``, or 1 when absent."""
    needle = f'"{name}"'
    for line_number, line in enumerate(content.split("\n"), start=1):
        if needle in line:
            return line_number
    return 1


class DependencyDetector(Detector):
    """Inspect ``package.json`` manifests.

    Unparseable manifests yield no findings.
    """

    category = CATEGORY_DEPENDENCIES

    def run(self, *, content: str, file_path: str) -> list[Finding]:
        if not file_path.endswith(MANIFEST_FILENAME):
            return []

        try:
            manifest = json.loads(content)
        except json.JSONDecodeError:
            logger.debug("Skipping unparseable manifest: %s", file_path)
            return []

        findings: list[Finding] = []
        for name, version_range in declared_dependencies(manifest).items():
            line = dependency_line(content, name)

            if version_range in WILDCARD_VERSIONS:
                findings.append(
                    self._finding(
                        file_path,
                        name,
                        version_range,
                        line=line,
                        rule=WILDCARD_VERSION_RULE,
                        severity="medium",
                        description=(
                            f'Package "{name}" uses wildcard version "{version_range}" - pin to a specific version'
                        ),
                    )
                )

            if version_range.startswith(BROAD_RANGE_PREFIX) or BROAD_RANGE_ALTERNATION in version_range:
                findings.append(
                    self._finding(
                        file_path,
                        name,
                        version_range,
                        line=line,
                        rule=BROAD_RANGE_RULE,
                        severity="low",
                        description=f'Package "{name}" uses broad version range "{version_range}"',
                    )
                )

            advisory = KNOWN_VULNERABLE.get(name)
            if advisory is not None and is_version_below(version_range.lstrip(VERSION_OPERATOR_CHARS), advisory.below):
                findings.append(
                    self._finding(
                        file_path,
                        name,
                        version_range,
                        line=line,
                        rule=KNOWN_VULNERABILITY_RULE,
                        severity=advisory.severity,
                        description=(
                            f"{name}@{version_range} - {advisory.advisory} (upgrade to >={advisory.below})"
                        ),
                    )
                )

        return findings

    def _finding(
        self,
        file_path: str,
        name: str,
        version_range: str,
        *,
        line: int,
        rule: str,
        severity: Severity,
        description: str,
    ) -> Finding:
        return Finding(
            category=self.category,
            rule=rule,
            severity=severity,
            file=file_path,
            line=line,
            column=1,
            description=description,
            snippet=f'"{name}": "{version_range}"',
        )

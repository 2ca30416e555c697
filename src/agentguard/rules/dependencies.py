"""Bundled advisory table of known-vulnerable npm packages."""

from __future__ import annotations

from agentguard.rules.base import DependencyAdvisory

WILDCARD_VERSION_RULE: str = "Wildcard Version"
BROAD_RANGE_RULE: str = "Broad Version Range"
KNOWN_VULNERABILITY_RULE: str = "Known Vulnerability"

_ADVISORIES: tuple[DependencyAdvisory, ...] = (
    DependencyAdvisory("lodash", "4.17.21", "high", "Prototype pollution"),
    DependencyAdvisory("minimist", "1.2.6", "high", "Prototype pollution"),
    DependencyAdvisory("node-fetch", "2.6.7", "medium", "URL redirect vulnerability"),
    DependencyAdvisory("express", "4.17.3", "medium", "Open redirect vulnerability"),
    DependencyAdvisory("axios", "0.21.2", "high", "SSRF vulnerability"),
    DependencyAdvisory("tar", "6.1.9", "high", "Arbitrary file creation/overwrite"),
    DependencyAdvisory("glob-parent", "5.1.2", "high", "Regular expression DoS"),
    DependencyAdvisory("trim-newlines", "3.0.1", "medium", "Regular expression DoS"),
    DependencyAdvisory("json5", "2.2.2", "high", "Prototype pollution"),
    DependencyAdvisory("semver", "7.5.2", "medium", "Regular expression DoS"),
    DependencyAdvisory("tough-cookie", "4.1.3", "medium", "Prototype pollution"),
    DependencyAdvisory("word-wrap", "1.2.4", "medium", "Regular expression DoS"),
    DependencyAdvisory("jsonwebtoken", "9.0.0", "critical", "JWT verification bypass"),
    DependencyAdvisory("qs", "6.10.3", "high", "Prototype pollution"),
    DependencyAdvisory("shell-quote", "1.7.3", "critical", "Command injection"),
    DependencyAdvisory("moment", "2.29.4", "medium", "Path traversal"),
)

KNOWN_VULNERABLE: dict[str, DependencyAdvisory] = {advisory.package: advisory for advisory in _ADVISORIES}

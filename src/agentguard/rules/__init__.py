"""Static detection rule catalogs."""

from .base import CommandPattern, DependencyAdvisory, Rule, mentions
from .code_patterns import CODE_PATTERN_RULES
from .commands import DANGEROUS_COMMANDS
from .dependencies import KNOWN_VULNERABLE
from .owasp import OWASP_RULES
from .secrets import SECRET_RULES

__all__ = [
    "CODE_PATTERN_RULES",
    "DANGEROUS_COMMANDS",
    "KNOWN_VULNERABLE",
    "OWASP_RULES",
    "SECRET_RULES",
    "CommandPattern",
    "DependencyAdvisory",
    "Rule",
    "mentions",
]

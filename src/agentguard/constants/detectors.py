"""Constants shared by the pattern matchers."""

from __future__ import annotations

from agentguard.types import Category

SNIPPET_MAX_LENGTH: int = 120

CATEGORY_SECRETS: Category = "Secrets"
CATEGORY_OWASP: Category = "OWASP"
CATEGORY_DEPENDENCIES: Category = "Dependencies"
CATEGORY_CODE_PATTERNS: Category = "Code Patterns"
CATEGORY_COMMANDS: Category = "Commands"

CONTENT_CATEGORIES: tuple[Category, ...] = (
    CATEGORY_SECRETS,
    CATEGORY_OWASP,
    CATEGORY_DEPENDENCIES,
    CATEGORY_CODE_PATTERNS,
)

# Categories run against proposed write/edit content by the policy engine.
WRITE_POLICY_CATEGORIES: tuple[Category, ...] = (
    CATEGORY_SECRETS,
    CATEGORY_OWASP,
    CATEGORY_CODE_PATTERNS,
)

CODE_PATTERN_SKIPPED_SUFFIXES: tuple[str, ...] = ("package.json", ".json", ".md", ".txt")
COMMENT_LINE_PREFIXES: tuple[str, ...] = ("//", "*", "#")

MANIFEST_FILENAME: str = "package.json"
MANIFEST_DEPENDENCY_SECTIONS: tuple[str, ...] = ("dependencies", "devDependencies")
WILDCARD_VERSIONS: frozenset[str] = frozenset({"*", "latest"})
BROAD_RANGE_PREFIX: str = ">="
BROAD_RANGE_ALTERNATION: str = " || "
VERSION_OPERATOR_CHARS: str = "^~>=<"

ALL_CATEGORIES: tuple[Category, ...] = (*CONTENT_CATEGORIES, CATEGORY_COMMANDS)

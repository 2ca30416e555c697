"""OWASP-style web vulnerability catalog.

Rules flagged ``multiline`` must see a call spanning several lines and are
matched against the whole file.
"""

from __future__ import annotations

import re

from agentguard.rules.base import Rule

_USER_INPUT = r"(?:req\.|params\.|query\.|body\.)"

OWASP_RULES: tuple[Rule, ...] = (
    # Injection
    Rule(
        name="SQL Injection - String Concatenation",
        pattern=re.compile(r"""(?:query|execute|raw)\s*\(\s*['"`].*?\s*\+\s*"""),
        severity="critical",
        description="Possible SQL injection via string concatenation in query",
    ),
    Rule(
        name="SQL Injection - Template Literal",
        pattern=re.compile(r"(?:query|execute|raw)\s*\(\s*`[^`]*\$\{"),
        severity="critical",
        description="Possible SQL injection via template literal interpolation",
    ),
    # XSS
    Rule(
        name="XSS - innerHTML",
        pattern=re.compile(r"\.innerHTML\s*="),
        severity="high",
        description="Direct innerHTML assignment can lead to XSS",
    ),
    Rule(
        name="XSS - dangerouslySetInnerHTML",
        pattern=re.compile(r"dangerouslySetInnerHTML"),
        severity="high",
        description="dangerouslySetInnerHTML can lead to XSS if input is unsanitized",
    ),
    Rule(
        name="XSS - document.write",
        pattern=re.compile(r"document\.write\s*\("),
        severity="high",
        description="document.write can lead to XSS",
    ),
    Rule(
        name="XSS - v-html",
        pattern=re.compile(r"v-html\s*="),
        severity="high",
        description="Vue v-html directive can lead to XSS",
    ),
    # Command injection
    Rule(
        name="Command Injection - exec",
        pattern=re.compile(
            r"""(?:child_process.*?|require\s*\(\s*['"]child_process['"]\s*\)).*?exec\s*\(""",
            re.DOTALL,
        ),
        severity="critical",
        description="child_process.exec with potential unsanitized input",
        multiline=True,
    ),
    Rule(
        name="Command Injection - exec direct",
        pattern=re.compile(r"""\bexec\s*\(\s*(?:`[^`]*\$\{|['"].*?\+)"""),
        severity="critical",
        description="Command execution with string interpolation/concatenation",
    ),
    # Path traversal
    Rule(
        name="Path Traversal",
        pattern=re.compile(rf"(?:readFile|readFileSync|createReadStream|access|stat)\s*\([^)]*{_USER_INPUT}"),
        severity="high",
        description="File operation with user-controlled path - possible path traversal",
    ),
    Rule(
        name="Path Traversal - Join",
        pattern=re.compile(rf"path\.join\s*\([^)]*{_USER_INPUT}"),
        severity="medium",
        description="path.join with user input - verify path traversal protection",
    ),
    # SSRF
    Rule(
        name="SSRF - User-controlled URL",
        pattern=re.compile(
            r"(?:fetch|axios\.get|axios\.post|http\.get|request)\s*\(\s*(?:req\.|params\.|query\.|body\.|url)"
        ),
        severity="high",
        description="HTTP request with user-controlled URL - possible SSRF",
    ),
    # Security misconfiguration
    Rule(
        name="CORS Wildcard",
        pattern=re.compile(r"""cors\s*\(\s*\{[^}]*origin\s*:\s*['"]?\*"""),
        severity="medium",
        description="CORS configured with wildcard origin",
    ),
    Rule(
        name="CORS Allow All",
        pattern=re.compile(r"""Access-Control-Allow-Origin['"]\s*,\s*['"]\*"""),
        severity="medium",
        description="CORS header set to allow all origins",
    ),
    # Insecure deserialization
    Rule(
        name="Unsafe JSON Parse",
        pattern=re.compile(r"JSON\.parse\s*\(\s*(?:req\.|body\.|params\.|query\.|input)"),
        severity="medium",
        description="JSON.parse on user input without try/catch protection",
    ),
)

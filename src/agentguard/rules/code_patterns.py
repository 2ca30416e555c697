"""Catalog of generically unsafe code idioms."""

from __future__ import annotations

import re

from agentguard.rules.base import Rule, mentions

SECURITY_CONTEXT_PATTERN: re.Pattern[str] = re.compile(
    r"token|secret|key|password|salt|nonce|csrf|session|auth",
    re.IGNORECASE,
)
LOCAL_ADDRESS_PATTERN: re.Pattern[str] = re.compile(r"(?:127\.0\.0\.1|0\.0\.0\.0|localhost)")

_OCTET = r"(?:25[0-5]|2[0-4]\d|[01]?\d\d?)"

CODE_PATTERN_RULES: tuple[Rule, ...] = (
    # Dangerous functions
    Rule(
        name="eval() Usage",
        pattern=re.compile(r"\beval\s*\("),
        severity="critical",
        description="eval() can execute arbitrary code - avoid using it",
    ),
    Rule(
        name="Function() Constructor",
        pattern=re.compile(r"new\s+Function\s*\("),
        severity="high",
        description="Function constructor can execute arbitrary code like eval()",
    ),
    # Weak cryptography
    Rule(
        name="Weak Hash - MD5",
        pattern=re.compile(r"""(?:createHash|MD5|md5)\s*\(\s*['"]md5['"]""", re.IGNORECASE),
        severity="high",
        description="MD5 is cryptographically weak - use SHA-256 or bcrypt for passwords",
    ),
    Rule(
        name="Weak Hash - SHA1",
        pattern=re.compile(r"""createHash\s*\(\s*['"]sha1['"]"""),
        severity="medium",
        description="SHA-1 is deprecated for security purposes - use SHA-256+",
    ),
    Rule(
        name="Math.random() for Security",
        pattern=re.compile(r"Math\.random\s*\(\)"),
        severity="medium",
        description="Math.random() is not cryptographically secure - use crypto.randomBytes()",
        context=mentions(SECURITY_CONTEXT_PATTERN),
    ),
    # TLS
    Rule(
        name="Disabled TLS Verification",
        pattern=re.compile(r"rejectUnauthorized\s*:\s*false"),
        severity="high",
        description="TLS certificate verification is disabled - vulnerable to MITM attacks",
    ),
    Rule(
        name="NODE_TLS_REJECT_UNAUTHORIZED",
        pattern=re.compile(r"""NODE_TLS_REJECT_UNAUTHORIZED\s*=\s*['"]?0"""),
        severity="high",
        description="TLS verification globally disabled via environment variable",
    ),
    # Hardcoded values
    Rule(
        name="Hardcoded IP Address",
        pattern=re.compile(rf"""['"](?:{_OCTET}\.){{3}}{_OCTET}['"]"""),
        severity="low",
        description="Hardcoded IP address - consider using configuration/environment variables",
        exclude=mentions(LOCAL_ADDRESS_PATTERN),
    ),
    # Logging
    Rule(
        name="Sensitive Data Logging",
        pattern=re.compile(
            r"console\.log\s*\([^)]*(?:password|secret|token|apiKey|api_key|credential|ssn|credit_card)",
            re.IGNORECASE,
        ),
        severity="medium",
        description="Logging potentially sensitive data to console",
    ),
    # Regex construction
    Rule(
        name="Potential ReDoS",
        pattern=re.compile(r"new\s+RegExp\s*\(\s*(?:req\.|params\.|query\.|body\.|input|user)"),
        severity="medium",
        description="RegExp constructed from user input - possible ReDoS",
    ),
    # Deserialization
    Rule(
        name="Unsafe Deserialize",
        pattern=re.compile(r"(?:unserialize|deserialize|pickle\.loads|yaml\.load\s*\((?!.*Loader))"),
        severity="high",
        description="Unsafe deserialization can lead to remote code execution",
    ),
    Rule(
        name="Hardcoded Port",
        pattern=re.compile(r"\.listen\s*\(\s*\d{4,5}\s*[,)]"),
        severity="low",
        description="Hardcoded port number - consider using PORT env variable",
    ),
)

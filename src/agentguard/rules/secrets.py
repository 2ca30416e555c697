"""Secret-detection catalog: credentials, tokens, and private keys."""

from __future__ import annotations

import re

from agentguard.rules.base import Rule

SECRET_RULES: tuple[Rule, ...] = (
    Rule(
        name="AWS Access Key",
        pattern=re.compile(r"AKIA[0-9A-Z]{16}"),
        severity="critical",
        description="AWS Access Key ID detected",
    ),
    Rule(
        name="AWS Secret Key",
        pattern=re.compile(r"aws_secret_access_key\s*=\s*[A-Za-z0-9/+=]{40}", re.IGNORECASE),
        severity="critical",
        description="AWS Secret Access Key detected",
    ),
    Rule(
        name="GitHub Token",
        pattern=re.compile(r"gh[pousr]_[A-Za-z0-9_]{36,}"),
        severity="critical",
        description="GitHub personal access token detected",
    ),
    Rule(
        name="Generic API Key",
        pattern=re.compile(r"""(api[_-]?key|apikey)\s*[:=]\s*['"][A-Za-z0-9]{16,}['"]""", re.IGNORECASE),
        severity="high",
        description="Possible API key in code",
    ),
    Rule(
        name="Private Key",
        pattern=re.compile(r"-----BEGIN (RSA |EC |DSA )?PRIVATE KEY-----"),
        severity="critical",
        description="Private key embedded in source code",
    ),
    Rule(
        name="JWT Token",
        pattern=re.compile(r"eyJ[A-Za-z0-9_-]+\.eyJ[A-Za-z0-9_-]+"),
        severity="high",
        description="Hardcoded JWT token detected",
    ),
    Rule(
        name="Connection String",
        pattern=re.compile(r"""(mongodb|postgres|mysql|redis)://[^\s'"]+""", re.IGNORECASE),
        severity="critical",
        description="Database connection string with possible credentials",
    ),
    Rule(
        name="Hardcoded Password",
        pattern=re.compile(r"""(password|passwd|pwd)\s*[:=]\s*['"][^'"]{8,}['"]""", re.IGNORECASE),
        severity="high",
        description="Hardcoded password detected",
    ),
    Rule(
        name="Slack Token",
        pattern=re.compile(r"xox[baprs]-[0-9a-zA-Z-]{10,}"),
        severity="critical",
        description="Slack token detected",
    ),
    Rule(
        name="Generic Secret",
        pattern=re.compile(r"""(secret|token|auth)\s*[:=]\s*['"][A-Za-z0-9+/=]{20,}['"]""", re.IGNORECASE),
        severity="medium",
        description="Possible secret or token in code",
    ),
)

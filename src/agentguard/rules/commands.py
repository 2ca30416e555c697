"""Ordered catalog of dangerous shell-command patterns.

Patterns are evaluated top to bottom and the first applicable match wins, so
the order below is part of the policy: more specific and more severe entries
come first. Do not re-sort.

Levels:
    critical - catastrophic and unrecoverable (rm -rf /, fork bombs, dd to disk)
    high     - significant risk (force push to main, git reset --hard, secret exposure)
    strict   - cautionary (any force push, sudo rm, docker prune)
"""

from __future__ import annotations

import re

from agentguard.rules.base import CommandPattern
from agentguard.types import SafetyLevel

_SECRET_FILES = r"(\.env|credentials|secrets|id_rsa|\.pem|\.key)"


def _pattern(level: SafetyLevel, pattern_id: str, regex: str, reason: str, flags: int = 0) -> CommandPattern:
    return CommandPattern(level=level, id=pattern_id, regex=re.compile(regex, flags), reason=reason)


DANGEROUS_COMMANDS: tuple[CommandPattern, ...] = (
    # critical
    _pattern("critical", "rm-root", r"\brm\s+(?:-.+\s+)?/(\*|\s|$|[;&|])", "rm targeting root filesystem"),
    _pattern(
        "critical",
        "rm-system",
        r"\brm\s+(?:-.+\s+)?/(etc|usr|var|bin|sbin|lib|boot|dev|proc|sys)(/|\s|$)",
        "rm targeting system directory",
    ),
    _pattern("critical", "rm-home", r"""\brm\s+(?:-.+\s+)?["']?~/?["']?(\s|$|[;&|])""", "rm targeting home directory"),
    _pattern("critical", "rm-home-var", r"""\brm\s+(?:-.+\s+)?["']?\$HOME["']?(\s|$|[;&|])""", "rm targeting $HOME"),
    _pattern(
        "critical",
        "rm-rf-cwd",
        r"\brm\s+-rf\s+(\./?|\*|\./\*)(\s|$|[;&|])",
        "rm -rf deleting current directory contents",
    ),
    _pattern("critical", "rm-rf-wildcard", r"\brm\s+-rf\s+/\*", "rm -rf with wildcard on root"),
    _pattern(
        "critical",
        "dd-disk",
        r"\bdd\b.+of=/dev/(sd[a-z]|nvme|hd[a-z]|vd[a-z]|xvd[a-z])",
        "dd writing to disk device - will destroy data",
    ),
    _pattern(
        "critical",
        "mkfs",
        r"\bmkfs(\.\w+)?\s+/dev/(sd[a-z]|nvme|hd[a-z]|vd[a-z])",
        "mkfs formatting disk - will destroy all data",
    ),
    _pattern("critical", "fork-bomb", r":\(\)\s*\{.*:\s*\|\s*:.*&", "Fork bomb detected - will crash system"),
    _pattern("critical", "dev-null-redirect", r">\s*/dev/sd[a-z]", "Redirecting output to disk device"),
    # high
    _pattern("high", "rm-rf-generic", r"\brm\s+-r(f)?\s", "Recursive rm - verify target carefully"),
    _pattern(
        "high",
        "curl-pipe-sh",
        r"\b(curl|wget)\b.+\|\s*(ba)?sh\b",
        "Piping URL to shell - remote code execution risk",
    ),
    _pattern(
        "high",
        "git-force-main",
        r"\bgit\s+push\b(?!.+--force-with-lease).+(--force|-f)\b.+\b(main|master)\b",
        "Force push to main/master - will rewrite shared history",
    ),
    _pattern("high", "git-reset-hard", r"\bgit\s+reset\s+--hard", "git reset --hard - loses all uncommitted work"),
    _pattern(
        "high",
        "git-clean-f",
        r"\bgit\s+clean\s+(-\w*f|-f)",
        "git clean -f - permanently deletes untracked files",
    ),
    _pattern(
        "high",
        "git-branch-D",
        r"\bgit\s+branch\s+-D\b",
        "git branch -D - force deletes branch regardless of merge status",
    ),
    _pattern("high", "chmod-777", r"\bchmod\b.+\b777\b", "chmod 777 - world-writable is a security risk"),
    _pattern(
        "high",
        "cat-env",
        r"\b(cat|less|head|tail|more)\s+[^|;]*\.env\b",
        "Reading .env file - may expose secrets",
        re.IGNORECASE,
    ),
    _pattern(
        "high",
        "cat-secrets",
        r"\b(cat|less|head|tail|more)\b.+(credentials|secrets?|\.pem|\.key|id_rsa|id_ed25519)",
        "Reading secrets/key file",
        re.IGNORECASE,
    ),
    _pattern("high", "env-dump", r"\bprintenv\b|(?:^|[;&|]\s*)env\s*(?:$|[;&|])", "Environment dump may expose secrets"),
    _pattern(
        "high",
        "echo-secret",
        r"\becho\b.+\$\w*(SECRET|KEY|TOKEN|PASSWORD|API_|PRIVATE)",
        "Echoing secret environment variable",
        re.IGNORECASE,
    ),
    _pattern("high", "docker-vol-rm", r"\bdocker\s+volume\s+(rm|prune)", "Docker volume deletion - loses persistent data"),
    _pattern("high", "rm-ssh", r"\brm\b.+\.ssh/(id_|authorized_keys|known_hosts)", "Deleting SSH keys"),
    _pattern(
        "high",
        "drop-database",
        r"DROP\s+(DATABASE|TABLE|SCHEMA)\b",
        "SQL DROP - will permanently delete data",
        re.IGNORECASE,
    ),
    _pattern("high", "truncate-table", r"TRUNCATE\s+TABLE\b", "SQL TRUNCATE - will delete all rows", re.IGNORECASE),
    _pattern("high", "kill-all", r"\bkillall\b|\bkill\s+-9\s+-1\b|\bpkill\s+-9\b", "Mass process kill"),
    _pattern("high", "shutdown", r"\b(shutdown|reboot|halt|poweroff)\b", "System shutdown/reboot command"),
    _pattern("high", "iptables-flush", r"\biptables\s+-F\b", "Flushing firewall rules"),
    _pattern("high", "passwd-change", r"\bpasswd\b", "Password change command"),
    _pattern(
        "high",
        "curl-upload-env",
        rf"\bcurl\b[^;|&]*(-d\s*@|-F\s*[^=]+=@|--data[^=]*=@)[^;|&]*{_SECRET_FILES}",
        "Uploading secrets via curl",
        re.IGNORECASE,
    ),
    _pattern(
        "high",
        "scp-secrets",
        rf"\bscp\b[^;|&]*{_SECRET_FILES}[^;|&]+:",
        "Copying secrets via scp",
        re.IGNORECASE,
    ),
    # strict
    _pattern(
        "strict",
        "git-force-any",
        r"\bgit\s+push\b(?!.+--force-with-lease).+(--force|-f)\b",
        "Force push - use --force-with-lease instead",
    ),
    _pattern("strict", "git-checkout-dot", r"\bgit\s+checkout\s+\.", "git checkout . - discards all local changes"),
    _pattern("strict", "sudo-rm", r"\bsudo\s+rm\b", "sudo rm - elevated privilege deletion"),
    _pattern(
        "strict",
        "docker-prune",
        r"\bdocker\s+(system|image)\s+prune",
        "Docker prune - removes images/containers",
    ),
    _pattern("strict", "crontab-r", r"\bcrontab\s+-r", "Removes all cron jobs"),
    _pattern("strict", "npm-cache-clean", r"\bnpm\s+cache\s+clean\s+--force", "Force clearing npm cache"),
    _pattern("strict", "pip-uninstall", r"\bpip\s+uninstall\b.+-y\b", "Force uninstalling pip packages"),
)

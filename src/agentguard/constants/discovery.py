"""Constants for scan-target discovery."""

from __future__ import annotations

CODE_EXTENSIONS: tuple[str, ...] = (
    ".js",
    ".jsx",
    ".ts",
    ".tsx",
    ".mjs",
    ".cjs",
    ".py",
    ".rb",
    ".go",
    ".java",
    ".php",
    ".html",
    ".htm",
    ".vue",
    ".svelte",
    ".json",
    ".yml",
    ".yaml",
    ".toml",
    ".env",
    ".sh",
    ".bash",
    ".zsh",
)

IGNORE_DIRS: frozenset[str] = frozenset(
    {
        "node_modules",
        ".git",
        "dist",
        "build",
        ".next",
        "coverage",
        ".nyc_output",
        "vendor",
        "__pycache__",
    }
)

"""Scan-target discovery."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from agentguard.constants.discovery import CODE_EXTENSIONS, IGNORE_DIRS
from agentguard.exceptions import ScanTargetError

logger = logging.getLogger(__name__)


def discover_scan_targets(target: Path) -> list[Path]:
    """Resolve ``target`` to the files a scan should read.

    A file target yields itself. A directory yields source-like files beneath
    it, skipping dependency/build directories and hidden entries, ordered by
    path relative to the target.
    """
    target = target.resolve()
    if target.is_file():
        return [target]
    if not target.is_dir():
        raise ScanTargetError(f"Scan target does not exist: {target}")

    discovered: list[Path] = []
    for dirpath, dirnames, filenames in os.walk(target):
        dirnames[:] = [name for name in dirnames if not _is_ignored_dir(name)]
        for filename in filenames:
            if _is_candidate_file(filename):
                discovered.append(Path(dirpath) / filename)

    logger.debug("Discovered %d candidate files under %s", len(discovered), target)
    return sorted(discovered, key=lambda path: _stable_path_key(path, target))


def relative_display_path(path: Path, base_path: Path) -> str:
    """Render ``path`` relative to ``base_path`` when possible."""
    try:
        return os.path.relpath(path, base_path)
    except ValueError:
        return path.as_posix()


def _is_ignored_dir(name: str) -> bool:
    return name in IGNORE_DIRS or name.startswith(".")


def _is_candidate_file(name: str) -> bool:
    return not name.startswith(".") and name.endswith(CODE_EXTENSIONS)


def _stable_path_key(file_path: Path, root: Path) -> str:
    """Return a deterministic path key relative to *root* when possible."""
    try:
        return file_path.relative_to(root).as_posix()
    except ValueError:
        return file_path.as_posix()

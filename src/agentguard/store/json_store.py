"""Durable bounded JSON list with locked read-modify-write appends."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from agentguard.constants.store import LOCK_SUFFIX, STORE_TEMP_PREFIX, STORE_TEMP_SUFFIX
from agentguard.exceptions import StoreError
from agentguard.io import exclusive_lock, load_json_file, write_json_atomic
from agentguard.store.bounded import BoundedLog
from agentguard.types import JsonObject

logger = logging.getLogger(__name__)


class JsonListStore:
    """A JSON array on disk holding at most ``capacity`` objects.

    Appends take an exclusive file lock, reload the document, append, trim the
    oldest entries, and replace the file atomically. Missing or corrupt
    documents read as empty.
    """

    def __init__(self, path: Path, capacity: int) -> None:
        self.path = path
        self.capacity = capacity

    @property
    def lock_path(self) -> Path:
        return self.path.with_name(self.path.name + LOCK_SUFFIX)

    def read_all(self) -> list[JsonObject]:
        """Return persisted entries in insertion order, newest ``capacity`` at most."""
        return BoundedLog(self.capacity, self._load()).to_list()

    def append(self, entry: JsonObject) -> list[JsonObject]:
        """Persist ``entry`` and return the trimmed list that was written."""
        try:
            with exclusive_lock(self.lock_path):
                log: BoundedLog[JsonObject] = BoundedLog(self.capacity, self._load())
                log.append(entry)
                entries = log.to_list()
                write_json_atomic(
                    path=self.path,
                    payload=entries,
                    temp_prefix=STORE_TEMP_PREFIX,
                    temp_suffix=STORE_TEMP_SUFFIX,
                )
        except OSError as exc:
            raise StoreError(f"Failed to write store {self.path}: {exc}") from exc
        return entries

    def _load(self) -> list[JsonObject]:
        if not self.path.exists():
            return []
        try:
            raw = load_json_file(self.path)
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
            logger.warning("Ignoring unreadable store %s: %s", self.path, exc)
            return []
        if not isinstance(raw, list):
            logger.warning("Ignoring store %s: expected a JSON array", self.path)
            return []
        return [entry for entry in raw if isinstance(entry, dict)]

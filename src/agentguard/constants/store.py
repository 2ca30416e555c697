"""Constants for the persisted result and activity stores."""

from __future__ import annotations

RESULTS_FILENAME: str = "scan-results.json"
EVENTS_FILENAME: str = "activity-log.json"
LOCK_SUFFIX: str = ".lock"
STORE_TEMP_PREFIX: str = ".tmp-"
STORE_TEMP_SUFFIX: str = ".json"

DEFAULT_MAX_RESULTS: int = 100
DEFAULT_MAX_EVENTS: int = 200

RECENT_EVENTS_DEFAULT_LIMIT: int = 50
RECENT_BLOCKED_LIMIT: int = 10

SCAN_ID_PREFIX: str = "scan_"
EVENT_ID_PREFIX: str = "evt_"
ID_RANDOM_HEX_LENGTH: int = 12

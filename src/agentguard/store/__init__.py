"""Persisted result and activity stores."""

from .activity import ActivityLog
from .bounded import BoundedLog
from .json_store import JsonListStore
from .results import ResultStore

__all__ = ["ActivityLog", "BoundedLog", "JsonListStore", "ResultStore"]

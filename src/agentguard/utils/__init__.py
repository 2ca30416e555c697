"""Utility helpers."""

from .ids import new_record_id, utc_timestamp

__all__ = ["new_record_id", "utc_timestamp"]

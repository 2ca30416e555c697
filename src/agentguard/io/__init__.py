"""Shared file I/O helpers."""

from .files import read_text_or_none
from .json_io import load_json_file, write_json_atomic
from .locking import exclusive_lock

__all__ = ["exclusive_lock", "load_json_file", "read_text_or_none", "write_json_atomic"]

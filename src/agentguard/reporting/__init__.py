"""Scan result reporting."""

from .stdout import StdoutReporter

__all__ = ["StdoutReporter"]

"""Detector interface for the pattern matchers."""

from __future__ import annotations

import inspect
from abc import ABC, abstractmethod
from typing import ClassVar

from agentguard.constants.detectors import ALL_CATEGORIES
from agentguard.model import Finding
from agentguard.types import Category

_KNOWN_CATEGORIES: frozenset[str] = frozenset(ALL_CATEGORIES)


class Detector(ABC):
    """Abstract base class for a single-domain matcher.

    Detectors hold no mutable state, so one instance may serve concurrent
    callers.
    """

    category: ClassVar[Category]

    def __init_subclass__(cls, **kwargs: object) -> None:
        """Validate that concrete detectors declare a known ``category``."""
        super().__init_subclass__(**kwargs)
        if inspect.isabstract(cls):
            return

        category = getattr(cls, "category", None)
        if category not in _KNOWN_CATEGORIES:
            raise TypeError(f"{cls.__name__}.category must be one of {sorted(_KNOWN_CATEGORIES)} (got {category!r})")

    @abstractmethod
    def run(self, *, content: str, file_path: str) -> list[Finding]:
        """Return every finding for ``content`` attributed to ``file_path``."""

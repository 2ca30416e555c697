"""Shared pytest fixtures for repository-local test data."""

from __future__ import annotations

from pathlib import Path

import pytest

from agentguard.config import GuardConfig


@pytest.fixture(scope="session")
def fixtures_root() -> Path:
    """Return root directory for test fixtures."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture(scope="session")
def vulnerable_repo_root(fixtures_root: Path) -> Path:
    """Return a fixture repository with known findings."""
    return fixtures_root / "repos" / "vulnerable"


@pytest.fixture(scope="session")
def clean_repo_root(fixtures_root: Path) -> Path:
    """Return a fixture repository with no findings."""
    return fixtures_root / "repos" / "clean"


@pytest.fixture()
def guard_config(tmp_path: Path) -> GuardConfig:
    """Return a config whose data and log directories live under ``tmp_path``."""
    return GuardConfig(
        data_dir=tmp_path / "data",
        log_dir=tmp_path / "logs",
        max_results=5,
        max_events=5,
        max_workers=2,
    )

"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import os
from collections.abc import Generator
from pathlib import Path

import pytest

from argon2phc.core.config import get_settings
from argon2phc.core.workers import shutdown_workers
from argon2phc.hashing.types import HashOptions


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Isolate tests from ARGON2PHC_* variables, .env files and cached settings."""
    for name in list(os.environ):
        if name.startswith("ARGON2PHC_"):
            monkeypatch.delenv(name)
    monkeypatch.chdir(Path(__file__).parent)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture(scope="session", autouse=True)
def worker_pool() -> Generator[None, None, None]:
    """Release the shared worker pool once the session ends."""
    yield
    shutdown_workers()


@pytest.fixture
def fast_options() -> HashOptions:
    """Cheap parameters for tests that do not check reference vectors."""
    return HashOptions(memory_cost=1 << 10, time_cost=1, parallelism=1)

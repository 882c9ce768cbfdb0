"""
Fristen - Shared pytest fixtures.
"""

from __future__ import annotations

import os
from typing import Generator

import pytest
import structlog

# ─── Environment setup (before any fristen imports) ───────────────────────────

os.environ.setdefault("FRISTEN_HOLIDAY_CACHE_ENABLED", "true")
os.environ.setdefault("FRISTEN_LOG_LEVEL", "WARNING")

# ─── Library imports (after env is set) ───────────────────────────────────────

from fristen.config import get_settings  # noqa: E402
from fristen.core.logging import configure_logging  # noqa: E402
from fristen.core.regions import Region  # noqa: E402

# ─────────────────────────────────────────────────────────────────────────────
# SETTINGS FIXTURES
# ─────────────────────────────────────────────────────────────────────────────


@pytest.fixture(autouse=True)
def fresh_settings() -> Generator[None, None, None]:
    """Settings are lru_cached; drop the cache around every test so env overrides apply."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def override_env(monkeypatch):
    """Set FRISTEN_* variables for one test and rebuild settings."""

    def _apply(**values: str) -> None:
        for key, value in values.items():
            monkeypatch.setenv(f"FRISTEN_{key}", value)
        get_settings.cache_clear()

    return _apply


@pytest.fixture(scope="session", autouse=True)
def quiet_logging() -> Generator[None, None, None]:
    """The library never configures structlog itself; act as the host app would."""
    configure_logging(level="WARNING", json_output=False)
    yield


@pytest.fixture
def unconfigured_structlog() -> Generator[None, None, None]:
    structlog.reset_defaults()
    yield
    configure_logging(level="WARNING", json_output=False)


@pytest.fixture
def debug_logging() -> Generator[None, None, None]:
    configure_logging(level="DEBUG", json_output=True)
    yield
    configure_logging(level="WARNING", json_output=False)


# ─────────────────────────────────────────────────────────────────────────────
# REGION FIXTURES
# ─────────────────────────────────────────────────────────────────────────────


@pytest.fixture
def nw() -> Region:
    return Region.NW


@pytest.fixture
def be() -> Region:
    return Region.BE


"""
Fristen - Library Configuration
All settings loaded from environment variables (prefix FRISTEN_) via pydantic-settings.
"""

from __future__ import annotations

from functools import lru_cache
from typing import List

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="FRISTEN_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ── Holiday Calendar ──────────────────────────────────────────────────────
    HOLIDAY_CACHE_ENABLED: bool = True
    HOLIDAY_LANGUAGE: str = "de"

    # ── Reminders ─────────────────────────────────────────────────────────────
    DEFAULT_REMINDER_OFFSETS: List[int] = [7, 3, 1]
    HALF_PERIOD_MIN_SPAN_DAYS: int = 14  # half-period only for spans strictly above

    # ── Urgency ───────────────────────────────────────────────────────────────
    URGENCY_HIGH_BELOW_DAYS: int = 3
    URGENCY_MEDIUM_MAX_DAYS: int = 7

    # ── Logging ───────────────────────────────────────────────────────────────
    LOG_LEVEL: str = "WARNING"
    LOG_JSON: bool = False

    @field_validator("DEFAULT_REMINDER_OFFSETS")
    @classmethod
    def validate_offsets(cls, v: List[int]) -> List[int]:
        if any(offset < 0 for offset in v):
            raise ValueError("DEFAULT_REMINDER_OFFSETS must not contain negative values")
        return v

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        allowed = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if v.upper() not in allowed:
            raise ValueError(f"LOG_LEVEL must be one of {allowed}")
        return v.upper()

    @property
    def default_reminder_offsets(self) -> tuple[int, ...]:
        return tuple(self.DEFAULT_REMINDER_OFFSETS)


@lru_cache()
def get_settings() -> Settings:
    """Cached settings singleton."""
    return Settings()

"""
Fristen - Deadline Urgency (Warn-Ampel)
Traffic-light classification of a deadline relative to an explicit `today`.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict

from fristen.config import get_settings
from fristen.core.calendar_days import DateLike, as_calendar_day


class UrgencyLevel(str, Enum):
    DONE = "erledigt"
    OVERDUE = "ueberfaellig"
    HIGH = "hoch"
    MEDIUM = "mittel"
    LOW = "niedrig"


@dataclass(frozen=True)
class UrgencyStatus:
    level: UrgencyLevel
    days_remaining: int
    label: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "level": self.level.value,
            "days_remaining": self.days_remaining,
            "label": self.label,
        }


def _label(days: int) -> str:
    if days < 0:
        return f"{abs(days)} Tage überfällig"
    if days == 0:
        return "Heute"
    if days == 1:
        return "Morgen"
    return f"{days} Tage"


def classify_urgency(deadline: DateLike, today: DateLike, done: bool = False) -> UrgencyStatus:
    """
    DONE if the deadline is marked done; otherwise OVERDUE (< 0 days),
    HIGH (< URGENCY_HIGH_BELOW_DAYS), MEDIUM (<= URGENCY_MEDIUM_MAX_DAYS), LOW.
    """
    days = (as_calendar_day(deadline) - as_calendar_day(today)).days
    if done:
        return UrgencyStatus(level=UrgencyLevel.DONE, days_remaining=days, label="Erledigt")

    settings = get_settings()
    if days < 0:
        level = UrgencyLevel.OVERDUE
    elif days < settings.URGENCY_HIGH_BELOW_DAYS:
        level = UrgencyLevel.HIGH
    elif days <= settings.URGENCY_MEDIUM_MAX_DAYS:
        level = UrgencyLevel.MEDIUM
    else:
        level = UrgencyLevel.LOW
    return UrgencyStatus(level=level, days_remaining=days, label=_label(days))

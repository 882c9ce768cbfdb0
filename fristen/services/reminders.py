"""
Fristen - Reminder Calculator (Vorfristen and Halbfrist)
Reminders that fall on a weekend or holiday move to the PREVIOUS business day,
the opposite direction of §193 deadline postponement.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Any, Dict, Iterable, List, Optional

from fristen.config import get_settings
from fristen.core.business_days import business_day_on_or_before
from fristen.core.calendar_days import DateLike, as_calendar_day, shift_days
from fristen.core.exceptions import InvalidReminderOffsetError
from fristen.core.holiday_calendar import RegionLike
from fristen.core.logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class Reminder:
    offset_days: int  # calendar days before the deadline
    original_date: date
    date: date
    shifted: bool

    def to_dict(self) -> Dict[str, Any]:
        return {
            "offset_days": self.offset_days,
            "original_date": self.original_date.isoformat(),
            "date": self.date.isoformat(),
            "shifted": self.shifted,
        }


def _validate_offset(offset: Any) -> int:
    if isinstance(offset, bool) or not isinstance(offset, int) or offset < 0:
        raise InvalidReminderOffsetError(offset)
    return offset


def _shift_earlier(original: date, region: RegionLike) -> tuple[date, bool]:
    final = business_day_on_or_before(original, region)
    return final, final != original


def calculate_reminders(
    end_date: DateLike,
    offsets: Optional[Iterable[int]],
    region: RegionLike,
) -> List[Reminder]:
    """
    One reminder per offset, in the given order. `offsets=None` falls back to
    Settings.DEFAULT_REMINDER_OFFSETS.
    """
    end = as_calendar_day(end_date)
    if offsets is None:
        offsets = get_settings().default_reminder_offsets
    checked = [_validate_offset(offset) for offset in offsets]

    reminders: List[Reminder] = []
    for offset in checked:
        original = shift_days(end, -offset)
        final, shifted = _shift_earlier(original, region)
        reminders.append(
            Reminder(offset_days=offset, original_date=original, date=final, shifted=shifted)
        )

    logger.debug(
        "reminders_calculated",
        end_date=end.isoformat(),
        offsets=checked,
        shifted=sum(1 for r in reminders if r.shifted),
    )
    return reminders


def calculate_half_period_reminder(
    start_date: DateLike,
    end_date: DateLike,
    region: RegionLike,
) -> Optional[Reminder]:
    """
    Halbfrist: midpoint reminder for periods longer than two weeks.
    Returns None when the span is HALF_PERIOD_MIN_SPAN_DAYS days or less.
    """
    start = as_calendar_day(start_date)
    end = as_calendar_day(end_date)
    span = (end - start).days
    if span <= get_settings().HALF_PERIOD_MIN_SPAN_DAYS:
        return None

    original = shift_days(start, span // 2)
    final, shifted = _shift_earlier(original, region)
    return Reminder(
        offset_days=(end - original).days,
        original_date=original,
        date=final,
        shifted=shifted,
    )

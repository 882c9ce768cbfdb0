"""
Fristen - Calendar Day Helpers
Normalisation of date inputs to plain calendar days and guarded day stepping.
"""

from __future__ import annotations

from datetime import date, datetime, timedelta
from typing import Union

from fristen.core.exceptions import InvalidCalendarDayError, UnrepresentableDateError

DateLike = Union[date, datetime]

WEEKDAY_LABELS = ("Montag", "Dienstag", "Mittwoch", "Donnerstag", "Freitag", "Samstag", "Sonntag")


def as_calendar_day(value: DateLike) -> date:
    """
    Reduce a date or datetime to the calendar day it represents.
    A datetime keeps its own wall-clock date; no timezone conversion happens.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    raise InvalidCalendarDayError(value)


def shift_days(d: date, days: int) -> date:
    try:
        return d + timedelta(days=days)
    except OverflowError:
        raise UnrepresentableDateError(d, f"{days:+d} days") from None


def is_weekend(d: date) -> bool:
    return d.weekday() >= 5


def weekday_label(d: date) -> str:
    return WEEKDAY_LABELS[d.weekday()]

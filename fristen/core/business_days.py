"""
Fristen - Business Day Logic
A Geschäftstag is neither Saturday, Sunday, nor a public holiday of the state.
"""

from __future__ import annotations

from datetime import date
from typing import List

from fristen.core.calendar_days import DateLike, as_calendar_day, is_weekend, shift_days
from fristen.core.holiday_calendar import RegionLike, is_holiday


def is_business_day(d: DateLike, region: RegionLike) -> bool:
    day = as_calendar_day(d)
    if is_weekend(day):
        return False
    return not is_holiday(day, region)


def next_business_day(d: DateLike, region: RegionLike) -> date:
    """First business day strictly after `d`, even if `d` itself is one."""
    return _roll_forward(shift_days(as_calendar_day(d), 1), region)


def previous_business_day(d: DateLike, region: RegionLike) -> date:
    """Last business day strictly before `d`, even if `d` itself is one."""
    return _roll_backward(shift_days(as_calendar_day(d), -1), region)


def business_day_on_or_after(d: DateLike, region: RegionLike) -> date:
    return _roll_forward(as_calendar_day(d), region)


def business_day_on_or_before(d: DateLike, region: RegionLike) -> date:
    return _roll_backward(as_calendar_day(d), region)


def get_business_days_between(
    start: DateLike, end: DateLike, region: RegionLike
) -> List[date]:
    """Business days strictly between `start` and `end`."""
    days = []
    current = shift_days(as_calendar_day(start), 1)
    last = as_calendar_day(end)
    while current < last:
        if is_business_day(current, region):
            days.append(current)
        current = shift_days(current, 1)
    return days


def _roll_forward(candidate: date, region: RegionLike) -> date:
    while not is_business_day(candidate, region):
        candidate = shift_days(candidate, 1)
    return candidate


def _roll_backward(candidate: date, region: RegionLike) -> date:
    while not is_business_day(candidate, region):
        candidate = shift_days(candidate, -1)
    return candidate

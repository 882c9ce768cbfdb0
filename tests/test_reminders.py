"""
Fristen - Reminder Test Suite
Covers fristen/services/reminders.py: Vorfristen and the Halbfrist.
"""

from __future__ import annotations

from datetime import date, timedelta

import pytest

from fristen.core.business_days import is_business_day
from fristen.core.exceptions import InvalidReminderOffsetError
from fristen.core.regions import Region
from fristen.services.reminders import (
    calculate_half_period_reminder,
    calculate_reminders,
)

# ═══════════════════════════════════════════════════════════════════════════════
# VORFRISTEN
# ═══════════════════════════════════════════════════════════════════════════════


class TestCalculateReminders:
    def test_standard_offsets(self, nw):
        reminders = calculate_reminders(date(2026, 4, 15), [7, 3, 1], nw)
        assert [r.date for r in reminders] == [
            date(2026, 4, 8),
            date(2026, 4, 10),
            date(2026, 4, 14),
        ]
        assert [r.shifted for r in reminders] == [False, True, False]
        assert reminders[1].original_date == date(2026, 4, 12)

    def test_weekend_shifted_earlier(self, nw):
        (reminder,) = calculate_reminders(date(2026, 4, 13), [2], nw)
        assert reminder.original_date == date(2026, 4, 11)
        assert reminder.date == date(2026, 4, 10)
        assert reminder.shifted is True

    def test_holiday_shifted_earlier_across_year(self, nw):
        # Jan 1 2026 is Neujahr
        (reminder,) = calculate_reminders(date(2026, 1, 8), [7], nw)
        assert reminder.date == date(2025, 12, 31)

    def test_easter_shift(self, nw):
        # Apr 6 Ostermontag -> back over the weekend and Karfreitag
        (reminder,) = calculate_reminders(date(2026, 4, 9), [3], nw)
        assert reminder.original_date == date(2026, 4, 6)
        assert reminder.date == date(2026, 4, 2)

    def test_order_follows_input(self, nw):
        reminders = calculate_reminders(date(2026, 4, 15), [1, 7, 3], nw)
        assert [r.offset_days for r in reminders] == [1, 7, 3]

    def test_zero_offset_on_business_day(self, nw):
        (reminder,) = calculate_reminders(date(2026, 4, 15), [0], nw)
        assert reminder.date == date(2026, 4, 15)
        assert reminder.shifted is False

    def test_empty_offsets(self, nw):
        assert calculate_reminders(date(2026, 4, 15), [], nw) == []

    def test_default_offsets_from_settings(self, nw):
        reminders = calculate_reminders(date(2026, 4, 15), None, nw)
        assert [r.offset_days for r in reminders] == [7, 3, 1]

    def test_default_offsets_env_override(self, nw, override_env):
        override_env(DEFAULT_REMINDER_OFFSETS="[5]")
        reminders = calculate_reminders(date(2026, 4, 15), None, nw)
        assert [r.date for r in reminders] == [date(2026, 4, 10)]

    def test_negative_offset_rejected(self, nw):
        with pytest.raises(InvalidReminderOffsetError):
            calculate_reminders(date(2026, 4, 15), [7, -1], nw)

    def test_non_integer_offset_rejected(self, nw):
        with pytest.raises(InvalidReminderOffsetError):
            calculate_reminders(date(2026, 4, 15), [2.5], nw)

    def test_region_matters(self, be):
        # Jun 4 2026 is Fronleichnam in NW only
        (berlin,) = calculate_reminders(date(2026, 6, 5), [1], be)
        (cologne,) = calculate_reminders(date(2026, 6, 5), [1], Region.NW)
        assert berlin.date == date(2026, 6, 4)
        assert cologne.date == date(2026, 6, 3)

    def test_reminders_land_on_business_days(self, nw):
        for offset in range(0, 60):
            (reminder,) = calculate_reminders(date(2026, 12, 31), [offset], nw)
            assert is_business_day(reminder.date, nw)
            assert reminder.date <= reminder.original_date

    def test_to_dict(self, nw):
        (reminder,) = calculate_reminders(date(2026, 4, 13), [2], nw)
        assert reminder.to_dict() == {
            "offset_days": 2,
            "original_date": "2026-04-11",
            "date": "2026-04-10",
            "shifted": True,
        }


# ═══════════════════════════════════════════════════════════════════════════════
# PROPERTIES
# ═══════════════════════════════════════════════════════════════════════════════


def _days_of(year: int):
    current = date(year, 1, 1)
    while current.year == year:
        yield current
        current += timedelta(days=1)


class TestReminderProperties:
    @pytest.mark.parametrize("region", [Region.NW, Region.BY, Region.BE])
    def test_descending_offsets_give_non_decreasing_dates(self, region):
        offsets = [30, 14, 7, 3, 2, 1, 0]
        for end in _days_of(2026):
            dates = [r.date for r in calculate_reminders(end, offsets, region)]
            assert dates == sorted(dates), end
            assert all(d <= end for d in dates)


# ═══════════════════════════════════════════════════════════════════════════════
# HALBFRIST
# ═══════════════════════════════════════════════════════════════════════════════


class TestHalfPeriodReminder:
    def test_fourteen_day_span_has_none(self, nw):
        assert calculate_half_period_reminder(date(2026, 3, 16), date(2026, 3, 30), nw) is None

    def test_fifteen_day_span_has_one(self, nw):
        reminder = calculate_half_period_reminder(date(2026, 3, 16), date(2026, 3, 31), nw)
        assert reminder is not None
        assert reminder.date == date(2026, 3, 23)
        assert reminder.offset_days == 8

    def test_one_month(self, nw):
        reminder = calculate_half_period_reminder(date(2026, 3, 16), date(2026, 4, 15), nw)
        assert reminder.date == date(2026, 3, 31)
        assert reminder.shifted is False

    def test_midpoint_on_weekend_moves_earlier(self, nw):
        reminder = calculate_half_period_reminder(date(2026, 3, 2), date(2026, 3, 26), nw)
        assert reminder.original_date == date(2026, 3, 14)
        assert reminder.date == date(2026, 3, 13)
        assert reminder.shifted is True
        assert reminder.offset_days == 12

    def test_threshold_from_settings(self, nw, override_env):
        override_env(HALF_PERIOD_MIN_SPAN_DAYS="30")
        assert calculate_half_period_reminder(date(2026, 3, 16), date(2026, 4, 15), nw) is None
        assert calculate_half_period_reminder(date(2026, 3, 16), date(2026, 4, 16), nw) is not None

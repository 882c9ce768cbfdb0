"""
Fristen - Deadline Duration Arithmetic
Implements BGB §188 period arithmetic: years and months with month-end clamping,
then weeks, then days. Month/year steps use dateutil.relativedelta, which clamps
Jan-31 + 1 month to the last day of February and Feb-29 + 1 year to Feb-28.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from datetime import date
from typing import Any, Dict, Mapping

from dateutil.relativedelta import relativedelta

from fristen.core.calendar_days import shift_days
from fristen.core.exceptions import (
    EmptyDurationError,
    InvalidDurationError,
    UnrepresentableDateError,
)

# Both the English field names and the German ones used in case files are accepted.
_COMPONENT_ALIASES: dict[str, str] = {
    "days": "days",
    "weeks": "weeks",
    "months": "months",
    "years": "years",
    "tage": "days",
    "wochen": "weeks",
    "monate": "months",
    "jahre": "years",
}

_GERMAN_UNITS: tuple[tuple[str, str, str], ...] = (
    ("years", "Jahr", "Jahre"),
    ("months", "Monat", "Monate"),
    ("weeks", "Woche", "Wochen"),
    ("days", "Tag", "Tage"),
)


@dataclass(frozen=True)
class Duration:
    days: int = 0
    weeks: int = 0
    months: int = 0
    years: int = 0

    def __post_init__(self) -> None:
        components = self.to_dict()
        for value in components.values():
            if isinstance(value, bool) or not isinstance(value, int) or value < 0:
                raise InvalidDurationError(components)
        if not any(components.values()):
            raise EmptyDurationError(components)

    @property
    def has_calendar_component(self) -> bool:
        """True when the period contains months or years (BGB §188 Abs. 2 path)."""
        return self.months > 0 or self.years > 0

    def to_dict(self) -> Dict[str, int]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Duration":
        values: Dict[str, int] = {}
        for key, value in data.items():
            field_name = _COMPONENT_ALIASES.get(key.lower())
            if field_name is None:
                raise InvalidDurationError(dict(data), reason=f"unknown component {key!r}")
            if value is None:
                continue
            values[field_name] = value
        return cls(**values)

    def describe(self) -> str:
        """German description, e.g. ``"1 Monat, 2 Wochen"``."""
        parts = []
        for field_name, singular, plural in _GERMAN_UNITS:
            count = getattr(self, field_name)
            if count:
                parts.append(f"{count} {singular if count == 1 else plural}")
        return ", ".join(parts)

    def __str__(self) -> str:
        return self.describe()


# ─── Calendar-overflow-aware steps ───────────────────────────────────────────


def add_years(d: date, years: int) -> date:
    return _apply_relative(d, relativedelta(years=years), f"{years:+d} years")


def add_months(d: date, months: int) -> date:
    return _apply_relative(d, relativedelta(months=months), f"{months:+d} months")


def add_weeks(d: date, weeks: int) -> date:
    return shift_days(d, 7 * weeks)


def _apply_relative(d: date, delta: relativedelta, label: str) -> date:
    try:
        return d + delta
    except (ValueError, OverflowError):
        raise UnrepresentableDateError(d, label) from None


# ─── Composite arithmetic ────────────────────────────────────────────────────


def add_calendar_part(d: date, duration: Duration) -> date:
    """Apply only the year and month components, years first."""
    result = d
    if duration.years:
        result = add_years(result, duration.years)
    if duration.months:
        result = add_months(result, duration.months)
    return result


def add_day_part(d: date, duration: Duration) -> date:
    """Apply only the week and day components, weeks first."""
    result = d
    if duration.weeks:
        result = add_weeks(result, duration.weeks)
    if duration.days:
        result = shift_days(result, duration.days)
    return result


def add_duration(d: date, duration: Duration) -> date:
    """Add years, months, weeks, days in that order."""
    return add_day_part(add_calendar_part(d, duration), duration)


def subtract_duration(d: date, duration: Duration) -> date:
    """
    Subtract days, weeks, months, years in that order.
    Month-end clamping is not reversed: Feb-28 minus one month is Jan-28.
    """
    result = d
    if duration.days:
        result = shift_days(result, -duration.days)
    if duration.weeks:
        result = add_weeks(result, -duration.weeks)
    if duration.months:
        result = add_months(result, -duration.months)
    if duration.years:
        result = add_years(result, -duration.years)
    return result

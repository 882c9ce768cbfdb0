"""
Fristen - Holiday Provider
Wrapper around the `holidays` library for the German federal-state calendars.
Easter-relative holidays (Karfreitag, Ostermontag, Christi Himmelfahrt,
Pfingstmontag, Fronleichnam) come from dateutil's Easter computation inside
`holidays`; `easter_sunday` exposes the same computation for diagnostics.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass
from datetime import date
from types import MappingProxyType
from typing import Callable, Dict, FrozenSet, Mapping, Optional, Tuple, Union

import holidays
from dateutil.easter import easter
from holidays.constants import CATHOLIC, PUBLIC

from fristen.config import get_settings
from fristen.core.calendar_days import DateLike, as_calendar_day
from fristen.core.regions import Region

COUNTRY_CODE = "DE"

# States whose statewide holidays `holidays` files outside PUBLIC
# (Bavaria: Mariä Himmelfahrt is CATHOLIC there, PUBLIC in the Saarland).
STATE_CATEGORIES: Dict[Region, Tuple[str, ...]] = {
    Region.BY: (PUBLIC, CATHOLIC),
}

HolidayTable = Mapping[date, Tuple[str, ...]]
RegionLike = Union[Region, str]


@dataclass(frozen=True, order=True)
class Holiday:
    date: date
    name: str

    def to_dict(self) -> Dict[str, str]:
        return {"date": self.date.isoformat(), "name": self.name}


# ─── Computation ──────────────────────────────────────────────────────────────


def easter_sunday(year: int) -> date:
    """Western (Gregorian) Easter Sunday for the given year."""
    return easter(year)


def compute_holiday_table(year: int, region: RegionLike, language: Optional[str] = None) -> HolidayTable:
    """
    Build the read-only date -> holiday names table for one year and state.
    Pure: recomputed from scratch on every call.
    """
    state = Region.parse(region)
    lang = language or get_settings().HOLIDAY_LANGUAGE
    calendar = holidays.country_holidays(
        COUNTRY_CODE,
        subdiv=state.value,
        years=year,
        language=lang,
        categories=STATE_CATEGORIES.get(state, (PUBLIC,)),
    )
    table = {d: tuple(calendar.get_list(d)) for d in sorted(calendar) if d.year == year}
    return MappingProxyType(table)


# ─── Memoisation ──────────────────────────────────────────────────────────────


class HolidayCache:
    """
    Thread-safe, append-only store of holiday tables keyed by (year, state, language).
    Entries are read-only mappings and are never replaced once stored.
    """

    def __init__(self) -> None:
        self._tables: Dict[Tuple[int, Region, str], HolidayTable] = {}
        self._lock = threading.RLock()

    def get(self, year: int, region: Region, language: str) -> Optional[HolidayTable]:
        with self._lock:
            return self._tables.get((year, region, language))

    def get_or_compute(
        self,
        year: int,
        region: Region,
        language: str,
        factory: Callable[[], HolidayTable],
    ) -> HolidayTable:
        key = (year, region, language)
        with self._lock:
            table = self._tables.get(key)
            if table is None:
                table = factory()
                self._tables[key] = table
            return table

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._tables

    def __len__(self) -> int:
        with self._lock:
            return len(self._tables)


_default_cache = HolidayCache()


def default_cache() -> HolidayCache:
    return _default_cache


def holiday_table(
    year: int, region: RegionLike, cache: Optional[HolidayCache] = None
) -> HolidayTable:
    """
    Holiday table for a year and state. Served from `cache` when given, else
    from the process default cache if HOLIDAY_CACHE_ENABLED, else recomputed.
    """
    state = Region.parse(region)
    settings = get_settings()
    language = settings.HOLIDAY_LANGUAGE
    if cache is None and settings.HOLIDAY_CACHE_ENABLED:
        cache = _default_cache
    if cache is None:
        return compute_holiday_table(year, state, language)
    return cache.get_or_compute(
        year, state, language, lambda: compute_holiday_table(year, state, language)
    )


# ─── Public lookups ───────────────────────────────────────────────────────────


def holidays_for(year: int, region: RegionLike) -> FrozenSet[Holiday]:
    """All public holidays of `year` in the given state."""
    return frozenset(
        Holiday(date=d, name=name)
        for d, names in holiday_table(year, region).items()
        for name in names
    )


def holiday_name(d: DateLike, region: RegionLike) -> Optional[str]:
    """Holiday name(s) on `d` in the given state, joined with "; ", or None."""
    day = as_calendar_day(d)
    names = holiday_table(day.year, region).get(day)
    if not names:
        return None
    return "; ".join(names)


def is_holiday(d: DateLike, region: RegionLike) -> bool:
    day = as_calendar_day(d)
    return day in holiday_table(day.year, region)

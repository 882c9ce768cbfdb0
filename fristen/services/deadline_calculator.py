"""
Fristen - Deadline Calculator (BGB §§187-193)
Forward calculation from the triggering event to the binding end date, including
§193 postponement over weekends and public holidays, and the backward inverse
from a known end date to the latest triggering date.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple

from fristen.core.calendar_days import DateLike, as_calendar_day, shift_days, weekday_label
from fristen.core.duration import (
    Duration,
    add_calendar_part,
    add_day_part,
    add_months,
    subtract_duration,
)
from fristen.core.exceptions import UnsupportedDeadlineKindError
from fristen.core.holiday_calendar import holiday_name
from fristen.core.logging import get_logger
from fristen.core.regions import Region

logger = get_logger(__name__)


# ─── Deadline kinds ───────────────────────────────────────────────────────────


class DeadlineKind(str, Enum):
    """
    EVENT (Ereignisfrist, §187 Abs. 1): the triggering day is not counted.
    START (Beginnfrist, §187 Abs. 2): the triggering day is counted from 00:00.
    """

    EVENT = "EREIGNISFRIST"
    START = "BEGINNFRIST"

    @classmethod
    def parse(cls, value: Any) -> "DeadlineKind":
        if isinstance(value, DeadlineKind):
            return value
        if isinstance(value, str):
            token = value.strip().upper()
            for kind in cls:
                if token in (kind.value, kind.name):
                    return kind
        raise UnsupportedDeadlineKindError(value)


class PostponementCause(str, Enum):
    SATURDAY = "Saturday"
    SUNDAY = "Sunday"
    HOLIDAY = "Holiday"


# ─── Request / result types ───────────────────────────────────────────────────


@dataclass(frozen=True)
class DeadlineRequest:
    trigger_date: date
    kind: DeadlineKind
    duration: Duration
    region: Region
    apply_postponement: bool = True

    def __post_init__(self) -> None:
        object.__setattr__(self, "trigger_date", as_calendar_day(self.trigger_date))
        object.__setattr__(self, "kind", DeadlineKind.parse(self.kind))
        object.__setattr__(self, "region", Region.parse(self.region))
        if not isinstance(self.duration, Duration):
            object.__setattr__(self, "duration", Duration.from_dict(self.duration))

    @classmethod
    def from_preset(
        cls,
        preset: Any,
        trigger_date: DateLike,
        region: Region | str,
        apply_postponement: bool = True,
    ) -> "DeadlineRequest":
        return cls(
            trigger_date=as_calendar_day(trigger_date),
            kind=preset.kind,
            duration=preset.duration,
            region=Region.parse(region),
            apply_postponement=apply_postponement,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "trigger_date": self.trigger_date.isoformat(),
            "kind": self.kind.value,
            "duration": self.duration.to_dict(),
            "region": self.region.value,
            "apply_postponement": self.apply_postponement,
        }


@dataclass(frozen=True)
class PostponementReason:
    date: date
    cause: PostponementCause
    label: str  # holiday name, "Samstag" or "Sonntag"

    def to_dict(self) -> Dict[str, str]:
        return {"date": self.date.isoformat(), "cause": self.cause.value, "label": self.label}


@dataclass(frozen=True)
class DeadlineResult:
    request: DeadlineRequest
    start_date: date
    raw_end_date: date
    end_date: date
    postponed: bool
    postponement_reasons: Tuple[PostponementReason, ...] = field(default_factory=tuple)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "request": self.request.to_dict(),
            "start_date": self.start_date.isoformat(),
            "raw_end_date": self.raw_end_date.isoformat(),
            "end_date": self.end_date.isoformat(),
            "postponed": self.postponed,
            "postponement_reasons": [r.to_dict() for r in self.postponement_reasons],
        }


@dataclass(frozen=True)
class BackwardRequest:
    end_date: date
    kind: DeadlineKind
    duration: Duration
    region: Region

    def __post_init__(self) -> None:
        object.__setattr__(self, "end_date", as_calendar_day(self.end_date))
        object.__setattr__(self, "kind", DeadlineKind.parse(self.kind))
        object.__setattr__(self, "region", Region.parse(self.region))
        if not isinstance(self.duration, Duration):
            object.__setattr__(self, "duration", Duration.from_dict(self.duration))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "end_date": self.end_date.isoformat(),
            "kind": self.kind.value,
            "duration": self.duration.to_dict(),
            "region": self.region.value,
        }


@dataclass(frozen=True)
class BackwardResult:
    request: BackwardRequest
    latest_trigger_date: date
    end_date: date

    def to_dict(self) -> Dict[str, Any]:
        return {
            "request": self.request.to_dict(),
            "latest_trigger_date": self.latest_trigger_date.isoformat(),
            "end_date": self.end_date.isoformat(),
        }


# ─── Start / raw end derivation ───────────────────────────────────────────────


def compute_start_date(trigger_date: date, kind: DeadlineKind) -> date:
    if kind is DeadlineKind.EVENT:
        return shift_days(trigger_date, 1)
    if kind is DeadlineKind.START:
        return trigger_date
    raise UnsupportedDeadlineKindError(kind)


def _event_end(trigger_date: date, duration: Duration) -> date:
    # §188 Abs. 2: month/year periods end on the day whose number matches the
    # event day, so they are applied to the event day itself.
    if duration.has_calendar_component:
        return add_day_part(add_calendar_part(trigger_date, duration), duration)
    first_counted_day = shift_days(trigger_date, 1)
    return shift_days(add_day_part(first_counted_day, duration), -1)


def _start_end(trigger_date: date, duration: Duration) -> date:
    # §188 Abs. 2 (second case): the period ends on the day before the
    # numerically corresponding day.
    if duration.has_calendar_component:
        corresponding = add_day_part(add_calendar_part(trigger_date, duration), duration)
        return shift_days(corresponding, -1)
    return shift_days(add_day_part(trigger_date, duration), -1)


def compute_raw_end_date(trigger_date: date, kind: DeadlineKind, duration: Duration) -> date:
    """End date before any §193 postponement."""
    if kind is DeadlineKind.EVENT:
        return _event_end(trigger_date, duration)
    if kind is DeadlineKind.START:
        return _start_end(trigger_date, duration)
    raise UnsupportedDeadlineKindError(kind)


# ─── §193 postponement ────────────────────────────────────────────────────────


def postponement_reason(d: date, region: Region) -> Optional[PostponementReason]:
    """Why `d` is not a business day; None if it is one."""
    name = holiday_name(d, region)
    if name:
        return PostponementReason(date=d, cause=PostponementCause.HOLIDAY, label=name)
    if d.weekday() == 5:
        return PostponementReason(date=d, cause=PostponementCause.SATURDAY, label=weekday_label(d))
    if d.weekday() == 6:
        return PostponementReason(date=d, cause=PostponementCause.SUNDAY, label=weekday_label(d))
    return None


def apply_postponement(d: date, region: Region) -> Tuple[date, List[PostponementReason]]:
    """
    Move `d` forward until it is a business day, recording every skipped day.
    A business day input is returned unchanged with no reasons.
    """
    reasons: List[PostponementReason] = []
    current = d
    reason = postponement_reason(current, region)
    while reason is not None:
        reasons.append(reason)
        current = shift_days(current, 1)
        reason = postponement_reason(current, region)
    return current, reasons


# ─── Public API ───────────────────────────────────────────────────────────────


def calculate_deadline(request: DeadlineRequest) -> DeadlineResult:
    """Forward calculation: triggering date -> binding end date."""
    start_date = compute_start_date(request.trigger_date, request.kind)
    raw_end_date = compute_raw_end_date(request.trigger_date, request.kind, request.duration)

    end_date = raw_end_date
    reasons: List[PostponementReason] = []
    if request.apply_postponement:
        end_date, reasons = apply_postponement(raw_end_date, request.region)

    logger.debug(
        "deadline_calculated",
        trigger_date=request.trigger_date.isoformat(),
        kind=request.kind.value,
        duration=request.duration.describe(),
        region=request.region.value,
        raw_end_date=raw_end_date.isoformat(),
        end_date=end_date.isoformat(),
        postponed_days=len(reasons),
    )

    return DeadlineResult(
        request=request,
        start_date=start_date,
        raw_end_date=raw_end_date,
        end_date=end_date,
        postponed=bool(reasons),
        postponement_reasons=tuple(reasons),
    )


def calculate_backward(request: BackwardRequest) -> BackwardResult:
    """
    Backward calculation: known end date -> latest triggering date.
    Inverts the raw forward rule only; postponement is not undone.
    """
    if request.kind is DeadlineKind.EVENT:
        latest = subtract_duration(request.end_date, request.duration)
    elif request.kind is DeadlineKind.START:
        latest = shift_days(subtract_duration(request.end_date, request.duration), 1)
    else:
        raise UnsupportedDeadlineKindError(request.kind)

    logger.debug(
        "deadline_back_calculated",
        end_date=request.end_date.isoformat(),
        kind=request.kind.value,
        duration=request.duration.describe(),
        latest_trigger_date=latest.isoformat(),
    )

    return BackwardResult(request=request, latest_trigger_date=latest, end_date=request.end_date)


# ─── Service modes (Sonderfälle der Zustellung) ───────────────────────────────


class ServiceMode(str, Enum):
    STANDARD = "STANDARD"
    PUBLIC_NOTICE = "OEFFENTLICHE_ZUSTELLUNG"  # §188 ZPO
    EU_ABROAD = "AUSLANDSZUSTELLUNG_EU"  # EU-ZustVO

    @property
    def description(self) -> Optional[str]:
        return SERVICE_MODE_DESCRIPTIONS.get(self)


SERVICE_MODE_DESCRIPTIONS: dict[ServiceMode, str] = {
    ServiceMode.PUBLIC_NOTICE: "Öffentliche Zustellung (§ 188 ZPO): Fristbeginn 1 Monat nach Aushang",
    ServiceMode.EU_ABROAD: "Auslandszustellung (EU-ZustVO): Verlängerte Zustellungsdauer (+14 Tage EU)",
}

EU_ABROAD_EXTRA_DAYS = 14


@dataclass(frozen=True)
class ServiceAdjustment:
    mode: ServiceMode
    original_date: date
    adjusted_date: date

    @property
    def extra_days(self) -> int:
        return (self.adjusted_date - self.original_date).days

    @property
    def description(self) -> Optional[str]:
        return self.mode.description

    def to_dict(self) -> Dict[str, Any]:
        return {
            "mode": self.mode.value,
            "original_date": self.original_date.isoformat(),
            "adjusted_date": self.adjusted_date.isoformat(),
            "extra_days": self.extra_days,
            "description": self.description,
        }


def adjust_trigger_date(d: DateLike, mode: ServiceMode = ServiceMode.STANDARD) -> ServiceAdjustment:
    """Move the triggering date for special forms of service."""
    original = as_calendar_day(d)
    mode = ServiceMode(mode)
    if mode is ServiceMode.PUBLIC_NOTICE:
        adjusted = add_months(original, 1)
    elif mode is ServiceMode.EU_ABROAD:
        adjusted = shift_days(original, EU_ABROAD_EXTRA_DAYS)
    else:
        adjusted = original
    return ServiceAdjustment(mode=mode, original_date=original, adjusted_date=adjusted)

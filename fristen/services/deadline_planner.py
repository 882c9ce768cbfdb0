"""
Fristen - Deadline Planner
Bundles a forward calculation with its Vorfristen, Halbfrist and preset metadata,
the shape calling code stores alongside a case.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Dict, Iterable, Optional, Tuple

from fristen.core.calendar_days import DateLike
from fristen.core.regions import Region
from fristen.services.deadline_calculator import (
    DeadlineRequest,
    DeadlineResult,
    ServiceAdjustment,
    ServiceMode,
    adjust_trigger_date,
    calculate_deadline,
)
from fristen.services.presets import Preset
from fristen.services.reminders import (
    Reminder,
    calculate_half_period_reminder,
    calculate_reminders,
)


@dataclass(frozen=True)
class DeadlinePlan:
    result: DeadlineResult
    reminders: Tuple[Reminder, ...]
    half_period_reminder: Optional[Reminder]
    service_adjustment: ServiceAdjustment
    preset: Optional[Preset] = None

    @property
    def is_notfrist(self) -> bool:
        return bool(self.preset and self.preset.is_notfrist)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "result": self.result.to_dict(),
            "reminders": [r.to_dict() for r in self.reminders],
            "half_period_reminder": (
                self.half_period_reminder.to_dict() if self.half_period_reminder else None
            ),
            "service_adjustment": self.service_adjustment.to_dict(),
            "preset": self.preset.to_dict() if self.preset else None,
            "is_notfrist": self.is_notfrist,
        }


def plan_deadline(
    request: DeadlineRequest,
    reminder_offsets: Optional[Iterable[int]] = None,
    preset: Optional[Preset] = None,
    service_mode: ServiceMode = ServiceMode.STANDARD,
) -> DeadlinePlan:
    """
    Forward deadline plus reminders. Offsets come from `reminder_offsets`, else the
    preset's defaults, else Settings.DEFAULT_REMINDER_OFFSETS.
    """
    adjustment = adjust_trigger_date(request.trigger_date, service_mode)
    if adjustment.adjusted_date != request.trigger_date:
        request = replace(request, trigger_date=adjustment.adjusted_date)

    result = calculate_deadline(request)

    if reminder_offsets is None and preset is not None:
        reminder_offsets = preset.default_reminder_offsets
    reminders = calculate_reminders(result.end_date, reminder_offsets, request.region)
    half_period = calculate_half_period_reminder(result.start_date, result.end_date, request.region)

    return DeadlinePlan(
        result=result,
        reminders=tuple(reminders),
        half_period_reminder=half_period,
        service_adjustment=adjustment,
        preset=preset,
    )


def plan_from_preset(
    preset: Preset,
    trigger_date: DateLike,
    region: Region | str,
    apply_postponement: bool = True,
    reminder_offsets: Optional[Iterable[int]] = None,
    service_mode: ServiceMode = ServiceMode.STANDARD,
) -> DeadlinePlan:
    request = DeadlineRequest.from_preset(preset, trigger_date, region, apply_postponement)
    return plan_deadline(
        request,
        reminder_offsets=reminder_offsets,
        preset=preset,
        service_mode=service_mode,
    )

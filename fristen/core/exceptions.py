"""
Fristen - Unified Custom Exceptions.
Each exception carries: message, error_code, optional detail dict.
"""

from __future__ import annotations

from datetime import date
from typing import Any, Dict, List, Optional

# ─────────────────────────────────────────────────────────────────────────────
# BASE
# ─────────────────────────────────────────────────────────────────────────────


class FristenError(Exception):
    """Root exception for all deadline calculation errors."""

    error_code: str = "FRISTEN_ERROR"

    def __init__(self, message: str, detail: Optional[Dict[str, Any]] = None) -> None:
        self.message = message
        self.detail = detail or {}
        super().__init__(message)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "error_code": self.error_code,
            "message": self.message,
            "detail": self.detail,
        }


# ─────────────────────────────────────────────────────────────────────────────
# INPUT VALIDATION
# ─────────────────────────────────────────────────────────────────────────────


class InvalidDurationError(FristenError):
    error_code = "INVALID_DURATION"

    def __init__(
        self, components: Dict[str, Any], reason: str = "components must be non-negative integers"
    ) -> None:
        self.components = components
        self.reason = reason
        super().__init__(
            message=f"Invalid duration {components!r}: {reason}",
            detail={"components": dict(components), "reason": reason},
        )


class EmptyDurationError(InvalidDurationError):
    """Raised when every duration component is zero."""

    error_code = "EMPTY_DURATION"

    def __init__(self, components: Dict[str, Any]) -> None:
        super().__init__(components, reason="at least one component must be non-zero")


class UnknownRegionError(FristenError):
    error_code = "UNKNOWN_REGION"

    def __init__(self, code: Any) -> None:
        self.code = code
        super().__init__(
            message=f"Unknown federal state code: {code!r}",
            detail={"code": str(code)},
        )


class InvalidCalendarDayError(FristenError):
    error_code = "INVALID_CALENDAR_DAY"

    def __init__(self, value: Any) -> None:
        self.value = value
        super().__init__(
            message=f"Expected a date or datetime, got {type(value).__name__}",
            detail={"type": type(value).__name__},
        )


class UnsupportedDeadlineKindError(FristenError):
    error_code = "UNSUPPORTED_DEADLINE_KIND"

    def __init__(self, kind: Any) -> None:
        self.kind = kind
        super().__init__(
            message=f"Unsupported deadline kind: {kind!r}",
            detail={"kind": str(kind)},
        )


class InvalidReminderOffsetError(FristenError):
    error_code = "INVALID_REMINDER_OFFSET"

    def __init__(self, offset: Any) -> None:
        self.offset = offset
        super().__init__(
            message=f"Reminder offset must be a non-negative number of days, got {offset!r}",
            detail={"offset": str(offset)},
        )


# ─────────────────────────────────────────────────────────────────────────────
# CALENDAR ARITHMETIC
# ─────────────────────────────────────────────────────────────────────────────


class UnrepresentableDateError(FristenError):
    """Raised when date arithmetic leaves the supported calendar range."""

    error_code = "UNREPRESENTABLE_DATE"

    def __init__(self, base_date: date, operation: str) -> None:
        self.base_date = base_date
        self.operation = operation
        super().__init__(
            message=f"Cannot apply {operation} to {base_date.isoformat()}: result is outside the representable calendar",
            detail={"base_date": base_date.isoformat(), "operation": operation},
        )


# ─────────────────────────────────────────────────────────────────────────────
# PRESET CATALOG
# ─────────────────────────────────────────────────────────────────────────────


class UnknownPresetError(FristenError):
    error_code = "UNKNOWN_PRESET"

    def __init__(self, name: str, category: Optional[str] = None) -> None:
        self.name = name
        self.category = category
        scope = f" in category {category!r}" if category else ""
        super().__init__(
            message=f"No deadline preset named {name!r}{scope}",
            detail={"name": name, "category": category},
        )


class AmbiguousPresetError(FristenError):
    error_code = "AMBIGUOUS_PRESET"

    def __init__(self, name: str, categories: List[str]) -> None:
        self.name = name
        self.categories = categories
        super().__init__(
            message=f"Preset name {name!r} exists in several categories: {', '.join(categories)}",
            detail={"name": name, "categories": list(categories)},
        )

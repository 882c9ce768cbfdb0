"""
Fristen - Default Deadline Presets
Common German statutory deadlines for quick selection. Read-only configuration:
calling code looks a preset up and feeds its kind and duration to the calculator.
The same name may recur in several areas of law with different legal bases.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple

from fristen.core.duration import Duration
from fristen.core.exceptions import AmbiguousPresetError, UnknownPresetError
from fristen.services.deadline_calculator import DeadlineKind


class PresetCategory(str, Enum):
    CIVIL_PROCEDURE = "zivilprozess"
    ADMINISTRATIVE = "verwaltungsrecht"
    CRIMINAL = "strafrecht"
    LABOUR = "arbeitsrecht"
    GENERAL = "allgemein"


@dataclass(frozen=True)
class Preset:
    name: str
    legal_basis: str
    kind: DeadlineKind
    duration: Duration
    is_notfrist: bool
    default_reminder_offsets: Tuple[int, ...]
    category: PresetCategory

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "legal_basis": self.legal_basis,
            "kind": self.kind.value,
            "duration": self.duration.to_dict(),
            "is_notfrist": self.is_notfrist,
            "default_reminder_offsets": list(self.default_reminder_offsets),
            "category": self.category.value,
        }


_CIVIL = PresetCategory.CIVIL_PROCEDURE
_ADMIN = PresetCategory.ADMINISTRATIVE
_CRIMINAL = PresetCategory.CRIMINAL
_LABOUR = PresetCategory.LABOUR
_GENERAL = PresetCategory.GENERAL
_EVENT = DeadlineKind.EVENT

DEFAULT_PRESETS: Tuple[Preset, ...] = (
    # ── Zivilprozess ──────────────────────────────────────────────────────────
    Preset("Berufungsfrist", "§ 517 ZPO", _EVENT, Duration(months=1), True, (7, 3, 1), _CIVIL),
    Preset("Berufungsbegründungsfrist", "§ 520 Abs. 2 ZPO", _EVENT, Duration(months=2), False, (14, 7, 3), _CIVIL),
    Preset("Revisionsfrist", "§ 548 ZPO", _EVENT, Duration(months=1), True, (7, 3, 1), _CIVIL),
    Preset("Revisionsbegründungsfrist", "§ 551 Abs. 2 ZPO", _EVENT, Duration(months=2), False, (14, 7, 3), _CIVIL),
    Preset("Einspruchsfrist (Versäumnisurteil)", "§ 339 Abs. 1 ZPO", _EVENT, Duration(weeks=2), True, (7, 3, 1), _CIVIL),
    Preset("Klageerwiderungsfrist", "§ 276 Abs. 1 ZPO", _EVENT, Duration(weeks=2), False, (7, 3, 1), _CIVIL),
    Preset("Klagefrist", "§ 586 Abs. 1 ZPO", _EVENT, Duration(months=1), True, (7, 3, 1), _CIVIL),
    Preset("Beschwerdeschrift", "§ 569 Abs. 1 ZPO", _EVENT, Duration(weeks=2), True, (7, 3, 1), _CIVIL),
    Preset("Rechtsbeschwerdeschrift", "§ 575 Abs. 1 ZPO", _EVENT, Duration(months=1), True, (7, 3, 1), _CIVIL),
    # ── Verwaltungsrecht ──────────────────────────────────────────────────────
    Preset("Widerspruchsfrist", "§ 70 Abs. 1 VwGO", _EVENT, Duration(months=1), False, (7, 3, 1), _ADMIN),
    Preset("Klagefrist (Verwaltungsrecht)", "§ 74 Abs. 1 VwGO", _EVENT, Duration(months=1), False, (7, 3, 1), _ADMIN),
    Preset("Antrag auf Zulassung der Berufung", "§ 124a Abs. 4 VwGO", _EVENT, Duration(months=1), False, (7, 3, 1), _ADMIN),
    # ── Strafrecht ────────────────────────────────────────────────────────────
    Preset("Berufungsfrist (Strafrecht)", "§ 314 StPO", _EVENT, Duration(weeks=1), False, (3, 1), _CRIMINAL),
    Preset("Revisionsfrist (Strafrecht)", "§ 341 StPO", _EVENT, Duration(weeks=1), False, (3, 1), _CRIMINAL),
    # ── Arbeitsrecht ──────────────────────────────────────────────────────────
    Preset("Kündigungsschutzklage", "§ 4 KSchG", _EVENT, Duration(weeks=3), False, (7, 3, 1), _LABOUR),
    # ── Allgemein ─────────────────────────────────────────────────────────────
    Preset("Widerspruchsfrist", "§ 355 BGB", _EVENT, Duration(weeks=2), False, (7, 3, 1), _GENERAL),
    Preset("Anfechtungsfrist", "§ 124 BGB", _EVENT, Duration(years=1), False, (30, 14, 7), _GENERAL),
    Preset("Verjährungsfrist (regelmäßig)", "§ 195 BGB", _EVENT, Duration(years=3), False, (90, 30, 14), _GENERAL),
)


def find_presets(
    name: Optional[str] = None,
    category: Optional[PresetCategory | str] = None,
    presets: Tuple[Preset, ...] = DEFAULT_PRESETS,
) -> List[Preset]:
    """Presets matching an exact name and/or category, in catalog order."""
    wanted = PresetCategory(category) if category is not None else None
    return [
        p
        for p in presets
        if (name is None or p.name == name) and (wanted is None or p.category is wanted)
    ]


def get_preset(
    name: str,
    category: Optional[PresetCategory | str] = None,
    presets: Tuple[Preset, ...] = DEFAULT_PRESETS,
) -> Preset:
    matches = find_presets(name=name, category=category, presets=presets)
    if not matches:
        raise UnknownPresetError(name, PresetCategory(category).value if category else None)
    if len(matches) > 1:
        raise AmbiguousPresetError(name, [p.category.value for p in matches])
    return matches[0]


def presets_by_category(
    presets: Tuple[Preset, ...] = DEFAULT_PRESETS,
) -> Dict[PresetCategory, List[Preset]]:
    grouped: Dict[PresetCategory, List[Preset]] = {}
    for preset in presets:
        grouped.setdefault(preset.category, []).append(preset)
    return grouped

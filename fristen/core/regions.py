"""
Fristen - German Federal States (Bundesländer)
Closed set of region codes selecting the applicable holiday calendar.
"""

from __future__ import annotations

from enum import Enum

from fristen.core.exceptions import UnknownRegionError

STATE_NAMES: dict[str, str] = {
    "BW": "Baden-Württemberg",
    "BY": "Bayern",
    "BE": "Berlin",
    "BB": "Brandenburg",
    "HB": "Bremen",
    "HE": "Hessen",
    "HH": "Hamburg",
    "MV": "Mecklenburg-Vorpommern",
    "NI": "Niedersachsen",
    "NW": "Nordrhein-Westfalen",
    "RP": "Rheinland-Pfalz",
    "SL": "Saarland",
    "SN": "Sachsen",
    "ST": "Sachsen-Anhalt",
    "SH": "Schleswig-Holstein",
    "TH": "Thüringen",
}


class Region(str, Enum):
    BW = "BW"
    BY = "BY"
    BE = "BE"
    BB = "BB"
    HB = "HB"
    HE = "HE"
    HH = "HH"
    MV = "MV"
    NI = "NI"
    NW = "NW"
    RP = "RP"
    SL = "SL"
    SN = "SN"
    ST = "ST"
    SH = "SH"
    TH = "TH"

    @property
    def state_name(self) -> str:
        return STATE_NAMES[self.value]

    @classmethod
    def parse(cls, code: "str | Region") -> "Region":
        """Resolve a state code such as ``"nw"`` or ``"NW"``."""
        if isinstance(code, Region):
            return code
        if not isinstance(code, str):
            raise UnknownRegionError(code)
        try:
            return cls(code.strip().upper())
        except ValueError:
            raise UnknownRegionError(code) from None

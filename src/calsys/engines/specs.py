"""
calsys.engines.specs
--------------------
Pure data descriptions of every built-in calendar system. Systems are built
from these by calsys.engines.factory.
"""

from __future__ import annotations
from dataclasses import dataclass, replace
from typing import Dict, Literal

from ..core.types import YearRange
from . import lunar_data

SystemKind = Literal["gregorian", "lunar"]

@dataclass(frozen=True)
class SystemSpec:
    kind: SystemKind
    type: str
    label_key: str
    year_range: YearRange

    @staticmethod
    def like(name: str) -> "SystemSpec":
        if name not in ALL_SPECS:
            raise KeyError(f"Unknown base spec '{name}'. Available: {sorted(ALL_SPECS)}")
        return ALL_SPECS[name]

    def tweak(self, **kwargs) -> "SystemSpec":
        return replace(self, **kwargs)


GREGORIAN = SystemSpec(
    kind="gregorian",
    type="gregorian",
    label_key="calendar.gregorian",
    year_range=(1900, 2100),
)

LUNAR = SystemSpec(
    kind="lunar",
    type="lunar",
    label_key="calendar.lunar",
    year_range=(lunar_data.FIRST_YEAR, lunar_data.LAST_YEAR),
)

# Registration order is the order pickers offer the systems in.
ALL_SPECS: Dict[str, SystemSpec] = {
    GREGORIAN.type: GREGORIAN,
    LUNAR.type: LUNAR,
}

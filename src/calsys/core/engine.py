from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Dict, List, Optional, Protocol, Tuple

from .types import CalendarDate, GregorianDate, MonthOption, YearRange

logger = logging.getLogger(__name__)

DEFAULT_TYPE = "gregorian"

class CalendarSystem(Protocol):
    type: str
    label_key: str

    def to_gregorian(self, date: CalendarDate) -> GregorianDate: ...
    def from_gregorian(self, date: GregorianDate) -> CalendarDate: ...
    def format_date(self, date: CalendarDate) -> str: ...
    def get_months(self, year: int) -> List[MonthOption]: ...
    def get_days_in_month(self, year: int, month: int) -> int: ...
    def get_year_range(self) -> YearRange: ...

@dataclass
class CalendarRegistry:
    _systems: Dict[str, CalendarSystem]

    def __post_init__(self) -> None:
        if DEFAULT_TYPE not in self._systems:
            raise KeyError(f"Registry needs a '{DEFAULT_TYPE}' system as fallback.")

    def get(self, name: Optional[str]) -> CalendarSystem:
        system = self._systems.get(name) if isinstance(name, str) else None
        if system is None:
            logger.debug("Unknown calendar type %r, using %s", name, DEFAULT_TYPE)
            return self._systems[DEFAULT_TYPE]
        return system

    def has(self, name: Optional[str]) -> bool:
        return isinstance(name, str) and name in self._systems

    def types(self) -> Tuple[str, ...]:
        """Registered identifiers in registration order."""
        return tuple(self._systems)

    def list(self) -> List[str]:
        return sorted(self._systems.keys())

    def register(self, name: str, system: CalendarSystem, *, overwrite: bool = False) -> None:
        if (not overwrite) and (name in self._systems):
            raise KeyError(f"Calendar system '{name}' already exists. Use overwrite=True to replace.")
        self._systems[name] = system

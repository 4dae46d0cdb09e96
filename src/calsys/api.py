from __future__ import annotations

from typing import List, Optional, Tuple

from .core.engine import CalendarRegistry, CalendarSystem
from .core.types import CalendarDate, GregorianDate, MonthOption, YearRange
from .engines.specs import ALL_SPECS, SystemSpec
from .engines.factory import make_system as _make_system

# Built-in identifiers, in picker order.
SUPPORTED_CALENDAR_TYPES: Tuple[str, ...] = tuple(ALL_SPECS)

_registry: Optional[CalendarRegistry] = None

def set_registry(reg: CalendarRegistry) -> None:
    global _registry
    _registry = reg

def _reg() -> CalendarRegistry:
    if _registry is None:
        raise RuntimeError("Calendar registry not initialized")
    return _registry

def get_calendar_system(type: Optional[str]) -> CalendarSystem:
    """Look up a system by identifier; anything unknown gets the Gregorian system."""
    return _reg().get(type)

def supported_calendar_types() -> Tuple[str, ...]:
    return _reg().types()

def is_supported(type: Optional[str]) -> bool:
    return _reg().has(type)

def list_systems() -> List[str]:
    return _reg().list()

def make_system(spec: SystemSpec) -> CalendarSystem:
    return _make_system(spec)

def register_system(name: str, system: CalendarSystem, *, overwrite: bool = False) -> None:
    _reg().register(name, system, overwrite=overwrite)

# ============================================================
# Shortcuts resolving the system through the registry
# ============================================================

def to_gregorian(type: Optional[str], date: CalendarDate) -> GregorianDate:
    return get_calendar_system(type).to_gregorian(date)

def from_gregorian(type: Optional[str], date: GregorianDate) -> CalendarDate:
    return get_calendar_system(type).from_gregorian(date)

def format_date(type: Optional[str], date: CalendarDate) -> str:
    return get_calendar_system(type).format_date(date)

def months_in_year(type: Optional[str], year: int) -> List[MonthOption]:
    return get_calendar_system(type).get_months(year)

def days_in_month(type: Optional[str], year: int, month: int) -> int:
    return get_calendar_system(type).get_days_in_month(year, month)

def year_range(type: Optional[str]) -> YearRange:
    return get_calendar_system(type).get_year_range()

"""
Date-picker adapter.

Pure state transitions for a picker that lets the user choose a calendar
type, then year, month and day from the choices the chosen system offers.
Every handler returns a new PickerValue whose day is already clamped to the
selected month, so the value handed to persistence is always convertible.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import List, Optional, Tuple

from .api import get_calendar_system, supported_calendar_types
from .core.errors import UnsupportedYearError
from .core.types import CalendarDate, MonthOption

PREVIEW_TYPE = "lunar"


@dataclass(frozen=True)
class PickerValue:
    calendar_type: str
    day: int
    month: int
    year: int

    @property
    def date(self) -> CalendarDate:
        return CalendarDate(day=self.day, month=self.month, year=self.year)


@dataclass(frozen=True)
class Preview:
    label_key: str
    text: str


def default_value(today: Optional[date] = None) -> PickerValue:
    today = today or date.today()
    return PickerValue(calendar_type="gregorian", day=today.day, month=today.month, year=today.year)


def emit(calendar_type: str, year: int, month: int, day: int) -> PickerValue:
    system = get_calendar_system(calendar_type)
    max_day = system.get_days_in_month(year, month)
    return PickerValue(calendar_type=system.type, day=min(day, max_day), month=month, year=year)


def change_type(value: PickerValue, new_type: str) -> PickerValue:
    """Keep the same day, re-expressed in the newly selected system."""
    current = get_calendar_system(value.calendar_type)
    target = get_calendar_system(new_type)
    converted = target.from_gregorian(current.to_gregorian(value.date))
    return emit(target.type, converted.year, converted.month, converted.day)


def change_year(value: PickerValue, year: int) -> PickerValue:
    months = get_calendar_system(value.calendar_type).get_months(year)
    if any(opt.value == value.month for opt in months):
        month = value.month
    else:
        month = months[0].value if months else 1
    return emit(value.calendar_type, year, month, value.day)


def change_month(value: PickerValue, month: int) -> PickerValue:
    return emit(value.calendar_type, value.year, month, value.day)


def change_day(value: PickerValue, day: int) -> PickerValue:
    return emit(value.calendar_type, value.year, value.month, day)


def on_gregorian_pick(value: Optional[date]) -> Optional[PickerValue]:
    """The Gregorian widget hands over a plain date (or nothing when cleared)."""
    if value is None:
        return None
    return emit("gregorian", value.year, value.month, value.day)


# ============================================================
# Choices offered to the user
# ============================================================

def segment_options() -> List[Tuple[str, str]]:
    return [(t, get_calendar_system(t).label_key) for t in supported_calendar_types()]


def year_options(calendar_type: str) -> List[int]:
    lo, hi = get_calendar_system(calendar_type).get_year_range()
    return list(range(lo, hi + 1))


def month_options(value: PickerValue) -> List[MonthOption]:
    return get_calendar_system(value.calendar_type).get_months(value.year)


def day_options(value: PickerValue) -> List[int]:
    n = get_calendar_system(value.calendar_type).get_days_in_month(value.year, value.month)
    return list(range(1, n + 1))


def preview(value: PickerValue) -> Preview:
    """The same day shown in the other representation, under the picker."""
    system = get_calendar_system(value.calendar_type)
    if system.type == "gregorian":
        other = get_calendar_system(PREVIEW_TYPE)
        try:
            text = other.format_date(other.from_gregorian(value.date))
        except UnsupportedYearError:
            # days before the table's first new year have no lunar rendering
            text = ""
        return Preview(other.label_key, text)
    gregorian = get_calendar_system("gregorian")
    return Preview(gregorian.label_key, gregorian.format_date(system.to_gregorian(value.date)))


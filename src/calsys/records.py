"""
Persisted form of a user-entered date.

The Gregorian fields are canonical and drive sorting and reminders. For
non-Gregorian input the original native tuple is stored verbatim next to
them, so redisplay shows exactly what the user picked.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .api import get_calendar_system
from .core.types import CalendarDate, GregorianDate
from .picker import PickerValue


@dataclass(frozen=True)
class StoredDate:
    day: int
    month: int
    year: int
    calendar_type: str = "gregorian"
    original_day: Optional[int] = None
    original_month: Optional[int] = None
    original_year: Optional[int] = None

    @classmethod
    def from_picker(cls, value: PickerValue) -> "StoredDate":
        system = get_calendar_system(value.calendar_type)
        g = system.to_gregorian(value.date)
        if system.type == "gregorian":
            return cls(day=g.day, month=g.month, year=g.year)
        return cls(
            day=g.day, month=g.month, year=g.year,
            calendar_type=system.type,
            original_day=value.day,
            original_month=value.month,
            original_year=value.year,
        )

    @property
    def gregorian(self) -> GregorianDate:
        return GregorianDate(day=self.day, month=self.month, year=self.year)

    @property
    def original(self) -> Optional[CalendarDate]:
        if None in (self.original_day, self.original_month, self.original_year):
            return None
        return CalendarDate(day=self.original_day, month=self.original_month, year=self.original_year)

    def has_original(self) -> bool:
        return self.calendar_type != "gregorian" and self.original is not None

    def to_picker(self) -> PickerValue:
        """Restore the picker state the record was saved from."""
        system = get_calendar_system(self.calendar_type)
        native = self.original if self.has_original() else None
        if native is None or system.type == "gregorian":
            return PickerValue("gregorian", self.day, self.month, self.year)
        return PickerValue(system.type, native.day, native.month, native.year)


def display_date(record: StoredDate) -> str:
    """Render with the original tuple when there is one, else the Gregorian fields."""
    system = get_calendar_system(record.calendar_type)
    if system.type != "gregorian" and record.has_original():
        return system.format_date(record.original)
    return get_calendar_system("gregorian").format_date(record.gregorian)

from __future__ import annotations
from dataclasses import dataclass
from datetime import date
from typing import Literal, Tuple

CalendarType = Literal["gregorian", "lunar"]
YearRange = Tuple[int, int]

@dataclass(frozen=True)
class CalendarDate:
    day: int
    month: int  # negative = leap month following abs(month)
    year: int

    @property
    def is_leap_month(self) -> bool:
        return self.month < 0

    @property
    def abs_month(self) -> int:
        return -self.month if self.month < 0 else self.month

    def to_date(self) -> date:
        """Only meaningful when the value holds a Gregorian date."""
        return date(self.year, self.month, self.day)

    @classmethod
    def from_date(cls, d: date) -> "CalendarDate":
        return cls(day=d.day, month=d.month, year=d.year)

# Same shape, read as Gregorian.
GregorianDate = CalendarDate

@dataclass(frozen=True)
class MonthOption:
    value: int
    label: str

"""
calsys.engines.gregorian
------------------------
The Gregorian system. Conversions are identities so callers never need a
special case for dates that are already canonical.
"""

from __future__ import annotations

from typing import List

from ..core import time
from ..core.types import CalendarDate, GregorianDate, MonthOption, YearRange


class GregorianSystem:
    def __init__(self, type: str = "gregorian", label_key: str = "calendar.gregorian",
                 year_range: YearRange = (1900, 2100)):
        self.type = type
        self.label_key = label_key
        self._year_range = year_range

    def __repr__(self) -> str:
        return f"GregorianSystem(type={self.type!r}, year_range={self._year_range})"

    def to_gregorian(self, date: CalendarDate) -> GregorianDate:
        d = time.check_gregorian(date)
        return GregorianDate(day=d.day, month=d.month, year=d.year)

    def from_gregorian(self, date: GregorianDate) -> CalendarDate:
        d = time.check_gregorian(date)
        return CalendarDate(day=d.day, month=d.month, year=d.year)

    def format_date(self, date: CalendarDate) -> str:
        return f"{date.year:04d}-{date.month:02d}-{date.day:02d}"

    def get_months(self, year: int) -> List[MonthOption]:
        # year-independent
        return [MonthOption(value=m, label=str(m)) for m in range(1, 13)]

    def get_days_in_month(self, year: int, month: int) -> int:
        return time.days_in_month(year, month)

    def get_year_range(self) -> YearRange:
        return self._year_range

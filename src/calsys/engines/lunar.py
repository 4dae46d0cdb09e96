"""
calsys.engines.lunar
--------------------
The Chinese lunisolar system, driven by the year table in lunar_data.

A leap month is addressed by the negative of the month it follows, so
{day: 1, month: -6, year: 2025} is the first day of the leap sixth month.
"""

from __future__ import annotations

from typing import List

from ..core.errors import InvalidDateError, UnsupportedYearError
from ..core.time import check_gregorian, from_jdn, to_jdn
from ..core.types import CalendarDate, GregorianDate, MonthOption, YearRange
from . import lunar_data as data

MONTH_NAMES = ("正", "二", "三", "四", "五", "六", "七", "八", "九", "十", "十一", "腊")
DAY_TENS = ("初", "十", "廿")
DIGITS = ("", "一", "二", "三", "四", "五", "六", "七", "八", "九")
LEAP_PREFIX = "闰"
MONTH_SUFFIX = "月"


def month_name(month: int) -> str:
    """正月, 二月 ... 腊月; leap months get the 闰 prefix."""
    m = -month if month < 0 else month
    name = MONTH_NAMES[m - 1] if 1 <= m <= 12 else str(m)
    prefix = LEAP_PREFIX if month < 0 else ""
    return f"{prefix}{name}{MONTH_SUFFIX}"


def day_name(day: int) -> str:
    """初一 .. 初十, 十一 .. 十九, 二十, 廿一 .. 廿九, 三十."""
    if day == 10:
        return "初十"
    if day == 20:
        return "二十"
    if day == 30:
        return "三十"
    if not 1 <= day <= 29:
        return str(day)
    return DAY_TENS[day // 10] + DIGITS[day % 10]


class LunarSystem:
    def __init__(self, type: str = "lunar", label_key: str = "calendar.lunar",
                 year_range: YearRange = (data.FIRST_YEAR, data.LAST_YEAR)):
        lo, hi = year_range
        if lo < data.FIRST_YEAR or hi > data.LAST_YEAR or lo > hi:
            raise ValueError(
                f"year_range {year_range} must lie within the lunar table "
                f"({data.FIRST_YEAR}..{data.LAST_YEAR})"
            )
        self.type = type
        self.label_key = label_key
        self._year_range = year_range

    def __repr__(self) -> str:
        return f"LunarSystem(type={self.type!r}, year_range={self._year_range})"

    # ---------------------------------------------------------
    # Conversion
    # ---------------------------------------------------------

    def _check_year(self, year: int) -> int:
        lo, hi = self._year_range
        if not lo <= year <= hi:
            raise UnsupportedYearError(f"Lunar year {year} is outside {lo}..{hi}.")
        return year

    def to_gregorian(self, date: CalendarDate) -> GregorianDate:
        self._check_year(date.year)
        offset, days = data.month_offset(date.year, date.month)
        if not 1 <= date.day <= days:
            raise InvalidDateError(
                f"Day {date.day} is out of range for {month_name(date.month)} "
                f"of lunar year {date.year} (1..{days})."
            )
        jdn = data.year_start_jdn(date.year) + offset + date.day - 1
        return from_jdn(jdn)

    def from_gregorian(self, date: GregorianDate) -> CalendarDate:
        year, offset = data.locate(to_jdn(check_gregorian(date)))
        self._check_year(year)
        for value, days in data.month_layout(year):
            if offset < days:
                return CalendarDate(day=offset + 1, month=value, year=year)
            offset -= days
        raise AssertionError("offset beyond the lunar year")  # locate() bounds it

    def new_year(self, year: int) -> GregorianDate:
        """Gregorian date of the first day of the given lunar year."""
        return from_jdn(data.year_start_jdn(self._check_year(year)))

    def leap_month(self, year: int) -> int:
        return data.leap_month(self._check_year(year))

    # ---------------------------------------------------------
    # Display & picker metadata
    # ---------------------------------------------------------

    def format_date(self, date: CalendarDate) -> str:
        return f"{month_name(date.month)}{day_name(date.day)}"

    def get_months(self, year: int) -> List[MonthOption]:
        self._check_year(year)
        return [MonthOption(value=v, label=month_name(v)) for v, _ in data.month_layout(year)]

    def get_days_in_month(self, year: int, month: int) -> int:
        self._check_year(year)
        _, days = data.month_offset(year, month)
        return days

    def get_year_range(self) -> YearRange:
        return self._year_range

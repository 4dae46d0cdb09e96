from __future__ import annotations
from typing import Any

from .errors import InvalidDateError
from .types import GregorianDate

_MONTH_DAYS = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def is_leap_year(year: int) -> bool:
    """Gregorian rule: every 4th year, except centuries not divisible by 400."""
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(year: int, month: int) -> int:
    if not 1 <= month <= 12:
        raise InvalidDateError(f"Month {month} does not exist in the Gregorian calendar.")
    if month == 2 and is_leap_year(year):
        return 29
    return _MONTH_DAYS[month - 1]


def check_gregorian(d: GregorianDate) -> GregorianDate:
    """Raise InvalidDateError unless d names a real Gregorian day."""
    n = days_in_month(d.year, d.month)
    if not 1 <= d.day <= n:
        raise InvalidDateError(f"Day {d.day} is out of range for {d.year}-{d.month:02d} (1..{n}).")
    return d


def to_jdn(d: Any) -> int:
    """Gregorian date (anything with year/month/day) to Julian Day Number (JDN)."""
    y, m, day = d.year, d.month, d.day
    a = (14 - m) // 12
    y2 = y + 4800 - a
    m2 = m + 12 * a - 3
    return day + (153 * m2 + 2) // 5 + 365 * y2 + y2 // 4 - y2 // 100 + y2 // 400 - 32045


def from_jdn(jdn: int) -> GregorianDate:
    """Fliegel-Van Flandern inverse of to_jdn."""
    a = jdn + 32044
    b = (4 * a + 3) // 146097
    c = a - (146097 * b) // 4
    d = (4 * c + 3) // 1461
    e = c - (1461 * d) // 4
    m = (5 * e + 2) // 153
    day = e - (153 * m + 2) // 5 + 1
    month = m + 3 - 12 * (m // 10)
    year = 100 * b + d - 4800 + (m // 10)
    return GregorianDate(day=day, month=month, year=year)

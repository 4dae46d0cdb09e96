"""
calsys.engines.lunar_data
-------------------------
Precomputed Chinese lunisolar year table, lunar years 1900..2100.

Encoding per year (one int):
  - bits 3..0  : leap month position (0 = no leap month)
  - bit 16     : leap month length (1 -> 30 days, 0 -> 29 days)
  - bits 15..4 : months 1..12, most significant first (1 -> 30 days, 0 -> 29 days)

Only the first year's Gregorian start (1900-01-31) is stored; the start of
every later year is accumulated from the year lengths once at import.
"""

from __future__ import annotations

from bisect import bisect_right
from typing import List, Tuple

from ..core.errors import InvalidDateError, UnsupportedYearError
from ..core.time import to_jdn
from ..core.types import GregorianDate

FIRST_YEAR = 1900
EPOCH = GregorianDate(day=31, month=1, year=1900)

YEAR_CODES: Tuple[int, ...] = (
    0x04BD8, 0x04AE0, 0x0A570, 0x054D5, 0x0D260, 0x0D950, 0x16554, 0x056A0, 0x09AD0, 0x055D2,  # 1900
    0x04AE0, 0x0A5B6, 0x0A4D0, 0x0D250, 0x1D255, 0x0B540, 0x0D6A0, 0x0ADA2, 0x095B0, 0x14977,  # 1910
    0x04970, 0x0A4B0, 0x0B4B5, 0x06A50, 0x06D40, 0x1AB54, 0x02B60, 0x09570, 0x052F2, 0x04970,  # 1920
    0x06566, 0x0D4A0, 0x0EA50, 0x16A95, 0x05AD0, 0x02B60, 0x186E3, 0x092E0, 0x1C8D7, 0x0C950,  # 1930
    0x0D4A0, 0x1D8A6, 0x0B550, 0x056A0, 0x1A5B4, 0x025D0, 0x092D0, 0x0D2B2, 0x0A950, 0x0B557,  # 1940
    0x06CA0, 0x0B550, 0x15355, 0x04DA0, 0x0A5B0, 0x14573, 0x052B0, 0x0A9A8, 0x0E950, 0x06AA0,  # 1950
    0x0AEA6, 0x0AB50, 0x04B60, 0x0AAE4, 0x0A570, 0x05260, 0x0F263, 0x0D950, 0x05B57, 0x056A0,  # 1960
    0x096D0, 0x04DD5, 0x04AD0, 0x0A4D0, 0x0D4D4, 0x0D250, 0x0D558, 0x0B540, 0x0B6A0, 0x195A6,  # 1970
    0x095B0, 0x049B0, 0x0A974, 0x0A4B0, 0x0B27A, 0x06A50, 0x06D40, 0x0AF46, 0x0AB60, 0x09570,  # 1980
    0x04AF5, 0x04970, 0x064B0, 0x074A3, 0x0EA50, 0x06B58, 0x05AC0, 0x0AB60, 0x096D5, 0x092E0,  # 1990
    0x0C960, 0x0D954, 0x0D4A0, 0x0DA50, 0x07552, 0x056A0, 0x0ABB7, 0x025D0, 0x092D0, 0x0CAB5,  # 2000
    0x0A950, 0x0B4A0, 0x0BAA4, 0x0AD50, 0x055D9, 0x04BA0, 0x0A5B0, 0x15176, 0x052B0, 0x0A930,  # 2010
    0x07954, 0x06AA0, 0x0AD50, 0x05B52, 0x04B60, 0x0A6E6, 0x0A4E0, 0x0D260, 0x0EA65, 0x0D530,  # 2020
    0x05AA0, 0x076A3, 0x096D0, 0x04AFB, 0x04AD0, 0x0A4D0, 0x1D0B6, 0x0D250, 0x0D520, 0x0DD45,  # 2030
    0x0B5A0, 0x056D0, 0x055B2, 0x049B0, 0x0A577, 0x0A4B0, 0x0AA50, 0x1B255, 0x06D20, 0x0ADA0,  # 2040
    0x14B63, 0x09370, 0x049F8, 0x04970, 0x064B0, 0x168A6, 0x0EA50, 0x06B20, 0x1A6C4, 0x0AAE0,  # 2050
    0x092E0, 0x0D2E3, 0x0C960, 0x0D557, 0x0D4A0, 0x0DA50, 0x05D55, 0x056A0, 0x0A6D0, 0x055D4,  # 2060
    0x052D0, 0x0A9B8, 0x0A950, 0x0B4A0, 0x0B6A6, 0x0AD50, 0x055A0, 0x0ABA4, 0x0A5B0, 0x052B0,  # 2070
    0x0B273, 0x06930, 0x07337, 0x06AA0, 0x0AD50, 0x14B55, 0x04B60, 0x0A570, 0x054E4, 0x0D160,  # 2080
    0x0E968, 0x0D520, 0x0DAA0, 0x16AA6, 0x056D0, 0x04AE0, 0x0A9D4, 0x0A2D0, 0x0D150, 0x0F252,  # 2090
    0x0D520,                                                                                    # 2100
)

LAST_YEAR = FIRST_YEAR + len(YEAR_CODES) - 1

# A month layout is the year's months in calendar order as (month value, days);
# the leap month carries the negative of the month it follows.
MonthLayout = Tuple[Tuple[int, int], ...]


def year_code(year: int) -> int:
    if not FIRST_YEAR <= year <= LAST_YEAR:
        raise UnsupportedYearError(
            f"Lunar year {year} is outside the table ({FIRST_YEAR}..{LAST_YEAR})."
        )
    return YEAR_CODES[year - FIRST_YEAR]


def leap_month(year: int) -> int:
    """Month number followed by a leap month, or 0."""
    return year_code(year) & 0xF


def decode(code: int) -> MonthLayout:
    leap = code & 0xF
    out: List[Tuple[int, int]] = []
    for m in range(1, 13):
        out.append((m, 30 if code & (0x10000 >> m) else 29))
        if m == leap:
            out.append((-m, 30 if code & 0x10000 else 29))
    return tuple(out)


def month_layout(year: int) -> MonthLayout:
    return decode(year_code(year))


def year_length(year: int) -> int:
    return sum(days for _, days in month_layout(year))


def _accumulate_starts() -> Tuple[int, ...]:
    starts = [to_jdn(EPOCH)]
    for code in YEAR_CODES:
        starts.append(starts[-1] + sum(days for _, days in decode(code)))
    return tuple(starts)


# YEAR_STARTS[i] is the JDN of lunar new year FIRST_YEAR + i; the extra last
# entry is the day after the table ends.
YEAR_STARTS: Tuple[int, ...] = _accumulate_starts()


def year_start_jdn(year: int) -> int:
    year_code(year)
    return YEAR_STARTS[year - FIRST_YEAR]


def month_offset(year: int, month: int) -> Tuple[int, int]:
    """(days from new year to the month's first day, days in the month)."""
    offset = 0
    for value, days in month_layout(year):
        if value == month:
            return offset, days
        offset += days
    if month < 0:
        raise InvalidDateError(f"Lunar year {year} has no leap month {-month}.")
    raise InvalidDateError(f"Month {month} does not exist in lunar year {year}.")


def locate(jdn: int) -> Tuple[int, int]:
    """(lunar year, day offset from that year's new year) for a JDN."""
    if not YEAR_STARTS[0] <= jdn < YEAR_STARTS[-1]:
        raise UnsupportedYearError(
            f"JDN {jdn} is outside lunar years {FIRST_YEAR}..{LAST_YEAR}."
        )
    i = bisect_right(YEAR_STARTS, jdn) - 1
    return FIRST_YEAR + i, jdn - YEAR_STARTS[i]

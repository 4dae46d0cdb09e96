# tests/test_lunar.py

import pytest
from datetime import date

import calsys
from calsys import CalendarDate, InvalidDateError, UnsupportedYearError
from calsys.engines import lunar_data
from calsys.engines.lunar import day_name, month_name

@pytest.fixture
def lunar():
    return calsys.get_calendar_system("lunar")

def L(day, month, year):
    return CalendarDate(day=day, month=month, year=year)

def G(y, m, d):
    return CalendarDate(day=d, month=m, year=y)

# --- Table ---

def test_table_covers_1900_to_2100():
    assert lunar_data.FIRST_YEAR == 1900
    assert lunar_data.LAST_YEAR == 2100
    assert len(lunar_data.YEAR_STARTS) == len(lunar_data.YEAR_CODES) + 1

def test_year_lengths():
    for y in range(1900, 2101):
        n = lunar_data.year_length(y)
        if lunar_data.leap_month(y):
            assert 383 <= n <= 385
        else:
            assert 353 <= n <= 355

def test_decode_places_leap_after_its_month():
    layout = lunar_data.decode(0x0A6E6)  # 2025
    assert [v for v, _ in layout] == [1, 2, 3, 4, 5, 6, -6, 7, 8, 9, 10, 11, 12]
    assert [d for _, d in layout] == [30, 29, 30, 29, 29, 30, 29, 30, 29, 30, 30, 30, 29]

# --- Conversion ---

@pytest.mark.parametrize("year, new_year", [
    (1900, G(1900, 1, 31)),
    (1901, G(1901, 2, 19)),
    (1949, G(1949, 1, 29)),
    (1976, G(1976, 1, 31)),
    (1985, G(1985, 2, 20)),
    (2000, G(2000, 2, 5)),
    (2008, G(2008, 2, 7)),
    (2010, G(2010, 2, 14)),
    (2020, G(2020, 1, 25)),
    (2023, G(2023, 1, 22)),
    (2024, G(2024, 2, 10)),
    (2025, G(2025, 1, 29)),
    (2026, G(2026, 2, 17)),
])
def test_new_year(lunar, year, new_year):
    assert lunar.to_gregorian(L(1, 1, year)) == new_year
    assert lunar.new_year(year) == new_year

def test_lantern_festival_2025(lunar):
    g = lunar.to_gregorian(L(15, 1, 2025))
    assert g == G(2025, 2, 12)
    assert lunar.from_gregorian(g) == L(15, 1, 2025)

def test_leap_month_2025(lunar):
    assert lunar.to_gregorian(L(1, -6, 2025)) == G(2025, 7, 25)
    assert lunar.from_gregorian(G(2025, 7, 25)) == L(1, -6, 2025)
    # the day before is the last day of the regular sixth month
    assert lunar.from_gregorian(G(2025, 7, 24)) == L(30, 6, 2025)
    assert lunar.from_gregorian(G(2025, 8, 23)) == L(1, 7, 2025)

def test_mid_autumn_2025(lunar):
    assert lunar.to_gregorian(L(15, 8, 2025)) == G(2025, 10, 6)

# First days of months, checked against new-moon times in China (UTC+8).
@pytest.mark.parametrize("gregorian, native", [
    (G(1933, 7, 22), L(30, -5, 1933)),
    (G(1933, 7, 23), L(1, 6, 1933)),
    (G(1954, 11, 24), L(29, 10, 1954)),
    (G(1954, 11, 25), L(1, 11, 1954)),
    (G(1956, 12, 2), L(1, 11, 1956)),
    (G(1996, 7, 15), L(30, 5, 1996)),
    (G(1996, 7, 16), L(1, 6, 1996)),
    (G(1996, 9, 27), L(15, 8, 1996)),
    (G(2060, 4, 30), L(1, 4, 2060)),
])
def test_month_boundaries_match_new_moons(lunar, gregorian, native):
    assert lunar.from_gregorian(gregorian) == native
    assert lunar.to_gregorian(native) == gregorian

def test_end_of_lunar_year_belongs_to_previous_year(lunar):
    assert lunar.from_gregorian(G(2026, 2, 13)) == L(26, 12, 2025)
    assert lunar.from_gregorian(G(2026, 2, 16)) == L(29, 12, 2025)
    assert lunar.from_gregorian(G(2026, 2, 17)) == L(1, 1, 2026)

def test_round_trip_every_selectable_day(lunar):
    lo, hi = lunar.get_year_range()
    checked = 0
    for y in range(lo, hi + 1):
        for opt in lunar.get_months(y):
            for d in range(1, lunar.get_days_in_month(y, opt.value) + 1):
                date0 = L(d, opt.value, y)
                assert lunar.from_gregorian(lunar.to_gregorian(date0)) == date0
                checked += 1
    assert checked > 73000

def test_consecutive_days_are_contiguous(lunar):
    # every lunar day of a year maps to the next Gregorian day
    prev = None
    for opt in lunar.get_months(2033):
        for d in range(1, lunar.get_days_in_month(2033, opt.value) + 1):
            g = lunar.to_gregorian(L(d, opt.value, 2033)).to_date()
            if prev is not None:
                assert (g - prev).days == 1
            prev = g

def test_new_year_falls_in_january_or_february(lunar):
    for y in range(1900, 2101):
        assert lunar.to_gregorian(L(1, 1, y)).month in (1, 2)

# --- Month metadata ---

@pytest.mark.parametrize("year, leap", [(2020, 4), (2023, 2), (2025, 6), (2028, 5), (2033, 11)])
def test_leap_years_have_13_months(lunar, year, leap):
    months = lunar.get_months(year)
    values = [m.value for m in months]
    assert len(months) == 13
    assert lunar.leap_month(year) == leap
    assert values.index(-leap) == values.index(leap) + 1

@pytest.mark.parametrize("year", [2021, 2022, 2024, 2026, 2027])
def test_common_years_have_12_months(lunar, year):
    months = lunar.get_months(year)
    assert [m.value for m in months] == list(range(1, 13))
    assert lunar.leap_month(year) == 0

def test_month_count_matches_negative_entry(lunar):
    for y in range(1900, 2101):
        values = [m.value for m in lunar.get_months(y)]
        has_leap = any(v < 0 for v in values)
        assert len(values) == (13 if has_leap else 12)

def test_days_in_month_is_29_or_30(lunar):
    for y in range(1900, 2101):
        for opt in lunar.get_months(y):
            assert lunar.get_days_in_month(y, opt.value) in (29, 30)

def test_month_labels(lunar):
    labels = [m.label for m in lunar.get_months(2025)]
    assert labels[0] == "正月"
    assert labels[6] == "闰六月"
    assert labels[-2] == "十一月"
    assert labels[-1] == "腊月"

def test_days_in_missing_leap_month_is_an_error(lunar):
    assert lunar.get_days_in_month(2025, -6) == 29
    with pytest.raises(InvalidDateError):
        lunar.get_days_in_month(2024, -6)
    with pytest.raises(InvalidDateError):
        lunar.get_days_in_month(2025, -5)
    with pytest.raises(InvalidDateError):
        lunar.get_days_in_month(2025, 13)

# --- Errors ---

def test_day_past_end_of_month_is_not_clamped(lunar):
    assert lunar.get_days_in_month(2025, 2) == 29
    with pytest.raises(InvalidDateError):
        lunar.to_gregorian(L(30, 2, 2025))
    with pytest.raises(InvalidDateError):
        lunar.to_gregorian(L(0, 1, 2025))

def test_leap_month_in_common_year_is_an_error(lunar):
    with pytest.raises(InvalidDateError):
        lunar.to_gregorian(L(1, -6, 2024))

@pytest.mark.parametrize("year", [1899, 2101])
def test_out_of_range_year(lunar, year):
    with pytest.raises(UnsupportedYearError):
        lunar.to_gregorian(L(1, 1, year))
    with pytest.raises(UnsupportedYearError):
        lunar.get_months(year)

def test_out_of_range_gregorian(lunar):
    assert lunar.from_gregorian(G(1900, 1, 31)) == L(1, 1, 1900)
    with pytest.raises(UnsupportedYearError):
        lunar.from_gregorian(G(1900, 1, 30))
    last = lunar.to_gregorian(L(lunar.get_days_in_month(2100, 12), 12, 2100)).to_date()
    with pytest.raises(UnsupportedYearError):
        lunar.from_gregorian(CalendarDate.from_date(date.fromordinal(last.toordinal() + 1)))

def test_errors_are_value_errors():
    assert issubclass(InvalidDateError, ValueError)
    assert issubclass(UnsupportedYearError, ValueError)

# --- Formatting ---

@pytest.mark.parametrize("date0, text", [
    (L(15, 1, 2025), "正月十五"),
    (L(1, -6, 2025), "闰六月初一"),
    (L(10, 2, 2025), "二月初十"),
    (L(20, 11, 2025), "十一月二十"),
    (L(21, 12, 2025), "腊月廿一"),
    (L(30, 7, 2025), "七月三十"),
])
def test_format_date(lunar, date0, text):
    assert lunar.format_date(date0) == text

def test_leap_month_formats_differently(lunar):
    assert lunar.format_date(L(1, 6, 2025)) != lunar.format_date(L(1, -6, 2025))

def test_day_and_month_names():
    assert [day_name(d) for d in (1, 9, 11, 19, 29)] == ["初一", "初九", "十一", "十九", "廿九"]
    assert month_name(-11) == "闰十一月"

def test_year_range(lunar):
    assert lunar.get_year_range() == (1900, 2100)

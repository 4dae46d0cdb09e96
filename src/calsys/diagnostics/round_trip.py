from __future__ import annotations

import argparse
import random
from datetime import date, timedelta
from typing import Iterator, List, Tuple

import calsys
from calsys import CalendarDate


def parse_types(s: str) -> List[str]:
    # "gregorian,lunar" -> ["gregorian", "lunar"]
    return [x.strip() for x in s.split(",") if x.strip()]


def native_dates(system, start_year: int, end_year: int) -> Iterator[CalendarDate]:
    """Every selectable native date in the year window."""
    for y in range(start_year, end_year + 1):
        for opt in system.get_months(y):
            for d in range(1, system.get_days_in_month(y, opt.value) + 1):
                yield CalendarDate(day=d, month=opt.value, year=y)


def sweep_native(calendar_type: str, start_year: int, end_year: int, *, max_failures: int) -> Tuple[int, int]:
    """native -> gregorian -> native for every day; returns (checked, failures)."""
    system = calsys.get_calendar_system(calendar_type)
    checked = failures = 0
    for d0 in native_dates(system, start_year, end_year):
        checked += 1
        g = system.to_gregorian(d0)
        back = system.from_gregorian(g)
        if back != d0:
            failures += 1
            print("\nFAIL (native)")
            print("type:", calendar_type)
            print("d0:", d0)
            print("gregorian:", g)
            print("back:", back)
            if failures >= max_failures:
                break
    return checked, failures


def sample_gregorian(calendar_type: str, N: int, start: date, end: date, seed: int, *, max_failures: int) -> int:
    """gregorian -> native -> gregorian for N random days."""
    system = calsys.get_calendar_system(calendar_type)
    random.seed(seed)
    span = (end - start).days
    failures = 0
    for _ in range(N):
        d0 = start + timedelta(days=random.randint(0, span))
        native = system.from_gregorian(CalendarDate.from_date(d0))
        back = system.to_gregorian(native).to_date()
        if back != d0:
            failures += 1
            print("\nFAIL (gregorian)")
            print("type:", calendar_type)
            print("d0:", d0)
            print("native:", native, system.format_date(native))
            print("back:", back)
            if failures >= max_failures:
                break
    return failures


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Round-trip checks: native -> gregorian -> native, and the reverse.")
    p.add_argument("--types", type=str, default="gregorian,lunar", help="Comma-separated calendar types.")
    p.add_argument("--start-year", type=int, default=None, help="Default: start of each system's range.")
    p.add_argument("--end-year", type=int, default=None, help="Default: end of each system's range.")
    p.add_argument("--N", type=int, default=2000, help="Random Gregorian samples per type.")
    p.add_argument("--seed", type=int, default=123, help="RNG seed.")
    p.add_argument("--max-failures", type=int, default=5, help="Stop after this many failures per type.")
    args = p.parse_args(argv)

    total = 0
    for t in parse_types(args.types):
        lo, hi = calsys.get_calendar_system(t).get_year_range()
        y0 = args.start_year if args.start_year is not None else lo
        y1 = args.end_year if args.end_year is not None else hi
        checked, f_native = sweep_native(t, y0, y1, max_failures=args.max_failures)
        # stay a year inside the window so every sampled day has a native year
        f_greg = sample_gregorian(t, args.N, date(y0 + 1, 1, 1), date(y1 - 1, 12, 31), args.seed,
                                  max_failures=args.max_failures)
        print(f"{t:<10} native days={checked}  native failures={f_native}  gregorian failures={f_greg}")
        total += f_native + f_greg

    return 1 if total else 0


if __name__ == "__main__":
    raise SystemExit(main())

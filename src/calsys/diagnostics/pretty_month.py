from __future__ import annotations

from datetime import date, timedelta
import argparse

import calsys
from calsys import CalendarDate
from calsys.engines.lunar import month_name


def dow_header() -> str:
    return "Mo     Tu     We     Th     Fr     Sa     Su"


def cell(top: str, bot: str, w: int = 6) -> tuple[str, str]:
    return (top[:w].ljust(w), bot[:w].ljust(w))


def print_grid(title: str, first: date, days: list[tuple[str, str]]) -> None:
    weeks: list[list[tuple[str, str]]] = []
    wk: list[tuple[str, str]] = [cell("", "")] * first.weekday()  # Monday=0
    for top, bot in days:
        wk.append(cell(top, bot))
        if len(wk) == 7:
            weeks.append(wk)
            wk = []
    if wk:
        wk += [cell("", "")] * (7 - len(wk))
        weeks.append(wk)

    print(title)
    print(dow_header())
    print("-" * len(dow_header()))
    for w in weeks:
        print(" ".join(c[0] for c in w))
        print(" ".join(c[1] for c in w))
    print()


def lunar_month_calendar(Y: int, M: int) -> None:
    lunar = calsys.get_calendar_system("lunar")
    n = lunar.get_days_in_month(Y, M)
    d0 = lunar.to_gregorian(CalendarDate(day=1, month=M, year=Y)).to_date()

    days = []
    for i in range(n):
        d = d0 + timedelta(days=i)
        days.append((f"{i + 1:2d}", f"{d.month:02d}-{d.day:02d}"))

    title = f"lunar {month_name(M)}  Y={Y}  M={M}   ({d0} .. {d0 + timedelta(days=n - 1)})"
    print_grid(title, d0, days)


def gregorian_month_calendar(gy: int, gm: int) -> None:
    lunar = calsys.get_calendar_system("lunar")
    first = date(gy, gm, 1)

    days = []
    for i in range(calsys.days_in_month("gregorian", gy, gm)):
        d = first + timedelta(days=i)
        t = lunar.from_gregorian(CalendarDate.from_date(d))
        leap_tag = "L" if t.is_leap_month else ""
        days.append((f"{d.day:2d}", f"{t.abs_month:02d}{leap_tag}-{t.day:02d}"))

    print_grid(f"Gregorian month  {gy}-{gm:02d}", first, days)


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(
        description="Print a lunar-month calendar and/or a Gregorian-month calendar with paired labels."
    )
    p.add_argument("--lunar", nargs=2, type=int, metavar=("Y", "M"),
                   help="Lunar month to print: Y M (e.g. 2026 1)")
    p.add_argument("--leap", action="store_true",
                   help="Print the leap month following M instead of M itself.")
    p.add_argument("--greg", nargs=2, type=int, metavar=("GY", "GM"),
                   help="Gregorian month to print: GY GM (e.g. 2026 2)")
    args = p.parse_args(argv)

    if not args.lunar and not args.greg:
        lunar_month_calendar(Y=2026, M=1)
        gregorian_month_calendar(gy=2026, gm=2)
        return 0

    if args.lunar:
        Y, M = args.lunar
        lunar_month_calendar(Y=Y, M=-M if args.leap else M)

    if args.greg:
        gy, gm = args.greg
        gregorian_month_calendar(gy=gy, gm=gm)

    return 0


if __name__ == "__main__":
    raise SystemExit(main())

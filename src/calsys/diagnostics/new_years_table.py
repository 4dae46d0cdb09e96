from __future__ import annotations

from datetime import date
import argparse

import calsys


def mmdd(d: date) -> str:
    return f"{d.month:02d}-{d.day:02d}"


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(
        description="Print the lunar New Year table with each year's leap month."
    )
    p.add_argument("--from-year", type=int, default=2000)
    p.add_argument("--to-year", type=int, default=2030)
    p.add_argument(
        "--dates",
        choices=("mmdd", "iso"),
        default="iso",
        help="Display format of the New Year column (default: iso).",
    )
    args = p.parse_args(argv)

    lunar = calsys.get_calendar_system("lunar")

    def fmt(d: date) -> str:
        return mmdd(d) if args.dates == "mmdd" else d.isoformat()

    Y0, Y1 = args.from_year, args.to_year
    if Y1 < Y0:
        raise SystemExit("--to-year must be >= --from-year")

    headers = ["Year", "New Year", "Leap", "Days"]
    colw = [5, 10, 6, 4]
    line = "  ".join(h.ljust(w) for h, w in zip(headers, colw))
    print(line)
    print("-" * len(line))

    for Y in range(Y0, Y1 + 1):
        ny = lunar.new_year(Y).to_date()
        leap = lunar.leap_month(Y)
        days = sum(lunar.get_days_in_month(Y, opt.value) for opt in lunar.get_months(Y))
        row = [str(Y), fmt(ny), f"L{leap}" if leap else "-", str(days)]
        print("  ".join(c.ljust(w) for c, w in zip(row, colw)))

    return 0


if __name__ == "__main__":
    raise SystemExit(main())

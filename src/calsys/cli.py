from __future__ import annotations

import argparse
from datetime import date
import importlib
import inspect
import logging
import re
import sys

_DATE_RE = re.compile(r"^(\d{1,4})-(L|-)?(\d{1,2})-(\d{1,2})$")
_MD_RE = re.compile(r"^(L|-)?(\d{1,2})-(\d{1,2})$")


def _month(leap: str | None, m: str) -> int:
    return -int(m) if leap else int(m)


def _parse_ymd(s: str):
    """Y-M-D; a leap month is written L6 or -6, e.g. 2025-L6-1 or 2025--6-1."""
    from calsys import CalendarDate

    m = _DATE_RE.match(s)
    if not m:
        raise argparse.ArgumentTypeError(f"expected Y-M-D, got {s!r}")
    y, leap, mo, d = m.groups()
    return CalendarDate(day=int(d), month=_month(leap, mo), year=int(y))


def _parse_md(s: str):
    """M-D of a yearly date; L6-1 is day 1 of leap month 6."""
    from calsys import CalendarDate

    m = _MD_RE.match(s)
    if not m:
        raise argparse.ArgumentTypeError(f"expected M-D, got {s!r}")
    leap, mo, d = m.groups()
    return CalendarDate(day=int(d), month=_month(leap, mo), year=0)


def _parse_iso(s: str) -> date:
    try:
        return date.fromisoformat(s)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from e


def _run_module_main(modpath: str, argv: list[str]) -> int:
    """
    Import module and run its main().

    Supports:
      - main(argv: list[str] | None = None) -> int|None
      - main() -> int|None
    """
    mod = importlib.import_module(modpath)
    if not hasattr(mod, "main"):
        raise SystemExit(f"Module {modpath} has no main()")
    fn = getattr(mod, "main")

    sig = inspect.signature(fn)
    if len(sig.parameters) == 0:
        rv = fn()
    else:
        rv = fn(argv)
    return int(rv or 0)


def cmd_convert(args: argparse.Namespace) -> int:
    import calsys

    src = calsys.get_calendar_system(args.source)
    dst = calsys.get_calendar_system(args.target)
    g = src.to_gregorian(args.date)
    out = dst.from_gregorian(g)
    print(f"{out.year}-{out.month}-{out.day}  {dst.format_date(out)}")
    return 0


def cmd_months(args: argparse.Namespace) -> int:
    import calsys

    system = calsys.get_calendar_system(args.type)
    for opt in system.get_months(args.year):
        n = system.get_days_in_month(args.year, opt.value)
        print(f"{opt.value:>4}  {opt.label:<6}  {n}")
    return 0


def cmd_format(args: argparse.Namespace) -> int:
    import calsys

    print(calsys.format_date(args.type, args.date))
    return 0


def cmd_next(args: argparse.Namespace) -> int:
    import calsys

    after = args.after or date.today()
    g = calsys.next_occurrence(args.type, args.date, after)
    print(g.to_date().isoformat())
    return 0


def cmd_types(args: argparse.Namespace) -> int:
    import calsys

    for t in calsys.supported_calendar_types():
        s = calsys.get_calendar_system(t)
        lo, hi = s.get_year_range()
        print(f"{t:<10}  {s.label_key:<20}  {lo}..{hi}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="calsys", description="Multi-calendar date conversion toolkit CLI.")
    p.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    sub = p.add_subparsers(dest="cmd", required=True)

    p_conv = sub.add_parser("convert", help="Convert a date between calendar systems")
    p_conv.add_argument("date", type=_parse_ymd, help="Y-M-D in the source calendar (leap month negative)")
    p_conv.add_argument("--from", dest="source", default="gregorian")
    p_conv.add_argument("--to", dest="target", default="gregorian")
    p_conv.set_defaults(fn=cmd_convert)

    p_months = sub.add_parser("months", help="List the months of a year with their lengths")
    p_months.add_argument("type")
    p_months.add_argument("year", type=int)
    p_months.set_defaults(fn=cmd_months)

    p_fmt = sub.add_parser("format", help="Render a native date")
    p_fmt.add_argument("type")
    p_fmt.add_argument("date", type=_parse_ymd)
    p_fmt.set_defaults(fn=cmd_format)

    p_next = sub.add_parser("next", help="Next Gregorian occurrence of a yearly native date")
    p_next.add_argument("type")
    p_next.add_argument("date", type=_parse_md, help="M-D in the native calendar")
    p_next.add_argument("--after", type=_parse_iso, default=None, help="YYYY-MM-DD (default: today)")
    p_next.set_defaults(fn=cmd_next)

    p_types = sub.add_parser("types", help="List supported calendar types")
    p_types.set_defaults(fn=cmd_types)

    p_diag = sub.add_parser("diag", help="Diagnostics tools")
    p_diag.add_argument("tool", choices=["round-trip", "new-years", "month"], help="Which diagnostic to run")
    return p


def main(argv: list[str] | None = None) -> int:
    from calsys import CalsysError

    if argv is None:
        argv = sys.argv[1:]

    p = build_parser()
    args, rest = p.parse_known_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s  [%(levelname)s]  %(name)s: %(message)s",
    )

    if args.cmd == "diag":
        tool_map = {
            "round-trip": "calsys.diagnostics.round_trip",
            "new-years": "calsys.diagnostics.new_years_table",
            "month": "calsys.diagnostics.pretty_month",
        }
        return _run_module_main(tool_map[args.tool], rest)

    if rest:
        p.error(f"unrecognized arguments: {' '.join(rest)}")

    try:
        return args.fn(args)
    except CalsysError as e:
        print(f"calsys: {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    raise SystemExit(main())

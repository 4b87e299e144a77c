from __future__ import annotations

import argparse
import importlib
import inspect
import logging
import sys

LANGS = ("ne", "en")


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


def cmd_today(args: argparse.Namespace) -> int:
    import calnep

    d = calnep.today(args.lang)
    print(f"{calnep.format_date(d, args.lang)}  {d.date.label} {d.month.label} {d.year.label}")
    return 0


def cmd_years(args: argparse.Namespace) -> int:
    import calnep

    print(" ".join(y.label for y in calnep.list_years(args.lang)))
    return 0


def cmd_months(args: argparse.Namespace) -> int:
    import calnep

    for m in calnep.list_months(args.lang, short=args.short):
        print(f"{m.value:2d}  {m.label}")
    return 0


def cmd_weekdays(args: argparse.Namespace) -> int:
    import calnep

    for w in calnep.list_weekdays(args.lang, short=not args.long):
        print(f"{w.value}  {w.label}")
    return 0


def cmd_parse(args: argparse.Namespace) -> int:
    import calnep

    res = calnep.parse_date(args.text, args.lang, short_month=args.short_month)
    if not res.valid:
        print(f"invalid date: {args.text!r}", file=sys.stderr)
        return 1
    v = res.value
    print(f"id={v.id}  year={v.year.value}  month={v.month.value} ({v.month.label})  day={v.date.value}")
    return 0


def cmd_format(args: argparse.Namespace) -> int:
    import calnep
    from calnep.engines._dates import make_date

    entry = calnep.get_calendar().index.require(args.year)
    print(calnep.format_date(make_date(entry, args.month, args.day, args.lang), args.lang))
    return 0


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    p = argparse.ArgumentParser(prog="calnep", description="Bikram Sambat (Nepali) calendar toolkit CLI.")
    p.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    sub = p.add_subparsers(dest="cmd", required=True)

    p_today = sub.add_parser("today", help="Today's BS date in Kathmandu")
    p_today.add_argument("--lang", choices=LANGS, default="ne")

    p_years = sub.add_parser("years", help="List supported BS years")
    p_years.add_argument("--lang", choices=LANGS, default="ne")

    p_months = sub.add_parser("months", help="List month names")
    p_months.add_argument("--lang", choices=LANGS, default="ne")
    p_months.add_argument("--short", action="store_true")

    p_wd = sub.add_parser("weekdays", help="List weekday names")
    p_wd.add_argument("--lang", choices=LANGS, default="ne")
    p_wd.add_argument("--long", action="store_true")

    p_parse = sub.add_parser("parse", help="Validate a localized YYYY/MM/DD string")
    p_parse.add_argument("text")
    p_parse.add_argument("--lang", choices=LANGS, default="ne")
    p_parse.add_argument("--short-month", action="store_true")

    p_fmt = sub.add_parser("format", help="Format a BS date (month is 0-based)")
    p_fmt.add_argument("year", type=int)
    p_fmt.add_argument("month", type=int)
    p_fmt.add_argument("day", type=int)
    p_fmt.add_argument("--lang", choices=LANGS, default="ne")

    # diagnostics
    sub.add_parser("month", help="Print a month calendar page (diagnostics)")
    sub.add_parser("table", help="Print year lengths from the month table (diagnostics)")

    args, rest = p.parse_known_args(argv)

    logging.basicConfig(
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
        level=logging.DEBUG if args.verbose else logging.WARNING,
    )

    if args.cmd == "month":
        return _run_module_main("calnep.diagnostics.pretty_month", rest)

    if args.cmd == "table":
        return _run_module_main("calnep.diagnostics.year_lengths", rest)

    if rest:
        p.error(f"unrecognized arguments: {' '.join(rest)}")

    handlers = {
        "today": cmd_today,
        "years": cmd_years,
        "months": cmd_months,
        "weekdays": cmd_weekdays,
        "parse": cmd_parse,
        "format": cmd_format,
    }
    return handlers[args.cmd](args)


if __name__ == "__main__":
    raise SystemExit(main())

from __future__ import annotations

import argparse
from typing import List

import calnep
from calnep.core.types import CalendarDay

CELL_W = 4


def cell(c: CalendarDay) -> str:
    text = c.label if c.current_month else f"({c.label})"
    return text.rjust(CELL_W)


def dow_header(lang: str) -> str:
    return " ".join(d.label[:CELL_W].rjust(CELL_W) for d in calnep.list_weekdays(lang, short=True))


def render_month(year: int, month: int, lang: str = "en") -> str:
    cal = calnep.get_calendar()
    weeks: List[List[CalendarDay]] = cal.weeks(year, month, lang)
    year_label = cal.index.require(year).label.get(lang)
    title = f"{cal.month_label(lang, month + 1)} {year_label}"

    header = dow_header(lang)
    lines = [title, header, "-" * len(header)]
    for wk in weeks:
        lines.append(" ".join(cell(c) for c in wk))
    return "\n".join(lines)


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(
        description="Print a BS month as a calendar page; days of adjacent months are shown in parentheses."
    )
    p.add_argument("year", type=int, nargs="?", help="BS year (default: current)")
    p.add_argument("month", type=int, nargs="?", help="0-based month index (default: current)")
    p.add_argument("--lang", choices=("ne", "en"), default="en")
    args = p.parse_args(argv)

    if args.year is None or args.month is None:
        t = calnep.today(args.lang)
        year, month = t.year.value, t.month.value
    else:
        year, month = args.year, args.month

    print(render_month(year, month, args.lang))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

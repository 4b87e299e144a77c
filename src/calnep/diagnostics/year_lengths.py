from __future__ import annotations

import argparse

import calnep

MIN_YEAR_DAYS = 355
MAX_YEAR_DAYS = 385


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Print BS year lengths and flag values outside 355..385 days.")
    p.add_argument("--from-year", type=int, default=None)
    p.add_argument("--to-year", type=int, default=None)
    args = p.parse_args(argv)

    table = calnep.get_calendar().table
    y0 = table.start_year if args.from_year is None else args.from_year
    y1 = table.end_year if args.to_year is None else args.to_year

    bad = 0
    print("Year  Days  Months")
    for y in range(y0, y1 + 1):
        if y not in table:
            print(f"{y}  ----  (not in table)")
            bad += 1
            continue
        n = table.year_length(y)
        flag = "" if MIN_YEAR_DAYS <= n <= MAX_YEAR_DAYS else "  !"
        if flag:
            bad += 1
        months = " ".join(f"{table.days_in_month(y, m):2d}" for m in range(12))
        print(f"{y}  {n:4d}  {months}{flag}")
    return 1 if bad else 0


if __name__ == "__main__":
    raise SystemExit(main())

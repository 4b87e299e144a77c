"""
calnep.engines.table
--------------------
The immutable, year-keyed month-length table. Each year carries exactly twelve
entries, Baisakh..Chaitra, each either a plain day count or a padding triple
(leading days from the previous month, day count, trailing days into the next month).
"""

from __future__ import annotations

from datetime import date
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional, Sequence, Tuple

from ..core.errors import OutOfRangeError, TableError
from ..core.types import MonthLengthEntry, day_count

MONTHS_IN_YEAR = 12
DAYS_IN_WEEK = 7


def sunday_weekday(d: date) -> int:
    """Weekday with Sunday=0..Saturday=6."""
    return (d.weekday() + 1) % DAYS_IN_WEEK


def _check_entry(year: int, i: int, entry: MonthLengthEntry) -> MonthLengthEntry:
    if isinstance(entry, bool):
        raise TableError(f"{year}: month {i} entry must be an int or a triple, got {entry!r}")
    if isinstance(entry, int):
        if entry <= 0:
            raise TableError(f"{year}: month {i} has non-positive day count {entry}")
        return entry
    triple = tuple(entry)
    if len(triple) != 3 or not all(isinstance(x, int) and not isinstance(x, bool) for x in triple):
        raise TableError(f"{year}: month {i} entry must be (leading, days, trailing), got {entry!r}")
    leading, days, trailing = triple
    if days <= 0 or leading < 0 or trailing < 0:
        raise TableError(f"{year}: month {i} entry {triple} has invalid counts")
    return triple


def _check_leading(year: int, row: Tuple[MonthLengthEntry, ...]) -> None:
    # Month 0 borrows its leading days from month 11 of the same year.
    for i, entry in enumerate(row):
        if isinstance(entry, int):
            continue
        prev = day_count(row[i - 1])
        if entry[0] > prev:
            raise TableError(
                f"{year}: month {i} leads with {entry[0]} days but the previous month has {prev}"
            )


class CalendarTable:
    """Read-only view over `year -> 12 month entries`."""

    def __init__(self, data: Mapping[int, Sequence[MonthLengthEntry]]):
        if not data:
            raise TableError("Calendar table is empty")
        rows: Dict[int, Tuple[MonthLengthEntry, ...]] = {}
        for year, entries in data.items():
            entries = tuple(entries)
            if len(entries) != MONTHS_IN_YEAR:
                raise TableError(f"{year}: expected {MONTHS_IN_YEAR} months, got {len(entries)}")
            rows[int(year)] = tuple(_check_entry(year, i, e) for i, e in enumerate(entries))
            _check_leading(year, rows[int(year)])
        self._data = MappingProxyType(dict(sorted(rows.items())))
        self._years = tuple(self._data)

    @classmethod
    def from_month_lengths(
        cls,
        lengths: Mapping[int, Sequence[int]],
        epoch_weekday: int,
        week_start: int = 0,
    ) -> "CalendarTable":
        """
        Annotate plain day counts with week-aligned grid padding.

        `epoch_weekday` is the weekday (Sunday=0) of the first day of the earliest
        year; years must be contiguous so the weekday can be carried forward.
        """
        if not lengths:
            raise TableError("Calendar table is empty")
        years = sorted(lengths)
        if years != list(range(years[0], years[-1] + 1)):
            raise TableError("Padding can only be derived for a contiguous range of years")

        wd = (epoch_weekday - week_start) % DAYS_IN_WEEK
        out: Dict[int, List[MonthLengthEntry]] = {}
        for year in years:
            row: List[MonthLengthEntry] = []
            for n in lengths[year]:
                trailing = (DAYS_IN_WEEK - (wd + n) % DAYS_IN_WEEK) % DAYS_IN_WEEK
                row.append((wd, n, trailing))
                wd = (wd + n) % DAYS_IN_WEEK
            out[year] = row
        return cls(out)

    @property
    def start_year(self) -> int:
        return self._years[0]

    @property
    def end_year(self) -> int:
        return self._years[-1]

    def years(self) -> List[int]:
        return list(self._years)

    def __contains__(self, year: object) -> bool:
        return year in self._data

    def year_data(self, year: int) -> Optional[Tuple[MonthLengthEntry, ...]]:
        """The year's 12 entries, or None for an uncovered year."""
        return self._data.get(year)

    def month_lengths(self, year: int) -> Tuple[MonthLengthEntry, ...]:
        row = self._data.get(year)
        if row is None:
            raise OutOfRangeError(
                f"Year {year} is outside the table range {self.start_year}..{self.end_year}"
            )
        return row

    def days_in_month(self, year: int, month: int) -> int:
        """Day count of 0-based `month` in `year`."""
        if not 0 <= month < MONTHS_IN_YEAR:
            raise IndexError(f"Month index {month} out of range 0..{MONTHS_IN_YEAR - 1}")
        return day_count(self.month_lengths(year)[month])

    def year_length(self, year: int) -> int:
        return sum(day_count(e) for e in self.month_lengths(year))

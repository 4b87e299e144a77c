"""
calnep.engines.grid
-------------------
Calendar-page day sequences for one BS month: trailing days of the previous
month, the month itself, then leading days of the next month.
"""

from __future__ import annotations

from typing import List

from ..core.digits import localize_digits
from ..core.types import CalendarDay, check_lang, date_id, day_count
from .table import DAYS_IN_WEEK, MONTHS_IN_YEAR
from .year_index import YearIndex


class MonthGridBuilder:
    def __init__(self, index: YearIndex):
        self.index = index

    def _cell(self, year: int, month: int, day: int, lang: str, current: bool) -> CalendarDay:
        return CalendarDay(
            id=date_id(year, month, day),
            value=day,
            label=localize_digits(day, lang),
            current_month=current,
        )

    def month_grid(self, year: int, month: int, lang: str = "ne") -> List[CalendarDay]:
        """
        Grid cells for 0-based `month` of `year`, left-to-right, top-to-bottom.

        The previous month of month 0 is month 11 of the same year, and next-month
        ids are `month + 1` without wrapping. Returns [] when either month is not in
        the index.
        """
        check_lang(lang)
        prev_month = MONTHS_IN_YEAR - 1 if month - 1 < 0 else month - 1

        prev_entry = self.index.month_entry(year, prev_month)
        current_entry = self.index.month_entry(year, month)
        if prev_entry is None or current_entry is None:
            return []

        if isinstance(current_entry, int):
            return [self._cell(year, month, d, lang, True) for d in range(1, current_entry + 1)]

        prev_days = day_count(prev_entry)
        leading, days, trailing = current_entry

        cells = [
            self._cell(year, prev_month, d, lang, False)
            for d in range(prev_days - leading + 1, prev_days + 1)
        ]
        cells.extend(self._cell(year, month, d, lang, True) for d in range(1, days + 1))
        cells.extend(self._cell(year, month + 1, d, lang, False) for d in range(1, trailing + 1))
        return cells

    def weeks(self, year: int, month: int, lang: str = "ne") -> List[List[CalendarDay]]:
        cells = self.month_grid(year, month, lang)
        return [cells[i:i + DAYS_IN_WEEK] for i in range(0, len(cells), DAYS_IN_WEEK)]

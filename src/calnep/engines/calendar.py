"""
calnep.engines.calendar
-----------------------
The orchestrator. Binds one YearIndex to the converter, grid builder and string
codec, and serves the label lookups, so every component reads the same table.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, List, Optional

from ..core.types import CalendarDay, Month, NepaliDate, ParseResult, WeekDay, Year, check_lang
from ..data.labels import month_name, weekday_name
from .codec import DateStringCodec
from .converter import GregorianToNepaliConverter
from .grid import MonthGridBuilder
from .specs import CalendarSpec
from .table import DAYS_IN_WEEK, MONTHS_IN_YEAR, CalendarTable
from .year_index import YearIndex


class NepaliCalendar:
    def __init__(self, spec: CalendarSpec, table: CalendarTable, index: YearIndex):
        self.spec = spec
        self.table = table
        self.index = index
        self.converter = GregorianToNepaliConverter(
            index,
            year_offset=spec.year_offset,
            month_offset=spec.month_offset,
            day_offset=spec.day_offset,
            timezone=spec.timezone,
        )
        self.grid = MonthGridBuilder(index)
        self.codec = DateStringCodec(index, separator=spec.separator)

    # ---------------------------------------------------------
    # Conversion
    # ---------------------------------------------------------

    def today(self, lang: str = "ne", now: Optional[datetime] = None) -> NepaliDate:
        return self.converter.today(lang, now=now)

    def from_gregorian(self, gy: int, gm: int, gd: int, lang: str = "ne") -> NepaliDate:
        return self.converter.convert(gy, gm, gd, lang)

    # ---------------------------------------------------------
    # Enumeration
    # ---------------------------------------------------------

    def list_years(self, lang: str = "ne") -> List[Year]:
        return self.index.years(lang)

    def list_months(self, lang: str = "ne", short: bool = False) -> List[Month]:
        check_lang(lang)
        return [Month(value=i, label=month_name(i, lang, short)) for i in range(MONTHS_IN_YEAR)]

    def month_label(self, lang: str = "ne", month: Optional[int] = None, short: bool = False) -> Optional[str]:
        """Label for 1-based `month` (0 is read as the first month); None when unset or out of range."""
        check_lang(lang)
        if month is None:
            return None
        m = month - 1 if month > 0 else month
        if not 0 <= m < MONTHS_IN_YEAR:
            return None
        return month_name(m, lang, short)

    def list_weekdays(self, lang: str = "ne", short: bool = True) -> List[WeekDay]:
        """Weekdays in grid column order, starting at the spec's week_start."""
        check_lang(lang)
        order = [(self.spec.week_start + i) % DAYS_IN_WEEK for i in range(DAYS_IN_WEEK)]
        return [WeekDay(value=i, label=weekday_name(i, lang, short)) for i in order]

    def month_grid(self, year: int, month: int, lang: str = "ne") -> List[CalendarDay]:
        return self.grid.month_grid(year, month, lang)

    def weeks(self, year: int, month: int, lang: str = "ne") -> List[List[CalendarDay]]:
        return self.grid.weeks(year, month, lang)

    def days_in_month(self, year: int, month: int) -> Optional[int]:
        return self.index.days_in_month(year, month)

    # ---------------------------------------------------------
    # Strings
    # ---------------------------------------------------------

    def parse(self, text: str, lang: str = "ne", short_month: bool = False) -> ParseResult:
        return self.codec.parse(text, lang, short_month)

    def format(self, d: NepaliDate, lang: str = "ne") -> str:
        return self.codec.format(d, lang)

    def info(self) -> Dict[str, Any]:
        return {
            "spec": self.spec.as_dict(),
            "years": [self.index.start_year, self.index.end_year],
            "template": self.codec.template,
        }

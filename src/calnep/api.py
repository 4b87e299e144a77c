from __future__ import annotations

from datetime import date, datetime
from typing import List, Optional

from .core.types import CalendarDay, Month, NepaliDate, ParseResult, WeekDay, Year
from .engines.calendar import NepaliCalendar

_calendar: Optional[NepaliCalendar] = None

def set_calendar(cal: NepaliCalendar) -> None:
    global _calendar
    _calendar = cal

def get_calendar() -> NepaliCalendar:
    if _calendar is None:
        raise RuntimeError("Calendar not initialized")
    return _calendar

def today(lang: str = "ne", *, now: Optional[datetime] = None) -> NepaliDate:
    """Today in Kathmandu as a NepaliDate."""
    return get_calendar().today(lang, now=now)

def from_gregorian(d: date, lang: str = "ne") -> NepaliDate:
    return get_calendar().from_gregorian(d.year, d.month, d.day, lang)

def list_years(lang: str = "ne") -> List[Year]:
    return get_calendar().list_years(lang)

def list_months(lang: str = "ne", short: bool = False) -> List[Month]:
    return get_calendar().list_months(lang, short)

def month_label(lang: str = "ne", month: Optional[int] = None, short: bool = False) -> Optional[str]:
    return get_calendar().month_label(lang, month, short)

def month_grid(year: int, month: int, lang: str = "ne") -> List[CalendarDay]:
    return get_calendar().month_grid(year, month, lang)

def list_weekdays(lang: str = "ne", short: bool = True) -> List[WeekDay]:
    return get_calendar().list_weekdays(lang, short)

def days_in_month(year: int, month: int) -> Optional[int]:
    return get_calendar().days_in_month(year, month)

def parse_date(text: str, lang: str = "ne", short_month: bool = False) -> ParseResult:
    return get_calendar().parse(text, lang, short_month)

def format_date(d: NepaliDate, lang: str = "ne") -> str:
    return get_calendar().format(d, lang)

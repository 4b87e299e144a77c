"""calnep public API.

Keep this surface small: users should mostly interact with functions re-exported here.
"""

# Initialize the default calendar on import
from . import api_init as _api_init  # noqa: F401

from .api import (
    today,
    from_gregorian,
    list_years,
    list_months,
    month_label,
    month_grid,
    list_weekdays,
    days_in_month,
    parse_date,
    format_date,
    set_calendar,
    get_calendar,
)
from .core.errors import CalnepError, OutOfRangeError, TableError
from .core.types import CalendarDay, Month, NepaliDate, ParseResult, WeekDay, Year
from .engines.factory import make_calendar
from .engines.specs import CalendarSpec

__all__ = [
    "today",
    "from_gregorian",
    "list_years",
    "list_months",
    "month_label",
    "month_grid",
    "list_weekdays",
    "days_in_month",
    "parse_date",
    "format_date",
    "set_calendar",
    "get_calendar",
    "make_calendar",
    "CalendarSpec",
    "CalendarDay",
    "Month",
    "NepaliDate",
    "ParseResult",
    "WeekDay",
    "Year",
    "CalnepError",
    "OutOfRangeError",
    "TableError",
]

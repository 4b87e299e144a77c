"""
calnep.engines.factory
----------------------
Transforms pure data specifications into live NepaliCalendar objects.
"""

from __future__ import annotations

import logging
from typing import Optional

from ..data.month_lengths import AD_EPOCH, BS_MONTH_LENGTHS
from .calendar import NepaliCalendar
from .specs import DEFAULT_SPEC, CalendarSpec
from .table import CalendarTable, sunday_weekday
from .year_index import build_year_index

logger = logging.getLogger(__name__)


def default_table(week_start: int = 0) -> CalendarTable:
    """The bundled BS 2000..2089 table with week-aligned padding."""
    return CalendarTable.from_month_lengths(
        BS_MONTH_LENGTHS, epoch_weekday=sunday_weekday(AD_EPOCH), week_start=week_start
    )


def make_calendar(spec: CalendarSpec = DEFAULT_SPEC, table: Optional[CalendarTable] = None) -> NepaliCalendar:
    """
    Build a calendar for `spec`. Without `table` the bundled one is used; the year
    index is built eagerly and raises OutOfRangeError if the table does not cover
    the spec's range.
    """
    if table is None:
        table = default_table(spec.week_start)
    index = build_year_index(table, spec.start_year, spec.end_year)
    logger.debug("Calendar ready: %s", spec)
    return NepaliCalendar(spec, table, index)

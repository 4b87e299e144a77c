"""
calnep.engines.converter
------------------------
Gregorian -> Bikram Sambat by fixed offsets plus table correction.

The offsets (+57 years, +8 months, +15 days) approximate the mid-April alignment of
the Nepali new year; the month-length table then settles day and month overflow.
"""

from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Optional

from ..core.errors import OutOfRangeError
from ..core.time import KATHMANDU_TZ, local_today
from ..core.types import NepaliDate, check_lang, day_count
from ._dates import make_date
from .table import MONTHS_IN_YEAR
from .year_index import YearIndex

logger = logging.getLogger(__name__)

NEPALI_YEAR_OFFSET = 57
NEPALI_MONTH_OFFSET = 8
NEPALI_DATE_OFFSET = 15


class GregorianToNepaliConverter:
    def __init__(
        self,
        index: YearIndex,
        *,
        year_offset: int = NEPALI_YEAR_OFFSET,
        month_offset: int = NEPALI_MONTH_OFFSET,
        day_offset: int = NEPALI_DATE_OFFSET,
        timezone: str = KATHMANDU_TZ,
    ):
        self.index = index
        self.year_offset = year_offset
        self.month_offset = month_offset
        self.day_offset = day_offset
        self.timezone = timezone

    def _require(self, year: int, gregorian: tuple):
        entry = self.index.get(year)
        if entry is None:
            logger.warning("Gregorian %s resolves to unsupported BS year %d", gregorian, year)
            raise OutOfRangeError(
                f"Gregorian date {gregorian} resolves to BS year {year}, outside "
                f"{self.index.start_year}..{self.index.end_year}"
            )
        return entry

    def convert(self, gy: int, gm: int, gd: int, lang: str = "ne") -> NepaliDate:
        """Convert Gregorian year/month(1-12)/day to a NepaliDate."""
        check_lang(lang)
        g = (gy, gm, gd)
        year = gy + self.year_offset
        month = gm + self.month_offset
        day = gd + self.day_offset

        if not 1 <= gm <= MONTHS_IN_YEAR or not 1 <= gd <= 31:
            raise ValueError(f"Invalid Gregorian date {g}")

        # Day overflow is judged against the year as shifted, before any carry.
        entry = self._require(year, g)

        if month > MONTHS_IN_YEAR:
            month -= MONTHS_IN_YEAR

        if month < 1:
            raise ValueError(f"Month offset {self.month_offset} moves Gregorian {g} before the first month")

        days = day_count(entry.month_lengths[month - 1])
        if day > days:
            day -= days
            month += 1

        if month > MONTHS_IN_YEAR:
            month -= MONTHS_IN_YEAR
            year += 1
            entry = self._require(year, g)

        if day > day_count(entry.month_lengths[month - 1]):
            raise ValueError(f"Day offset {self.day_offset} overflows more than one month for Gregorian {g}")

        logger.debug("Gregorian %s -> BS %d/%d/%d", g, year, month, day)
        return make_date(entry, month - 1, day, lang)

    def convert_date(self, d: date, lang: str = "ne") -> NepaliDate:
        return self.convert(d.year, d.month, d.day, lang)

    def today(self, lang: str = "ne", now: Optional[datetime] = None) -> NepaliDate:
        """Today's date in the configured timezone (Kathmandu by default)."""
        return self.convert_date(local_today(self.timezone, now), lang)

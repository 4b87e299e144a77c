"""
calnep.engines.year_index
-------------------------
Ordered list of supported years with their localized labels and month entries,
built once from a CalendarTable and read-only afterwards.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Iterator, List, Mapping, Optional, Tuple

from ..core.digits import to_nepali_digits
from ..core.errors import OutOfRangeError
from ..core.types import LocalizedLabel, MonthLengthEntry, Year, YearEntry, check_lang, day_count
from .table import MONTHS_IN_YEAR, CalendarTable

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class YearIndex:
    entries: Tuple[YearEntry, ...]
    _by_value: Mapping[int, YearEntry] = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        object.__setattr__(self, "_by_value", MappingProxyType({e.value: e for e in self.entries}))

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[YearEntry]:
        return iter(self.entries)

    def __contains__(self, year: object) -> bool:
        return year in self._by_value

    @property
    def start_year(self) -> int:
        return self.entries[0].value

    @property
    def end_year(self) -> int:
        return self.entries[-1].value

    def get(self, year: int) -> Optional[YearEntry]:
        """Exact-match lookup; None for an unsupported year."""
        return self._by_value.get(year)

    def require(self, year: int) -> YearEntry:
        entry = self._by_value.get(year)
        if entry is None:
            raise OutOfRangeError(
                f"Year {year} is outside the supported range {self.start_year}..{self.end_year}"
            )
        return entry

    def month_entry(self, year: int, month: int) -> Optional[MonthLengthEntry]:
        entry = self._by_value.get(year)
        if entry is None or not 0 <= month < MONTHS_IN_YEAR:
            return None
        return entry.month_lengths[month]

    def days_in_month(self, year: int, month: int) -> Optional[int]:
        e = self.month_entry(year, month)
        return None if e is None else day_count(e)

    def find_by_label(self, label: str, lang: str) -> Optional[YearEntry]:
        for entry in self.entries:
            if entry.label.get(lang) == label:
                return entry
        return None

    def years(self, lang: str) -> List[Year]:
        check_lang(lang)
        return [e.as_year(lang) for e in self.entries]


def year_label(year: int) -> LocalizedLabel:
    return LocalizedLabel(ne=to_nepali_digits(year), en=str(year))


def build_year_index(table: CalendarTable, start_year: int, end_year: int) -> YearIndex:
    """Eagerly index every year in [start_year, end_year]; each must be in `table`."""
    if start_year > end_year:
        raise ValueError(f"start_year {start_year} is after end_year {end_year}")
    entries = []
    for year in range(start_year, end_year + 1):
        row = table.year_data(year)
        if row is None:
            raise OutOfRangeError(
                f"Year {year} has no month-length entry (table covers {table.start_year}..{table.end_year})"
            )
        entries.append(YearEntry(value=year, label=year_label(year), month_lengths=row))
    logger.debug("Built year index %d..%d (%d years)", start_year, end_year, len(entries))
    return YearIndex(tuple(entries))

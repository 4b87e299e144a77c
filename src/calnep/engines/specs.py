"""
calnep.engines.specs
--------------------
Pure-data calendar specifications. Build live calendars with
`calnep.engines.factory.make_calendar`.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, replace
from typing import Any, Dict

from ..core.time import KATHMANDU_TZ
from ..core.types import ID_SEPARATOR
from .converter import NEPALI_DATE_OFFSET, NEPALI_MONTH_OFFSET, NEPALI_YEAR_OFFSET
from .table import MONTHS_IN_YEAR

NEPALI_START_YEAR = 2000
NEPALI_END_YEAR = 2089

# One normalization pass can only absorb a single month of day overflow.
MAX_DAY_OFFSET = 28


@dataclass(frozen=True)
class CalendarSpec:
    start_year: int = NEPALI_START_YEAR
    end_year: int = NEPALI_END_YEAR
    separator: str = ID_SEPARATOR
    timezone: str = KATHMANDU_TZ
    year_offset: int = NEPALI_YEAR_OFFSET
    month_offset: int = NEPALI_MONTH_OFFSET
    day_offset: int = NEPALI_DATE_OFFSET
    week_start: int = 0  # 0=Sunday

    def __post_init__(self):
        if self.start_year > self.end_year:
            raise ValueError(f"start_year {self.start_year} is after end_year {self.end_year}")
        if not self.separator:
            raise ValueError("separator must be a non-empty string")
        if not 0 <= self.week_start < 7:
            raise ValueError("week_start must be in 0..6 (0=Sunday)")
        if not 0 <= self.month_offset < MONTHS_IN_YEAR:
            raise ValueError(f"month_offset must be in 0..{MONTHS_IN_YEAR - 1}, got {self.month_offset}")
        if not 0 <= self.day_offset <= MAX_DAY_OFFSET:
            raise ValueError(f"day_offset must be in 0..{MAX_DAY_OFFSET}, got {self.day_offset}")

    def tweak(self, **kwargs) -> "CalendarSpec":
        return replace(self, **kwargs)

    def as_dict(self) -> Dict[str, Any]:
        return asdict(self)


DEFAULT_SPEC = CalendarSpec()

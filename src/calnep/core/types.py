from __future__ import annotations
from dataclasses import dataclass, field
from typing import Literal, Optional, Tuple, Union

Language = Literal["ne", "en"]
LANGUAGES: Tuple[str, ...] = ("ne", "en")

# Plain day count, or (leading offset from previous month, day count, trailing offset into next month)
MonthLengthEntry = Union[int, Tuple[int, int, int]]

ID_SEPARATOR = "/"


def check_lang(lang: str) -> str:
    if lang not in LANGUAGES:
        raise ValueError(f"Unknown language '{lang}'. Available: {list(LANGUAGES)}")
    return lang


def day_count(entry: MonthLengthEntry) -> int:
    """Number of days that belong to the month itself."""
    if isinstance(entry, int):
        return entry
    return entry[1]


def date_id(year: int, month: int, day: int, separator: str = ID_SEPARATOR) -> str:
    """Composite key `year/month/day`; month is the 0-based index."""
    return f"{year}{separator}{month}{separator}{day}"


@dataclass(frozen=True)
class LocalizedLabel:
    ne: str
    en: str

    def get(self, lang: str) -> str:
        return self.ne if check_lang(lang) == "ne" else self.en


@dataclass(frozen=True)
class Year:
    value: int
    label: str

@dataclass(frozen=True)
class Month:
    value: int
    label: str

@dataclass(frozen=True)
class Day:
    id: str
    value: int
    label: str

@dataclass(frozen=True, eq=False)
class NepaliDate:
    """A resolved Bikram Sambat date. Two dates are equal iff their ids are equal."""
    year: Year
    month: Month
    date: Day

    @property
    def id(self) -> str:
        return self.date.id

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NepaliDate):
            return NotImplemented
        return self.date.id == other.date.id

    def __hash__(self) -> int:
        return hash(self.date.id)

@dataclass(frozen=True)
class CalendarDay:
    id: str
    value: int
    label: str
    current_month: bool

@dataclass(frozen=True)
class WeekDay:
    value: int
    label: str

@dataclass(frozen=True)
class ParseResult:
    valid: bool
    value: Optional[NepaliDate] = None

@dataclass(frozen=True)
class YearEntry:
    """One supported year as held by the year index."""
    value: int
    label: LocalizedLabel
    month_lengths: Tuple[MonthLengthEntry, ...] = field(default=())

    def as_year(self, lang: str) -> Year:
        return Year(value=self.value, label=self.label.get(lang))

"""
calnep.engines.codec
--------------------
Localized `YYYY/MM/DD` strings <-> NepaliDate.

Month numbering differs by direction: `format` writes the stored 0-based
`month.value` plus one, while `parse` returns `month.value` 1-based. In both
directions `date.id` carries the 0-based month index.
"""

from __future__ import annotations

from typing import Optional

from ..core.digits import localize_digits, pad_two_digits
from ..core.types import ID_SEPARATOR, NepaliDate, ParseResult, check_lang
from ._dates import make_date
from .table import MONTHS_IN_YEAR
from .year_index import YearIndex

INVALID = ParseResult(valid=False)


class DateStringCodec:
    def __init__(self, index: YearIndex, separator: str = ID_SEPARATOR):
        if not separator:
            raise ValueError("separator must be a non-empty string")
        self.index = index
        self.separator = separator

    @property
    def template(self) -> str:
        return f"YYYY{self.separator}MM{self.separator}DD"

    @staticmethod
    def _match_number(token: str, lang: str, upper: int) -> Optional[int]:
        for n in range(1, upper + 1):
            if pad_two_digits(n, lang) == token:
                return n
        return None

    def parse(self, text: str, lang: str = "ne", short_month: bool = False) -> ParseResult:
        """Parse `text`; never raises on bad input, returns ParseResult(valid=False) instead."""
        check_lang(lang)
        if not isinstance(text, str):
            return INVALID
        tokens = text.strip().split(self.separator)
        if len(tokens) != 3 or not all(tokens):
            return INVALID
        y_tok, m_tok, d_tok = tokens

        year = self.index.find_by_label(y_tok, lang)
        if year is None:
            return INVALID

        month = self._match_number(m_tok, lang, MONTHS_IN_YEAR)
        if month is None:
            return INVALID

        days = self.index.days_in_month(year.value, month - 1)
        day = self._match_number(d_tok, lang, days or 0)
        if day is None:
            return INVALID

        value = make_date(
            year, month - 1, day, lang,
            short_month=short_month, month_value=month,
        )
        return ParseResult(valid=True, value=value)

    def format(self, d: NepaliDate, lang: str = "ne") -> str:
        """Render `d` with the template; month is written as `month.value + 1`. No range checks."""
        check_lang(lang)
        return (
            self.template
            .replace("YYYY", localize_digits(d.year.value, lang))
            .replace("MM", pad_two_digits(d.month.value + 1, lang))
            .replace("DD", pad_two_digits(d.date.value, lang))
        )

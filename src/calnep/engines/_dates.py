from __future__ import annotations

from typing import Optional

from ..core.digits import localize_digits
from ..core.types import Day, Month, NepaliDate, YearEntry, date_id
from ..data.labels import month_name


def make_date(
    year: YearEntry,
    month: int,
    day: int,
    lang: str,
    *,
    short_month: bool = False,
    month_value: Optional[int] = None,
) -> NepaliDate:
    """
    Assemble a NepaliDate for 0-based `month`.

    `month_value` overrides the stored `month.value`; the id always uses the
    0-based index.
    """
    return NepaliDate(
        year=year.as_year(lang),
        month=Month(
            value=month if month_value is None else month_value,
            label=month_name(month, lang, short=short_month),
        ),
        date=Day(
            id=date_id(year.value, month, day),
            value=day,
            label=localize_digits(day, lang),
        ),
    )

"""Month and weekday names, indexed 0-based, one label per language."""

from __future__ import annotations

from typing import Tuple

from ..core.types import LocalizedLabel

# (ne long, ne short, en long, en short)
_MONTHS = (
    ("बैशाख", "बै", "Baisakh", "Bai"),
    ("जेठ", "जे", "Jestha", "Jes"),
    ("असार", "अ", "Asar", "Asa"),
    ("साउन", "सा", "Shrawan", "Shr"),
    ("भदौ", "भ", "Bhadra", "Bha"),
    ("असोज", "आ", "Asoj", "Aso"),
    ("कात्तिक", "का", "Kartik", "Kar"),
    ("मंसिर", "मं", "Mangsir", "Man"),
    ("पुस", "पु", "Poush", "Pou"),
    ("माघ", "मा", "Magh", "Mag"),
    ("फागुन", "फा", "Falgun", "Fal"),
    ("चैत", "चै", "Chaitra", "Cha"),
)

# Weeks start on Sunday (आइतबार).
_WEEKDAYS = (
    ("आइतबार", "आइत", "Sunday", "Sun"),
    ("सोमबार", "सोम", "Monday", "Mon"),
    ("मंगलबार", "मंगल", "Tuesday", "Tue"),
    ("बुधबार", "बुध", "Wednesday", "Wed"),
    ("बिहिबार", "बिहि", "Thursday", "Thu"),
    ("शुक्रबार", "शुक्र", "Friday", "Fri"),
    ("शनिबार", "शनि", "Saturday", "Sat"),
)


def _split(rows) -> Tuple[Tuple[LocalizedLabel, ...], Tuple[LocalizedLabel, ...]]:
    long = tuple(LocalizedLabel(ne=r[0], en=r[2]) for r in rows)
    short = tuple(LocalizedLabel(ne=r[1], en=r[3]) for r in rows)
    return long, short


MONTHS_LONG, MONTHS_SHORT = _split(_MONTHS)
WEEKDAYS_LONG, WEEKDAYS_SHORT = _split(_WEEKDAYS)


def month_name(index: int, lang: str, short: bool = False) -> str:
    table = MONTHS_SHORT if short else MONTHS_LONG
    return table[index].get(lang)


def weekday_name(index: int, lang: str, short: bool = True) -> str:
    table = WEEKDAYS_SHORT if short else WEEKDAYS_LONG
    return table[index].get(lang)

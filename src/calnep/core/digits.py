from __future__ import annotations

NEPALI_DIGITS = "०१२३४५६७८९"

_TO_NEPALI = str.maketrans("0123456789", NEPALI_DIGITS)


def to_nepali_digits(n: int) -> str:
    """Render an integer with Devanagari digits, e.g. 2081 -> '२०८१'."""
    return str(n).translate(_TO_NEPALI)


def localize_digits(n: int, lang: str) -> str:
    return to_nepali_digits(n) if lang == "ne" else str(n)


def pad_two_digits(n: int, lang: str) -> str:
    """Zero-pad to two digits in the script of `lang` ('05' or '०५')."""
    s = f"{n:02d}"
    return s.translate(_TO_NEPALI) if lang == "ne" else s

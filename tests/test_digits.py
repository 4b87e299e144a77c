# tests/test_digits.py

from calnep.core.digits import localize_digits, pad_two_digits, to_nepali_digits


def test_to_nepali_digits():
    assert to_nepali_digits(0) == "०"
    assert to_nepali_digits(2081) == "२०८१"
    assert to_nepali_digits(1234567890) == "१२३४५६७८९०"

def test_localize_digits():
    assert localize_digits(15, "ne") == "१५"
    assert localize_digits(15, "en") == "15"

def test_pad_two_digits():
    assert pad_two_digits(5, "en") == "05"
    assert pad_two_digits(5, "ne") == "०५"
    assert pad_two_digits(12, "en") == "12"
    assert pad_two_digits(12, "ne") == "१२"

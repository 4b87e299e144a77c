# tests/test_year_index.py

import pytest

from calnep.core.errors import OutOfRangeError
from calnep.engines.factory import default_table
from calnep.engines.table import CalendarTable
from calnep.engines.year_index import build_year_index


@pytest.fixture
def index():
    return build_year_index(default_table(), 2000, 2089)

def test_ordered_and_complete(index):
    values = [e.value for e in index]
    assert values == list(range(2000, 2090))
    assert len(index) == 90
    assert index.start_year == 2000 and index.end_year == 2089

def test_labels_per_language(index):
    e = index.get(2081)
    assert e.label.ne == "२०८१"
    assert e.label.en == "2081"
    years = index.years("ne")
    assert years[0].value == 2000 and years[0].label == "२०००"
    assert index.years("en")[-1].label == "2089"

def test_exact_match_lookup(index):
    assert index.get(2081).value == 2081
    assert index.get(1999) is None
    assert index.get(2090) is None
    assert 2089 in index and 2090 not in index

def test_require_raises_out_of_range(index):
    with pytest.raises(OutOfRangeError):
        index.require(2090)

def test_month_entry_and_days(index):
    assert index.days_in_month(2081, 0) == 31
    assert index.days_in_month(2081, 11) == 30
    assert index.month_entry(2081, 12) is None
    assert index.month_entry(2081, -1) is None
    assert index.days_in_month(2090, 0) is None

def test_find_by_label(index):
    assert index.find_by_label("२०८१", "ne").value == 2081
    assert index.find_by_label("2081", "en").value == 2081
    assert index.find_by_label("2081", "ne") is None
    assert index.find_by_label("2090", "en") is None

def test_unknown_language(index):
    with pytest.raises(ValueError):
        index.years("fr")

def test_sub_range_of_table():
    idx = build_year_index(default_table(), 2080, 2082)
    assert [e.value for e in idx] == [2080, 2081, 2082]

def test_range_not_covered_by_table():
    table = CalendarTable({2081: [30] * 12})
    with pytest.raises(OutOfRangeError):
        build_year_index(table, 2081, 2082)

def test_inverted_range():
    with pytest.raises(ValueError):
        build_year_index(default_table(), 2082, 2081)

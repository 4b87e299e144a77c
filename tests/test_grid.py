# tests/test_grid.py

import pytest

from calnep.engines.factory import default_table
from calnep.engines.grid import MonthGridBuilder
from calnep.engines.table import CalendarTable
from calnep.engines.year_index import build_year_index


@pytest.fixture(scope="module")
def grid():
    return MonthGridBuilder(build_year_index(default_table(), 2000, 2089))

@pytest.fixture
def small():
    # Baisakh 31 days, Jestha padded (3, 30, 2), Chaitra 30 days
    rows = [31, (3, 30, 2)] + [30] * 9 + [(1, 30, 4)]
    return MonthGridBuilder(build_year_index(CalendarTable({2081: rows}), 2081, 2081))

def test_padded_month_layout(small):
    cells = small.month_grid(2081, 1, "en")
    assert len(cells) == 35
    assert [c.value for c in cells[:3]] == [29, 30, 31]
    assert [c.id for c in cells[:3]] == ["2081/0/29", "2081/0/30", "2081/0/31"]
    assert not any(c.current_month for c in cells[:3])
    assert [c.value for c in cells[3:33]] == list(range(1, 31))
    assert all(c.current_month for c in cells[3:33])
    assert [c.id for c in cells[33:]] == ["2081/2/1", "2081/2/2"]
    assert not any(c.current_month for c in cells[33:])

def test_plain_count_has_no_padding(small):
    cells = small.month_grid(2081, 0, "en")
    assert [c.value for c in cells] == list(range(1, 32))
    assert all(c.current_month for c in cells)
    assert cells[0].id == "2081/0/1"

def test_first_month_wraps_to_last_month_of_same_year(grid):
    cells = grid.month_grid(2081, 0, "en")
    # (6, 31, 5): six days from Chaitra 2081 (30 days)
    assert [c.id for c in cells[:6]] == [f"2081/11/{d}" for d in range(25, 31)]
    assert len(cells) == 42

def test_last_month_trailing_ids_not_wrapped(small):
    cells = small.month_grid(2081, 11, "en")
    assert cells[0].id == "2081/10/30"
    assert [c.id for c in cells[-4:]] == [f"2081/12/{d}" for d in range(1, 5)]

def test_missing_year_or_month_is_empty(grid):
    assert grid.month_grid(2090, 0, "en") == []
    assert grid.month_grid(2081, 12, "en") == []
    assert grid.month_grid(2081, -1, "en") == []

def test_nepali_labels(grid):
    cells = grid.month_grid(2081, 1, "ne")
    current = [c for c in cells if c.current_month]
    assert current[0].label == "१"
    assert current[-1].label == "३१"

def test_every_month_lists_its_days(grid):
    idx = grid.index
    for entry in idx:
        for m in range(12):
            cells = grid.month_grid(entry.value, m, "en")
            days = [c.value for c in cells if c.current_month]
            assert days == list(range(1, idx.days_in_month(entry.value, m) + 1))
            assert len(cells) % 7 == 0

def test_weeks(grid):
    rows = grid.weeks(2081, 1, "en")
    assert len(rows) == 5
    assert all(len(r) == 7 for r in rows)
    assert rows[0][2].value == 1  # 1 Jestha 2081 is a Tuesday

# tests/test_api.py

import pytest
from datetime import date, datetime, timezone

import calnep
from calnep import api
from calnep.engines.factory import make_calendar
from calnep.engines.specs import CalendarSpec
from calnep.engines.table import CalendarTable


def test_default_calendar_installed_on_import():
    cal = calnep.get_calendar()
    assert cal.index.start_year == 2000
    assert cal.index.end_year == 2089

def test_today_with_pinned_instant():
    now = datetime(2024, 5, 19, 20, 0, tzinfo=timezone.utc)
    d = calnep.today("ne", now=now)
    assert d.id == "2081/1/4"
    assert d.year.label == "२०८१"

def test_today_defaults_satisfy_invariants():
    d = calnep.today()
    assert 0 <= d.month.value <= 11
    assert 1 <= d.date.value <= calnep.days_in_month(d.year.value, d.month.value)

def test_from_gregorian():
    assert calnep.from_gregorian(date(2024, 4, 20), "en").id == "2082/0/5"

def test_listings():
    assert len(calnep.list_years("en")) == 90
    assert calnep.list_months("en")[2].label == "Asar"
    assert calnep.month_label("en", 3) == "Asar"
    assert calnep.list_weekdays("ne")[0].label == "आइत"

def test_grid_and_codec():
    cells = calnep.month_grid(2081, 1, "en")
    assert len(cells) == 35
    res = calnep.parse_date("2081/02/15", "en")
    assert res.valid and res.value.id == "2081/1/15"
    assert calnep.format_date(calnep.from_gregorian(date(2024, 5, 20), "en"), "en") == "2081/02/04"

def test_uninitialized_calendar(monkeypatch):
    monkeypatch.setattr(api, "_calendar", None)
    with pytest.raises(RuntimeError):
        calnep.list_years()

def test_set_calendar_swaps_table(monkeypatch):
    monkeypatch.setattr(api, "_calendar", api._calendar)
    table = CalendarTable({2081: [30] * 12})
    calnep.set_calendar(make_calendar(CalendarSpec(start_year=2081, end_year=2081), table))
    assert [y.value for y in calnep.list_years("en")] == [2081]
    assert calnep.days_in_month(2081, 0) == 30

# tests/test_calendar.py

import pytest
from datetime import datetime, timezone

from calnep.core.errors import OutOfRangeError
from calnep.engines.factory import make_calendar
from calnep.engines.specs import DEFAULT_SPEC, CalendarSpec
from calnep.engines.table import CalendarTable


@pytest.fixture(scope="module")
def cal():
    return make_calendar()

def test_default_spec():
    assert DEFAULT_SPEC.start_year == 2000
    assert DEFAULT_SPEC.end_year == 2089
    assert DEFAULT_SPEC.separator == "/"
    assert DEFAULT_SPEC.timezone == "Asia/Kathmandu"
    assert (DEFAULT_SPEC.year_offset, DEFAULT_SPEC.month_offset, DEFAULT_SPEC.day_offset) == (57, 8, 15)

def test_spec_tweak_returns_copy():
    s = DEFAULT_SPEC.tweak(separator="-")
    assert s.separator == "-"
    assert DEFAULT_SPEC.separator == "/"

@pytest.mark.parametrize("kwargs", [
    {"start_year": 2082, "end_year": 2081},
    {"separator": ""},
    {"week_start": 7},
])
def test_spec_validation(kwargs):
    with pytest.raises(ValueError):
        CalendarSpec(**kwargs)

def test_range_outside_table_fails_at_build():
    with pytest.raises(OutOfRangeError):
        make_calendar(DEFAULT_SPEC.tweak(end_year=2090))

def test_synthetic_table_injection():
    table = CalendarTable({2081: [(0, 28, 0)] * 12})
    cal = make_calendar(CalendarSpec(start_year=2081, end_year=2081), table)
    assert [y.value for y in cal.list_years("en")] == [2081]
    assert len(cal.month_grid(2081, 4, "en")) == 28

def test_list_months(cal):
    months = cal.list_months("en")
    assert [m.value for m in months] == list(range(12))
    assert months[0].label == "Baisakh"
    assert months[11].label == "Chaitra"
    assert cal.list_months("ne")[0].label == "बैशाख"
    assert cal.list_months("en", short=True)[1].label == "Jes"

def test_month_label_is_one_based(cal):
    assert cal.month_label("en", 1) == "Baisakh"
    assert cal.month_label("en", 12) == "Chaitra"
    assert cal.month_label("en", 0) == "Baisakh"
    assert cal.month_label("ne", 2, short=True) == "जे"

@pytest.mark.parametrize("month", [None, 13, -1])
def test_month_label_miss_is_none(cal, month):
    assert cal.month_label("en", month) is None

def test_list_weekdays(cal):
    short = cal.list_weekdays("en")
    assert [w.value for w in short] == list(range(7))
    assert short[0].label == "Sun"
    assert cal.list_weekdays("en", short=False)[6].label == "Saturday"
    assert cal.list_weekdays("ne", short=False)[0].label == "आइतबार"

def test_weekdays_follow_week_start():
    cal = make_calendar(DEFAULT_SPEC.tweak(week_start=1))
    days = cal.list_weekdays("en")
    assert days[0].label == "Mon" and days[0].value == 1
    assert days[-1].label == "Sun" and days[-1].value == 0
    # 1 Jestha 2081 is a Tuesday: second column when weeks start on Monday
    first = [c.current_month for c in cal.month_grid(2081, 1, "en")].index(True)
    assert first == 1

def test_today_and_format(cal):
    now = datetime(2024, 5, 19, 20, 0, tzinfo=timezone.utc)
    d = cal.today("en", now=now)
    assert cal.format(d, "en") == "2081/02/04"
    assert cal.parse("2081/02/04", "en").value == d

def test_separator_from_spec():
    cal = make_calendar(DEFAULT_SPEC.tweak(separator="."))
    d = cal.from_gregorian(2024, 5, 20, "en")
    assert d.id == "2081/1/4"
    assert cal.format(d, "en") == "2081.02.04"
    assert cal.parse("2081.02.04", "en").valid

def test_info(cal):
    info = cal.info()
    assert info["years"] == [2000, 2089]
    assert info["template"] == "YYYY/MM/DD"
    assert info["spec"]["timezone"] == "Asia/Kathmandu"

def test_unknown_language(cal):
    with pytest.raises(ValueError):
        cal.list_months("de")

@pytest.mark.parametrize("kwargs", [
    {"month_offset": -1},
    {"month_offset": 12},
    {"day_offset": -1},
    {"day_offset": 45},
])
def test_offsets_that_break_normalization_rejected(kwargs):
    with pytest.raises(ValueError):
        DEFAULT_SPEC.tweak(**kwargs)

def test_boundary_offsets_accepted():
    cal = make_calendar(DEFAULT_SPEC.tweak(month_offset=0, day_offset=28))
    d = cal.from_gregorian(2024, 5, 31, "en")
    assert 0 <= d.month.value <= 11
    assert 1 <= d.date.value <= cal.days_in_month(d.year.value, d.month.value)

from __future__ import annotations
from calnep.engines.calendar import NepaliCalendar
from calnep.engines.factory import make_calendar
from calnep.engines.specs import DEFAULT_SPEC

def build_default_calendar() -> NepaliCalendar:
    return make_calendar(DEFAULT_SPEC)

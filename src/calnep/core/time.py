from __future__ import annotations
from datetime import date, datetime, timezone
from typing import Optional
from zoneinfo import ZoneInfo

KATHMANDU_TZ = "Asia/Kathmandu"


def local_today(tz_name: str = KATHMANDU_TZ, now: Optional[datetime] = None) -> date:
    """
    Current civil date in `tz_name`.

    `now` pins the instant (naive datetimes are taken as UTC); by default the
    system clock is read.
    """
    if now is None:
        now = datetime.now(timezone.utc)
    elif now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    return now.astimezone(ZoneInfo(tz_name)).date()


def kathmandu_today(now: Optional[datetime] = None) -> date:
    return local_today(KATHMANDU_TZ, now)

"""Calendar helpers for scheduling decisions."""

from datetime import date, datetime
from typing import Optional
from zoneinfo import ZoneInfo


def local_today(timezone: Optional[str] = None) -> date:
    """Return today's calendar date in the given zone, or in system local time."""

    if timezone:
        return datetime.now(ZoneInfo(timezone)).date()
    return date.today()

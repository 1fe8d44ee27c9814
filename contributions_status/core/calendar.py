"""Calendar reference shared by the merger, the layout and the renderer.

All "which day is it" questions are answered in a fixed UTC+09:00 offset so
that day boundaries never depend on the host time zone.
"""

from datetime import date
from datetime import datetime
from datetime import timedelta
from datetime import timezone
from datetime import UTC

CALENDAR_TZ = timezone(timedelta(hours=9), name="UTC+09:00")

WINDOW_DAYS = 366


def today_in_calendar(now: datetime | None = None) -> date:
    """Return the calendar date of `now` (default: current time) in UTC+9."""

    if now is None:
        now = datetime.now(UTC)
    elif now.tzinfo is None:
        now = now.replace(tzinfo=UTC)
    return now.astimezone(CALENDAR_TZ).date()


def window_dates(today: date) -> list[date]:
    """Return the trailing window `today - 365 .. today`, ascending."""

    start = today - timedelta(days=WINDOW_DAYS - 1)
    return [start + timedelta(days=offset) for offset in range(WINDOW_DAYS)]


def sunday_first_weekday(day: date) -> int:
    """Weekday index with 0=Sunday .. 6=Saturday."""

    return (day.weekday() + 1) % 7

from collections.abc import Iterable
from collections.abc import Mapping
from datetime import date

from contributions_status.core.calendar import sunday_first_weekday
from contributions_status.core.calendar import today_in_calendar
from contributions_status.core.calendar import window_dates
from contributions_status.models import ContributionDay
from contributions_status.models import WeekColumn
from contributions_status.services.themes import ThemeColors


DAYS_PER_WEEK = 7


def _records_by_date(records: Iterable[Mapping[str, object]]) -> dict[date, int]:
    """Index provider records by calendar date, skipping malformed entries.

    A provider is not expected to repeat a date; if it does, the last record
    wins.
    """

    counts: dict[date, int] = {}
    for item in records:
        raw_day = item.get("date")
        raw_count = item.get("count")
        if not isinstance(raw_day, str):
            continue
        if isinstance(raw_count, bool) or not isinstance(raw_count, int):
            continue
        if raw_count < 0:
            continue

        try:
            parsed_day = date.fromisoformat(raw_day)
        except ValueError:
            continue

        counts[parsed_day] = raw_count
    return counts


def merge_contributions(
    github_records: Iterable[Mapping[str, object]],
    gitlab_records: Iterable[Mapping[str, object]],
    today: date | None = None,
) -> list[ContributionDay]:
    """Fold both providers into the 366-day window ending at `today`.

    Every day of the window is present exactly once, oldest first, with the
    counts of both providers summed. Records outside the window are dropped.
    """

    if today is None:
        today = today_in_calendar()

    github_counts = _records_by_date(github_records)
    gitlab_counts = _records_by_date(gitlab_records)

    return [
        ContributionDay(
            date=day,
            count=github_counts.get(day, 0) + gitlab_counts.get(day, 0),
        )
        for day in window_dates(today)
    ]


def contribution_level(count: int) -> int:
    """Map daily contribution count to a heatmap level in range 0..4."""

    if count <= 0:
        return 0
    if count == 1:
        return 1
    if count <= 5:
        return 2
    # 6..24 share level 3.
    if count < 25:
        return 3
    return 4


def classify(count: int, colors: ThemeColors) -> str:
    """Return the theme color for a day with `count` contributions."""

    return colors.levels[contribution_level(count)]


def build_week_columns(days: list[ContributionDay]) -> list[WeekColumn]:
    """Lay the timeline out in Sunday-first week columns.

    The first column is left-padded so the first day sits on its weekday row
    and the last column is right-padded to seven slots.
    """

    if not days:
        return []

    current: WeekColumn = [None] * sunday_first_weekday(days[0].date)
    weeks: list[WeekColumn] = []
    for day in days:
        current.append(day)
        if len(current) == DAYS_PER_WEEK:
            weeks.append(current)
            current = []

    if current:
        current.extend([None] * (DAYS_PER_WEEK - len(current)))
        weeks.append(current)

    return weeks

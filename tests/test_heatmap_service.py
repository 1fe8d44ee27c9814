from datetime import date
from datetime import datetime
from datetime import timedelta
from datetime import UTC

from contributions_status.core.calendar import sunday_first_weekday
from contributions_status.core.calendar import today_in_calendar
from contributions_status.services.heatmap_service import build_week_columns
from contributions_status.services.heatmap_service import classify
from contributions_status.services.heatmap_service import contribution_level
from contributions_status.services.heatmap_service import merge_contributions
from contributions_status.services.themes import THEMES
from contributions_status.services.themes import Theme


def test_today_uses_utc_plus_nine_day_boundary() -> None:
    assert today_in_calendar(datetime(2024, 1, 1, 14, 59, tzinfo=UTC)) == date(
        2024, 1, 1
    )
    assert today_in_calendar(datetime(2024, 1, 1, 15, 0, tzinfo=UTC)) == date(
        2024, 1, 2
    )


def test_merge_returns_contiguous_366_day_window(fixed_today: date) -> None:
    days = merge_contributions([], [], today=fixed_today)

    assert len(days) == 366
    assert days[-1].date == fixed_today
    assert days[0].date == fixed_today - timedelta(days=365)
    for previous, current in zip(days, days[1:]):
        assert current.date - previous.date == timedelta(days=1)
    assert all(day.count == 0 for day in days)


def test_merge_sums_counts_from_both_providers(fixed_today: date) -> None:
    github = [
        {"date": "2024-01-01", "count": 3},
        {"date": "2023-12-25", "count": 1},
    ]
    gitlab = [
        {"date": "2024-01-01", "count": 2},
        {"date": "2023-06-15", "count": 4},
    ]

    by_date = {
        day.date: day.count
        for day in merge_contributions(github, gitlab, today=fixed_today)
    }

    assert by_date[date(2024, 1, 1)] == 5
    assert by_date[date(2023, 12, 25)] == 1
    assert by_date[date(2023, 6, 15)] == 4
    assert by_date[date(2023, 6, 16)] == 0


def test_merge_drops_out_of_window_and_malformed_records(fixed_today: date) -> None:
    github = [
        {"date": "2022-01-01", "count": 50},
        {"date": "2024-01-03", "count": 50},
        {"date": "not-a-date", "count": 1},
        {"date": "2023-08-01", "count": "7"},
        {"date": "2023-08-02", "count": -3},
        {"count": 2},
    ]

    days = merge_contributions(github, [], today=fixed_today)

    assert len(days) == 366
    assert sum(day.count for day in days) == 0


def test_merge_duplicate_date_within_provider_last_wins(fixed_today: date) -> None:
    github = [
        {"date": "2023-10-10", "count": 1},
        {"date": "2023-10-10", "count": 4},
    ]

    by_date = {
        day.date: day.count
        for day in merge_contributions(github, [], today=fixed_today)
    }

    assert by_date[date(2023, 10, 10)] == 4


def test_contribution_level_thresholds() -> None:
    expected = {0: 0, 1: 1, 2: 2, 5: 2, 6: 3, 10: 3, 11: 3, 24: 3, 25: 4, 400: 4}

    for count, level in expected.items():
        assert contribution_level(count) == level


def test_contribution_level_is_monotonic() -> None:
    levels = [contribution_level(count) for count in range(0, 60)]

    assert levels == sorted(levels)


def test_classify_picks_theme_color() -> None:
    colors = THEMES[Theme.PINK]

    assert classify(0, colors) == colors.level0
    assert classify(5, colors) == colors.level2
    assert classify(25, colors) == colors.level4


def test_week_columns_pad_first_and_last_week(fixed_today: date) -> None:
    days = merge_contributions([], [], today=fixed_today)

    weeks = build_week_columns(days)

    # 2023-01-02 is a Monday.
    assert weeks[0][0] is None
    assert weeks[0][1] == days[0]
    assert all(len(column) == 7 for column in weeks)
    assert len(weeks) == 53
    assert weeks[-1][2] == days[-1]
    assert weeks[-1][3:] == [None] * 4


def test_week_columns_round_trip_to_timeline(fixed_today: date) -> None:
    github = [{"date": "2023-05-05", "count": 9}]
    days = merge_contributions(github, [], today=fixed_today)

    weeks = build_week_columns(days)

    flattened = [day for column in weeks for day in column if day is not None]
    assert flattened == days


def test_week_columns_place_each_day_on_its_weekday() -> None:
    days = merge_contributions([], [], today=date(2024, 7, 19))

    for column in build_week_columns(days):
        for slot, day in enumerate(column):
            if day is not None:
                assert sunday_first_weekday(day.date) == slot


def test_week_columns_saturday_start_needs_54_columns() -> None:
    # Window 2023-01-07 (Saturday) .. 2024-01-07 (Sunday).
    days = merge_contributions([], [], today=date(2024, 1, 7))

    weeks = build_week_columns(days)

    assert weeks[0][:6] == [None] * 6
    assert weeks[0][6].date == date(2023, 1, 7)
    assert len(weeks) == 54
    assert weeks[-1][0].date == date(2024, 1, 7)


def test_week_columns_empty_timeline() -> None:
    assert build_week_columns([]) == []

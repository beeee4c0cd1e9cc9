from datetime import date

import pytest

from src.library_hours.models.domain import (
    MAX_YEAR,
    MIN_YEAR,
    ClosureException,
    DayOfWeek,
    Location,
    StatusSource,
    WeeklySchedule,
    YearMonth,
)
from src.library_hours.services.calendar.builder import (
    build_month,
    day_css_classes,
    grid_dates,
    truncate_label,
    weeks,
)
from src.library_hours.services.schedule.resolver import resolve_day


def _weekday_schedules(location: Location = Location.GISHUSHU) -> list[WeeklySchedule]:
    schedules = [
        WeeklySchedule(location=location, day_of_week=day, is_open=True, open_time="08:00", close_time="20:00")
        for day in (
            DayOfWeek.MONDAY,
            DayOfWeek.TUESDAY,
            DayOfWeek.WEDNESDAY,
            DayOfWeek.THURSDAY,
            DayOfWeek.FRIDAY,
        )
    ]
    schedules.append(
        WeeklySchedule(location=location, day_of_week=DayOfWeek.SATURDAY, is_open=False, message="Weekend")
    )
    return schedules


@pytest.mark.parametrize(
    "year, month",
    [(2026, 2), (2026, 10), (2026, 12), (2024, 2), (2027, 1)],
)
def test_build_month_always_returns_42_sunday_first_cells(year, month):
    views = build_month(YearMonth(year, month), Location.GISHUSHU, _weekday_schedules(), [], date(2026, 10, 19))

    assert len(views) == 42
    assert views[0].date.weekday() == 6
    for index in range(1, 42):
        assert (views[index].date - views[index - 1].date).days == 1
    for view in views:
        in_month = (view.date.year, view.date.month) == (year, month)
        assert view.is_current_month is in_month


def test_october_2026_grid_boundaries():
    views = build_month(YearMonth(2026, 10), Location.GISHUSHU, _weekday_schedules(), [], date(2026, 10, 19))

    assert views[0].date == date(2026, 9, 27)
    assert views[4].date == date(2026, 10, 1)
    assert views[34].date == date(2026, 10, 31)
    assert views[41].date == date(2026, 11, 7)
    assert [view.is_current_month for view in views[:4]] == [False] * 4
    assert all(not view.is_current_month for view in views[35:])


def test_month_starting_on_sunday_has_no_leading_padding():
    dates = grid_dates(YearMonth(2026, 2))

    assert dates[0] == date(2026, 2, 1)
    assert dates[-1] == date(2026, 3, 14)


def test_is_today_follows_the_argument():
    today = date(2026, 10, 19)
    views = build_month(YearMonth(2026, 10), Location.GISHUSHU, [], [], today)

    flagged = [view for view in views if view.is_today]
    assert len(flagged) == 1
    assert flagged[0].date == today

    elsewhere = build_month(YearMonth(2026, 8), Location.GISHUSHU, [], [], today)
    assert not any(view.is_today for view in elsewhere)


def test_cells_match_resolver_output():
    schedules = _weekday_schedules()
    exceptions = [
        ClosureException(date=date(2026, 10, 20), closed_all_day=True, reason="Heroes Day"),
        ClosureException(
            date=date(2026, 10, 22), location=Location.MASORO, closed_all_day=True, reason="Masoro only"
        ),
    ]

    views = build_month(YearMonth(2026, 10), Location.GISHUSHU, schedules, exceptions, date(2026, 10, 19))

    for view in views:
        assert view.status == resolve_day(view.date, Location.GISHUSHU, schedules, exceptions)
    by_date = {view.date: view for view in views}
    assert by_date[date(2026, 10, 20)].status.source is StatusSource.EXCEPTION
    assert by_date[date(2026, 10, 22)].status.source is StatusSource.SCHEDULE
    assert by_date[date(2026, 10, 25)].status.source is StatusSource.DEFAULT_CLOSED


def test_build_month_is_repeatable():
    args = (YearMonth(2026, 12), Location.MASORO, _weekday_schedules(Location.MASORO), [], date(2026, 12, 1))

    assert build_month(*args) == build_month(*args)


def test_weeks_splits_grid_into_rows():
    rows = weeks(build_month(YearMonth(2026, 10), Location.GISHUSHU, [], [], date(2026, 10, 19)))

    assert len(rows) == 6
    assert all(len(row) == 7 for row in rows)


def test_day_css_classes_reflect_status():
    schedules = _weekday_schedules() + [
        WeeklySchedule(location=Location.MASORO, day_of_week=DayOfWeek.MONDAY, is_open=True,
                       open_time="08:00", close_time="20:00", special_close_time="16:00"),
    ]
    exceptions = [
        ClosureException(date=date(2026, 10, 20), closed_all_day=True),
        ClosureException(date=date(2026, 10, 21), closed_all_day=False, open_time="10:00", close_time="12:00"),
    ]
    today = date(2026, 10, 19)
    views = {
        view.date: view
        for view in build_month(YearMonth(2026, 10), Location.GISHUSHU, schedules, exceptions, today)
    }

    assert day_css_classes(views[today]) == ["calendar-day", "open-day", "today"]
    assert day_css_classes(views[date(2026, 10, 20)]) == [
        "calendar-day", "has-events", "closed-day", "exception-closure",
    ]
    assert day_css_classes(views[date(2026, 10, 21)]) == [
        "calendar-day", "has-events", "special-hours-day", "exception-hours",
    ]
    assert day_css_classes(views[date(2026, 10, 24)]) == ["calendar-day", "closed-day", "weekend"]
    assert "other-month" in day_css_classes(views[date(2026, 9, 28)])

    masoro = build_month(YearMonth(2026, 10), Location.MASORO, schedules, [], today)
    masoro_today = next(view for view in masoro if view.is_today)
    assert day_css_classes(masoro_today) == ["calendar-day", "has-events", "special-hours-day", "today"]


def test_truncate_label():
    assert truncate_label("Short reason") == "Short reason"
    assert truncate_label("Closed for building maintenance") == "Closed for building ..."
    assert truncate_label(None) is None


def test_year_month_navigation():
    assert YearMonth(2026, 1).previous() == YearMonth(2025, 12)
    assert YearMonth(2026, 12).next() == YearMonth(2027, 1)
    assert YearMonth(2026, 10).label == "October 2026"
    with pytest.raises(ValueError):
        YearMonth(2026, 13)


@pytest.mark.parametrize(
    "year_month, first, last",
    [
        (YearMonth(MIN_YEAR, 1), date(1, 12, 30), date(2, 2, 9)),
        (YearMonth(MAX_YEAR, 12), date(9998, 11, 29), date(9999, 1, 9)),
    ],
)
def test_grid_fits_at_both_ends_of_the_year_range(year_month, first, last):
    views = build_month(year_month, Location.GISHUSHU, _weekday_schedules(), [], date(2026, 10, 19))

    assert len(views) == 42
    assert views[0].date == first
    assert views[-1].date == last


@pytest.mark.parametrize("year", [1, 9999])
def test_year_month_rejects_years_whose_grid_would_overflow(year):
    with pytest.raises(ValueError):
        YearMonth(year, 6)


def test_year_month_navigation_stops_at_range_edges():
    assert YearMonth(MIN_YEAR, 1).previous() is None
    assert YearMonth(MIN_YEAR, 1).next() == YearMonth(MIN_YEAR, 2)
    assert YearMonth(MAX_YEAR, 12).next() is None
    assert YearMonth(MAX_YEAR, 12).previous() == YearMonth(MAX_YEAR, 11)

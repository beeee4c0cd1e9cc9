"""Month grid construction for the schedule calendar."""

from __future__ import annotations

from datetime import date, timedelta
from typing import Sequence

from ...models.domain import ClosureException, DayView, Location, WeeklySchedule, YearMonth
from ..schedule.resolver import resolve_day

GRID_ROWS = 6
GRID_COLUMNS = 7
GRID_SIZE = GRID_ROWS * GRID_COLUMNS
WEEKDAY_HEADERS = ("Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat")


def grid_start(year_month: YearMonth) -> date:
    """Sunday on or before the first day of the month."""
    first = year_month.first_day
    # weekday(): Monday=0 .. Sunday=6
    offset = (first.weekday() + 1) % 7
    return first - timedelta(days=offset)


def grid_dates(year_month: YearMonth) -> list[date]:
    start = grid_start(year_month)
    return [start + timedelta(days=index) for index in range(GRID_SIZE)]


def build_month(
    year_month: YearMonth,
    location: Location,
    schedules: Sequence[WeeklySchedule],
    exceptions: Sequence[ClosureException],
    today: date,
) -> list[DayView]:
    """Resolve every cell of a 6x7 Sunday-first grid around ``year_month``.

    Cells outside the month are padding and carry ``is_current_month=False``.
    ``today`` is only compared against, never read from a clock.
    """
    views: list[DayView] = []
    for day in grid_dates(year_month):
        status = resolve_day(day, location, schedules, exceptions)
        views.append(
            DayView(
                status=status,
                is_current_month=(day.year, day.month) == (year_month.year, year_month.month),
                is_today=day == today,
            )
        )
    return views


def weeks(views: Sequence[DayView]) -> list[list[DayView]]:
    return [list(views[row:row + GRID_COLUMNS]) for row in range(0, len(views), GRID_COLUMNS)]


def day_css_classes(view: DayView) -> list[str]:
    classes = ["calendar-day"]
    status = view.status
    if not view.is_current_month:
        classes.append("other-month")
    if status.events:
        classes.append("has-events")
    if status.is_closed:
        classes.append("closed-day")
        if status.is_exception:
            classes.append("exception-closure")
    elif status.has_special_hours:
        classes.append("special-hours-day")
        if status.is_exception:
            classes.append("exception-hours")
    else:
        classes.append("open-day")
    if view.is_today:
        classes.append("today")
    if view.is_weekend:
        classes.append("weekend")
    return classes


def truncate_label(text: str | None, limit: int = 20) -> str | None:
    if text is None or len(text) <= limit:
        return text
    return text[:limit] + "..."

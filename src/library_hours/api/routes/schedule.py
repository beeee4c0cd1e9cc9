"""API routes for resolved opening hours and the month calendar."""

from __future__ import annotations

import logging
from datetime import date

from fastapi import APIRouter, HTTPException, Query, status

from ...config import settings
from ...data.schedule_repository import (
    available_locations,
    exceptions_in_range,
    load_snapshot,
    schedules_for_location,
)
from ...models.domain import MAX_YEAR, MIN_YEAR, Location, YearMonth
from ...schemas.schedule import (
    CalendarMonthResponse,
    ClosureExceptionModel,
    DayStatusModel,
    DayViewModel,
    LocationModel,
    MonthRefModel,
    WeeklyScheduleModel,
    WeeklyScheduleResponse,
)
from ...services.calendar.builder import WEEKDAY_HEADERS, build_month
from ...services.schedule.resolver import resolve_day

router = APIRouter(prefix="/schedule", tags=["schedule"])


def resolve_location(location: str | None) -> Location:
    """Map a query value to a known location, defaulting to the configured one."""
    try:
        return Location.parse(location or settings.default_location)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc


@router.get("/locations", response_model=list[LocationModel])
def list_locations() -> list[LocationModel]:
    snapshot = load_snapshot()
    scheduled = set(available_locations(snapshot.schedules))
    return [LocationModel.from_location(location, location in scheduled) for location in Location]


@router.get("/weekly", response_model=WeeklyScheduleResponse)
def get_weekly_schedule(
    location: str | None = Query(default=None, description="Library location code"),
) -> WeeklyScheduleResponse:
    """Effective weekly opening hours for one location."""
    target_location = resolve_location(location)
    snapshot = load_snapshot()
    return WeeklyScheduleResponse(
        location=target_location.value,
        locationName=target_location.display_name,
        days=[
            WeeklyScheduleModel.from_schedule(schedule)
            for schedule in schedules_for_location(snapshot.schedules, target_location)
        ],
    )


@router.get("/exceptions", response_model=list[ClosureExceptionModel])
def list_exceptions(
    start: date = Query(..., description="First date of the range (inclusive)"),
    end: date = Query(..., description="Last date of the range (inclusive)"),
    location: str | None = Query(default=None, description="Only exceptions that apply to this location"),
) -> list[ClosureExceptionModel]:
    """Closure exceptions in a date range, each with its preview line."""
    if start > end:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=f"start {start.isoformat()} is after end {end.isoformat()}",
        )
    target_location = resolve_location(location) if location else None
    snapshot = load_snapshot()
    return [
        ClosureExceptionModel.from_exception(exception)
        for exception in exceptions_in_range(snapshot.exceptions, start, end, target_location)
    ]


@router.get("/day", response_model=DayStatusModel)
def get_day_status(
    location: str | None = Query(default=None, description="Library location code"),
    day: date | None = Query(default=None, alias="date", description="Date to resolve (defaults to today)"),
) -> DayStatusModel:
    target_location = resolve_location(location)
    snapshot = load_snapshot()
    target = day or date.today()
    day_status = resolve_day(target, target_location, snapshot.schedules, snapshot.exceptions)
    return DayStatusModel.from_status(day_status)


@router.get("/calendar", response_model=CalendarMonthResponse)
def get_calendar(
    location: str | None = Query(default=None, description="Library location code"),
    year: int | None = Query(default=None, ge=MIN_YEAR, le=MAX_YEAR, description="Calendar year"),
    month: int | None = Query(default=None, ge=1, le=12, description="Calendar month (1-12)"),
    today: date | None = Query(default=None, description="Date highlighted as today"),
) -> CalendarMonthResponse:
    """Return the 42-cell month grid for a location.

    Year and month default to the month containing ``today``.
    """
    target_location = resolve_location(location)
    today = today or date.today()
    try:
        year_month = YearMonth(year or today.year, month or today.month)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(exc)) from exc

    snapshot = load_snapshot()
    views = build_month(year_month, target_location, snapshot.schedules, snapshot.exceptions, today)
    logging.debug(
        f"Built calendar {year_month.label} for {target_location.value} "
        f"from snapshot v{snapshot.version}"
    )
    return CalendarMonthResponse(
        location=target_location.value,
        locationName=target_location.display_name,
        year=year_month.year,
        month=year_month.month,
        label=year_month.label,
        weekdays=list(WEEKDAY_HEADERS),
        days=[DayViewModel.from_view(view) for view in views],
        previous=MonthRefModel.from_year_month(year_month.previous()),
        next=MonthRefModel.from_year_month(year_month.next()),
    )

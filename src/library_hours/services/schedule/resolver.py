"""Single-day schedule resolution shared by the calendar and the live status."""

from __future__ import annotations

import logging
from datetime import date
from typing import Optional, Sequence

from ...models.domain import (
    ClosureException,
    DayEvent,
    DayStatus,
    Location,
    StatusSource,
    WeeklySchedule,
    day_of_week,
)
from .times import display_time

CLOSED_FOR_THE_DAY = "Closed for the day"
MODIFIED_HOURS = "Modified hours"
NO_SCHEDULE_DEFINED = "No schedule defined"
CLOSED_REGULAR_SCHEDULE = "Closed (Regular Schedule)"


def find_exception(
    target: date,
    location: Location,
    exceptions: Sequence[ClosureException],
) -> Optional[ClosureException]:
    """First exception in input order that covers ``target`` at ``location``.

    A global exception (no location) matches every location. Several matches for
    the same day are a data problem upstream; the first one is used as-is. Clashes
    are reported once at snapshot load and only at debug level here.
    """
    matches = [exception for exception in exceptions if exception.applies_to(target, location)]
    if not matches:
        return None
    if len(matches) > 1:
        logging.debug(
            f"{len(matches)} closure exceptions match {target.isoformat()} at {location.value}; "
            f"using the first (reason={matches[0].reason!r})"
        )
    return matches[0]


def find_schedule(
    target: date,
    location: Location,
    schedules: Sequence[WeeklySchedule],
) -> Optional[WeeklySchedule]:
    weekday = day_of_week(target)
    for schedule in schedules:
        if schedule.location == location and schedule.day_of_week == weekday:
            return schedule
    return None


def _from_exception(target: date, location: Location, exception: ClosureException) -> DayStatus:
    if exception.closed_all_day:
        return DayStatus(
            date=target,
            location=location,
            is_closed=True,
            is_exception=True,
            source=StatusSource.EXCEPTION,
            reason=exception.reason or CLOSED_FOR_THE_DAY,
            events=(DayEvent(type="closure", title=exception.reason or "Library Closed", full_day=True),),
        )

    open_text, open_value = display_time(exception.open_time)
    close_text, close_value = display_time(exception.close_time)
    return DayStatus(
        date=target,
        location=location,
        is_closed=False,
        is_exception=True,
        has_special_hours=True,
        source=StatusSource.EXCEPTION,
        open=open_text,
        close=close_text,
        open_value=open_value,
        close_value=close_value,
        message=exception.reason or MODIFIED_HOURS,
        events=(
            DayEvent(
                type="modified",
                title=exception.reason or "Modified Hours",
                full_day=False,
                start_time=open_text,
                end_time=close_text,
            ),
        ),
    )


def _from_schedule(target: date, location: Location, schedule: WeeklySchedule) -> DayStatus:
    if not schedule.is_open:
        return DayStatus(
            date=target,
            location=location,
            is_closed=True,
            source=StatusSource.SCHEDULE,
            reason=schedule.message or CLOSED_REGULAR_SCHEDULE,
        )

    has_special_hours = schedule.special_close_time is not None
    open_text, open_value = display_time(schedule.open_time)
    close_text, close_value = display_time(
        schedule.special_close_time if has_special_hours else schedule.close_time
    )
    events: tuple[DayEvent, ...] = ()
    if has_special_hours:
        events = (
            DayEvent(
                type="special-closing",
                title=schedule.message or "Special closing time",
                full_day=False,
                start_time=open_text,
                end_time=close_text,
            ),
        )
    return DayStatus(
        date=target,
        location=location,
        is_closed=False,
        has_special_hours=has_special_hours,
        source=StatusSource.SCHEDULE,
        open=open_text,
        close=close_text,
        open_value=open_value,
        close_value=close_value,
        message=schedule.message,
        events=events,
    )


def resolve_day(
    target: date,
    location: Location,
    schedules: Sequence[WeeklySchedule],
    exceptions: Sequence[ClosureException],
) -> DayStatus:
    """Decide whether ``location`` is open on ``target`` and which hours apply.

    A matching closure exception beats the weekly schedule; a weekday without a
    schedule entry is closed. Inputs are never modified.
    """
    exception = find_exception(target, location, exceptions or ())
    if exception is not None:
        return _from_exception(target, location, exception)

    schedule = find_schedule(target, location, schedules or ())
    if schedule is None:
        return DayStatus(
            date=target,
            location=location,
            is_closed=True,
            source=StatusSource.DEFAULT_CLOSED,
            reason=NO_SCHEDULE_DEFINED,
        )
    return _from_schedule(target, location, schedule)

"""Live open/closed status derived from the resolved schedule for today."""

from __future__ import annotations

import logging
from datetime import date, datetime, timedelta, tzinfo
from typing import Optional, Sequence

from ...models.domain import ClosureException, LiveStatus, Location, WeeklySchedule
from ..schedule.resolver import resolve_day

DEFAULT_SCAN_DAYS = 14


def find_next_opening(
    after: date,
    location: Location,
    schedules: Sequence[WeeklySchedule],
    exceptions: Sequence[ClosureException],
    *,
    scan_days: int = DEFAULT_SCAN_DAYS,
    tz: Optional[tzinfo] = None,
) -> Optional[datetime]:
    """Opening time of the first day after ``after`` that is not closed.

    Looks at most ``scan_days`` days ahead. Returns ``None`` when nothing opens in
    that window or when the first open day has no readable opening time.
    """
    # Never step past the last representable date.
    last_offset = min(scan_days, (date.max - after).days)
    for offset in range(1, last_offset + 1):
        day = after + timedelta(days=offset)
        status = resolve_day(day, location, schedules, exceptions)
        if status.is_closed:
            continue
        if status.open_value is None:
            logging.debug(f"Next open day {day.isoformat()} at {location.value} has no readable opening time")
            return None
        return datetime.combine(day, status.open_value, tzinfo=tz)
    return None


def compute_live_status(
    now: datetime,
    location: Location,
    schedules: Sequence[WeeklySchedule],
    exceptions: Sequence[ClosureException],
    *,
    scan_days: int = DEFAULT_SCAN_DAYS,
) -> LiveStatus:
    """Whether ``location`` is open at ``now`` and when that next changes.

    Opening hours are treated as the half-open interval ``[open, close)``.
    """
    today = resolve_day(now.date(), location, schedules, exceptions)

    def next_opening() -> Optional[datetime]:
        return find_next_opening(
            today.date, location, schedules, exceptions, scan_days=scan_days, tz=now.tzinfo
        )

    if today.is_closed:
        return LiveStatus(is_open=False, message=today.reason, next_change_time=next_opening())

    if today.open_value is None or today.close_value is None:
        # Hours unreadable: trust the declared open flag, but no transition is known.
        return LiveStatus(is_open=True, message=today.message, next_change_time=None)

    current = now.time()
    if current < today.open_value:
        return LiveStatus(
            is_open=False,
            message=today.message,
            next_change_time=datetime.combine(today.date, today.open_value, tzinfo=now.tzinfo),
        )
    if current < today.close_value:
        return LiveStatus(
            is_open=True,
            message=today.message,
            next_change_time=datetime.combine(today.date, today.close_value, tzinfo=now.tzinfo),
        )
    return LiveStatus(is_open=False, message=today.message, next_change_time=next_opening())

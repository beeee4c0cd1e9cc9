"""Schedule data loader with database-first approach, falling back to JSON files."""

from __future__ import annotations

import functools
import itertools
import json
import logging
from collections import defaultdict
from datetime import date, datetime
from pathlib import Path
from typing import Any, Callable, Iterable, Optional, Sequence, TypeVar

from ..config import settings
from ..db.supabase import get_supabase_client
from ..models.domain import (
    ClosureException,
    DayOfWeek,
    Location,
    ScheduleSnapshot,
    WeeklySchedule,
)
from ..services.schedule.times import parse_time

SCHEDULES_TABLE = "library_schedules"
EXCEPTIONS_TABLE = "closure_exceptions"

T = TypeVar("T")

_versions = itertools.count(1)


def _field(row: dict, *names: str) -> Any:
    for name in names:
        if name in row:
            return row[name]
    return None


def _text(value: Any) -> Optional[str]:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _flag(value: Any, default: bool = False) -> bool:
    if value is None:
        return default
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return bool(value)
    return str(value).strip().lower() in {"true", "1", "yes", "y"}


def _exception_date(value: Any) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    text = _text(value)
    if text is None:
        raise ValueError("closure exception has no date")
    # Upstream sends either 2026-12-25 or a full timestamp; only the day matters.
    return date.fromisoformat(text[:10])


def schedule_from_row(row: dict) -> WeeklySchedule:
    """Build a weekly schedule entry from an API/database record."""
    schedule = WeeklySchedule(
        location=Location.parse(row["location"]),
        day_of_week=DayOfWeek.parse(_field(row, "dayOfWeek", "day_of_week")),
        is_open=_flag(_field(row, "isOpen", "is_open"), default=True),
        open_time=_text(_field(row, "openTime", "open_time")),
        close_time=_text(_field(row, "closeTime", "close_time")),
        special_close_time=_text(_field(row, "specialCloseTime", "special_close_time")),
        message=_text(row.get("message")),
    )
    if schedule.is_open:
        opens, closes = parse_time(schedule.open_time), parse_time(schedule.close_time)
        if opens is not None and closes is not None and opens >= closes:
            logging.warning(
                f"Schedule for {schedule.location.value} {schedule.day_of_week.value} "
                f"opens at {schedule.open_time} but closes at {schedule.close_time}"
            )
    return schedule


def exception_from_row(row: dict) -> ClosureException:
    """Build a closure exception from an API/database record."""
    location = _text(row.get("location"))
    exception = ClosureException(
        date=_exception_date(row["date"]),
        location=Location.parse(location) if location else None,
        closed_all_day=_flag(_field(row, "closedAllDay", "closed_all_day"), default=True),
        open_time=_text(_field(row, "openTime", "open_time")),
        close_time=_text(_field(row, "closeTime", "close_time")),
        reason=_text(row.get("reason")),
    )
    if not exception.closed_all_day and (exception.open_time is None or exception.close_time is None):
        logging.warning(
            f"Closure exception on {exception.date.isoformat()} has modified hours "
            f"without both open and close times"
        )
    return exception


def _coerce_rows(rows: Iterable[dict], factory: Callable[[dict], T], label: str) -> tuple[T, ...]:
    items: list[T] = []
    for row in rows:
        try:
            items.append(factory(row))
        except (KeyError, ValueError, TypeError) as e:
            logging.warning(f"Skipping invalid {label} row: {e}")
            continue
    return tuple(items)


def _load_rows_from_database(table: str) -> list[dict] | None:
    """Load raw rows from Supabase. Returns None if the database is not available."""
    supabase = get_supabase_client()
    if not supabase:
        return None

    try:
        response = supabase.table(table).select("*").execute()
        return list(response.data or [])
    except Exception as e:
        logging.warning(f"Failed to read '{table}' from database, falling back to file: {e}")
        return None


def _load_rows_from_file(path: Path) -> list[dict]:
    if not path.exists():
        logging.warning(f"Schedule data file not found: {path}")
        return []

    try:
        with path.open("r", encoding="utf-8") as handle:
            payload = json.load(handle)
    except (OSError, json.JSONDecodeError) as e:
        logging.error(f"Failed to read schedule data from {path}: {e}")
        return []

    if not isinstance(payload, list):
        logging.error(f"Expected a JSON array in {path}, got {type(payload).__name__}")
        return []
    return [row for row in payload if isinstance(row, dict)]


def _build_snapshot(
    schedules_file: Path | None = None,
    exceptions_file: Path | None = None,
) -> ScheduleSnapshot:
    schedule_rows = _load_rows_from_database(SCHEDULES_TABLE)
    exception_rows = _load_rows_from_database(EXCEPTIONS_TABLE)
    source = "database"
    # Both collections come from the same source so a snapshot is never half-database.
    if schedule_rows is None or exception_rows is None:
        source = "file"
        schedule_rows = _load_rows_from_file(schedules_file or settings.schedules_file)
        exception_rows = _load_rows_from_file(exceptions_file or settings.exceptions_file)

    snapshot = ScheduleSnapshot(
        schedules=_coerce_rows(schedule_rows, schedule_from_row, "schedule"),
        exceptions=_coerce_rows(exception_rows, exception_from_row, "closure exception"),
        version=next(_versions),
        source=source,
        loaded_at=datetime.now(),
    )
    for day, location, count in overlapping_exceptions(snapshot.exceptions):
        logging.warning(
            f"{count} closure exceptions match {day.isoformat()} at {location.value}; "
            f"the first in load order is used"
        )
    logging.info(
        f"Loaded schedule snapshot v{snapshot.version} from {source}: "
        f"{len(snapshot.schedules)} schedules, {len(snapshot.exceptions)} exceptions"
    )
    return snapshot


@functools.lru_cache(maxsize=1)
def load_snapshot() -> ScheduleSnapshot:
    """Latest complete schedule snapshot. Cached until ``refresh_snapshot`` is called."""
    return _build_snapshot()


def refresh_snapshot() -> ScheduleSnapshot:
    """Drop the cached snapshot and load a fresh one."""
    load_snapshot.cache_clear()
    return load_snapshot()


def available_locations(schedules: Iterable[WeeklySchedule]) -> list[Location]:
    seen: list[Location] = []
    for schedule in schedules:
        if schedule.location not in seen:
            seen.append(schedule.location)
    return seen


def overlapping_exceptions(
    exceptions: Iterable[ClosureException],
) -> list[tuple[date, Location, int]]:
    """(date, location, count) for every pair with more than one matching exception."""
    by_date: dict[date, list[ClosureException]] = defaultdict(list)
    for exception in exceptions:
        by_date[exception.date].append(exception)

    clashes: list[tuple[date, Location, int]] = []
    for day in sorted(by_date):
        for location in Location:
            count = sum(1 for exception in by_date[day] if exception.applies_to(day, location))
            if count > 1:
                clashes.append((day, location, count))
    return clashes


def schedules_for_location(schedules: Iterable[WeeklySchedule], location: Location) -> list[WeeklySchedule]:
    """Weekly entries for one location, Monday first, keeping only the effective entry per weekday."""
    effective: dict[DayOfWeek, WeeklySchedule] = {}
    for schedule in schedules:
        if schedule.location == location and schedule.day_of_week not in effective:
            effective[schedule.day_of_week] = schedule
    return [effective[day] for day in DayOfWeek if day in effective]


def exceptions_in_range(
    exceptions: Sequence[ClosureException],
    start: date,
    end: date,
    location: Optional[Location] = None,
) -> list[ClosureException]:
    """Exceptions dated within ``[start, end]``, ordered by date.

    With a location, only exceptions that apply there (its own and global ones)
    are returned.
    """
    selected = [
        exception
        for exception in exceptions
        if start <= exception.date <= end
        and (location is None or exception.applies_to(exception.date, location))
    ]
    return sorted(selected, key=lambda exception: exception.date)

"""Domain models for library schedules, closures and resolved statuses."""

from __future__ import annotations

import calendar
from dataclasses import dataclass, field
from datetime import date, datetime, time
from enum import Enum
from typing import Optional, Union

TimeLike = Union[str, time, datetime]

# Calendar months whose 6x7 grid fits inside the date range.
MIN_YEAR = 2
MAX_YEAR = 9998


class Location(str, Enum):
    """Library sites that carry their own schedule."""

    GISHUSHU = "GISHUSHU"
    MASORO = "MASORO"

    @property
    def display_name(self) -> str:
        return LOCATION_DISPLAY_NAMES.get(self, self.value)

    @classmethod
    def parse(cls, value: Union[str, "Location"]) -> "Location":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().upper())
        except ValueError as exc:
            raise ValueError(f"Unknown location '{value}'.") from exc


LOCATION_DISPLAY_NAMES = {
    Location.GISHUSHU: "Gishushu Campus",
    Location.MASORO: "Masoro Campus",
}


class DayOfWeek(str, Enum):
    # ISO order, so date.weekday() indexes the members directly.
    MONDAY = "MONDAY"
    TUESDAY = "TUESDAY"
    WEDNESDAY = "WEDNESDAY"
    THURSDAY = "THURSDAY"
    FRIDAY = "FRIDAY"
    SATURDAY = "SATURDAY"
    SUNDAY = "SUNDAY"

    @property
    def label(self) -> str:
        return self.value.capitalize()

    @classmethod
    def parse(cls, value: Union[str, int, "DayOfWeek"]) -> "DayOfWeek":
        """Accept enum names in any case, or integers counted from Sunday = 0."""
        if isinstance(value, cls):
            return value
        if isinstance(value, int) and not isinstance(value, bool):
            if not 0 <= value <= 6:
                raise ValueError(f"Day index out of range: {value}")
            return _SUNDAY_FIRST[value]
        text = str(value).strip().upper()
        if text.isdigit():
            return cls.parse(int(text))
        try:
            return cls(text)
        except ValueError as exc:
            raise ValueError(f"Unknown day of week '{value}'.") from exc


_ISO_ORDER: tuple[DayOfWeek, ...] = tuple(DayOfWeek)
_SUNDAY_FIRST: tuple[DayOfWeek, ...] = (DayOfWeek.SUNDAY,) + _ISO_ORDER[:6]


def day_of_week(value: date) -> DayOfWeek:
    return _ISO_ORDER[value.weekday()]


class StatusSource(str, Enum):
    EXCEPTION = "EXCEPTION"
    SCHEDULE = "SCHEDULE"
    DEFAULT_CLOSED = "DEFAULT_CLOSED"


@dataclass(frozen=True, slots=True)
class WeeklySchedule:
    """Recurring opening hours for one weekday at one location."""

    location: Location
    day_of_week: DayOfWeek
    is_open: bool
    open_time: Optional[TimeLike] = None
    close_time: Optional[TimeLike] = None
    special_close_time: Optional[TimeLike] = None
    message: Optional[str] = None


@dataclass(frozen=True, slots=True)
class ClosureException:
    """One-off override for a single date. ``location=None`` applies everywhere."""

    date: date
    location: Optional[Location] = None
    closed_all_day: bool = True
    open_time: Optional[TimeLike] = None
    close_time: Optional[TimeLike] = None
    reason: Optional[str] = None

    def applies_to(self, target: date, location: Location) -> bool:
        return self.date == target and (self.location is None or self.location == location)


@dataclass(frozen=True, slots=True)
class DayEvent:
    """Highlight attached to a calendar day (closure, modified or special-closing)."""

    type: str
    title: str
    full_day: bool
    start_time: Optional[str] = None
    end_time: Optional[str] = None


@dataclass(frozen=True, slots=True)
class DayStatus:
    """Resolved outcome for one (date, location) pair.

    ``open``/``close`` hold display text. ``open_value``/``close_value`` are the
    parsed comparison values and stay ``None`` when the source text could not be
    parsed.
    """

    date: date
    location: Location
    is_closed: bool
    source: StatusSource
    is_exception: bool = False
    has_special_hours: bool = False
    open: Optional[str] = None
    close: Optional[str] = None
    message: Optional[str] = None
    reason: Optional[str] = None
    open_value: Optional[time] = None
    close_value: Optional[time] = None
    events: tuple[DayEvent, ...] = ()


@dataclass(frozen=True, slots=True)
class DayView:
    """One cell of the month grid."""

    status: DayStatus
    is_current_month: bool
    is_today: bool

    @property
    def date(self) -> date:
        return self.status.date

    @property
    def is_weekend(self) -> bool:
        return self.status.date.weekday() >= 5


@dataclass(frozen=True, slots=True)
class LiveStatus:
    is_open: bool
    message: Optional[str] = None
    next_change_time: Optional[datetime] = None


@dataclass(frozen=True, slots=True)
class YearMonth:
    year: int
    month: int

    def __post_init__(self) -> None:
        if not 1 <= self.month <= 12:
            raise ValueError(f"month must be between 1 and 12, got {self.month}")
        if not MIN_YEAR <= self.year <= MAX_YEAR:
            raise ValueError(f"year must be between {MIN_YEAR} and {MAX_YEAR}, got {self.year}")

    @classmethod
    def from_date(cls, value: date) -> "YearMonth":
        return cls(value.year, value.month)

    @property
    def first_day(self) -> date:
        return date(self.year, self.month, 1)

    @property
    def days_in_month(self) -> int:
        return calendar.monthrange(self.year, self.month)[1]

    @property
    def label(self) -> str:
        return f"{calendar.month_name[self.month]} {self.year}"

    def previous(self) -> Optional["YearMonth"]:
        """Month before this one, or ``None`` at the start of the supported range."""
        if self.month == 1:
            return YearMonth(self.year - 1, 12) if self.year > MIN_YEAR else None
        return YearMonth(self.year, self.month - 1)

    def next(self) -> Optional["YearMonth"]:
        if self.month == 12:
            return YearMonth(self.year + 1, 1) if self.year < MAX_YEAR else None
        return YearMonth(self.year, self.month + 1)


@dataclass(frozen=True, slots=True)
class ScheduleSnapshot:
    """A complete, immutable copy of schedule data as fetched from the store."""

    schedules: tuple[WeeklySchedule, ...] = ()
    exceptions: tuple[ClosureException, ...] = ()
    version: int = 0
    source: str = "empty"
    loaded_at: Optional[datetime] = field(default=None, compare=False)

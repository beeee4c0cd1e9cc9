"""Pydantic response models for schedule and status endpoints."""

from __future__ import annotations

import datetime as dt
from typing import Optional

from pydantic import BaseModel, Field

from ..models.domain import (
    ClosureException,
    DayEvent,
    DayStatus,
    DayView,
    Location,
    WeeklySchedule,
    YearMonth,
)
from ..services.calendar.builder import day_css_classes
from ..services.schedule.times import display_time
from ..services.status.presentation import describe_exception


class DayEventModel(BaseModel):
    type: str
    title: str
    fullDay: bool
    startTime: Optional[str] = None
    endTime: Optional[str] = None

    @classmethod
    def from_event(cls, event: DayEvent) -> "DayEventModel":
        return cls(
            type=event.type,
            title=event.title,
            fullDay=event.full_day,
            startTime=event.start_time,
            endTime=event.end_time,
        )


def _status_fields(status: DayStatus) -> dict:
    return {
        "date": status.date,
        "location": status.location.value,
        "isClosed": status.is_closed,
        "isException": status.is_exception,
        "hasSpecialHours": status.has_special_hours,
        "open": status.open,
        "close": status.close,
        "message": status.message,
        "reason": status.reason,
        "source": status.source.value,
        "events": [DayEventModel.from_event(event) for event in status.events],
    }


class DayStatusModel(BaseModel):
    date: dt.date
    location: str
    isClosed: bool
    isException: bool
    hasSpecialHours: bool
    open: Optional[str] = None
    close: Optional[str] = None
    message: Optional[str] = None
    reason: Optional[str] = None
    source: str
    events: list[DayEventModel] = Field(default_factory=list)

    @classmethod
    def from_status(cls, status: DayStatus) -> "DayStatusModel":
        return cls(**_status_fields(status))


class DayViewModel(DayStatusModel):
    isCurrentMonth: bool
    isToday: bool
    isWeekend: bool
    cssClasses: list[str]

    @classmethod
    def from_view(cls, view: DayView) -> "DayViewModel":
        return cls(
            **_status_fields(view.status),
            isCurrentMonth=view.is_current_month,
            isToday=view.is_today,
            isWeekend=view.is_weekend,
            cssClasses=day_css_classes(view),
        )


class MonthRefModel(BaseModel):
    year: int
    month: int
    label: str

    @classmethod
    def from_year_month(cls, year_month: Optional[YearMonth]) -> Optional["MonthRefModel"]:
        if year_month is None:
            return None
        return cls(year=year_month.year, month=year_month.month, label=year_month.label)


class CalendarMonthResponse(BaseModel):
    location: str
    locationName: str
    year: int
    month: int
    label: str
    weekdays: list[str]
    days: list[DayViewModel]
    previous: Optional[MonthRefModel] = None
    next: Optional[MonthRefModel] = None


class LocationModel(BaseModel):
    code: str
    name: str
    hasSchedule: bool

    @classmethod
    def from_location(cls, location: Location, has_schedule: bool) -> "LocationModel":
        return cls(code=location.value, name=location.display_name, hasSchedule=has_schedule)


class StatusIndicatorModel(BaseModel):
    color: str
    text: str
    icon: str


class LiveStatusResponse(BaseModel):
    location: str
    locationName: str
    isOpen: bool
    message: Optional[str] = None
    nextChangeTime: Optional[dt.datetime] = None
    closingSoon: bool
    indicator: StatusIndicatorModel
    bannerText: str
    reopeningText: Optional[str] = None
    checkedAt: dt.datetime
    refreshSeconds: int


class WeeklyScheduleModel(BaseModel):
    location: str
    dayOfWeek: str
    dayLabel: str
    isOpen: bool
    openTime: Optional[str] = None
    closeTime: Optional[str] = None
    specialCloseTime: Optional[str] = None
    message: Optional[str] = None

    @classmethod
    def from_schedule(cls, schedule: WeeklySchedule) -> "WeeklyScheduleModel":
        return cls(
            location=schedule.location.value,
            dayOfWeek=schedule.day_of_week.value,
            dayLabel=schedule.day_of_week.label,
            isOpen=schedule.is_open,
            openTime=display_time(schedule.open_time)[0],
            closeTime=display_time(schedule.close_time)[0],
            specialCloseTime=display_time(schedule.special_close_time)[0],
            message=schedule.message,
        )


class WeeklyScheduleResponse(BaseModel):
    location: str
    locationName: str
    days: list[WeeklyScheduleModel]


class ClosureExceptionModel(BaseModel):
    date: dt.date
    location: Optional[str] = None
    closedAllDay: bool
    openTime: Optional[str] = None
    closeTime: Optional[str] = None
    reason: Optional[str] = None
    preview: str

    @classmethod
    def from_exception(cls, exception: ClosureException) -> "ClosureExceptionModel":
        return cls(
            date=exception.date,
            location=exception.location.value if exception.location else None,
            closedAllDay=exception.closed_all_day,
            openTime=display_time(exception.open_time)[0],
            closeTime=display_time(exception.close_time)[0],
            reason=exception.reason,
            preview=describe_exception(exception),
        )

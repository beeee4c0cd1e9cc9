"""Display derivations for the status banner, header indicator and closure previews."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ...models.domain import ClosureException, LiveStatus
from ..schedule.times import format_time, short_time

CLOSING_SOON_HOURS = 2.0


@dataclass(frozen=True, slots=True)
class StatusIndicator:
    color: str
    text: str
    icon: str


def hours_until_change(status: LiveStatus, now: datetime) -> Optional[float]:
    if status.next_change_time is None:
        return None
    return (status.next_change_time - now).total_seconds() / 3600


def is_closing_soon(status: LiveStatus, now: datetime, threshold_hours: float = CLOSING_SOON_HOURS) -> bool:
    if not status.is_open:
        return False
    remaining = hours_until_change(status, now)
    return remaining is not None and remaining <= threshold_hours


def format_change_time(status: LiveStatus) -> str:
    if status.next_change_time is None:
        return ""
    return format_time(status.next_change_time.time())


def status_indicator(
    status: LiveStatus, now: datetime, threshold_hours: float = CLOSING_SOON_HOURS
) -> StatusIndicator:
    """Header badge: red when closed, orange when closing soon, otherwise green."""
    if not status.is_open:
        return StatusIndicator(color="red", text="CLOSED", icon="fa-door-closed")
    if is_closing_soon(status, now, threshold_hours):
        return StatusIndicator(
            color="orange",
            text=f"CLOSING AT {format_change_time(status)}",
            icon="fa-clock",
        )
    return StatusIndicator(color="green", text="OPEN", icon="fa-door-open")


def banner_text(status: LiveStatus, now: datetime, threshold_hours: float = CLOSING_SOON_HOURS) -> str:
    if not status.is_open:
        return "Library is currently CLOSED"
    if is_closing_soon(status, now, threshold_hours):
        return f"Library is CLOSING SOON: at {format_change_time(status)}"
    return "Library is currently OPEN"


def reopening_text(status: LiveStatus) -> Optional[str]:
    if status.is_open or status.next_change_time is None:
        return None
    return f"Reopening at {format_change_time(status)}"


def describe_exception(exception: ClosureException) -> str:
    """Hours line shown when previewing a closure before it is saved."""
    if exception.closed_all_day:
        return "Library will be closed all day"
    return (
        f"Library will be open from {short_time(exception.open_time)} "
        f"to {short_time(exception.close_time)}"
    )

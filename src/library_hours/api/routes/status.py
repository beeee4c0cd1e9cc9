"""Live open/closed status endpoint."""

from __future__ import annotations

from datetime import datetime

from fastapi import APIRouter, Query

from ...config import settings
from ...data.schedule_repository import load_snapshot
from ...schemas.schedule import LiveStatusResponse, StatusIndicatorModel
from ...services.status.presentation import (
    banner_text,
    is_closing_soon,
    reopening_text,
    status_indicator,
)
from ...services.status.service import compute_live_status
from .schedule import resolve_location

router = APIRouter(tags=["status"])


@router.get("/status", response_model=LiveStatusResponse)
def get_live_status(
    location: str | None = Query(default=None, description="Library location code"),
    now: datetime | None = Query(default=None, description="Instant to evaluate (defaults to the server clock)"),
) -> LiveStatusResponse:
    target_location = resolve_location(location)
    now = now or datetime.now()
    snapshot = load_snapshot()

    live = compute_live_status(
        now,
        target_location,
        snapshot.schedules,
        snapshot.exceptions,
        scan_days=settings.next_open_scan_days,
    )
    indicator = status_indicator(live, now, settings.closing_soon_hours)
    return LiveStatusResponse(
        location=target_location.value,
        locationName=target_location.display_name,
        isOpen=live.is_open,
        message=live.message,
        nextChangeTime=live.next_change_time,
        closingSoon=is_closing_soon(live, now, settings.closing_soon_hours),
        indicator=StatusIndicatorModel(color=indicator.color, text=indicator.text, icon=indicator.icon),
        bannerText=banner_text(live, now, settings.closing_soon_hours),
        reopeningText=reopening_text(live),
        checkedAt=now,
        refreshSeconds=settings.status_refresh_seconds,
    )

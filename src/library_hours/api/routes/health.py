"""Health endpoints."""

from __future__ import annotations

from fastapi import APIRouter, status, HTTPException

router = APIRouter(tags=["health"])


@router.get("/health", status_code=status.HTTP_200_OK)
def health_root() -> dict:
    """Simple health check endpoint that doesn't require any dependencies."""
    return {"status": "ok"}


def _get_repository_functions():
    """Lazy import to avoid startup failures."""
    from ...data.schedule_repository import load_snapshot, refresh_snapshot

    return {"load_snapshot": load_snapshot, "refresh_snapshot": refresh_snapshot}


def _describe(snapshot) -> dict:
    return {
        "version": snapshot.version,
        "source": snapshot.source,
        "loaded_at": snapshot.loaded_at.isoformat() if snapshot.loaded_at else None,
        "schedules": len(snapshot.schedules),
        "exceptions": len(snapshot.exceptions),
    }


@router.get("/health/schedule", status_code=status.HTTP_200_OK)
def health_schedule() -> dict:
    """Report which schedule snapshot is currently being served."""
    try:
        snapshot = _get_repository_functions()["load_snapshot"]()
        return {"service": "schedule", "healthy": True, **_describe(snapshot)}
    except Exception as e:
        return {"service": "schedule", "healthy": False, "error": str(e)}


@router.post("/health/refresh-schedule", status_code=status.HTTP_200_OK)
def refresh_schedule() -> dict:
    """Reload weekly schedules and closure exceptions from the store."""
    try:
        snapshot = _get_repository_functions()["refresh_snapshot"]()
    except Exception as exc:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to refresh schedule data: {str(exc)}"
        ) from exc
    return {"status": "success", **_describe(snapshot)}

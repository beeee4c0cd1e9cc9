"""Route group exports."""

from . import health, schedule, status

__all__ = ["health", "schedule", "status"]

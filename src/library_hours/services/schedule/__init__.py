"""Schedule resolution exports."""

from .resolver import find_exception, find_schedule, resolve_day

__all__ = ["resolve_day", "find_exception", "find_schedule"]

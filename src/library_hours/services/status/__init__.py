"""Live status exports."""

from .service import compute_live_status, find_next_opening

__all__ = ["compute_live_status", "find_next_opening"]

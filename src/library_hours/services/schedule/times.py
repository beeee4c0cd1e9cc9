"""Parsing and display helpers for opening/closing times."""

from __future__ import annotations

import logging
from datetime import datetime, time
from typing import Optional

from ...models.domain import TimeLike

_FALLBACK_FORMATS = ("%H:%M", "%H:%M:%S", "%I:%M %p", "%I:%M%p", "%I %p")


def parse_time(value: Optional[TimeLike]) -> Optional[time]:
    """Return the wall-clock time held by ``value`` or ``None`` if it cannot be read.

    Accepts ``time``/``datetime`` objects, ``HH:MM[:SS]`` strings and ISO
    datetime strings such as ``2026-10-19T08:00:00``. Offsets are dropped: all
    times are read on the library's single wall clock.
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.time()
    if isinstance(value, time):
        return value.replace(tzinfo=None)

    text = str(value).strip()
    if not text:
        return None
    try:
        return time.fromisoformat(text).replace(tzinfo=None)
    except ValueError:
        pass
    try:
        return datetime.fromisoformat(text.replace("Z", "+00:00")).time()
    except ValueError:
        pass
    for pattern in _FALLBACK_FORMATS:
        try:
            return datetime.strptime(text.upper(), pattern).time()
        except ValueError:
            continue
    return None


def format_time(value: time) -> str:
    """12-hour display text, e.g. ``8:00 AM`` or ``12:30 PM``."""
    hour = value.hour % 12 or 12
    suffix = "AM" if value.hour < 12 else "PM"
    return f"{hour}:{value.minute:02d} {suffix}"


def display_time(value: Optional[TimeLike]) -> tuple[Optional[str], Optional[time]]:
    """Return ``(display text, comparison value)`` for a stored time.

    Unparseable input keeps its raw text for display and yields ``None`` as the
    comparison value.
    """
    if value is None:
        return None, None
    parsed = parse_time(value)
    if parsed is None:
        logging.debug(f"Could not parse time value {value!r}; displaying it verbatim")
        return str(value), None
    return format_time(parsed), parsed


def short_time(value: Optional[TimeLike]) -> str:
    """``HH:MM`` text for compact previews."""
    if value is None:
        return ""
    parsed = parse_time(value)
    if parsed is None:
        return str(value)[:5]
    return parsed.strftime("%H:%M")

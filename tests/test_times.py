from datetime import datetime, time

import pytest

from src.library_hours.services.schedule.times import (
    display_time,
    format_time,
    parse_time,
    short_time,
)


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("08:00", time(8, 0)),
        ("08:00:00", time(8, 0)),
        ("8:05", time(8, 5)),
        ("2026-10-19T17:45:00", time(17, 45)),
        ("9:30 pm", time(21, 30)),
        (time(7, 15), time(7, 15)),
        (datetime(2026, 10, 19, 6, 0), time(6, 0)),
    ],
)
def test_parse_time_accepts_common_shapes(raw, expected):
    assert parse_time(raw) == expected


@pytest.mark.parametrize("raw", [None, "", "   ", "noon-ish", "25:00"])
def test_parse_time_returns_none_instead_of_raising(raw):
    assert parse_time(raw) is None


def test_format_time_uses_twelve_hour_clock():
    assert format_time(time(0, 0)) == "12:00 AM"
    assert format_time(time(8, 0)) == "8:00 AM"
    assert format_time(time(12, 30)) == "12:30 PM"
    assert format_time(time(20, 5)) == "8:05 PM"


def test_display_time_keeps_raw_text_when_unparseable():
    assert display_time("late") == ("late", None)
    assert display_time(None) == (None, None)
    assert display_time("15:00") == ("3:00 PM", time(15, 0))


def test_short_time():
    assert short_time("2026-12-31T09:00:00") == "09:00"
    assert short_time("17:30:00") == "17:30"
    assert short_time(None) == ""

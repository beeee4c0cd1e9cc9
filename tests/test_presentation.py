from datetime import date, datetime

from src.library_hours.models.domain import ClosureException, LiveStatus
from src.library_hours.services.status.presentation import (
    banner_text,
    describe_exception,
    is_closing_soon,
    reopening_text,
    status_indicator,
)

NOW = datetime(2026, 10, 19, 14, 0)


def test_closed_status_indicator_and_banner():
    status = LiveStatus(is_open=False, message="Public Holiday", next_change_time=datetime(2026, 10, 20, 8, 0))

    indicator = status_indicator(status, NOW)

    assert (indicator.color, indicator.text, indicator.icon) == ("red", "CLOSED", "fa-door-closed")
    assert banner_text(status, NOW) == "Library is currently CLOSED"
    assert reopening_text(status) == "Reopening at 8:00 AM"
    assert is_closing_soon(status, NOW) is False


def test_closing_soon_within_two_hours():
    status = LiveStatus(is_open=True, next_change_time=datetime(2026, 10, 19, 15, 0))

    indicator = status_indicator(status, NOW)

    assert is_closing_soon(status, NOW) is True
    assert indicator.color == "orange"
    assert indicator.text == "CLOSING AT 3:00 PM"
    assert banner_text(status, NOW) == "Library is CLOSING SOON: at 3:00 PM"
    assert reopening_text(status) is None


def test_open_with_plenty_of_time_left():
    status = LiveStatus(is_open=True, next_change_time=datetime(2026, 10, 19, 20, 0))

    assert status_indicator(status, NOW).text == "OPEN"
    assert banner_text(status, NOW) == "Library is currently OPEN"
    assert is_closing_soon(status, NOW, threshold_hours=6) is True


def test_open_without_known_change_is_never_closing_soon():
    status = LiveStatus(is_open=True)

    assert is_closing_soon(status, NOW) is False
    assert status_indicator(status, NOW).color == "green"


def test_describe_exception():
    all_day = ClosureException(date=date(2026, 12, 25), closed_all_day=True)
    partial = ClosureException(
        date=date(2026, 12, 31),
        closed_all_day=False,
        open_time="2026-12-31T09:00:00",
        close_time="13:00:00",
    )

    assert describe_exception(all_day) == "Library will be closed all day"
    assert describe_exception(partial) == "Library will be open from 09:00 to 13:00"

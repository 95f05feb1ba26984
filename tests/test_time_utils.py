from datetime import date, datetime

import pytest

from app.utils.time_utils import (
    event_geometry,
    format_date_time,
    format_duration,
    format_time,
    format_time_string,
    hour_labels,
    is_same_day,
    now_line_position,
    parse_time_of_day,
    snap_to_slot,
    to_24_hour_format,
)


def test_format_time():
    assert format_time(13.25) == "1:15pm"
    assert format_time(8) == "8:00am"
    assert format_time(12.5) == "12:30pm"
    assert format_time(0.75) == "12:45am"


def test_to_24_hour_format():
    assert to_24_hour_format("1:15 PM") == "13:15"
    assert to_24_hour_format("12:00 AM") == "00:00"
    assert to_24_hour_format("12:30 PM") == "12:30"
    assert to_24_hour_format("9:05 am") == "09:05"
    assert to_24_hour_format("1:15pm") == "13:15"
    assert to_24_hour_format("") == ""


def test_to_24_hour_format_rejects_garbage():
    with pytest.raises(ValueError):
        to_24_hour_format("quarter past one")


def test_round_trip_every_quarter_hour():
    for quarter in range(0, 24 * 4):
        hour = quarter / 4
        hours, minutes = divmod(quarter * 15, 60)
        assert to_24_hour_format(format_time(hour)) == f"{hours:02d}:{minutes:02d}"


def test_format_time_string():
    assert format_time_string("13:15") == "1:15 PM"
    assert format_time_string("00:05") == "12:05 AM"
    assert format_time_string("") == ""


def test_parse_time_of_day():
    assert parse_time_of_day("10:30 AM") == 10.5
    assert parse_time_of_day("14:45") == 14.75


def test_format_duration():
    assert format_duration(45) == "45m"
    assert format_duration(60) == "1h"
    assert format_duration(150) == "2h 30m"
    assert format_duration(0) == "0m"
    assert format_duration(None) == "0m"


def test_date_helpers():
    assert format_date_time(date(2026, 2, 11), "09:30") == "2026-02-11 09:30"
    assert is_same_day(datetime(2026, 2, 11, 23, 59), date(2026, 2, 11))
    assert not is_same_day(date(2026, 2, 11), date(2026, 2, 12))


def test_hour_labels_cover_business_hours():
    assert hour_labels() == list(range(8, 20))


def test_now_line_position():
    assert now_line_position(datetime(2026, 2, 11, 9, 30)) == 90
    assert now_line_position(datetime(2026, 2, 11, 7, 59)) is None
    assert now_line_position(datetime(2026, 2, 11, 20, 0)) == 720
    assert now_line_position(datetime(2026, 2, 11, 21, 0)) is None


def test_event_geometry():
    assert event_geometry(9.5, 1.5) == {"top": 90, "height": 90}


def test_snap_to_slot():
    assert snap_to_slot(0) == 8
    assert snap_to_slot(100) == 9.75
    assert snap_to_slot(5000) == 20
    assert snap_to_slot(5000, duration_hours=1.5) == 18.5

"""Tests for station-time parsing and conversion."""
from datetime import date, datetime, timedelta, timezone
from zoneinfo import ZoneInfo

import pytest

from wcpe.errors import BadTime
from wcpe.utils.timezone import (
    NonexistentLocalTime,
    end_of_day,
    parse_clock_time,
    parse_station_time,
    station_date,
    to_local,
    to_utc,
)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("00:00", (0, 0)),
        ("12:00", (12, 0)),
        ("23:59", (23, 59)),
        (" 1:34 ", (1, 34)),
        ("12:01am", (0, 1)),
        ("12:30pm", (12, 30)),
        ("3:34pm", (15, 34)),
        ("11:59PM", (23, 59)),
        ("6:00 am", (6, 0)),
        ("9:05am", (9, 5)),
    ],
)
def test_parse_clock_time_ok(text, expected):
    assert parse_clock_time(text) == expected


@pytest.mark.parametrize(
    "text",
    ["", "00", "-1", "24:00", "A:B", "12:60", "1:-5", "+1:00", "0:30am", "13:00pm", "1:30xm", "pm", ":30"],
)
def test_parse_clock_time_err(text):
    with pytest.raises(BadTime):
        parse_clock_time(text)


def test_bad_time_is_value_error():
    with pytest.raises(ValueError):
        parse_clock_time("noon")


def test_parse_station_time_anchors_to_day(station_tz):
    parsed = parse_station_time(date(2024, 4, 15), "3:34pm", station_tz)

    assert parsed == datetime(2024, 4, 15, 15, 34, tzinfo=station_tz)
    assert parsed.utcoffset() == timedelta(hours=-4)


def test_parse_station_time_spring_forward_gap(station_tz):
    with pytest.raises(NonexistentLocalTime) as exc_info:
        parse_station_time(date(2024, 3, 10), "2:30am", station_tz)

    assert not isinstance(exc_info.value, BadTime)
    assert exc_info.value.text == "2:30am"


def test_parse_station_time_around_gap(station_tz):
    before = parse_station_time(date(2024, 3, 10), "1:59am", station_tz)
    after = parse_station_time(date(2024, 3, 10), "3:00am", station_tz)

    assert after - before == timedelta(minutes=1)


def test_parse_station_time_fall_back_takes_first_occurrence(station_tz):
    parsed = parse_station_time(date(2024, 11, 3), "1:30am", station_tz)

    assert parsed.utcoffset() == timedelta(hours=-4)
    assert to_utc(parsed) == datetime(2024, 11, 3, 5, 30, tzinfo=timezone.utc)


def test_end_of_day(station_tz):
    eod = end_of_day(date(2024, 3, 10), station_tz)

    assert eod == datetime(2024, 3, 10, 23, 59, 59, 999999, tzinfo=station_tz)
    assert eod.utcoffset() == timedelta(hours=-4)


def test_station_date_differs_from_caller_date(station_tz):
    tokyo_morning = datetime(2024, 4, 16, 9, 0, tzinfo=ZoneInfo("Asia/Tokyo"))

    assert station_date(tokyo_morning, station_tz) == date(2024, 4, 15)


def test_to_local_keeps_instant(station_tz):
    start = datetime(2024, 4, 15, 6, 0, tzinfo=station_tz)
    berlin = to_local(start, ZoneInfo("Europe/Berlin"))

    assert berlin.hour == 12
    assert berlin == start

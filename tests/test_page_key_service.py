"""Tests for mapping a request time to the playlist page that holds it."""
from datetime import datetime, timezone
from zoneinfo import ZoneInfo

import pytest

from wcpe.services.page_key_service import page_key_for, playlist_url_for
from wcpe.services.playlist_types import LAYOUTS


def test_weekday_keys(eastern, station_tz):
    assert page_key_for(eastern(2017, 7, 3, 0, 0), "weekday", station_tz) == "mon"
    assert page_key_for(eastern(2017, 7, 7, 12, 0), "weekday", station_tz) == "fri"
    assert page_key_for(eastern(2017, 7, 9, 23, 59), "weekday", station_tz) == "sun"


def test_date_key(eastern, station_tz):
    assert page_key_for(eastern(2024, 4, 5, 9, 30), "date", station_tz) == "2024-04-05"


def test_key_uses_station_day_not_caller_day(station_tz):
    # Monday 00:00 UTC is still Sunday evening at the station
    utc_midnight = datetime(2024, 3, 11, 0, 0, tzinfo=timezone.utc)
    tokyo_morning = datetime(2024, 3, 11, 9, 0, tzinfo=ZoneInfo("Asia/Tokyo"))

    for moment in (utc_midnight, tokyo_morning):
        assert page_key_for(moment, "date", station_tz) == "2024-03-10"
        assert page_key_for(moment, "weekday", station_tz) == "sun"


def test_key_west_of_station(station_tz):
    # 22:30 in Los Angeles is already the next day in New York
    moment = datetime(2024, 4, 15, 22, 30, tzinfo=ZoneInfo("America/Los_Angeles"))

    assert page_key_for(moment, "date", station_tz) == "2024-04-16"
    assert page_key_for(moment, "weekday", station_tz) == "tue"


def test_unknown_key_format(eastern, station_tz):
    with pytest.raises(ValueError):
        page_key_for(eastern(2024, 4, 15), "month", station_tz)


def test_daily_url_avoids_redirect(eastern, station_tz):
    url = playlist_url_for(eastern(2024, 3, 10, 21, 30), LAYOUTS["daily"], station_tz)

    assert url == "https://theclassicalstation.org/listen/playlist/?date=2024-03-10"


def test_weekly_url(eastern, station_tz):
    url = playlist_url_for(eastern(2017, 7, 3, 0, 0), LAYOUTS["weekly"], station_tz)

    assert url == "http://theclassicalstation.org/playing_mon.shtml"

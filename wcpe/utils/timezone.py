"""
Date and Time utilities

This module handles station-time parsing, end-of-day calculation and
conversion between station time and the caller's local time.
Centralizes all wall-clock handling so DST edge cases live in one place.
"""
from datetime import date, datetime, time, timezone, tzinfo
import logging

from wcpe.errors import BadTime

logger = logging.getLogger(__name__)

MERIDIEMS = ("am", "pm")


class NonexistentLocalTime(Exception):
    """Raised when a wall-clock time falls in a spring-forward DST gap

    This is a skip signal, not a parse error: the text was well formed but the
    station clock never showed that time on the given day.
    """

    def __init__(self, base_day: date, text: str):
        super().__init__(f"{text!r} does not exist on {base_day.isoformat()} in station time")
        self.base_day = base_day
        self.text = text


def _parse_number(digits: str, text: str) -> int:
    if not digits or not digits.isascii() or not digits.isdigit():
        raise BadTime(f"Failed to parse the time: {text!r}")
    return int(digits)


def parse_clock_time(text: str) -> tuple[int, int]:
    """
    Parse 'HH:MM' (24-hour) or 'H:MMam' / 'H:MM pm' into (hour, minute)

    The meridiem suffix is detected automatically and is case-insensitive.

    Args:
        text: Time as printed on the playlist page (e.g. '23:59', '3:34pm')

    Returns:
        Tuple of (hour, minute) on the 24-hour clock

    Raises:
        BadTime: If the text does not match either grammar or is out of range
    """
    value = text.strip()
    meridiem = None
    if value[-2:].lower() in MERIDIEMS:
        meridiem = value[-2:].lower()
        value = value[:-2].rstrip()

    hh, colon, mm = value.partition(":")
    if not colon:
        raise BadTime(f"Failed to parse the time: {text!r}")
    hour = _parse_number(hh, text)
    minute = _parse_number(mm, text)

    if meridiem is not None:
        if not 1 <= hour <= 12:
            raise BadTime(f"Hour out of range for {meridiem}: {text!r}")
        if hour == 12:
            hour = 0 if meridiem == "am" else 12
        elif meridiem == "pm":
            hour += 12
    elif hour > 23:
        raise BadTime(f"Hour out of range: {text!r}")

    if minute > 59:
        raise BadTime(f"Minute out of range: {text!r}")

    return hour, minute


def parse_station_time(base_day: date, text: str, tz: tzinfo) -> datetime:
    """
    Anchor a playlist start time to a calendar day in station time

    Ambiguous wall-clock times (the repeated hour when DST ends) resolve to
    the first occurrence, i.e. the earlier instant.

    Args:
        base_day: Station-local calendar day the time belongs to
        text: Time text from the page
        tz: Station timezone

    Returns:
        Timezone-aware datetime in station time

    Raises:
        BadTime: If the text is not a valid time
        NonexistentLocalTime: If the time falls in a spring-forward gap
    """
    hour, minute = parse_clock_time(text)
    candidate = datetime.combine(base_day, time(hour, minute), tzinfo=tz)

    # zoneinfo accepts gap times silently; a UTC round trip exposes them
    round_trip = candidate.astimezone(timezone.utc).astimezone(tz)
    if round_trip.replace(tzinfo=None) != candidate.replace(tzinfo=None):
        raise NonexistentLocalTime(base_day, text)

    return candidate


def end_of_day(base_day: date, tz: tzinfo) -> datetime:
    """Return the last representable instant of base_day in station time"""
    return datetime.combine(base_day, time.max, tzinfo=tz)


def station_date(moment: datetime, tz: tzinfo) -> date:
    """Return the station-local calendar day of an aware datetime"""
    return moment.astimezone(tz).date()


def to_utc(moment: datetime) -> datetime:
    """
    Convert an aware datetime to UTC

    Aware datetimes sharing a tzinfo compare by wall clock, which misorders
    the repeated DST hour; comparisons go through UTC instead.
    """
    return moment.astimezone(timezone.utc)


def to_local(moment: datetime, tz: tzinfo | None = None) -> datetime:
    """
    Convert a station-time datetime to the caller's timezone

    Args:
        moment: Timezone-aware datetime
        tz: Target timezone, or None for the system local timezone

    Returns:
        Timezone-aware datetime in the target timezone
    """
    return moment.astimezone(tz)

from datetime import datetime, timedelta, tzinfo
import logging

from wcpe.errors import Unavailable
from wcpe.utils.timezone import end_of_day, station_date, to_utc

logger = logging.getLogger(__name__)


def availability_window(now: datetime, tz: tzinfo, window: timedelta) -> tuple[datetime, datetime]:
    """
    Return the (exclusive start, inclusive end) of the published playlist window

    The window ends at the end of the current station day and reaches back
    a fixed duration from there.
    """
    window_end = end_of_day(station_date(now, tz), tz)
    return to_utc(window_end) - window, window_end


def validate_request_time(time: datetime, now: datetime, *, tz: tzinfo, window: timedelta) -> None:
    """
    Check the request time against the availability window before fetching

    Args:
        time: Requested moment
        now: Current moment
        tz: Station timezone
        window: How far back the station publishes playlists

    Raises:
        Unavailable: If time is after today's station end-of-day, or at or
            before the start of the window
    """
    window_start, window_end = availability_window(now, tz, window)
    moment = to_utc(time)

    if moment > to_utc(window_end) or moment <= window_start:
        logger.debug(
            "Request %s outside window (%s, %s]",
            time.isoformat(),
            window_start.isoformat(),
            window_end.isoformat(),
        )
        raise Unavailable(
            f"Playlist data is not available for {time.isoformat()} "
            f"(only the {window.days} days up to the end of today)"
        )

from datetime import datetime, tzinfo
from typing import Literal

from wcpe.services.playlist_types import PlaylistLayout
from wcpe.utils.timezone import station_date

WEEKDAY_KEYS = ("mon", "tue", "wed", "thu", "fri", "sat", "sun")


def page_key_for(time: datetime, key_format: Literal["weekday", "date"], tz: tzinfo) -> str:
    """
    Render the page key for the station day containing time

    Args:
        time: Requested moment, in any timezone
        key_format: 'weekday' for 'mon'..'sun', 'date' for 'YYYY-MM-DD'
        tz: Station timezone; the caller's own date is never used

    Returns:
        Page key as the station site expects it
    """
    day = station_date(time, tz)
    if key_format == "weekday":
        return WEEKDAY_KEYS[day.weekday()]
    if key_format == "date":
        return day.isoformat()
    raise ValueError(f"Unknown page key format: {key_format}")


def playlist_url_for(time: datetime, layout: PlaylistLayout, tz: tzinfo) -> str:
    """Return the URL of the playlist page holding time"""
    return layout.url_template.format(key=page_key_for(time, layout.key_format, tz))

"""
Entry Resolver Service

Finds the playlist row airing at the requested moment and turns it into a
ResolvedEntry. Pure: depends only on the request, the rows and the schedule.
"""
from collections.abc import Iterable
from datetime import datetime, tzinfo
import logging

from wcpe.errors import NoEntry
from wcpe.schemas import LookupRequest, ResolvedEntry
from wcpe.services.playlist_types import PlaylistField, PlaylistRow
from wcpe.services.schedule_service import ScheduleTable
from wcpe.utils.text_normalization import MISSING, field_or_missing, normalize_text
from wcpe.utils.timezone import (
    NonexistentLocalTime,
    end_of_day,
    parse_station_time,
    station_date,
    to_local,
    to_utc,
)


logger = logging.getLogger(__name__)


def resolve_entry(
    request: LookupRequest,
    rows: Iterable[PlaylistRow],
    *,
    tz: tzinfo,
    schedule: ScheduleTable | None = None,
) -> ResolvedEntry:
    """
    Resolve the entry whose interval contains the request time

    Start times are anchored to the request's calendar day in station time.
    A row matches from its own start time (inclusive) until the next row's
    start time; the last row runs to the end of the station day. Rows whose
    start time falls in a DST gap are skipped. A blank Program cell inherits
    the program of the row above it.

    Args:
        request: Lookup request
        rows: Playlist rows in page order
        tz: Station timezone
        schedule: Program schedule for pages without a Program column

    Returns:
        ResolvedEntry with times in the request's timezone

    Raises:
        NoEntry: If no row starts at or before the request time
        BadTime: If a row's start time is malformed
    """
    requested = to_utc(request.time)
    base_day = station_date(request.time, tz)

    match: tuple[PlaylistRow, datetime] | None = None
    end_time: datetime | None = None
    program: str | None = None

    for row in rows:
        try:
            start_time = parse_station_time(base_day, row.start_time_raw, tz)
        except NonexistentLocalTime as exc:
            logger.warning("Skipping playlist row: %s", exc)
            continue

        if to_utc(start_time) > requested:
            end_time = start_time
            break

        program = normalize_text(row.get(PlaylistField.PROGRAM)) or program
        match = (row, start_time)

    if match is None:
        raise NoEntry(
            f"Failed to find the playlist entry for {request.time.isoformat()}: "
            "no row starts at or before it"
        )

    row, start_time = match
    if end_time is None:
        end_time = end_of_day(base_day, tz)

    if program is None:
        program = schedule.program_for(start_time) if schedule is not None else MISSING

    local_tz = request.time.tzinfo
    entry = ResolvedEntry(
        program=program,
        start_time=to_local(start_time, local_tz),
        end_time=to_local(end_time, local_tz),
        composer=field_or_missing(row.get(PlaylistField.COMPOSER)),
        title=field_or_missing(row.get(PlaylistField.TITLE)),
        performers=field_or_missing(row.get(PlaylistField.PERFORMERS)),
        record_label=field_or_missing(row.get(PlaylistField.RECORD_LABEL)),
    )
    logger.debug(
        "Resolved %s -> %r (%s - %s)",
        request.time.isoformat(),
        entry.title,
        entry.start_time.isoformat(),
        entry.end_time.isoformat(),
    )
    return entry

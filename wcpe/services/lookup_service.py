"""
Lookup Service

Runs one point-in-time lookup: validate, fetch, parse, resolve.
"""
from __future__ import annotations

from datetime import datetime, timezone
import logging

import httpx

from wcpe.config import Settings, settings as default_settings
from wcpe.schemas import LookupRequest, ResolvedEntry
from wcpe.services.entry_resolver_service import resolve_entry
from wcpe.services.page_cache_service import PageCache
from wcpe.services.page_key_service import playlist_url_for
from wcpe.services.playlist_parser_service import decode_page, parse_playlist
from wcpe.services.playlist_types import LAYOUTS
from wcpe.services.request_validator import validate_request_time
from wcpe.services.schedule_service import build_schedule
from wcpe.utils.file_operations import fetch_page
from wcpe.utils.logging_helpers import (
    log_parse_summary,
    log_request,
    log_section_end,
    log_section_start,
)


logger = logging.getLogger(__name__)


async def lookup(
    request: LookupRequest,
    *,
    config: Settings | None = None,
    use_cache: bool | None = None,
    client: httpx.AsyncClient | None = None,
    now: datetime | None = None,
) -> ResolvedEntry:
    """
    Look up what is (or was) playing on WCPE at request.time

    Downloads one playlist page unless a page stored earlier today is cached.

    Args:
        request: Lookup request
        config: Settings to use instead of the environment-loaded ones
        use_cache: Override config.cache_enabled
        client: httpx client to fetch with
        now: Current moment, for the availability check and cache freshness

    Returns:
        ResolvedEntry for the piece airing at request.time

    Raises:
        Unavailable: Before any fetch, if request.time is outside the window
        TransportError: If the page cannot be downloaded
        ParseFailure: If the page has no playlist
        NoEntry: If nothing on the page starts at or before request.time
        BadTime: If a start time on the page is malformed
    """
    config = config or default_settings
    now = now or datetime.now(timezone.utc)
    use_cache = config.cache_enabled if use_cache is None else use_cache
    tz = config.station_tz
    layout = LAYOUTS[config.playlist_layout]

    log_section_start(logger, "playlist lookup")
    validate_request_time(request.time, now, tz=tz, window=config.availability_window)

    url = playlist_url_for(request.time, layout, tz)
    log_request(logger, request.time, url)

    cache = PageCache(config.cache_path, tz) if use_cache else None
    cached = await cache.get(url, now) if cache is not None else None
    raw = cached
    if raw is None:
        raw = await fetch_page(
            url,
            timeout=config.fetch_timeout_sec,
            user_agent=config.user_agent,
            client=client,
        )

    content = decode_page(raw, config.fallback_encoding)
    rows = parse_playlist(content, layout.expected_labels)
    log_parse_summary(logger, len(rows), layout.name)

    if cache is not None and cached is None:
        await cache.put(url, raw)

    # Pages for the program-less layout rely on the schedule for names
    schedule = None if layout.has_program else build_schedule(tz)
    entry = resolve_entry(request, rows, tz=tz, schedule=schedule)

    log_section_end(logger, "playlist lookup")
    return entry

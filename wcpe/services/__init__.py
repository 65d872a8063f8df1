"""
Services package for wcpe

This package contains the playlist lookup pipeline components.
"""
from wcpe.services.entry_resolver_service import resolve_entry
from wcpe.services.lookup_service import lookup
from wcpe.services.page_key_service import page_key_for, playlist_url_for
from wcpe.services.playlist_parser_service import decode_page, parse_playlist
from wcpe.services.request_validator import validate_request_time
from wcpe.services.schedule_service import ScheduleRule, ScheduleTable, build_schedule

__all__ = [
    'resolve_entry',
    'lookup',
    'page_key_for',
    'playlist_url_for',
    'decode_page',
    'parse_playlist',
    'validate_request_time',
    'ScheduleRule',
    'ScheduleTable',
    'build_schedule',
]

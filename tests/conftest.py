"""Pytest configuration and fixtures for wcpe tests."""
from datetime import datetime
from zoneinfo import ZoneInfo

import pytest

from wcpe.config import Settings
from wcpe.schemas import LookupRequest
from wcpe.services.playlist_types import PlaylistField, PlaylistRow


EASTERN = ZoneInfo("America/New_York")


@pytest.fixture
def station_tz():
    return EASTERN


@pytest.fixture
def eastern():
    """Build a station-time datetime: eastern(2024, 4, 15, 6, 1)."""
    def _eastern(*args, **kwargs) -> datetime:
        return datetime(*args, tzinfo=EASTERN, **kwargs)
    return _eastern


@pytest.fixture
def request_at():
    """Build a LookupRequest from a datetime."""
    def _request_at(moment: datetime) -> LookupRequest:
        return LookupRequest(time=moment)
    return _request_at


@pytest.fixture
def tasso_rows():
    """Two rows of a midnight-to-morning playlist."""
    return [
        PlaylistRow(
            start_time_raw="12:01am",
            fields={
                PlaylistField.COMPOSER: "Franz Liszt",
                PlaylistField.TITLE: "Tasso, lamento e trionfo",
                PlaylistField.PERFORMERS: "Budapest Festival Orchestra",
                PlaylistField.RECORD_LABEL: "Philips",
            },
        ),
        PlaylistRow(
            start_time_raw="6:00am",
            fields={
                PlaylistField.COMPOSER: "George Frideric Handel",
                PlaylistField.TITLE: "Concerto Grosso in B-flat, Op. 6 No. 7",
                PlaylistField.PERFORMERS: "The English Concert",
            },
        ),
    ]


@pytest.fixture
def daily_page() -> str:
    """Current-style page: am/pm times, no Program column."""
    return """<!DOCTYPE html>
<html><head><meta charset="utf-8"><title>Playlist | The Classical Station</title></head>
<body>
<table class="nav"><tr><td>Home</td><td>Listen</td><td>Support</td></tr></table>
<table class="playlist">
  <thead>
    <tr><th>Start Time</th><th>Composer</th><th>Title</th><th>Performers</th><th>Record Label</th></tr>
  </thead>
  <tbody>
    <tr><td>12:01am</td><td>Franz Liszt</td><td>Tasso, lamento e trionfo</td>
        <td>Budapest Festival Orchestra<br>Iván Fischer</td><td>Philips</td></tr>
    <tr><td>6:00am</td><td>George Frideric Handel</td><td>Concerto Grosso in B-flat, Op. 6 No. 7</td>
        <td>The English Concert</td><td>Archiv</td></tr>
    <tr><td>3:34pm</td><td>Gilbert &amp;amp; Sullivan</td><td>Overture to The Mikado</td>
        <td>Pro Arte Orchestra</td><td></td></tr>
  </tbody>
</table>
</body></html>
"""


@pytest.fixture
def weekly_page() -> str:
    """Older page: 24-hour times, Program stamped only where it changes."""
    return """<html><body>
<table border="1">
<tr><th><p>Program
</p></th><th><p>Start Time
</p></th><th><p>Composer
</p></th><th><p>Title
</p></th><th><p>Perfomers
</p></th></tr>
<tr><td>Sleepers, Awake!</td><td>00:01</td><td>Franz Liszt</td><td>Tasso, lamento e trionfo</td><td>Budapest Festival Orchestra</td></tr>
<tr><td> </td><td>01:15</td><td>Johann Sebastian Bach</td><td>Brandenburg Concerto No. 3</td><td>Academy of St. Martin in the Fields</td></tr>
<tr><td></td><td>&nbsp;</td><td></td><td></td><td></td></tr>
<tr><td>Rise and Shine</td><td>06:00</td><td>George Frideric Handel</td><td>Concerto Grosso in B-flat, Op. 6 No. 7</td><td>The English Concert</td></tr>
</table>
</body></html>
"""


@pytest.fixture
def card_page() -> str:
    """Card-list page without a playlist table."""
    return """<html><body>
<ul class="playlist">
  <li class="playlist-item"><dl>
    <dt>Start Time</dt><dd>12:01am</dd>
    <dt>Composer</dt><dd>Franz Liszt</dd>
    <dt>Title</dt><dd>Tasso, lamento e trionfo</dd>
  </dl></li>
  <li class="playlist-item"><dl>
    <dt>Start Time</dt><dd>6:00am</dd>
    <dt>Composer</dt><dd>George Frideric Handel</dd>
    <dt>Title</dt><dd>Concerto Grosso in B-flat, Op. 6 No. 7</dd>
    <dt>Record Label</dt><dd>Archiv</dd>
  </dl></li>
</ul>
</body></html>
"""


@pytest.fixture
def make_settings(tmp_path):
    """Build Settings with the page cache under tmp_path."""
    def _make_settings(**overrides) -> Settings:
        values = {"cache_dir": str(tmp_path / "cache")}
        values.update(overrides)
        return Settings(**values)
    return _make_settings

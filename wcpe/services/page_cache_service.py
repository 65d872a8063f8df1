"""
Page Cache Service

Keeps downloaded playlist pages on disk, keyed by the exact fetch URL. A page
is served from the cache only if it was stored during the current station
day; anything older is treated as a miss and re-downloaded.
"""
from datetime import datetime, timezone, tzinfo
from hashlib import sha256
from pathlib import Path
import logging

import aiofiles.os

from wcpe.utils.file_operations import cleanup_file, read_file, write_file
from wcpe.utils.timezone import station_date


logger = logging.getLogger(__name__)


class PageCache:
    """On-disk cache of raw playlist pages."""

    def __init__(self, directory: Path | str, tz: tzinfo) -> None:
        self.directory = Path(directory)
        self.tz = tz

    def path_for(self, url: str) -> Path:
        return self.directory / f"{sha256(url.encode('utf-8')).hexdigest()}.html"

    async def get(self, url: str, now: datetime) -> bytes | None:
        """
        Return the cached page for url if it was stored today (station time)

        Args:
            url: Fetch URL the page was stored under
            now: Current moment

        Returns:
            Cached page bytes, or None on a miss
        """
        path = self.path_for(url)
        try:
            stat = await aiofiles.os.stat(path)
        except FileNotFoundError:
            logger.debug("Cache miss for %s", url)
            return None
        except OSError as e:
            logger.warning("Cannot stat cache file %s: %s", path, e)
            return None

        stored_at = datetime.fromtimestamp(stat.st_mtime, tz=timezone.utc)
        if station_date(stored_at, self.tz) != station_date(now, self.tz):
            logger.debug("Cached page for %s is from %s, discarding", url, stored_at.isoformat())
            await cleanup_file(path)
            return None

        try:
            content = await read_file(path)
        except OSError as e:
            logger.warning("Cannot read cache file %s: %s", path, e)
            return None

        logger.debug("Cache hit for %s (%s bytes)", url, len(content))
        return content

    async def put(self, url: str, content: bytes) -> None:
        """Store a downloaded page; failures are logged, not raised"""
        path = self.path_for(url)
        try:
            await write_file(path, content)
        except OSError as e:
            logger.warning("Cannot write cache file %s: %s", path, e)
            return
        logger.debug("Cached page for %s at %s", url, path)

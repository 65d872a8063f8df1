"""
File operation utilities

This module handles the playlist page download and the cache file reads and
writes behind it.
"""
import asyncio
import logging
from pathlib import Path

import aiofiles
import aiofiles.os
import httpx

from wcpe.errors import TransportError


logger = logging.getLogger(__name__)


async def fetch_page(
    url: str,
    *,
    timeout: float = 30.0,
    user_agent: str | None = None,
    client: httpx.AsyncClient | None = None
) -> bytes:
    """
    Download a playlist page

    The whole request, body included, is bounded by timeout and cancelled
    when it expires. Failures are not retried.

    Args:
        url: Fully formed page URL
        timeout: Seconds before the download is abandoned
        user_agent: User-Agent header to send
        client: Existing client to use instead of a one-off one

    Returns:
        Raw response body

    Raises:
        TransportError: On timeout, connection failure or a non-2xx response
    """
    logger.info(f"Downloading playlist page from {url}...")
    headers = {"User-Agent": user_agent} if user_agent else None

    async def _get(http: httpx.AsyncClient) -> bytes:
        response = await http.get(url, headers=headers)
        response.raise_for_status()
        return response.content

    try:
        if client is not None:
            content = await asyncio.wait_for(_get(client), timeout=timeout)
        else:
            async with httpx.AsyncClient(timeout=timeout, follow_redirects=True) as http:
                content = await asyncio.wait_for(_get(http), timeout=timeout)

    except asyncio.TimeoutError as e:
        logger.error(f"Download timed out after {timeout}s: {url}")
        raise TransportError(f"Timed out downloading {url} after {timeout}s", cause=e) from e

    except httpx.HTTPStatusError as e:
        logger.error(f"HTTP {e.response.status_code} downloading {url}")
        raise TransportError(
            f"HTTP {e.response.status_code} downloading {url}", cause=e
        ) from e

    except httpx.HTTPError as e:
        logger.error(f"Download failed ({type(e).__name__}): {e}")
        raise TransportError(f"Failed to download {url}: {e}", cause=e) from e

    logger.info(f"Downloaded {len(content) / 1024:.1f} KB from {url}")
    return content


async def read_file(file_path: Path) -> bytes:
    """Read a whole file"""
    async with aiofiles.open(file_path, "rb") as f:
        return await f.read()


async def write_file(file_path: Path, content: bytes) -> None:
    """
    Write a file atomically

    Content goes to a sibling temporary file that is then renamed over
    file_path, so readers never see a partial page.
    """
    await aiofiles.os.makedirs(file_path.parent, exist_ok=True)
    temp_file = file_path.with_suffix(file_path.suffix + ".tmp")
    async with aiofiles.open(temp_file, "wb") as f:
        await f.write(content)
    await aiofiles.os.replace(temp_file, file_path)


async def cleanup_file(file_path: Path) -> bool:
    """
    Safely delete a file

    Args:
        file_path: Path to file to delete

    Returns:
        True if deleted successfully, False otherwise
    """
    try:
        await aiofiles.os.remove(file_path)
        logger.debug(f"Removed file: {file_path}")
        return True
    except FileNotFoundError:
        return False
    except (OSError, PermissionError) as e:
        logger.warning(f"Failed to delete file {file_path}: {e}")
        return False

"""
Lookup errors

Every failure of a single lookup surfaces as one of these. All are terminal:
nothing inside the package retries.
"""


class WCPEError(Exception):
    """Base class for lookup failures"""
    message = "Lookup failed"

    def __init__(self, message: str | None = None):
        super().__init__(message or self.message)


class TransportError(WCPEError):
    """Raised when the playlist page could not be downloaded

    The underlying httpx/asyncio exception is chained as ``__cause__`` and
    kept on ``cause``.
    """
    message = "Failed to download the playlist page"

    def __init__(self, message: str | None = None, cause: BaseException | None = None):
        super().__init__(message)
        self.cause = cause


class Unavailable(WCPEError):
    """Raised when the request time is outside the published playlist window"""
    message = "Playlist data is not available for the requested time"


class ParseFailure(WCPEError):
    """Raised when the playlist container is missing from the page"""
    message = "Failed to parse the playlist page"


class NoEntry(WCPEError):
    """Raised when no playlist row starts at or before the request time"""
    message = "Failed to find the playlist entry for the requested time"


class BadTime(WCPEError, ValueError):
    """Raised when a start time does not match HH:MM or H:MMam/pm"""
    message = "Failed to parse the time"


__all__ = [
    "WCPEError",
    "TransportError",
    "Unavailable",
    "ParseFailure",
    "NoEntry",
    "BadTime",
]

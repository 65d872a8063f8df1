"""
What's On WCPE?

Find out what is playing on the classical radio station WCPE
(https://theclassicalstation.org) at a given moment.
"""
__version__ = "0.2.0"

from wcpe.errors import BadTime, NoEntry, ParseFailure, TransportError, Unavailable, WCPEError
from wcpe.schemas import LookupRequest, ResolvedEntry
from wcpe.services.lookup_service import lookup

__all__ = [
    "lookup",
    "LookupRequest",
    "ResolvedEntry",
    "WCPEError",
    "TransportError",
    "Unavailable",
    "ParseFailure",
    "NoEntry",
    "BadTime",
]

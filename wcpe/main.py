"""
Command-line entry point: show what is playing on WCPE.
"""
from datetime import datetime, time, timezone
from typing import NoReturn
import argparse
import asyncio
import logging
import sys

from wcpe import __version__
from wcpe.config import settings, setup_logging
from wcpe.errors import BadTime, WCPEError
from wcpe.schemas import LookupRequest, ResolvedEntry
from wcpe.services.lookup_service import lookup
from wcpe.utils.timezone import MERIDIEMS, parse_clock_time


logger = logging.getLogger(__name__)

TIME_FORMAT = "%H:%M"


class WCPEArgumentParser(argparse.ArgumentParser):
    """Reports usage errors with the same exit status as lookup errors."""

    def error(self, message: str) -> NoReturn:
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


def _lookup_options() -> argparse.ArgumentParser:
    # Built once per parser, since parents share action objects. SUPPRESS
    # keeps the lookup command from clearing options given before it
    options = argparse.ArgumentParser(add_help=False, argument_default=argparse.SUPPRESS)
    options.add_argument(
        "-t", "--time",
        metavar="HH:MM[am|pm]",
        help="Look up a specific time today (local time)",
    )
    options.add_argument(
        "--no-cache",
        action="store_true",
        help="Always download the playlist page",
    )
    options.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log progress to stderr",
    )
    return options


def build_parser() -> argparse.ArgumentParser:
    parser = WCPEArgumentParser(
        prog="wcpe",
        description="Show what is playing on WCPE - theclassicalstation.org",
        parents=[_lookup_options()],
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.set_defaults(time=None, no_cache=False, verbose=False)

    subparsers = parser.add_subparsers(dest="command")
    subparsers.add_parser(
        "lookup",
        parents=[_lookup_options()],
        help="Look up the current piece (default)",
    )
    return parser


def parse_time_arg(arg: str, now: datetime) -> datetime:
    """
    Interpret a --time argument as a time today in the caller's timezone

    The UTC offset is the one in effect at that wall time, which differs
    from now's on a daylight saving change day.

    Accepts 'HH:MM', 'H:MMam'/'H:MMpm' and a bare hour ('14', '2pm').

    Raises:
        BadTime: If arg is not a valid time
    """
    text = arg.strip()
    suffix = text[-2:] if text[-2:].lower() in MERIDIEMS else ""
    clock = text[:len(text) - len(suffix)].rstrip()
    if clock and ":" not in clock:
        clock += ":00"
    hour, minute = parse_clock_time(clock + suffix)
    wall = datetime.combine(now.date(), time(hour, minute))
    if isinstance(now.tzinfo, timezone):
        # A fixed offset only holds for now; the system zone picks the one
        # in effect at the requested wall time
        return wall.astimezone()
    return wall.replace(tzinfo=now.tzinfo)


def format_entry(entry: ResolvedEntry) -> str:
    time_range = f"{entry.start_time.strftime(TIME_FORMAT)} - {entry.end_time.strftime(TIME_FORMAT)}"
    lines = [
        ("Program", entry.program),
        ("Time", time_range),
        ("Composer", entry.composer),
        ("Title", entry.title),
        ("Performers", entry.performers),
        ("Record Label", entry.record_label),
    ]
    return "\n".join(f"{label:<14}{value}" for label, value in lines)


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(logging.DEBUG if args.verbose else None)
    settings.log_configuration()

    now = datetime.now().astimezone().replace(microsecond=0)
    if args.time is None:
        moment = now
    else:
        try:
            moment = parse_time_arg(args.time, now)
        except BadTime:
            print(f"{args.time}: Invalid argument", file=sys.stderr)
            print("For more information try --help", file=sys.stderr)
            return 1

    use_cache = settings.cache_enabled and not args.no_cache
    try:
        entry = asyncio.run(lookup(LookupRequest(time=moment), use_cache=use_cache))
    except WCPEError as err:
        logger.debug("Lookup failed", exc_info=True)
        print(err, file=sys.stderr)
        return 1

    print(format_entry(entry))
    return 0


if __name__ == "__main__":
    sys.exit(main())

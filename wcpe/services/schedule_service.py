"""
Program Schedule Service

Maps a moment to the WCPE program airing then. Used for playlist pages that
do not name the program themselves.
"""
from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from datetime import datetime, tzinfo
from zoneinfo import ZoneInfo
import logging

from wcpe.utils.text_normalization import MISSING


logger = logging.getLogger(__name__)

MON, TUE, WED, THU, FRI, SAT, SUN = range(7)
WEEKDAYS = frozenset({MON, TUE, WED, THU, FRI})
SATURDAY = frozenset({SAT})
SUNDAY = frozenset({SUN})
EVERY_DAY = frozenset(range(7))

STATION_TZ = ZoneInfo("America/New_York")


@dataclass(frozen=True, slots=True)
class ScheduleRule:
    """
    One block of the program grid.

    hours is half-open [start, end); days_of_month is inclusive; months and
    days_of_month are optional narrowing for specialty programs.
    """
    weekdays: frozenset[int]
    hours: tuple[int, int]
    program: str
    days_of_month: tuple[int, int] | None = None
    months: frozenset[int] | None = None

    def matches(self, moment: datetime) -> bool:
        if moment.weekday() not in self.weekdays:
            return False
        start, end = self.hours
        if not start <= moment.hour < end:
            return False
        if self.days_of_month is not None:
            first, last = self.days_of_month
            if not first <= moment.day <= last:
                return False
        if self.months is not None and moment.month not in self.months:
            return False
        return True


class ScheduleTable:
    """Specialty overrides layered over the regular weekly grid."""

    def __init__(
        self,
        specialty_rules: Iterable[ScheduleRule],
        regular_rules: Iterable[ScheduleRule],
        tz: tzinfo | None = None,
    ) -> None:
        self.specialty_rules: tuple[ScheduleRule, ...] = tuple(specialty_rules)
        self.regular_rules: tuple[ScheduleRule, ...] = tuple(regular_rules)
        self.tz = tz or STATION_TZ

    @property
    def rules(self) -> Sequence[ScheduleRule]:
        """All rules in evaluation order"""
        return self.specialty_rules + self.regular_rules

    def program_for(self, moment: datetime) -> str:
        """
        Return the program airing at moment

        Args:
            moment: Timezone-aware datetime, converted to station time

        Returns:
            Program name, or the missing-field sentinel on a coverage gap
        """
        local = moment.astimezone(self.tz)
        for rule in self.rules:
            if rule.matches(local):
                return rule.program

        logger.warning("No scheduled program covers %s", local.isoformat())
        return MISSING


SPECIALTY_RULES: tuple[ScheduleRule, ...] = (
    # Live opera matinees during the broadcast season
    ScheduleRule(SATURDAY, (13, 17), "The Metropolitan Opera", months=frozenset({12, 1, 2, 3, 4, 5})),
    ScheduleRule(frozenset({MON}), (19, 24), "Monday Night at the Opera"),
    # First Sunday of the month
    ScheduleRule(SUNDAY, (12, 13), "Sing for Joy", days_of_month=(1, 7)),
    ScheduleRule(SUNDAY, (22, 23), "Thoroughly Modern", days_of_month=(15, 21)),
    ScheduleRule(SUNDAY, (8, 12), "Great Sacred Music for Christmas", days_of_month=(18, 31), months=frozenset({12})),
)

REGULAR_RULES: tuple[ScheduleRule, ...] = (
    ScheduleRule(EVERY_DAY, (0, 6), "Sleepers, Awake!"),
    ScheduleRule(WEEKDAYS, (6, 10), "Rise and Shine"),
    ScheduleRule(WEEKDAYS, (10, 13), "Classical Cafe"),
    ScheduleRule(WEEKDAYS, (13, 16), "Afternoon Classics"),
    ScheduleRule(WEEKDAYS, (16, 19), "Allegro"),
    ScheduleRule(WEEKDAYS, (19, 24), "Music in the Night"),
    ScheduleRule(SATURDAY, (6, 13), "Weekend Classics"),
    ScheduleRule(SATURDAY, (13, 18), "Saturday Afternoon Classics"),
    ScheduleRule(SATURDAY, (18, 24), "Saturday Evening Request Program"),
    ScheduleRule(SUNDAY, (6, 8), "Weekend Classics"),
    ScheduleRule(SUNDAY, (8, 12), "Great Sacred Music"),
    ScheduleRule(SUNDAY, (12, 17), "Sunday Afternoon Classics"),
    ScheduleRule(SUNDAY, (17, 18), "Preview!"),
    ScheduleRule(SUNDAY, (18, 20), "Renaissance Fare"),
    ScheduleRule(SUNDAY, (20, 22), "Peaceful Reflections"),
    ScheduleRule(SUNDAY, (22, 24), "Music in the Night"),
)


def build_schedule(tz: tzinfo | None = None) -> ScheduleTable:
    """Return the WCPE program schedule evaluated in tz (station time by default)"""
    return ScheduleTable(SPECIALTY_RULES, REGULAR_RULES, tz)


__all__ = [
    "MISSING",
    "ScheduleRule",
    "ScheduleTable",
    "SPECIALTY_RULES",
    "REGULAR_RULES",
    "build_schedule",
]

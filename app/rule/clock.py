"""
Calendar clock.

Resolves an instant to a *local* calendar date and Sunday-first weekday
index in a fixed IANA time zone.  The conversion goes through
:mod:`zoneinfo`, never through fixed UTC offsets, so daylight-saving
transitions land on the right day.

Only the clock reads the system time; every other function in
:mod:`app.rule` takes the local day as an explicit argument.
"""

from __future__ import annotations

import datetime
from dataclasses import dataclass
from typing import Callable, Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from app.rule.errors import InvalidInputError

DEFAULT_TIME_ZONE = "America/New_York"


@dataclass(frozen=True)
class LocalDay:
    """A local calendar date with its weekday index (Sunday=0)."""

    date_local: datetime.date
    weekday: int

    @classmethod
    def from_date(cls, value: datetime.date) -> LocalDay:
        return cls(date_local=value, weekday=sunday_first_weekday(value))

    @property
    def iso(self) -> str:
        return self.date_local.isoformat()


def sunday_first_weekday(value: datetime.date) -> int:
    """Weekday index with Sunday=0 (``date.weekday()`` has Monday=0)."""
    return (value.weekday() + 1) % 7


def parse_local_date(value: str | datetime.date) -> datetime.date:
    """Parse a ``YYYY-MM-DD`` string.  Dates pass through unchanged."""
    if isinstance(value, datetime.datetime):
        return value.date()
    if isinstance(value, datetime.date):
        return value
    try:
        if len(value) != 10:
            raise ValueError(value)
        return datetime.date.fromisoformat(value)
    except (TypeError, ValueError):
        raise InvalidInputError(f"Invalid local date: {value!r}") from None


def check_weekday(weekday: int) -> int:
    if not isinstance(weekday, int) or isinstance(weekday, bool) or not 0 <= weekday <= 6:
        raise InvalidInputError(f"Weekday index out of range: {weekday!r}")
    return weekday


def utcnow() -> datetime.datetime:
    """Current instant in UTC, timezone-aware."""
    return datetime.datetime.now(datetime.timezone.utc)


class LocalClock:
    """Clock bound to one time zone.

    Args:
        time_zone: IANA zone name, e.g. ``"America/New_York"``.
        now: Source of the current instant; injectable for tests.
    """

    def __init__(self, time_zone: str = DEFAULT_TIME_ZONE,
                 now: Optional[Callable[[], datetime.datetime]] = None):
        try:
            self.zone = ZoneInfo(time_zone)
        except (ZoneInfoNotFoundError, ValueError):
            raise InvalidInputError(f"Unknown time zone: {time_zone!r}") from None
        self.time_zone = time_zone
        self._now = now or utcnow

    def now(self) -> datetime.datetime:
        """Current instant, timezone-aware."""
        return self._now()

    def local_day(self, instant: datetime.datetime) -> LocalDay:
        """Local date and weekday of *instant* in this clock's zone."""
        if instant.tzinfo is None:
            instant = instant.replace(tzinfo=datetime.timezone.utc)
        return LocalDay.from_date(instant.astimezone(self.zone).date())

    def today(self) -> LocalDay:
        return self.local_day(self.now())

"""
Liturgical season resolution.

Maps a local calendar date to its liturgical season and principal
celebration, following the General Roman Calendar as observed in the
United States (Epiphany on the Sunday between January 2 and 8, Ascension
and Corpus Christi on Sundays).

Season boundaries for civil year ``Y``::

    Jan 1 .. Baptism of the Lord          CHRISTMAS
    .. day before Ash Wednesday           ORDINARY_TIME
    Ash Wednesday .. day before Palm Sun  LENT
    Palm Sunday .. Holy Saturday          HOLY_WEEK
    Easter Sunday .. Pentecost            EASTER
    .. day before 1st Sunday of Advent    ORDINARY_TIME
    1st Sunday of Advent .. Dec 24        ADVENT
    Dec 25 .. Dec 31                      CHRISTMAS

Easter comes from :func:`dateutil.easter.easter` (Western computus),
which bounds the supported years to 1583-4099.

Three resolvers share one interface:

- :class:`ComputedSeasonResolver` -- pure computation, no storage.
- :class:`CachedSeasonResolver` -- cache-aside over a
  :class:`LiturgicalDayCache`; a miss computes and stores the whole year.
- :class:`FallbackSeasonResolver` -- tries a primary resolver and falls
  back to a secondary one on storage errors.
"""

from __future__ import annotations

import datetime
import logging
from functools import lru_cache
from typing import Optional, Protocol, Sequence

from dateutil.easter import EASTER_WESTERN, easter
from num2words import num2words
from sqlalchemy.exc import SQLAlchemyError

from app.rule.clock import parse_local_date, sunday_first_weekday
from app.rule.errors import InvalidInputError
from app.schemas.liturgical import LiturgicalDay
from app.schemas.practice import Season

logger = logging.getLogger(__name__)

MIN_YEAR = 1583
MAX_YEAR = 4099

# Season names as produced by external calendar sources
_SEASON_ALIASES: dict[str, Season] = {
    "Advent": Season.ADVENT,
    "Christmastide": Season.CHRISTMAS,
    "Christmas": Season.CHRISTMAS,
    "Lent": Season.LENT,
    "Holy Week": Season.HOLY_WEEK,
    "Easter": Season.EASTER,
    "Eastertide": Season.EASTER,
    "Early Ordinary Time": Season.ORDINARY_TIME,
    "Later Ordinary Time": Season.ORDINARY_TIME,
    "Ordinary Time": Season.ORDINARY_TIME,
}

SOLEMNITY = "SOLEMNITY"
FEAST = "FEAST"
SUNDAY = "SUNDAY"
TRIDUUM = "TRIDUUM"
HOLY_WEEK = "HOLY_WEEK"
ASH_WEDNESDAY = "ASH_WEDNESDAY"

_DAY = datetime.timedelta(days=1)
_WEEK = datetime.timedelta(days=7)


def normalize_season(key: str) -> Season:
    """Map a season name or enum value to :class:`Season`."""
    if key in Season.__members__:
        return Season(key)
    try:
        return _SEASON_ALIASES[key]
    except KeyError:
        raise InvalidInputError(f"Unsupported season: {key!r}") from None


def check_year(year: int) -> int:
    if not MIN_YEAR <= year <= MAX_YEAR:
        raise InvalidInputError(f"Year {year} outside the computable range {MIN_YEAR}-{MAX_YEAR}")
    return year


def _ordinal(n: int) -> str:
    """Numeric ordinal such as 1st or 33rd."""
    return num2words(n, to="ordinal_num")


def _next_sunday_after(day: datetime.date) -> datetime.date:
    """First Sunday strictly after *day*."""
    return day + datetime.timedelta(days=7 - sunday_first_weekday(day))


# ======================================================================
# Key dates
# ======================================================================


def easter_sunday(year: int) -> datetime.date:
    return easter(check_year(year), EASTER_WESTERN)


def epiphany(year: int) -> datetime.date:
    """Sunday between January 2 and January 8."""
    jan2 = datetime.date(year, 1, 2)
    return jan2 + datetime.timedelta(days=(7 - sunday_first_weekday(jan2)) % 7)


def baptism_of_the_lord(year: int) -> datetime.date:
    """Sunday after Epiphany, or the Monday when Epiphany falls on Jan 7 or 8."""
    e = epiphany(year)
    if e.day >= 7:
        return e + _DAY
    return e + _WEEK


def first_sunday_of_advent(year: int) -> datetime.date:
    """Fourth Sunday before Christmas Day."""
    dec24 = datetime.date(year, 12, 24)
    fourth = dec24 - datetime.timedelta(days=sunday_first_weekday(dec24))
    return fourth - 3 * _WEEK


def holy_family(year: int) -> datetime.date:
    """Sunday within the Christmas octave, Dec 30 when there is none."""
    christmas = datetime.date(year, 12, 25)
    if sunday_first_weekday(christmas) == 0:
        return datetime.date(year, 12, 30)
    return _next_sunday_after(christmas)


class _YearFrame:
    """Season boundaries of one civil year."""

    def __init__(self, year: int):
        self.year = year
        self.easter = easter_sunday(year)
        self.baptism = baptism_of_the_lord(year)
        self.ash_wednesday = self.easter - datetime.timedelta(days=46)
        self.palm_sunday = self.easter - _WEEK
        self.pentecost = self.easter + datetime.timedelta(days=49)
        self.advent = first_sunday_of_advent(year)
        self.christmas = datetime.date(year, 12, 25)

    def season(self, day: datetime.date) -> Season:
        if day <= self.baptism:
            return Season.CHRISTMAS
        if day < self.ash_wednesday:
            return Season.ORDINARY_TIME
        if day < self.palm_sunday:
            return Season.LENT
        if day < self.easter:
            return Season.HOLY_WEEK
        if day <= self.pentecost:
            return Season.EASTER
        if day < self.advent:
            return Season.ORDINARY_TIME
        if day < self.christmas:
            return Season.ADVENT
        return Season.CHRISTMAS

    def celebrations(self) -> dict[datetime.date, tuple[str, str, str]]:
        """Principal celebrations keyed by date: ``(key, name, type)``."""
        y = self.year
        out: dict[datetime.date, tuple[str, str, str]] = {}

        # Sundays first; solemnities and feasts below overwrite them
        first_ot_sunday = _next_sunday_after(self.baptism)
        christ_the_king = self.advent - _WEEK
        sunday = _next_sunday_after(datetime.date(y - 1, 12, 31))
        while sunday.year == y:
            season = self.season(sunday)
            if season == Season.ADVENT:
                n = (sunday - self.advent).days // 7 + 1
                out[sunday] = (f"{_ordinal(n).lower()}_sunday_of_advent", f"{_ordinal(n)} Sunday of Advent", SUNDAY)
            elif season == Season.LENT:
                n = (sunday - self.ash_wednesday).days // 7 + 1
                out[sunday] = (f"{_ordinal(n).lower()}_sunday_of_lent", f"{_ordinal(n)} Sunday of Lent", SUNDAY)
            elif season == Season.EASTER:
                n = (sunday - self.easter).days // 7 + 1
                out[sunday] = (f"{_ordinal(n).lower()}_sunday_of_easter", f"{_ordinal(n)} Sunday of Easter", SUNDAY)
            elif season == Season.ORDINARY_TIME:
                if sunday < self.ash_wednesday:
                    n = (sunday - first_ot_sunday).days // 7 + 2
                else:
                    n = 34 - (christ_the_king - sunday).days // 7
                out[sunday] = (f"{_ordinal(n).lower()}_sunday_of_ordinary_time",
                               f"{_ordinal(n)} Sunday in Ordinary Time", SUNDAY)
            sunday += _WEEK

        immaculate = datetime.date(y, 12, 8)
        if sunday_first_weekday(immaculate) == 0:
            immaculate += _DAY

        fixed = [
            (datetime.date(y, 1, 1), "mary_mother_of_god", "Mary, Mother of God", SOLEMNITY),
            (epiphany(y), "epiphany", "The Epiphany of the Lord", SOLEMNITY),
            (self.baptism, "baptism_of_the_lord", "The Baptism of the Lord", FEAST),
            (self.ash_wednesday, "ash_wednesday", "Ash Wednesday", ASH_WEDNESDAY),
            (self.palm_sunday, "palm_sunday", "Palm Sunday of the Passion of the Lord", HOLY_WEEK),
            (self.easter - 3 * _DAY, "holy_thursday", "Thursday of the Lord's Supper", TRIDUUM),
            (self.easter - 2 * _DAY, "good_friday", "Friday of the Passion of the Lord", TRIDUUM),
            (self.easter - _DAY, "holy_saturday", "Holy Saturday", TRIDUUM),
            (self.easter, "easter_sunday", "Easter Sunday of the Resurrection of the Lord", SOLEMNITY),
            (self.easter + _WEEK, "divine_mercy_sunday", "2nd Sunday of Easter (Divine Mercy Sunday)", SUNDAY),
            (self.easter + 6 * _WEEK, "ascension", "The Ascension of the Lord", SOLEMNITY),
            (self.pentecost, "pentecost_sunday", "Pentecost Sunday", SOLEMNITY),
            (self.pentecost + _WEEK, "trinity_sunday", "The Most Holy Trinity", SOLEMNITY),
            (self.pentecost + 2 * _WEEK, "corpus_christi", "The Most Holy Body and Blood of Christ", SOLEMNITY),
            (self.pentecost + datetime.timedelta(days=19), "sacred_heart", "The Most Sacred Heart of Jesus",
             SOLEMNITY),
            (datetime.date(y, 8, 15), "assumption", "The Assumption of the Blessed Virgin Mary", SOLEMNITY),
            (datetime.date(y, 11, 1), "all_saints", "All Saints", SOLEMNITY),
            (christ_the_king, "christ_the_king", "Our Lord Jesus Christ, King of the Universe", SOLEMNITY),
            (immaculate, "immaculate_conception", "The Immaculate Conception of the Blessed Virgin Mary",
             SOLEMNITY),
            (datetime.date(y, 12, 25), "christmas", "The Nativity of the Lord (Christmas)", SOLEMNITY),
            (holy_family(y), "holy_family", "The Holy Family of Jesus, Mary and Joseph", FEAST),
        ]
        for day, key, name, kind in fixed:
            out[day] = (key, name, kind)
        return out


@lru_cache(maxsize=8)
def compute_year(year: int) -> tuple[LiturgicalDay, ...]:
    """Liturgical day for every date of civil *year*, in date order."""
    frame = _YearFrame(check_year(year))
    celebrations = frame.celebrations()

    days = []
    day = datetime.date(year, 1, 1)
    while day.year == year:
        key, name, kind = celebrations.get(day, (None, None, None))
        days.append(LiturgicalDay(date=day, season=frame.season(day), celebration_key=key,
                                  celebration_name=name, celebration_type=kind))
        day += _DAY
    return tuple(days)


def compute_day(date_local: str | datetime.date) -> LiturgicalDay:
    day = parse_local_date(date_local)
    return compute_year(day.year)[day.timetuple().tm_yday - 1]


# ======================================================================
# Resolvers
# ======================================================================


class SeasonResolver(Protocol):
    def resolve(self, date_local: str | datetime.date) -> LiturgicalDay:
        ...


class LiturgicalDayCache(Protocol):
    """Storage for precomputed liturgical days."""

    def get(self, day: datetime.date) -> Optional[LiturgicalDay]:
        ...

    def upsert_many(self, days: Sequence[LiturgicalDay]) -> int:
        ...


class ComputedSeasonResolver:
    """Resolves every date by computation."""

    def resolve(self, date_local: str | datetime.date) -> LiturgicalDay:
        return compute_day(date_local)


class CachedSeasonResolver:
    """Cache-aside resolver.

    A miss computes the whole civil year, stores it, and reads the date
    back.  Storage errors propagate; wrap in :class:`FallbackSeasonResolver`
    to survive them.
    """

    def __init__(self, cache: LiturgicalDayCache):
        self.cache = cache

    def resolve(self, date_local: str | datetime.date) -> LiturgicalDay:
        day = parse_local_date(date_local)
        check_year(day.year)

        cached = self.cache.get(day)
        if cached is not None:
            return cached

        year_days = compute_year(day.year)
        stored = self.cache.upsert_many(year_days)
        logger.info("liturgical cache filled for %s (%d days)", day.year, stored)

        cached = self.cache.get(day)
        if cached is not None:
            return cached
        return year_days[day.timetuple().tm_yday - 1]


class FallbackSeasonResolver:
    """Tries *primary*; on a storage error, answers from *fallback*.

    Input errors are raised before *primary* is consulted and are never
    masked.
    """

    def __init__(self, primary: SeasonResolver, fallback: SeasonResolver,
                 recoverable: tuple[type[BaseException], ...] = (SQLAlchemyError,)):
        self.primary = primary
        self.fallback = fallback
        self.recoverable = recoverable

    def resolve(self, date_local: str | datetime.date) -> LiturgicalDay:
        day = parse_local_date(date_local)
        check_year(day.year)
        try:
            return self.primary.resolve(day)
        except self.recoverable:
            logger.warning("liturgical cache unavailable for %s; computing instead", day, exc_info=True)
            return self.fallback.resolve(day)

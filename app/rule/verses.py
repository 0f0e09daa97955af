"""
Daily verse selection.

The verse of the day is picked by day of year::

    index = ((day_of_year - 1) % length + length) % length

so a list shorter than the year simply wraps around.  The verse list is
loaded once at startup and never changes afterwards.
"""

from __future__ import annotations

import datetime
import json
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Sequence

from app.rule.clock import parse_local_date
from app.rule.errors import InvalidInputError


@dataclass(frozen=True)
class DailyVerse:
    """A scripture reference, with optional verse text."""

    reference: str
    text: Optional[str] = None


# Reference-only seed; extend with verse text you have the right to redistribute.
DEFAULT_VERSES: tuple[DailyVerse, ...] = (
    DailyVerse("Psalm 23:1"),
    DailyVerse("Matthew 11:28"),
    DailyVerse("Philippians 4:6-7"),
    DailyVerse("John 15:5"),
    DailyVerse("Romans 12:12"),
    DailyVerse("2 Corinthians 12:9"),
    DailyVerse("Isaiah 41:10"),
)


def day_of_year(value: datetime.date) -> int:
    """1-indexed day of the year, proleptic Gregorian (Jan 1 = 1)."""
    return value.timetuple().tm_yday


def verse_index(value: datetime.date, length: int) -> int:
    if length <= 0:
        raise InvalidInputError("Verse list is empty")
    return ((day_of_year(value) - 1) % length + length) % length


def select_verse(date_local: str | datetime.date,
                 verses: Sequence[DailyVerse]) -> tuple[DailyVerse, int]:
    """Return the verse for *date_local* and its index in *verses*."""
    idx = verse_index(parse_local_date(date_local), len(verses))
    return verses[idx], idx


def load_verses(path: Optional[str | Path] = None) -> tuple[DailyVerse, ...]:
    """Load the verse list.

    With no *path*, returns :data:`DEFAULT_VERSES`.  Otherwise reads a JSON
    array of ``{"reference": ..., "text": ...}`` objects.
    """
    if path is None:
        return DEFAULT_VERSES

    with open(path, encoding="utf-8") as fh:
        raw = json.load(fh)

    if not isinstance(raw, list) or not raw:
        raise InvalidInputError(f"{path}: expected a non-empty JSON array of verses")

    verses = []
    for pos, item in enumerate(raw):
        if not isinstance(item, dict) or not str(item.get("reference") or "").strip():
            raise InvalidInputError(f"{path}: entry {pos} has no reference")
        text = item.get("text")
        verses.append(DailyVerse(reference=str(item["reference"]).strip(), text=text or None))
    return tuple(verses)

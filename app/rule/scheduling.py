"""
Scheduling filter.

Decides which effective practices are due on a given weekday, and which
weekly practices come up later in the week.

A practice is *eligible* when it is active and enabled.  An eligible
DAILY practice is due every day; an eligible WEEKLY practice is due only
on its effective weekday, and never when it has none.

Look-ahead distance for a weekly practice::

    days_until = (weekday - today_weekday + 7) % 7

Practices due today are excluded from the look-ahead, so ``days_until``
is always between 1 and 6.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from app.rule.clock import check_weekday
from app.schemas.practice import WEEKDAY_SHORT_NAMES, EffectivePractice, Recurrence

DEFAULT_UPCOMING_LIMIT = 3


@dataclass(frozen=True)
class UpcomingPractice:
    """A weekly practice due later this week."""

    practice: EffectivePractice
    days_until: int

    @property
    def weekday(self) -> int:
        return self.practice.effective_scheduled_weekday

    @property
    def when(self) -> str:
        return days_until_label(self.days_until)

    @property
    def weekday_label(self) -> str:
        return WEEKDAY_SHORT_NAMES[self.weekday]


def days_until_label(days_until: int) -> str:
    """``'Tomorrow'`` for 1, ``'In N days'`` otherwise."""
    if days_until == 1:
        return "Tomorrow"
    return f"In {days_until} days"


def is_eligible(practice: EffectivePractice) -> bool:
    return practice.is_active and practice.is_enabled


def is_due_on(practice: EffectivePractice, weekday: int) -> bool:
    """Whether an effective practice is due on *weekday* (Sunday=0)."""
    if not is_eligible(practice):
        return False
    if practice.recurrence == Recurrence.DAILY:
        return True
    if practice.recurrence == Recurrence.WEEKLY:
        return practice.effective_scheduled_weekday is not None \
            and practice.effective_scheduled_weekday == weekday
    return False


def due_today(practices: Iterable[EffectivePractice], today_weekday: int) -> list[EffectivePractice]:
    """Practices due on *today_weekday*.  Order is not meaningful."""
    check_weekday(today_weekday)
    return [p for p in practices if is_due_on(p, today_weekday)]


def upcoming_weekly(practices: Iterable[EffectivePractice], today_weekday: int,
                    limit: int = DEFAULT_UPCOMING_LIMIT) -> list[UpcomingPractice]:
    """The next *limit* weekly practices after today.

    Sorted by ``days_until``, then ``effective_title`` (ordinal), then id.
    """
    check_weekday(today_weekday)
    if limit <= 0:
        return []

    upcoming: list[UpcomingPractice] = []
    for p in practices:
        if not is_eligible(p) or p.recurrence != Recurrence.WEEKLY:
            continue
        weekday = p.effective_scheduled_weekday
        if weekday is None or not 0 <= weekday <= 6 or weekday == today_weekday:
            continue
        upcoming.append(UpcomingPractice(practice=p, days_until=(weekday - today_weekday + 7) % 7))

    upcoming.sort(key=lambda u: (u.days_until, u.practice.effective_title, u.practice.id))
    return upcoming[:limit]

"""Rule engine: override resolution, scheduling, ordering, completion toggle, verses, seasons."""

from app.rule.clock import LocalClock, LocalDay
from app.rule.completion import ToggleError, ToggleResult, toggle_completion
from app.rule.errors import InvalidInputError
from app.rule.ordering import sort_practices
from app.rule.overrides import resolve_overrides
from app.rule.scheduling import UpcomingPractice, due_today, upcoming_weekly
from app.rule.verses import DailyVerse, select_verse

__all__ = [
    "LocalClock",
    "LocalDay",
    "ToggleError",
    "ToggleResult",
    "toggle_completion",
    "InvalidInputError",
    "sort_practices",
    "resolve_overrides",
    "UpcomingPractice",
    "due_today",
    "upcoming_weekly",
    "DailyVerse",
    "select_verse",
]

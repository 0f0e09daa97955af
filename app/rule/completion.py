"""
Completion toggle protocol.

Each ``(user_id, practice_id, date_local)`` key is in one of two states:
NOT_DONE (no completion row) or DONE (row exists).  :func:`toggle_completion`
is the only operation that moves between them.

Eligibility is checked before anything is written, in this order, and
the first failure is returned:

1. a caller identity is required          -> ``UNAUTHENTICATED``
2. the practice must exist and be active  -> ``NOT_FOUND``
3. the user must not have disabled it     -> ``DISABLED``
4. a WEEKLY practice must be scheduled on
   the caller's current local weekday     -> ``NOT_SCHEDULED_TODAY``

The date key is always the server's local today, never a date supplied
by the client.  Uniqueness of the completion row is the store's job;
:meth:`CompletionStore.add_completion` returns ``False`` when the row was
already there and :meth:`CompletionStore.remove_completion` treats a
missing row as a no-op.
"""

from __future__ import annotations

import datetime
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Protocol

from app.rule.clock import LocalDay
from app.schemas.practice import Practice, PracticeOverride, Recurrence

logger = logging.getLogger(__name__)


class ToggleError(str, Enum):
    UNAUTHENTICATED = "UNAUTHENTICATED"
    NOT_FOUND = "NOT_FOUND"
    DISABLED = "DISABLED"
    NOT_SCHEDULED_TODAY = "NOT_SCHEDULED_TODAY"


TOGGLE_ERROR_MESSAGES: dict[ToggleError, str] = {
    ToggleError.UNAUTHENTICATED: "Not signed in.",
    ToggleError.NOT_FOUND: "Practice not found.",
    ToggleError.DISABLED: "This practice is disabled.",
    ToggleError.NOT_SCHEDULED_TODAY: "This weekly practice isn't scheduled for today.",
}


@dataclass(frozen=True)
class ToggleResult:
    """Outcome of a toggle: either a new state or an error kind."""

    ok: bool
    completed: Optional[bool] = None
    error: Optional[ToggleError] = None
    message: Optional[str] = None

    @classmethod
    def done(cls, completed: bool) -> ToggleResult:
        return cls(ok=True, completed=completed)

    @classmethod
    def fail(cls, error: ToggleError, message: Optional[str] = None) -> ToggleResult:
        return cls(ok=False, error=error, message=message or TOGGLE_ERROR_MESSAGES[error])


class CompletionStore(Protocol):
    """Storage operations the toggle needs."""

    def get_practice(self, practice_id: int) -> Optional[Practice]:
        ...

    def get_override(self, user_id: int, practice_id: int) -> Optional[PracticeOverride]:
        ...

    def completion_exists(self, user_id: int, practice_id: int, date_local: datetime.date) -> bool:
        ...

    def add_completion(self, user_id: int, practice_id: int, date_local: datetime.date,
                       completed_at: datetime.datetime) -> bool:
        """Insert the row.  Returns ``False`` if it already existed."""
        ...

    def remove_completion(self, user_id: int, practice_id: int, date_local: datetime.date) -> bool:
        """Delete the row.  Returns ``False`` if there was nothing to delete."""
        ...


def check_eligibility(store: CompletionStore, user_id: Optional[int], practice_id: int,
                      today: LocalDay) -> Optional[ToggleResult]:
    """Run the precondition checks.  Returns a failed result or ``None``."""
    if user_id is None:
        return ToggleResult.fail(ToggleError.UNAUTHENTICATED)

    practice = store.get_practice(practice_id)
    if practice is None or not practice.is_active:
        return ToggleResult.fail(ToggleError.NOT_FOUND)

    override = store.get_override(user_id, practice_id)
    is_enabled = override.is_enabled if override is not None else True
    if not is_enabled:
        return ToggleResult.fail(ToggleError.DISABLED)

    if practice.recurrence == Recurrence.WEEKLY:
        weekday = override.scheduled_weekday if override is not None else None
        if weekday is None:
            weekday = practice.scheduled_weekday
        if weekday is None:
            return ToggleResult.fail(ToggleError.NOT_SCHEDULED_TODAY, "Weekly practice has no weekday set.")
        if weekday != today.weekday:
            return ToggleResult.fail(ToggleError.NOT_SCHEDULED_TODAY)

    return None


def toggle_completion(store: CompletionStore, user_id: Optional[int], practice_id: int,
                      today: LocalDay, now: datetime.datetime) -> ToggleResult:
    """Flip the completion state of *practice_id* for *today*.

    Args:
        store: Practice, override and completion storage.
        user_id: Authenticated caller, or ``None``.
        practice_id: Practice to toggle.
        today: Caller's current local day, computed server-side.
        now: Current instant, stored as ``completed_at``.
    """
    failure = check_eligibility(store, user_id, practice_id, today)
    if failure is not None:
        return failure

    if store.completion_exists(user_id, practice_id, today.date_local):
        store.remove_completion(user_id, practice_id, today.date_local)
        logger.info("completion removed user_id=%s practice_id=%s date=%s", user_id, practice_id, today.iso)
        return ToggleResult.done(False)

    if not store.add_completion(user_id, practice_id, today.date_local, now):
        # A concurrent toggle inserted the row first
        logger.info("completion already present user_id=%s practice_id=%s date=%s",
                    user_id, practice_id, today.iso)
    else:
        logger.info("completion added user_id=%s practice_id=%s date=%s", user_id, practice_id, today.iso)
    return ToggleResult.done(True)

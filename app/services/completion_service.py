"""
Completion service.

Connects the toggle protocol in :mod:`app.rule.completion` to the
database and to the server clock.
"""

import datetime
from typing import Optional

from sqlmodel import Session

from app.core.config import settings
from app.db.repositories.completion import CompletionRepository
from app.db.repositories.practice import PracticeRepository
from app.db.repositories.practice_override import PracticeOverrideRepository
from app.rule.clock import LocalClock
from app.rule.completion import ToggleResult, toggle_completion
from app.schemas.practice import Practice, PracticeOverride


class RepositoryCompletionStore:
    """:class:`app.rule.completion.CompletionStore` backed by repositories."""

    def __init__(self, session: Session):
        self.practice_repo = PracticeRepository(session)
        self.override_repo = PracticeOverrideRepository(session)
        self.completion_repo = CompletionRepository(session)

    def get_practice(self, practice_id: int) -> Optional[Practice]:
        row = self.practice_repo.get_by_id(practice_id)
        return Practice.model_validate(row) if row else None

    def get_override(self, user_id: int, practice_id: int) -> Optional[PracticeOverride]:
        row = self.override_repo.get(user_id, practice_id)
        return PracticeOverride.model_validate(row) if row else None

    def completion_exists(self, user_id: int, practice_id: int, date_local: datetime.date) -> bool:
        return self.completion_repo.exists(user_id, practice_id, date_local)

    def add_completion(self, user_id: int, practice_id: int, date_local: datetime.date,
                       completed_at: datetime.datetime) -> bool:
        return self.completion_repo.add(user_id, practice_id, date_local, completed_at)

    def remove_completion(self, user_id: int, practice_id: int, date_local: datetime.date) -> bool:
        return self.completion_repo.remove(user_id, practice_id, date_local)


class CompletionService:
    """Service for marking practices done / not done."""

    def __init__(self, session: Session, clock: Optional[LocalClock] = None):
        self.store = RepositoryCompletionStore(session)
        self.clock = clock or LocalClock(settings.TIME_ZONE)

    def toggle(self, user_id: Optional[int], practice_id: int) -> tuple[ToggleResult, datetime.date]:
        """Toggle *practice_id* for the caller's local today.

        Returns:
            Tuple of (result, date_local) where date_local is the key used.
        """
        now = self.clock.now()
        today = self.clock.local_day(now)
        return toggle_completion(self.store, user_id, practice_id, today, now), today.date_local

"""
Effective practice loading.

Shared by the services that need a user's resolved view of the catalog.
"""

from typing import Iterable

from sqlmodel import Session

from app.db.repositories.practice import PracticeRepository
from app.db.repositories.practice_override import PracticeOverrideRepository
from app.models.practice import PracticeRecord
from app.rule.overrides import resolve_overrides
from app.schemas.practice import EffectivePractice, Practice, PracticeOverride


class PracticeViewLoader:
    """Reads catalog rows and a user's overrides and resolves them."""

    def __init__(self, session: Session):
        self.practice_repo = PracticeRepository(session)
        self.override_repo = PracticeOverrideRepository(session)

    def overrides_for(self, user_id: int, practices: list[Practice]) -> list[PracticeOverride]:
        rows = self.override_repo.get_for_practices(user_id, [p.id for p in practices])
        return [PracticeOverride.model_validate(r) for r in rows]

    def resolve(self, user_id: int, records: Iterable[PracticeRecord]) -> list[EffectivePractice]:
        practices = [Practice.model_validate(r) for r in records]
        return resolve_overrides(practices, self.overrides_for(user_id, practices))

    def for_season(self, user_id: int, season: str) -> list[EffectivePractice]:
        return self.resolve(user_id, self.practice_repo.get_active_by_season(season))

    def all_active(self, user_id: int) -> list[EffectivePractice]:
        return self.resolve(user_id, self.practice_repo.get_all_active())

    def all(self, user_id: int) -> list[EffectivePractice]:
        return self.resolve(user_id, self.practice_repo.get_all())

    def weekly(self, user_id: int) -> list[EffectivePractice]:
        return self.resolve(user_id, self.practice_repo.get_active_by_recurrence("WEEKLY"))

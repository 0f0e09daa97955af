"""
Practice override repository.

At most one override per (user, practice); :meth:`upsert` is the only
write path.
"""

from typing import Iterable, Optional

from sqlmodel import Session, select

from app.models.practice import PracticeOverrideRecord
from app.rule.clock import utcnow


class PracticeOverrideRepository:
    """Repository for PracticeOverrideRecord database operations."""

    def __init__(self, session: Session):
        self.session = session

    def get(self, user_id: int, practice_id: int) -> Optional[PracticeOverrideRecord]:
        statement = select(PracticeOverrideRecord).where(
            PracticeOverrideRecord.user_id == user_id,
            PracticeOverrideRecord.practice_id == practice_id,
        )
        return self.session.exec(statement).first()

    def get_for_practices(self, user_id: int, practice_ids: Iterable[int]) -> list[PracticeOverrideRecord]:
        ids = list(practice_ids)
        if not ids:
            return []
        statement = (
            select(PracticeOverrideRecord)
            .where(PracticeOverrideRecord.user_id == user_id, PracticeOverrideRecord.practice_id.in_(ids))
            .order_by(PracticeOverrideRecord.id))
        return list(self.session.exec(statement).all())

    def get_all_by_user(self, user_id: int) -> list[PracticeOverrideRecord]:
        statement = (
            select(PracticeOverrideRecord)
            .where(PracticeOverrideRecord.user_id == user_id)
            .order_by(PracticeOverrideRecord.practice_id))
        return list(self.session.exec(statement).all())

    def upsert(self, user_id: int, practice_id: int, values: dict) -> tuple[PracticeOverrideRecord, bool]:
        """Create or update the override keyed by (user_id, practice_id).

        Returns:
            Tuple of (row, created).
        """
        existing = self.get(user_id, practice_id)
        if existing:
            for key, value in values.items():
                setattr(existing, key, value)
            existing.updated_at = utcnow()
            self.session.add(existing)
            self.session.commit()
            self.session.refresh(existing)
            return existing, False

        row = PracticeOverrideRecord(user_id=user_id, practice_id=practice_id, **values)
        self.session.add(row)
        self.session.commit()
        self.session.refresh(row)
        return row, True

"""
Practice catalog repository.
"""

from typing import Iterable, Optional

from sqlmodel import Session, select

from app.models.practice import PracticeRecord


class PracticeRepository:
    """Repository for PracticeRecord database operations."""

    def __init__(self, session: Session):
        self.session = session

    def create(self, practice: PracticeRecord) -> PracticeRecord:
        self.session.add(practice)
        self.session.commit()
        self.session.refresh(practice)
        return practice

    def get_by_id(self, practice_id: int) -> Optional[PracticeRecord]:
        return self.session.get(PracticeRecord, practice_id)

    def get_by_key(self, key: str) -> Optional[PracticeRecord]:
        statement = select(PracticeRecord).where(PracticeRecord.key == key)
        return self.session.exec(statement).first()

    def get_by_ids(self, practice_ids: Iterable[int]) -> list[PracticeRecord]:
        ids = list(practice_ids)
        if not ids:
            return []
        statement = select(PracticeRecord).where(PracticeRecord.id.in_(ids))
        return list(self.session.exec(statement).all())

    def get_active_by_season(self, season: str) -> list[PracticeRecord]:
        statement = (
            select(PracticeRecord)
            .where(PracticeRecord.season == season, PracticeRecord.is_active == True)  # noqa: E712
            .order_by(PracticeRecord.sort_order, PracticeRecord.id))
        return list(self.session.exec(statement).all())

    def get_active_by_recurrence(self, recurrence: str) -> list[PracticeRecord]:
        statement = (
            select(PracticeRecord)
            .where(PracticeRecord.recurrence == recurrence, PracticeRecord.is_active == True)  # noqa: E712
            .order_by(PracticeRecord.sort_order, PracticeRecord.id))
        return list(self.session.exec(statement).all())

    def get_all_active(self) -> list[PracticeRecord]:
        statement = (
            select(PracticeRecord)
            .where(PracticeRecord.is_active == True)  # noqa: E712
            .order_by(PracticeRecord.sort_order, PracticeRecord.id))
        return list(self.session.exec(statement).all())

    def get_all(self) -> list[PracticeRecord]:
        statement = select(PracticeRecord).order_by(PracticeRecord.id)
        return list(self.session.exec(statement).all())

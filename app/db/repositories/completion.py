"""
Practice completion repository.

Point operations keyed by (user_id, practice_id, date_local) plus the
date-range queries used by the history view.
"""

import datetime
from typing import Iterable, Optional

from sqlalchemy import delete
from sqlalchemy.exc import IntegrityError
from sqlmodel import Session, select

from app.models.completion import PracticeCompletion


class CompletionRepository:
    """Repository for PracticeCompletion database operations."""

    def __init__(self, session: Session):
        self.session = session

    def get(self, user_id: int, practice_id: int, date_local: datetime.date) -> Optional[PracticeCompletion]:
        statement = select(PracticeCompletion).where(
            PracticeCompletion.user_id == user_id,
            PracticeCompletion.practice_id == practice_id,
            PracticeCompletion.date_local == date_local,
        )
        return self.session.exec(statement).first()

    def exists(self, user_id: int, practice_id: int, date_local: datetime.date) -> bool:
        return self.get(user_id, practice_id, date_local) is not None

    def add(self, user_id: int, practice_id: int, date_local: datetime.date,
            completed_at: datetime.datetime) -> bool:
        """Insert a completion.

        Returns ``False`` when the unique constraint rejects the row,
        i.e. the practice is already done for that date.
        """
        entry = PracticeCompletion(user_id=user_id, practice_id=practice_id, date_local=date_local,
                                   completed_at=completed_at)
        self.session.add(entry)
        try:
            self.session.commit()
        except IntegrityError:
            self.session.rollback()
            return False
        return True

    def remove(self, user_id: int, practice_id: int, date_local: datetime.date) -> bool:
        """Delete a completion.  Deleting nothing is not an error."""
        statement = delete(PracticeCompletion).where(
            PracticeCompletion.user_id == user_id,
            PracticeCompletion.practice_id == practice_id,
            PracticeCompletion.date_local == date_local,
        )
        result = self.session.execute(statement)
        self.session.commit()
        return bool(result.rowcount)

    def get_for_date(self, user_id: int, date_local: datetime.date,
                     practice_ids: Optional[Iterable[int]] = None) -> list[PracticeCompletion]:
        statement = select(PracticeCompletion).where(
            PracticeCompletion.user_id == user_id,
            PracticeCompletion.date_local == date_local,
        )
        if practice_ids is not None:
            ids = list(practice_ids)
            if not ids:
                return []
            statement = statement.where(PracticeCompletion.practice_id.in_(ids))
        return list(self.session.exec(statement).all())

    def get_by_user_date_range(self, user_id: int, start: datetime.date,
                               end: datetime.date) -> list[PracticeCompletion]:
        """Completions for a user within a date range (inclusive)."""
        statement = (
            select(PracticeCompletion)
            .where(
                PracticeCompletion.user_id == user_id,
                PracticeCompletion.date_local >= start,
                PracticeCompletion.date_local <= end,
            )
            .order_by(PracticeCompletion.date_local, PracticeCompletion.completed_at))
        return list(self.session.exec(statement).all())

    def get_all_by_user(self, user_id: int) -> list[PracticeCompletion]:
        statement = (
            select(PracticeCompletion)
            .where(PracticeCompletion.user_id == user_id)
            .order_by(PracticeCompletion.date_local, PracticeCompletion.practice_id))
        return list(self.session.exec(statement).all())

"""
User settings repository.
"""

import datetime
from typing import Optional

from sqlmodel import Session, select

from app.models.user_settings import UserSettings
from app.rule.clock import utcnow


class UserSettingsRepository:
    """Repository for UserSettings database operations."""

    def __init__(self, session: Session):
        self.session = session

    def get_by_user(self, user_id: int) -> Optional[UserSettings]:
        statement = select(UserSettings).where(UserSettings.user_id == user_id)
        return self.session.exec(statement).first()

    def upsert_wake_time(self, user_id: int, wake_time: Optional[datetime.time]) -> UserSettings:
        row = self.get_by_user(user_id)
        if row is None:
            row = UserSettings(user_id=user_id)
        row.wake_time = wake_time
        row.updated_at = utcnow()
        self.session.add(row)
        self.session.commit()
        self.session.refresh(row)
        return row

"""
Liturgical day cache repository.

Implements the cache interface consumed by
:class:`app.rule.liturgical.CachedSeasonResolver`.
"""

import datetime
from typing import Optional, Sequence

from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, select

from app.models.liturgical_day import LiturgicalDayRecord
from app.rule.clock import utcnow
from app.rule.liturgical import normalize_season
from app.schemas.liturgical import LiturgicalDay


class LiturgicalDayRepository:
    """Repository for LiturgicalDayRecord database operations."""

    def __init__(self, session: Session):
        self.session = session

    def get(self, day: datetime.date) -> Optional[LiturgicalDay]:
        try:
            row = self.session.get(LiturgicalDayRecord, day)
        except SQLAlchemyError:
            # Leave the session usable for the caller's other queries
            self.session.rollback()
            raise
        if row is None:
            return None
        return LiturgicalDay(date=row.date, season=normalize_season(row.season),
                             celebration_key=row.celebration_key, celebration_name=row.celebration_name,
                             celebration_type=row.celebration_type)

    def upsert_many(self, days: Sequence[LiturgicalDay]) -> int:
        """Insert or update rows by date in one transaction."""
        if not days:
            return 0
        dates = [d.date for d in days]
        statement = select(LiturgicalDayRecord).where(
            LiturgicalDayRecord.date >= min(dates),
            LiturgicalDayRecord.date <= max(dates),
        )
        existing = {row.date: row for row in self.session.exec(statement).all()}
        now = utcnow()

        for d in days:
            row = existing.get(d.date) or LiturgicalDayRecord(date=d.date, season=d.season.value)
            row.season = d.season.value
            row.celebration_key = d.celebration_key
            row.celebration_name = d.celebration_name
            row.celebration_type = d.celebration_type
            row.updated_at = now
            self.session.add(row)

        try:
            self.session.commit()
        except SQLAlchemyError:
            self.session.rollback()
            raise
        return len(days)

"""
Liturgical day cache model.

Rows are computed a whole civil year at a time and upserted by date.
"""

import datetime
from typing import Optional

from sqlalchemy import DateTime
from sqlmodel import Field, SQLModel

from app.rule.clock import utcnow


class LiturgicalDayRecord(SQLModel, table=True):
    """Cached season and celebration for one date."""

    __tablename__ = "liturgical_days"

    date: datetime.date = Field(primary_key=True)
    season: str = Field(max_length=20, nullable=False)
    celebration_key: Optional[str] = Field(default=None, max_length=100)
    celebration_name: Optional[str] = Field(default=None, max_length=200)
    celebration_type: Optional[str] = Field(default=None, max_length=30)

    updated_at: datetime.datetime = Field(default_factory=utcnow, sa_type=DateTime(timezone=True), nullable=False)

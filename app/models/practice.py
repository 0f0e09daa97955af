"""
Practice catalog and per-user override models.

The catalog (``practices``) is shared by all users and seeded from
:mod:`app.db.init_db`.  Users never edit catalog rows; they adjust them
through ``user_practice_overrides``, at most one row per user per
practice.
"""

import datetime
from typing import Optional

from sqlalchemy import DateTime, UniqueConstraint
from sqlmodel import Field, SQLModel

from app.rule.clock import utcnow


class PracticeRecord(SQLModel, table=True):
    """A catalog entry of the rule of life.

    ``season``, ``lane`` and ``recurrence`` hold the string values of the
    :mod:`app.schemas.practice` enums.
    """

    __tablename__ = "practices"

    id: Optional[int] = Field(default=None, primary_key=True)
    key: str = Field(unique=True, index=True, max_length=100, nullable=False)
    season: str = Field(max_length=20, index=True, nullable=False)
    lane: str = Field(max_length=20, nullable=False)
    title: str = Field(max_length=200, nullable=False)
    description: str = Field(default="", max_length=2000)
    recurrence: str = Field(max_length=10, nullable=False)

    # Sunday=0 .. Saturday=6; WEEKLY practices only
    scheduled_weekday: Optional[int] = Field(default=None, ge=0, le=6)

    is_active: bool = Field(default=True, index=True)
    sort_order: int = Field(default=0)


class PracticeOverrideRecord(SQLModel, table=True):
    """A user's override of one catalog practice."""

    __tablename__ = "user_practice_overrides"
    __table_args__ = (UniqueConstraint("user_id", "practice_id", name="uq_override_user_practice"),)

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: int = Field(foreign_key="users.id", nullable=False, index=True)
    practice_id: int = Field(foreign_key="practices.id", nullable=False, index=True)

    scheduled_weekday: Optional[int] = Field(default=None, ge=0, le=6)
    is_enabled: bool = Field(default=True)
    custom_title: Optional[str] = Field(default=None, max_length=200)
    custom_description: Optional[str] = Field(default=None, max_length=2000)

    # Timestamps
    created_at: datetime.datetime = Field(default_factory=utcnow, sa_type=DateTime(timezone=True), nullable=False)
    updated_at: datetime.datetime = Field(default_factory=utcnow, sa_type=DateTime(timezone=True), nullable=False)

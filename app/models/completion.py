"""
Practice completion model.

A row means "done": there is no status column.  Toggling to undone
deletes the row.  The unique constraint is what keeps two concurrent
toggles from producing two rows for the same day.
"""

import datetime
from typing import Optional

from sqlalchemy import DateTime, UniqueConstraint
from sqlmodel import Field, SQLModel

from app.rule.clock import utcnow


class PracticeCompletion(SQLModel, table=True):
    """One practice done by one user on one local date."""

    __tablename__ = "practice_completions"
    __table_args__ = (
        UniqueConstraint("user_id", "practice_id", "date_local", name="uq_completion_user_practice_date"),
    )

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: int = Field(foreign_key="users.id", nullable=False, index=True)
    practice_id: int = Field(foreign_key="practices.id", nullable=False, index=True)
    date_local: datetime.date = Field(nullable=False, index=True)
    completed_at: datetime.datetime = Field(sa_type=DateTime(timezone=True), nullable=False)

    created_at: datetime.datetime = Field(default_factory=utcnow, sa_type=DateTime(timezone=True), nullable=False)

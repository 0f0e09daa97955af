"""
Today view schemas.
"""

import datetime
from typing import Optional

from pydantic import BaseModel, Field

from app.schemas.practice import Lane, Season, UpcomingPracticeResponse


class ChecklistItem(BaseModel):
    id: int
    title: str
    description: str
    completed: bool


class ChecklistGroup(BaseModel):
    """Practices due today within one lane."""

    lane: Lane
    label: str
    items: list[ChecklistItem]


class VerseResponse(BaseModel):
    reference: str
    text: Optional[str] = None
    index: int = Field(..., ge=0)


class TodayResponse(BaseModel):
    """Everything the today screen shows."""

    date_local: datetime.date
    weekday: int = Field(..., ge=0, le=6)
    season: Season
    season_label: str
    celebration_name: Optional[str] = None
    groups: list[ChecklistGroup]
    upcoming: list[UpcomingPracticeResponse]
    verse: Optional[VerseResponse] = None

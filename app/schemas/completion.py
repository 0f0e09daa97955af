"""
Completion API schemas.
"""

import datetime
from typing import Optional

from pydantic import BaseModel, Field


class CompletionResponse(BaseModel):
    """A completion fact as stored."""

    practice_id: int
    date_local: datetime.date
    completed_at: datetime.datetime

    class Config:
        from_attributes = True


class ToggleResponse(BaseModel):
    """Outcome of a successful toggle."""

    practice_id: int
    date_local: datetime.date
    completed: bool = Field(..., description="New state: True = done, False = not done")


class HistoryCell(BaseModel):
    """One cell of the month grid; ``date`` is None for padding cells."""

    date: Optional[datetime.date] = None
    day: Optional[int] = None
    completed_count: int = 0
    is_today: bool = False
    is_selected: bool = False


class HistoryItem(BaseModel):
    practice_id: int
    title: str
    lane_label: str
    completed_at: Optional[datetime.datetime] = None


class HistoryMonthResponse(BaseModel):
    """Calendar view of one month of completions."""

    month: str = Field(..., description="YYYY-MM")
    title: str
    prev_month: str
    next_month: str
    weekday_headers: list[str]
    cells: list[HistoryCell]
    selected_date: Optional[datetime.date] = None
    selected_items: list[HistoryItem] = Field(default_factory=list)

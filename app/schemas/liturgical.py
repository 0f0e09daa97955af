"""
Liturgical day schemas.
"""

import datetime
from typing import Optional

from pydantic import BaseModel

from app.schemas.practice import Season


class LiturgicalDay(BaseModel):
    """Season and principal celebration for one calendar date."""

    date: datetime.date
    season: Season
    celebration_key: Optional[str] = None
    celebration_name: Optional[str] = None
    celebration_type: Optional[str] = None

    class Config:
        from_attributes = True
        frozen = True

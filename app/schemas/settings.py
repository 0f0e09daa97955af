"""
User settings API schemas.

Covers the wake time and the per-practice overrides edited on the
settings screen.
"""

import datetime
import re
from typing import Optional

from pydantic import BaseModel, Field, field_validator

_WAKE_TIME_RE = re.compile(r"^([01]\d|2[0-3]):[0-5]\d(:[0-5]\d)?$")


class OverrideUpdate(BaseModel):
    """One override row submitted from the settings form."""

    practice_id: int
    scheduled_weekday: Optional[int] = Field(None, ge=0, le=6)
    is_enabled: bool = True
    custom_title: Optional[str] = Field(None, max_length=200)
    custom_description: Optional[str] = Field(None, max_length=2000)


class SettingsUpdate(BaseModel):
    """Settings form submission.

    ``wake_time`` of ``None`` leaves the stored value untouched; an empty
    string clears it.
    """

    wake_time: Optional[str] = None
    overrides: list[OverrideUpdate] = Field(default_factory=list)

    @field_validator("wake_time")
    @classmethod
    def _check_wake_time(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return None
        value = value.strip()
        if value and not _WAKE_TIME_RE.match(value):
            raise ValueError("wake_time must be HH:MM")
        return value


class WeeklyPracticeSetting(BaseModel):
    """A weekly practice as shown on the settings screen."""

    id: int
    title: str
    description: str
    season_label: str
    lane_label: str
    scheduled_weekday: Optional[int]
    is_enabled: bool
    custom_title: Optional[str] = None
    custom_description: Optional[str] = None


class SettingsResponse(BaseModel):
    wake_time: Optional[str] = Field(None, description="HH:MM")
    weekly_practices: list[WeeklyPracticeSetting]


class UserSettingsExport(BaseModel):
    wake_time: Optional[datetime.time] = None
    created_at: datetime.datetime
    updated_at: datetime.datetime

    class Config:
        from_attributes = True

"""
Practice API schemas.

A *practice* is one entry of the rule of life catalog.  Each practice
belongs to a liturgical season and a lane, and recurs either daily or
on one fixed weekday.  Users adjust practices through *overrides*; the
merged view is an :class:`EffectivePractice`.

Weekday indices follow the Sunday-first convention used throughout the
application::

    0 = Sunday, 1 = Monday, ... 6 = Saturday
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class Season(str, Enum):
    ADVENT = "ADVENT"
    CHRISTMAS = "CHRISTMAS"
    LENT = "LENT"
    HOLY_WEEK = "HOLY_WEEK"
    EASTER = "EASTER"
    ORDINARY_TIME = "ORDINARY_TIME"


class Lane(str, Enum):
    PRAYER = "PRAYER"
    ASCETIC = "ASCETIC"
    CHARITY = "CHARITY"
    ATTENTION = "ATTENTION"


class Recurrence(str, Enum):
    DAILY = "DAILY"
    WEEKLY = "WEEKLY"


SEASON_ORDER: list[Season] = [
    Season.ADVENT,
    Season.CHRISTMAS,
    Season.LENT,
    Season.HOLY_WEEK,
    Season.EASTER,
    Season.ORDINARY_TIME,
]

LANE_ORDER: list[Lane] = [Lane.PRAYER, Lane.ASCETIC, Lane.CHARITY, Lane.ATTENTION]

SEASON_LABEL: dict[Season, str] = {
    Season.ADVENT: "Advent",
    Season.CHRISTMAS: "Christmas",
    Season.LENT: "Lent",
    Season.HOLY_WEEK: "Holy Week",
    Season.EASTER: "Easter",
    Season.ORDINARY_TIME: "Ordinary Time",
}

LANE_LABEL: dict[Lane, str] = {
    Lane.PRAYER: "Prayer",
    Lane.ASCETIC: "Ascetic",
    Lane.CHARITY: "Charity",
    Lane.ATTENTION: "Attention",
}

WEEKDAY_NAMES: list[str] = ["Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday"]
WEEKDAY_SHORT_NAMES: list[str] = ["Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"]


def weekday_label(idx: int) -> str:
    """Full weekday name for a Sunday-first index, ``'Day N'`` if out of range."""
    if 0 <= idx < len(WEEKDAY_NAMES):
        return WEEKDAY_NAMES[idx]
    return f"Day {idx}"


# ======================================================================
# Catalog
# ======================================================================


class PracticeBase(BaseModel):
    """Fields shared by every practice representation."""

    key: str = Field(..., max_length=100, description="Stable symbolic name")
    season: Season
    lane: Lane
    title: str = Field(..., max_length=200)
    description: str = Field("", max_length=2000)
    recurrence: Recurrence
    scheduled_weekday: Optional[int] = Field(None, ge=0, le=6, description="Sunday=0; WEEKLY only")
    is_active: bool = True
    sort_order: int = 0


class PracticeCreate(PracticeBase):
    """Schema for seeding a catalog entry."""


class Practice(PracticeBase):
    """A catalog entry as read from the store."""

    id: int

    class Config:
        from_attributes = True
        frozen = True


class PracticeOverride(BaseModel):
    """A user's adjustment of a single practice."""

    user_id: int
    practice_id: int
    scheduled_weekday: Optional[int] = Field(None, ge=0, le=6)
    is_enabled: bool = True
    custom_title: Optional[str] = None
    custom_description: Optional[str] = None

    class Config:
        from_attributes = True
        frozen = True


class EffectivePractice(Practice):
    """A practice after merging at most one user override.

    Derived on every read, never persisted.
    """

    is_enabled: bool = True
    effective_scheduled_weekday: Optional[int] = None
    effective_title: str
    effective_description: str


# ======================================================================
# Presentation
# ======================================================================


class UpcomingPracticeResponse(BaseModel):
    """A weekly practice due later this week."""

    id: int
    title: str
    description: str
    weekday: int
    weekday_label: str
    days_until: int = Field(..., ge=1, le=6)
    when: str = Field(..., description="'Tomorrow' or 'In N days'")


class RulePracticeResponse(BaseModel):
    """A single line of the rule overview."""

    id: int
    key: str
    lane: Lane
    lane_label: str
    title: str
    description: str
    recurrence: Recurrence
    schedule_label: str
    scheduled_weekday: Optional[int]
    is_enabled: bool


class RuleSeasonResponse(BaseModel):
    season: Season
    label: str
    practices: list[RulePracticeResponse]


class RuleResponse(BaseModel):
    """Full rule set, grouped by liturgical season."""

    seasons: list[RuleSeasonResponse]

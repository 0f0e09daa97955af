"""SQLModel database models."""

from app.models.user import User
from app.models.practice import PracticeOverrideRecord, PracticeRecord
from app.models.completion import PracticeCompletion
from app.models.liturgical_day import LiturgicalDayRecord
from app.models.user_settings import UserSettings

__all__ = [
    "User",
    "PracticeRecord",
    "PracticeOverrideRecord",
    "PracticeCompletion",
    "LiturgicalDayRecord",
    "UserSettings",
]

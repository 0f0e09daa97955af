"""Database repositories."""

from app.db.repositories.user import UserRepository
from app.db.repositories.practice import PracticeRepository
from app.db.repositories.practice_override import PracticeOverrideRepository
from app.db.repositories.completion import CompletionRepository
from app.db.repositories.liturgical_day import LiturgicalDayRepository
from app.db.repositories.user_settings import UserSettingsRepository

__all__ = [
    "UserRepository",
    "PracticeRepository",
    "PracticeOverrideRepository",
    "CompletionRepository",
    "LiturgicalDayRepository",
    "UserSettingsRepository",
]

"""
Base database configuration.

Import all models here so Alembic can detect them for migrations.
"""

# Import all models for Alembic autogenerate
from app.models.user import User  # noqa: F401
from app.models.practice import PracticeRecord, PracticeOverrideRecord  # noqa: F401
from app.models.completion import PracticeCompletion  # noqa: F401
from app.models.liturgical_day import LiturgicalDayRecord  # noqa: F401
from app.models.user_settings import UserSettings  # noqa: F401

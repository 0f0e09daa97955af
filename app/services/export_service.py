"""
Export service.

Dumps everything stored for one user as a single JSON document.
"""

import datetime
from typing import Optional

from sqlmodel import Session

from app.core.config import settings
from app.db.repositories.completion import CompletionRepository
from app.db.repositories.practice import PracticeRepository
from app.db.repositories.practice_override import PracticeOverrideRepository
from app.db.repositories.user_settings import UserSettingsRepository
from app.models.user import User
from app.rule.clock import LocalClock
from app.schemas.export import ExportCompletion, ExportOverride, ExportResponse, ExportUser
from app.schemas.practice import Practice
from app.schemas.settings import UserSettingsExport


class ExportService:
    def __init__(self, session: Session, clock: Optional[LocalClock] = None):
        self.practice_repo = PracticeRepository(session)
        self.override_repo = PracticeOverrideRepository(session)
        self.completion_repo = CompletionRepository(session)
        self.settings_repo = UserSettingsRepository(session)
        self.clock = clock or LocalClock(settings.TIME_ZONE)

    def filename(self) -> str:
        return f"rule-of-life-export-{self.clock.today().iso}.json"

    def export(self, user: User) -> ExportResponse:
        user_settings = self.settings_repo.get_by_user(user.id)
        return ExportResponse(
            exported_at=self.clock.now().astimezone(datetime.timezone.utc),
            user=ExportUser(id=user.id, email=user.email),
            practices=[Practice.model_validate(p) for p in self.practice_repo.get_all()],
            overrides=[ExportOverride.model_validate(o) for o in self.override_repo.get_all_by_user(user.id)],
            settings=UserSettingsExport.model_validate(user_settings) if user_settings else None,
            completions=[ExportCompletion.model_validate(c) for c in self.completion_repo.get_all_by_user(user.id)],
        )

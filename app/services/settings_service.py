"""
Settings service.

Wake time and per-practice overrides.  Overrides are upserted by
(user_id, practice_id); only the fields present in the request are
written.
"""

import datetime
from typing import Optional

from fastapi import HTTPException, status
from sqlmodel import Session

from app.db.repositories.practice import PracticeRepository
from app.db.repositories.practice_override import PracticeOverrideRepository
from app.db.repositories.user_settings import UserSettingsRepository
from app.rule.ordering import sort_practices
from app.schemas.practice import LANE_LABEL, SEASON_LABEL, SEASON_ORDER
from app.schemas.settings import SettingsResponse, SettingsUpdate, WeeklyPracticeSetting
from app.services.practice_view import PracticeViewLoader


class SettingsService:
    """Service for user settings."""

    def __init__(self, session: Session):
        self.loader = PracticeViewLoader(session)
        self.practice_repo = PracticeRepository(session)
        self.override_repo = PracticeOverrideRepository(session)
        self.settings_repo = UserSettingsRepository(session)

    def get(self, user_id: int) -> SettingsResponse:
        weekly = sort_practices(self.loader.weekly(user_id))
        weekly.sort(key=lambda p: SEASON_ORDER.index(p.season))
        overrides = {o.practice_id: o for o in self.override_repo.get_all_by_user(user_id)}

        items = []
        for p in weekly:
            override = overrides.get(p.id)
            items.append(WeeklyPracticeSetting(
                id=p.id, title=p.effective_title, description=p.effective_description,
                season_label=SEASON_LABEL[p.season], lane_label=LANE_LABEL[p.lane],
                scheduled_weekday=p.effective_scheduled_weekday, is_enabled=p.is_enabled,
                custom_title=override.custom_title if override else None,
                custom_description=override.custom_description if override else None,
            ))
        return SettingsResponse(wake_time=self._wake_time(user_id), weekly_practices=items)

    def update(self, user_id: int, data: SettingsUpdate) -> SettingsResponse:
        requested = {o.practice_id for o in data.overrides}
        known = {p.id for p in self.practice_repo.get_by_ids(requested)}
        missing = sorted(requested - known)
        if missing:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND,
                                detail=f"Practice not found: {', '.join(str(m) for m in missing)}")

        for override in data.overrides:
            values = override.model_dump(exclude_unset=True, exclude={"practice_id"})
            self.override_repo.upsert(user_id, override.practice_id, values)

        if data.wake_time is not None:
            wake_time = datetime.time.fromisoformat(data.wake_time) if data.wake_time else None
            self.settings_repo.upsert_wake_time(user_id, wake_time)

        return self.get(user_id)

    def _wake_time(self, user_id: int) -> Optional[str]:
        row = self.settings_repo.get_by_user(user_id)
        if row is None or row.wake_time is None:
            return None
        return row.wake_time.strftime("%H:%M")

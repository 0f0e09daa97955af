"""
Today view service.

Builds the checklist for the caller's local today::

    clock -> liturgical day -> season catalog -> overrides -> due today
          -> display order -> lane groups (+ completion flags)

plus the weekly look-ahead and the verse of the day.  During Holy Week
the Lent catalog is used.
"""

from typing import Optional, Sequence

from sqlmodel import Session

from app.core.config import settings
from app.db.repositories.completion import CompletionRepository
from app.db.repositories.user_settings import UserSettingsRepository
from app.rule.clock import LocalClock
from app.rule.liturgical import SeasonResolver
from app.rule.ordering import sort_practices
from app.rule.scheduling import due_today, upcoming_weekly
from app.rule.verses import DEFAULT_VERSES, DailyVerse, select_verse
from app.schemas.practice import LANE_LABEL, LANE_ORDER, SEASON_LABEL, EffectivePractice, Season, \
    UpcomingPracticeResponse
from app.schemas.today import ChecklistGroup, ChecklistItem, TodayResponse, VerseResponse
from app.services.liturgical_service import build_season_resolver
from app.services.practice_view import PracticeViewLoader

WAKE_TIME_PRACTICE_KEY = "easter_fixed_wake_time"


def practice_season_for(season: Season) -> Season:
    """Catalog season served for a liturgical season."""
    if season == Season.HOLY_WEEK:
        return Season.LENT
    return season


class TodayService:
    """Service for the today checklist."""

    def __init__(self, session: Session, clock: Optional[LocalClock] = None,
                 resolver: Optional[SeasonResolver] = None, verses: Sequence[DailyVerse] = DEFAULT_VERSES,
                 upcoming_limit: Optional[int] = None):
        self.loader = PracticeViewLoader(session)
        self.completion_repo = CompletionRepository(session)
        self.settings_repo = UserSettingsRepository(session)
        self.clock = clock or LocalClock(settings.TIME_ZONE)
        self.resolver = resolver or build_season_resolver(session)
        self.verses = verses
        self.upcoming_limit = settings.UPCOMING_WEEKLY_LIMIT if upcoming_limit is None else upcoming_limit

    def get_today(self, user_id: int) -> TodayResponse:
        today = self.clock.today()
        liturgical = self.resolver.resolve(today.date_local)

        effective = self.loader.for_season(user_id, practice_season_for(liturgical.season).value)
        due = sort_practices(due_today(effective, today.weekday))

        completions = self.completion_repo.get_for_date(user_id, today.date_local, [p.id for p in due])
        completed_ids = {c.practice_id for c in completions}
        wake_time = self._wake_time(user_id)

        groups = []
        for lane in LANE_ORDER:
            items = [
                ChecklistItem(id=p.id, title=p.effective_title, description=self._description(p, wake_time),
                              completed=p.id in completed_ids)
                for p in due if p.lane == lane
            ]
            if items:
                groups.append(ChecklistGroup(lane=lane, label=LANE_LABEL[lane], items=items))

        upcoming = [
            UpcomingPracticeResponse(id=u.practice.id, title=u.practice.effective_title,
                                     description=u.practice.effective_description, weekday=u.weekday,
                                     weekday_label=u.weekday_label, days_until=u.days_until, when=u.when)
            for u in upcoming_weekly(effective, today.weekday, self.upcoming_limit)
        ]

        verse = None
        if self.verses:
            picked, idx = select_verse(today.date_local, self.verses)
            verse = VerseResponse(reference=picked.reference, text=picked.text, index=idx)

        return TodayResponse(date_local=today.date_local, weekday=today.weekday, season=liturgical.season,
                             season_label=SEASON_LABEL[liturgical.season],
                             celebration_name=liturgical.celebration_name, groups=groups, upcoming=upcoming,
                             verse=verse)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _wake_time(self, user_id: int) -> Optional[str]:
        row = self.settings_repo.get_by_user(user_id)
        if row is None or row.wake_time is None:
            return None
        return row.wake_time.strftime("%H:%M")

    @staticmethod
    def _description(practice: EffectivePractice, wake_time: Optional[str]) -> str:
        if practice.key == WAKE_TIME_PRACTICE_KEY and wake_time:
            return f"Wake time: {wake_time}"
        return practice.effective_description

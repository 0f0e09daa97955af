"""
Rule overview service.

The user's whole rule, every active practice resolved and grouped by
season.
"""

from sqlmodel import Session

from app.rule.ordering import sort_practices
from app.schemas.practice import LANE_LABEL, SEASON_LABEL, SEASON_ORDER, EffectivePractice, Recurrence, \
    RulePracticeResponse, RuleResponse, RuleSeasonResponse, weekday_label
from app.services.practice_view import PracticeViewLoader


def schedule_label(practice: EffectivePractice) -> str:
    if practice.recurrence == Recurrence.DAILY:
        return "Daily"
    if practice.effective_scheduled_weekday is None:
        return "Weekly · unscheduled"
    return f"Weekly · {weekday_label(practice.effective_scheduled_weekday)}"


class RuleService:
    def __init__(self, session: Session):
        self.loader = PracticeViewLoader(session)

    def get_rule(self, user_id: int) -> RuleResponse:
        effective = sort_practices(self.loader.all_active(user_id))

        seasons = []
        for season in SEASON_ORDER:
            practices = [p for p in effective if p.season == season]
            if not practices:
                continue
            seasons.append(RuleSeasonResponse(season=season, label=SEASON_LABEL[season], practices=[
                RulePracticeResponse(id=p.id, key=p.key, lane=p.lane, lane_label=LANE_LABEL[p.lane],
                                     title=p.effective_title, description=p.effective_description,
                                     recurrence=p.recurrence, schedule_label=schedule_label(p),
                                     scheduled_weekday=p.effective_scheduled_weekday, is_enabled=p.is_enabled)
                for p in practices
            ]))
        return RuleResponse(seasons=seasons)

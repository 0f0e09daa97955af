"""
History service.

Month calendar of completions with a drill-down on one selected date.
"""

from collections import defaultdict
from typing import Optional

from sqlmodel import Session

from app.core.config import settings
from app.db.repositories.completion import CompletionRepository
from app.rule import history
from app.rule.clock import LocalClock
from app.schemas.completion import HistoryCell, HistoryItem, HistoryMonthResponse
from app.schemas.practice import LANE_LABEL, WEEKDAY_SHORT_NAMES
from app.services.practice_view import PracticeViewLoader


class HistoryService:
    def __init__(self, session: Session, clock: Optional[LocalClock] = None):
        self.loader = PracticeViewLoader(session)
        self.completion_repo = CompletionRepository(session)
        self.clock = clock or LocalClock(settings.TIME_ZONE)

    def get_month(self, user_id: int, month: Optional[str] = None,
                  selected: Optional[str] = None) -> HistoryMonthResponse:
        """Calendar for *month* (``YYYY-MM``); invalid or missing means the current month."""
        today = self.clock.today().date_local
        month = history.resolve_month(month, today)
        bounds = history.month_bounds(month)
        selected_date = history.selected_date_in_month(selected, month)

        by_date = defaultdict(list)
        for c in self.completion_repo.get_by_user_date_range(user_id, bounds.start, bounds.end):
            by_date[c.date_local].append(c)

        cells = [
            HistoryCell(date=day, day=day.day if day else None,
                        completed_count=len(by_date.get(day, [])) if day else 0,
                        is_today=day == today, is_selected=day is not None and day == selected_date)
            for day in history.month_cells(month)
        ]

        items = []
        if selected_date is not None:
            effective = {p.id: p for p in self.loader.all(user_id)}
            for c in by_date.get(selected_date, []):
                p = effective.get(c.practice_id)
                items.append(HistoryItem(practice_id=c.practice_id,
                                         title=p.effective_title if p else "Unknown practice",
                                         lane_label=LANE_LABEL[p.lane] if p else "",
                                         completed_at=c.completed_at))

        return HistoryMonthResponse(month=month, title=history.month_title(month),
                                    prev_month=history.add_months(month, -1),
                                    next_month=history.add_months(month, 1),
                                    weekday_headers=list(WEEKDAY_SHORT_NAMES), cells=cells,
                                    selected_date=selected_date, selected_items=items)

"""
History endpoint.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlmodel import Session

from app.api.dependencies import get_clock, get_current_user
from app.db.session import get_db
from app.models.user import User
from app.rule.clock import LocalClock
from app.schemas.completion import HistoryMonthResponse
from app.services.history_service import HistoryService

router = APIRouter()


@router.get("", summary="Completions for one month.", response_model=HistoryMonthResponse)
def get_history(month: Optional[str] = Query(None, description="YYYY-MM, defaults to the current month"),
                date: Optional[str] = Query(None, description="YYYY-MM-DD to list completions for"),
                db: Session = Depends(get_db), user: User = Depends(get_current_user),
                clock: LocalClock = Depends(get_clock), ):
    return HistoryService(db, clock=clock).get_month(user.id, month, date)

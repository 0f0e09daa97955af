"""
Today endpoint.
"""

from fastapi import APIRouter, Depends
from sqlmodel import Session

from app.api.dependencies import get_clock, get_current_user, get_verses
from app.db.session import get_db
from app.models.user import User
from app.rule.clock import LocalClock
from app.schemas.today import TodayResponse
from app.services.today_service import TodayService

router = APIRouter()


@router.get("", summary="Practices due today, grouped by lane.", response_model=TodayResponse)
def get_today(db: Session = Depends(get_db), user: User = Depends(get_current_user),
              clock: LocalClock = Depends(get_clock), verses=Depends(get_verses), ):
    service = TodayService(db, clock=clock, verses=verses)
    return service.get_today(user.id)

"""
Rule overview endpoint.
"""

from fastapi import APIRouter, Depends
from sqlmodel import Session

from app.api.dependencies import get_current_user
from app.db.session import get_db
from app.models.user import User
from app.schemas.practice import RuleResponse
from app.services.rule_service import RuleService

router = APIRouter()


@router.get("", summary="Full rule set, organized by liturgical season.", response_model=RuleResponse)
def get_rule(db: Session = Depends(get_db), user: User = Depends(get_current_user), ):
    return RuleService(db).get_rule(user.id)

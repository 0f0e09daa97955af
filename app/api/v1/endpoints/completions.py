"""
Completion endpoints.

The toggle always uses the server's local today; the request carries no
date.
"""

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, status
from sqlmodel import Session

from app.api.dependencies import get_clock, get_optional_user
from app.db.session import get_db
from app.models.user import User
from app.rule.clock import LocalClock
from app.rule.completion import ToggleError
from app.schemas.completion import ToggleResponse
from app.services.completion_service import CompletionService

router = APIRouter()

_ERROR_STATUS: dict[ToggleError, int] = {
    ToggleError.UNAUTHENTICATED: status.HTTP_401_UNAUTHORIZED,
    ToggleError.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ToggleError.DISABLED: status.HTTP_403_FORBIDDEN,
    ToggleError.NOT_SCHEDULED_TODAY: status.HTTP_409_CONFLICT,
}


@router.post("/{practice_id}/toggle", summary="Mark a practice done or not done for today.",
             response_model=ToggleResponse, )
def toggle_completion(practice_id: int, db: Session = Depends(get_db),
                      user: Optional[User] = Depends(get_optional_user),
                      clock: LocalClock = Depends(get_clock), ):
    service = CompletionService(db, clock=clock)
    result, date_local = service.toggle(user.id if user else None, practice_id)
    if not result.ok:
        headers = { "WWW-Authenticate": "Bearer" } if result.error == ToggleError.UNAUTHENTICATED else None
        raise HTTPException(status_code=_ERROR_STATUS[result.error],
                            detail={ "error": result.error.value, "message": result.message },
                            headers=headers, )
    return ToggleResponse(practice_id=practice_id, date_local=date_local, completed=result.completed)
